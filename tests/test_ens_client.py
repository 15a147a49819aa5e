"""Tests for the ENS resolution client."""
from __future__ import annotations

import asyncio

import pytest
from unittest.mock import AsyncMock

from ensgraph.domain.entities import TextRecords
from ensgraph.domain.errors import InvalidNameError, ProviderError
from ensgraph.infrastructure.ens_client import (
    NOT_FOUND_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    EnsResolutionClient,
)

VITALIK_ADDRESS = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"


def _raise(message: str):
    def normalizer(name: str) -> str:
        raise ValueError(message)
    return normalizer


class TestResolveName:
    """Test address resolution outcomes."""

    @pytest.mark.asyncio
    async def test_resolves_registered_name(self, ens_client, mock_ens):
        """A registered name yields its address under the normalized name."""
        mock_ens.address.return_value = VITALIK_ADDRESS

        result = await ens_client.resolve_name("vitalik.eth")

        assert result.address == VITALIK_ADDRESS
        assert result.ens_name == "vitalik.eth"
        assert result.is_valid is True
        assert result.error is None
        mock_ens.address.assert_awaited_once_with("vitalik.eth")

    @pytest.mark.asyncio
    async def test_normalizes_before_lookup(self, ens_client, mock_ens):
        """Lookups use the canonical form of the name."""
        mock_ens.address.return_value = VITALIK_ADDRESS

        result = await ens_client.resolve_name("VITALIK.ETH")

        mock_ens.address.assert_awaited_once_with("vitalik.eth")
        assert result.ens_name == "vitalik.eth"

    @pytest.mark.asyncio
    async def test_uses_provider_normalization_by_default(self, mock_ens):
        """Default normalizer is the provider's ENSIP-15 routine."""
        mock_ens.address.return_value = VITALIK_ADDRESS
        client = EnsResolutionClient(mock_ens)

        result = await client.resolve_name("Vitalik.ETH")

        assert result.ens_name == "vitalik.eth"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("empty", [None, ""])
    async def test_unregistered_name_is_not_an_error(self, ens_client, mock_ens, empty):
        """An empty lookup is reported as not found under the normalized name."""
        mock_ens.address.return_value = empty

        result = await ens_client.resolve_name("Unregistered.eth")

        assert result.address is None
        assert result.ens_name == "unregistered.eth"
        assert result.is_valid is False
        assert result.error == NOT_FOUND_MESSAGE

    @pytest.mark.asyncio
    async def test_provider_failure_keeps_message(self, ens_client, mock_ens):
        """Network errors surface verbatim."""
        mock_ens.address.side_effect = ConnectionError("Network request failed")

        result = await ens_client.resolve_name("vitalik.eth")

        assert result.address is None
        assert result.ens_name == "vitalik.eth"
        assert result.is_valid is False
        assert result.error == "Network request failed"

    @pytest.mark.asyncio
    async def test_provider_failure_without_message(self, ens_client, mock_ens):
        """Errors without a message fall back to a fixed string."""
        mock_ens.address.side_effect = RuntimeError()

        result = await ens_client.resolve_name("test.eth")

        assert result.error == UNKNOWN_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_normalization_failure_keeps_original_name(self, mock_ens):
        """A name that cannot be normalized is reported as typed."""
        client = EnsResolutionClient(mock_ens, normalizer=_raise("Invalid ENS name format"))

        result = await client.resolve_name("Invalid\u0000Name.eth")

        assert result.address is None
        assert result.ens_name == "Invalid\u0000Name.eth"
        assert result.is_valid is False
        assert result.error == "Invalid ENS name format"
        mock_ens.address.assert_not_awaited()


class TestLowLevelLookups:
    """Test the individual provider calls."""

    def test_normalize_wraps_failures(self, mock_ens):
        client = EnsResolutionClient(mock_ens, normalizer=_raise("bad label"))
        with pytest.raises(InvalidNameError, match="bad label"):
            client.normalize("x.eth")

    @pytest.mark.asyncio
    async def test_resolve_address_wraps_failures(self, ens_client, mock_ens):
        mock_ens.address.side_effect = TimeoutError("Request timeout")
        with pytest.raises(ProviderError, match="Request timeout"):
            await ens_client.resolve_address("vitalik.eth")

    @pytest.mark.asyncio
    async def test_text_attribute_empty_is_none(self, ens_client, mock_ens):
        mock_ens.get_text.return_value = ""
        assert await ens_client.resolve_text_attribute("vitalik.eth", "url") is None

    @pytest.mark.asyncio
    async def test_avatar_reads_avatar_record(self, ens_client, mock_ens):
        mock_ens.get_text.return_value = "ipfs://avatar"
        assert await ens_client.resolve_avatar("vitalik.eth") == "ipfs://avatar"
        mock_ens.get_text.assert_awaited_once_with("vitalik.eth", "avatar")


class TestResolveTextRecords:
    """Test the concurrent text record fan-out."""

    @pytest.mark.asyncio
    async def test_fetches_all_records(self, ens_client, mock_ens):
        """Each profile field is read from its text record key."""
        values = {
            "avatar": "https://example.com/a.png",
            "description": "hello",
            "url": "https://vitalik.ca",
            "com.twitter": "VitalikButerin",
            "com.github": "vbuterin",
            "email": "v@example.com",
        }
        mock_ens.get_text.side_effect = lambda name, key: values[key]

        records = await ens_client.resolve_text_records("vitalik.eth")

        assert records == TextRecords(
            avatar="https://example.com/a.png",
            description="hello",
            url="https://vitalik.ca",
            twitter="VitalikButerin",
            github="vbuterin",
            email="v@example.com",
        )
        assert mock_ens.get_text.await_count == 6

    @pytest.mark.asyncio
    async def test_failures_are_isolated_per_field(self, ens_client, mock_ens):
        """One failing record becomes None without affecting the others."""
        async def get_text(name, key):
            if key == "com.twitter":
                raise ConnectionError("boom")
            return f"{key}-value"
        mock_ens.get_text = AsyncMock(side_effect=get_text)

        records = await ens_client.resolve_text_records("vitalik.eth")

        assert records.twitter is None
        assert records.github == "com.github-value"
        assert records.avatar == "avatar-value"
        assert records.email == "email-value"

    @pytest.mark.asyncio
    async def test_lookups_run_concurrently(self, ens_client, mock_ens):
        """All six lookups are in flight at the same time."""
        in_flight = 0
        peak = 0

        async def get_text(name, key):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return None
        mock_ens.get_text = AsyncMock(side_effect=get_text)

        records = await ens_client.resolve_text_records("vitalik.eth")

        assert peak == 6
        assert records == TextRecords()
