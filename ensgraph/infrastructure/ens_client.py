"""Adapter over the ENS provider (web3.py AsyncENS).

Keeps provider-specific normalization and error shapes out of the
application layer: normalization failures surface as InvalidNameError,
lookup failures as ProviderError, and "not registered" as a plain None.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from ens import AsyncENS
from ens.utils import normalize_name
from web3 import AsyncHTTPProvider, AsyncWeb3

from ensgraph.domain.entities import TEXT_RECORD_KEYS, ResolutionResult, TextRecords
from ensgraph.domain.errors import DomainError, InvalidNameError, ProviderError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "ENS name not found or not registered"
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


class EnsResolutionClient:
    """Resolves normalized ENS names to addresses and text records."""

    def __init__(self, ens: AsyncENS, normalizer: Callable[[str], str] = normalize_name) -> None:
        self._ens = ens
        self._normalizer = normalizer

    @classmethod
    def from_rpc_url(cls, rpc_url: str) -> EnsResolutionClient:
        w3 = AsyncWeb3(AsyncHTTPProvider(rpc_url))
        return cls(AsyncENS.from_web3(w3))

    def normalize(self, name: str) -> str:
        """Canonicalize ``name`` (case folding, ENSIP-15 character rules)."""
        try:
            return self._normalizer(name)
        except Exception as exc:
            raise InvalidNameError(str(exc) or "Invalid ENS name") from exc

    async def resolve_address(self, normalized_name: str) -> Optional[str]:
        """Return the address, or None when the name is not registered."""
        try:
            address = await self._ens.address(normalized_name)
        except Exception as exc:
            raise ProviderError(str(exc)) from exc
        return str(address) if address else None

    async def resolve_text_attribute(self, normalized_name: str, key: str) -> Optional[str]:
        try:
            value = await self._ens.get_text(normalized_name, key)
        except Exception as exc:
            raise ProviderError(str(exc)) from exc
        return value or None

    async def resolve_avatar(self, normalized_name: str) -> Optional[str]:
        return await self.resolve_text_attribute(normalized_name, TEXT_RECORD_KEYS["avatar"])

    async def _best_effort(self, normalized_name: str, field_name: str) -> Optional[str]:
        try:
            if field_name == "avatar":
                return await self.resolve_avatar(normalized_name)
            return await self.resolve_text_attribute(normalized_name, TEXT_RECORD_KEYS[field_name])
        except Exception as exc:
            logger.debug(f"Text record '{field_name}' unavailable for {normalized_name}: {exc}")
            return None

    async def resolve_text_records(self, normalized_name: str) -> TextRecords:
        """Fetch every profile text record concurrently; failed lookups become None."""
        fields = list(TEXT_RECORD_KEYS)
        values = await asyncio.gather(
            *(self._best_effort(normalized_name, field_name) for field_name in fields)
        )
        return TextRecords(**dict(zip(fields, values)))

    async def resolve_name(self, name: str) -> ResolutionResult:
        """Normalize and look up ``name``, folding every failure into the result.

        A name that cannot be normalized is reported under the name as typed;
        every other outcome is reported under the normalized name.
        """
        try:
            normalized = self.normalize(name)
            address = await self.resolve_address(normalized)
        except DomainError as exc:
            logger.warning(f"Resolution of {name!r} failed: {exc}")
            return ResolutionResult(
                address=None,
                ens_name=name,
                is_valid=False,
                error=str(exc) or UNKNOWN_ERROR_MESSAGE,
            )

        if not address:
            logger.info(f"{normalized} is not registered")
            return ResolutionResult(
                address=None,
                ens_name=normalized,
                is_valid=False,
                error=NOT_FOUND_MESSAGE,
            )

        return ResolutionResult(address=address, ens_name=normalized, is_valid=True)
