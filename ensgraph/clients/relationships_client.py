"""HTTP client for the relationships collection endpoint.

Keeps a local copy of the relationship list that is updated only after the
server confirms an add or delete, and never raises to its caller: every
failure comes back as an ``OperationResult`` carrying a message and the
``DomainError`` subclass that describes it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Type

import httpx

from ensgraph.application.graph_projection import project
from ensgraph.application.name_validation import validate_ens_name
from ensgraph.application.relationship_service import normalize_identifier, normalize_pair
from ensgraph.domain.entities import GraphData, RelationshipEntity
from ensgraph.domain.errors import (
    DomainError,
    DuplicateEdgeError,
    InvalidNameError,
    MissingSelectorError,
    ProviderError,
    ValidationError,
)

logger = logging.getLogger(__name__)

COLLECTION_PATH = "/api/relationships"
NOT_CONNECTED_MESSAGE = "RelationshipStoreClient is not connected"


@dataclass(frozen=True)
class OperationResult:
    success: bool
    error: Optional[str] = None
    status_code: Optional[int] = None
    relationship: Optional[RelationshipEntity] = None
    error_type: Optional[Type[DomainError]] = None


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        body: Any = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return fallback


def _error_type(status_code: int) -> Type[DomainError]:
    """Map a failed response status to the domain error it reports."""
    if status_code == 409:
        return DuplicateEdgeError
    if status_code == 400:
        return ValidationError
    return ProviderError


class RelationshipStoreClient:
    """Relationship store reached over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url: str = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._relationships: List[RelationshipEntity] = []
        self.is_loading: bool = False
        self.error: Optional[str] = None

    async def connect(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        )

    async def disconnect(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> RelationshipStoreClient:
        await self.connect()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.disconnect()

    @property
    def relationships(self) -> List[RelationshipEntity]:
        return list(self._relationships)

    def _fail(
        self,
        message: str,
        error_type: Type[DomainError],
        status_code: Optional[int] = None,
    ) -> OperationResult:
        logger.warning(f"Relationship store request failed: {message}")
        self.error = message
        return OperationResult(
            success=False, error=message, status_code=status_code, error_type=error_type
        )

    async def refresh(self) -> OperationResult:
        """Reload the full relationship list (newest first)."""
        if not self._client:
            return self._fail(NOT_CONNECTED_MESSAGE, ProviderError)
        self.is_loading = True
        self.error = None
        try:
            response = await self._client.get(COLLECTION_PATH)
            if response.status_code != 200:
                return self._fail(
                    _error_message(response, "Failed to fetch"),
                    _error_type(response.status_code),
                    response.status_code,
                )
            self._relationships = list(response.json())
            return OperationResult(success=True, status_code=response.status_code)
        except (httpx.HTTPError, ValueError) as exc:
            return self._fail(str(exc) or "Failed to load", ProviderError)
        finally:
            self.is_loading = False

    async def list(self) -> List[RelationshipEntity]:
        await self.refresh()
        return self.relationships

    async def add(self, source: str, target: str) -> OperationResult:
        try:
            source, target = normalize_pair(source, target)
        except ValidationError as exc:
            return OperationResult(success=False, error=str(exc), error_type=type(exc))
        for name in (source, target):
            validation = validate_ens_name(name)
            if not validation.is_valid:
                return OperationResult(
                    success=False, error=validation.error, error_type=InvalidNameError
                )

        if not self._client:
            return self._fail(NOT_CONNECTED_MESSAGE, ProviderError)
        try:
            response = await self._client.post(
                COLLECTION_PATH, json={"source_ens": source, "target_ens": target}
            )
            if response.status_code not in (200, 201):
                return OperationResult(
                    success=False,
                    error=_error_message(response, "Failed to add"),
                    status_code=response.status_code,
                    error_type=_error_type(response.status_code),
                )
            relationship: RelationshipEntity = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            return OperationResult(success=False, error=str(exc) or "Failed", error_type=ProviderError)

        self._relationships.insert(0, relationship)
        return OperationResult(success=True, status_code=response.status_code, relationship=relationship)

    async def delete(
        self,
        relationship_id: Optional[str] = None,
        source: Optional[str] = None,
        target: Optional[str] = None,
    ) -> OperationResult:
        """Delete by id, or by source/target pair when no id is given."""
        if relationship_id:
            params = {"id": relationship_id}
        elif source and target:
            source, target = normalize_identifier(source), normalize_identifier(target)
            params = {"source": source, "target": target}
        else:
            return OperationResult(
                success=False,
                error="Provide id OR (source and target)",
                error_type=MissingSelectorError,
            )

        if not self._client:
            return self._fail(NOT_CONNECTED_MESSAGE, ProviderError)
        try:
            response = await self._client.delete(COLLECTION_PATH, params=params)
        except httpx.HTTPError as exc:
            return OperationResult(success=False, error=str(exc) or "Failed", error_type=ProviderError)
        if response.status_code != 200:
            return OperationResult(
                success=False,
                error=_error_message(response, "Failed to delete"),
                status_code=response.status_code,
                error_type=_error_type(response.status_code),
            )

        if relationship_id:
            self._relationships = [r for r in self._relationships if r["id"] != relationship_id]
        else:
            self._relationships = [
                r for r in self._relationships
                if (r["source_ens"], r["target_ens"]) != (source, target)
            ]
        return OperationResult(success=True, status_code=response.status_code)

    def to_graph_data(self) -> GraphData:
        return project(self._relationships)
