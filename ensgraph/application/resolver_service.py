"""Resolution orchestrator: validation, address lookup and profile assembly."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ensgraph.application.name_validation import NameValidation, validate_ens_name
from ensgraph.domain.entities import EMPTY_TEXT_RECORDS, ProfileResult
from ensgraph.domain.events import DomainEventPublisher, NameResolved, event_publisher
from ensgraph.infrastructure.ens_client import EnsResolutionClient

logger = logging.getLogger(__name__)

INVALID_NAME_MESSAGE = "Invalid ENS name"
UNRESOLVED_MESSAGE = "Failed to resolve ENS name"
RESOLUTION_FAILED_MESSAGE = "Resolution failed"


class ResolverStatus(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass(frozen=True)
class ResolverState:
    """Snapshot of a resolver; replaced wholesale on every transition."""
    status: ResolverStatus = ResolverStatus.IDLE
    is_loading: bool = False
    result: Optional[ProfileResult] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "isLoading": self.is_loading,
            "result": self.result.to_dict() if self.result else None,
            "error": self.error,
        }


class NameResolver:
    """Single-entry state machine around one EnsResolutionClient.

    Overlapping ``resolve`` calls follow latest-call-wins: an older call runs
    to completion but its outcome is discarded once a newer call (or
    ``reset``) has started, so the published state always belongs to the
    most recent request.
    """

    def __init__(
        self,
        client: EnsResolutionClient,
        validator: Callable[[str], NameValidation] = validate_ens_name,
        publisher: DomainEventPublisher = event_publisher,
    ) -> None:
        self._client = client
        self._validator = validator
        self._publisher = publisher
        self._state = ResolverState()
        self._generation = 0
        self._listeners: List[Callable[[ResolverState], None]] = []

    @property
    def state(self) -> ResolverState:
        return self._state

    def subscribe(self, listener: Callable[[ResolverState], None]) -> None:
        """Call ``listener`` with every new snapshot."""
        self._listeners.append(listener)

    def _publish(self, state: ResolverState) -> ResolverState:
        self._state = state
        for listener in self._listeners:
            listener(state)
        return state

    def _settle(self, generation: int, state: ResolverState) -> ResolverState:
        if generation != self._generation:
            logger.debug("Discarding outcome of a superseded resolution")
            return self._state
        if state.result is not None:
            self._publisher.publish(
                NameResolved(
                    aggregate_id=state.result.ens_name,
                    address=state.result.address,
                    is_valid=state.result.is_valid,
                )
            )
        return self._publish(state)

    async def resolve(self, raw_name: str) -> ResolverState:
        """Resolve ``raw_name`` and return the terminal snapshot."""
        self._generation += 1
        generation = self._generation

        # stale result and error are cleared before any new work
        self._publish(ResolverState(status=ResolverStatus.VALIDATING))

        validation = self._validator(raw_name)
        if not validation.is_valid:
            return self._publish(
                ResolverState(
                    status=ResolverStatus.INVALID,
                    error=validation.error or INVALID_NAME_MESSAGE,
                )
            )

        self._publish(ResolverState(status=ResolverStatus.RESOLVING, is_loading=True))
        logger.info(f"Resolving {raw_name}")

        try:
            resolution = await self._client.resolve_name(raw_name)
            text_records = EMPTY_TEXT_RECORDS
            if resolution.is_valid:
                text_records = await self._client.resolve_text_records(resolution.ens_name)
        except Exception as exc:
            logger.warning(f"Resolution of {raw_name} raised: {exc}")
            return self._settle(
                generation,
                ResolverState(
                    status=ResolverStatus.FAILED,
                    error=str(exc) or RESOLUTION_FAILED_MESSAGE,
                ),
            )

        profile = ProfileResult(
            address=resolution.address,
            ens_name=resolution.ens_name,
            is_valid=resolution.is_valid,
            error=resolution.error,
            text_records=text_records,
        )
        if profile.is_valid:
            return self._settle(generation, ResolverState(status=ResolverStatus.RESOLVED, result=profile))
        return self._settle(
            generation,
            ResolverState(
                status=ResolverStatus.FAILED,
                result=profile,
                error=resolution.error or UNRESOLVED_MESSAGE,
            ),
        )

    def reset(self) -> ResolverState:
        """Return to idle; any in-flight resolution is discarded when it lands."""
        self._generation += 1
        return self._publish(ResolverState())
