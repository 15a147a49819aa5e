"""Domain error hierarchy for clean exception handling."""
from __future__ import annotations

from enum import Enum


class DomainError(Exception):
    """Base for all domain errors."""


class ValidationError(DomainError):
    """Invalid input or state."""


class ConflictError(DomainError):
    """Resource conflict (e.g., duplicate relationship)."""


class ProviderError(DomainError):
    """Resolution provider or persistence backend failed."""


class ValidationFailure(str, Enum):
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    FORMAT_MISMATCH = "format_mismatch"


class InvalidNameError(ValidationError):
    """Name failed the strict lexical check."""

    def __init__(self, message: str, failure: ValidationFailure | None = None) -> None:
        super().__init__(message)
        self.failure = failure


class MissingFieldError(ValidationError):
    """Source or target identifier missing."""


class SelfLoopError(ValidationError):
    """Source and target identify the same name."""


class MissingSelectorError(ValidationError):
    """Delete called without an id or a complete source/target pair."""


class DuplicateEdgeError(ConflictError):
    """Ordered (source, target) pair already stored."""
