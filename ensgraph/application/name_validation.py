"""Lexical validation of ENS names, run before any network call."""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional

from ensgraph.domain.errors import InvalidNameError, ValidationFailure

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 255
PRIMARY_TLD = "eth"
LIKELY_TLDS = ("eth", "xyz", "luxe", "kred", "art", "club")

MESSAGES = {
    ValidationFailure.TOO_SHORT: f"ENS name must be at least {MIN_NAME_LENGTH} characters",
    ValidationFailure.TOO_LONG: "ENS name is too long",
    ValidationFailure.FORMAT_MISMATCH: (
        "ENS name must end with .{tld} and contain only letters, numbers, and hyphens"
    ),
}


@dataclass(frozen=True)
class NameValidation:
    is_valid: bool
    error: Optional[str] = None
    failure: Optional[ValidationFailure] = None

    def to_dict(self) -> dict:
        data = {"isValid": self.is_valid}
        if self.error is not None:
            data["error"] = self.error
        return data


@lru_cache(maxsize=None)
def _pattern(tlds: tuple[str, ...]) -> re.Pattern:
    suffix = "|".join(re.escape(tld) for tld in tlds)
    return re.compile(rf"[a-z0-9-]+\.(?:{suffix})", re.IGNORECASE | re.ASCII)


def validate_ens_name(name: str, tld: str = PRIMARY_TLD) -> NameValidation:
    """Check ``name`` against the strict grammar ``[a-z0-9-]+.<tld>``.

    Checks run in order (length floor, length ceiling, format) and the first
    failure wins. No trimming is applied, so surrounding whitespace fails.
    """
    if len(name) < MIN_NAME_LENGTH:
        failure = ValidationFailure.TOO_SHORT
    elif len(name) > MAX_NAME_LENGTH:
        failure = ValidationFailure.TOO_LONG
    elif not _pattern((tld,)).fullmatch(name):
        failure = ValidationFailure.FORMAT_MISMATCH
    else:
        return NameValidation(is_valid=True)
    return NameValidation(
        is_valid=False,
        error=MESSAGES[failure].format(tld=tld),
        failure=failure,
    )


def require_valid_ens_name(name: str, tld: str = PRIMARY_TLD) -> str:
    """Return ``name`` unchanged or raise InvalidNameError."""
    validation = validate_ens_name(name, tld)
    if not validation.is_valid:
        raise InvalidNameError(validation.error or "Invalid ENS name", validation.failure)
    return name


def is_likely_ens_name(name: str, tlds: Iterable[str] = LIKELY_TLDS) -> bool:
    """Advisory check accepting any of ``tlds``; never a substitute for validate_ens_name."""
    return _pattern(tuple(tlds)).fullmatch(name) is not None
