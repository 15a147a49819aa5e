"""Internal domain entities: frozen dataclasses for resolution, TypedDicts at storage boundaries."""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, NotRequired, Optional, TypedDict

# text record keys as stored on-chain, keyed by the profile field they fill
TEXT_RECORD_KEYS: Dict[str, str] = {
    "avatar": "avatar",
    "description": "description",
    "url": "url",
    "twitter": "com.twitter",
    "github": "com.github",
    "email": "email",
}


@dataclass(frozen=True)
class TextRecords:
    avatar: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    twitter: Optional[str] = None
    github: Optional[str] = None
    email: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


EMPTY_TEXT_RECORDS = TextRecords()


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of a single address lookup, before text records are attached."""
    address: Optional[str]
    ens_name: str
    is_valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class ProfileResult:
    """Immutable profile assembled for one resolution attempt.

    ``address`` is None exactly when ``is_valid`` is False.
    """
    address: Optional[str]
    ens_name: str
    is_valid: bool
    error: Optional[str] = None
    text_records: TextRecords = field(default_factory=TextRecords)

    def __post_init__(self):
        if self.is_valid != (self.address is not None):
            raise ValueError("address must be set if and only if the profile is valid")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "ensName": self.ens_name,
            "isValid": self.is_valid,
            "error": self.error,
            "textRecords": self.text_records.to_dict(),
        }


class RelationshipEntity(TypedDict):
    id: str
    source_ens: str
    target_ens: str
    created_at: str


class GraphNode(TypedDict):
    id: str


class GraphLink(TypedDict):
    source: str
    target: str
    id: NotRequired[str]


class GraphData(TypedDict):
    nodes: List[GraphNode]
    links: List[GraphLink]
