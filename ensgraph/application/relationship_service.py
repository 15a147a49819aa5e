"""Service enforcing relationship rules before they reach the store."""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ensgraph.application.name_validation import PRIMARY_TLD, require_valid_ens_name
from ensgraph.db.repositories.relationships import RelationshipRepository
from ensgraph.domain.entities import GraphData, RelationshipEntity
from ensgraph.domain.errors import MissingFieldError, MissingSelectorError, SelfLoopError
from ensgraph.domain.events import (
    DomainEventPublisher,
    RelationshipCreated,
    RelationshipDeleted,
    event_publisher,
)
from ensgraph.application.graph_projection import project

logger = logging.getLogger(__name__)


def normalize_identifier(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def normalize_pair(source: Optional[str], target: Optional[str]) -> Tuple[str, str]:
    """Lowercase and trim both names, rejecting empty values and self-loops."""
    if not source or not target:
        raise MissingFieldError("source_ens and target_ens are required")
    source, target = normalize_identifier(source), normalize_identifier(target)
    if not source or not target:
        raise MissingFieldError("source_ens and target_ens are required")
    if source == target:
        raise SelfLoopError("Cannot create relationship with self")
    return source, target


class RelationshipService:
    """Add/list/delete relationships and derive the graph view."""

    def __init__(
        self,
        repository: RelationshipRepository,
        publisher: DomainEventPublisher = event_publisher,
        tld: str = PRIMARY_TLD,
    ) -> None:
        self._repository = repository
        self._publisher = publisher
        self._tld = tld

    def list_relationships(self) -> List[RelationshipEntity]:
        return [rel.to_entity() for rel in self._repository.list_relationships()]

    def add_relationship(self, source: Optional[str], target: Optional[str]) -> RelationshipEntity:
        source, target = normalize_pair(source, target)
        require_valid_ens_name(source, self._tld)
        require_valid_ens_name(target, self._tld)

        relationship = self._repository.create_relationship(source, target).to_entity()
        self._publisher.publish(
            RelationshipCreated(aggregate_id=relationship["id"], source_ens=source, target_ens=target)
        )
        return relationship

    def delete_relationship(
        self,
        relationship_id: Optional[str] = None,
        source: Optional[str] = None,
        target: Optional[str] = None,
    ) -> int:
        """Delete by id, or else by exact source/target pair. Missing rows are not an error."""
        if relationship_id:
            count = self._repository.delete_by_id(relationship_id)
            event = RelationshipDeleted(aggregate_id=relationship_id)
        elif source and target:
            source, target = normalize_identifier(source), normalize_identifier(target)
            count = self._repository.delete_by_pair(source, target)
            event = RelationshipDeleted(aggregate_id=f"{source}->{target}", source_ens=source, target_ens=target)
        else:
            raise MissingSelectorError("Provide id OR (source and target)")

        if count:
            self._publisher.publish(event)
        else:
            logger.debug(f"Delete matched no relationship: {event.aggregate_id}")
        return count

    def graph(self) -> GraphData:
        return project(self.list_relationships())
