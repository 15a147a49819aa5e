"""Event handlers for domain events."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ensgraph.domain.events import (
        RelationshipCreated,
        RelationshipDeleted,
        NameResolved,
    )

logger = logging.getLogger(__name__)


class AuditLogHandler:
    """Logs all domain events for audit trail."""

    def handle_relationship_created(self, event: RelationshipCreated) -> None:
        logger.info(f"[AUDIT] Relationship created: {event.aggregate_id} - {event.source_ens} -> {event.target_ens}")

    def handle_relationship_deleted(self, event: RelationshipDeleted) -> None:
        if event.source_ens and event.target_ens:
            logger.info(f"[AUDIT] Relationship deleted: {event.source_ens} -> {event.target_ens}")
        else:
            logger.info(f"[AUDIT] Relationship deleted: {event.aggregate_id}")

    def handle_name_resolved(self, event: NameResolved) -> None:
        if event.is_valid:
            logger.info(f"[AUDIT] Name resolved: {event.aggregate_id} -> {event.address}")
        else:
            logger.info(f"[AUDIT] Name unresolved: {event.aggregate_id}")


def register_event_handlers():
    """Register all event handlers with the publisher."""
    from ensgraph.domain.events import (
        event_publisher,
        RelationshipCreated,
        RelationshipDeleted,
        NameResolved,
    )

    audit = AuditLogHandler()

    event_publisher.subscribe(RelationshipCreated, audit.handle_relationship_created)
    event_publisher.subscribe(RelationshipDeleted, audit.handle_relationship_deleted)
    event_publisher.subscribe(NameResolved, audit.handle_name_resolved)
