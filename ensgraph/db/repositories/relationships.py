from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ensgraph.db.models import Relationship
from ensgraph.domain.errors import DuplicateEdgeError
from typing import List

DUPLICATE_MESSAGE = "Relationship already exists"

class RelationshipRepository:
    """Repository for relationship operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_relationships(self) -> List[Relationship]:
        """
        Get all relationships, newest first.

        Returns:
            List of relationships ordered by creation time, descending
        """
        return (
            self.db.query(Relationship)
            .order_by(Relationship.created_at.desc(), Relationship.id.desc())
            .all()
        )

    def create_relationship(self, source_ens: str, target_ens: str) -> Relationship:
        """
        Store a directed relationship.

        Args:
            source_ens: Normalized source name
            target_ens: Normalized target name

        Returns:
            Persisted relationship with its generated id and timestamp

        Raises:
            DuplicateEdgeError: if the ordered pair already exists
        """
        relationship = Relationship(source_ens=source_ens, target_ens=target_ens)
        self.db.add(relationship)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if self._pair_exists(source_ens, target_ens):
                raise DuplicateEdgeError(DUPLICATE_MESSAGE) from exc
            raise
        self.db.refresh(relationship)
        return relationship

    def _pair_exists(self, source_ens: str, target_ens: str) -> bool:
        return (
            self.db.query(Relationship.id)
            .filter(Relationship.source_ens == source_ens, Relationship.target_ens == target_ens)
            .first()
            is not None
        )

    def delete_by_id(self, relationship_id: str) -> int:
        """
        Delete a relationship by ID.

        Returns:
            Number of rows removed (0 when no such relationship)
        """
        count = self.db.query(Relationship).filter(Relationship.id == relationship_id).delete()
        self.db.commit()
        return count

    def delete_by_pair(self, source_ens: str, target_ens: str) -> int:
        """
        Delete the relationship matching an exact source/target pair.

        Returns:
            Number of rows removed (0 when no such relationship)
        """
        count = (
            self.db.query(Relationship)
            .filter(Relationship.source_ens == source_ens, Relationship.target_ens == target_ens)
            .delete()
        )
        self.db.commit()
        return count
