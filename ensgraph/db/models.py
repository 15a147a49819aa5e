"""
Database models using SQLAlchemy.

Defines the schema of the relationship store. These are NOT the API
schemas (see ensgraph.schemas.api_schemas).
"""
from sqlalchemy import CheckConstraint, Column, DateTime, String, UniqueConstraint
from sqlalchemy.orm import declarative_base
import datetime
import uuid

Base = declarative_base()

def generate_uuid():
    return str(uuid.uuid4())

def utcnow():
    return datetime.datetime.now(datetime.timezone.utc)

class Relationship(Base):
    __tablename__ = "relationships"
    __table_args__ = (
        UniqueConstraint("source_ens", "target_ens", name="uq_relationships_pair"),
        CheckConstraint("source_ens <> target_ens", name="ck_relationships_no_self_loop"),
    )

    id = Column(String, primary_key=True, default=generate_uuid)
    source_ens = Column(String, nullable=False, index=True)
    target_ens = Column(String, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def to_entity(self) -> dict:
        return {
            "id": self.id,
            "source_ens": self.source_ens,
            "target_ens": self.target_ens,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
