from __future__ import annotations

from functools import lru_cache, partial

from fastapi import Depends
from sqlalchemy.orm import Session

from ensgraph.config import settings
from ensgraph.db.database import get_db
from ensgraph.db.repositories.relationships import RelationshipRepository
from ensgraph.application.name_validation import validate_ens_name
from ensgraph.application.relationship_service import RelationshipService
from ensgraph.application.resolver_service import NameResolver
from ensgraph.infrastructure.ens_client import EnsResolutionClient


@lru_cache(maxsize=1)
def get_ens_client() -> EnsResolutionClient:
    return EnsResolutionClient.from_rpc_url(settings.ETH_RPC_URL)


def get_name_resolver(
    client: EnsResolutionClient = Depends(get_ens_client),
) -> NameResolver:
    # one resolver per request: resolver state is request-scoped
    return NameResolver(client, validator=partial(validate_ens_name, tld=settings.PRIMARY_TLD))


def get_relationship_service(db: Session = Depends(get_db)) -> RelationshipService:
    return RelationshipService(RelationshipRepository(db), tld=settings.PRIMARY_TLD)
