from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from ensgraph.schemas.api_schemas import (
    DeleteResponse,
    GraphResponse,
    GraphStatsResponse,
    RelationshipCreate,
    RelationshipResponse,
)
from ensgraph.dependencies import get_relationship_service
from ensgraph.application.relationship_service import RelationshipService
from ensgraph.application.graph_projection import graph_stats

router = APIRouter(prefix="/api/relationships")

@router.get("", response_model=List[RelationshipResponse])
def list_relationships(
    service: RelationshipService = Depends(get_relationship_service),
):
    """
    Retrieve all relationships, newest first.
    """
    return service.list_relationships()

@router.post("", response_model=RelationshipResponse, status_code=201)
def create_relationship(
    payload: RelationshipCreate,
    service: RelationshipService = Depends(get_relationship_service),
):
    """
    Store a directed relationship between two ENS names.

    Both names are lowercased and trimmed, must pass strict validation and
    must differ. Re-adding an existing pair is a 409.
    """
    return service.add_relationship(payload.source_ens, payload.target_ens)

@router.delete("", response_model=DeleteResponse)
def delete_relationship(
    id: Optional[str] = Query(None, description="Relationship ID"),
    source: Optional[str] = Query(None, description="Source ENS name"),
    target: Optional[str] = Query(None, description="Target ENS name"),
    service: RelationshipService = Depends(get_relationship_service),
):
    """
    Delete a relationship by id, or by source/target pair.

    Deleting something that does not exist still succeeds.
    """
    service.delete_relationship(relationship_id=id, source=source, target=target)
    return DeleteResponse(success=True)

@router.get("/graph", response_model=GraphResponse)
def get_graph(
    service: RelationshipService = Depends(get_relationship_service),
):
    """
    Node/link view of every stored relationship.
    """
    return service.graph()

@router.get("/graph/stats", response_model=GraphStatsResponse)
def get_graph_stats(
    service: RelationshipService = Depends(get_relationship_service),
):
    return graph_stats(service.graph())
