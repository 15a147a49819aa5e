"""
API Request/Response Schemas using Pydantic.

Structure of HTTP requests and responses for the ensgraph API.
"""
from pydantic import AliasChoices, BaseModel, Field
from typing import Dict, List, Optional

# Relationship schemas
class RelationshipCreate(BaseModel):
    source_ens: Optional[str] = Field(
        None,
        description="Source ENS name",
        validation_alias=AliasChoices("source_ens", "source_identifier"),
    )
    target_ens: Optional[str] = Field(
        None,
        description="Target ENS name",
        validation_alias=AliasChoices("target_ens", "target_identifier"),
    )

class RelationshipResponse(BaseModel):
    id: str = Field(..., description="Unique identifier for the relationship")
    source_ens: str = Field(..., description="Normalized source ENS name")
    target_ens: str = Field(..., description="Normalized target ENS name")
    created_at: str = Field(..., description="ISO format creation timestamp")

class DeleteResponse(BaseModel):
    success: bool = Field(default=True, description="Whether the operation was successful")

# Graph schemas
class GraphNode(BaseModel):
    id: str = Field(..., description="ENS name")

class GraphLink(BaseModel):
    source: str = Field(..., description="Source ENS name")
    target: str = Field(..., description="Target ENS name")
    id: Optional[str] = Field(None, description="ID of the stored relationship")

class GraphResponse(BaseModel):
    nodes: List[GraphNode] = Field(..., description="Distinct names across all relationships")
    links: List[GraphLink] = Field(..., description="One link per stored relationship")

class GraphStatsResponse(BaseModel):
    nodes: int = Field(..., description="Number of distinct names")
    links: int = Field(..., description="Number of relationships")

# Resolution schemas
class NameValidationResponse(BaseModel):
    isValid: bool = Field(..., description="Whether the name passes strict validation")
    error: Optional[str] = Field(None, description="First validation failure, if any")
    isLikelyEns: bool = Field(..., description="Lenient check across supported TLDs")

class ProfileResponse(BaseModel):
    address: Optional[str] = Field(None, description="Resolved address")
    ensName: str = Field(..., description="Normalized name, or the name as typed if normalization failed")
    isValid: bool = Field(..., description="Whether an address was resolved")
    error: Optional[str] = Field(None, description="Resolution error message")
    textRecords: Dict[str, Optional[str]] = Field(default_factory=dict, description="Profile text records")
    shortAddress: Optional[str] = Field(None, description="Truncated address for display")
    explorerUrl: Optional[str] = Field(None, description="Block explorer link for the address")

class ResolverStateResponse(BaseModel):
    status: str = Field(..., description="Terminal resolver status")
    isLoading: bool = Field(..., description="Whether a resolution is in flight")
    result: Optional[ProfileResponse] = Field(None, description="Assembled profile")
    error: Optional[str] = Field(None, description="User-facing error message")
