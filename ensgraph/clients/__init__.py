"""Clients for talking to a running ensgraph service."""
from .relationships_client import OperationResult, RelationshipStoreClient

__all__ = ["OperationResult", "RelationshipStoreClient"]
