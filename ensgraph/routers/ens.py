from fastapi import APIRouter, Depends, Query
from typing import Any, Dict, Optional

from ensgraph.config import settings
from ensgraph.schemas.api_schemas import NameValidationResponse, ResolverStateResponse
from ensgraph.dependencies import get_name_resolver
from ensgraph.application.name_validation import is_likely_ens_name, validate_ens_name
from ensgraph.application.resolver_service import NameResolver

router = APIRouter(prefix="/api/ens")


def truncate_address(address: str) -> str:
    """0xd8dA6BF2...6045 style shortening used on profile pages."""
    return f"{address[:6]}...{address[-4:]}"


def explorer_url(address: str) -> str:
    return f"{settings.EXPLORER_BASE_URL}{address}"


def _profile_view(profile: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if profile is None:
        return None
    address = profile["address"]
    return {
        **profile,
        "shortAddress": truncate_address(address) if address else None,
        "explorerUrl": explorer_url(address) if address else None,
    }

@router.get("/validate", response_model=NameValidationResponse)
def validate_name(name: str = Query(..., description="ENS name as typed")):
    """
    Check a name against the strict grammar without touching the network.
    """
    validation = validate_ens_name(name, settings.PRIMARY_TLD)
    return {
        **validation.to_dict(),
        "isLikelyEns": is_likely_ens_name(name, settings.SUPPORTED_TLDS),
    }

@router.get("/{name}", response_model=ResolverStateResponse)
async def resolve_name(
    name: str,
    resolver: NameResolver = Depends(get_name_resolver),
):
    """
    Resolve an ENS name to its address and profile text records.

    Invalid names, unregistered names and provider failures all come back
    as 200 with ``error`` set; callers inspect ``result.isValid``.
    """
    state = (await resolver.resolve(name)).to_dict()
    state["result"] = _profile_view(state["result"])
    return state
