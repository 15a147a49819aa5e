"""
Health check endpoints for the API.
"""
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session
from typing import Dict, Any
from datetime import datetime

from ensgraph.config import settings
from ensgraph.db.database import get_db
from ensgraph.db.models import Relationship

router = APIRouter()

@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Basic health check endpoint.
    Returns API status and version information.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT
    }

@router.get("/health/database")
def database_health(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Check relationship store health.
    Verifies the database answers and reports the number of stored relationships.
    """
    try:
        db.execute(text("SELECT 1"))
        count = db.query(Relationship).count()

        return {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "relationships": count,
        }

    except Exception as e:
        return {
            "status": "unhealthy",
            "timestamp": datetime.now().isoformat(),
            "error": str(e)
        }
