"""Health check endpoint."""

from fastapi import APIRouter

from prefixeval import __version__
from prefixeval.operators import default_registry

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
        "service": "prefixeval-api"
    }


@router.get("/health/ready")
async def readiness_check():
    """Readiness check endpoint."""
    operators = len(default_registry())
    return {
        "ready": operators > 0,
        "checks": {
            "runtime": True,
            "operators": operators,
        }
    }
