"""
Health endpoint.
"""

from fastapi import APIRouter

from schemadotorg import __version__
from schemadotorg.dependencies import AppSettings

router = APIRouter()


@router.get("/health")
async def health_check(settings: AppSettings):
    """
    Service health check endpoint.

    Returns:
        {"status": "ok", ...} with the active path policy
    """
    return {
        "status": "ok",
        "version": __version__,
        "context": settings.JSONLD_CONTEXT,
        "pathPolicy": settings.PATH_POLICY,
    }
