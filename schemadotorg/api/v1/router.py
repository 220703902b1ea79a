"""
API v1 Router - Aggregates all v1 endpoints.
Base Path: /api/v1
"""

from fastapi import APIRouter

from schemadotorg.api.v1 import health, jsonld

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(jsonld.router, prefix="/jsonld", tags=["jsonld"])
