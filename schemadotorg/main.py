"""
schema.org JSON-LD Service - Main Application Entry Point.

FastAPI application exposing the mapping engine over HTTP.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from schemadotorg import __version__
from schemadotorg.config import get_settings
from schemadotorg.core.exceptions import SchemaDotOrgException
from schemadotorg.api.v1.router import api_router

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info(f"Starting {settings.PROJECT_NAME}")
    logger.info(f"JSON-LD context: {settings.JSONLD_CONTEXT}")
    logger.info(f"Path policy: {settings.PATH_POLICY}")

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## schema.org JSON-LD Service

Turns data models into schema.org JSON-LD using declarative mappings.

### Mapping markers
- `TypeName` key: typed object (`@type`)
- `:` value prefix: string literal
- `@` value prefix: enumeration member, expanded to `https://schema.org/<name>`
- `[` key prefix: array expansion over a model sequence
    """,
    version=__version__,
    openapi_tags=[
        {"name": "jsonld", "description": "JSON-LD generation and rendering"},
        {"name": "health", "description": "Service health checks"},
    ],
    lifespan=lifespan,
)


@app.exception_handler(SchemaDotOrgException)
async def schemadotorg_exception_handler(request: Request, exc: SchemaDotOrgException) -> JSONResponse:
    """
    Global exception handler for mapping and rendering errors.
    Returns standardized error responses.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error but returns a sanitized response.
    """
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
        },
    )


app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint with service information."""
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
        "api": settings.API_V1_PREFIX,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "schemadotorg.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
