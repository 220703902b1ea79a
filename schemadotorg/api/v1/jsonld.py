"""
JSON-LD endpoints.
Generate, validate and render schema.org documents from posted models and mappings.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, Response

from schemadotorg.core.responses import create_jsonld_response
from schemadotorg.dependencies import AppSettings, ResponseFormat, SchemaContext
from schemadotorg.jsonld.context import JSONLD_MEDIA_TYPE
from schemadotorg.jsonld.mapping import compile_mapping
from schemadotorg.jsonld.transform import generate
from schemadotorg.schemas.error import ErrorResponse
from schemadotorg.schemas.jsonld import (
    GenerateRequest,
    RenderRequest,
    ValidateRequest,
    ValidateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

EMPTY_PAGE = '<!DOCTYPE html><html><head><meta charset="utf-8"></head><body></body></html>'

MAPPING_ERRORS = {422: {"model": ErrorResponse, "description": "Invalid mapping or unresolvable path"}}


@router.post(
    "/generate",
    response_class=Response,
    responses={
        200: {"content": {JSONLD_MEDIA_TYPE: {}, "text/html": {}}},
        **MAPPING_ERRORS,
    },
)
async def generate_document(
    body: GenerateRequest,
    settings: AppSettings,
    response_format: ResponseFormat,
):
    """
    Generate a JSON-LD document from a model and mapping.

    Returns application/ld+json by default; a client accepting text/html
    receives the document wrapped in a script element.
    """
    document = generate(
        body.model,
        body.mapping,
        policy=body.policy or settings.PATH_POLICY,
        context=settings.JSONLD_CONTEXT,
    )
    return create_jsonld_response(document, response_format, indent=settings.JSON_INDENT)


@router.post("/validate", response_model=ValidateResponse, responses=MAPPING_ERRORS)
async def validate_mapping(body: ValidateRequest):
    """
    Validate a mapping without a model.

    Reports malformed values, reserved marker collisions and malformed
    array expansions.
    """
    level = compile_mapping(body.mapping)
    return ValidateResponse(entries=len(level))


@router.post("/render", response_class=HTMLResponse, responses=MAPPING_ERRORS)
async def render_page(
    body: RenderRequest,
    settings: AppSettings,
    render: SchemaContext,
):
    """
    Render schemas into a page.

    Each schema becomes one script element, in request order, inserted
    before the end of the page body.
    """
    render.policy = body.policy or settings.PATH_POLICY
    for entry in body.schemas:
        render.add_schema(entry.model, entry.mapping)

    logger.debug(f"Rendering {len(render)} schema(s)")
    return HTMLResponse(content=render.flush(body.html or EMPTY_PAGE))
