"""
Response utilities for the schema.org service.
Provides content negotiation and JSON-LD response formatting.
"""

from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse, Response

from schemadotorg.jsonld.context import JSONLD_MEDIA_TYPE
from schemadotorg.services.presentation import script_tag, to_json


def get_response_format(request: Request) -> str:
    """
    Determine response format based on Accept header.

    Args:
        request: FastAPI request object

    Returns:
        "html" if the client asks for text/html, otherwise "jsonld"
    """
    accept = request.headers.get("accept", JSONLD_MEDIA_TYPE)
    if "text/html" in accept:
        return "html"
    return "jsonld"


def create_jsonld_response(
    document: dict[str, Any],
    response_format: str = "jsonld",
    indent: int | None = None,
) -> Response:
    """
    Create a response for a generated JSON-LD document.

    Args:
        document: JSON-LD document
        response_format: "jsonld" for application/ld+json, "html" for a script element
        indent: Optional pretty-print indent for the JSON body

    Returns:
        Response with the serialized document
    """
    if response_format == "html":
        return HTMLResponse(content=script_tag(document))

    return Response(
        content=to_json(document, indent=indent),
        media_type=JSONLD_MEDIA_TYPE,
    )
