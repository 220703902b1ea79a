"""
FastAPI dependency injection functions.
Provides common dependencies used across endpoints.
"""

from typing import Annotated

from fastapi import Depends

from schemadotorg.config import Settings, get_settings
from schemadotorg.core.responses import get_response_format
from schemadotorg.services.render_context import RenderContext, get_render_context


# Type aliases for cleaner endpoint signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
ResponseFormat = Annotated[str, Depends(get_response_format)]
SchemaContext = Annotated[RenderContext, Depends(get_render_context)]
