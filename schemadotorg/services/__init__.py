"""
Services for rendering JSON-LD into pages.
"""

from schemadotorg.services.presentation import inject_before_body_end, script_tag, to_json
from schemadotorg.services.render_context import RenderContext, get_render_context

__all__ = [
    "RenderContext",
    "get_render_context",
    "inject_before_body_end",
    "script_tag",
    "to_json",
]
