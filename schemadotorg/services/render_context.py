"""
Per-render schema queue.

Views register (model, mapping) pairs while a page is being built; the
queue is flushed once, at the end of the document body, emitting one script
element per schema in registration order. Each render owns its own
context, so nothing is shared between concurrent requests.
"""

import logging
from collections.abc import Iterator
from typing import Any

from schemadotorg.core.exceptions import RenderContextClosed
from schemadotorg.jsonld.mapping import MappingLevel, compile_mapping
from schemadotorg.jsonld.paths import PathPolicy
from schemadotorg.jsonld.transform import generate
from schemadotorg.services.presentation import inject_before_body_end, script_tag

logger = logging.getLogger(__name__)


class RenderContext:
    """Ordered queue of schemas for a single page render."""

    def __init__(self, policy: PathPolicy | str | None = None) -> None:
        self.policy = policy
        self._schemas: list[tuple[Any, MappingLevel]] = []
        self._closed = False

    def __len__(self) -> int:
        return len(self._schemas)

    @property
    def closed(self) -> bool:
        return self._closed

    def add_schema(self, model: Any, mapping: Any) -> None:
        """
        Queue a schema for output.

        The mapping is compiled immediately so malformed mappings fail at
        registration rather than at flush.

        Raises:
            RenderContextClosed: If the context has already been flushed
        """
        if self._closed:
            raise RenderContextClosed()
        self._schemas.append((model, compile_mapping(mapping)))

    def documents(self) -> list[dict[str, Any]]:
        """Generate the JSON-LD document for every queued schema, in order."""
        return [
            generate(model, mapping, policy=self.policy)
            for model, mapping in self._schemas
        ]

    def scripts(self) -> list[str]:
        return [script_tag(document) for document in self.documents()]

    def flush(self, html: str | None = None) -> str:
        """
        Render the queued schemas and close the context.

        Args:
            html: Page to inject the scripts into at end of body. When None
                only the concatenated script elements are returned.

        Returns:
            The page (or bare scripts) with one script element per schema
        """
        if self._closed:
            raise RenderContextClosed()

        scripts = self.scripts()
        logger.debug(f"Flushing {len(scripts)} JSON-LD schema(s)")
        self._schemas.clear()
        self._closed = True

        if html is None:
            return "".join(scripts)
        return inject_before_body_end(html, scripts)


def get_render_context() -> Iterator[RenderContext]:
    """
    FastAPI dependency providing a fresh render context per request.
    Unflushed schemas are discarded when the request ends.
    """
    context = RenderContext()
    try:
        yield context
    finally:
        if not context.closed and len(context):
            logger.warning(f"Discarding {len(context)} unflushed JSON-LD schema(s)")
