"""
Presentation of JSON-LD documents as HTML script elements.
"""

import json
import math
import re
from collections.abc import Iterable
from typing import Any

from pydantic_core import to_jsonable_python

from schemadotorg.jsonld.context import JSONLD_MEDIA_TYPE

BODY_END = re.compile(r"</body\s*>", re.IGNORECASE)


def _finite(value: Any) -> Any:
    """Replace NaN and infinities, which JSON cannot represent, with null."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def _encode(value: Any) -> Any:
    return _finite(to_jsonable_python(value))


def to_json(document: Any, indent: int | None = None) -> str:
    """
    Serialize a JSON-LD document, preserving key order.

    Values the json module cannot encode (datetimes, enums, UUIDs, pydantic
    models, dataclasses) are converted with pydantic's encoder. Non-finite
    floats become null. "</" is escaped so the text cannot close an
    enclosing script element.

    Args:
        document: JSON-LD document from generate()
        indent: Optional pretty-print indent

    Returns:
        JSON text
    """
    text = json.dumps(
        _finite(document),
        default=_encode,
        ensure_ascii=False,
        allow_nan=False,
        indent=indent,
        separators=None if indent is not None else (",", ":"),
    )
    return text.replace("</", "<\\/")


def script_tag(document: Any) -> str:
    """Wrap a JSON-LD document in a <script type="application/ld+json"> element."""
    return f'<script type="{JSONLD_MEDIA_TYPE}">{to_json(document)}</script>'


def inject_before_body_end(html: str, scripts: Iterable[str]) -> str:
    """
    Insert rendered script elements at the end of the document body.

    Scripts go before the last closing body tag, or are appended when the
    document has none.
    """
    markup = "".join(scripts)
    if not markup:
        return html

    matches = list(BODY_END.finditer(html))
    if not matches:
        return html + markup
    index = matches[-1].start()
    return html[:index] + markup + html[index:]
