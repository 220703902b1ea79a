"""
Model path resolution.

A path is a dot-separated address into the model, e.g. "adr.streetAddress".
Each segment indexes a mapping key, a sequence position or a named
attribute, so plain dicts, pydantic models, dataclasses and ORM rows can all
be used as models.
"""

import enum
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from schemadotorg.core.exceptions import PathNotFound

logger = logging.getLogger(__name__)

_MISSING = object()

# Returned by resolve_with_policy() when the key should be left out
OMIT = object()


class PathPolicy(str, enum.Enum):
    """What to do when a path does not resolve against the model."""
    STRICT = "strict"    # raise PathNotFound
    NULL = "null"        # emit null
    OMIT = "omit"        # drop the output key


def _step(current: Any, segment: str, path: str) -> Any:
    """Resolve a single path segment against the current value."""
    if isinstance(current, Mapping):
        if segment in current:
            return current[segment]
        raise PathNotFound(path, segment)

    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        if segment.isdigit() and int(segment) < len(current):
            return current[int(segment)]
        raise PathNotFound(path, segment)

    if current is None or isinstance(current, (str, bytes, int, float)):
        raise PathNotFound(path, segment)

    if segment.startswith("__"):
        raise PathNotFound(path, segment)

    value = getattr(current, segment, _MISSING)
    if value is _MISSING:
        raise PathNotFound(path, segment)
    return value


def resolve_path(model: Any, path: str | Callable[[Any], Any]) -> Any:
    """
    Resolve a dotted path against a model.

    A mapping key that literally contains dots takes precedence over
    traversal. A callable path is invoked with the model and its return
    value used as-is; a KeyError, AttributeError or IndexError it raises
    is reported as PathNotFound.

    Args:
        model: Model to read from (never modified)
        path: Dot-separated path or callable

    Returns:
        The value found at the path

    Raises:
        PathNotFound: If any segment is absent
    """
    if callable(path):
        try:
            return path(model)
        except (KeyError, AttributeError, IndexError) as exc:
            name = getattr(path, "__name__", "<callable>")
            raise PathNotFound(name, str(exc).strip("'")) from exc

    current = model
    remaining = path
    while True:
        if isinstance(current, Mapping) and remaining in current:
            return current[remaining]

        segment, dot, remaining = remaining.partition(".")
        current = _step(current, segment, path)
        if not dot:
            return current


def resolve_with_policy(
    model: Any,
    path: str | Callable[[Any], Any],
    policy: PathPolicy,
) -> Any:
    """
    Resolve a path, applying the missing-path policy.

    Returns:
        The resolved value, None under the null policy or OMIT under the
        omit policy when the path does not resolve.
    """
    try:
        return resolve_path(model, path)
    except PathNotFound as exc:
        if policy is PathPolicy.STRICT:
            raise
        logger.debug(f"Path not found, applying {policy.value} policy: {exc.message}")
        return None if policy is PathPolicy.NULL else OMIT
