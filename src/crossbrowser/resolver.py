"""
Aspect Resolver

Walks a value tree depth-first and substitutes aspect-specific renderings
wherever a leaf supports the requested aspect.

Rules:
    - Lists are never asked about aspects; only their leaves are.
    - Lists keep their order and separator.
    - A leaf without support (or without a renderer) is returned as is.
    - Resolution never fails because an aspect is unsupported.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from .aspects import AspectValue
from .config import RenderOptions
from .errors import TypeMismatch
from .values import List, Separator, String, Value

logger = logging.getLogger(__name__)


def normalize_aspect(prefix: Union[str, String]) -> str:
    """
    Turn a prefix argument into an aspect name.

    Unwraps a host String and strips exactly one leading hyphen, so
    "-moz" and "moz" name the same aspect.

    Raises:
        TypeMismatch: If prefix is neither a str nor a String
    """
    if isinstance(prefix, String):
        prefix = prefix.value
    if not isinstance(prefix, str):
        raise TypeMismatch(f"{prefix!r} is not a string")
    if prefix.startswith("-"):
        prefix = prefix[1:]
    return prefix


def any_supports(aspect: str, *values: Value) -> bool:
    """True if at least one of the values supports the aspect."""
    return any(isinstance(v, AspectValue) and v.supports(aspect) for v in values)


def resolve(
    prefix: Union[str, String],
    value: Value,
    *more: Value,
    options: Optional[RenderOptions] = None,
) -> Value:
    """
    Resolve a value (or several) for an aspect.

    Several values are resolved as one comma-separated list.

    Args:
        prefix: Aspect name, optionally with a leading hyphen
        value: Value or list to resolve
        more: Further values
        options: Render options handed to each renderer

    Returns:
        A new value tree with renderings substituted
    """
    aspect = normalize_aspect(prefix)
    if more:
        value = List((value,) + more, Separator.COMMA)
    return _resolve(aspect, value, options)


def _resolve(aspect: str, value: Value, options: Optional[RenderOptions]) -> Value:
    if isinstance(value, List):
        return List(tuple(_resolve(aspect, item, options) for item in value.items), value.separator)

    if isinstance(value, AspectValue) and value.supports(aspect):
        render = value.renderer(aspect)
        if render is not None:
            return render(options)
        logger.debug("%r claims aspect %r but has no renderer; passing through", value, aspect)

    return value
