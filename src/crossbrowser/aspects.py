"""
Aspect-Aware Values

An aspect is a named rendering mode: a vendor prefix token ("webkit",
"moz", "o", "ms", "svg", "pie") or the legacy rendering mode ("legacy").

A value that implements AspectValue can say "I support rendering for
aspect X" and produce the alternate value for X. Exactly two concrete
variants exist:
    - PrefixedValue: one alternate value per prefix token
    - FallbackValue: a modern value with a legacy stand-in

Every other value is plain and is detected with isinstance, never by
probing for methods.

ARCHITECTURAL RULE:
    Aspect values are immutable.
    Alternate renderings are supplied at construction time.
    Nothing here synthesizes a rendering that was not given.
"""
from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, FrozenSet, Mapping, Optional, Tuple

from .config import RenderOptions
from .errors import AspectNotSupported
from .values import Value

LEGACY = "legacy"

Renderer = Callable[[Optional[RenderOptions]], Value]


class AspectValue(Value):
    """
    Base class for values that take part in aspect resolution.

    Contract:
        supports(aspect)  pure, stable for the value's lifetime
        renderer(aspect)  the rendering callable for an aspect, or None
        render_for(aspect) only valid when supports(aspect) holds
    """

    def has_aspect(self) -> bool:
        return True

    @abstractmethod
    def supports(self, aspect: str) -> bool:
        ...

    @abstractmethod
    def renderer(self, aspect: str) -> Optional[Renderer]:
        ...

    @property
    @abstractmethod
    def aspects(self) -> FrozenSet[str]:
        """Every aspect this value claims to support."""

    @abstractmethod
    def children(self) -> Tuple[Value, ...]:
        ...

    def render_for(self, aspect: str, options: Optional[RenderOptions] = None) -> Value:
        render = self.renderer(aspect) if self.supports(aspect) else None
        if render is None:
            raise AspectNotSupported(f"{self.to_css()} has no rendering for aspect `{aspect}`")
        return render(options)


@dataclass(frozen=True)
class PrefixedValue(AspectValue):
    """
    A value with vendor-prefixed alternates.

    Example:
        linear-gradient(top, red, blue)
    with renderings for webkit and moz becomes:
        PrefixedValue(
            base=String("linear-gradient(top, red, blue)"),
            renderings={
                "webkit": String("-webkit-linear-gradient(top, red, blue)"),
                "moz": String("-moz-linear-gradient(top, red, blue)"),
            }
        )

    Properties:
        base: the value as rendered when no prefix applies
        renderings: prefix token -> alternate value (exact, case-sensitive keys)
    """

    base: Value
    renderings: Mapping[str, Value] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "renderings", MappingProxyType(dict(self.renderings)))

    def __hash__(self) -> int:
        return hash((self.base, frozenset(self.renderings.items())))

    def supports(self, aspect: str) -> bool:
        return aspect in self.renderings

    def renderer(self, aspect: str) -> Optional[Renderer]:
        if aspect not in self.renderings:
            return None
        alternate = self.renderings[aspect]
        return lambda options=None: alternate

    @property
    def aspects(self) -> FrozenSet[str]:
        return frozenset(self.renderings)

    def children(self) -> Tuple[Value, ...]:
        return (self.base,) + tuple(self.renderings.values())

    def to_css(self, options: Optional[RenderOptions] = None) -> str:
        return self.base.to_css(options)


@dataclass(frozen=True)
class FallbackValue(AspectValue):
    """
    A modern value paired with a legacy stand-in.

    The value behaves as `primary` everywhere (including str()) except
    when it is explicitly resolved for the "legacy" aspect.

    Example:
        display: flex, falling back to block
    Becomes:
        FallbackValue(primary=String("flex"), legacy=String("block"))
    """

    primary: Value
    legacy: Value

    def supports(self, aspect: str) -> bool:
        return aspect == LEGACY

    def renderer(self, aspect: str) -> Optional[Renderer]:
        if aspect != LEGACY:
            return None
        return lambda options=None: self.legacy

    @property
    def aspects(self) -> FrozenSet[str]:
        return frozenset((LEGACY,))

    def children(self) -> Tuple[Value, ...]:
        return (self.primary, self.legacy)

    def to_css(self, options: Optional[RenderOptions] = None) -> str:
        return self.primary.to_css(options)
