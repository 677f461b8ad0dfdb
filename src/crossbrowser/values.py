"""
Host Value Model

The stylesheet host hands over already-parsed values. This module is the
minimal Python rendition of those values:
    - Strings (identifiers and quoted strings)
    - Numbers
    - Booleans and null
    - Lists (comma or space separated)
    - Maps

ARCHITECTURAL RULE:
    Values are immutable.
    Values know how to stringify themselves (to_css).
    Values do NOT parse or evaluate anything.

Plain values never support an aspect. Aspect-aware values live in
crossbrowser.aspects.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union

from .config import DEFAULT_OPTIONS, RenderOptions


class Separator(Enum):
    """
    List separator.

    The separator is a property of the list node and must survive every
    transformation of the list.
    """
    COMMA = "comma"
    SPACE = "space"


class Value(ABC):
    """
    Base class for all host values.

    Subclasses are frozen dataclasses. The aspect methods here describe
    plain values: they take part in no aspect at all.
    """

    def has_aspect(self) -> bool:
        return False

    def supports(self, aspect: str) -> bool:
        return False

    @abstractmethod
    def to_css(self, options: Optional[RenderOptions] = None) -> str:
        """Stringify the value the way the host would print it."""

    def __str__(self) -> str:
        return self.to_css()


@dataclass(frozen=True)
class String(Value):
    """
    An identifier (unquoted) or a quoted string.

    Examples:
        - webkit        String("webkit")
        - "10.1"        String("10.1", quoted=True)
    """

    value: str
    quoted: bool = False

    def to_css(self, options: Optional[RenderOptions] = None) -> str:
        if not self.quoted:
            return self.value
        escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'


@dataclass(frozen=True)
class Number(Value):
    """A number with an optional unit (e.g. 5px, 12.5%)."""

    value: Union[int, float]
    unit: str = ""

    def to_css(self, options: Optional[RenderOptions] = None) -> str:
        options = options or DEFAULT_OPTIONS
        rounded = round(float(self.value), options.precision)
        if rounded.is_integer():
            text = str(int(rounded))
        else:
            text = f"{rounded:.{options.precision}f}".rstrip("0").rstrip(".")
            if options.compressed and text.startswith("0."):
                text = text[1:]
        return f"{text}{self.unit}"


@dataclass(frozen=True)
class Bool(Value):
    value: bool

    def to_css(self, options: Optional[RenderOptions] = None) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Null(Value):
    """The host's null. Renders as nothing."""

    def to_css(self, options: Optional[RenderOptions] = None) -> str:
        return ""


NULL = Null()


@dataclass(frozen=True)
class List(Value):
    """
    An ordered list of values.

    Example:
        -webkit-transition, color 1s
    Becomes:
        List(
            items=(String("-webkit-transition"), List((String("color"), Number(1, "s")))),
            separator=Separator.COMMA
        )

    IMPORTANT:
        Order and separator are structural. Anything that rebuilds a
        list must keep both.
    """

    items: Tuple[Value, ...] = ()
    separator: Separator = Separator.SPACE

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def to_css(self, options: Optional[RenderOptions] = None) -> str:
        options = options or DEFAULT_OPTIONS
        if self.separator is Separator.COMMA:
            joiner = "," if options.compressed else ", "
        else:
            joiner = " "
        parts = [item.to_css(options) for item in self.items]
        return joiner.join(p for p in parts if p)


@dataclass(frozen=True)
class Map(Value):
    """An ordered map of values to values."""

    pairs: Tuple[Tuple[Value, Value], ...] = ()

    def __post_init__(self):
        if not isinstance(self.pairs, tuple):
            object.__setattr__(self, "pairs", tuple(tuple(p) for p in self.pairs))

    def __len__(self) -> int:
        return len(self.pairs)

    def keys(self) -> Tuple[Value, ...]:
        return tuple(k for k, _ in self.pairs)

    def get(self, key: Value, default: Optional[Value] = None) -> Optional[Value]:
        for k, v in self.pairs:
            if k == key:
                return v
        return default

    def to_css(self, options: Optional[RenderOptions] = None) -> str:
        body = ", ".join(f"{k.to_css(options)}: {v.to_css(options)}" for k, v in self.pairs)
        return f"({body})"


# =============================================================================
# Construction helpers
# =============================================================================

def identifier(name: str) -> String:
    return String(name)


def quoted_string(text: str) -> String:
    return String(text, quoted=True)


def number(value: Union[int, float], unit: str = "") -> Number:
    return Number(value, unit)


def boolean(value: Any) -> Bool:
    return Bool(bool(value))


def list_of(items: Iterable[Value], separator: Separator = Separator.COMMA) -> List:
    return List(tuple(items), separator)


def map_of(mapping: Dict[Value, Value]) -> Map:
    return Map(tuple(mapping.items()))
