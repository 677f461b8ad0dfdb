"""
Host Entry Points

The callables the stylesheet host can invoke, each declared with the
argument lists it accepts:

    prefixed(prefix, values...)          does any value support the prefix?
    prefix(prefix, value...)             resolve values for the prefix
    -webkit(value...), -moz(...), ...    prefix() with the token baked in
    css2-fallback(value, css2_value)     build a FallbackValue
    browsers([prefix])                   and the other dataset queries

Arguments arrive as host values. String arguments are type-checked before
any dataset access (TypeMismatch). Unknown browsers, versions and
capabilities surface as DomainLookupFailure carrying the dataset's message.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List as PyList, Optional, Set, Tuple, Type

from .aspects import LEGACY, FallbackValue
from .caniuse import get_dataset
from .config import RenderOptions
from .errors import ArityMismatch, DatasetError, DomainLookupFailure, TypeMismatch
from .resolver import any_supports, normalize_aspect, resolve
from .values import (
    NULL,
    Bool,
    List,
    Map,
    Null,
    Number,
    String,
    Value,
    boolean,
    identifier,
    list_of,
    number,
    quoted_string,
)

logger = logging.getLogger(__name__)

# Shorthand entry points: "-<token>" resolves for the aspect on the right.
# css2 is the legacy rendering mode: -css2($v) resolves the "legacy" aspect,
# so the matching check is prefixed(legacy, $v), not prefixed(-css2, $v).
SHORTHAND_ASPECTS: Dict[str, str] = {
    "webkit": "webkit",
    "moz": "moz",
    "o": "o",
    "ms": "ms",
    "svg": "svg",
    "pie": "pie",
    "css2": LEGACY,
}


def assert_type(value: Value, expected: Type[Value], name: str) -> None:
    """Raise TypeMismatch unless value is an instance of expected."""
    if not isinstance(value, expected):
        raise TypeMismatch(f"${name}: {value!r} is not a {expected.__name__.lower()}")


@contextmanager
def _lookups() -> Iterator[None]:
    """Turn a failed name lookup into DomainLookupFailure. Load the dataset outside it."""
    try:
        yield
    except DatasetError as e:
        raise DomainLookupFailure(str(e)) from e


# =============================================================================
# Registry
# =============================================================================

@dataclass(frozen=True)
class Signature:
    """One accepted argument list. A variadic signature takes any extra count."""

    params: Tuple[str, ...]
    variadic: bool = False

    def accepts(self, count: int) -> bool:
        if self.variadic:
            return count >= len(self.params)
        return count == len(self.params)


class FunctionRegistry:
    """Entry points by host name. Hyphens and underscores are interchangeable."""

    def __init__(self):
        self._functions: Dict[str, Callable[..., Value]] = {}
        self._signatures: Dict[str, PyList[Signature]] = {}
        self._option_aware: Set[str] = set()

    @staticmethod
    def _key(name: str) -> str:
        return name.replace("_", "-")

    def declare(self, name: str, params: Tuple[str, ...] = (), variadic: bool = False) -> None:
        self._signatures.setdefault(self._key(name), []).append(Signature(tuple(params), variadic))

    def register(self, name: str, func: Callable[..., Value], uses_options: bool = False) -> Callable[..., Value]:
        """Register func under name. uses_options: func takes an `options` keyword."""
        self._functions[self._key(name)] = func
        if uses_options:
            self._option_aware.add(self._key(name))
        return func

    def names(self) -> PyList[str]:
        return sorted(self._functions)

    def signatures(self, name: str) -> PyList[Signature]:
        return list(self._signatures.get(self._key(name), []))

    def __contains__(self, name: str) -> bool:
        return self._key(name) in self._functions

    def call(self, name: str, *args: Value, options: Optional[RenderOptions] = None) -> Value:
        key = self._key(name)
        if key not in self._functions:
            raise DomainLookupFailure(f"{name} is not a known function")
        signatures = self._signatures.get(key, [])
        if not any(s.accepts(len(args)) for s in signatures):
            raise ArityMismatch(f"Wrong number of arguments ({len(args)}) for `{name}'")
        logger.debug("Calling %s with %d argument(s)", key, len(args))
        if key in self._option_aware:
            return self._functions[key](*args, options=options)
        return self._functions[key](*args)


registry = FunctionRegistry()


def _entry(name: str, *signatures: Tuple[str, ...], variadic: bool = False, uses_options: bool = False):
    def wrap(func):
        for params in signatures:
            registry.declare(name, params, variadic=variadic)
        registry.register(name, func, uses_options=uses_options)
        return func
    return wrap


# =============================================================================
# Aspect resolution
# =============================================================================

@_entry("prefixed", ("prefix",), variadic=True)
def prefixed(prefix: Value, *values: Value) -> Bool:
    """
    Check if any of the values needs the given prefix.

    Only the values themselves are asked, not the members of a list.
    The prefix names an aspect directly: use "legacy", not "css2", to
    ask about css2 fallbacks.
    """
    assert_type(prefix, String, "prefix")
    return boolean(any_supports(normalize_aspect(prefix), *values))


@_entry("prefix", ("prefix", "value"), variadic=True, uses_options=True)
def prefix(prefix: Value, value: Value, *more: Value, options: Optional[RenderOptions] = None) -> Value:
    """Resolve one or more values for a prefix ("-moz" and "moz" are the same)."""
    assert_type(prefix, String, "prefix")
    return resolve(prefix, value, *more, options=options)


def _shorthand(token: str, aspect: str) -> Callable[..., Value]:
    def apply(value: Value, *more: Value, options: Optional[RenderOptions] = None) -> Value:
        return resolve(aspect, value, *more, options=options)
    apply.__name__ = f"_{token}"
    apply.__doc__ = f"-{token}($arg) is the same as calling prefix({aspect}, $arg)."
    return apply


for _token, _aspect in SHORTHAND_ASPECTS.items():
    _entry(f"-{_token}", ("value",), variadic=True, uses_options=True)(_shorthand(_token, _aspect))


@_entry("css2-fallback", ("value", "css2_value"))
def css2_fallback(value: Value, css2_value: Value) -> FallbackValue:
    return FallbackValue(primary=value, legacy=css2_value)


# =============================================================================
# Browser data
# =============================================================================

@_entry("browsers", (), ("prefix",))
def browsers(prefix: Optional[Value] = None) -> List:
    """The known browsers, or those using the given prefix."""
    if prefix is None or isinstance(prefix, Null):
        return list_of(identifier(b) for b in get_dataset().browsers())
    assert_type(prefix, String, "prefix")
    names = get_dataset().browsers_with_prefix(prefix.value)
    return list_of(identifier(b) for b in names)


@_entry("browser-capabilities", ())
def browser_capabilities() -> List:
    return list_of(identifier(c) for c in get_dataset().capabilities())


@_entry("browser-versions", ("browser",))
def browser_versions(browser: Value) -> List:
    assert_type(browser, String, "browser")
    data = get_dataset()
    with _lookups():
        versions = data.versions(browser.value)
    return list_of(quoted_string(v) for v in versions)


@_entry("browser-requires-prefix", ("browser", "version", "capability"))
def browser_requires_prefix(browser: Value, version: Value, capability: Value) -> Bool:
    """Whether the browser uses a prefix for the capability at the version or later."""
    assert_type(browser, String, "browser")
    assert_type(version, String, "version")
    assert_type(capability, String, "capability")
    data = get_dataset()
    with _lookups():
        needed = data.requires_prefix(browser.value, version.value, capability.value)
    return boolean(needed)


@_entry("browser-prefix", ("browser",))
def browser_prefix(browser: Value) -> String:
    assert_type(browser, String, "browser")
    data = get_dataset()
    with _lookups():
        return identifier(data.prefix(browser.value))


@_entry("browser-prefixes", ("browsers",))
def browser_prefixes(browsers: Value) -> List:
    """The prefixes used by the given browsers (a list, or a single name)."""
    if isinstance(browsers, String):
        browsers = list_of([browsers])
    assert_type(browsers, List, "browsers")
    for b in browsers.items:
        assert_type(b, String, "browsers")
    data = get_dataset()
    with _lookups():
        found = data.prefixes([b.value for b in browsers.items])
    return list_of(identifier(p) for p in found)


@_entry("omitted-usage", ("browser", "min_version"))
def omitted_usage(browser: Value, min_version: Value) -> Number:
    """The percent of users left out by requiring min_version of the browser."""
    assert_type(browser, String, "browser")
    assert_type(min_version, String, "min_version")
    data = get_dataset()
    with _lookups():
        return number(data.omitted_usage(browser.value, min_version.value))


@_entry("prefix-usage", ("prefix", "capability"))
def prefix_usage(prefix: Value, capability: Value) -> Number:
    """The percent of users relying on a prefix for a capability."""
    assert_type(prefix, String, "prefix")
    assert_type(capability, String, "capability")
    data = get_dataset()
    with _lookups():
        return number(data.prefixed_usage(prefix.value, capability.value))


@_entry("compare-browser-versions", ("browser", "version1", "version2"))
def compare_browser_versions(browser: Value, version1: Value, version2: Value) -> Number:
    """
    Compare two versions of a browser.

    Returns:
        0 if they are the same, <0 if version1 is older, >0 if it is newer
    """
    assert_type(browser, String, "browser")
    assert_type(version1, String, "version1")
    assert_type(version2, String, "version2")
    data = get_dataset()
    with _lookups():
        return number(data.compare_versions(browser.value, version1.value, version2.value))


@_entry("browser-minimums", ("capability",), ("capability", "prefix"))
def browser_minimums(capability: Value, prefix: Value = NULL) -> Map:
    """
    Map of browsers to the first version the capability works unprefixed.

    With a prefix, only browsers using it are returned, and a version
    supporting the capability with that prefix counts as well.
    """
    assert_type(capability, String, "capability")
    if not isinstance(prefix, Null):
        assert_type(prefix, String, "prefix")
    prefix_name = None if isinstance(prefix, Null) else prefix.value
    data = get_dataset()
    with _lookups():
        minimums = data.browser_minimums(capability.value, prefix_name)
    return Map(tuple((identifier(b), quoted_string(v)) for b, v in minimums.items()))
