"""
Serialization helpers for value trees (plain values and aspect values).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from crossbrowser.aspects import FallbackValue, PrefixedValue
from crossbrowser.errors import SerializationError
from crossbrowser.values import (
    NULL,
    Bool,
    List,
    Map,
    Null,
    Number,
    Separator,
    String,
    Value,
)


def value_to_dict(value: Value) -> Dict[str, Any]:
    if isinstance(value, String):
        return {"type": "string", "value": value.value, "quoted": value.quoted}
    if isinstance(value, Number):
        return {"type": "number", "value": value.value, "unit": value.unit}
    if isinstance(value, Bool):
        return {"type": "bool", "value": value.value}
    if isinstance(value, Null):
        return {"type": "null"}
    if isinstance(value, List):
        return {
            "type": "list",
            "separator": value.separator.value,
            "items": [value_to_dict(item) for item in value.items],
        }
    if isinstance(value, Map):
        return {
            "type": "map",
            "pairs": [[value_to_dict(k), value_to_dict(v)] for k, v in value.pairs],
        }
    if isinstance(value, PrefixedValue):
        return {
            "type": "prefixed",
            "base": value_to_dict(value.base),
            "renderings": {aspect: value_to_dict(v) for aspect, v in value.renderings.items()},
        }
    if isinstance(value, FallbackValue):
        return {
            "type": "fallback",
            "primary": value_to_dict(value.primary),
            "legacy": value_to_dict(value.legacy),
        }
    raise SerializationError(f"Unsupported Value type: {type(value)}")


def value_from_dict(d: Dict[str, Any]) -> Value:
    t = d.get("type")
    if t == "string":
        return String(d["value"], quoted=d.get("quoted", False))
    if t == "number":
        return Number(d["value"], unit=d.get("unit", ""))
    if t == "bool":
        return Bool(d["value"])
    if t == "null":
        return NULL
    if t == "list":
        items = tuple(value_from_dict(item) for item in d.get("items", []))
        return List(items, Separator(d.get("separator", Separator.SPACE.value)))
    if t == "map":
        return Map(tuple((value_from_dict(k), value_from_dict(v)) for k, v in d.get("pairs", [])))
    if t == "prefixed":
        renderings = {aspect: value_from_dict(v) for aspect, v in d.get("renderings", {}).items()}
        return PrefixedValue(base=value_from_dict(d["base"]), renderings=renderings)
    if t == "fallback":
        return FallbackValue(primary=value_from_dict(d["primary"]), legacy=value_from_dict(d["legacy"]))
    raise SerializationError(f"Unsupported value dict type: {t}")


def value_to_json(value: Value) -> str:
    return json.dumps(value_to_dict(value), sort_keys=True)


def value_from_json(s: str) -> Value:
    d = json.loads(s)
    return value_from_dict(d)


def value_to_yaml(value: Value) -> str:
    return yaml.safe_dump(value_to_dict(value))


def value_from_yaml(s: str) -> Value:
    d = yaml.safe_load(s)
    return value_from_dict(d)
