"""
Tests for serialization and deserialization of value trees.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `crossbrowser.serialization`.
"""

import pytest
from crossbrowser.aspects import LEGACY, FallbackValue, PrefixedValue
from crossbrowser.errors import SerializationError
from crossbrowser.resolver import resolve
from crossbrowser.serialization import (
    value_from_dict,
    value_from_json,
    value_from_yaml,
    value_to_dict,
    value_to_json,
    value_to_yaml,
)
from crossbrowser.values import (
    NULL,
    Bool,
    List,
    Map,
    Number,
    Separator,
    String,
    Value,
    identifier,
    quoted_string,
)


def build_sample_tree() -> List:
    gradient = PrefixedValue(
        base=String("linear-gradient(red, blue)"),
        renderings={
            "webkit": String("-webkit-linear-gradient(red, blue)"),
            "moz": String("-moz-linear-gradient(red, blue)"),
        },
    )
    display = FallbackValue(primary=String("flex"), legacy=String("block"))
    spacing = List((Number(0), Number(1.5, "em"), Bool(True), NULL), Separator.SPACE)
    labels = Map(((identifier("ie"), quoted_string("9")),))
    return List((gradient, display, spacing, labels), Separator.COMMA)


def test_json_roundtrip():
    tree = build_sample_tree()
    before = value_to_dict(tree)
    json_str = value_to_json(tree)
    restored = value_from_json(json_str)
    after = value_to_dict(restored)
    assert before == after
    assert restored == tree


def test_yaml_roundtrip():
    tree = build_sample_tree()
    before = value_to_dict(tree)
    yaml_str = value_to_yaml(tree)
    restored = value_from_yaml(yaml_str)
    after = value_to_dict(restored)
    assert before == after


def test_restored_tree_resolves_like_original():
    tree = build_sample_tree()
    restored = value_from_json(value_to_json(tree))
    assert resolve("moz", restored) == resolve("moz", tree)
    assert resolve(LEGACY, restored) == resolve(LEGACY, tree)


def test_prefixed_dict_shape():
    d = value_to_dict(PrefixedValue(base=String("a"), renderings={"ms": String("-ms-a")}))
    assert d["type"] == "prefixed"
    assert d["renderings"]["ms"] == {"type": "string", "value": "-ms-a", "quoted": False}


def test_unknown_value_type():
    class Odd(Value):
        def to_css(self, options=None):
            return "odd"

    with pytest.raises(SerializationError):
        value_to_dict(Odd())


def test_unknown_dict_type():
    with pytest.raises(SerializationError):
        value_from_dict({"type": "color"})
