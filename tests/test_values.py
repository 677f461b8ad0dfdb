"""
Tests for the host value model.

These tests verify:
    - Values can be created and stringified
    - Values are immutable
    - Lists keep order and separator
    - Plain values take part in no aspect
"""

import pytest
from crossbrowser.config import OutputStyle, RenderOptions
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
    list_of,
    map_of,
    quoted_string,
)


class TestString:
    """Test identifiers and quoted strings."""

    def test_identifier_renders_bare(self):
        """Identifiers render without quotes."""
        assert identifier("webkit").to_css() == "webkit"

    def test_quoted_string_renders_quoted(self):
        """Quoted strings render with double quotes."""
        assert quoted_string("10.1").to_css() == '"10.1"'

    def test_quoted_string_escapes_quotes(self):
        """Embedded quotes are escaped."""
        assert quoted_string('say "hi"').to_css() == '"say \\"hi\\""'

    def test_str_is_to_css(self):
        """str() uses the default rendering."""
        assert str(String("red")) == "red"

    def test_string_immutable(self):
        """Strings should be immutable."""
        s = String("red")
        with pytest.raises(AttributeError):
            s.value = "blue"


class TestNumber:
    """Test numbers and their formatting."""

    def test_integer(self):
        assert Number(5).to_css() == "5"

    def test_integral_float_drops_fraction(self):
        assert Number(5.0, "px").to_css() == "5px"

    def test_rounds_to_precision(self):
        """Numbers round to the configured precision."""
        assert Number(1 / 3).to_css(RenderOptions(precision=2)) == "0.33"

    def test_compressed_drops_leading_zero(self):
        options = RenderOptions(style=OutputStyle.COMPRESSED)
        assert Number(0.5, "em").to_css(options) == ".5em"

    def test_small_numbers_never_use_exponents(self):
        assert Number(0.00001).to_css() == "0.00001"
        assert Number(0.000001).to_css() == "0"
        assert Number(-0.00002, "px").to_css() == "-0.00002px"
        assert Number(1e-05).to_css(RenderOptions(style=OutputStyle.COMPRESSED)) == ".00001"


class TestBoolAndNull:

    def test_bool(self):
        assert Bool(True).to_css() == "true"
        assert Bool(False).to_css() == "false"

    def test_null_renders_empty(self):
        assert NULL.to_css() == ""


class TestList:
    """Test list values."""

    def test_default_separator_is_space(self):
        assert List((String("a"), String("b"))).separator is Separator.SPACE

    def test_space_list(self):
        lst = List((Number(0), String("auto")), Separator.SPACE)
        assert lst.to_css() == "0 auto"

    def test_comma_list(self):
        lst = list_of([String("a"), String("b")])
        assert lst.separator is Separator.COMMA
        assert lst.to_css() == "a, b"

    def test_compressed_comma_list(self):
        lst = list_of([String("a"), String("b")])
        assert lst.to_css(RenderOptions(style=OutputStyle.COMPRESSED)) == "a,b"

    def test_items_become_tuple(self):
        """Lists given a Python list store a tuple."""
        lst = List([String("a")])
        assert isinstance(lst.items, tuple)

    def test_null_items_skipped_in_output(self):
        lst = List((String("a"), NULL, String("b")))
        assert lst.to_css() == "a b"

    def test_equality_is_structural(self):
        assert list_of([String("a")]) == list_of([String("a")])
        assert list_of([String("a")]) != List((String("a"),), Separator.SPACE)

    def test_list_immutable(self):
        lst = list_of([String("a")])
        with pytest.raises(AttributeError):
            lst.separator = Separator.SPACE


class TestMap:

    def test_get(self):
        m = map_of({identifier("chrome"): quoted_string("26")})
        assert m.get(identifier("chrome")) == quoted_string("26")
        assert m.get(identifier("ie")) is None

    def test_keys_keep_order(self):
        m = Map(((identifier("b"), NULL), (identifier("a"), NULL)))
        assert m.keys() == (identifier("b"), identifier("a"))

    def test_to_css(self):
        m = map_of({identifier("ie"): quoted_string("9")})
        assert m.to_css() == '(ie: "9")'


class TestPlainValuesHaveNoAspect:
    """Plain values never support an aspect."""

    @pytest.mark.parametrize("value", [
        String("a"), Number(1), Bool(True), NULL, List(()), Map(()),
    ])
    def test_plain_value(self, value):
        assert isinstance(value, Value)
        assert value.has_aspect() is False
        assert value.supports("webkit") is False
        assert value.supports("legacy") is False
