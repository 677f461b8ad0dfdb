"""
Tests for the Value Tree Analyzer.

Tests verify that the analyzer correctly:
    - Measures depth and node count
    - Collects the aspects a tree carries
    - Counts the leaves resolution would substitute
"""

from crossbrowser.analyzer import analyze_value, aspect_inventory
from crossbrowser.aspects import LEGACY, FallbackValue, PrefixedValue
from crossbrowser.values import List, Map, Number, Separator, String, identifier


def prefixed(name, *tokens):
    return PrefixedValue(base=String(name), renderings={t: String(f"-{t}-{name}") for t in tokens})


def test_plain_leaf():
    """A plain leaf is a single node with no aspects."""
    metrics = analyze_value(String("red"))
    assert metrics.depth == 0
    assert metrics.node_count == 1
    assert metrics.aspects == set()


def test_list_depth_and_count():
    lst = List((String("a"), List((String("b"), String("c")), Separator.SPACE)), Separator.COMMA)
    metrics = analyze_value(lst)
    assert metrics.depth == 2
    assert metrics.node_count == 5


def test_aspects_collected_from_nested_values():
    lst = List((prefixed("a", "webkit", "moz"), List((FallbackValue(String("flex"), String("block")),))))
    metrics = analyze_value(lst)
    assert metrics.aspects == {"webkit", "moz", LEGACY}


def test_aspect_value_children_counted():
    """Base, alternates and fallbacks are all part of the tree."""
    metrics = analyze_value(prefixed("a", "webkit", "moz"))
    assert metrics.depth == 1
    assert metrics.node_count == 4


def test_map_entries_counted():
    m = Map(((identifier("ie"), Number(9)),))
    assert analyze_value(m).node_count == 3


def test_aspect_inventory_counts_leaves():
    lst = List((
        prefixed("a", "webkit", "moz"),
        prefixed("b", "webkit"),
        List((FallbackValue(String("flex"), String("block")), String("c")), Separator.SPACE),
    ), Separator.COMMA)
    assert aspect_inventory(lst) == {LEGACY: 1, "moz": 1, "webkit": 2}


def test_aspect_inventory_ignores_map_entries():
    m = Map(((identifier("k"), prefixed("a", "webkit")),))
    assert aspect_inventory(m) == {}


def test_aspect_inventory_plain_tree_empty():
    assert aspect_inventory(List((String("a"),))) == {}
