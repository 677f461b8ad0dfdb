"""
Value Tree Analyzer — inventory of aspect usage in a value tree.

Answers questions a host asks before resolving:
    - How deep and how large is the tree?
    - Which aspects could resolution change anything for?
    - How many leaves support each aspect?

IMPORTANT: This is read-only. It never resolves or rebuilds values.
"""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Set

from crossbrowser.aspects import AspectValue
from crossbrowser.values import List, Map, Value


@dataclass
class ValueMetrics:
    """Metrics about a single value tree."""
    depth: int = 0
    node_count: int = 0
    aspects: Set[str] = field(default_factory=set)


def analyze_value(value: Value) -> ValueMetrics:
    """
    Recursively analyze a value tree.

    Lists and maps count as nodes one level above their entries. The
    children of an aspect value (base, alternates, fallback) are counted
    too, so the metrics describe everything the tree could render as.
    """
    metrics = ValueMetrics(node_count=1)

    if isinstance(value, List):
        children = list(value.items)
    elif isinstance(value, Map):
        children = [v for pair in value.pairs for v in pair]
    elif isinstance(value, AspectValue):
        metrics.aspects.update(value.aspects)
        children = list(value.children())
    else:
        children = []

    for child in children:
        sub = analyze_value(child)
        metrics.depth = max(metrics.depth, 1 + sub.depth)
        metrics.node_count += sub.node_count
        metrics.aspects.update(sub.aspects)

    return metrics


def aspect_inventory(value: Value) -> Dict[str, int]:
    """
    Count, per aspect, the leaves resolution would substitute.

    Only the positions the resolver visits are counted: list entries,
    recursively. Map entries and the children of aspect values are not.
    """
    counts: Dict[str, int] = defaultdict(int)
    stack = [value]
    while stack:
        node = stack.pop()
        if isinstance(node, List):
            stack.extend(node.items)
        elif isinstance(node, AspectValue):
            for aspect in node.aspects:
                counts[aspect] += 1
    return dict(sorted(counts.items()))
