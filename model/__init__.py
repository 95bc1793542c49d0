# model/__init__.py

"""
Domain objects for prop extraction:
fiber nodes and their resolved prop sources, per-type extraction rules,
and the leaf entries flattening produces. These types carry no extraction
logic of their own.
"""

from .fiber_node import (
    EMPTY_SOURCE,
    FiberNode,
    FiberSample,
    PropSource,
    SourceKind,
    StateNode,
    resolve_source,
)
from .leaf import LeafEntry, ValueShape, classify
from .prop_rule import PropExtractorConfig, PropRule, rule_for

__all__ = [
    "FiberNode",
    "StateNode",
    "FiberSample",
    "PropSource",
    "SourceKind",
    "EMPTY_SOURCE",
    "resolve_source",
    "LeafEntry",
    "ValueShape",
    "classify",
    "PropRule",
    "PropExtractorConfig",
    "rule_for",
]
