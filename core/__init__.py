# core/__init__.py
# This file is part of Fiberprops - Component prop extraction
#
# Core module public API for prop extraction

"""Core components for extracting component props from fiber nodes.

This module turns the property bag of one node of a rendered component tree
into a compact, log-friendly string. Which props are surfaced is decided per
component type by an include/exclude configuration; nested values are
flattened into dotted paths and rendered as ``[path=value];`` segments.

Primary Components:
    PropExtractor: Extractor bound to one configuration
    extract_props: One-shot extraction for a type label, node and config
    flatten: Lazy flattening of nested values into leaf entries
    render_leaves: Rendering of leaf entries into the output string

Example:
    >>> from core import extract_props
    >>> config = {"Element": {"include": ["a", "c"], "exclude": []}}
    >>> extract_props("Element", {"memoizedProps": {"a": "foo", "c": True}}, config)
    '[a=foo];[c=true];'
"""

from .extractor import (
    PropExtractor,
    effective_names,
    extract_props,
    render_leaf,
    render_leaves,
    render_value,
)
from .flatten import flatten

__all__ = [
    "PropExtractor",
    "extract_props",
    "effective_names",
    "flatten",
    "render_value",
    "render_leaf",
    "render_leaves",
]

__version__ = "1.0.0"
__description__ = "Core components for fiber prop extraction"
