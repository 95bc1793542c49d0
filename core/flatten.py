# core/flatten.py
# This file is part of Fiberprops - Component prop extraction
#
# Recursive flattening of prop values into dotted-path leaves

"""Flattening of nested prop values.

A prop value may be a primitive or an arbitrarily nested combination of
mappings and sequences. `flatten` walks it depth-first and lazily yields one
`LeafEntry` per primitive it reaches, extending the dotted path with the key
(for mappings) or the index (for sequences) at each level.

Traversal Rules:
- Primitives yield a single leaf at the current path
- Mappings are descended in their own key order
- Lists and tuples are descended in ascending index order
- None, callables and opaque values yield nothing
- A container already on the current descent path is not entered again
"""

from collections.abc import Mapping
from typing import Any, FrozenSet, Iterator, Tuple

from model.access import as_mapping
from model.leaf import LeafEntry, ValueShape, classify
from utils.logger import get_logger


def flatten(path: str, value: Any) -> Iterator[LeafEntry]:
    """Yield the leaves of `value` rooted at `path`.

    Args:
        path: Dotted path of `value` (the prop name at the top level)
        value: Prop value to flatten

    Yields:
        LeafEntry: One entry per primitive, in traversal order

    Example:
        >>> list(flatten("a", {"x": [1, 2]}))
        [LeafEntry(path='a.x.0', value=1), LeafEntry(path='a.x.1', value=2)]
    """
    return _flatten(path, value, frozenset())


def _flatten(path: str, value: Any, ancestors: FrozenSet[int]) -> Iterator[LeafEntry]:
    shape = classify(value)

    if shape is ValueShape.PRIMITIVE:
        yield LeafEntry(path, value)
        return

    if not shape.is_container():
        get_logger().prop_skipped(path, shape.name.lower())
        return

    if id(value) in ancestors:
        get_logger().prop_skipped(path, "cycle")
        return

    inner = ancestors | {id(value)}
    for key, child in _children(value, shape):
        yield from _flatten(f"{path}.{key}", child, inner)


def _children(value: Any, shape: ValueShape) -> Iterator[Tuple[Any, Any]]:
    """Enumerate (key, child) pairs of a container value."""
    if shape is ValueShape.ARRAY:
        yield from enumerate(value)
        return

    if isinstance(value, Mapping):
        yield from value.items()
        return

    # attribute objects: public instance attributes only
    for key, child in as_mapping(value).items():
        if not key.startswith("_"):
            yield key, child
