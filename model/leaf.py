# model/leaf.py

"""
Leaf entries and value shapes.

Flattening turns a prop value into ``(dotted path, primitive)`` pairs. The
shape of each value decides how it is flattened:

  •  PRIMITIVE  strings, numbers and booleans, emitted as a leaf
  •  ARRAY      lists and tuples, descended by index
  •  OBJECT     mappings (or attribute objects), descended by key
  •  ABSENT     None, skipped
  •  CALLABLE   functions and other callables, skipped
  •  OPAQUE     anything else without enumerable keys, skipped
"""

from __future__ import annotations
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union

Primitive = Union[str, int, float, bool]


class ValueShape(Enum):
    PRIMITIVE = auto()
    ARRAY = auto()
    OBJECT = auto()
    ABSENT = auto()
    CALLABLE = auto()
    OPAQUE = auto()

    def is_container(self) -> bool:
        return self in (ValueShape.ARRAY, ValueShape.OBJECT)


def classify(value: Any) -> ValueShape:
    """Return the shape tag that drives flattening of `value`."""
    if value is None:
        return ValueShape.ABSENT
    if isinstance(value, (str, numbers.Number)):
        return ValueShape.PRIMITIVE
    if isinstance(value, Mapping):
        return ValueShape.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueShape.ARRAY
    if callable(value):
        return ValueShape.CALLABLE
    if hasattr(value, "__dict__"):
        return ValueShape.OBJECT
    return ValueShape.OPAQUE


@dataclass(frozen=True, slots=True)
class LeafEntry:
    path: str
    value: Primitive

    def __str__(self) -> str:
        return f"{self.path}={self.value}"
