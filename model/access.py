# model/access.py

"""
Lenient field access over the two input styles a fiber dump arrives in:
plain mappings keyed by camelCase names (decoded JSON) and attribute
objects such as the dataclasses in this package. Every accessor answers
``None`` or an empty value rather than raising.
"""

from __future__ import annotations
import numbers
from collections.abc import Iterable, Mapping
from typing import Any, Tuple


def field_of(obj: Any, *names: str) -> Any:
    """Return the first non-None value stored under any of `names`."""
    if obj is None:
        return None
    for name in names:
        if isinstance(obj, Mapping):
            value = obj.get(name)
        else:
            value = getattr(obj, name, None)
        if value is not None:
            return value
    return None


def as_mapping(obj: Any) -> Mapping:
    """View `obj` as a mapping; objects without keys read as empty."""
    if isinstance(obj, Mapping):
        return obj
    if obj is not None and not callable(obj) and hasattr(obj, "__dict__"):
        return vars(obj)
    return {}


def name_list(value: Any) -> Tuple[str, ...]:
    """Normalize a configured list of prop names to a tuple of strings."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, Iterable) or isinstance(value, Mapping):
        return ()
    return tuple(item if isinstance(item, str) else str(item) for item in value)


def is_present(value: Any) -> bool:
    """Truthiness as a JSON producer sees it: containers and objects always count."""
    if value is None:
        return False
    if isinstance(value, (str, numbers.Number)):
        return bool(value)
    return True
