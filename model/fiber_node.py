# model/fiber_node.py

"""
Fiber nodes
===========

A fiber node is one element of a rendered component tree. Its property bag
lives in one of two places:

  •  ``stateNode.props`` on the component instance (the primary holder), which
     may also carry ``heapOptions.eventProps.include``, extra prop names the
     component asks to surface;
  •  ``memoizedProps`` on the fiber itself (the fallback holder).

`resolve_source` inspects a node once and answers a `PropSource`, so the
extractor never has to sniff the input shape again.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from .access import as_mapping, field_of, is_present, name_list


@dataclass(frozen=True, slots=True)
class StateNode:
    props: Mapping[str, Any] = field(default_factory=dict)
    heap_options: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StateNode:
        """Build a state node from its JSON form (``props``, ``heapOptions``)."""
        props = data.get("props")
        heap_options = data.get("heapOptions")
        if props is not None and not isinstance(props, Mapping):
            raise TypeError(f"stateNode.props must be an object, got {type(props).__name__}")
        if heap_options is not None and not isinstance(heap_options, Mapping):
            raise TypeError(
                f"stateNode.heapOptions must be an object, got {type(heap_options).__name__}"
            )
        return cls(props=props or {}, heap_options=heap_options)


@dataclass(frozen=True, slots=True)
class FiberNode:
    state_node: Optional[StateNode] = None
    memoized_props: Optional[Any] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FiberNode:
        """Build a fiber node from its JSON form (``stateNode``, ``memoizedProps``)."""
        raw_state = data.get("stateNode")
        if raw_state is not None and not isinstance(raw_state, Mapping):
            raise TypeError(
                f"stateNode must be an object or null, got {type(raw_state).__name__}"
            )
        state_node = StateNode.from_dict(raw_state) if raw_state is not None else None
        return cls(state_node=state_node, memoized_props=data.get("memoizedProps"))


class SourceKind(Enum):
    PRIMARY = "stateNode"
    FALLBACK = "memoizedProps"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class PropSource:
    """Where a node's props were found, plus any event-declared prop names."""

    kind: SourceKind
    props: Mapping[str, Any] = field(default_factory=dict)
    event_include: Tuple[str, ...] = ()


EMPTY_SOURCE = PropSource(SourceKind.EMPTY)


def resolve_source(node: Any) -> PropSource:
    """Resolve the property bag of `node` (mapping or attribute object)."""
    state_node = field_of(node, "stateNode", "state_node")
    if is_present(state_node):
        heap_options = field_of(state_node, "heapOptions", "heap_options")
        event_props = field_of(heap_options, "eventProps", "event_props")
        return PropSource(
            kind=SourceKind.PRIMARY,
            props=as_mapping(field_of(state_node, "props")),
            event_include=name_list(field_of(event_props, "include")),
        )

    memoized_props = field_of(node, "memoizedProps", "memoized_props")
    if is_present(memoized_props):
        return PropSource(kind=SourceKind.FALLBACK, props=as_mapping(memoized_props))

    return EMPTY_SOURCE


@dataclass(frozen=True, slots=True)
class FiberSample:
    """One record of a fiber dump: the component type and its node."""

    type_label: str
    node: Optional[FiberNode]
