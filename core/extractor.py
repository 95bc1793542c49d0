# core/extractor.py
# This file is part of Fiberprops - Component prop extraction
#
# Prop extraction and rendering for fiber nodes

"""Extraction of configured props from fiber nodes.

The extractor turns a component-type label, a fiber node and a
`PropExtractorConfig` into a compact string of ``[path=value];`` segments:

1. Look up the rule for the type label; no rule or no node means no output.
2. Resolve the node's prop source once (state node props or memoized props).
3. Compute the effective prop names: the rule's ``include`` list, widened by
   any event-declared names carried on the state node, minus ``exclude``.
4. Flatten each named value into dotted-path leaves.
5. Render every leaf with ``[`` and ``]`` removed from its value text.

Extraction never raises for missing or malformed data: anything that cannot
be rendered is left out, and the worst case is the empty string. Neither the
node nor the configuration is modified, so both may be shared between calls.
"""

import math
from typing import Any, Iterable, List, Optional, Sequence

from model.fiber_node import PropSource, resolve_source
from model.leaf import LeafEntry
from model.prop_rule import PropExtractorConfig, PropRule, rule_for
from .flatten import flatten
from utils.logger import get_logger

_BRACKETS = str.maketrans("", "", "[]")


class PropExtractor:
    """Extracts props from fiber nodes according to a fixed configuration.

    Attributes:
        config: Mapping of component-type label to extraction rule
    """

    def __init__(self, config: Optional[PropExtractorConfig]):
        self.config = config

    def rule(self, type_label: str) -> Optional[PropRule]:
        """Return the rule configured for `type_label`, if any."""
        return rule_for(self.config, type_label)

    def leaves(self, type_label: str, node: Any) -> List[LeafEntry]:
        """Return the flattened leaves selected for `node`, in output order.

        Args:
            type_label: Component type, matched exactly against config keys
            node: Fiber node (mapping or attribute object), or None

        Returns:
            List of leaf entries; empty if nothing is configured or found
        """
        if node is None:
            return []

        rule = self.rule(type_label)
        if rule is None:
            return []

        logger = get_logger()
        source = resolve_source(node)
        names = effective_names(rule, source)
        logger.extraction_start(type_label, source.kind.value, names)

        leaves: List[LeafEntry] = []
        for name in names:
            value = source.props.get(name)
            if value is None:
                logger.prop_skipped(name, "absent")
                continue
            leaves.extend(flatten(name, value))

        logger.extraction_result(type_label, len(leaves))
        return leaves

    def extract(self, type_label: str, node: Any) -> str:
        """Return the rendered prop string for `node`."""
        return render_leaves(self.leaves(type_label, node))


def extract_props(type_label: str, node: Any, config: Optional[PropExtractorConfig]) -> str:
    """Extract and render the configured props of a fiber node.

    Args:
        type_label: Component type, matched exactly against config keys
        node: Fiber node, or None
        config: Mapping of component-type label to extraction rule

    Returns:
        Concatenated ``[path=value];`` segments, or "" when nothing applies

    Example:
        >>> config = {"Element": {"include": ["a", "c"], "exclude": []}}
        >>> node = {"stateNode": {"props": {"a": "foo", "b": 7, "c": True}}}
        >>> extract_props("Element", node, config)
        '[a=foo];[c=true];'
    """
    return PropExtractor(config).extract(type_label, node)


def effective_names(rule: PropRule, source: PropSource) -> List[str]:
    """Compute the ordered prop names to extract for one call.

    The rule's names keep their configured order. Event-declared names not
    already included are slotted in according to where they sit in the prop
    bag: ahead of the first included name that follows them there. Names
    missing from the bag go last. Excluded names are then dropped.
    """
    names = list(dict.fromkeys(rule.include))
    extras = [name for name in dict.fromkeys(source.event_include) if name not in names]
    if extras:
        names = _slot_by_bag_order(names, extras, list(source.props))
    return [name for name in names if not rule.excludes(name)]


def _slot_by_bag_order(
    names: List[str], extras: Sequence[str], bag_order: Iterable[Any]
) -> List[str]:
    position = {key: index for index, key in enumerate(bag_order)}
    merged = list(names)
    trailing = []

    for extra in extras:
        if extra not in position:
            trailing.append(extra)
            continue
        at = next(
            (
                index
                for index, name in enumerate(merged)
                if position.get(name, -1) > position[extra]
            ),
            len(merged),
        )
        merged.insert(at, extra)

    return merged + trailing


def render_value(value: Any) -> str:
    """String form of a leaf value, with brackets stripped."""
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, float):
        text = _render_float(value)
    else:
        text = str(value)
    return text.translate(_BRACKETS)


def _render_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # exponent form from 1e21 up, as str() already gives
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def render_leaf(leaf: LeafEntry) -> str:
    """Render one leaf as ``[path=value];``."""
    return f"[{leaf.path}={render_value(leaf.value)}];"


def render_leaves(leaves: Iterable[LeafEntry]) -> str:
    """Concatenate the rendered segments of `leaves`."""
    return "".join(render_leaf(leaf) for leaf in leaves)
