# test/core_tests/test_flatten_scenarios.py

import pytest
from core.flatten import flatten
from core.extractor import render_leaf, render_leaves, render_value
from model.leaf import LeafEntry


def pairs(path, value):
    """Flatten and return plain (path, value) tuples."""
    return [(leaf.path, leaf.value) for leaf in flatten(path, value)]


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self._cache = "hidden"


class TestFlattenScenarios:
    """
    Flattening of prop values into dotted-path leaves: primitives, nested
    mappings and sequences, skipped shapes and self-referencing containers.
    """

    def test_01_primitive_is_a_single_leaf(self):
        assert pairs("a", "foo") == [("a", "foo")]
        assert pairs("b", 7) == [("b", 7)]
        assert pairs("c", False) == [("c", False)]

    def test_02_mapping_keys_in_insertion_order(self):
        assert pairs("a", {"z": 1, "y": 2}) == [("a.z", 1), ("a.y", 2)]

    def test_03_sequences_by_index(self):
        assert pairs("a", [3, 4, 5]) == [("a.0", 3), ("a.1", 4), ("a.2", 5)]
        assert pairs("a", ("x",)) == [("a.0", "x")]

    def test_04_mixed_nesting(self):
        value = {"rows": [{"id": 1}, {"id": 2, "tags": ["t"]}], "n": None}
        assert pairs("grid", value) == [
            ("grid.rows.0.id", 1),
            ("grid.rows.1.id", 2),
            ("grid.rows.1.tags.0", "t"),
        ]

    @pytest.mark.parametrize("value", [None, len, lambda: 1, set([1]), b"bytes", {}, []])
    def test_05_values_without_leaves(self, value):
        assert pairs("a", value) == []

    def test_06_callables_inside_containers_are_skipped(self):
        assert pairs("a", {"onClick": print, "label": "ok"}) == [("a.label", "ok")]

    def test_07_attribute_objects_use_public_attributes(self):
        assert pairs("p", Point(1, 2)) == [("p.x", 1), ("p.y", 2)]

    def test_08_self_reference_terminates(self):
        value = {"name": "loop"}
        value["self"] = value
        assert pairs("a", value) == [("a.name", "loop")]

    def test_09_shared_subtree_is_not_a_cycle(self):
        shared = {"k": 1}
        assert pairs("a", [shared, shared]) == [("a.0.k", 1), ("a.1.k", 1)]

    def test_10_flatten_is_lazy(self):
        leaves = flatten("a", [1, 2, 3])
        assert next(leaves) == LeafEntry("a.0", 1)


class TestRenderScenarios:
    """Rendering of leaf values and segments."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("foo", "foo"),
            (True, "true"),
            (False, "false"),
            (7, "7"),
            (0, "0"),
            (2.0, "2"),
            (2.5, "2.5"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (-1e21, "-1e+21"),
            (float("nan"), "NaN"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
            ("[x]", "x"),
            ("a]b[c", "abc"),
            ("", ""),
        ],
    )
    def test_render_value(self, value, expected):
        assert render_value(value) == expected

    def test_render_leaf_keeps_path(self):
        assert render_leaf(LeafEntry("a.0", "v[1]")) == "[a.0=v1];"

    def test_render_leaves_concatenates(self):
        leaves = [LeafEntry("a", 1), LeafEntry("b", True)]
        assert render_leaves(leaves) == "[a=1];[b=true];"
        assert render_leaves([]) == ""
