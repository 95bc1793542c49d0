# test/model_tests/test_prop_rule_scenarios.py

import pytest
from core.extractor import effective_names
from model.fiber_node import PropSource, SourceKind
from model.leaf import LeafEntry, ValueShape, classify
from model.prop_rule import PropRule, rule_for


def primary(props, event_include=()):
    return PropSource(SourceKind.PRIMARY, props, tuple(event_include))


class TestPropRuleScenarios:
    """
    PropRule normalization and lookup by component type.
    """

    def test_01_lists_are_stored_as_tuples(self):
        rule = PropRule(include=["a", "c"], exclude=["b"])
        assert rule.include == ("a", "c")
        assert rule.exclude == ("b",)

    def test_02_defaults_are_empty(self):
        assert PropRule() == PropRule(include=None, exclude=None)
        assert PropRule().include == ()

    def test_03_coerce_from_mapping(self):
        assert PropRule.coerce({"include": ["a"]}) == PropRule(include=("a",))
        assert PropRule.coerce(None) is None
        rule = PropRule(include=("a",))
        assert PropRule.coerce(rule) is rule

    def test_04_single_name_string(self):
        assert PropRule(include="a").include == ("a",)

    def test_05_excludes(self):
        rule = PropRule(include=["a"], exclude=["b"])
        assert rule.excludes("b") is True
        assert rule.excludes("a") is False

    def test_06_rule_for_matches_exactly(self):
        config = {"Element": {"include": ["a"]}}
        assert rule_for(config, "Element") == PropRule(include=("a",))
        assert rule_for(config, "element") is None
        assert rule_for(config, "Other") is None

    @pytest.mark.parametrize("config", [None, [], "Element"])
    def test_07_rule_for_without_mapping(self, config):
        assert rule_for(config, "Element") is None

    def test_08_rule_for_non_string_label(self):
        assert rule_for({"Element": {}}, ["Element"]) is None

    def test_09_to_dict(self):
        assert PropRule(include=["a"]).to_dict() == {"include": ["a"], "exclude": []}


class TestEffectiveNames:
    """Ordering of included, event-declared and excluded names."""

    def test_01_rule_order_without_extras(self):
        rule = PropRule(include=["c", "a"])
        assert effective_names(rule, primary({"a": 1, "c": 2})) == ["c", "a"]

    def test_02_extra_slotted_by_bag_order(self):
        rule = PropRule(include=["a", "c"])
        source = primary({"a": "foo", "b": 7, "c": True}, ["b"])
        assert effective_names(rule, source) == ["a", "b", "c"]

    def test_03_extra_after_last_included(self):
        rule = PropRule(include=["a", "b"])
        source = primary({"a": 1, "b": 2, "c": 3}, ["c"])
        assert effective_names(rule, source) == ["a", "b", "c"]

    def test_04_extra_before_first_included(self):
        rule = PropRule(include=["b", "c"])
        source = primary({"a": 1, "b": 2, "c": 3}, ["a"])
        assert effective_names(rule, source) == ["a", "b", "c"]

    def test_05_extra_missing_from_bag_goes_last(self):
        rule = PropRule(include=["a"])
        source = primary({"a": 1}, ["zzz"])
        assert effective_names(rule, source) == ["a", "zzz"]

    def test_06_extra_already_included_is_not_repeated(self):
        rule = PropRule(include=["a", "b"])
        source = primary({"a": 1, "b": 2}, ["b", "b"])
        assert effective_names(rule, source) == ["a", "b"]

    def test_07_exclude_applies_last(self):
        rule = PropRule(include=["a", "b"], exclude=["a", "c"])
        source = primary({"a": 1, "b": 2, "c": 3}, ["c"])
        assert effective_names(rule, source) == ["b"]


class TestValueShapes:
    """Classification of prop values for flattening."""

    @pytest.mark.parametrize(
        "value, shape",
        [
            ("s", ValueShape.PRIMITIVE),
            (1, ValueShape.PRIMITIVE),
            (1.5, ValueShape.PRIMITIVE),
            (True, ValueShape.PRIMITIVE),
            ([1], ValueShape.ARRAY),
            ((1,), ValueShape.ARRAY),
            ({"k": 1}, ValueShape.OBJECT),
            (None, ValueShape.ABSENT),
            (print, ValueShape.CALLABLE),
            (lambda: None, ValueShape.CALLABLE),
            (frozenset(), ValueShape.OPAQUE),
        ],
    )
    def test_classify(self, value, shape):
        assert classify(value) is shape

    def test_containers(self):
        assert ValueShape.ARRAY.is_container()
        assert ValueShape.OBJECT.is_container()
        assert not ValueShape.CALLABLE.is_container()

    def test_leaf_str(self):
        assert str(LeafEntry("a.0", 3)) == "a.0=3"
