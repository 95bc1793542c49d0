# model/prop_rule.py

"""
Extraction rules keyed by component type.

A `PropExtractorConfig` maps a component-type label to a `PropRule` naming
the props to surface (``include``) and those that must never appear
(``exclude``). Rules may also be supplied in their JSON form,
``{"include": [...], "exclude": [...]}``; `rule_for` normalizes either.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from .access import field_of, name_list


@dataclass(frozen=True, slots=True)
class PropRule:
    include: Tuple[str, ...] = ()
    exclude: Tuple[str, ...] = ()

    def __post_init__(self):
        # accept any list of names, store tuples
        object.__setattr__(self, "include", name_list(self.include))
        object.__setattr__(self, "exclude", name_list(self.exclude))

    def excludes(self, name: str) -> bool:
        """True if `name` is suppressed by this rule."""
        return name in self.exclude

    @classmethod
    def coerce(cls, rule: Any) -> Optional[PropRule]:
        """Return `rule` as a PropRule, or None when there is no rule."""
        if rule is None:
            return None
        if isinstance(rule, PropRule):
            return rule
        return cls(
            include=field_of(rule, "include"),
            exclude=field_of(rule, "exclude"),
        )

    def to_dict(self) -> dict:
        return {"include": list(self.include), "exclude": list(self.exclude)}


PropExtractorConfig = Mapping[str, Union[PropRule, Mapping[str, Any]]]


def rule_for(config: Optional[PropExtractorConfig], type_label: Any) -> Optional[PropRule]:
    """Look up the rule for `type_label` (exact, case-sensitive match)."""
    if not isinstance(config, Mapping) or not isinstance(type_label, str):
        return None
    return PropRule.coerce(config.get(type_label))
