# utils/config_reader.py
# This file is part of Fiberprops - Component prop extraction
#
# JSON reader for per-component extraction rules

import json
from pathlib import Path
from typing import Any, Dict

from model.prop_rule import PropRule
from utils.logger import get_logger

_RULE_KEYS = {"include", "exclude"}


class ConfigFormatError(Exception):
    """Exception raised when a config file contains invalid format or data."""

    pass


def read_config(filepath: str) -> Dict[str, PropRule]:
    """Read extraction rules from a JSON config file.

    Expected JSON format:
        {
          "Element": {"include": ["a", "c"], "exclude": []},
          "Button": {"include": ["label", "disabled"]}
        }

    Both lists are optional and default to empty.

    Args:
        filepath: Path to the JSON config file

    Returns:
        Mapping of component-type label to PropRule, in file order

    Raises:
        ConfigFormatError: If the file is missing, unreadable or malformed
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise ConfigFormatError(f"Config file not found: {filepath}")

    logger.debug(f"Reading config file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            data = json.load(file)
    except json.JSONDecodeError as e:
        raise ConfigFormatError(f"Invalid JSON in config file: {e}") from e
    except OSError as e:
        raise ConfigFormatError(f"Cannot open config file: {filepath}") from e

    return parse_config(data)


def parse_config(data: Any) -> Dict[str, PropRule]:
    """Validate decoded config data and build the rule mapping.

    Args:
        data: Decoded JSON document

    Returns:
        Mapping of component-type label to PropRule

    Raises:
        ConfigFormatError: If the data does not describe a config
    """
    if not isinstance(data, dict):
        raise ConfigFormatError(
            f"Config root must be an object, got {type(data).__name__}"
        )

    logger = get_logger()
    config = {}
    for type_label, raw_rule in data.items():
        config[type_label] = _parse_rule(type_label, raw_rule)
        logger.debug(f"Loaded rule for {type_label}: {config[type_label]}")

    return config


def _parse_rule(type_label: str, raw_rule: Any) -> PropRule:
    """Parse one rule object.

    Raises:
        ConfigFormatError: If the rule is invalid
    """
    if not isinstance(raw_rule, dict):
        raise ConfigFormatError(f"Rule for {type_label} must be an object")

    unknown = set(raw_rule) - _RULE_KEYS
    if unknown:
        raise ConfigFormatError(
            f"Unknown keys in rule for {type_label}: {sorted(unknown)}"
        )

    return PropRule(
        include=_parse_names(type_label, "include", raw_rule.get("include")),
        exclude=_parse_names(type_label, "exclude", raw_rule.get("exclude")),
    )


def _parse_names(type_label: str, key: str, raw_names: Any) -> tuple:
    """Parse a list of prop names.

    Raises:
        ConfigFormatError: If the value is not a list of strings
    """
    if raw_names is None:
        return ()

    if not isinstance(raw_names, list) or not all(
        isinstance(name, str) for name in raw_names
    ):
        raise ConfigFormatError(
            f"'{key}' in rule for {type_label} must be a list of strings"
        )

    return tuple(raw_names)
