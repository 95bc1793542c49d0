# tests/conftest.py
# This file is part of Fiberprops - Component prop extraction
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Fiberprops tests.

This module provides pytest configuration, fixtures, and utilities for testing
prop extraction. It ensures proper module path setup and provides the
configuration and fiber nodes most test modules start from.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common fixtures for extraction inputs
"""

import copy
import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Initialize test environment and verify module availability.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import model
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


BASE_PROPS = {"a": "foo", "b": 7, "c": True}


def fiber_with_props(**overrides) -> dict:
    """Fiber node whose state node props are BASE_PROPS updated with `overrides`."""
    props = copy.deepcopy(BASE_PROPS)
    props.update(overrides)
    return {"stateNode": {"props": props}}


@pytest.fixture
def element_config():
    """Config surfacing props a and c of Element components.

    Returns:
        dict: JSON-shaped extraction config
    """
    return {"Element": {"include": ["a", "c"], "exclude": []}}


@pytest.fixture
def base_fiber():
    """Fiber node with a state node carrying BASE_PROPS.

    Returns:
        dict: JSON-shaped fiber node
    """
    return fiber_with_props()


@pytest.fixture
def make_fiber():
    """Factory for fiber nodes with BASE_PROPS overridden per test."""
    return fiber_with_props


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document to a temporary file and return its path."""
    import json

    def _write(name: str, document) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
