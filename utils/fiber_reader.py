# utils/fiber_reader.py
# This file is part of Fiberprops - Component prop extraction
#
# JSON reader for fiber node dumps

import json
from pathlib import Path
from typing import Any, Iterator

from model.fiber_node import FiberNode, FiberSample
from utils.logger import get_logger


class FiberFormatError(Exception):
    """Exception raised when a fiber dump contains invalid format or data."""

    pass


def read_fibers(filepath: str) -> Iterator[FiberSample]:
    """Read fiber samples from a JSON dump.

    A dump is an array of records, each naming the component type and the
    fiber node captured for it. The node may be null.

    Expected JSON format:
        [
          {"type": "Element", "fiber": {"stateNode": {"props": {"a": "foo"}}}},
          {"type": "Element", "fiber": {"memoizedProps": {"a": "bar"}}},
          {"type": "Label", "fiber": null}
        ]

    Args:
        filepath: Path to the JSON dump

    Yields:
        FiberSample: Parsed samples in file order

    Raises:
        FiberFormatError: If the file format is invalid or a record cannot be parsed
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise FiberFormatError(f"Fiber dump not found: {filepath}")

    logger.debug(f"Reading fiber dump: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            data = json.load(file)
    except json.JSONDecodeError as e:
        raise FiberFormatError(f"Invalid JSON in fiber dump: {e}") from e
    except OSError as e:
        raise FiberFormatError(f"Cannot open fiber dump: {filepath}") from e

    if not isinstance(data, list):
        raise FiberFormatError(
            f"Fiber dump root must be an array, got {type(data).__name__}"
        )

    for index, record in enumerate(data):
        try:
            sample = _parse_sample(record)
        except (TypeError, ValueError) as e:
            raise FiberFormatError(f"Error parsing record {index}: {e}") from e
        logger.sample_loaded(index, sample.type_label)
        yield sample


def validate_fiber_file(filepath: str) -> int:
    """Validate a fiber dump by parsing every record.

    Args:
        filepath: Path to the dump to validate

    Returns:
        Number of samples in the dump

    Raises:
        FiberFormatError: If validation fails
    """
    logger = get_logger()
    logger.debug(f"Validating fiber dump: {filepath}")

    try:
        count = sum(1 for _ in read_fibers(filepath))
    except FiberFormatError as e:
        logger.validation_result(False, f"Fiber dump validation failed: {e}")
        raise

    logger.validation_result(True, f"Fiber dump validation successful: {count} samples")
    return count


def _parse_sample(record: Any) -> FiberSample:
    """Parse a single dump record into a FiberSample.

    Raises:
        TypeError: If the record or its node has the wrong shape
        ValueError: If the type label is missing or empty
    """
    if not isinstance(record, dict):
        raise TypeError(f"record must be an object, got {type(record).__name__}")

    type_label = record.get("type")
    if not isinstance(type_label, str) or not type_label:
        raise ValueError("record needs a non-empty string 'type'")

    raw_fiber = record.get("fiber")
    if raw_fiber is None:
        return FiberSample(type_label, None)
    if not isinstance(raw_fiber, dict):
        raise TypeError(f"'fiber' must be an object or null, got {type(raw_fiber).__name__}")

    return FiberSample(type_label, FiberNode.from_dict(raw_fiber))
