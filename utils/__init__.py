# utils/__init__.py
# This file is part of Fiberprops - Component prop extraction
#
# Utility module exports

from .config_reader import read_config, parse_config, ConfigFormatError
from .fiber_reader import read_fibers, validate_fiber_file, FiberFormatError

__all__ = [
    "read_config",
    "parse_config",
    "ConfigFormatError",
    "read_fibers",
    "validate_fiber_file",
    "FiberFormatError",
]
