# utils/logger.py
# This file is part of Fiberprops - Component prop extraction
#
# Logging utility for prop extraction with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for prop extraction."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class PropLogger:
    """Centralized logger for prop extraction with structured output."""

    def __init__(self, name: str = "fiberprops", level: LogLevel = LogLevel.INFO):
        """Initialize the prop extraction logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(PropFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for extraction events
    def extraction_start(self, type_label: str, source_kind: str, names: list):
        """Log the resolved source and effective names of one extraction."""
        self.debug(f"Extracting {type_label} from {source_kind} holder, names={names}")

    def prop_skipped(self, path: str, reason: str):
        """Log a prop that produced no leaf."""
        self.debug(f"    ⏭  {path}: skipped ({reason})")

    def extraction_result(self, type_label: str, leaf_count: int):
        """Log the outcome of one extraction."""
        self.debug(f"Extracted {leaf_count} leaves for {type_label}")

    def sample_loaded(self, index: int, type_label: str):
        """Log a fiber sample read from a dump."""
        self.debug(f"Loaded sample {index} of type {type_label}")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.debug(f"✅ {message}" if message else "✅ Validation successful")
        else:
            self.error(f"❌ {message}" if message else "❌ Validation failed")


class PropFormatter(logging.Formatter):
    """Custom formatter for prop extraction logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        return f"[DEBUG] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[PropLogger] = None


def get_logger(name: str = "fiberprops") -> PropLogger:
    """Get or create the global prop extraction logger instance.

    Args:
        name: Logger name (default: "fiberprops")

    Returns:
        PropLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = PropLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
