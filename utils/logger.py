# utils/logger.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Logging utility for truth table evaluation with configurable levels

import logging
import sys
from enum import Enum
from typing import Mapping, Optional, Sequence


class LogLevel(Enum):
    """Log levels for truth table evaluation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING


class TruthTableLogger:
    """Centralized logger for truth table evaluation with structured output."""

    def __init__(self, name: str = "tabula", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TruthTableFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message)

    def info(self, message: str):
        """Log info message (general progress)."""
        self.logger.info(message)

    def warning(self, message: str):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        """Log error message (serious problems), optionally with the traceback."""
        self.logger.error(message, exc_info=exc_info)

    # Specialized methods for truth table runs
    def table_start(
        self,
        expression_text: str,
        variables: Sequence[str],
        presets: Optional[Mapping[str, bool]] = None,
    ):
        """Log the start of a table evaluation."""
        self.info("=== Evaluating Truth Table ===")
        self.info(f"Expression: {expression_text}")
        self.info(f"Variables: {', '.join(variables) if variables else '(none)'}")
        if presets:
            fixed = ", ".join(f"{name}={int(value)}" for name, value in presets.items())
            self.info(f"Presets: {fixed}")

    def table_done(self, row_count: int):
        """Log the end of a table evaluation."""
        self.info(f">>> {row_count} row(s) evaluated <<<")


class TruthTableFormatter(logging.Formatter):
    """Custom formatter for clean console output."""

    def format(self, record):
        # For INFO level show message only
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        text = f"[{record.levelname}] {record.getMessage()}"
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text


# Global logger instance
_global_logger: Optional[TruthTableLogger] = None


def get_logger(name: str = "tabula") -> TruthTableLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "tabula")

    Returns:
        TruthTableLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TruthTableLogger(name)
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
