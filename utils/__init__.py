# utils/__init__.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Utility module exports

from .logger import LogLevel, configure_logging, get_logger, set_log_level
from .table_format import format_parse_error, format_table

__all__ = [
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_log_level",
    "format_parse_error",
    "format_table",
]
