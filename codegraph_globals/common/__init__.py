"""
Common: exceptions and observability shared by every layer.
"""

from codegraph_globals.common.exceptions import (
    EditConflictError,
    GlobalsError,
    InvalidConfigurationError,
    InvalidEditError,
    MalformedTreeError,
    ParsingError,
    TransformError,
    ValidationError,
)
from codegraph_globals.common.observability import get_logger, setup_logging

__all__ = [
    "GlobalsError",
    "ValidationError",
    "InvalidConfigurationError",
    "InvalidEditError",
    "ParsingError",
    "TransformError",
    "MalformedTreeError",
    "EditConflictError",
    "get_logger",
    "setup_logging",
]
