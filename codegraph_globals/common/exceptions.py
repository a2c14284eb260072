"""
Codegraph Globals Exception Hierarchy

Standardized exceptions for the import-to-globals rewriter.

Usage guide:
    1. Invalid user input / configuration → ValidationError subclasses
    2. Source that cannot be parsed → ParsingError
    3. Trees or edits that break a precondition → TransformError subclasses
       (programmer errors: never caught inside the package)

Example:
    try:
        tree = parser.parse(content)
    except ValueError as e:
        raise ParsingError("Failed to parse file") from e
"""

from typing import Any


class GlobalsError(Exception):
    """Base exception for all codegraph-globals errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize error.

        Args:
            message: Human-readable error message
            details: Optional additional details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


# ============================================================
# Validation Errors
# ============================================================


class ValidationError(GlobalsError):
    """Input validation failures."""

    pass


class InvalidConfigurationError(ValidationError):
    """Invalid configuration."""

    pass


class InvalidEditError(ValidationError):
    """Edit outside the source bounds or with an empty/reversed range."""

    pass


# ============================================================
# Parsing Errors
# ============================================================


class ParsingError(GlobalsError):
    """Code parsing failures."""

    pass


# ============================================================
# Transform Errors
# ============================================================


class TransformError(GlobalsError):
    """Rewrite failures."""

    pass


class MalformedTreeError(TransformError):
    """Syntax tree is missing a child the rewriter requires (parser/grammar mismatch)."""

    pass


class EditConflictError(TransformError):
    """Edit would split a range that has already been replaced."""

    pass
