"""
Error types for ATHN document parsing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of reasons a document can fail to parse."""

    # Structural
    METADATA_LINE_TOO_SHORT = "metadata_line_too_short"
    INVALID_METADATA_TAG = "invalid_metadata_tag"
    INVALID_CACHE_VALUE = "invalid_cache_value"
    INVALID_HEADER_LINE = "invalid_header_line"
    INVALID_ORDERED_LIST_LINE = "invalid_ordered_list_line"
    INVALID_DROPDOWN_LINE = "invalid_dropdown_line"
    # Identifier
    MISSING_FIELD_ID = "missing_field_id"
    INVALID_IDENTIFIER = "invalid_identifier"
    # Field grammar
    INVALID_FIELD_TYPE = "invalid_field_type"
    MISSING_PROPERTY = "missing_property"
    FORBIDDEN_PROPERTY = "forbidden_property"
    INVALID_DEFAULT = "invalid_default"
    INVALID_PROPERTY_VALUE = "invalid_property_value"
    INVALID_CONDITIONAL_TARGET = "invalid_conditional_target"
    INVALID_CHILD_ID = "invalid_child_id"

    @property
    def category(self) -> str:
        """Coarse grouping: ``structural``, ``identifier`` or ``field``."""
        if self in _STRUCTURAL:
            return "structural"
        if self in _IDENTIFIER:
            return "identifier"
        return "field"


_STRUCTURAL = frozenset(
    {
        ErrorKind.METADATA_LINE_TOO_SHORT,
        ErrorKind.INVALID_METADATA_TAG,
        ErrorKind.INVALID_CACHE_VALUE,
        ErrorKind.INVALID_HEADER_LINE,
        ErrorKind.INVALID_ORDERED_LIST_LINE,
        ErrorKind.INVALID_DROPDOWN_LINE,
    }
)
_IDENTIFIER = frozenset({ErrorKind.MISSING_FIELD_ID, ErrorKind.INVALID_IDENTIFIER})


class AthnError(Exception):
    """Base exception for all ATHN errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(AthnError):
    """
    Raised when a document cannot be parsed.

    Examples:
    - Metadata line with an unknown tag
    - Header line without a link delimiter
    - Dropdown line without its ``" | "`` separator
    - Form field with an unknown type or an invalid property value
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        context: Optional["ErrorContext"] = None,
    ):
        self.kind = kind
        super().__init__(message, context)


@dataclass
class ErrorContext:
    """
    Location of an error inside the parsed document.

    Attributes:
        line: Line number (1-indexed)
        snippet: The offending line, verbatim
    """

    line: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "line 10: | TI"
        """
        location = f"line {self.line}"
        if self.snippet is not None:
            return f"{location}: | {self.snippet}"
        return location


def make_parse_error(
    message: str,
    kind: ErrorKind,
    line: int | None = None,
    snippet: str | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with optional context.

    Args:
        message: Error description
        kind: Machine-readable reason
        line: Optional line number (1-indexed)
        snippet: Optional copy of the offending line

    Returns:
        ParseError with context if a line number was provided
    """
    if line:
        return ParseError(message, kind, ErrorContext(line=line, snippet=snippet))
    return ParseError(message, kind)
