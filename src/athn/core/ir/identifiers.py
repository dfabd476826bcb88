"""
Identifier type for ATHN form fields.

Identifiers name form fields and are the targets of conditional
visibility rules and list children. Only ASCII letters and underscores
are allowed.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator

from ..errors import ErrorKind, ParseError

_IDENTIFIER_RE = re.compile(r"[A-Za-z_]*")


def is_valid_identifier(text: str) -> bool:
    """Check that every character of ``text`` is an ASCII letter or underscore."""
    return _IDENTIFIER_RE.fullmatch(text) is not None


class ID(BaseModel):
    """
    A validated form field identifier.

    Examples:
        - ID.new("valid_ID") -> ID(value="valid_ID")
        - ID.new("1nv4lid_ID") -> ParseError
    """

    value: str

    model_config = ConfigDict(frozen=True)

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        if not is_valid_identifier(v):
            raise ValueError(f"'{v}' is not a valid form field identifier")
        return v

    @classmethod
    def new(cls, text: str) -> ID:
        """
        Build an identifier, raising ParseError if ``text`` is invalid.

        Raises:
            ParseError: With kind INVALID_IDENTIFIER
        """
        if not is_valid_identifier(text):
            raise ParseError(
                f"Found form field with invalid ID '{text}' "
                "(only ASCII letters and '_' are allowed)",
                ErrorKind.INVALID_IDENTIFIER,
            )
        return cls(value=text)

    def __str__(self) -> str:
        return self.value
