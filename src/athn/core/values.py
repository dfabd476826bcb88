"""
Scalar value converters used by the metadata and form field parsers.

Every converter takes the raw property text and either returns the typed
value or raises ``ValueError``. Callers turn the ``ValueError`` into a
``ParseError`` carrying the right error kind.

Integer grammar is deliberately strict: ASCII digits with an optional
leading sign, no surrounding whitespace, no ``_`` separators, and the value
must fit the declared width.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

from email_validator import EmailNotValidError, validate_email
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNIX_SECONDS_RE = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

NOW_LITERAL = "now"

_DATETIME_ADAPTER = TypeAdapter(datetime)


def parse_unsigned(text: str, maximum: int = U32_MAX) -> int:
    """Parse a non-negative integer no larger than ``maximum``."""
    if not _UNSIGNED_RE.fullmatch(text):
        raise ValueError(f"'{text}' is not an unsigned integer")
    value = int(text)
    if value > maximum:
        raise ValueError(f"{value} is larger than {maximum}")
    return value


def parse_u64(text: str) -> int:
    return parse_unsigned(text, U64_MAX)


def parse_signed(text: str) -> int:
    """Parse a 64-bit signed integer."""
    if not _SIGNED_RE.fullmatch(text):
        raise ValueError(f"'{text}' is not an integer")
    value = int(text)
    if not I64_MIN <= value <= I64_MAX:
        raise ValueError(f"{value} does not fit in 64 bits")
    return value


def parse_float(text: str) -> float:
    """
    Parse a floating point number.

    Accepts the usual decimal and exponent forms as well as ``inf`` and
    ``nan``; rejects padding and digit separators.
    """
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"'{text}' is not a number")
    return float(text)


def parse_bool(text: str) -> bool:
    """Only the literal spellings ``true`` and ``false`` are accepted."""
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"'{text}' is not 'true' or 'false'")


def parse_timestamp(text: str) -> datetime:
    """
    Parse a point in time as an aware UTC datetime.

    Accepts ISO 8601 date-times, Unix timestamps in seconds and the literal
    ``now`` (the current UTC time). Date-times without a zone are taken to
    be UTC.
    """
    if text == NOW_LITERAL:
        return datetime.now(UTC)
    if _UNIX_SECONDS_RE.fullmatch(text):
        try:
            return datetime.fromtimestamp(float(text), UTC)
        except (OverflowError, OSError) as e:
            raise ValueError(f"'{text}' is out of range for a timestamp") from e
    try:
        value = _DATETIME_ADAPTER.validate_python(text)
    except PydanticValidationError as e:
        raise ValueError(f"'{text}' is not a timestamp") from e
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_email(text: str) -> str:
    """
    Check that ``text`` is a bare, syntactically valid e-mail address.

    Returns the normalised address (domain lowercased). Display-name forms
    such as ``Name <addr>`` are rejected.
    """
    try:
        result = validate_email(text, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"'{text}' is not a valid e-mail address: {e}") from e
    return result.normalized


def parse_text(text: str) -> str:
    return text
