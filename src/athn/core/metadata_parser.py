"""
Metadata tag parser for the ``+++ Meta`` block.

Each metadata line is a three character tag followed by its value::

    TI Title            overwrite
    ST Subtitle         overwrite
    AU Author           append (capped)
    LI License          append (capped)
    LA Language         append (capped)
    CH 3600             cache duration in seconds

Repeatable tags stop growing silently once their cap is reached.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from . import ir
from .config import DEFAULT_CONFIG, ParserConfig
from .errors import ErrorKind, ParseError
from .values import parse_unsigned

TAG_LENGTH = 3


@dataclass
class MetadataBuilder:
    """Accumulates metadata lines until the document is finished."""

    config: ParserConfig = DEFAULT_CONFIG
    title: str = ""
    subtitle: str | None = None
    authors: list[str] = field(default_factory=list)
    licenses: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    cache: int | None = None

    def add_author(self, author: str) -> None:
        if len(self.authors) < self.config.max_authors:
            self.authors.append(author)

    def add_license(self, license: str) -> None:
        if len(self.licenses) < self.config.max_licenses:
            self.licenses.append(license)

    def add_language(self, language: str) -> None:
        if len(self.languages) < self.config.max_languages:
            self.languages.append(language)

    def build(self) -> ir.Metadata:
        return ir.Metadata(
            title=self.title,
            subtitle=self.subtitle,
            author=list(self.authors) or None,
            license=list(self.licenses) or None,
            language=list(self.languages) or None,
            cache=self.cache,
        )


def parse_metadata_line(builder: MetadataBuilder, line: str) -> None:
    """
    Fold a single metadata line into ``builder``.

    Args:
        builder: Metadata accumulated so far
        line: Metadata line, at least three characters long

    Raises:
        ParseError: On an unknown tag or a non-numeric cache value
    """
    tag, value = line[:TAG_LENGTH], line[TAG_LENGTH:]

    if tag == "TI ":
        builder.title = value
    elif tag == "ST ":
        builder.subtitle = value
    elif tag == "AU ":
        builder.add_author(value)
    elif tag == "LI ":
        builder.add_license(value)
    elif tag == "LA ":
        builder.add_language(value)
    elif tag == "CH ":
        try:
            builder.cache = parse_unsigned(value)
        except ValueError as e:
            raise ParseError(
                f"Invalid cache tag value '{value}'", ErrorKind.INVALID_CACHE_VALUE
            ) from e
    else:
        raise ParseError(
            f"Invalid metadata tag line encountered: '{line}'",
            ErrorKind.INVALID_METADATA_TAG,
        )
