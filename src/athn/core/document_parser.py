"""
Section-scanning driver.

Walks a document line by line, tracking the active section::

    +++ Meta        metadata tags
    +++ Header      link lines
    +++ Footer      link or text lines
    +++ Form        body lines and form field declarations
    +++             anything else starting with +++ returns to the main body

Documents start in the main body. Every ``+++ Form`` opens a new form, so a
document can hold several independent forms. Parsing is fail-fast: the first
invalid line aborts the whole document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from . import ir
from .config import DEFAULT_CONFIG, ParserConfig
from .errors import ErrorKind, ParseError, make_parse_error
from .line_parser import (
    FORM_FIELD_SENTINEL,
    LINK_DELIMITER,
    LTI_LENGTH,
    classify_line,
    parse_form_line,
    parse_link,
)
from .metadata_parser import TAG_LENGTH, MetadataBuilder, parse_metadata_line

logger = logging.getLogger(__name__)

SECTION_MARKER = "+++"


class Section(str, Enum):
    """Document sections."""

    META = "meta"
    MAIN = "main"
    FORM = "form"
    HEADER = "header"
    FOOTER = "footer"


_SECTION_LINES = {
    "+++ Meta": Section.META,
    "+++ Header": Section.HEADER,
    "+++ Footer": Section.FOOTER,
    "+++ Form": Section.FORM,
}


@dataclass
class DocumentBuilder:
    """Accumulates parsed lines until the end of the document."""

    metadata: MetadataBuilder = field(default_factory=MetadataBuilder)
    main: list[ir.MainLine] = field(default_factory=list)
    header: list[ir.HeaderLine] = field(default_factory=list)
    footer: list[ir.FooterLine] = field(default_factory=list)

    def add_main_line(self, line: ir.MainLine) -> None:
        self.main.append(line)

    def add_header_line(self, line: ir.HeaderLine) -> None:
        self.header.append(line)

    def add_footer_line(self, line: ir.FooterLine) -> None:
        self.footer.append(line)

    def build(self) -> ir.Document:
        return ir.Document(
            metadata=self.metadata.build(),
            main=list(self.main),
            header=list(self.header) or None,
            footer=list(self.footer) or None,
        )


@dataclass
class _ScanState:
    section: Section = Section.MAIN
    form_count: int = 0


def parse_document(text: str, config: ParserConfig | None = None) -> ir.Document:
    """
    Parse the complete text of an ATHN document.

    Args:
        text: Document text, newline delimited
        config: Parser limits, DEFAULT_CONFIG when omitted

    Returns:
        The parsed Document

    Raises:
        ParseError: On the first invalid line; the error context holds the
            line number and the offending line
    """
    builder = DocumentBuilder(metadata=MetadataBuilder(config=config or DEFAULT_CONFIG))
    state = _ScanState()

    for number, line in enumerate(_split_lines(text), start=1):
        try:
            _scan_line(line, state, builder)
        except ParseError as e:
            if e.context is not None:
                raise
            raise make_parse_error(e.message, e.kind, line=number, snippet=line) from e

    document = builder.build()
    logger.debug(
        "Parsed document '%s': %d main lines, %d form(s)",
        document.metadata.title,
        len(document.main),
        state.form_count,
    )
    return document


def _split_lines(text: str) -> list[str]:
    return [line.removesuffix("\r") for line in text.split("\n")]


def _scan_line(line: str, state: _ScanState, builder: DocumentBuilder) -> None:
    if not line:
        return

    if line.startswith(SECTION_MARKER):
        state.section = _SECTION_LINES.get(line, Section.MAIN)
        if state.section is Section.FORM:
            state.form_count += 1
            logger.debug("Entering form %d", state.form_count - 1)
        else:
            logger.debug("Entering %s section", state.section.value)
        return

    section = state.section
    if section is Section.META:
        if len(line) < TAG_LENGTH:
            raise ParseError(
                "Invalid metadata tag line encountered (too short)",
                ErrorKind.METADATA_LINE_TOO_SHORT,
            )
        parse_metadata_line(builder.metadata, line)

    elif section is Section.FORM and FORM_FIELD_SENTINEL in line:
        builder.add_main_line(parse_form_line(line, state.form_count - 1))

    elif section in (Section.MAIN, Section.FORM):
        if len(line) < LTI_LENGTH:
            builder.add_main_line(ir.TextLine(content=line))
        else:
            builder.add_main_line(classify_line(line))

    elif section is Section.HEADER:
        _, sep, rest = line.partition(LINK_DELIMITER)
        if not sep:
            raise ParseError(
                f"Invalid header line encountered (missing '{LINK_DELIMITER}')",
                ErrorKind.INVALID_HEADER_LINE,
            )
        builder.add_header_line(ir.LinkLine(link=parse_link(rest)))

    elif section is Section.FOOTER:
        _, sep, rest = line.partition(LINK_DELIMITER)
        if sep:
            builder.add_footer_line(ir.LinkLine(link=parse_link(rest)))
        else:
            builder.add_footer_line(ir.TextLine(content=line))
