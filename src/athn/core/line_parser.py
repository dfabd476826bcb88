"""
Line classifier for the main and form sections.

Every body line starts with a three character line type indicator (LTI)
that selects what the line is::

    => url label        link
    ```raw              preformatted
    '''raw              textual preformatted
    ---                 separator
    1* item .. 6* item  unordered list item
    1- 1. item          ordered list item (bullet, then content)
    \\/ summary | body   dropdown
    _! / *! / !! text   note / warning / danger admonition
    1# title .. 6# ...  heading
    >> text             quote

Anything else is a text line. Prefixes are matched literally, so a sentence
that happens to start with ``=> `` is a link line.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from . import ir
from .errors import ErrorKind, ParseError
from .form_parser import parse_form_field

LTI_LENGTH = 3
LINK_DELIMITER = "=> "
FORM_FIELD_SENTINEL = "[] "
DROPDOWN_DELIMITER = " | "


def parse_link(text: str) -> ir.Link:
    """Split link content on the first space into URL and optional label."""
    url, sep, label = text.partition(" ")
    return ir.Link(url=url, label=label if sep else None)


def parse_form_line(line: str, form_index: int) -> ir.FormFieldLine:
    """
    Parse a form field line of the form block with index ``form_index``.

    The declaration is everything after the first ``[] `` sentinel.
    """
    _, _, declaration = line.partition(FORM_FIELD_SENTINEL)
    return ir.FormFieldLine(form_index=form_index, field=parse_form_field(declaration))


def classify_line(line: str) -> ir.MainLine:
    """
    Classify a main or form section line.

    Args:
        line: A non-empty document line

    Returns:
        The matching line record, TextLine when no LTI matches

    Raises:
        ParseError: If an ordered list or dropdown line lacks its delimiter
    """
    if len(line) < LTI_LENGTH:
        return ir.TextLine(content=line)

    handler = _LTI_HANDLERS.get(line[:LTI_LENGTH])
    if handler is None:
        return ir.TextLine(content=line)
    return handler(line[LTI_LENGTH:])


def _link(rest: str) -> ir.LinkLine:
    return ir.LinkLine(link=parse_link(rest))


def _preformatted(textual: bool, rest: str) -> ir.PreformattedLine:
    return ir.PreformattedLine(textual=textual, content=rest)


def _separator(rest: str) -> ir.SeparatorLine:
    return ir.SeparatorLine()


def _unordered(level: int, rest: str) -> ir.UListLine:
    return ir.UListLine(level=level, content=rest)


def _ordered(level: int, rest: str) -> ir.OListLine:
    bullet, sep, content = rest.partition(" ")
    if not sep:
        raise ParseError(
            "Invalid ordered list line found (expected '<bullet> <content>')",
            ErrorKind.INVALID_ORDERED_LIST_LINE,
        )
    return ir.OListLine(level=level, bullet=bullet, content=content)


def _dropdown(rest: str) -> ir.DropdownLine:
    summary, sep, content = rest.partition(DROPDOWN_DELIMITER)
    if not sep:
        raise ParseError(
            f"Dropdown line without '{DROPDOWN_DELIMITER}' delimiter found",
            ErrorKind.INVALID_DROPDOWN_LINE,
        )
    return ir.DropdownLine(summary=summary, content=content)


def _admonition(kind: ir.AdmonitionKind, rest: str) -> ir.AdmonitionLine:
    return ir.AdmonitionLine(admonition=kind, content=rest)


def _heading(level: int, rest: str) -> ir.HeadingLine:
    return ir.HeadingLine(level=level, content=rest)


def _quote(rest: str) -> ir.QuoteLine:
    return ir.QuoteLine(content=rest)


def _build_handlers() -> dict[str, Callable[[str], ir.MainLine]]:
    handlers: dict[str, Callable[[str], ir.MainLine]] = {
        LINK_DELIMITER: _link,
        "```": partial(_preformatted, False),
        "'''": partial(_preformatted, True),
        "---": _separator,
        "\\/ ": _dropdown,
        "_! ": partial(_admonition, ir.AdmonitionKind.NOTE),
        "*! ": partial(_admonition, ir.AdmonitionKind.WARNING),
        "!! ": partial(_admonition, ir.AdmonitionKind.DANGER),
        ">> ": _quote,
    }
    for level in range(1, 7):
        handlers[f"{level}* "] = partial(_unordered, level)
        handlers[f"{level}- "] = partial(_ordered, level)
        handlers[f"{level}# "] = partial(_heading, level)
    return handlers


_LTI_HANDLERS = _build_handlers()
