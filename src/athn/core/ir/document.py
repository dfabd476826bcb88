"""
Document types for ATHN IR.

This module contains the parsed representation of a whole document:
metadata, main content lines, header and footer.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .forms import FormField

# Heading and list nesting depth
Level = Annotated[int, Field(ge=1, le=6)]


class AdmonitionKind(str, Enum):
    """Admonition severities."""

    NOTE = "note"  # _!
    WARNING = "warning"  # *!
    DANGER = "danger"  # !!


class Link(BaseModel):
    """
    A link target with an optional label.

    The URL is not resolved: relative URLs are allowed and the base is only
    known to whoever fetched the document.
    """

    url: str
    label: str | None = None

    model_config = ConfigDict(frozen=True)


class Metadata(BaseModel):
    """
    Document metadata from the ``+++ Meta`` block.

    Attributes:
        title: Document title (TI), empty if never set
        subtitle: Subtitle (ST)
        author: Authors (AU), capped
        license: License identifiers (LI), capped
        language: Language tags (LA), capped
        cache: Cache duration in seconds (CH)
    """

    title: str = ""
    subtitle: str | None = None
    author: list[str] | None = None
    license: list[str] | None = None
    language: list[str] | None = None
    cache: int | None = None

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Main section lines
# =============================================================================


class TextLine(BaseModel):
    kind: Literal["text"] = "text"
    content: str

    model_config = ConfigDict(frozen=True)


class LinkLine(BaseModel):
    kind: Literal["link"] = "link"
    link: Link

    model_config = ConfigDict(frozen=True)


class PreformattedLine(BaseModel):
    """Preformatted line; ``textual`` is set for the ''' variant."""

    kind: Literal["preformatted"] = "preformatted"
    textual: bool = False
    content: str

    model_config = ConfigDict(frozen=True)


class SeparatorLine(BaseModel):
    kind: Literal["separator"] = "separator"

    model_config = ConfigDict(frozen=True)


class UListLine(BaseModel):
    kind: Literal["ulist"] = "ulist"
    level: Level
    content: str

    model_config = ConfigDict(frozen=True)


class OListLine(BaseModel):
    """Ordered list item, ``bullet`` is the author supplied marker (``1.``, ``a)``)."""

    kind: Literal["olist"] = "olist"
    level: Level
    bullet: str
    content: str

    model_config = ConfigDict(frozen=True)


class DropdownLine(BaseModel):
    kind: Literal["dropdown"] = "dropdown"
    summary: str
    content: str

    model_config = ConfigDict(frozen=True)


class AdmonitionLine(BaseModel):
    kind: Literal["admonition"] = "admonition"
    admonition: AdmonitionKind
    content: str

    model_config = ConfigDict(frozen=True)


class HeadingLine(BaseModel):
    kind: Literal["heading"] = "heading"
    level: Level
    content: str

    model_config = ConfigDict(frozen=True)


class QuoteLine(BaseModel):
    kind: Literal["quote"] = "quote"
    content: str

    model_config = ConfigDict(frozen=True)


class FormFieldLine(BaseModel):
    """
    A form field declaration.

    ``form_index`` is the zero-based index of the ``+++ Form`` block the
    field belongs to; fields of different blocks are separate submissions.
    """

    kind: Literal["form_field"] = "form_field"
    form_index: int = Field(ge=0)
    field: FormField

    model_config = ConfigDict(frozen=True)


MainLine = Annotated[
    Union[
        TextLine,
        LinkLine,
        PreformattedLine,
        SeparatorLine,
        UListLine,
        OListLine,
        DropdownLine,
        AdmonitionLine,
        HeadingLine,
        QuoteLine,
        FormFieldLine,
    ],
    Field(discriminator="kind"),
]

# Header sections only hold links
HeaderLine = LinkLine

FooterLine = Annotated[Union[LinkLine, TextLine], Field(discriminator="kind")]


# =============================================================================
# Document
# =============================================================================


class Document(BaseModel):
    """
    A fully parsed ATHN document.

    ``header`` and ``footer`` are None when the document has no such section
    (or the section is empty).
    """

    metadata: Metadata = Field(default_factory=Metadata)
    main: list[MainLine] = Field(default_factory=list)
    header: list[HeaderLine] | None = None
    footer: list[FooterLine] | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def form_count(self) -> int:
        """Number of distinct forms that declare at least one field."""
        return len(self.forms())

    def form_fields(self, form_index: int) -> list[FormField]:
        """Get the fields of one form, in document order."""
        return [
            line.field
            for line in self.main
            if isinstance(line, FormFieldLine) and line.form_index == form_index
        ]

    def forms(self) -> dict[int, list[FormField]]:
        """Group every form field by the index of the form it belongs to."""
        grouped: dict[int, list[FormField]] = {}
        for line in self.main:
            if isinstance(line, FormFieldLine):
                grouped.setdefault(line.form_index, []).append(line.field)
        return grouped

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self.model_dump(mode="json")
