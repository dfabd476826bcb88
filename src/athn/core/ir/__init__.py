"""
ATHN Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .document import (
    AdmonitionKind,
    AdmonitionLine,
    Document,
    DropdownLine,
    FooterLine,
    FormFieldLine,
    HeaderLine,
    HeadingLine,
    Level,
    Link,
    LinkLine,
    MainLine,
    Metadata,
    OListLine,
    PreformattedLine,
    QuoteLine,
    SeparatorLine,
    TextLine,
    UListLine,
)
from .forms import (
    BooleanField,
    ConditionalProperty,
    DateField,
    EmailField,
    FileField,
    FloatField,
    FormField,
    GlobalProperties,
    IntegerField,
    ListField,
    PhoneField,
    StringField,
    SubmitField,
)
from .identifiers import ID, is_valid_identifier

__all__ = [
    # Identifiers
    "ID",
    "is_valid_identifier",
    # Forms
    "BooleanField",
    "ConditionalProperty",
    "DateField",
    "EmailField",
    "FileField",
    "FloatField",
    "FormField",
    "GlobalProperties",
    "IntegerField",
    "ListField",
    "PhoneField",
    "StringField",
    "SubmitField",
    # Document
    "AdmonitionKind",
    "AdmonitionLine",
    "Document",
    "DropdownLine",
    "FooterLine",
    "FormFieldLine",
    "HeaderLine",
    "HeadingLine",
    "Level",
    "Link",
    "LinkLine",
    "MainLine",
    "Metadata",
    "OListLine",
    "PreformattedLine",
    "QuoteLine",
    "SeparatorLine",
    "TextLine",
    "UListLine",
]
