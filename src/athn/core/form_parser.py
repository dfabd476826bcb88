"""
Form field property micro-language parser.

A form field declaration (the part after the ``[] `` sentinel) looks like::

    identifier:type \\property value \\flag \\property value

Parsing steps:
    1. Split once on ``:`` into identifier and the rest.
    2. Split the rest once on `` \\`` into the type keyword and the tail.
    3. Split the tail on `` \\`` into property tokens.
    4. Split every token once on the first space into ``(name, value)``;
       a token without a space is a flag whose value is ``""``.

Properties are looked up by name (first match wins) and converted by the
builder for the field's type keyword. Any invalid value aborts the field.

Supported type keywords: submit, string, int, float, bool, file, list,
date, email, tel.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from types import NoneType
from typing import Any, TypeVar

from . import ir
from .errors import ErrorKind, ParseError
from .values import (
    parse_bool,
    parse_email,
    parse_float,
    parse_signed,
    parse_text,
    parse_timestamp,
    parse_u64,
    parse_unsigned,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

PROPERTY_DELIMITER = " \\"

# Property spellings shared by every non-submit kind
OPTIONAL_NAMES = ("optional", "?")
LABEL_NAMES = ("label", "l")
DEFAULT_NAMES = ("default", "d")
CONDITIONAL_NAMES = ("conditional", "c")
INVERSE_CONDITIONAL_NAMES = ("!conditional", "!c")


@dataclass(frozen=True)
class Property:
    """A single ``\\name value`` token."""

    name: str
    value: str = ""


@dataclass
class PropertyList:
    """The ordered property tokens of one field declaration."""

    properties: list[Property] = field(default_factory=list)

    @classmethod
    def from_tail(cls, tail: str) -> PropertyList:
        """Tokenize everything after the type keyword."""
        if not tail:
            return cls()
        properties = []
        for token in tail.split(PROPERTY_DELIMITER):
            name, _, value = token.partition(" ")
            properties.append(Property(name=name, value=value))
        return cls(properties)

    def find(self, *names: str) -> Property | None:
        """Get the first property spelled as any of ``names``."""
        for prop in self.properties:
            if prop.name in names:
                return prop
        return None

    def has(self, *names: str) -> bool:
        return self.find(*names) is not None

    def values(self, *names: str) -> list[str] | None:
        """Get the values of a repeatable property, None if it never occurs."""
        found = [prop.value for prop in self.properties if prop.name in names]
        return found or None


def parse_form_field(text: str) -> ir.FormField:
    """
    Parse a form field declaration into a typed field record.

    Args:
        text: Declaration without the leading sentinel, e.g. ``Test:int \\max 100``

    Returns:
        One of the ten field records

    Raises:
        ParseError: If the identifier, type keyword or any property is invalid
    """
    identifier, sep, rest = text.partition(":")
    if not sep:
        raise ParseError(f"Form field with no ID found: '{text}'", ErrorKind.MISSING_FIELD_ID)
    field_id = ir.ID.new(identifier)

    field_type, _, tail = rest.partition(PROPERTY_DELIMITER)
    builder = _FIELD_BUILDERS.get(field_type)
    if builder is None:
        raise ParseError(
            f"Form field '{field_id}' with invalid type '{field_type}' found",
            ErrorKind.INVALID_FIELD_TYPE,
        )

    form_field = builder(field_id, PropertyList.from_tail(tail))
    logger.debug("Parsed %s form field '%s'", field_type, field_id)
    return form_field


# =============================================================================
# Shared property helpers
# =============================================================================


def parse_global_properties(
    props: PropertyList,
    model: type[ir.GlobalProperties[Any]],
    label: str,
    converter: Callable[[str], Any] | None,
) -> ir.GlobalProperties[Any]:
    """
    Extract the properties every non-submit field kind understands.

    Args:
        props: Tokenized properties
        model: Parametrized GlobalProperties class for the field kind
        label: Human readable kind name used in error messages
        converter: Converter for ``default``; None forbids a default

    Raises:
        ParseError: On an invalid or forbidden default, or an invalid
            conditional target
    """
    default = None
    default_prop = props.find(*DEFAULT_NAMES)
    if default_prop is not None:
        if converter is None:
            raise ParseError(
                f"{label} type form field with default property found",
                ErrorKind.FORBIDDEN_PROPERTY,
            )
        try:
            default = converter(default_prop.value)
        except ValueError as e:
            raise ParseError(
                f"{label} type form field with invalid default property found: {e}",
                ErrorKind.INVALID_DEFAULT,
            ) from e

    label_prop = props.find(*LABEL_NAMES)

    return model(
        optional=props.has(*OPTIONAL_NAMES),
        label=label_prop.value if label_prop else None,
        default=default,
        conditional=_parse_conditional(props, label),
    )


def _parse_conditional(props: PropertyList, label: str) -> ir.ConditionalProperty | None:
    prop = props.find(*CONDITIONAL_NAMES, *INVERSE_CONDITIONAL_NAMES)
    if prop is None:
        return None
    try:
        target = ir.ID.new(prop.value)
    except ParseError as e:
        raise ParseError(
            f"{label} type form field with invalid conditional target '{prop.value}' found",
            ErrorKind.INVALID_CONDITIONAL_TARGET,
        ) from e
    return ir.ConditionalProperty(inverse=prop.name.startswith("!"), target=target)


def _number_property(
    props: PropertyList,
    name: str,
    label: str,
    converter: Callable[[str], T],
) -> T | None:
    prop = props.find(name)
    if prop is None:
        return None
    try:
        return converter(prop.value)
    except ValueError as e:
        raise ParseError(
            f"{label} type form field with invalid {name} property value found: {e}",
            ErrorKind.INVALID_PROPERTY_VALUE,
        ) from e


# =============================================================================
# Field builders
# =============================================================================


def _build_submit(field_id: ir.ID, props: PropertyList) -> ir.SubmitField:
    destination = props.find("destination", "dest")
    if destination is None:
        raise ParseError(
            f"Submit type form field '{field_id}' without destination found",
            ErrorKind.MISSING_PROPERTY,
        )
    label = props.find(*LABEL_NAMES)
    return ir.SubmitField(
        id=field_id,
        destination=destination.value,
        label=label.value if label else None,
        redirect=props.has("redirect"),
    )


def _build_string(field_id: ir.ID, props: PropertyList) -> ir.StringField:
    label = "String"
    return ir.StringField(
        id=field_id,
        common=parse_global_properties(props, ir.GlobalProperties[str], label, parse_text),
        min=_number_property(props, "min", label, parse_unsigned),
        max=_number_property(props, "max", label, parse_unsigned),
        multiline=props.has("multiline"),
        secret=props.has("secret"),
        variants=props.values("variant", "e"),
    )


def _build_integer(field_id: ir.ID, props: PropertyList) -> ir.IntegerField:
    label = "Integer"
    return ir.IntegerField(
        id=field_id,
        common=parse_global_properties(props, ir.GlobalProperties[int], label, parse_signed),
        min=_number_property(props, "min", label, parse_signed),
        max=_number_property(props, "max", label, parse_signed),
        step=_number_property(props, "step", label, parse_signed),
        positive=props.has("positive"),
    )


def _build_float(field_id: ir.ID, props: PropertyList) -> ir.FloatField:
    label = "Float"
    return ir.FloatField(
        id=field_id,
        common=parse_global_properties(props, ir.GlobalProperties[float], label, parse_float),
        min=_number_property(props, "min", label, parse_float),
        max=_number_property(props, "max", label, parse_float),
        step=_number_property(props, "step", label, parse_float),
        positive=props.has("positive"),
    )


def _build_boolean(field_id: ir.ID, props: PropertyList) -> ir.BooleanField:
    return ir.BooleanField(
        id=field_id,
        common=parse_global_properties(props, ir.GlobalProperties[bool], "Bool", parse_bool),
    )


def _build_file(field_id: ir.ID, props: PropertyList) -> ir.FileField:
    label = "File"
    return ir.FileField(
        id=field_id,
        common=parse_global_properties(props, ir.GlobalProperties[NoneType], label, None),
        max=_number_property(props, "max", label, parse_u64),
        allowed_types=props.values("type"),
    )


def _build_list(field_id: ir.ID, props: PropertyList) -> ir.ListField:
    label = "List"
    children = None
    child_values = props.values("child")
    if child_values is not None:
        try:
            children = [ir.ID.new(value) for value in child_values]
        except ParseError as e:
            raise ParseError(
                f"List type form field '{field_id}' with invalid child ID found",
                ErrorKind.INVALID_CHILD_ID,
            ) from e

    return ir.ListField(
        id=field_id,
        common=parse_global_properties(props, ir.GlobalProperties[int], label, parse_unsigned),
        min=_number_property(props, "min", label, parse_unsigned),
        max=_number_property(props, "max", label, parse_unsigned),
        children=children,
    )


def _build_date(field_id: ir.ID, props: PropertyList) -> ir.DateField:
    label = "Date"
    return ir.DateField(
        id=field_id,
        common=parse_global_properties(
            props, ir.GlobalProperties[datetime], label, parse_timestamp
        ),
        min=_number_property(props, "min", label, parse_timestamp),
        max=_number_property(props, "max", label, parse_timestamp),
        date=props.has("date"),
        time=props.has("time"),
    )


def _build_email(field_id: ir.ID, props: PropertyList) -> ir.EmailField:
    return ir.EmailField(
        id=field_id,
        common=parse_global_properties(props, ir.GlobalProperties[str], "Email", parse_email),
    )


def _build_phone(field_id: ir.ID, props: PropertyList) -> ir.PhoneField:
    country = props.find("country")
    return ir.PhoneField(
        id=field_id,
        common=parse_global_properties(props, ir.GlobalProperties[str], "Phone", parse_text),
        country=country.value if country else None,
    )


_FIELD_BUILDERS: dict[str, Callable[[ir.ID, PropertyList], ir.FormField]] = {
    "submit": _build_submit,
    "string": _build_string,
    "int": _build_integer,
    "float": _build_float,
    "bool": _build_boolean,
    "file": _build_file,
    "list": _build_list,
    "date": _build_date,
    "email": _build_email,
    "tel": _build_phone,
}
