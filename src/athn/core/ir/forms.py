"""
Form field types for ATHN IR.

A form field is declared inside a ``+++ Form`` block as::

    [] identifier:type \\property value \\property value ...

Each declaration becomes one of ten field records. All of them except the
submit button share a ``GlobalProperties`` block (optionality, label,
default value and conditional visibility).
"""

from __future__ import annotations

from datetime import datetime
from types import NoneType
from typing import Annotated, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from .identifiers import ID

T = TypeVar("T")


class ConditionalProperty(BaseModel):
    """
    Makes a field depend on the truthiness of another field.

    Attributes:
        inverse: True for ``\\!c`` (field applies when the target is falsy)
        target: Identifier of the field this one depends on
    """

    inverse: bool = False
    target: ID

    model_config = ConfigDict(frozen=True)


class GlobalProperties(BaseModel, Generic[T]):
    """
    Properties shared by every non-submit field kind.

    ``T`` is the native value type of the field kind, used for ``default``.
    """

    optional: bool = False
    label: str | None = None
    default: T | None = None
    conditional: ConditionalProperty | None = None

    model_config = ConfigDict(frozen=True)


class SubmitField(BaseModel):
    """
    Submit button of a form.

    ``destination`` is kept as a raw string because it may be relative.
    """

    kind: Literal["submit"] = "submit"
    id: ID
    destination: str
    label: str | None = None
    redirect: bool = False

    model_config = ConfigDict(frozen=True)


class StringField(BaseModel):
    """
    Free text input, optionally restricted to a set of variants.

    Examples:
        - name:string \\l Your name \\max 120
        - size:string \\e Small \\e Large
    """

    kind: Literal["string"] = "string"
    id: ID
    common: GlobalProperties[str] = Field(default_factory=GlobalProperties[str])
    min: int | None = None
    max: int | None = None
    multiline: bool = False
    secret: bool = False
    variants: list[str] | None = None

    model_config = ConfigDict(frozen=True)


class IntegerField(BaseModel):
    """Whole number input (64-bit signed)."""

    kind: Literal["int"] = "int"
    id: ID
    common: GlobalProperties[int] = Field(default_factory=GlobalProperties[int])
    min: int | None = None
    max: int | None = None
    step: int | None = None
    positive: bool = False

    model_config = ConfigDict(frozen=True)


class FloatField(BaseModel):
    """Floating point number input."""

    kind: Literal["float"] = "float"
    id: ID
    common: GlobalProperties[float] = Field(default_factory=GlobalProperties[float])
    min: float | None = None
    max: float | None = None
    step: float | None = None
    positive: bool = False

    model_config = ConfigDict(frozen=True)


class BooleanField(BaseModel):
    """Checkbox style input."""

    kind: Literal["bool"] = "bool"
    id: ID
    common: GlobalProperties[bool] = Field(default_factory=GlobalProperties[bool])

    model_config = ConfigDict(frozen=True)


class FileField(BaseModel):
    """
    File upload input.

    A file input can never have a default, hence ``GlobalProperties[NoneType]``.
    """

    kind: Literal["file"] = "file"
    id: ID
    common: GlobalProperties[NoneType] = Field(default_factory=GlobalProperties[NoneType])
    max: int | None = None  # size bound in bytes
    allowed_types: list[str] | None = None  # MIME types

    model_config = ConfigDict(frozen=True)


class ListField(BaseModel):
    """
    Repeatable group of child fields.

    The default is the initial number of entries.
    """

    kind: Literal["list"] = "list"
    id: ID
    common: GlobalProperties[int] = Field(default_factory=GlobalProperties[int])
    min: int | None = None
    max: int | None = None
    children: list[ID] | None = None

    model_config = ConfigDict(frozen=True)


class DateField(BaseModel):
    """
    Date and/or time picker.

    ``date`` and ``time`` select which parts are asked for.
    """

    kind: Literal["date"] = "date"
    id: ID
    common: GlobalProperties[datetime] = Field(default_factory=GlobalProperties[datetime])
    min: datetime | None = None
    max: datetime | None = None
    date: bool = False
    time: bool = False

    model_config = ConfigDict(frozen=True)


class EmailField(BaseModel):
    """E-mail address input."""

    kind: Literal["email"] = "email"
    id: ID
    common: GlobalProperties[str] = Field(default_factory=GlobalProperties[str])

    model_config = ConfigDict(frozen=True)


class PhoneField(BaseModel):
    """
    Telephone number input.

    Numbers are not format-validated.
    """

    kind: Literal["tel"] = "tel"
    id: ID
    common: GlobalProperties[str] = Field(default_factory=GlobalProperties[str])
    country: str | None = None

    model_config = ConfigDict(frozen=True)


FormField = Annotated[
    Union[
        SubmitField,
        StringField,
        IntegerField,
        FloatField,
        BooleanField,
        FileField,
        ListField,
        DateField,
        EmailField,
        PhoneField,
    ],
    Field(discriminator="kind"),
]
