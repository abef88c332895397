"""Pydantic models describing a remotely supplied form definition.

The form service returns a JSON document shaped as ``form → sections →
fields → options``. Attribute names on the wire are camelCase
(``fieldId``, ``minLength`` …); the models expose snake_case attributes and
accept either spelling on input.

Fields form a tagged variant keyed by ``type``: only the choice kinds
(``dropdown`` and ``radio``) carry ``options`` and they must carry at least
one. Unknown field types are rejected when the schema is loaded rather than
being discovered while rendering.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Iterator, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class FieldKind(StrEnum):
    """Closed set of input controls a form field can request."""

    TEXT = "text"
    TEXTAREA = "textarea"
    DATE = "date"
    EMAIL = "email"
    TEL = "tel"
    DROPDOWN = "dropdown"
    RADIO = "radio"
    CHECKBOX = "checkbox"

    @property
    def is_choice(self) -> bool:
        return self in (FieldKind.DROPDOWN, FieldKind.RADIO)


class _SchemaModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class FieldOption(_SchemaModel):
    """Selectable value of a dropdown or radio field."""

    value: str
    label: str
    data_test_id: str | None = None


class FieldValidation(_SchemaModel):
    """Optional validation block; only a custom message is supported."""

    message: str | None = None


class _FieldBase(_SchemaModel):
    field_id: str = Field(min_length=1, description="Identifier unique within the whole form.")
    label: str = ""
    required: bool = False
    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)
    placeholder: str | None = None
    data_test_id: str | None = None
    validation: FieldValidation | None = None

    @property
    def kind(self) -> FieldKind:
        return FieldKind(self.type)  # type: ignore[attr-defined]

    @property
    def custom_message(self) -> str | None:
        """Return the schema-supplied failure message, if any."""

        if self.validation is None:
            return None
        return self.validation.message or None


class TextField(_FieldBase):
    type: Literal["text"] = "text"


class TextAreaField(_FieldBase):
    type: Literal["textarea"] = "textarea"


class DateField(_FieldBase):
    type: Literal["date"] = "date"


class EmailField(_FieldBase):
    type: Literal["email"] = "email"


class TelField(_FieldBase):
    type: Literal["tel"] = "tel"


class CheckboxField(_FieldBase):
    type: Literal["checkbox"] = "checkbox"


class _ChoiceFieldBase(_FieldBase):
    options: tuple[FieldOption, ...] = Field(min_length=1)

    def option_values(self) -> tuple[str, ...]:
        return tuple(option.value for option in self.options)

    def option_label(self, value: str) -> str:
        """Return the display label for ``value`` (the value itself if unknown)."""

        for option in self.options:
            if option.value == value:
                return option.label
        return value


class DropdownField(_ChoiceFieldBase):
    type: Literal["dropdown"] = "dropdown"


class RadioField(_ChoiceFieldBase):
    type: Literal["radio"] = "radio"


FormField = Annotated[
    Union[
        TextField,
        TextAreaField,
        DateField,
        EmailField,
        TelField,
        DropdownField,
        RadioField,
        CheckboxField,
    ],
    Field(discriminator="type"),
]

ChoiceField = DropdownField | RadioField


class FormSection(_SchemaModel):
    """One wizard step: an ordered group of fields."""

    section_id: str | int
    title: str = ""
    description: str = ""
    fields: tuple[FormField, ...] = ()

    @property
    def key(self) -> str:
        return str(self.section_id)


class FormDefinition(_SchemaModel):
    """Complete form: title plus the ordered sections of the wizard."""

    form_title: str = ""
    form_id: str | None = None
    version: str | int | None = None
    sections: tuple[FormSection, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "FormDefinition":
        seen_fields: set[str] = set()
        seen_sections: set[str] = set()
        for section in self.sections:
            if section.key in seen_sections:
                raise ValueError(f"duplicate section id: {section.key}")
            seen_sections.add(section.key)
            for field in section.fields:
                if field.field_id in seen_fields:
                    raise ValueError(f"duplicate field id: {field.field_id}")
                seen_fields.add(field.field_id)
        return self

    @property
    def section_count(self) -> int:
        return len(self.sections)

    def iter_fields(self) -> Iterator[FormField]:
        for section in self.sections:
            yield from section.fields

    def get_field(self, field_id: str) -> FormField:
        """Return the field addressed by ``field_id``.

        Raises:
            KeyError: If no section defines ``field_id``.
        """

        for field in self.iter_fields():
            if field.field_id == field_id:
                return field
        raise KeyError(field_id)

    def section_for_field(self, field_id: str) -> FormSection:
        for section in self.sections:
            if any(field.field_id == field_id for field in section.fields):
                return section
        raise KeyError(field_id)


class FormResponse(_SchemaModel):
    """Envelope returned by the form service's ``/get-form`` endpoint."""

    message: str | None = None
    form: FormDefinition

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "FormResponse":
        return cls.model_validate(payload)


__all__ = [
    "CheckboxField",
    "ChoiceField",
    "DateField",
    "DropdownField",
    "EmailField",
    "FieldKind",
    "FieldOption",
    "FieldValidation",
    "FormDefinition",
    "FormField",
    "FormResponse",
    "FormSection",
    "RadioField",
    "TelField",
    "TextAreaField",
    "TextField",
]
