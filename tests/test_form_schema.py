"""Parsing behaviour of the form definition models."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from models.form_schema import (
    CheckboxField,
    DropdownField,
    FieldKind,
    FormDefinition,
    FormResponse,
    RadioField,
    TextField,
)


def _form(*fields: dict[str, Any]) -> dict[str, Any]:
    return {
        "formTitle": "Test",
        "sections": [{"sectionId": "s1", "title": "One", "description": "", "fields": list(fields)}],
    }


def test_payload_parses_into_tagged_field_variants(form_response: FormResponse) -> None:
    form = form_response.form

    assert form.form_title == "Student Information Form"
    assert form.form_id == "form-42"
    assert form.section_count == 3
    assert [section.key for section in form.sections] == ["1", "2", "3"]

    first_name = form.get_field("firstName")
    assert isinstance(first_name, TextField)
    assert first_name.kind is FieldKind.TEXT
    assert first_name.min_length == 2
    assert first_name.max_length == 20
    assert first_name.custom_message == "First name must be 2-20 characters"
    assert first_name.data_test_id == "text-firstName"

    gender = form.get_field("gender")
    assert isinstance(gender, RadioField)
    assert gender.option_values() == ("male", "female", "other")
    assert gender.option_label("female") == "Female"
    assert gender.option_label("unknown") == "unknown"

    assert isinstance(form.get_field("course"), DropdownField)
    assert isinstance(form.get_field("terms"), CheckboxField)


def test_field_order_is_preserved(form_definition: FormDefinition) -> None:
    assert [field.field_id for field in form_definition.iter_fields()] == [
        "firstName",
        "dob",
        "gender",
        "email",
        "phone",
        "address",
        "course",
        "terms",
    ]


def test_section_for_field_and_unknown_ids(form_definition: FormDefinition) -> None:
    assert form_definition.section_for_field("email").title == "Contact Details"
    with pytest.raises(KeyError):
        form_definition.get_field("missing")
    with pytest.raises(KeyError):
        form_definition.section_for_field("missing")


def test_unknown_field_type_is_rejected() -> None:
    with pytest.raises(ValidationError):
        FormDefinition.model_validate(_form({"fieldId": "x", "type": "slider", "label": "X"}))


def test_choice_field_requires_options() -> None:
    with pytest.raises(ValidationError):
        FormDefinition.model_validate(_form({"fieldId": "x", "type": "dropdown", "label": "X"}))
    with pytest.raises(ValidationError):
        FormDefinition.model_validate(_form({"fieldId": "x", "type": "radio", "label": "X", "options": []}))


def test_non_choice_fields_ignore_stray_options() -> None:
    form = FormDefinition.model_validate(
        _form({"fieldId": "x", "type": "text", "label": "X", "options": [{"value": "a", "label": "A"}]})
    )

    assert not hasattr(form.get_field("x"), "options")


def test_duplicate_field_ids_are_rejected() -> None:
    payload = {
        "formTitle": "Dupes",
        "sections": [
            {"sectionId": "a", "title": "A", "fields": [{"fieldId": "name", "type": "text", "label": "Name"}]},
            {"sectionId": "b", "title": "B", "fields": [{"fieldId": "name", "type": "email", "label": "Mail"}]},
        ],
    }

    with pytest.raises(ValidationError, match="duplicate field id: name"):
        FormDefinition.model_validate(payload)


def test_form_requires_at_least_one_section() -> None:
    with pytest.raises(ValidationError):
        FormDefinition.model_validate({"formTitle": "Empty", "sections": []})


def test_snake_case_names_are_accepted() -> None:
    field = TextField(field_id="nick", label="Nickname", min_length=3)

    assert field.kind is FieldKind.TEXT
    assert field.required is False
    assert field.custom_message is None


def test_models_are_frozen(form_definition: FormDefinition) -> None:
    with pytest.raises(ValidationError):
        form_definition.form_title = "Changed"  # type: ignore[misc]
