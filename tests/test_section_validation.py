"""Rule precedence and outcomes of the section validation engine."""

from __future__ import annotations

from typing import Any

import pytest

from models.form_schema import FormDefinition, FormSection
from wizard.validation import (
    EMAIL_MESSAGE,
    MAX_LENGTH_MESSAGE,
    MIN_LENGTH_MESSAGE,
    REQUIRED_MESSAGE,
    TEL_MESSAGE,
    validate_field,
    validate_section,
)


def _section(*fields: dict[str, Any]) -> FormSection:
    return FormSection.model_validate({"sectionId": "s", "title": "S", "fields": list(fields)})


def _field(**attrs: Any):
    payload = {"fieldId": "f", "label": "F", "type": "text", **attrs}
    return _section(payload).fields[0]


def test_required_name_scenario() -> None:
    section = _section({"fieldId": "name", "type": "text", "label": "Name", "required": True})

    failed = validate_section(section, {})
    assert failed.errors == {"name": REQUIRED_MESSAGE}
    assert failed.is_valid is False

    passed = validate_section(section, {"name": "Alice"})
    assert passed.errors == {}
    assert passed.is_valid is True


@pytest.mark.parametrize("value", [None, "", [], ()])
def test_required_rejects_absent_and_empty_values(value: object) -> None:
    assert validate_field(_field(required=True), value) == REQUIRED_MESSAGE


@pytest.mark.parametrize("value", ["x", " ", True, False, ["a"]])
def test_required_accepts_any_non_empty_value(value: object) -> None:
    assert validate_field(_field(required=True), value) is None


def test_optional_field_without_value_passes() -> None:
    assert validate_field(_field(), None) is None


def test_custom_message_replaces_required_default() -> None:
    field = _field(required=True, validation={"message": "Tell us your name"})

    assert validate_field(field, "") == "Tell us your name"


def test_min_and_max_length_messages() -> None:
    field = _field(minLength=3, maxLength=5)

    assert validate_field(field, "ab") == MIN_LENGTH_MESSAGE.format(limit=3)
    assert validate_field(field, "abcdef") == MAX_LENGTH_MESSAGE.format(limit=5)
    assert validate_field(field, "abcd") is None


def test_min_length_overrides_required_for_empty_string() -> None:
    field = _field(required=True, minLength=2)

    assert validate_field(field, "") == "Minimum length is 2 characters"
    # Absent values are not strings, so only the required rule fires.
    assert validate_field(field, None) == REQUIRED_MESSAGE


def test_min_length_applies_to_empty_optional_string() -> None:
    assert validate_field(_field(minLength=1), "") == "Minimum length is 1 characters"


def test_length_rules_ignore_non_string_values() -> None:
    field = _field(type="checkbox", minLength=3)

    assert validate_field(field, True) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("not-an-email", EMAIL_MESSAGE),
        ("a@b", EMAIL_MESSAGE),
        ("a @b.com", EMAIL_MESSAGE),
        ("reach me at a@b.com", None),
        ("a@b.com", None),
        ("first.last@school.edu.in", None),
    ],
)
def test_email_format(value: str, expected: str | None) -> None:
    assert validate_field(_field(type="email"), value) == expected


def test_empty_email_is_not_format_checked() -> None:
    assert validate_field(_field(type="email"), "") is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("+91 (22) 555-0100", None),
        ("5550100", None),
        ("555-CALL", TEL_MESSAGE),
        ("++91", TEL_MESSAGE),
        ("+", TEL_MESSAGE),
        ("12345\n", None),
        ("12x", TEL_MESSAGE),
    ],
)
def test_tel_format(value: str, expected: str | None) -> None:
    assert validate_field(_field(type="tel"), value) == expected


def test_format_error_overrides_length_error() -> None:
    field = _field(type="email", minLength=20)

    assert validate_field(field, "nope") == EMAIL_MESSAGE


def test_custom_message_applies_to_every_rule() -> None:
    field = _field(type="tel", maxLength=3, validation={"message": "Bad phone"})

    assert validate_field(field, "12345") == "Bad phone"
    assert validate_field(field, "abc") == "Bad phone"


def test_section_errors_cover_only_failing_fields(form_definition: FormDefinition) -> None:
    section = form_definition.sections[1]
    values = {"email": "student@example.com", "phone": "call me", "firstName": ""}

    result = validate_section(section, values)

    assert result.section_id == "2"
    assert result.errors == {"phone": TEL_MESSAGE}
    assert result.is_valid is False


def test_validation_is_deterministic_and_side_effect_free(form_definition: FormDefinition) -> None:
    section = form_definition.sections[0]
    values = {"firstName": "A", "gender": "other"}
    snapshot = dict(values)

    first = validate_section(section, values)
    second = validate_section(section, values)

    assert first == second
    assert values == snapshot
    assert first.errors == {
        "firstName": "First name must be 2-20 characters",
        "dob": REQUIRED_MESSAGE,
    }
