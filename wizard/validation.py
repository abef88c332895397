"""Section validation for the form wizard.

Every rule is evaluated in a fixed order (required, minimum length, maximum
length, then the kind-specific format check) and a failing rule overwrites
the message of an earlier one, so only the last failing rule is reported for
a field. The functions here are pure: they never touch session state.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final, Mapping

from models.form_schema import FieldKind, FormField, FormSection
from models.form_values import FieldErrors, is_missing_value

REQUIRED_MESSAGE: Final[str] = "This field is required"
MIN_LENGTH_MESSAGE: Final[str] = "Minimum length is {limit} characters"
MAX_LENGTH_MESSAGE: Final[str] = "Maximum length is {limit} characters"
EMAIL_MESSAGE: Final[str] = "Please enter a valid email address"
TEL_MESSAGE: Final[str] = "Please enter a valid phone number"

EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(r"\S+@\S+\.\S+")
TEL_PATTERN: Final[re.Pattern[str]] = re.compile(r"\+?[0-9\s()-]+")


@dataclass(frozen=True)
class SectionValidation:
    """Errors found in one section, keyed by field id in field order."""

    section_id: str
    errors: FieldErrors = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _format_error(field_def: FormField, value: str) -> str | None:
    kind = field_def.kind
    if kind is FieldKind.EMAIL and EMAIL_PATTERN.search(value) is None:
        return EMAIL_MESSAGE
    if kind is FieldKind.TEL and TEL_PATTERN.fullmatch(value) is None:
        return TEL_MESSAGE
    return None


def validate_field(field_def: FormField, value: object | None) -> str | None:
    """Return the error message for ``value`` or ``None`` when it passes."""

    custom = field_def.custom_message
    error: str | None = None

    if field_def.required and is_missing_value(value):
        error = custom or REQUIRED_MESSAGE

    if isinstance(value, str):
        min_length = field_def.min_length
        if min_length is not None and len(value) < min_length:
            error = custom or MIN_LENGTH_MESSAGE.format(limit=min_length)
        max_length = field_def.max_length
        if max_length is not None and len(value) > max_length:
            error = custom or MAX_LENGTH_MESSAGE.format(limit=max_length)
        if value:
            format_error = _format_error(field_def, value)
            if format_error is not None:
                error = custom or format_error

    return error


def validate_section(section: FormSection, values: Mapping[str, object]) -> SectionValidation:
    """Validate every field of ``section`` against ``values``."""

    errors: FieldErrors = {}
    for field_def in section.fields:
        message = validate_field(field_def, values.get(field_def.field_id))
        if message is not None:
            errors[field_def.field_id] = message
    return SectionValidation(section_id=section.key, errors=errors)


__all__ = [
    "EMAIL_MESSAGE",
    "MAX_LENGTH_MESSAGE",
    "MIN_LENGTH_MESSAGE",
    "REQUIRED_MESSAGE",
    "SectionValidation",
    "TEL_MESSAGE",
    "validate_field",
    "validate_section",
]
