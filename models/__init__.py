"""Pydantic models for the form definition and the collected answers."""

from .form_schema import (
    FieldKind,
    FieldOption,
    FormDefinition,
    FormField,
    FormResponse,
    FormSection,
)
from .form_values import FieldErrors, FieldValue, FormValues
from .user import User

__all__ = [
    "FieldErrors",
    "FieldKind",
    "FieldOption",
    "FieldValue",
    "FormDefinition",
    "FormField",
    "FormResponse",
    "FormSection",
    "FormValues",
    "User",
]
