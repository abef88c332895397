"""Value types collected by the wizard.

Widgets produce one of three shapes depending on the field kind: strings for
the text-like, date and choice kinds, booleans for checkboxes, and (only when
supplied programmatically) sequences of strings.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from models.form_schema import FieldKind, FormField

FieldValue = str | bool | Sequence[str]
FormValues = dict[str, FieldValue]
FieldErrors = dict[str, str]


def is_missing_value(value: object | None) -> bool:
    """Return ``True`` for absent values, empty strings and empty sequences.

    ``False`` counts as a value: an unticked checkbox is an answer.
    """

    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def coerce_widget_value(field: FormField, raw: object | None) -> FieldValue:
    """Normalise a raw widget payload to the value shape of ``field``."""

    kind = field.kind
    if kind is FieldKind.CHECKBOX:
        return bool(raw)
    if raw is None:
        return ""
    if kind is FieldKind.DATE and isinstance(raw, (date, datetime)):
        return raw.isoformat()[:10]
    if isinstance(raw, (list, tuple)):
        return [str(item) for item in raw]
    return str(raw)


def parse_date_value(value: object | None) -> date | None:
    """Parse an ISO ``YYYY-MM-DD`` value back into a ``date``."""

    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


__all__ = [
    "FieldErrors",
    "FieldValue",
    "FormValues",
    "coerce_widget_value",
    "is_missing_value",
    "parse_date_value",
]
