"""Streamlit input controls for each field kind."""

from __future__ import annotations

from typing import Callable, Mapping

import streamlit as st

from models.form_schema import (
    ChoiceField,
    FieldKind,
    FormField,
)
from models.form_values import FieldValue, coerce_widget_value, parse_date_value

FieldChangeHandler = Callable[[str, FieldValue], None]
FieldRenderer = Callable[[FormField, FieldValue | None, str, Callable[[], None]], None]

DEFAULT_SELECT_PLACEHOLDER = "Select an option"


def field_label(field_def: FormField) -> str:
    """Return the label with a required marker."""

    if field_def.required:
        return f"{field_def.label} *"
    return field_def.label


def _text_value(value: FieldValue | None) -> str:
    return value if isinstance(value, str) else ""


def _choice_index(field_def: ChoiceField, value: FieldValue | None) -> int | None:
    if not isinstance(value, str):
        return None
    try:
        return field_def.option_values().index(value)
    except ValueError:
        return None


def _render_text_input(field_def: FormField, value: FieldValue | None, key: str, on_change: Callable[[], None]) -> None:
    st.text_input(
        field_label(field_def),
        value=_text_value(value),
        max_chars=field_def.max_length,
        key=key,
        on_change=on_change,
        placeholder=field_def.placeholder,
    )


def _render_text_area(field_def: FormField, value: FieldValue | None, key: str, on_change: Callable[[], None]) -> None:
    st.text_area(
        field_label(field_def),
        value=_text_value(value),
        max_chars=field_def.max_length,
        key=key,
        on_change=on_change,
        placeholder=field_def.placeholder,
    )


def _render_date(field_def: FormField, value: FieldValue | None, key: str, on_change: Callable[[], None]) -> None:
    st.date_input(
        field_label(field_def),
        value=parse_date_value(value),
        key=key,
        on_change=on_change,
    )


def _render_dropdown(field_def: FormField, value: FieldValue | None, key: str, on_change: Callable[[], None]) -> None:
    choice = _as_choice(field_def)
    st.selectbox(
        field_label(choice),
        options=choice.option_values(),
        index=_choice_index(choice, value),
        format_func=choice.option_label,
        key=key,
        on_change=on_change,
        placeholder=choice.placeholder or DEFAULT_SELECT_PLACEHOLDER,
    )


def _render_radio(field_def: FormField, value: FieldValue | None, key: str, on_change: Callable[[], None]) -> None:
    choice = _as_choice(field_def)
    st.radio(
        field_label(choice),
        options=choice.option_values(),
        index=_choice_index(choice, value),
        format_func=choice.option_label,
        key=key,
        on_change=on_change,
    )


def _render_checkbox(field_def: FormField, value: FieldValue | None, key: str, on_change: Callable[[], None]) -> None:
    # The checkbox carries its own label, without the required marker.
    st.checkbox(
        field_def.label,
        value=bool(value),
        key=key,
        on_change=on_change,
    )


def _as_choice(field_def: FormField) -> ChoiceField:
    if not field_def.kind.is_choice:
        raise TypeError(f"field {field_def.field_id} is not a choice field")
    return field_def  # type: ignore[return-value]


FIELD_RENDERERS: Mapping[FieldKind, FieldRenderer] = {
    FieldKind.TEXT: _render_text_input,
    FieldKind.EMAIL: _render_text_input,
    FieldKind.TEL: _render_text_input,
    FieldKind.TEXTAREA: _render_text_area,
    FieldKind.DATE: _render_date,
    FieldKind.DROPDOWN: _render_dropdown,
    FieldKind.RADIO: _render_radio,
    FieldKind.CHECKBOX: _render_checkbox,
}


def build_on_change(field_def: FormField, key: str, on_value: FieldChangeHandler) -> Callable[[], None]:
    """Return a widget callback forwarding the coerced value to ``on_value``."""

    def _callback() -> None:
        raw = st.session_state.get(key)
        on_value(field_def.field_id, coerce_widget_value(field_def, raw))

    return _callback


def render_field(
    field_def: FormField,
    value: FieldValue | None,
    *,
    key: str,
    on_value: FieldChangeHandler,
    error: str | None = None,
) -> None:
    """Render ``field_def`` and report edits through ``on_value``."""

    renderer = FIELD_RENDERERS[field_def.kind]
    renderer(field_def, value, key, build_on_change(field_def, key, on_value))
    if error:
        st.markdown(f":red[{error}]")


__all__ = [
    "DEFAULT_SELECT_PLACEHOLDER",
    "FIELD_RENDERERS",
    "build_on_change",
    "field_label",
    "render_field",
]
