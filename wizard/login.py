"""Static login form collecting the student's roll number and name."""

from __future__ import annotations

import streamlit as st

from constants.keys import UIKeys
from models.user import User

ROLL_NUMBER_REQUIRED = "Roll number is required"
NAME_REQUIRED = "Name is required"


def validate_login(roll_number: str | None, name: str | None) -> dict[str, str]:
    """Return error messages keyed by ``roll_number``/``name``."""

    errors: dict[str, str] = {}
    if not (roll_number or "").strip():
        errors["roll_number"] = ROLL_NUMBER_REQUIRED
    if not (name or "").strip():
        errors["name"] = NAME_REQUIRED
    return errors


def render_login_form() -> User | None:
    """Render the login card and return the user once a valid form is sent."""

    with st.form(UIKeys.LOGIN_FORM):
        st.subheader("Student Login")
        st.caption("Enter your details to proceed to the form")
        roll_number = st.text_input(
            "Roll Number",
            key=UIKeys.LOGIN_ROLL_NUMBER,
            placeholder="Enter your roll number",
        )
        name = st.text_input(
            "Full Name",
            key=UIKeys.LOGIN_NAME,
            placeholder="Enter your full name",
        )
        submitted = st.form_submit_button(
            "Login",
            width="stretch",
        )

    if not submitted:
        return None
    errors = validate_login(roll_number, name)
    if errors:
        for message in errors.values():
            st.error(message)
        return None
    return User(roll_number=roll_number.strip(), name=name.strip())


__all__ = ["NAME_REQUIRED", "ROLL_NUMBER_REQUIRED", "render_login_form", "validate_login"]
