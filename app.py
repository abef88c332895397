# app.py: Dynamic Form Builder (Streamlit entrypoint)
from __future__ import annotations

import logging
from pathlib import Path
import sys

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

from config import load_settings  # noqa: E402
from constants.keys import StateKeys, UIKeys  # noqa: E402
from core.errors import SCHEMA_UNAVAILABLE_MESSAGE  # noqa: E402
from models.form_schema import FormResponse  # noqa: E402
from models.user import User  # noqa: E402
from services.form_api import FormApiClient  # noqa: E402
from state import ensure_state, reset_state  # noqa: E402
from utils.logging_context import configure_logging, log_context  # noqa: E402
from wizard.controller import WizardController  # noqa: E402
from wizard.login import render_login_form  # noqa: E402
from wizard.section import render_wizard  # noqa: E402

SETTINGS = load_settings()
configure_logging(level=SETTINGS.log_level)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Dynamic Form Builder", page_icon="📝", layout="centered")
ensure_state()


def _login(user: User, client: FormApiClient) -> FormResponse | None:
    """Create the user and fetch their form; report failures in the UI."""

    with st.spinner("Logging in..."):
        result = client.create_user(user)
        if not result.success:
            st.error(f"**Login Failed**: {result.message}")
            return None
        form_response = client.get_form_structure(user.roll_number)
    if form_response is None:
        st.error(f"**Error**: {SCHEMA_UNAVAILABLE_MESSAGE}")
        return None
    return form_response


def _render_account_sidebar(user: User) -> None:
    with st.sidebar:
        st.markdown(f"Logged in as **{user.name}** ({user.roll_number})")
        if st.button("Log out", key=UIKeys.LOGOUT_BUTTON):
            logger.info("User %s logged out", user.roll_number)
            reset_state()
            st.rerun()


def main() -> None:
    st.header("Dynamic Form Builder")
    user = st.session_state.get(StateKeys.USER)
    form_response = st.session_state.get(StateKeys.FORM_RESPONSE)

    if not isinstance(user, User) or not isinstance(form_response, FormResponse):
        candidate = render_login_form()
        if candidate is None:
            return
        with log_context(session_id=candidate.roll_number):
            loaded = _login(candidate, FormApiClient.from_settings(SETTINGS))
            if loaded is None:
                return
            st.session_state[StateKeys.USER] = candidate
            st.session_state[StateKeys.FORM_RESPONSE] = loaded
            WizardController(loaded.form, wizard_id=SETTINGS.wizard_id).clear_values()
            logger.info("Loaded form %r with %d section(s)", loaded.form.form_title, loaded.form.section_count)
        st.toast("Login Successful: You've been logged in successfully.")
        st.rerun()
        return

    with log_context(session_id=user.roll_number):
        _render_account_sidebar(user)
        render_wizard(WizardController(form_response.form, wizard_id=SETTINGS.wizard_id))


main()
