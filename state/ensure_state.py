"""Helpers for initializing Streamlit session state."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable

import streamlit as st

from constants.keys import StateKeys

logger = logging.getLogger(__name__)


_DEFAULT_STATE_FACTORIES: Mapping[str, Callable[[], Any]] = MappingProxyType(
    {
        StateKeys.USER: lambda: None,
        StateKeys.FORM_RESPONSE: lambda: None,
        StateKeys.PENDING_EVENT: lambda: None,
    }
)


def ensure_state() -> None:
    """Populate missing session keys with their defaults."""

    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in st.session_state:
            st.session_state[key] = factory()


def reset_state() -> None:
    """Drop every session key, including wizard and widget state."""

    for key in list(st.session_state.keys()):
        del st.session_state[key]
    logger.info("Session state reset")
    ensure_state()
