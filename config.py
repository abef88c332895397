"""Runtime configuration for the form wizard.

Values are read from Streamlit secrets first and from the environment
second; a local ``.env`` file is loaded into the environment on import.

``FORM_API_BASE_URL`` points at the form service, ``FORM_API_TIMEOUT`` and
``FORM_API_MAX_TRIES`` bound each HTTP call, ``LOG_LEVEL`` sets the root
logger level and ``WIZARD_ID`` namespaces the wizard's session keys.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_FORM_API_BASE_URL = "https://dynamic-form-generator-9rl7.onrender.com"
DEFAULT_FORM_API_TIMEOUT = 15.0
DEFAULT_FORM_API_MAX_TRIES = 3
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_WIZARD_ID = "default"


@dataclass(slots=True, frozen=True)
class Settings:
    """Runtime configuration values.

    Attributes:
        form_api_base_url: Base URL of the form service, without trailing slash.
        form_api_timeout: Timeout in seconds for each HTTP request.
        form_api_max_tries: Attempts per request for transient network errors.
        log_level: Name of the root logging level.
        wizard_id: Namespace for the wizard's session-state keys.
    """

    form_api_base_url: str = DEFAULT_FORM_API_BASE_URL
    form_api_timeout: float = DEFAULT_FORM_API_TIMEOUT
    form_api_max_tries: int = DEFAULT_FORM_API_MAX_TRIES
    log_level: str = DEFAULT_LOG_LEVEL
    wizard_id: str = DEFAULT_WIZARD_ID


def _read_secrets() -> Mapping[str, Any]:
    try:
        return dict(st.secrets)
    except Exception:  # pragma: no cover - no secrets.toml outside Streamlit
        return {}


def _as_float(key: str, value: Optional[str], default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %s", key, value, default)
        return default
    if parsed <= 0:
        logger.warning("Ignoring non-positive %s=%r; using %s", key, value, default)
        return default
    return parsed


def _as_int(key: str, value: Optional[str], default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %s", key, value, default)
        return default
    if parsed < 1:
        logger.warning("Ignoring %s=%r below 1; using %s", key, value, default)
        return default
    return parsed


def _normalise_level(value: Optional[str]) -> str:
    if not value:
        return DEFAULT_LOG_LEVEL
    candidate = value.strip().upper()
    if candidate not in logging.getLevelNamesMapping():
        logger.warning("Unknown LOG_LEVEL=%r; using %s", value, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return candidate


def load_settings() -> Settings:
    """Load settings from Streamlit secrets or environment variables."""

    secrets = _read_secrets()

    def _get(key: str) -> Optional[str]:
        raw = secrets.get(key)
        if raw is not None:
            return str(raw)
        return os.getenv(key)

    base_url = (_get("FORM_API_BASE_URL") or DEFAULT_FORM_API_BASE_URL).strip().rstrip("/")
    return Settings(
        form_api_base_url=base_url or DEFAULT_FORM_API_BASE_URL,
        form_api_timeout=_as_float("FORM_API_TIMEOUT", _get("FORM_API_TIMEOUT"), DEFAULT_FORM_API_TIMEOUT),
        form_api_max_tries=_as_int("FORM_API_MAX_TRIES", _get("FORM_API_MAX_TRIES"), DEFAULT_FORM_API_MAX_TRIES),
        log_level=_normalise_level(_get("LOG_LEVEL")),
        wizard_id=(_get("WIZARD_ID") or DEFAULT_WIZARD_ID).strip() or DEFAULT_WIZARD_ID,
    )


__all__ = ["Settings", "load_settings"]
