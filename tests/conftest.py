from pathlib import Path
import json
import sys
from dataclasses import dataclass
from typing import Any

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models.form_schema import FormDefinition, FormResponse  # noqa: E402

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


@pytest.fixture
def form_payload() -> dict[str, Any]:
    """Raw ``/get-form`` response with three sections."""

    with (FIXTURES / "form_response.json").open("r", encoding="utf-8") as file:
        return json.load(file)


@pytest.fixture
def form_response(form_payload: dict[str, Any]) -> FormResponse:
    return FormResponse.from_payload(form_payload)


@pytest.fixture
def form_definition(form_response: FormResponse) -> FormDefinition:
    return form_response.form
