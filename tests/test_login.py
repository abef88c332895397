from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

import wizard.login as login
from models.user import User


def test_validate_login_requires_both_fields() -> None:
    assert login.validate_login("", "  ") == {
        "roll_number": login.ROLL_NUMBER_REQUIRED,
        "name": login.NAME_REQUIRED,
    }
    assert login.validate_login("R-17", None) == {"name": login.NAME_REQUIRED}
    assert login.validate_login(" R-17 ", "Alice") == {}


def test_user_payload_uses_wire_names() -> None:
    user = User(roll_number="R-17", name="Alice")

    assert user.to_payload() == {"rollNumber": "R-17", "name": "Alice"}


class _FormStub:
    def __enter__(self) -> "_FormStub":
        return self

    def __exit__(self, *_exc: object) -> bool:
        return False


def _fake_streamlit(inputs: dict[str, str], submitted: bool) -> SimpleNamespace:
    errors: list[str] = []
    button_kwargs: list[dict[str, Any]] = []

    def form_submit_button(label: str, **kwargs: Any) -> bool:
        button_kwargs.append(kwargs)
        return submitted

    def text_input(label: str, **_kwargs: Any) -> str:
        return inputs[label]

    return SimpleNamespace(
        form=lambda *_args, **_kwargs: _FormStub(),
        subheader=lambda *_args, **_kwargs: None,
        caption=lambda *_args, **_kwargs: None,
        text_input=text_input,
        form_submit_button=form_submit_button,
        error=errors.append,
        errors=errors,
        button_kwargs=button_kwargs,
    )


def test_render_login_form_returns_trimmed_user(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _fake_streamlit({"Roll Number": " R-17 ", "Full Name": "Alice "}, submitted=True)
    monkeypatch.setattr(login, "st", fake)

    user = login.render_login_form()

    assert user == User(roll_number="R-17", name="Alice")
    assert fake.errors == []
    assert fake.button_kwargs == [{"width": "stretch"}]


def test_render_login_form_reports_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _fake_streamlit({"Roll Number": "", "Full Name": "Alice"}, submitted=True)
    monkeypatch.setattr(login, "st", fake)

    assert login.render_login_form() is None
    assert fake.errors == [login.ROLL_NUMBER_REQUIRED]


def test_render_login_form_waits_for_submit(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _fake_streamlit({"Roll Number": "R-17", "Full Name": "Alice"}, submitted=False)
    monkeypatch.setattr(login, "st", fake)

    assert login.render_login_form() is None
