"""HTTP client for the remote form service.

The service exposes two endpoints: ``POST /create-user`` registers a student
(an existing account answers ``409`` and is treated as a successful login)
and ``GET /get-form`` returns the form definition for a roll number.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

import requests
from pydantic import ValidationError
from requests import Response

from config import Settings
from core.errors import FormApiError, SchemaUnavailableError
from models.form_schema import FormResponse
from models.user import User
from utils.retry import retry_with_backoff

logger = logging.getLogger(__name__)

CREATE_USER_PATH = "/create-user"
GET_FORM_PATH = "/get-form"

USER_CREATED_MESSAGE = "User created successfully"
USER_EXISTS_MESSAGE = "User already exists"
CREATE_USER_FAILED_MESSAGE = "Failed to create user. Please try again."

_JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class CreateUserResult:
    """Outcome of the login request."""

    success: bool
    message: str


def _json_body(response: Response) -> Mapping[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, Mapping) else {}


def _raise_for_status(response: Response) -> None:
    if not response.ok:
        raise FormApiError(
            f"{response.url} answered HTTP {response.status_code}",
            status_code=response.status_code,
        )


class FormApiClient:
    """Thin wrapper around :mod:`requests` for the form service."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 15.0,
        max_tries: int = 3,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._send = retry_with_backoff(max_tries=max_tries, logger=logger)(self._request)

    @classmethod
    def from_settings(cls, settings: Settings, *, session: requests.Session | None = None) -> "FormApiClient":
        return cls(
            settings.form_api_base_url,
            timeout=settings.form_api_timeout,
            max_tries=settings.form_api_max_tries,
            session=session,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def _request(self, method: str, path: str, **kwargs: Any) -> Response:
        return self._session.request(
            method,
            f"{self._base_url}{path}",
            headers=_JSON_HEADERS,
            timeout=self._timeout,
            **kwargs,
        )

    def create_user(self, user: User) -> CreateUserResult:
        """Register ``user``; an already existing account counts as success."""

        try:
            response = self._send("POST", CREATE_USER_PATH, json=user.to_payload())
        except requests.RequestException as exc:
            logger.error("Error creating user %s: %s", user.roll_number, exc)
            return CreateUserResult(success=False, message=CREATE_USER_FAILED_MESSAGE)

        data = _json_body(response)
        message = data.get("message")
        if response.status_code == 409:
            logger.info("User %s already exists; continuing with login", user.roll_number)
            return CreateUserResult(success=True, message=str(message or USER_EXISTS_MESSAGE))
        if not response.ok:
            logger.warning("Create user failed with HTTP %s: %s", response.status_code, message)
        return CreateUserResult(success=response.ok, message=str(message or USER_CREATED_MESSAGE))

    def fetch_form(self, roll_number: str) -> FormResponse:
        """Return the form definition for ``roll_number``.

        Raises:
            SchemaUnavailableError: If the request fails or the payload is not a
                valid form definition.
        """

        try:
            response = self._send("GET", GET_FORM_PATH, params={"rollNumber": roll_number})
        except requests.RequestException as exc:
            raise SchemaUnavailableError(f"Form request failed: {exc}") from exc

        try:
            _raise_for_status(response)
        except FormApiError as exc:
            raise SchemaUnavailableError("Failed to fetch form") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise SchemaUnavailableError("Form response is not valid JSON") from exc
        if not isinstance(payload, Mapping):
            raise SchemaUnavailableError("Form response is not a JSON object")

        try:
            return FormResponse.from_payload(payload)
        except ValidationError as exc:
            raise SchemaUnavailableError(f"Form definition is invalid: {exc.error_count()} error(s)") from exc

    def get_form_structure(self, roll_number: str) -> FormResponse | None:
        """Return the form definition or ``None`` when it is unavailable."""

        try:
            return self.fetch_form(roll_number)
        except SchemaUnavailableError as exc:
            logger.error("Error fetching form for %s: %s", roll_number, exc)
            return None


__all__ = [
    "CREATE_USER_FAILED_MESSAGE",
    "CreateUserResult",
    "FormApiClient",
    "USER_CREATED_MESSAGE",
    "USER_EXISTS_MESSAGE",
]
