"""Exception types shared by the form service client and the wizard."""

from __future__ import annotations


class FormWizardError(Exception):
    """Base exception for form loading and submission issues."""


class FormApiError(FormWizardError):
    """Raised when the form service answers with an unexpected response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


SCHEMA_UNAVAILABLE_MESSAGE = "Failed to fetch form structure. Please try again."


class SchemaUnavailableError(FormWizardError):
    """Raised when no usable form definition could be obtained."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or SCHEMA_UNAVAILABLE_MESSAGE)


class SubmissionError(FormWizardError):
    """Raised by submission handlers when the answers could not be delivered."""
