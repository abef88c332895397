"""Core package: shared exception types."""

from .errors import FormApiError, FormWizardError, SchemaUnavailableError, SubmissionError

__all__ = ["FormApiError", "FormWizardError", "SchemaUnavailableError", "SubmissionError"]
