"""External collaborators: the form service client and submission handlers."""

from .form_api import CreateUserResult, FormApiClient
from .submission import SubmissionResult, log_submission

__all__ = ["CreateUserResult", "FormApiClient", "SubmissionResult", "log_submission"]
