"""Submission handlers invoked once the last section validates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Mapping

from models.form_values import FieldValue

logger = logging.getLogger(__name__)

SUBMISSION_SUCCESS_MESSAGE = "Your form has been successfully submitted."


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome reported by a submission handler."""

    success: bool
    message: str = ""


SubmitHandler = Callable[[Mapping[str, FieldValue]], SubmissionResult]


def log_submission(values: Mapping[str, FieldValue]) -> SubmissionResult:
    """Record the submitted answers in the log and report success.

    The form service exposes no submission endpoint, so this is the default
    handler.
    """

    logger.info("Form submitted with values: %s", dict(values))
    return SubmissionResult(success=True, message=SUBMISSION_SUCCESS_MESSAGE)


__all__ = ["SUBMISSION_SUCCESS_MESSAGE", "SubmissionResult", "SubmitHandler", "log_submission"]
