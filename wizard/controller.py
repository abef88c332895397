"""Wizard controller driving navigation across the sections of a form.

The controller owns three pieces of state: the current section index, the
collected answers and the validation errors of each section. State lives in
a mutable mapping (``st.session_state`` unless another mapping is supplied)
under keys namespaced by the wizard id, so the controller object itself can
be rebuilt on every Streamlit rerun.

Operations do not notify the UI directly. Each navigation call returns a
:class:`WizardEvent` describing what happened and the presentation layer
decides how to surface it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Mapping, MutableMapping, Sequence, cast

import streamlit as st

from core.errors import SubmissionError
from models.form_schema import FormDefinition, FormSection
from models.form_values import FieldErrors, FieldValue, FormValues
from services.submission import SUBMISSION_SUCCESS_MESSAGE, SubmissionResult, SubmitHandler, log_submission
from utils.logging_context import set_wizard_step
from wizard.navigation.keys import WizardSessionKeys
from wizard.validation import SectionValidation, validate_section

logger = logging.getLogger(__name__)

VALIDATION_ERROR_TITLE = "Validation Error"
NEXT_BLOCKED_MESSAGE = "Please fix the errors before proceeding."
SUBMIT_BLOCKED_MESSAGE = "Please fix the errors before submitting the form."
SUBMIT_NOT_LAST_MESSAGE = "Complete the remaining sections before submitting the form."
LAST_SECTION_TITLE = "Last Section"
LAST_SECTION_MESSAGE = "This is the last section. Submit the form to finish."
SUBMITTED_TITLE = "Form Submitted"
SUBMISSION_FAILED_TITLE = "Submission Failed"
SUBMISSION_FAILED_MESSAGE = "We couldn't submit the form. Please try again."


class WizardEventKind(StrEnum):
    """Outcome of a wizard operation."""

    ADVANCED = "advanced"
    AT_LAST_SECTION = "at_last_section"
    MOVED_BACK = "moved_back"
    VALIDATION_FAILED = "validation_failed"
    SUBMITTED = "submitted"
    SUBMISSION_FAILED = "submission_failed"
    ALREADY_SUBMITTED = "already_submitted"


@dataclass(frozen=True)
class WizardEvent:
    """Result of ``go_next``/``go_prev``/``submit`` for the presentation layer."""

    kind: WizardEventKind
    section_id: str
    title: str = ""
    message: str = ""
    errors: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return self.kind in (WizardEventKind.VALIDATION_FAILED, WizardEventKind.SUBMISSION_FAILED)


class WizardController:
    """Linear multi-section wizard with validation gating forward moves."""

    def __init__(
        self,
        schema: FormDefinition,
        *,
        submit_handler: SubmitHandler | None = None,
        wizard_id: str = "default",
        session_state: MutableMapping[str, object] | None = None,
    ) -> None:
        self._schema = schema
        self._submit_handler: SubmitHandler = submit_handler or log_submission
        self._keys = WizardSessionKeys(wizard_id=wizard_id)
        if session_state is None:
            session_state = cast(MutableMapping[str, object], st.session_state)
        self._session_state = session_state
        self.ensure_state_defaults()

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------
    def ensure_state_defaults(self) -> None:
        state = self._session_state
        if not isinstance(state.get(self._keys.section_index), int):
            state[self._keys.section_index] = 0
        if not isinstance(state.get(self._keys.values), dict):
            state[self._keys.values] = {}
        if not isinstance(state.get(self._keys.errors), dict):
            state[self._keys.errors] = {}
        if not isinstance(state.get(self._keys.submitted), bool):
            state[self._keys.submitted] = False

    @property
    def keys(self) -> WizardSessionKeys:
        return self._keys

    @property
    def schema(self) -> FormDefinition:
        return self._schema

    @property
    def sections(self) -> Sequence[FormSection]:
        return self._schema.sections

    @property
    def current_index(self) -> int:
        raw = self._session_state.get(self._keys.section_index, 0)
        index = raw if isinstance(raw, int) else 0
        return max(0, min(index, self._schema.section_count - 1))

    def _set_index(self, index: int) -> None:
        clamped = max(0, min(index, self._schema.section_count - 1))
        self._session_state[self._keys.section_index] = clamped
        set_wizard_step(self.sections[clamped].key)

    @property
    def current_section(self) -> FormSection:
        return self.sections[self.current_index]

    @property
    def is_first(self) -> bool:
        return self.current_index == 0

    @property
    def is_last(self) -> bool:
        return self.current_index == self._schema.section_count - 1

    @property
    def is_submitted(self) -> bool:
        return bool(self._session_state.get(self._keys.submitted, False))

    @property
    def values(self) -> FormValues:
        """Return a copy of the collected answers."""

        return dict(self._values_store())

    def _values_store(self) -> FormValues:
        return cast(FormValues, self._session_state[self._keys.values])

    def _errors_store(self) -> dict[str, FieldErrors]:
        return cast(dict[str, FieldErrors], self._session_state[self._keys.errors])

    def get_value(self, field_id: str, default: FieldValue | None = None) -> FieldValue | None:
        return self._values_store().get(field_id, default)

    def errors_for(self, section_id: str) -> FieldErrors:
        return dict(self._errors_store().get(section_id, {}))

    @property
    def current_errors(self) -> FieldErrors:
        return self.errors_for(self.current_section.key)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def set_field_value(self, field_id: str, value: FieldValue) -> None:
        """Store ``value`` and drop any pending error for ``field_id``.

        The value is not re-validated here; the next ``go_next``/``submit``
        decides whether it passes. Edits are ignored once the form has been
        submitted.

        Raises:
            KeyError: If ``field_id`` is not part of the form.
        """

        section = self._schema.section_for_field(field_id)
        if self.is_submitted:
            logger.debug("Ignored edit of %s after submission", field_id)
            return
        self._values_store()[field_id] = value
        section_errors = self._errors_store().get(section.key)
        if section_errors and field_id in section_errors:
            del section_errors[field_id]
            logger.debug("Cleared error for field %s after edit", field_id)

    def clear_values(self) -> None:
        """Forget all answers and errors and return to the first section."""

        self._session_state[self._keys.values] = {}
        self._session_state[self._keys.errors] = {}
        self._session_state[self._keys.submitted] = False
        self._set_index(0)
        logger.info("Wizard state cleared")

    def validate_current(self) -> SectionValidation:
        section = self.current_section
        result = validate_section(section, self._values_store())
        errors = self._errors_store()
        if result.is_valid:
            errors.pop(section.key, None)
        else:
            errors[section.key] = dict(result.errors)
        return result

    def _already_submitted(self) -> WizardEvent:
        return WizardEvent(
            kind=WizardEventKind.ALREADY_SUBMITTED,
            section_id=self.current_section.key,
            title=SUBMITTED_TITLE,
            message="This form has already been submitted.",
        )

    def go_next(self) -> WizardEvent:
        """Advance one section when the current section validates."""

        if self.is_submitted:
            return self._already_submitted()
        section = self.current_section
        set_wizard_step(section.key)
        result = self.validate_current()
        if not result.is_valid:
            logger.info("Section %s failed validation: %s", section.key, sorted(result.errors))
            return WizardEvent(
                kind=WizardEventKind.VALIDATION_FAILED,
                section_id=section.key,
                title=VALIDATION_ERROR_TITLE,
                message=NEXT_BLOCKED_MESSAGE,
                errors=result.errors,
            )
        if self.is_last:
            logger.debug("Section %s is valid but already the last one", section.key)
            return WizardEvent(
                kind=WizardEventKind.AT_LAST_SECTION,
                section_id=section.key,
                title=LAST_SECTION_TITLE,
                message=LAST_SECTION_MESSAGE,
            )
        self._set_index(self.current_index + 1)
        logger.info("Advanced from section %s to %s", section.key, self.current_section.key)
        return WizardEvent(kind=WizardEventKind.ADVANCED, section_id=self.current_section.key)

    def go_prev(self) -> WizardEvent:
        """Step back one section without validating."""

        if self.is_submitted:
            return self._already_submitted()
        self._set_index(self.current_index - 1)
        logger.debug("Moved back to section %s", self.current_section.key)
        return WizardEvent(kind=WizardEventKind.MOVED_BACK, section_id=self.current_section.key)

    def submit(self) -> WizardEvent:
        """Validate the last section and hand the answers to the submit handler.

        Submitting from any other section is refused without validating or
        calling the handler.
        """

        if self.is_submitted:
            return self._already_submitted()
        section = self.current_section
        set_wizard_step(section.key)
        if not self.is_last:
            logger.info("Submission refused from section %s: not the last section", section.key)
            return WizardEvent(
                kind=WizardEventKind.VALIDATION_FAILED,
                section_id=section.key,
                title=VALIDATION_ERROR_TITLE,
                message=SUBMIT_NOT_LAST_MESSAGE,
            )
        result = self.validate_current()
        if not result.is_valid:
            logger.info("Submission blocked by section %s: %s", section.key, sorted(result.errors))
            return WizardEvent(
                kind=WizardEventKind.VALIDATION_FAILED,
                section_id=section.key,
                title=VALIDATION_ERROR_TITLE,
                message=SUBMIT_BLOCKED_MESSAGE,
                errors=result.errors,
            )

        try:
            outcome = self._submit_handler(self.values)
        except SubmissionError as exc:
            logger.warning("Submission handler failed: %s", exc)
            outcome = SubmissionResult(success=False, message=str(exc))
        except Exception:
            logger.exception("Submission handler raised an unexpected error")
            outcome = SubmissionResult(success=False, message=SUBMISSION_FAILED_MESSAGE)

        if not outcome.success:
            return WizardEvent(
                kind=WizardEventKind.SUBMISSION_FAILED,
                section_id=section.key,
                title=SUBMISSION_FAILED_TITLE,
                message=outcome.message or SUBMISSION_FAILED_MESSAGE,
            )

        self._session_state[self._keys.submitted] = True
        logger.info("Form %s submitted", self._schema.form_id or self._schema.form_title)
        return WizardEvent(
            kind=WizardEventKind.SUBMITTED,
            section_id=section.key,
            title=SUBMITTED_TITLE,
            message=outcome.message or SUBMISSION_SUCCESS_MESSAGE,
        )


__all__ = [
    "LAST_SECTION_MESSAGE",
    "SUBMIT_NOT_LAST_MESSAGE",
    "WizardController",
    "WizardEvent",
    "WizardEventKind",
]
