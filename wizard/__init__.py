"""Form wizard: validation engine, navigation controller and Streamlit views."""

from __future__ import annotations

from .controller import WizardController, WizardEvent, WizardEventKind
from .progress import SectionProgress, SectionStatus, section_progress
from .validation import SectionValidation, validate_field, validate_section

__all__ = [
    "SectionProgress",
    "SectionStatus",
    "SectionValidation",
    "WizardController",
    "WizardEvent",
    "WizardEventKind",
    "section_progress",
    "validate_field",
    "validate_section",
]
