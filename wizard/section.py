"""Streamlit view of the wizard: header, progress, active section and buttons."""

from __future__ import annotations

import logging

import streamlit as st

from constants.keys import StateKeys
from wizard.controller import WizardController, WizardEvent, WizardEventKind
from wizard.fields import render_field
from wizard.progress import SectionStatus, completion_ratio, section_progress

logger = logging.getLogger(__name__)

_PROGRESS_MARKERS = {
    SectionStatus.COMPLETED: "●",
    SectionStatus.CURRENT: "◉",
    SectionStatus.UPCOMING: "○",
}


def notify(event: WizardEvent) -> None:
    """Surface ``event`` to the user."""

    if event.is_error:
        st.error(f"**{event.title}**: {event.message}")
    elif event.kind in (WizardEventKind.SUBMITTED, WizardEventKind.ALREADY_SUBMITTED):
        st.success(f"**{event.title}**: {event.message}")
    elif event.kind is WizardEventKind.AT_LAST_SECTION:
        st.info(f"**{event.title}**: {event.message}")


def render_progress(controller: WizardController) -> None:
    count = controller.schema.section_count
    markers = section_progress(controller.current_index, count)
    st.markdown(" ".join(_PROGRESS_MARKERS[marker.status] for marker in markers))
    st.progress(
        completion_ratio(controller.current_index, count, submitted=controller.is_submitted),
        text=f"Section {controller.current_index + 1} of {count}",
    )


def render_section(controller: WizardController) -> WizardEvent | None:
    """Render the active section and return the event of a pressed button."""

    section = controller.current_section
    errors = controller.current_errors
    is_first, is_last = controller.is_first, controller.is_last
    event: WizardEvent | None = None

    with st.container(border=True):
        st.subheader(section.title)
        if section.description:
            st.caption(section.description)

        for field_def in section.fields:
            render_field(
                field_def,
                controller.get_value(field_def.field_id),
                key=controller.keys.widget(field_def.field_id),
                on_value=controller.set_field_value,
                error=errors.get(field_def.field_id),
            )

        prev_col, _, next_col = st.columns([1, 2, 1])
        if not is_first:
            if prev_col.button("Previous", key=f"section-{section.key}-prev-button", width="stretch"):
                event = controller.go_prev()
        if is_last:
            if next_col.button("Submit", key="form-submit-button", type="primary", width="stretch"):
                event = controller.submit()
        elif next_col.button("Next", key=f"section-{section.key}-next-button", type="primary", width="stretch"):
            event = controller.go_next()
    return event


def render_submitted(controller: WizardController) -> None:
    st.success("Your form has been successfully submitted.")
    with st.expander("Submitted answers"):
        st.json(controller.values)
    if st.button("Start over", key="form-start-over-button"):
        controller.clear_values()
        st.rerun()


def render_wizard(controller: WizardController) -> None:
    """Render the whole wizard for one Streamlit run."""

    st.title(controller.schema.form_title)
    pending = st.session_state.pop(StateKeys.PENDING_EVENT, None)
    if isinstance(pending, WizardEvent):
        notify(pending)

    render_progress(controller)
    if controller.is_submitted:
        render_submitted(controller)
        return

    event = render_section(controller)
    if event is None:
        return
    logger.debug("Wizard event %s in section %s", event.kind, event.section_id)
    st.session_state[StateKeys.PENDING_EVENT] = event
    st.rerun()


__all__ = ["notify", "render_progress", "render_section", "render_submitted", "render_wizard"]
