"""Log records tagged with the logged-in student and the active form section."""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator

LOG_FORMAT = "%(asctime)s %(levelname)s [user=%(session_id)s section=%(wizard_step)s] %(name)s: %(message)s"

_session_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("session_id", default="-")
_wizard_step_var: contextvars.ContextVar[str] = contextvars.ContextVar("wizard_step", default="-")
_base_factory = logging.getLogRecordFactory()
_factory_installed = False


def _normalise(value: str | None) -> str:
    if value is None:
        return "-"
    return str(value).strip() or "-"


def _context_record_factory(*args: object, **kwargs: object) -> logging.LogRecord:
    record = _base_factory(*args, **kwargs)
    record.session_id = _session_id_var.get()
    record.wizard_step = _wizard_step_var.get()
    return record


def configure_logging(*, level: int | str = logging.INFO) -> None:
    """Set the root level and tag every record with the session context.

    The record factory is installed once, so records created by any logger
    (including pytest's capture handler) carry ``session_id`` and
    ``wizard_step``.
    """

    global _factory_installed
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        for handler in root.handlers:
            if handler.formatter is None:
                handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    if not _factory_installed:
        logging.setLogRecordFactory(_context_record_factory)
        _factory_installed = True


def set_wizard_step(step: str | None) -> None:
    """Bind the active section id for subsequent log records."""

    _wizard_step_var.set(_normalise(step))


@contextmanager
def log_context(*, session_id: str | None = None, wizard_step: str | None = None) -> Iterator[None]:
    """Bind the student's roll number (and optionally a section) for the block."""

    tokens: list[tuple[contextvars.ContextVar[str], contextvars.Token[str]]] = []
    if session_id is not None:
        tokens.append((_session_id_var, _session_id_var.set(_normalise(session_id))))
    if wizard_step is not None:
        tokens.append((_wizard_step_var, _wizard_step_var.set(_normalise(wizard_step))))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


__all__ = ["LOG_FORMAT", "configure_logging", "log_context", "set_wizard_step"]
