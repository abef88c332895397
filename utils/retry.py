"""Retry helpers with exponential backoff for form service calls."""

from __future__ import annotations

from typing import Any, Callable, Iterable, ParamSpec, TypeVar

import backoff
import requests

T = TypeVar("T")
P = ParamSpec("P")

# Network-level failures worth another attempt; HTTP error statuses are not.
TRANSIENT_HTTP_EXCEPTIONS: tuple[type[Exception], ...] = (
    requests.ConnectionError,
    requests.Timeout,
)


def retry_with_backoff(
    *,
    exceptions: Iterable[type[Exception]] = TRANSIENT_HTTP_EXCEPTIONS,
    max_tries: int = 3,
    giveup: Callable[[Exception], bool] | None = None,
    jitter: Any = backoff.full_jitter,
    logger: Any = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Return a decorator applying exponential backoff for ``exceptions``."""

    exception_tuple: tuple[type[Exception], ...] = tuple(exceptions)

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        def default_giveup(_: Exception) -> bool:
            return False

        resolved_giveup: Callable[[Exception], bool]
        if giveup is None:
            resolved_giveup = default_giveup
        else:
            resolved_giveup = giveup

        return backoff.on_exception(
            backoff.expo,
            exception_tuple,
            max_tries=max_tries,
            jitter=jitter,
            giveup=resolved_giveup,
            logger=logger,
        )(func)

    return decorator
