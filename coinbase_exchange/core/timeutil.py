"""Timestamp helpers producing the ISO-8601 form the exchange expects."""

from __future__ import annotations

import datetime as dt
import time
from collections.abc import Callable

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"

TimeLike = dt.datetime | int | float | str


def to_datetime(value: TimeLike) -> dt.datetime:
    """Coerce ``value`` into an aware UTC datetime.

    Naive datetimes and naive ISO strings are taken to already be UTC; the
    ambient local timezone is never consulted.
    """

    if isinstance(value, dt.datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=dt.timezone.utc)
        return value.astimezone(dt.timezone.utc)
    if isinstance(value, bool):
        raise TypeError("Booleans are not valid timestamps")
    if isinstance(value, (int, float)):
        return dt.datetime.fromtimestamp(value, tz=dt.timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        return to_datetime(dt.datetime.fromisoformat(text))
    raise TypeError(f"Unsupported timestamp type: {type(value).__name__}")


def format_timestamp(
    value: TimeLike | None = None,
    *,
    clock: Callable[[], float] = time.time,
) -> str:
    """Format ``value`` (or ``clock()`` when omitted) as ``YYYY-MM-DDTHH:MM:SS.ffffff``."""

    moment = to_datetime(clock() if value is None else value)
    return moment.strftime(TIMESTAMP_FORMAT)


__all__ = ["TIMESTAMP_FORMAT", "TimeLike", "format_timestamp", "to_datetime"]
