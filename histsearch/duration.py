"""Compact, most-significant-unit formatting of durations."""

from __future__ import annotations

from datetime import timedelta

_SECONDS_PER_YEAR = 31_557_600  # 365.25 days
_SECONDS_PER_MONTH = 2_630_016  # 30.44 days
_SECONDS_PER_DAY = 86_400


def _to_microseconds(duration: timedelta | int | float) -> int:
    if isinstance(duration, timedelta):
        micros = duration // timedelta(microseconds=1)
    else:
        micros = round(duration * 1_000_000)
    return max(micros, 0)


def format_duration(duration: timedelta | int | float) -> str:
    """Format a duration using only its most significant unit.

    Accepts a ``timedelta`` or a number of seconds. Negative durations are
    treated as zero, and anything under a millisecond is shown as ``0s``.
    """
    secs, sub_micros = divmod(_to_microseconds(duration), 1_000_000)
    millis = sub_micros // 1000

    years, year_rest = divmod(secs, _SECONDS_PER_YEAR)
    months, month_rest = divmod(year_rest, _SECONDS_PER_MONTH)
    days, day_secs = divmod(month_rest, _SECONDS_PER_DAY)
    hours = day_secs // 3600
    minutes = day_secs % 3600 // 60
    seconds = day_secs % 60

    parts = (
        ("y", years),
        ("mo", months),
        ("d", days),
        ("h", hours),
        ("m", minutes),
        ("s", seconds),
        ("ms", millis),
    )
    for unit, value in parts:
        if value > 0:
            return f"{value}{unit}"
    return "0s"