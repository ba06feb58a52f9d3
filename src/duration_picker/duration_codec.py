"""Conversions between millisecond durations and hours/minutes/seconds."""

from __future__ import annotations


MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE


def duration_of(hours: int, minutes: int, seconds: int) -> int:
    """Return the duration in milliseconds for the given parts.

    The parts are not range checked, so ``duration_of(0, 99, 0)`` is simply
    99 minutes.
    """

    return ((hours * 60 + minutes) * 60 + seconds) * MILLIS_PER_SECOND


def hours_of(millis: int) -> int:
    """Whole hours contained in ``millis``."""

    return millis // MILLIS_PER_HOUR


def minutes_of(millis: int) -> int:
    """Whole minutes contained in ``millis``."""

    return millis // MILLIS_PER_MINUTE


def minutes_in_hour_of(millis: int) -> int:
    """Minute part (0-59) of ``millis``."""

    return minutes_of(millis) % 60


def seconds_of(millis: int) -> int:
    """Whole seconds contained in ``millis``."""

    return millis // MILLIS_PER_SECOND


def seconds_in_minute_of(millis: int) -> int:
    """Second part (0-59) of ``millis``."""

    return seconds_of(millis) % 60


def format_hours_minutes_seconds(millis: int) -> str:
    """Format a duration as ``H:MM:SS`` (e.g. ``1:02:03``)."""

    return f"{hours_of(millis)}:{minutes_in_hour_of(millis):02d}:{seconds_in_minute_of(millis):02d}"


def format_minutes_seconds(millis: int) -> str:
    """Format a duration as ``M:SS`` where minutes may exceed 59."""

    return f"{minutes_of(millis)}:{seconds_in_minute_of(millis):02d}"


def format_duration_or(millis: int, placeholder: str) -> str:
    """``H:MM:SS`` for a positive duration, ``placeholder`` otherwise."""

    if millis <= 0:
        return placeholder
    return format_hours_minutes_seconds(millis)
