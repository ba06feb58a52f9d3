"""Fixed-width digit buffer behind the duration keypad.

The buffer always holds six decimal digits laid out as ``HHMMSS``. Typed
digits enter from the right and shift the existing ones to the left; the
leading zeros are only padding. Minutes and seconds are not limited to
0-59, so ``"009900"`` is a valid 99 minute entry.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .duration_codec import duration_of, hours_of, minutes_in_hour_of, seconds_in_minute_of


LOGGER = logging.getLogger(__name__)

MAX_DIGITS = 6
EMPTY_INPUT = "0" * MAX_DIGITS
SATURATED_INPUT = "9" * MAX_DIGITS
MAX_HOURS = 99

_DIGITS = frozenset("0123456789")


class InvalidInputError(ValueError):
    """A caller passed something the buffer does not accept."""


def _check_digit(digit: str) -> str:
    if not isinstance(digit, str) or len(digit) != 1 or digit not in _DIGITS:
        raise InvalidInputError(f"Only digits are allowed, got {digit!r}")
    return digit


def _normalise(significant: str) -> str:
    """Drop digits beyond the buffer width and pad with leading zeros."""

    return significant[-MAX_DIGITS:].rjust(MAX_DIGITS, "0")


class DigitBuffer:
    """Six digit ``HHMMSS`` input buffer."""

    __slots__ = ("_digits",)

    def __init__(self) -> None:
        self._digits = EMPTY_INPUT

    @classmethod
    def from_raw(cls, raw: str) -> "DigitBuffer":
        """Rebuild a buffer from a persisted :meth:`raw_string` value."""

        buffer = cls()
        buffer.push_digits(raw)
        return buffer

    def __repr__(self) -> str:
        return f"DigitBuffer({self._digits!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitBuffer):
            return NotImplemented
        return self._digits == other._digits

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------ edits
    def push_digit(self, digit: str) -> None:
        """Append one digit on the right, dropping the oldest one when full.

        A ``"0"`` typed into an empty buffer is ignored.
        """

        _check_digit(digit)
        significant = self._digits.lstrip("0")
        if significant or digit != "0":
            significant += digit
        self._digits = _normalise(significant)

    def push_digits(self, digits: Iterable[str]) -> None:
        """Push every digit of ``digits`` in order.

        The whole sequence is validated first; on error nothing is pushed.
        """

        try:
            iterator = iter(digits)
        except TypeError:
            raise InvalidInputError(f"Expected a sequence of digits, got {digits!r}") from None
        items = [_check_digit(digit) for digit in iterator]
        for digit in items:
            self.push_digit(digit)

    def pop_digit(self) -> None:
        """Remove the rightmost digit (backspace)."""

        self._digits = _normalise(self._digits.lstrip("0")[:-1])

    def clear(self) -> None:
        self._digits = EMPTY_INPUT

    # ------------------------------------------------------------------ reads
    def hours_string(self) -> str:
        return self._digits[0:2]

    def minutes_string(self) -> str:
        return self._digits[2:4]

    def seconds_string(self) -> str:
        return self._digits[4:6]

    def raw_string(self) -> str:
        """The full six digit string, also used as persisted state."""

        return self._digits

    def is_zero(self) -> bool:
        return self._digits == EMPTY_INPUT

    # -------------------------------------------------------------- durations
    def to_duration_millis(self) -> int:
        return duration_of(
            int(self.hours_string()),
            int(self.minutes_string()),
            int(self.seconds_string()),
        )

    def set_from_duration(self, millis: int) -> None:
        """Replace the content with ``millis`` rendered as ``HHMMSS``.

        Milliseconds below a full second are dropped. Durations of 100 hours
        or more saturate to ``"999999"``.
        """

        if isinstance(millis, bool) or not isinstance(millis, int):
            raise InvalidInputError(f"Duration must be an integer, got {millis!r}")
        if millis < 0:
            raise InvalidInputError(f"Duration must not be negative, got {millis}")

        hours = hours_of(millis)
        if hours > MAX_HOURS:
            LOGGER.debug("Duration %d ms exceeds %d hours, saturating", millis, MAX_HOURS)
            self._digits = SATURATED_INPUT
            return
        self._digits = f"{hours:02d}{minutes_in_hour_of(millis):02d}{seconds_in_minute_of(millis):02d}"
