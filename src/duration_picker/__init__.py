"""Keypad style input of hours/minutes/seconds durations."""

from .controller import DurationInputController, DurationSnapshot
from .digit_buffer import DigitBuffer, InvalidInputError
from .version import VERSION

__all__ = ["DigitBuffer", "DurationInputController", "DurationSnapshot", "InvalidInputError", "VERSION"]
