"""Command handling between the keypad widget and the digit buffer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .digit_buffer import DigitBuffer


LOGGER = logging.getLogger(__name__)

DurationListener = Callable[[Any, int], None]


@dataclass(frozen=True)
class DurationSnapshot:
    """What the display shows after a command."""

    hours: str
    minutes: str
    seconds: str
    raw: str
    duration_millis: int

    @classmethod
    def of(cls, buffer: DigitBuffer) -> "DurationSnapshot":
        return cls(
            hours=buffer.hours_string(),
            minutes=buffer.minutes_string(),
            seconds=buffer.seconds_string(),
            raw=buffer.raw_string(),
            duration_millis=buffer.to_duration_millis(),
        )


class DurationInputController:
    """Owns one :class:`DigitBuffer` and reports every change.

    ``listener`` is called as ``listener(source, duration_millis)`` after each
    command; ``source`` defaults to the controller itself and is normally the
    widget that owns it.
    """

    def __init__(
        self,
        listener: Optional[DurationListener] = None,
        *,
        source: Any = None,
        buffer: Optional[DigitBuffer] = None,
    ) -> None:
        self.buffer = buffer if buffer is not None else DigitBuffer()
        self.source = source if source is not None else self
        self._listener = listener

    def set_listener(self, listener: Optional[DurationListener]) -> None:
        """Replace the change listener (``None`` disables notifications)."""

        self._listener = listener

    # ---------------------------------------------------------------- commands
    def push(self, digits: str) -> DurationSnapshot:
        """Handle a keypad press (``"7"``, ``"00"`` ...)."""

        self.buffer.push_digits(digits)
        return self._changed("push", digits)

    def backspace(self) -> DurationSnapshot:
        self.buffer.pop_digit()
        return self._changed("backspace")

    def clear(self) -> DurationSnapshot:
        self.buffer.clear()
        return self._changed("clear")

    def set_duration(self, millis: int) -> DurationSnapshot:
        self.buffer.set_from_duration(millis)
        return self._changed("set", millis)

    def restore(self, raw: str) -> DurationSnapshot:
        """Restore a value saved with :meth:`save`."""

        DigitBuffer.from_raw(raw)  # rejects bad input before the live buffer is touched
        self.buffer.clear()
        self.buffer.push_digits(raw)
        return self._changed("restore", raw)

    # ------------------------------------------------------------------- reads
    def save(self) -> str:
        return self.buffer.raw_string()

    def snapshot(self) -> DurationSnapshot:
        return DurationSnapshot.of(self.buffer)

    @property
    def duration_millis(self) -> int:
        return self.buffer.to_duration_millis()

    def _changed(self, command: str, *args: Any) -> DurationSnapshot:
        snapshot = self.snapshot()
        LOGGER.debug("%s%s -> %s", command, args or "", snapshot.raw)
        if self._listener is not None:
            self._listener(self.source, snapshot.duration_millis)
        return snapshot
