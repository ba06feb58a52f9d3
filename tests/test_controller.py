"""Tests for the keypad command handling and change notifications."""

import pytest

from duration_picker.controller import DurationInputController, DurationSnapshot
from duration_picker.digit_buffer import DigitBuffer, InvalidInputError


class Recorder:
    """Collects listener calls."""

    def __init__(self):
        self.calls = []

    def __call__(self, source, duration):
        self.calls.append((source, duration))


@pytest.fixture
def recorder():
    return Recorder()


def test_push_returns_consistent_snapshot():
    controller = DurationInputController()

    snapshot = controller.push("1")
    snapshot = controller.push("5")

    assert snapshot == DurationSnapshot(hours="00", minutes="00", seconds="15", raw="000015", duration_millis=15_000)
    assert controller.duration_millis == 15_000


def test_multi_digit_key():
    controller = DurationInputController()
    controller.push("3")
    snapshot = controller.push("00")
    assert snapshot.raw == "000300"
    assert snapshot.minutes == "03"


def test_every_command_notifies_listener(recorder):
    source = object()
    controller = DurationInputController(recorder, source=source)

    controller.push("2")
    controller.push("0")
    controller.backspace()
    controller.clear()
    controller.set_duration(90_000)

    assert recorder.calls == [
        (source, 2_000),
        (source, 20_000),
        (source, 2_000),
        (source, 0),
        (source, 90_000),
    ]


def test_noop_commands_still_notify(recorder):
    controller = DurationInputController(recorder)
    controller.push("0")
    controller.backspace()
    assert recorder.calls == [(controller, 0), (controller, 0)]


def test_listener_sees_new_state(recorder):
    controller = DurationInputController()

    def listener(source, duration):
        recorder(source.snapshot().raw, duration)

    controller.set_listener(listener)
    controller.push("7")
    assert recorder.calls == [("000007", 7_000)]


def test_listener_can_be_removed(recorder):
    controller = DurationInputController(recorder)
    controller.push("1")
    controller.set_listener(None)
    controller.push("2")
    assert len(recorder.calls) == 1


def test_buffer_does_not_hold_listener(recorder):
    controller = DurationInputController(recorder)
    assert not hasattr(controller.buffer, "__dict__")
    assert controller.buffer.__slots__ == ("_digits",)


def test_invalid_push_does_not_notify(recorder):
    controller = DurationInputController(recorder)
    controller.push("4")
    with pytest.raises(InvalidInputError):
        controller.push("4a")
    assert controller.save() == "000004"
    assert recorder.calls == [(controller, 4_000)]


def test_negative_duration_is_rejected(recorder):
    controller = DurationInputController(recorder)
    with pytest.raises(InvalidInputError):
        controller.set_duration(-5)
    assert recorder.calls == []


def test_save_and_restore(recorder):
    first = DurationInputController()
    first.push("13000")
    saved = first.save()

    second = DurationInputController(recorder)
    snapshot = second.restore(saved)

    assert saved == "013000"
    assert snapshot.raw == saved
    assert recorder.calls == [(second, 5_400_000)]


def test_restore_garbage_keeps_current_value():
    controller = DurationInputController()
    controller.push("42")
    with pytest.raises(InvalidInputError):
        controller.restore("not-a-number")
    assert controller.save() == "000042"


def test_uses_given_buffer():
    buffer = DigitBuffer.from_raw("000500")
    controller = DurationInputController(buffer=buffer)
    controller.push("1")
    assert buffer.raw_string() == "005001"


def test_saturated_duration_snapshot():
    controller = DurationInputController()
    snapshot = controller.set_duration(150 * 3_600_000)
    assert (snapshot.hours, snapshot.minutes, snapshot.seconds) == ("99", "99", "99")
