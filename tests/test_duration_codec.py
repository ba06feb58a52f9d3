"""Unit tests for the millisecond <-> hours/minutes/seconds conversions."""

import pytest

from duration_picker.duration_codec import (
    duration_of,
    format_duration_or,
    format_hours_minutes_seconds,
    format_minutes_seconds,
    hours_of,
    minutes_in_hour_of,
    minutes_of,
    seconds_in_minute_of,
    seconds_of,
)


ONE_TWO_THREE = 3_723_000  # 1h 2m 3s


class TestDurationOf:
    def test_combines_parts(self):
        assert duration_of(1, 2, 3) == ONE_TWO_THREE

    def test_zero(self):
        assert duration_of(0, 0, 0) == 0

    def test_parts_above_59_are_not_rejected(self):
        assert duration_of(0, 99, 99) == (99 * 60 + 99) * 1000

    def test_largest_buffer_value(self):
        assert duration_of(99, 99, 99) == ((99 * 60 + 99) * 60 + 99) * 1000


class TestSplitting:
    def test_hours(self):
        assert hours_of(ONE_TWO_THREE) == 1

    def test_minutes_in_hour(self):
        assert minutes_in_hour_of(ONE_TWO_THREE) == 2

    def test_seconds_in_minute(self):
        assert seconds_in_minute_of(ONE_TWO_THREE) == 3

    def test_totals(self):
        assert minutes_of(ONE_TWO_THREE) == 62
        assert seconds_of(ONE_TWO_THREE) == 3723

    def test_sub_second_part_is_truncated(self):
        assert seconds_in_minute_of(59_999) == 59
        assert minutes_in_hour_of(59_999) == 0

    def test_wraps_at_hour_boundary(self):
        millis = 3_600_000 - 1
        assert hours_of(millis) == 0
        assert minutes_in_hour_of(millis) == 59
        assert seconds_in_minute_of(millis) == 59


class TestFormatting:
    @pytest.mark.parametrize(
        "millis, expected",
        [
            (0, "0:00:00"),
            (ONE_TWO_THREE, "1:02:03"),
            (15 * 60 * 1000, "0:15:00"),
            (100 * 3_600_000, "100:00:00"),
        ],
    )
    def test_hours_minutes_seconds(self, millis, expected):
        assert format_hours_minutes_seconds(millis) == expected

    @pytest.mark.parametrize(
        "millis, expected",
        [(0, "not set"), (-1_000, "not set"), (ONE_TWO_THREE, "1:02:03")],
    )
    def test_placeholder_for_empty_duration(self, millis, expected):
        assert format_duration_or(millis, "not set") == expected

    def test_minutes_seconds_keeps_total_minutes(self):
        assert format_minutes_seconds(ONE_TWO_THREE) == "62:03"
        assert format_minutes_seconds(5_000) == "0:05"
