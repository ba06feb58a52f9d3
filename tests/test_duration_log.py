"""Tests for the Excel duration log."""

from datetime import date, datetime, timedelta

import pytest
from openpyxl import Workbook, load_workbook

from duration_picker.duration_log import (
    DURATION_SHEET,
    HEADERS,
    DurationEntry,
    ExcelStructureError,
    append_duration_entry,
    create_template,
    load_duration_entries,
)


@pytest.fixture
def log_path(tmp_path):
    path = tmp_path / "durations.xlsx"
    create_template(path)
    return path


def test_template_has_only_the_log_sheet(log_path):
    workbook = load_workbook(log_path)
    assert workbook.sheetnames == [DURATION_SHEET]
    header = next(workbook[DURATION_SHEET].iter_rows(max_row=1, values_only=True))
    assert header == HEADERS


def test_append_and_read_back(log_path):
    picked_at = datetime(2026, 3, 14, 9, 30)
    row = append_duration_entry(log_path, source="Панель", duration_millis=3_723_000, picked_at=picked_at)
    append_duration_entry(log_path, source="Диалог", duration_millis=900_000, picked_at=picked_at)

    assert row == 2
    assert load_duration_entries(log_path) == [
        DurationEntry(picked_on=date(2026, 3, 14), source="Панель", duration_millis=3_723_000),
        DurationEntry(picked_on=date(2026, 3, 14), source="Диалог", duration_millis=900_000),
    ]


def test_duration_cell_is_formatted_as_time(log_path):
    append_duration_entry(log_path, source="Панель", duration_millis=3_723_500)
    sheet = load_workbook(log_path)[DURATION_SHEET]
    cell = sheet.cell(row=2, column=3)
    assert cell.number_format == "[h]:mm:ss"
    assert cell.value is not None
    # Excel keeps whole seconds only; the exact value stays in the last column
    assert abs(cell.value - timedelta(hours=1, minutes=2, seconds=3)) < timedelta(milliseconds=1)
    assert sheet.cell(row=2, column=4).value == 3_723_500


def test_fills_first_empty_row(log_path):
    append_duration_entry(log_path, source="a", duration_millis=1_000)
    append_duration_entry(log_path, source="b", duration_millis=2_000)

    workbook = load_workbook(log_path)
    sheet = workbook[DURATION_SHEET]
    for column in range(1, len(HEADERS) + 1):
        sheet.cell(row=2, column=column).value = None
    workbook.save(log_path)

    assert append_duration_entry(log_path, source="c", duration_millis=3_000) == 2
    assert [entry.source for entry in load_duration_entries(log_path)] == ["c", "b"]


def test_cells_outside_the_log_columns_do_not_block_a_row(log_path):
    workbook = load_workbook(log_path)
    workbook[DURATION_SHEET].cell(row=2, column=len(HEADERS) + 2).value = "note"
    workbook.save(log_path)

    assert append_duration_entry(log_path, source="a", duration_millis=1_000) == 2


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        append_duration_entry(tmp_path / "nope.xlsx", source="x", duration_millis=0)


def test_workbook_without_log_sheet(tmp_path):
    path = tmp_path / "other.xlsx"
    workbook = Workbook()
    workbook.active.title = "Something else"
    workbook.save(path)

    with pytest.raises(ExcelStructureError, match=DURATION_SHEET):
        append_duration_entry(path, source="x", duration_millis=0)
    with pytest.raises(ExcelStructureError):
        load_duration_entries(path)
