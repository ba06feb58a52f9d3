"""Журнал выбранных длительностей в книге Excel.

Содержит:
- имя листа журнала и заголовки столбцов;
- создание шаблонной книги;
- добавление записи о выбранной длительности;
- чтение записей обратно (для проверки и отображения).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import List, Optional

from openpyxl import Workbook, load_workbook

from .duration_codec import MILLIS_PER_SECOND


LOGGER = logging.getLogger(__name__)

# Имя листа и заголовки
DURATION_SHEET = "Durations"
HEADERS = ("Date", "Source", "Duration", "Milliseconds")


class ExcelStructureError(RuntimeError):
    """Структура книги Excel не соответствует ожиданиям."""


@dataclass(frozen=True)
class DurationEntry:
    """Одна строка журнала."""

    picked_on: date
    source: str
    duration_millis: int


def _open_log_sheet(workbook_path: Path):
    if not workbook_path.exists():
        raise FileNotFoundError(f"Excel file not found: {workbook_path}")

    workbook = load_workbook(workbook_path)
    if DURATION_SHEET not in workbook:
        raise ExcelStructureError(
            f"Workbook must contain sheet '{DURATION_SHEET}'. Found: {', '.join(workbook.sheetnames)}"
        )
    return workbook, workbook[DURATION_SHEET]


def _next_free_row(sheet) -> int:
    """Первая строка после заголовка, где все столбцы журнала пусты.

    Стили и границы не мешают: смотрим только на значения.
    """

    rows = sheet.iter_rows(min_row=2, max_col=len(HEADERS), values_only=True)
    for number, values in enumerate(rows, start=2):
        if all(value is None for value in values):
            return number
    return max(sheet.max_row, 1) + 1


def append_duration_entry(
    path: Path | str,
    *,
    source: str,
    duration_millis: int,
    picked_at: Optional[datetime] = None,
) -> int:
    """Добавить строку на лист журнала (дата, источник, длительность, мс).

    Возвращает номер записанной строки.
    """

    workbook_path = Path(path)
    workbook, sheet = _open_log_sheet(workbook_path)
    timestamp = picked_at or datetime.now()

    target_row = _next_free_row(sheet)

    c_date = sheet.cell(row=target_row, column=1)
    c_date.value = timestamp.date()
    c_date.number_format = "DD.MM.YYYY"
    sheet.cell(row=target_row, column=2).value = source
    # Длительность пишем как timedelta, чтобы Excel показывал часы:минуты:секунды
    c_duration = sheet.cell(row=target_row, column=3)
    c_duration.value = timedelta(seconds=duration_millis // MILLIS_PER_SECOND)
    c_duration.number_format = "[h]:mm:ss"
    sheet.cell(row=target_row, column=4).value = duration_millis

    workbook.save(workbook_path)
    LOGGER.info("Logged %d ms from %s to %s (row %d)", duration_millis, source, workbook_path, target_row)
    return target_row


def load_duration_entries(path: Path | str) -> List[DurationEntry]:
    """Прочитать все записи журнала (пустые строки пропускаются)."""

    _, sheet = _open_log_sheet(Path(path))

    entries: List[DurationEntry] = []
    for row in sheet.iter_rows(min_row=2, max_col=len(HEADERS), values_only=True):
        picked_on, source, _duration, millis = row
        if picked_on is None and millis is None:
            continue
        if isinstance(picked_on, datetime):
            picked_on = picked_on.date()
        entries.append(DurationEntry(picked_on=picked_on, source=str(source or ""), duration_millis=int(millis or 0)))
    return entries


def create_template(path: Path | str) -> None:
    """Создать пустую книгу Excel с листом журнала и заголовками."""

    workbook_path = Path(path)
    wb = Workbook()
    # Удалим дефолтный лист, чтобы в книге был только журнал
    wb.remove(wb.active)

    ws = wb.create_sheet(DURATION_SHEET)
    ws.append(list(HEADERS))

    wb.save(workbook_path)
    LOGGER.info("Created duration log template %s", workbook_path)
