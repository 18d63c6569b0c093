"""Expense records stored as rows of a CSV file."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any, Sequence

from expensetracker.csvstore import read_csv, write_csv

log = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
_UINT64_MAX = 2**64 - 1
_DIGITS = re.compile(r"[0-9]+")


class ExpenseError(Exception):
    """Raised when an expense operation cannot be carried out."""


@dataclass(frozen=True)
class Filter:
    """A named value used to select or change expenses."""

    name: str
    value: Any

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


def _parse_uint(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise ValueError(f"invalid unsigned integer {text!r}")
    number = int(text)
    if number > _UINT64_MAX:
        raise ValueError(f"value out of range {text!r}")
    return number


def _normalized_date(year: int, month: int, day: int) -> date:
    """Build a date, carrying out-of-range months and days into neighbours."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError) as exc:
        raise ExpenseError(f"date out of range: {exc}") from exc


def _parse_date(text: str) -> date:
    return datetime.strptime(text, DATE_FORMAT).date()


def validate_date(year: int, month: int, day: int) -> None:
    """Raise ExpenseError unless year, month and day form a real date."""
    if not 1 <= month <= 12:
        raise ExpenseError("month should be between 1 to 12")
    if not 0 <= day <= 31:
        raise ExpenseError("day should be between 1 to 31")
    actual = _normalized_date(year, month, day)
    if (actual.year, actual.month, actual.day) != (year, month, day):
        raise ExpenseError(f"Month {month} doesn't have upto {day} days in year {year}")


def matches_filters(row: Sequence[str], *filters: Filter) -> bool:
    """Tell whether the row's date satisfies every day, month and year filter."""
    try:
        when = _parse_date(row[1])
    except ValueError as exc:
        log.warning("%s", exc)
        return False
    for flt in filters:
        if flt.name == "day":
            if when.day != flt.value:
                return False
        elif flt.name == "month":
            if when.month != flt.value:
                return False
        elif flt.name == "year":
            if when.year != flt.value:
                return False
        else:
            return False
    return True


def update_using_filters(row: Sequence[str], *filters: Filter) -> list[str]:
    """Return a copy of the row with each filter's value applied to it."""
    if not filters:
        raise ExpenseError("no values specified")
    try:
        when = _parse_date(row[1])
    except ValueError as exc:
        raise ExpenseError(str(exc)) from exc
    updated = list(row)
    for flt in filters:
        if flt.name == "description":
            updated[2] = str(flt.value)
        elif flt.name == "amount":
            if flt.value < 0:
                raise ExpenseError("amount must not be negative")
            updated[3] = str(flt.value)
        elif flt.name == "day":
            validate_date(when.year, when.month, flt.value)
            when = _normalized_date(when.year, when.month, flt.value)
        elif flt.name == "month":
            validate_date(when.year, flt.value, when.day)
            when = _normalized_date(when.year, flt.value, when.day)
        elif flt.name == "year":
            validate_date(flt.value, when.month, when.day)
            when = _normalized_date(flt.value, when.month, when.day)
        else:
            raise ExpenseError(f"Unknown value ({flt.name})")
    updated[1] = when.strftime(DATE_FORMAT)
    return updated


def next_id(rows: Sequence[Sequence[str]]) -> int:
    """Return one more than the highest id below the header row."""
    highest = 0
    for row in rows[1:]:
        try:
            highest = max(highest, _parse_uint(row[0]))
        except ValueError as exc:
            raise ExpenseError(f"Error with csv file: {exc}") from exc
    return highest + 1


def add_expense(
    csv_path: str | Path, description: str, amount: int, year: int, month: int, day: int
) -> int:
    """Append a new expense and return its id."""
    if amount < 0:
        raise ExpenseError("amount must not be negative")
    rows = read_csv(csv_path)
    expense_id = next_id(rows)
    when = _normalized_date(year, month, day).strftime(DATE_FORMAT)
    rows.append([str(expense_id), when, description, str(amount)])
    write_csv(csv_path, rows)
    return expense_id


def _row_id(row: Sequence[str], context: str) -> int:
    try:
        return _parse_uint(row[0])
    except ValueError as exc:
        raise ExpenseError(f"{context}: {exc}") from exc


def delete_expense(csv_path: str | Path, expense_id: int) -> None:
    """Remove the expense with the given id."""
    rows = read_csv(csv_path)
    for position, row in enumerate(rows[1:], start=1):
        if _row_id(row, "Wrong Csv Format") == expense_id:
            del rows[position]
            write_csv(csv_path, rows)
            return
    raise ExpenseError(f"(id: {expense_id}) Not Found")


def get_expenses(csv_path: str | Path, *filters: Filter) -> list[list[str]]:
    """Return the header row followed by the expenses matching every filter."""
    rows = read_csv(csv_path)
    if not filters:
        return rows
    return rows[:1] + [row for row in rows[1:] if matches_filters(row, *filters)]


def sum_expenses(csv_path: str | Path, *filters: Filter) -> int:
    """Return the total amount of the expenses matching every filter."""
    total = 0
    for row in get_expenses(csv_path, *filters)[1:]:
        try:
            total += _parse_uint(row[3])
        except ValueError as exc:
            raise ExpenseError(str(exc)) from exc
    return total


def update_expense(csv_path: str | Path, expense_id: int, *filters: Filter) -> None:
    """Apply the filters' values to the expense with the given id."""
    rows = read_csv(csv_path)
    for position, row in enumerate(rows[1:], start=1):
        if _row_id(row, "Error with CSV file") == expense_id:
            rows[position] = update_using_filters(row, *filters)
            write_csv(csv_path, rows)
            return
    raise ExpenseError(f"(Id: {expense_id}) Not Found")


def export_csv(path: str | Path, rows: Sequence[Sequence[str]]) -> None:
    """Write the given rows to another CSV file."""
    write_csv(path, rows)