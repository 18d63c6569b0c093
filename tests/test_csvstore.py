import csv

import pytest

from expensetracker.csvstore import HEADERS, create_csv_file, read_csv, write_csv


def test_create_csv_file_writes_header(tmp_path):
    path = tmp_path / "expenses.csv"
    create_csv_file(path)
    assert path.read_text(encoding="utf-8") == "ID,Date,Description,Amount\n"


def test_read_missing_file_creates_it_with_header(tmp_path):
    path = tmp_path / "nested" / "dir" / "expenses.csv"
    rows = read_csv(path)
    assert rows == [list(HEADERS)]
    assert path.exists()


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "expenses.csv"
    rows = [list(HEADERS), ["1", "2024-01-02", "Lunch", "12"], ["2", "2024-01-03", "Taxi", "7"]]
    write_csv(path, rows)
    assert read_csv(path) == rows


def test_fields_with_commas_and_quotes_survive(tmp_path):
    path = tmp_path / "expenses.csv"
    rows = [list(HEADERS), ["1", "2024-01-02", 'Dinner, "fancy"', "40"]]
    write_csv(path, rows)
    assert read_csv(path) == rows


def test_write_truncates_previous_contents(tmp_path):
    path = tmp_path / "expenses.csv"
    write_csv(path, [list(HEADERS), ["1", "2024-01-02", "A", "1"], ["2", "2024-01-02", "B", "2"]])
    write_csv(path, [list(HEADERS)])
    assert read_csv(path) == [list(HEADERS)]


def test_write_creates_missing_directories(tmp_path):
    path = tmp_path / "out" / "export.csv"
    rows = [["a", "b"], ["c", "d"]]
    write_csv(path, rows)
    assert read_csv(path) == rows


def test_blank_lines_are_skipped(tmp_path):
    path = tmp_path / "expenses.csv"
    path.write_text("ID,Date,Description,Amount\n\n1,2024-01-02,Lunch,12\n", encoding="utf-8")
    assert read_csv(path) == [list(HEADERS), ["1", "2024-01-02", "Lunch", "12"]]


def test_wrong_field_count_raises(tmp_path):
    path = tmp_path / "expenses.csv"
    path.write_text("ID,Date,Description,Amount\n1,2024-01-02\n", encoding="utf-8")
    with pytest.raises(csv.Error):
        read_csv(path)