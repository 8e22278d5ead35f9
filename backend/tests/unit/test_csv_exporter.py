"""Unit tests for CSV export."""

import csv
import io
from datetime import date

import pytest

from tour_admin.application.services import CsvExporter
from tour_admin.application.services.csv_exporter import render_csv
from tour_admin.domain.exceptions import NoDataToExportError


def _fixed_day() -> date:
    return date(2024, 3, 9)


def test_cells_are_flattened_and_quoted():
    content = render_csv(
        [
            {
                "id": 1,
                "name": 'Cafe "X"',
                "tag_ids": ["1", "2"],
                "city": {"id": 5, "name": "Porto"},
                "address": None,
                "verified": False,
                "price_level": 0,
            }
        ]
    )

    lines = content.splitlines()
    assert lines[0] == '"id","name","tag_ids","city","address","verified","price_level"'
    row = next(csv.reader(io.StringIO(lines[1])))
    assert row == [
        "1",
        'Cafe "X"',
        "1; 2",
        '{"id": 5, "name": "Porto"}',
        "",
        "false",
        "0",
    ]


def test_headers_come_from_first_record():
    content = render_csv([{"a": 1}, {"a": 2, "b": 3}])
    assert content.splitlines() == ['"a"', '"1"', '"2"']


def test_export_writes_dated_file(tmp_path):
    exporter = CsvExporter(tmp_path / "exports", today=_fixed_day)

    path = exporter.export([{"id": 1, "email": "a@b.c"}], "users")

    assert path.name == "users_2024-03-09.csv"
    assert path.read_text("utf-8").startswith('"id","email"')


def test_empty_export_creates_nothing(tmp_path):
    exporter = CsvExporter(tmp_path / "exports", today=_fixed_day)

    with pytest.raises(NoDataToExportError, match="No data to export"):
        exporter.export([], "locations")

    assert not (tmp_path / "exports").exists()
