"""Tests for diningmap.pipeline.table.write_table."""

from __future__ import annotations

import csv
import json

import pytest

from diningmap.pipeline.models import DiningLocationRow
from diningmap.pipeline.table import write_table


@pytest.fixture
def rows() -> list[DiningLocationRow]:
    return [
        DiningLocationRow("Okenshields", "https://x.edu/okenshields", 42.4465, -76.4857, position=50),
        DiningLocationRow("Bear Necessities Grill & C-Store", "https://x.edu/bear", 42.4553, -76.478),
    ]


def test_csv_has_header_and_four_columns(tmp_path, rows):
    path = write_table(rows, tmp_path / "out" / "dining.csv")

    with path.open(encoding="utf-8", newline="") as fh:
        data = list(csv.reader(fh))

    assert data[0] == ["label", "link", "latitude", "longitude"]
    assert data[1] == ["Okenshields", "https://x.edu/okenshields", "42.4465", "-76.4857"]
    assert data[2][0] == "Bear Necessities Grill & C-Store"
    assert len(data) == 3


def test_tsv_uses_tabs(tmp_path, rows):
    path = write_table(rows, tmp_path / "dining.tsv", fmt="tsv")
    first_line = path.read_text(encoding="utf-8").splitlines()[0]
    assert first_line == "label\tlink\tlatitude\tlongitude"


def test_json_round_values(tmp_path, rows):
    path = write_table(rows, tmp_path / "dining.json", fmt="JSON")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data[0] == {
        "label": "Okenshields",
        "link": "https://x.edu/okenshields",
        "latitude": 42.4465,
        "longitude": -76.4857,
    }
    assert "position" not in data[0]


def test_unknown_format_raises(tmp_path, rows):
    with pytest.raises(ValueError, match="Unknown table format"):
        write_table(rows, tmp_path / "dining.xlsx", fmt="xlsx")
