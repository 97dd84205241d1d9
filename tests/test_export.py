"""Tests for the JSON backup export."""

import json
from datetime import date

from weekledger.domain.entities import EntryType
from weekledger.domain.export import entries_to_json, export_filename, write_export


def test_entries_to_json_uses_entry_field_names(make_entry):
    entries = [
        make_entry(EntryType.EXPENSE, "30.50", date(2024, 5, 2), "Gas", "Tanque"),
        make_entry(EntryType.INVESTMENT, "100", date(2024, 5, 6), "Bienes Raíces"),
    ]

    data = json.loads(entries_to_json(entries))

    assert data == [
        {
            "id": "e1",
            "type": "expense",
            "category": "Gas",
            "amount": 30.5,
            "date": "2024-05-02",
            "description": "Tanque",
        },
        {
            "id": "e2",
            "type": "investment",
            "category": "Bienes Raíces",
            "amount": 100.0,
            "date": "2024-05-06",
            "description": None,
        },
    ]


def test_entries_to_json_empty():
    assert json.loads(entries_to_json([])) == []


def test_entries_to_json_is_indented(make_entry):
    text = entries_to_json([make_entry(EntryType.INCOME, "1", date(2024, 5, 2))])
    assert '\n  {\n    "id": "e1"' in text


def test_export_filename():
    assert export_filename(date(2024, 5, 2)) == "gastos-ingresos-2024-05-02.json"


def test_write_export(tmp_path, make_entry):
    path = write_export(
        [make_entry(EntryType.INCOME, "1", date(2024, 5, 2), "Ventas")],
        tmp_path / "backup.json",
    )

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data[0]["category"] == "Ventas"
