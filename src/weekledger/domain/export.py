"""JSON backup export of the raw entry collection."""

import json
from datetime import date
from pathlib import Path
from typing import Any, Iterable

from weekledger.domain.entities import Entry

EXPORT_FILENAME_PREFIX = "gastos-ingresos"


def entry_to_dict(entry: Entry) -> dict[str, Any]:
    """Convert an entry to its backup representation."""
    return {
        "id": entry.id,
        "type": entry.type.value,
        "category": entry.category,
        "amount": float(entry.amount),
        "date": entry.date.isoformat(),
        "description": entry.description,
    }


def entries_to_json(entries: Iterable[Entry]) -> str:
    """Serialize entries as a JSON array, one object per entry."""
    return json.dumps(
        [entry_to_dict(entry) for entry in entries], indent=2, ensure_ascii=False
    )


def export_filename(today: date) -> str:
    """Default backup file name for a given day."""
    return f"{EXPORT_FILENAME_PREFIX}-{today.isoformat()}.json"


def write_export(entries: Iterable[Entry], path: Path) -> Path:
    """Write the JSON backup to ``path`` and return it."""
    path = Path(path)
    path.write_text(entries_to_json(entries), encoding="utf-8")
    return path
