"""In-memory entry store, used for fixtures and throwaway sessions."""

import uuid
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from weekledger.database.base import EntryStore
from weekledger.domain.entities import Entry, EntryType
from weekledger.domain.errors import NotFoundError, entry_not_found


class InMemoryEntryStore(EntryStore):
    """Entry store keeping entries in a dict keyed by ID."""

    def __init__(self, entries: Optional[Iterable[Entry]] = None):
        self._entries: dict[str, Entry] = {}
        for entry in entries or ():
            self._entries[entry.id] = entry

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        pass

    def initialize_schema(self) -> None:
        pass

    def snapshot(self) -> tuple[Entry, ...]:
        return tuple(self._entries.values())

    def create_entry(
        self,
        entry_type: EntryType,
        category: str,
        amount: Decimal,
        date: date,
        description: Optional[str] = None,
    ) -> str:
        entry_id = uuid.uuid4().hex
        self._entries[entry_id] = Entry(
            id=entry_id,
            type=entry_type,
            category=category,
            amount=amount,
            date=date,
            description=description,
        )
        return entry_id

    def get_entry(self, entry_id: str) -> Optional[Entry]:
        return self._entries.get(entry_id)

    def update_entry(
        self,
        entry_id: str,
        entry_type: Optional[EntryType] = None,
        category: Optional[str] = None,
        amount: Optional[Decimal] = None,
        date: Optional[date] = None,
        description: Optional[str] = None,
    ) -> None:
        entry = self._entries.get(entry_id)
        if entry is None:
            raise NotFoundError(entry_not_found(entry_id))

        changes = {
            "type": entry_type,
            "category": category,
            "amount": amount,
            "date": date,
            "description": description,
        }
        changes = {key: value for key, value in changes.items() if value is not None}
        if description == "":
            changes["description"] = None
        self._entries[entry_id] = replace(entry, **changes)

    def delete_entry(self, entry_id: str) -> None:
        if self._entries.pop(entry_id, None) is None:
            raise NotFoundError(entry_not_found(entry_id))

    def list_entries(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        entry_type: Optional[EntryType] = None,
    ) -> list[Entry]:
        entries = [
            entry
            for entry in self._entries.values()
            if (start_date is None or entry.date >= start_date)
            and (end_date is None or entry.date <= end_date)
            and (entry_type is None or entry.type == entry_type)
        ]
        return sorted(entries, key=lambda entry: entry.date, reverse=True)
