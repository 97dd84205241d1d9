"""Abstract entry store interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from weekledger.domain.entities import Entry, EntryType


class EntryStore(ABC):
    """Abstract supplier of entry snapshots for weekledger.

    Aggregation only ever calls ``snapshot``; the remaining operations back
    the add/edit/delete flow.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the backing store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the backing store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def snapshot(self) -> tuple[Entry, ...]:
        """Return every stored entry, in no particular order."""
        pass

    @abstractmethod
    def create_entry(
        self,
        entry_type: EntryType,
        category: str,
        amount: Decimal,
        date: date,
        description: Optional[str] = None,
    ) -> str:
        """Create an entry. Returns the assigned entry ID."""
        pass

    @abstractmethod
    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Get entry by ID."""
        pass

    @abstractmethod
    def update_entry(
        self,
        entry_id: str,
        entry_type: Optional[EntryType] = None,
        category: Optional[str] = None,
        amount: Optional[Decimal] = None,
        date: Optional[date] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update the given fields of an entry.

        None leaves a field unchanged. An empty description clears it.
        """
        pass

    @abstractmethod
    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry."""
        pass

    @abstractmethod
    def list_entries(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        entry_type: Optional[EntryType] = None,
    ) -> list[Entry]:
        """List entries with optional filters, most recent first.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            entry_type: Optional entry type filter
        """
        pass
