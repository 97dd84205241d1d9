"""Entry store layer for weekledger."""

from weekledger.database.base import EntryStore
from weekledger.database.memory import InMemoryEntryStore
from weekledger.database.factories import create_sqlite_database

__all__ = ["EntryStore", "InMemoryEntryStore", "create_sqlite_database"]
