"""Shared pytest fixtures for weekledger tests."""

import itertools
import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from weekledger.database.factories import create_sqlite_database
from weekledger.database.memory import InMemoryEntryStore
from weekledger.domain.entities import Entry, EntryType
from weekledger.domain.entry import EntryService
from weekledger.domain.summary import SummaryService


@pytest.fixture
def temp_db():
    """Create a temporary SQLite-backed store for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()
    store.initialize_schema()

    yield store

    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_store():
    """Create an empty in-memory store."""
    return InMemoryEntryStore()


@pytest.fixture(params=["memory", "sqlite"])
def store(request):
    """Run a test against every store implementation."""
    if request.param == "memory":
        return request.getfixturevalue("memory_store")
    return request.getfixturevalue("temp_db")


@pytest.fixture
def entry_service(store):
    """Create an EntryService over each store implementation."""
    return EntryService(store)


@pytest.fixture
def summary_service(memory_store):
    """Create a SummaryService over an in-memory store."""
    return SummaryService(memory_store)


@pytest.fixture
def make_entry():
    """Factory for in-memory Entry fixtures with sequential IDs."""
    counter = itertools.count(1)

    def _make_entry(
        entry_type: EntryType,
        amount,
        on: date,
        category: str = "Otros",
        description: str | None = None,
    ) -> Entry:
        return Entry(
            id=f"e{next(counter)}",
            type=entry_type,
            category=category,
            amount=Decimal(str(amount)),
            date=on,
            description=description,
        )

    return _make_entry


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
