"""Mapper functions to convert between domain entries and SQLAlchemy models.

This layer isolates the conversion logic, so the table layout can change
without touching aggregation code.
"""

from weekledger.domain import entities as domain
from weekledger.database.models import Entry as ORMEntry


def entry_to_domain(orm_entry: ORMEntry) -> domain.Entry:
    """Convert SQLAlchemy Entry model to domain Entry entity."""
    return domain.Entry(
        id=orm_entry.id,
        type=domain.EntryType(orm_entry.type),
        category=orm_entry.category,
        amount=orm_entry.amount,
        date=orm_entry.date,
        description=orm_entry.description,
    )
