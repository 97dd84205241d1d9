"""Entry domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal

from weekledger.database.base import EntryStore
from weekledger.domain.entities import Entry, EntryType
from weekledger.domain.errors import (
    NotFoundError,
    ValidationError,
    empty_category,
    entry_not_found,
    negative_amount,
    too_many_decimal_places,
)
from weekledger.utils.logging_config import get_logger

logger = get_logger(__name__)

# Amounts are stored with two decimal places
CENT = Decimal("0.01")


class EntryService:
    """Service for managing entries."""

    def __init__(self, store: EntryStore):
        """Initialize entry service.

        Args:
            store: Entry store instance
        """
        self.store = store

    @staticmethod
    def _validate_category(category: str) -> str:
        category = category.strip()
        if not category:
            raise ValidationError(empty_category())
        return category

    @staticmethod
    def _validate_amount(amount: Decimal) -> Decimal:
        if amount < 0:
            raise ValidationError(negative_amount(amount))
        cents = amount.quantize(CENT)
        if cents != amount:
            raise ValidationError(too_many_decimal_places(amount))
        return cents

    def create_entry(
        self,
        entry_type: "EntryType | str",
        category: str,
        amount: Decimal,
        date: date,
        description: Optional[str] = None,
    ) -> str:
        """Create an entry.

        Args:
            entry_type: Entry type or its string value
            category: Category label
            amount: Non-negative amount
            date: Entry date
            description: Optional description

        Returns:
            Entry ID

        Raises:
            ValidationError: If the type is unknown, the category is empty or
                the amount is negative or finer than a cent
        """
        entry_type = EntryType.parse(entry_type)
        category = self._validate_category(category)
        amount = self._validate_amount(amount)

        entry_id = self.store.create_entry(
            entry_type=entry_type,
            category=category,
            amount=amount,
            date=date,
            description=(description or "").strip() or None,
        )
        logger.info("Created %s entry %s (%s, %s)", entry_type.value, entry_id, category, amount)
        return entry_id

    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Get entry by ID.

        Args:
            entry_id: Entry ID

        Returns:
            Entry or None if not found
        """
        return self.store.get_entry(entry_id)

    def require_entry(self, entry_id: str) -> Entry:
        """Get entry by ID or raise NotFoundError."""
        entry = self.store.get_entry(entry_id)
        if entry is None:
            raise NotFoundError(entry_not_found(entry_id))
        return entry

    def update_entry(
        self,
        entry_id: str,
        entry_type: "EntryType | str | None" = None,
        category: Optional[str] = None,
        amount: Optional[Decimal] = None,
        date: Optional[date] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update an entry.

        Only fields that are not None are changed. A blank description
        clears the stored one.

        Raises:
            NotFoundError: If the entry doesn't exist
            ValidationError: If a provided field is invalid
        """
        self.require_entry(entry_id)

        if entry_type is not None:
            entry_type = EntryType.parse(entry_type)
        if category is not None:
            category = self._validate_category(category)
        if amount is not None:
            amount = self._validate_amount(amount)
        if description is not None:
            description = description.strip()

        self.store.update_entry(
            entry_id,
            entry_type=entry_type,
            category=category,
            amount=amount,
            date=date,
            description=description,
        )
        logger.info("Updated entry %s", entry_id)

    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry.

        Raises:
            NotFoundError: If the entry doesn't exist
        """
        self.require_entry(entry_id)
        self.store.delete_entry(entry_id)
        logger.info("Deleted entry %s", entry_id)

    def list_entries(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        entry_type: "EntryType | str | None" = None,
    ) -> list[Entry]:
        """List entries with optional filters, most recent first."""
        if entry_type is not None:
            entry_type = EntryType.parse(entry_type)
        return self.store.list_entries(
            start_date=start_date, end_date=end_date, entry_type=entry_type
        )
