"""Suggested category labels per entry type.

These are a convenience for data entry only. Aggregation accepts any label.
"""

from weekledger.domain.entities import EntryType

SUGGESTED_CATEGORIES: dict[EntryType, tuple[str, ...]] = {
    EntryType.EXPENSE: (
        "Carne",
        "Agua",
        "Gas",
        "Salarios",
        "Insumos",
        "Transporte",
        "Servicios",
        "Refresco",
        "Otros",
        "Cambio",
    ),
    EntryType.INCOME: (
        "Efectivo",
        "Transferencia",
        "Ventas",
        "Servicios",
        "Otros",
        "Cambio",
    ),
    EntryType.INVESTMENT: (
        "Acciones",
        "Bonos",
        "Criptomonedas",
        "Bienes Raíces",
        "Negocio",
        "Otros",
    ),
}


def suggested_categories(entry_type: EntryType) -> tuple[str, ...]:
    """Get the suggested labels for an entry type."""
    return SUGGESTED_CATEGORIES[entry_type]


def is_suggested_category(entry_type: EntryType, category: str) -> bool:
    """Check whether a label is in the suggestion list for its type."""
    return category in SUGGESTED_CATEGORIES[entry_type]
