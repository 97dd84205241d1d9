"""Construction of the SQLite entry store used by the CLI."""

import os
from pathlib import Path
from typing import Union

from weekledger.database.sqlalchemy_db import SQLAlchemyEntryStore
from weekledger.utils.logging_config import get_logger

logger = get_logger(__name__)

DB_PATH_ENV_VAR = "WEEKLEDGER_DB_PATH"
DEFAULT_DB_PATH = Path("~/.weekledger/weekledger.db")


def resolve_database_path(database_path: Union[str, Path, None] = None) -> Path:
    """Pick the ledger file: explicit path, then $WEEKLEDGER_DB_PATH, then the default.

    ``~`` is expanded and the parent directory is created if missing.
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV_VAR) or DEFAULT_DB_PATH

    path = Path(database_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(
    database_path: Union[str, Path, None] = None,
) -> SQLAlchemyEntryStore:
    """Create an entry store backed by a SQLite file.

    Args:
        database_path: Ledger file; see ``resolve_database_path``

    Returns:
        Unconnected SQLAlchemyEntryStore
    """
    path = resolve_database_path(database_path)
    logger.debug("Using ledger database %s", path)
    return SQLAlchemyEntryStore(f"sqlite:///{path}")
