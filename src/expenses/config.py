"""Options for pushing to and pulling from the registry."""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from expenses.domain.errors import ConfigurationError, invalid_batch_size, invalid_pagination

DEFAULT_BATCH_SIZE = 100


class PushMode(str, Enum):
    """What happens to a row whose key already exists."""

    # Overwrite the mutable columns of the stored row
    REPLACE = "replace"
    # Leave the stored row untouched
    APPEND_ONLY = "append-only"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class PushOptions:
    """How a batch of records is written.

    Attributes:
        batch_size: Maximum number of rows per insert statement
        mode: Conflict handling for the records being pushed
        atomic: Run the whole push in one database transaction. When False
            every chunk is committed on its own.
    """

    batch_size: int = DEFAULT_BATCH_SIZE
    mode: PushMode = PushMode.REPLACE
    atomic: bool = True

    def validate(self) -> None:
        """Raise ConfigurationError unless batch_size is a positive int."""
        if not _is_int(self.batch_size) or self.batch_size <= 0:
            raise ConfigurationError(invalid_batch_size(self.batch_size))


@dataclass(frozen=True)
class PullOptions:
    """Pagination of a read. Zero limit means unbounded, zero offset no skip."""

    limit: int = 0
    offset: int = 0

    def validate(self) -> None:
        for field_name in ("limit", "offset"):
            value = getattr(self, field_name)
            if not _is_int(value) or value < 0:
                raise ConfigurationError(invalid_pagination(field_name, value))


def default_database_path() -> str:
    """Return the SQLite path from EXPENSES_DB_PATH or ~/.expenses/expenses.db."""
    database_path: Optional[str] = os.environ.get("EXPENSES_DB_PATH")

    if database_path is None:
        db_dir = Path.home() / ".expenses"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "expenses.db")

    return database_path
