"""Conflict-aware bulk writes.

Rows are written with ``INSERT ... ON CONFLICT`` (or the MySQL
equivalent), in chunks of at most ``batch_size`` rows per statement. In
append-only mode a conflicting row is left untouched; in replace mode its
mutable columns are overwritten.
"""

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Any, Optional, TypeVar

from sqlalchemy import Table
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import Executable
from sqlalchemy.sql.dml import Insert

from expenses.config import PushMode, PushOptions
from expenses.domain.errors import ConfigurationError, WriteError, unsupported_dialect

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Columns overwritten on conflict in replace mode. Transactions keep their
# date and amount, and details are never updated.
UPDATE_COLUMNS: dict[str, tuple[str, ...]] = {
    "actors": ("flags", "headers", "updated_at"),
    "labels": ("parent_name", "flags", "headers", "updated_at"),
    "transactions": (
        "label_name",
        "sender_name",
        "receiver_name",
        "flags",
        "headers",
        "updated_at",
    ),
    "details": (),
}


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of at most ``size`` items."""
    for start in range(0, len(items), size):
        yield items[start:start + size]


def build_upsert(
    dialect_name: str, table: Table, rows: Sequence[dict[str, Any]], mode: PushMode
) -> Insert:
    """Build a multi-row insert with the dialect's conflict clause.

    Args:
        dialect_name: SQLAlchemy dialect name of the target database
        table: Table to write to
        rows: Row dicts, all with the same keys
        mode: Conflict handling

    Returns:
        Insert statement ready to execute

    Raises:
        ConfigurationError: If the dialect has no supported upsert clause
    """
    update_columns = UPDATE_COLUMNS.get(table.name, ()) if mode is PushMode.REPLACE else ()
    conflict_target = [column.name for column in table.primary_key.columns]

    if dialect_name in ("sqlite", "postgresql"):
        insert = sqlite.insert if dialect_name == "sqlite" else postgresql.insert
        stmt = insert(table).values(list(rows))
        if not update_columns:
            return stmt.on_conflict_do_nothing(index_elements=conflict_target)
        return stmt.on_conflict_do_update(
            index_elements=conflict_target,
            set_={name: stmt.excluded[name] for name in update_columns},
        )

    if dialect_name in ("mysql", "mariadb"):
        stmt = mysql.insert(table).values(list(rows))
        if not update_columns:
            return stmt.prefix_with("IGNORE")
        return stmt.on_duplicate_key_update({name: stmt.inserted[name] for name in update_columns})

    raise ConfigurationError(unsupported_dialect(dialect_name))


class UpsertExecutor:
    """Issues upsert statements through one session."""

    def __init__(self, session: Session, options: PushOptions):
        """Initialize the executor.

        Args:
            session: Session holding the write transaction
            options: Push options; validated here

        Raises:
            ConfigurationError: If the batch size is not a positive integer
        """
        options.validate()
        self.session = session
        self.options = options
        self.dialect_name = session.get_bind().dialect.name

    def execute(self, stmt: Executable) -> Any:
        """Execute a statement, reporting storage failures as WriteError."""
        try:
            return self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise WriteError(str(e), e) from e

    def write(self, table: Table, rows: Sequence[dict[str, Any]], mode: PushMode) -> None:
        """Write rows in chunks of at most ``batch_size`` rows."""
        for chunk in chunked(rows, self.options.batch_size):
            logger.debug("Upserting %d rows into %s (%s)", len(chunk), table.name, mode.value)
            self.execute(build_upsert(self.dialect_name, table, chunk, mode))

    def push(
        self,
        table: Table,
        records: Sequence[T],
        to_row: Callable[[T], dict[str, Any]],
        mode: PushMode,
        validate: Optional[Callable[[T], None]] = None,
    ) -> None:
        """Validate and write records chunk by chunk.

        Every record of a chunk is validated right before the chunk is
        written, so a failure leaves that chunk unwritten.
        """
        for chunk in chunked(records, self.options.batch_size):
            if validate is not None:
                for record in chunk:
                    validate(record)
            self.write(table, [to_row(r) for r in chunk], mode)
            self.checkpoint()

    def checkpoint(self) -> None:
        """Commit the chunks written so far unless the push is atomic."""
        if self.options.atomic:
            return
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            raise WriteError(str(e), e) from e
