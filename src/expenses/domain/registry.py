"""Registry domain service.

The registry exposes two routes over the database: push, which creates
records or resolves conflicts on their key, and pull, which lists records
in a stable order. Both work on collections of a single entity type.
"""

from collections.abc import Iterable
from typing import Any, Optional

from expenses.config import PullOptions, PushOptions
from expenses.database.base import Database
from expenses.domain.entities import Actor, Detail, Label, Transaction
from expenses.domain.errors import ConfigurationError, mixed_records
from expenses.domain.serialization import to_json

ENTITY_TYPES: dict[str, type] = {
    "actors": Actor,
    "labels": Label,
    "transactions": Transaction,
}


class RegistryService:
    """Service for pushing and pulling registry records."""

    def __init__(self, db: Database):
        """Initialize registry service.

        Args:
            db: Database instance
        """
        self.db = db

    def push(self, records: Iterable[Any], options: Optional[PushOptions] = None) -> list[Any]:
        """Push a collection of actors, labels or transactions.

        Args:
            records: Records of a single entity type
            options: Push options, defaults to replace mode

        Returns:
            The pushed records, with generated UUIDs filled in

        Raises:
            ConfigurationError: If the records mix entity types, are details,
                or the options are invalid
            ValidationError: If a record fails validation
            WriteError: If the storage engine fails
        """
        records = list(records)
        options = options or PushOptions()
        options.validate()
        if not records:
            return records

        kinds = {type(record) for record in records}
        if len(kinds) > 1:
            raise ConfigurationError(mixed_records([k.__name__ for k in kinds]))

        kind = kinds.pop()
        if kind is Actor:
            self.db.push_actors(records, options)
        elif kind is Label:
            self.db.push_labels(records, options)
        elif kind is Transaction:
            self.db.push_transactions(records, options)
        elif kind is Detail:
            raise ConfigurationError("Details are pushed through their transaction")
        else:
            raise ConfigurationError(f"Cannot push records of type {kind.__name__}")

        return records

    def pull(self, entity_type: type, options: Optional[PullOptions] = None) -> list[Any]:
        """Pull actors, labels or transactions in their stable order.

        Args:
            entity_type: Actor, Label or Transaction
            options: Limit and offset, unbounded by default

        Returns:
            List of domain entities
        """
        options = options or PullOptions()
        if entity_type is Actor:
            return self.db.pull_actors(options)
        if entity_type is Label:
            return self.db.pull_labels(options)
        if entity_type is Transaction:
            return self.db.pull_transactions(options)
        raise ConfigurationError(f"Cannot pull records of type {entity_type.__name__}")

    def push_request(self, records: Iterable[Any], options: Optional[PushOptions] = None) -> str:
        """Push records and return them as JSON.

        Nothing is serialized if the push fails.
        """
        return to_json(self.push(records, options))

    def pull_request(self, entity_type: type, options: Optional[PullOptions] = None) -> str:
        """Pull records and return them as JSON."""
        return to_json(self.pull(entity_type, options))
