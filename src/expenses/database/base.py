"""Abstract database interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from sqlalchemy import Table

from expenses.config import PullOptions, PushOptions
from expenses.database.models import TABLES

# Import entities directly to avoid circular import through domain/__init__.py
from expenses.domain.entities import Actor, Label, Transaction


class Database(ABC):
    """Abstract database interface for the expenses registry.

    Push operations create records or resolve key conflicts according to
    the push mode. Pull operations return records in a stable order.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def install(self, tables: Sequence[Table] = TABLES) -> None:
        """Create the given tables in order."""
        pass

    @abstractmethod
    def uninstall(self, tables: Sequence[Table] = TABLES) -> None:
        """Drop the given tables in reverse order."""
        pass

    # Actor operations
    @abstractmethod
    def push_actors(self, actors: Iterable[Actor], options: PushOptions = PushOptions()) -> None:
        """Write actors, keyed by name."""
        pass

    @abstractmethod
    def pull_actors(self, options: PullOptions = PullOptions()) -> list[Actor]:
        """Read actors ordered by name."""
        pass

    # Label operations
    @abstractmethod
    def push_labels(self, labels: Iterable[Label], options: PushOptions = PushOptions()) -> None:
        """Write labels together with their in-memory parent chains."""
        pass

    @abstractmethod
    def pull_labels(self, options: PullOptions = PullOptions()) -> list[Label]:
        """Read labels ordered by name, with their parent resolved."""
        pass

    # Transaction operations
    @abstractmethod
    def push_transactions(
        self, transactions: Iterable[Transaction], options: PushOptions = PushOptions()
    ) -> None:
        """Write transactions and their details, creating missing actors and labels."""
        pass

    @abstractmethod
    def pull_transactions(self, options: PullOptions = PullOptions()) -> list[Transaction]:
        """Read transactions ordered by date, with every reference resolved."""
        pass
