"""Domain layer for the expenses registry."""

from expenses.domain.entities import (
    Actor,
    Detail,
    Label,
    Ref,
    Transaction,
    new_actor,
    new_label,
    new_transaction,
)
from expenses.domain.errors import (
    ConfigurationError,
    DetailSumError,
    ExpensesError,
    ReadError,
    ValidationError,
    WriteError,
)

__all__ = [
    "Actor",
    "Detail",
    "Label",
    "Ref",
    "Transaction",
    "new_actor",
    "new_label",
    "new_transaction",
    "ConfigurationError",
    "DetailSumError",
    "ExpensesError",
    "ReadError",
    "ValidationError",
    "WriteError",
]
