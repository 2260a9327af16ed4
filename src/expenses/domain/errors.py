"""Shared error types and error messages for the expenses registry."""

from typing import Optional


class ExpensesError(Exception):
    """Base class for every error raised by the registry."""


class DomainError(ExpensesError, ValueError):
    """Base class for caller-data and caller-usage errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """A record failed an invariant right before it was written."""


class DetailSumError(ValidationError):
    """Transaction details do not add up to the transaction amount."""

    def __init__(self, expected: int, actual: int):
        super().__init__(details_do_not_add_up(expected, actual))
        self.expected = expected
        self.actual = actual


class ConfigurationError(DomainError):
    """Invalid options, such as a non-positive batch size."""


class StorageError(ExpensesError):
    """Failure reported by the storage engine.

    The original exception is kept as ``original`` and as ``__cause__``.
    """

    def __init__(self, message: str, original: Optional[BaseException] = None):
        super().__init__(message)
        self.original = original


class WriteError(StorageError):
    """Storage failure while writing or managing the schema."""


class ReadError(StorageError):
    """Storage failure while reading."""


def empty_name(kind: str) -> str:
    """Return message for an entity without a name."""
    return f"{kind} cannot have an empty name"


def name_too_long(kind: str, name: str, limit: int) -> str:
    """Return message for a name above the column size."""
    return f"{kind} name '{name[:20]}...' is longer than {limit} characters"


def flags_out_of_range(kind: str, flags: int) -> str:
    """Return message for flags that do not fit the bit-field."""
    return f"{kind} flags {flags} do not fit an unsigned 16-bit field"


def negative_detail_amount(amount: int) -> str:
    """Return message for a detail with a negative amount."""
    return f"negative detail amount {amount} is not allowed"


def details_do_not_add_up(expected: int, actual: int) -> str:
    """Return message for a detail set that does not match its transaction."""
    return f"transaction details do not add up, expected {expected} but got {actual}"


def immutable_field_changed(uuid: str, field: str) -> str:
    """Return message for an attempt to change date or amount."""
    return f"Transaction {uuid} cannot change its {field}: the field is immutable"


def invalid_batch_size(batch_size: object) -> str:
    """Return message for a batch size that is not a positive integer."""
    return f"batch size must be a positive integer, got {batch_size!r}"


def invalid_pagination(field: str, value: object) -> str:
    """Return message for a negative or non-integer limit/offset."""
    return f"{field} must be a non-negative integer, got {value!r}"


def mixed_records(kinds: list[str]) -> str:
    """Return message for a push batch holding more than one entity type."""
    return f"Cannot push mixed records in one batch: {', '.join(sorted(kinds))}"


def unsupported_dialect(dialect: str) -> str:
    """Return message for a database without a known upsert clause."""
    return f"Dialect '{dialect}' has no supported upsert clause"


def duplicate_transaction_uuid(uuid: str) -> str:
    """Return message for a transaction pushed twice in the same call."""
    return f"Transaction {uuid} appears more than once in the same push"
