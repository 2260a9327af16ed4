"""Invariant checks run on every record right before it is written."""

import uuid
from datetime import date
from typing import Union

from expenses.domain.entities import Actor, Detail, Label, Transaction
from expenses.domain.errors import (
    DetailSumError,
    ValidationError,
    empty_name,
    flags_out_of_range,
    immutable_field_changed,
    name_too_long,
    negative_detail_amount,
)

NAME_MAX_LENGTH = 100
FLAGS_MAX = 0xFFFF


def new_uuid() -> str:
    """Return a random UUID in its 36-character text form."""
    return str(uuid.uuid4())


def _check_flags(kind: str, flags: int) -> None:
    if not 0 <= flags <= FLAGS_MAX:
        raise ValidationError(flags_out_of_range(kind, flags))


def validate_named(record: Union[Actor, Label]) -> None:
    """Check the name and flags of an actor or a label.

    Raises:
        ValidationError: If the name is empty or too long, or the flags
            do not fit the bit-field
    """
    kind = type(record).__name__
    if not record.name:
        raise ValidationError(empty_name(kind))
    if len(record.name) > NAME_MAX_LENGTH:
        raise ValidationError(name_too_long(kind, record.name, NAME_MAX_LENGTH))
    _check_flags(kind, record.flags)


def validate_detail(detail: Detail) -> None:
    """Assign a UUID to a detail if needed and check its amount.

    Raises:
        ValidationError: If the amount is negative
    """
    if detail.uuid is None:
        detail.uuid = new_uuid()

    if detail.amount < 0:
        raise ValidationError(negative_detail_amount(detail.amount))
    _check_flags("Detail", detail.flags)


def validate_transaction(trx: Transaction) -> None:
    """Assign UUIDs where missing and check that the details add up.

    The transaction and its details are updated in place. The detail sum
    is compared against the absolute value of the transaction amount
    before the details are checked one by one.

    Raises:
        DetailSumError: If the details do not add up to the amount
        ValidationError: If a detail is invalid
    """
    if trx.uuid is None:
        trx.uuid = new_uuid()
    _check_flags("Transaction", trx.flags)

    if trx.details:
        expected = abs(trx.amount)
        actual = sum(d.amount for d in trx.details)
        if actual != expected:
            raise DetailSumError(expected, actual)

    for detail in trx.details:
        validate_detail(detail)
        detail.transaction_uuid = trx.uuid


def validate_unchanged(trx: Transaction, stored_date: date, stored_amount: int) -> None:
    """Check that an already stored transaction keeps its date and amount.

    Raises:
        ValidationError: If the date or the amount differs from storage
    """
    if trx.date != stored_date:
        raise ValidationError(immutable_field_changed(trx.uuid, "date"))
    if trx.amount != stored_amount:
        raise ValidationError(immutable_field_changed(trx.uuid, "amount"))
