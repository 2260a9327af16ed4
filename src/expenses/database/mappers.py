"""Mapper functions between domain entities and database rows.

Reads convert SQLAlchemy models to domain entities. Writes go through
plain row dicts because they are issued as bulk upsert statements rather
than through the ORM unit of work.
"""

from datetime import datetime
from typing import Any, Optional

from expenses.domain import entities as domain
from expenses.database.models import (
    Actor as ORMActor,
    Label as ORMLabel,
    Transaction as ORMTransaction,
    Detail as ORMDetail,
)


def actor_to_domain(orm_actor: ORMActor) -> domain.Actor:
    """Convert SQLAlchemy Actor model to domain Actor entity."""
    return domain.Actor(
        name=orm_actor.name,
        flags=orm_actor.flags,
        headers=orm_actor.headers,
        created_at=orm_actor.created_at,
        updated_at=orm_actor.updated_at,
    )


def label_to_domain(orm_label: ORMLabel, depth: int = 1) -> domain.Label:
    """Convert SQLAlchemy Label model to domain Label entity.

    Args:
        orm_label: Label row
        depth: How many parent levels to resolve into entities; deeper
            parents are referenced by name only
    """
    parent: Optional[domain.Ref[domain.Label]] = None
    if orm_label.parent_name is not None:
        if depth > 0 and orm_label.parent is not None:
            parent = domain.Ref(entity=label_to_domain(orm_label.parent, depth - 1))
        else:
            parent = domain.Ref(name=orm_label.parent_name)

    return domain.Label(
        name=orm_label.name,
        parent=parent,
        flags=orm_label.flags,
        headers=orm_label.headers,
        created_at=orm_label.created_at,
        updated_at=orm_label.updated_at,
    )


def detail_to_domain(orm_detail: ORMDetail) -> domain.Detail:
    """Convert SQLAlchemy Detail model to domain Detail entity."""
    return domain.Detail(
        uuid=orm_detail.uuid,
        transaction_uuid=orm_detail.transaction_uuid,
        label=domain.Ref(entity=label_to_domain(orm_detail.label, depth=0)),
        amount=orm_detail.amount,
        flags=orm_detail.flags,
        headers=orm_detail.headers,
        created_at=orm_detail.created_at,
        updated_at=orm_detail.updated_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        uuid=orm_transaction.uuid,
        date=orm_transaction.date,
        amount=orm_transaction.amount,
        label=domain.Ref(entity=label_to_domain(orm_transaction.label, depth=0)),
        sender=domain.Ref(entity=actor_to_domain(orm_transaction.sender)),
        receiver=domain.Ref(entity=actor_to_domain(orm_transaction.receiver)),
        flags=orm_transaction.flags,
        headers=orm_transaction.headers,
        details=[detail_to_domain(d) for d in orm_transaction.details],
        created_at=orm_transaction.created_at,
        updated_at=orm_transaction.updated_at,
    )


def actor_to_row(actor: domain.Actor, now: datetime) -> dict[str, Any]:
    """Convert domain Actor to an insert row for the actors table."""
    return {
        "name": actor.name,
        "flags": actor.flags,
        "headers": actor.headers,
        "created_at": now,
        "updated_at": now,
    }


def label_to_row(label: domain.Label, now: datetime) -> dict[str, Any]:
    """Convert domain Label to an insert row for the labels table."""
    return {
        "name": label.name,
        "parent_name": label.parent_name,
        "flags": label.flags,
        "headers": label.headers,
        "created_at": now,
        "updated_at": now,
    }


def transaction_to_row(trx: domain.Transaction, now: datetime) -> dict[str, Any]:
    """Convert domain Transaction to an insert row for the transactions table."""
    return {
        "uuid": trx.uuid,
        "date": trx.date,
        "amount": trx.amount,
        "label_name": trx.label.name,
        "sender_name": trx.sender.name,
        "receiver_name": trx.receiver.name,
        "flags": trx.flags,
        "headers": trx.headers,
        "created_at": now,
        "updated_at": now,
    }


def detail_to_row(detail: domain.Detail, now: datetime, position: int = 0) -> dict[str, Any]:
    """Convert domain Detail to an insert row for the details table.

    Args:
        detail: Detail to write
        now: Creation and update timestamp
        position: Index of the detail in its transaction
    """
    return {
        "uuid": detail.uuid,
        "transaction_uuid": detail.transaction_uuid,
        "label_name": detail.label.name,
        "amount": detail.amount,
        "position": position,
        "flags": detail.flags,
        "headers": detail.headers,
        "created_at": now,
        "updated_at": now,
    }
