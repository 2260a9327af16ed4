"""JSON conversion of registry entities.

Records serialize as one object each and collections as arrays of
objects. References are written by name, a label without parent has an
explicit ``"parent": null`` and timestamps are never part of the payload.
"""

import json
from collections.abc import Sequence
from datetime import date
from typing import Any, Union

from dateutil import parser as date_parser

from expenses.domain.entities import Actor, Detail, Label, Transaction
from expenses.domain.errors import ValidationError

Entity = Union[Actor, Label, Transaction, Detail]


def format_date(value: date) -> str:
    """Render a transaction date as YYYY-MM-DD."""
    return value.isoformat()


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD date or a full ISO-8601 timestamp into a date.

    Raises:
        ValidationError: If the value is not an ISO-8601 date
    """
    try:
        return date_parser.isoparse(value).date()
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Could not parse date '{value}': {e}") from e


def actor_to_dict(actor: Actor) -> dict[str, Any]:
    return {"name": actor.name, "flags": actor.flags, "headers": actor.headers}


def label_to_dict(label: Label) -> dict[str, Any]:
    return {
        "name": label.name,
        "parent": label.parent_name,
        "flags": label.flags,
        "headers": label.headers,
    }


def detail_to_dict(detail: Detail) -> dict[str, Any]:
    return {
        "label": detail.label.name,
        "amount": detail.amount,
        "flags": detail.flags,
        "headers": detail.headers,
    }


def transaction_to_dict(trx: Transaction) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if trx.uuid is not None:
        data["uuid"] = trx.uuid
    data.update(
        {
            "date": format_date(trx.date),
            "amount": trx.amount,
            "label": trx.label.name,
            "sender": trx.sender.name,
            "receiver": trx.receiver.name,
            "flags": trx.flags,
            "headers": trx.headers,
            "details": [detail_to_dict(d) for d in trx.details],
        }
    )
    return data


_TO_DICT = {
    Actor: actor_to_dict,
    Label: label_to_dict,
    Transaction: transaction_to_dict,
    Detail: detail_to_dict,
}


def to_dict(record: Entity) -> dict[str, Any]:
    """Convert any registry entity to a JSON-ready dict."""
    try:
        converter = _TO_DICT[type(record)]
    except KeyError:
        raise TypeError(f"Cannot serialize {type(record).__name__}") from None
    return converter(record)


def to_json(value: Union[Entity, Sequence[Entity]]) -> str:
    """Serialize one entity or a collection of entities into JSON."""
    if isinstance(value, (Actor, Label, Transaction, Detail)):
        return json.dumps(to_dict(value), ensure_ascii=False)
    return json.dumps([to_dict(r) for r in value], ensure_ascii=False)


def _require(data: dict[str, Any], key: str, kind: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValidationError(f"{kind} record is missing '{key}'") from None


def actor_from_dict(data: dict[str, Any]) -> Actor:
    return Actor(
        name=_require(data, "name", "Actor"),
        flags=data.get("flags", 0),
        headers=data.get("headers", ""),
    )


def label_from_dict(data: dict[str, Any]) -> Label:
    return Label(
        name=_require(data, "name", "Label"),
        parent=data.get("parent"),
        flags=data.get("flags", 0),
        headers=data.get("headers", ""),
    )


def detail_from_dict(data: dict[str, Any]) -> Detail:
    return Detail(
        label=_require(data, "label", "Detail"),
        amount=_require(data, "amount", "Detail"),
        flags=data.get("flags", 0),
        headers=data.get("headers", ""),
    )


def transaction_from_dict(data: dict[str, Any]) -> Transaction:
    return Transaction(
        uuid=data.get("uuid"),
        date=parse_date(_require(data, "date", "Transaction")),
        amount=_require(data, "amount", "Transaction"),
        label=_require(data, "label", "Transaction"),
        sender=_require(data, "sender", "Transaction"),
        receiver=_require(data, "receiver", "Transaction"),
        flags=data.get("flags", 0),
        headers=data.get("headers", ""),
        details=[detail_from_dict(d) for d in data.get("details") or []],
    )


_FROM_DICT = {
    Actor: actor_from_dict,
    Label: label_from_dict,
    Transaction: transaction_from_dict,
    Detail: detail_from_dict,
}


def from_json(payload: Union[str, bytes], entity_type: type) -> Any:
    """Deserialize JSON into entities of the given type.

    Args:
        payload: JSON text holding one object or an array of objects
        entity_type: One of Actor, Label, Transaction or Detail

    Returns:
        A single entity for an object payload, a list for an array payload

    Raises:
        ValidationError: If the payload is not valid JSON or a record
            misses a required field
    """
    converter = _FROM_DICT[entity_type]
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON payload: {e}") from e

    if isinstance(data, list):
        return [converter(item) for item in data]
    return converter(data)
