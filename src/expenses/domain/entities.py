"""Domain model entities for the expenses registry.

An actor is any participant in a transaction, a label is a user-defined
tag arranged in a tree, and a transaction moves an amount between two
actors. Details break a transaction amount down into individually
labeled parts::

    (Participants)
        Actor        Label (user-defined scope)
          |            |
          \\           /|
           Transaction |
                \\_    /
                   Detail (breakdown of the amount)

References between entities go through ``Ref``, which holds either the
referenced entity itself or just its name. The storage layer only ever
sees names.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Generic, Optional, TypeVar, Union

DATE_FORMAT = "%a %d %b %Y"

E = TypeVar("E")


class Ref(Generic[E]):
    """Reference to an actor or label, resolved to an entity or by name only."""

    __slots__ = ("_name", "entity")

    def __init__(self, name: str = "", entity: Optional[E] = None):
        self._name = name
        self.entity = entity

    @classmethod
    def of(cls, value: Union["Ref[E]", E, str]) -> "Ref[E]":
        """Normalize a name, an entity or an existing reference."""
        if isinstance(value, Ref):
            return value
        if isinstance(value, str):
            return cls(name=value)
        return cls(entity=value)

    @property
    def name(self) -> str:
        """Name of the referenced entity; follows the entity when resolved."""
        if self.entity is not None:
            return self.entity.name
        return self._name

    @property
    def is_resolved(self) -> bool:
        return self.entity is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ref):
            return NotImplemented
        return self.name == other.name and self.entity == other.entity

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.entity is not None:
            return f"Ref({self.entity!r})"
        return f"Ref({self._name!r})"

    def __str__(self) -> str:
        if self.entity is not None:
            return str(self.entity)
        return self._name


@dataclass
class Actor:
    """Participant of a transaction, either as sender or as receiver."""

    name: str
    flags: int = 0
    headers: str = ""
    created_at: Optional[datetime] = field(default=None, compare=False)
    updated_at: Optional[datetime] = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"A{{Name={self.name}}}"


@dataclass
class Label:
    """Hierarchical tag used to classify transactions and details.

    ``parent`` accepts a ``Label``, a name or a ``Ref`` and is stored as a
    ``Ref``. A label without parent is a root of the tree.
    """

    name: str
    parent: Optional[Ref["Label"]] = None
    flags: int = 0
    headers: str = ""
    created_at: Optional[datetime] = field(default=None, compare=False)
    updated_at: Optional[datetime] = field(default=None, compare=False)

    def __post_init__(self):
        if self.parent is not None:
            self.parent = Ref.of(self.parent)

    @property
    def parent_name(self) -> Optional[str]:
        """Name of the parent label, or None for a root label."""
        if self.parent is None:
            return None
        return self.parent.name

    def ancestors(self) -> Iterator["Label"]:
        """Yield the in-memory parent chain, closest parent first.

        The walk stops at the first parent given by name only.
        """
        ref = self.parent
        while ref is not None and ref.entity is not None:
            yield ref.entity
            ref = ref.entity.parent

    def __str__(self) -> str:
        return f"L{{Name={self.name} Parent={self.parent}}}"


@dataclass
class Detail:
    """Labeled part of a transaction amount. Never updated once written."""

    label: Ref[Label]
    amount: int
    flags: int = 0
    headers: str = ""
    uuid: Optional[str] = None
    transaction_uuid: Optional[str] = None
    created_at: Optional[datetime] = field(default=None, compare=False)
    updated_at: Optional[datetime] = field(default=None, compare=False)

    def __post_init__(self):
        self.label = Ref.of(self.label)

    def __str__(self) -> str:
        return f"D{{Amount={self.amount} Label={self.label}}}"


@dataclass
class Transaction:
    """Real-world exchange of an amount between a sender and a receiver.

    The sign of ``amount`` tells the direction: positive is inbound,
    negative is outbound. Date and amount cannot change once stored, while
    the label, the actors, flags and headers can.
    """

    date: date
    amount: int
    label: Ref[Label]
    sender: Ref[Actor]
    receiver: Ref[Actor]
    flags: int = 0
    headers: str = ""
    details: list[Detail] = field(default_factory=list)
    uuid: Optional[str] = None
    created_at: Optional[datetime] = field(default=None, compare=False)
    updated_at: Optional[datetime] = field(default=None, compare=False)

    def __post_init__(self):
        if isinstance(self.date, datetime):
            self.date = self.date.date()
        self.label = Ref.of(self.label)
        self.sender = Ref.of(self.sender)
        self.receiver = Ref.of(self.receiver)
        if self.details is None:
            self.details = []

    @property
    def is_inbound(self) -> bool:
        return self.amount > 0

    def __str__(self) -> str:
        details = "[" + " ".join(str(d) for d in self.details) + "]"
        return (
            f"T{{Date={self.date.strftime(DATE_FORMAT)} Amount={self.amount} "
            f"Label={self.label} Sender={self.sender} Receiver={self.receiver} "
            f"Details={details}}}"
        )


def new_actor(name: str) -> Actor:
    """Create an actor without flags or headers."""
    return Actor(name=name)


def new_label(name: str, parent: Union[Label, str, None] = None) -> Label:
    """Create a label without flags or headers."""
    return Label(name=name, parent=parent)


def new_transaction(
    on: date,
    amount: int,
    label: Union[Label, str],
    sender: Union[Actor, str],
    receiver: Union[Actor, str],
    details: Union[Mapping[str, int], Iterable[tuple[Union[Label, str], int]], None] = None,
) -> Transaction:
    """Create a transaction, optionally broken down into details.

    Args:
        on: Date of the transaction
        amount: Signed amount in the smallest currency unit
        label: Transaction label (entity or name)
        sender: Sending actor (entity or name)
        receiver: Receiving actor (entity or name)
        details: Mapping of label name to amount, or (label, amount) pairs

    Returns:
        Transaction without flags or headers
    """
    items: Iterable[tuple[Union[Label, str], int]] = ()
    if isinstance(details, Mapping):
        items = details.items()
    elif details is not None:
        items = details

    return Transaction(
        date=on,
        amount=amount,
        label=label,
        sender=sender,
        receiver=receiver,
        details=[Detail(label=lb, amount=value) for lb, value in items],
    )
