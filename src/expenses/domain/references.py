"""Extraction of the actors and labels a batch of transactions depends on."""

from collections.abc import Iterable

from expenses.domain.entities import Actor, Label, Ref, Transaction
from expenses.domain.labels import collect_label


def _capture_actor(seen: dict[str, Actor], ref: Ref[Actor]) -> None:
    if not ref.name:
        return
    actor = ref.entity if ref.entity is not None else Actor(name=ref.name)
    seen.setdefault(actor.name, actor)


def _capture_label(seen: dict[str, Label], ref: Ref[Label]) -> None:
    if not ref.name:
        return
    label = ref.entity if ref.entity is not None else Label(name=ref.name)
    collect_label(seen, label)


def extract_references(
    transactions: Iterable[Transaction],
) -> tuple[list[Actor], list[Label]]:
    """Collect every actor and label referenced by a batch of transactions.

    Embedded entities are kept as they are, while references given by name
    only become minimal entities holding just that name. Labels bring their
    in-memory ancestors along. Both results are deduplicated by name, first
    occurrence wins, and references with an empty name are skipped.

    Args:
        transactions: Transactions about to be written

    Returns:
        Tuple of (actors, labels) that must exist before the transactions
    """
    actors: dict[str, Actor] = {}
    labels: dict[str, Label] = {}

    for trx in transactions:
        _capture_actor(actors, trx.receiver)
        _capture_actor(actors, trx.sender)
        _capture_label(labels, trx.label)

        for detail in trx.details:
            _capture_label(labels, detail.label)

    return list(actors.values()), list(labels.values())
