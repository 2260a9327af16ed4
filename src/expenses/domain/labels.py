"""Flattening of in-memory label trees into rows ready to be written."""

from collections.abc import Iterable

from expenses.domain.entities import Label, Ref


def flatten_label(label: Label) -> Label:
    """Copy a label with its parent reduced to a name-only reference."""
    parent = None
    if label.parent_name is not None:
        parent = Ref(name=label.parent_name)

    return Label(
        name=label.name,
        parent=parent,
        flags=label.flags,
        headers=label.headers,
    )


def collect_label(distincts: dict[str, Label], label: Label) -> None:
    """Add a label and its whole in-memory parent chain to ``distincts``.

    Entries are keyed by name and the first occurrence wins: a later copy
    of the same name with other flags or headers is ignored.
    """
    for ancestor in reversed(list(label.ancestors())):
        distincts.setdefault(ancestor.name, ancestor)
    distincts.setdefault(label.name, label)


def parents_first(distincts: dict[str, Label]) -> list[Label]:
    """Order labels so that a parent in the batch precedes its children."""
    ordered: dict[str, Label] = {}
    visiting: set[str] = set()

    def visit(name: str) -> None:
        if name in ordered or name in visiting or name not in distincts:
            return
        visiting.add(name)
        label = distincts[name]
        if label.parent_name is not None:
            visit(label.parent_name)
        ordered[name] = label

    for name in distincts:
        visit(name)

    return list(ordered.values())


def resolve_labels(labels: Iterable[Label]) -> list[Label]:
    """Deduplicate labels and their ancestors into a flat list.

    Every label of every input parent chain is included once, along with
    the input labels themselves. Each returned label references its parent
    by name only, and parents come before their children.

    Args:
        labels: Labels, each possibly carrying its parent chain in memory

    Returns:
        Flattened labels with unique names
    """
    distincts: dict[str, Label] = {}
    for label in labels:
        collect_label(distincts, label)

    return [flatten_label(lb) for lb in parents_first(distincts)]
