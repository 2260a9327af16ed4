"""Tests for reference extraction from transactions."""

from datetime import date

from expenses.domain.entities import Actor, Detail, Label, Transaction
from expenses.domain.references import extract_references


def make_transaction(**overrides) -> Transaction:
    fields = dict(date=date(2021, 4, 22), amount=-100, label="?", sender="?", receiver="?")
    fields.update(overrides)
    return Transaction(**fields)


class TestExtractReferences:
    """Tests for extract_references."""

    def test_bare_names_become_minimal_entities(self):
        """Test that names without entities produce name-only records."""
        trx = make_transaction(label="Transfer", sender="Bank", receiver="Alexandru")

        actors, labels = extract_references([trx])

        assert actors == [Actor(name="Alexandru"), Actor(name="Bank")]
        assert labels == [Label(name="Transfer")]

    def test_embedded_entities_are_kept(self):
        """Test that embedded actors and labels keep their metadata."""
        sender = Actor(name="Alexandru", flags=2, headers="image=/me.png")
        label = Label(name="Food", headers="color=green")
        trx = make_transaction(label=label, sender=sender, receiver="Market")

        actors, labels = extract_references([trx])

        assert sender in actors
        assert labels == [label]

    def test_detail_labels_and_ancestors(self):
        """Test that detail labels and their parent chains are extracted."""
        food = Label(name="Food")
        trx = make_transaction(
            amount=-3000,
            label="Groceries",
            details=[
                Detail(label=Label(name="Bread", parent=food), amount=1000),
                Detail(label="Water", amount=2000),
            ],
        )

        _, labels = extract_references([trx])

        assert [lb.name for lb in labels] == ["Groceries", "Food", "Bread", "Water"]

    def test_deduplicated_by_name_first_wins(self):
        """Test deduplication across transactions."""
        first = make_transaction(sender=Actor(name="Me", flags=1), receiver="Market", label="Food")
        second = make_transaction(sender=Actor(name="Me", flags=2), receiver="Market", label="Food")

        actors, labels = extract_references([first, second])

        assert [a.name for a in actors] == ["Market", "Me"]
        assert next(a for a in actors if a.name == "Me").flags == 1
        assert [lb.name for lb in labels] == ["Food"]

    def test_shared_ancestors_once(self):
        """Test that an ancestor shared by two labels is extracted once."""
        goods = Label(name="Goods")
        trx = make_transaction(
            label=Label(name="Food", parent=goods),
            details=[Detail(label=Label(name="Electronics", parent=goods), amount=100)],
        )

        _, labels = extract_references([trx])

        assert sorted(lb.name for lb in labels) == ["Electronics", "Food", "Goods"]

    def test_empty_names_are_skipped(self):
        """Test that empty references are not turned into records."""
        trx = make_transaction(sender="", receiver="Market", label="")

        actors, labels = extract_references([trx])

        assert actors == [Actor(name="Market")]
        assert labels == []

    def test_no_transactions(self):
        """Test that an empty batch has no references."""
        assert extract_references([]) == ([], [])
