"""Tests for database mappers."""

from datetime import date, datetime, UTC

from expenses.database.models import (
    Actor as ORMActor,
    Detail as ORMDetail,
    Label as ORMLabel,
    Transaction as ORMTransaction,
)
from expenses.database.mappers import (
    actor_to_domain,
    detail_to_row,
    label_to_domain,
    label_to_row,
    transaction_to_domain,
    transaction_to_row,
)
from expenses.domain.entities import Actor, Detail, Label, Ref, Transaction

NOW = datetime(2021, 4, 22, 12, 0, tzinfo=UTC)


def orm_label(name, parent=None):
    return ORMLabel(
        name=name,
        parent_name=parent.name if parent is not None else None,
        parent=parent,
        flags=0,
        headers="",
        created_at=NOW,
        updated_at=NOW,
    )


def orm_actor(name):
    return ORMActor(name=name, flags=0, headers="", created_at=NOW, updated_at=NOW)


class TestActorMapper:
    """Tests for Actor mapper."""

    def test_actor_to_domain(self):
        """Test converting ORM Actor to domain Actor."""
        orm = ORMActor(name="Market", flags=3, headers="image=/x.png", created_at=NOW, updated_at=NOW)

        actor = actor_to_domain(orm)

        assert isinstance(actor, Actor)
        assert actor.name == "Market"
        assert actor.flags == 3
        assert actor.headers == "image=/x.png"
        assert actor.created_at == NOW


class TestLabelMapper:
    """Tests for Label mapper."""

    def test_root_label(self):
        """Test that a label without parent maps to a root label."""
        label = label_to_domain(orm_label("Food"))

        assert isinstance(label, Label)
        assert label.parent is None

    def test_parent_depth(self):
        """Test that only one parent level is resolved by default."""
        goods = orm_label("Goods")
        food = orm_label("Food", goods)
        bread = orm_label("Bread", food)

        label = label_to_domain(bread)

        assert label.parent.entity.name == "Food"
        assert label.parent.entity.parent == Ref(name="Goods")

    def test_depth_zero(self):
        """Test that depth zero references the parent by name."""
        label = label_to_domain(orm_label("Bread", orm_label("Food")), depth=0)

        assert not label.parent.is_resolved
        assert label.parent_name == "Food"

    def test_label_to_row(self):
        """Test that the row carries the parent name only."""
        row = label_to_row(Label(name="Bread", parent=Label(name="Food")), NOW)

        assert row["parent_name"] == "Food"
        assert row["created_at"] == row["updated_at"] == NOW


class TestTransactionMapper:
    """Tests for Transaction mapper."""

    def test_transaction_to_domain(self):
        """Test converting ORM Transaction with details to domain Transaction."""
        food = orm_label("Food")
        orm = ORMTransaction(
            uuid="t1",
            date=date(2021, 4, 22),
            amount=-3000,
            label_name="Food",
            label=food,
            sender_name="Me",
            sender=orm_actor("Me"),
            receiver_name="Market",
            receiver=orm_actor("Market"),
            flags=0,
            headers="",
            created_at=NOW,
            updated_at=NOW,
        )
        orm.details = [
            ORMDetail(uuid="d1", transaction_uuid="t1", label_name="Food", label=food, amount=3000,
                      flags=0, headers="", created_at=NOW, updated_at=NOW),
        ]

        trx = transaction_to_domain(orm)

        assert isinstance(trx, Transaction)
        assert trx.uuid == "t1"
        assert trx.label.entity.name == "Food"
        assert trx.sender.entity == Actor(name="Me")
        assert trx.receiver.name == "Market"
        assert trx.details == [
            Detail(label=Label(name="Food"), amount=3000, uuid="d1", transaction_uuid="t1"),
        ]

    def test_transaction_to_row(self, sample_transaction):
        """Test that references are written by name."""
        sample_transaction.uuid = "t1"
        sample_transaction.sender = Ref.of(Actor(name="Alexandru", flags=9))

        row = transaction_to_row(sample_transaction, NOW)

        assert row["label_name"] == "Groceries"
        assert row["sender_name"] == "Alexandru"
        assert row["receiver_name"] == "Market"
        assert row["amount"] == -3000

    def test_detail_to_row(self):
        """Test that the detail row keeps its transaction UUID and position."""
        detail = Detail(label="Bread", amount=1000, uuid="d1", transaction_uuid="t1")

        row = detail_to_row(detail, NOW, 2)

        assert row["transaction_uuid"] == "t1"
        assert row["label_name"] == "Bread"
        assert row["position"] == 2
