"""Tests for label tree flattening."""

from expenses.domain.entities import Label, Ref
from expenses.domain.labels import resolve_labels


def chain(depth: int) -> Label:
    """Build labels "0" <- "1" <- ... <- str(depth - 1), returning the deepest."""
    label = Label(name="0")
    for i in range(1, depth):
        label = Label(name=str(i), parent=label)
    return label


class TestResolveLabels:
    """Tests for resolve_labels."""

    def test_single_root_label(self):
        """Test that a label without parent is returned as is."""
        result = resolve_labels([Label(name="Tablet", flags=3, headers="a=b")])

        assert result == [Label(name="Tablet", flags=3, headers="a=b")]

    def test_ancestors_are_included(self):
        """Test that the whole parent chain is part of the result."""
        result = resolve_labels([chain(10), Label(name="10")])

        names = [lb.name for lb in result]
        assert sorted(names, key=int) == [str(i) for i in range(11)]
        assert len(set(names)) == 11

        by_name = {lb.name: lb for lb in result}
        assert by_name["10"].parent is None
        assert by_name["0"].parent is None
        for i in range(1, 10):
            assert by_name[str(i)].parent_name == str(i - 1)

    def test_parents_are_name_references(self):
        """Test that no embedded parent objects survive flattening."""
        bread = Label(name="Bread", parent=Label(name="Food", parent=Label(name="Goods")))

        for label in resolve_labels([bread]):
            if label.parent is not None:
                assert not label.parent.is_resolved

    def test_parents_come_first(self):
        """Test that every parent in the batch precedes its children."""
        goods = Label(name="Goods")
        food = Label(name="Food", parent=goods)
        labels = [
            Label(name="Bread", parent=food),
            Label(name="Tablet", parent=Label(name="Electronics", parent=goods)),
            # Parent given by name, pushed later in the same batch
            Label(name="Cake", parent="Sweets"),
            Label(name="Sweets", parent=food),
        ]

        result = resolve_labels(labels)
        position = {lb.name: i for i, lb in enumerate(result)}
        for label in result:
            if label.parent_name is not None:
                assert position[label.parent_name] < position[label.name]

    def test_duplicates_are_removed(self):
        """Test that a name shared by several chains appears once."""
        food = Label(name="Food")
        labels = [
            Label(name="Food"),
            Label(name="Bread", parent=food),
            Label(name="Cake", parent=Label(name="Food")),
        ]

        result = resolve_labels(labels)
        assert sorted(lb.name for lb in result) == ["Bread", "Cake", "Food"]

    def test_first_occurrence_wins(self):
        """Test that later copies of a name do not override the first one."""
        labels = [
            Label(name="Bread", parent=Label(name="Food", flags=1, headers="first")),
            Label(name="Food", flags=2, headers="second", parent="Goods"),
        ]

        food = {lb.name: lb for lb in resolve_labels(labels)}["Food"]
        assert food.flags == 1
        assert food.headers == "first"
        assert food.parent is None

    def test_parent_by_name_is_kept(self):
        """Test that a parent given by name is kept without being added."""
        result = resolve_labels([Label(name="Cake", parent="Sweets")])

        assert result == [Label(name="Cake", parent=Ref(name="Sweets"))]

    def test_input_is_not_modified(self):
        """Test that the caller's labels keep their embedded parents."""
        food = Label(name="Food")
        bread = Label(name="Bread", parent=food)

        resolve_labels([bread])

        assert bread.parent.entity is food

    def test_empty_batch(self):
        """Test that nothing in gives nothing out."""
        assert resolve_labels([]) == []
