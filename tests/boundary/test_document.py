"""
Test suite for BoardDocument transactions and observers.

System role: Verification of atomic board updates
"""

import pytest

from diagram_planner.boundary.board.document import BoardDocument, BoardUpdate
from diagram_planner.models.board import StickyNote


def make_sticky(object_id: str) -> StickyNote:
    return StickyNote(
        id=object_id,
        x=0,
        y=0,
        width=200,
        height=200,
        last_modified_by="user-1",
        last_modified_at=0,
    )


class TestBoardDocument:
    """Test suite for BoardDocument."""

    def test_set_and_get(self) -> None:
        document = BoardDocument("b1")

        document.set(make_sticky("a"))

        assert "a" in document
        assert len(document) == 1
        assert document.get("a").id == "a"
        assert document.get("missing") is None

    def test_objects_keep_insertion_order(self) -> None:
        document = BoardDocument("b1")
        for object_id in ("c", "a", "b"):
            document.set(make_sticky(object_id))

        assert [obj.id for obj in document.objects()] == ["c", "a", "b"]

    def test_write_outside_transaction_notifies_once(self) -> None:
        """Each bare write is its own update."""
        document = BoardDocument("b1")
        updates: list[BoardUpdate] = []
        document.observe(updates.append)

        document.set(make_sticky("a"))
        document.set(make_sticky("b"))

        assert updates == [
            BoardUpdate(origin=None, changed_ids=("a",)),
            BoardUpdate(origin=None, changed_ids=("b",)),
        ]

    def test_transaction_batches_writes(self) -> None:
        """Observers see one update after the transaction closes."""
        # Arrange
        document = BoardDocument("b1")
        updates: list[BoardUpdate] = []
        document.observe(updates.append)

        # Act
        with document.transact(origin="user-1"):
            document.set(make_sticky("a"))
            document.set(make_sticky("b"))
            assert updates == []
            assert document.in_transaction

        # Assert
        assert not document.in_transaction
        assert updates == [BoardUpdate(origin="user-1", changed_ids=("a", "b"))]

    def test_nested_transaction_joins_outer(self) -> None:
        """Inner transactions do not publish; the outer origin wins."""
        document = BoardDocument("b1")
        updates: list[BoardUpdate] = []
        document.observe(updates.append)

        with document.transact(origin="outer"):
            document.set(make_sticky("a"))
            with document.transact(origin="inner"):
                document.set(make_sticky("b"))
            assert updates == []

        assert updates == [BoardUpdate(origin="outer", changed_ids=("a", "b"))]

    def test_repeated_writes_are_reported_once(self) -> None:
        document = BoardDocument("b1")
        updates: list[BoardUpdate] = []
        document.observe(updates.append)

        with document.transact():
            document.set(make_sticky("a"))
            document.set(make_sticky("a"))

        assert updates[0].changed_ids == ("a",)

    def test_empty_transaction_is_silent(self) -> None:
        document = BoardDocument("b1")
        updates: list[BoardUpdate] = []
        document.observe(updates.append)

        with document.transact(origin="user-1"):
            pass

        assert updates == []

    def test_writes_survive_an_exception(self) -> None:
        """No rollback: writes before the error stay and are published."""
        document = BoardDocument("b1")
        updates: list[BoardUpdate] = []
        document.observe(updates.append)

        with pytest.raises(RuntimeError):
            with document.transact(origin="user-1"):
                document.set(make_sticky("a"))
                raise RuntimeError("renderer bug")

        assert "a" in document
        assert len(updates) == 1
        assert not document.in_transaction

    def test_unobserve(self) -> None:
        document = BoardDocument("b1")
        updates: list[BoardUpdate] = []
        unobserve = document.observe(updates.append)

        unobserve()
        document.set(make_sticky("a"))

        assert updates == []
