"""
Shared board document.

Insertion-ordered map of board objects with an atomic, re-entrant
transaction primitive. Observers see each outermost transaction as a
single update, never its individual writes.

Dependencies: threading, diagram_planner.models.board
System role: Shared mutable state that renderers write into
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
import logging
import threading

from diagram_planner.models.board import BaseBoardObject

logger = logging.getLogger(__name__)

MAX_OBJECTS_PER_BOARD = 500


@dataclass(frozen=True)
class BoardUpdate:
    """Changes committed by one outermost transaction."""

    origin: str | None
    changed_ids: tuple[str, ...]


BoardObserver = Callable[[BoardUpdate], None]


class BoardDocument:
    """
    One board's object map.

    Writes made inside `transact()` are committed as a single update.
    Writes made outside a transaction are wrapped in their own implicit one.
    A failed write inside a transaction does not roll back earlier writes.

    Attributes:
        board_id: Identifier of the board
        max_objects: Upper bound on stored objects
    """

    def __init__(self, board_id: str, max_objects: int = MAX_OBJECTS_PER_BOARD) -> None:
        self.board_id = board_id
        self.max_objects = max_objects
        self._objects: dict[str, BaseBoardObject] = {}
        self._observers: list[BoardObserver] = []
        self._lock = threading.RLock()
        self._depth = 0
        self._origin: str | None = None
        self._pending: list[str] = []

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, object_id: object) -> bool:
        return object_id in self._objects

    def get(self, object_id: str) -> BaseBoardObject | None:
        """Return the object with this id, or None."""
        return self._objects.get(object_id)

    def objects(self) -> list[BaseBoardObject]:
        """Snapshot of all objects in insertion order."""
        with self._lock:
            return list(self._objects.values())

    @property
    def in_transaction(self) -> bool:
        """True while a transaction is open on this document."""
        return self._depth > 0

    @contextmanager
    def transact(self, origin: str | None = None) -> Iterator["BoardDocument"]:
        """
        Open an atomic transaction.

        Nested calls join the outermost transaction; its origin wins.
        Observers are notified once, when the outermost transaction exits,
        and only if something changed.

        Args:
            origin: Optional tag describing who is writing (e.g. actor id)

        Yields:
            BoardDocument: This document
        """
        with self._lock:
            self._depth += 1
            if self._depth == 1:
                self._origin = origin
                self._pending = []
            try:
                yield self
            finally:
                self._depth -= 1
                if self._depth == 0:
                    changed = tuple(dict.fromkeys(self._pending))
                    update_origin = self._origin
                    self._pending = []
                    self._origin = None
                    if changed:
                        self._notify(BoardUpdate(origin=update_origin, changed_ids=changed))

    def set(self, obj: BaseBoardObject) -> None:
        """Insert or replace an object."""
        with self.transact():
            self._objects[obj.id] = obj
            self._pending.append(obj.id)

    def observe(self, observer: BoardObserver) -> Callable[[], None]:
        """
        Register an update observer.

        Args:
            observer: Callable invoked with each committed BoardUpdate

        Returns:
            Callable: Function that unregisters the observer
        """
        self._observers.append(observer)

        def unobserve() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unobserve

    def _notify(self, update: BoardUpdate) -> None:
        logger.debug(
            f"{__name__}:_notify - board={self.board_id} origin={update.origin} "
            f"changed={len(update.changed_ids)}"
        )
        for observer in list(self._observers):
            observer(update)
