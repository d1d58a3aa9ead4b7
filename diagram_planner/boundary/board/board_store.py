"""
Board document store.

Owns one BoardDocument per board id, created on first use and kept
until the board is dropped.

Dependencies: threading, diagram_planner.boundary.board.document
System role: Board document lifecycle management
"""

import logging
import threading

from diagram_planner.boundary.board.document import MAX_OBJECTS_PER_BOARD, BoardDocument
from diagram_planner.core.exceptions import BoardNotFoundError

logger = logging.getLogger(__name__)


class BoardStore:
    """In-process registry of board documents."""

    def __init__(self, max_objects_per_board: int = MAX_OBJECTS_PER_BOARD) -> None:
        self.max_objects_per_board = max_objects_per_board
        self._boards: dict[str, BoardDocument] = {}
        self._lock = threading.Lock()

    def get_or_create(self, board_id: str) -> BoardDocument:
        """
        Return the document for a board, creating an empty one if needed.

        Args:
            board_id: Board identifier

        Returns:
            BoardDocument: The board's document
        """
        with self._lock:
            document = self._boards.get(board_id)
            if document is None:
                document = BoardDocument(board_id, max_objects=self.max_objects_per_board)
                self._boards[board_id] = document
                logger.info(f"{__name__}:get_or_create - Created board document {board_id}")
            return document

    def get(self, board_id: str) -> BoardDocument:
        """
        Return an existing board document.

        Raises:
            BoardNotFoundError: If no document exists for the id
        """
        with self._lock:
            document = self._boards.get(board_id)
        if document is None:
            raise BoardNotFoundError(board_id)
        return document

    def board_ids(self) -> list[str]:
        """Ids of all known boards."""
        with self._lock:
            return list(self._boards)

    def drop(self, board_id: str) -> None:
        """
        Forget a board and release its document.

        Boards otherwise live for the lifetime of the process. Listeners
        still holding the old document keep it alive until they let go.

        Raises:
            BoardNotFoundError: If no document exists for the id
        """
        with self._lock:
            document = self._boards.pop(board_id, None)
        if document is None:
            raise BoardNotFoundError(board_id)
        logger.info(
            f"{__name__}:drop - Dropped board document {board_id} objects={len(document)}"
        )
