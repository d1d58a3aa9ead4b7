"""
Board boundary module.

In-process shared board documents, the object-creation primitives that
write into them, and the store that owns them.
"""

from diagram_planner.boundary.board.board_store import BoardStore
from diagram_planner.boundary.board.document import BoardDocument, BoardUpdate

__all__ = ["BoardDocument", "BoardStore", "BoardUpdate"]
