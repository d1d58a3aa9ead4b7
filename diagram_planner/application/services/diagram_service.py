"""
Diagram service layer.

Coordinates between the API layer and the diagram pipeline: resolves the
target board document, builds the render context and runs the dispatcher.

Dependencies: diagram_planner.boundary.board, diagram_planner.core.diagrams
System role: Service layer for diagram creation
"""

import logging
from typing import Any

from diagram_planner.boundary.board.board_store import BoardStore
from diagram_planner.boundary.board.primitives import get_board_state
from diagram_planner.core.diagrams.dispatcher import handle_diagram
from diagram_planner.core.diagrams.plan_validator import MAX_PLAN_ATTEMPTS, PlanningService
from diagram_planner.core.diagrams.registry import DIAGRAM_REGISTRY, DiagramRegistry
from diagram_planner.models.common import ToolResult
from diagram_planner.models.diagram import DiagramRequest, DiagramTypeInfo, RenderContext

logger = logging.getLogger(__name__)


class DiagramService:
    """Service for planning and rendering diagrams onto boards."""

    def __init__(
        self,
        board_store: BoardStore,
        planner: PlanningService,
        max_attempts: int = MAX_PLAN_ATTEMPTS,
        registry: DiagramRegistry = DIAGRAM_REGISTRY,
    ) -> None:
        """
        Initialize service with dependencies.

        Args:
            board_store: Store owning the board documents
            planner: Planning service used for every request
            max_attempts: Planning attempt budget
            registry: Diagram handlers by type name
        """
        self._board_store = board_store
        self._planner = planner
        self._max_attempts = max_attempts
        self._registry = registry

    async def create_diagram(self, board_id: str, request: DiagramRequest) -> ToolResult:
        """
        Plan and render a diagram onto a board.

        The board document is created on first use.

        Args:
            board_id: Target board
            request: Diagram type, topic, viewport centre and actor id

        Returns:
            ToolResult: Render summary or the reason nothing was created
        """
        logger.info(
            f"{__name__}:create_diagram - START board_id={board_id} type={request.type}"
        )
        document = self._board_store.get_or_create(board_id)
        context = RenderContext(
            document=document,
            actor_id=request.actor_id,
            viewport_center=request.viewport_center,
        )
        result = await handle_diagram(
            {"type": request.type, "topic": request.topic},
            context,
            self._planner,
            registry=self._registry,
            max_attempts=self._max_attempts,
        )
        logger.info(
            f"{__name__}:create_diagram - END board_id={board_id} success={result.success}"
        )
        return result

    def get_board_objects(self, board_id: str) -> list[dict[str, Any]]:
        """
        Return every object on a board.

        Raises:
            BoardNotFoundError: If the board has never been written to
        """
        document = self._board_store.get(board_id)
        return get_board_state(document).data

    def delete_board(self, board_id: str) -> None:
        """
        Drop a board and everything on it.

        Raises:
            BoardNotFoundError: If the board does not exist
        """
        self._board_store.drop(board_id)

    def supported_diagrams(self) -> list[DiagramTypeInfo]:
        """Supported diagram types with their plan schemas."""
        return [
            DiagramTypeInfo(type=name, plan_schema=handler.json_schema)
            for name, handler in self._registry.items()
        ]
