"""
Diagram API endpoints.

Routes:
- GET /diagrams/types - Supported diagram types with their plan schemas
- POST /boards/{board_id}/diagrams - Plan and render a diagram onto a board
- GET /boards/{board_id}/objects - Objects currently on a board
- DELETE /boards/{board_id} - Drop a board and its objects

Dependencies: diagram_planner.application.services.diagram_service
System role: Diagram creation HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from diagram_planner.api.deps import get_diagram_service
from diagram_planner.application.services import DiagramService
from diagram_planner.core.exceptions import BoardNotFoundError
from diagram_planner.models.common import ToolResult
from diagram_planner.models.diagram import DiagramRequest, DiagramTypeInfo

logger = logging.getLogger(__name__)

router = APIRouter(tags=["diagrams"])


@router.get("/diagrams/types", response_model=list[DiagramTypeInfo])
async def list_diagram_types(
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> list[DiagramTypeInfo]:
    """List supported diagram types."""
    return diagram_service.supported_diagrams()


@router.post(
    "/boards/{board_id}/diagrams",
    response_model=ToolResult,
    status_code=200,
)
async def create_diagram(
    board_id: str,
    request: DiagramRequest,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> ToolResult:
    """
    Plan and render a diagram onto a board.

    Missing or unknown parameters, planning failures and partial renders
    are all reported in the result body rather than as HTTP errors.

    Args:
        board_id: Target board (created on first use)
        request: Diagram type, topic, viewport centre and actor id
        diagram_service: Injected DiagramService

    Returns:
        ToolResult: success, message and created object ids
    """
    return await diagram_service.create_diagram(board_id, request)


@router.get("/boards/{board_id}/objects", response_model=list[dict[str, Any]])
async def get_board_objects(
    board_id: str,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> list[dict[str, Any]]:
    """
    Get every object on a board.

    Raises:
        HTTPException(404): Board not found
    """
    try:
        return diagram_service.get_board_objects(board_id)
    except BoardNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/boards/{board_id}", status_code=204)
async def delete_board(
    board_id: str,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> None:
    """
    Drop a board and its objects.

    Raises:
        HTTPException(404): Board not found
    """
    try:
        diagram_service.delete_board(board_id)
    except BoardNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
