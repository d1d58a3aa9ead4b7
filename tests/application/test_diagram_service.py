"""
Test suite for DiagramService.

Uses a real BoardStore and a scripted planning service.

System role: Verification of the diagram service layer
"""

import pytest

from diagram_planner.application.services.diagram_service import DiagramService
from diagram_planner.boundary.board import BoardStore
from diagram_planner.core.diagrams.registry import DIAGRAM_REGISTRY
from diagram_planner.core.exceptions import BoardNotFoundError
from diagram_planner.models.diagram import DiagramRequest, Point


@pytest.fixture
def board_store() -> BoardStore:
    """Provide an empty board store."""
    return BoardStore()


class TestDiagramServiceCreateDiagram:
    """Test suite for DiagramService.create_diagram."""

    @pytest.mark.asyncio
    async def test_create_diagram_should_render_onto_board(
        self,
        board_store: BoardStore,
        scripted_planner,
        flowchart_plan_data: dict,
        as_json,
    ) -> None:
        """Test create_diagram creates the board and renders the plan."""
        # Arrange
        planner = scripted_planner([as_json(flowchart_plan_data)])
        service = DiagramService(board_store=board_store, planner=planner)
        request = DiagramRequest(
            type="flowchart",
            topic="password reset",
            viewport_center=Point(x=500, y=500),
            actor_id="user-3",
        )

        # Act
        result = await service.create_diagram("board-1", request)

        # Assert
        assert result.success is True
        document = board_store.get("board-1")
        assert [obj.id for obj in document.objects()] == result.data["created_ids"]
        assert {obj.last_modified_by for obj in document.objects()} == {"user-3"}

    @pytest.mark.asyncio
    async def test_create_diagram_should_respect_attempt_budget(
        self, board_store: BoardStore, scripted_planner
    ) -> None:
        """Test create_diagram passes max_attempts through to planning."""
        # Arrange
        planner = scripted_planner(["a", "b", "c"])
        service = DiagramService(board_store=board_store, planner=planner, max_attempts=3)

        # Act
        result = await service.create_diagram("board-1", DiagramRequest(type="swot", topic="x"))

        # Assert
        assert result.success is False
        assert len(planner.calls) == 3

    @pytest.mark.asyncio
    async def test_create_diagram_should_use_default_actor(
        self,
        board_store: BoardStore,
        scripted_planner,
        swot_plan_data: dict,
        as_json,
    ) -> None:
        """Test objects are stamped with the default agent actor id."""
        # Arrange
        planner = scripted_planner([as_json(swot_plan_data)])
        service = DiagramService(board_store=board_store, planner=planner)

        # Act
        await service.create_diagram("board-1", DiagramRequest(type="swot", topic="coffee"))

        # Assert
        objects = board_store.get("board-1").objects()
        assert {obj.last_modified_by for obj in objects} == {"ai-agent"}


class TestDiagramServiceQueries:
    """Test suite for read-only DiagramService methods."""

    def test_get_board_objects_should_raise_for_unknown_board(
        self, board_store: BoardStore, scripted_planner
    ) -> None:
        """Test get_board_objects raises BoardNotFoundError."""
        service = DiagramService(board_store=board_store, planner=scripted_planner([]))

        with pytest.raises(BoardNotFoundError):
            service.get_board_objects("missing")

    def test_supported_diagrams_should_follow_registry(
        self, board_store: BoardStore, scripted_planner
    ) -> None:
        """Test supported_diagrams lists every handler with its schema."""
        service = DiagramService(board_store=board_store, planner=scripted_planner([]))

        infos = service.supported_diagrams()

        assert [info.type for info in infos] == list(DIAGRAM_REGISTRY)
        assert infos[3].plan_schema["title"] == "FlowchartPlanV1"


class TestDiagramServiceDeleteBoard:
    """Test suite for DiagramService.delete_board."""

    def test_delete_board_should_drop_document(
        self, board_store: BoardStore, scripted_planner
    ) -> None:
        """Test delete_board removes the board from the store."""
        # Arrange
        board_store.get_or_create("b1")
        service = DiagramService(board_store=board_store, planner=scripted_planner([]))

        # Act
        service.delete_board("b1")

        # Assert
        assert board_store.board_ids() == []
        with pytest.raises(BoardNotFoundError):
            service.get_board_objects("b1")

    def test_delete_board_should_raise_for_unknown_board(
        self, board_store: BoardStore, scripted_planner
    ) -> None:
        """Test delete_board raises BoardNotFoundError."""
        service = DiagramService(board_store=board_store, planner=scripted_planner([]))

        with pytest.raises(BoardNotFoundError):
            service.delete_board("missing")
