"""
Shared test fixtures and configuration for entire test suite.

Provides: board documents, render contexts, scripted planning services,
sample plan payloads
Dependencies: pytest, diagram_planner
System role: Test infrastructure and fixture management
"""

import json

import pytest

from diagram_planner.boundary.board.document import BoardDocument
from diagram_planner.core.diagrams.types import DiagramHandler
from diagram_planner.models.diagram import Point, RenderContext


class ScriptedPlanner:
    """Planning service that replays canned replies and records every request."""

    def __init__(self, responses: list[str]) -> None:
        self._responses = list(responses)
        self.calls: list[tuple[str, str]] = []

    async def complete(self, handler: DiagramHandler, user_message: str) -> str:
        self.calls.append((handler.diagram_type.value, user_message))
        return self._responses.pop(0)


@pytest.fixture
def board_document() -> BoardDocument:
    """Empty board document."""
    return BoardDocument("board-test")


@pytest.fixture
def render_context(board_document: BoardDocument) -> RenderContext:
    """Render context centred on the origin."""
    return RenderContext(
        document=board_document,
        actor_id="user-1",
        viewport_center=Point(x=0, y=0),
    )


@pytest.fixture
def scripted_planner():
    """Factory for ScriptedPlanner instances."""
    return ScriptedPlanner


@pytest.fixture
def swot_plan_data() -> dict:
    """Valid SWOT plan payload as the planner would send it."""
    return {
        "version": 1,
        "diagramType": "swot",
        "title": "SWOT: Coffee Shop",
        "strengths": [{"text": "Prime location"}, {"text": "Loyal regulars", "color": "#9C27B0"}],
        "weaknesses": [{"text": "Small seating area"}],
        "opportunities": [{"text": "Delivery apps"}, {"text": "Office catering"}],
        "threats": [{"text": "Chain competitor nearby"}],
    }


@pytest.fixture
def kanban_plan_data() -> dict:
    """Valid Kanban plan payload with card counts [2, 1, 3]."""
    return {
        "version": 1,
        "diagramType": "kanban",
        "title": "Website Launch",
        "columns": [
            {"title": "To Do", "cards": [{"text": "Write copy"}, {"text": "Pick fonts"}]},
            {"title": "In Progress", "cards": [{"text": "Build landing page"}]},
            {
                "title": "Done",
                "color": "#4CAF50",
                "cards": [
                    {"text": "Buy domain"},
                    {"text": "Set up hosting", "color": "#FFEB3B"},
                    {"text": "Kickoff meeting"},
                ],
            },
        ],
    }


@pytest.fixture
def flowchart_plan_data() -> dict:
    """Valid flowchart plan payload with a decision branch."""
    return {
        "version": 1,
        "diagramType": "flowchart",
        "title": "Password Reset",
        "direction": "TB",
        "nodes": [
            {"id": "start", "label": "Start", "type": "start"},
            {"id": "found", "label": "Account found?", "type": "decision"},
            {"id": "send", "label": "Send reset email", "type": "process"},
            {"id": "error", "label": "Show error", "type": "end"},
            {"id": "done", "label": "Done", "type": "end"},
        ],
        "edges": [
            {"from": "start", "to": "found"},
            {"from": "found", "to": "send", "label": "Yes"},
            {"from": "found", "to": "error", "label": "No"},
            {"from": "send", "to": "done"},
        ],
    }


@pytest.fixture
def as_json():
    """Serialize a payload the way a planner reply would carry it."""
    return json.dumps
