"""
Diagram handler contract.

A DiagramHandler packages everything one diagram type needs: the planner
prompt, the plan model that validates the planner's reply, and the
deterministic renderer.

Dependencies: pydantic, diagram_planner.models
System role: Shared types for the diagram pipeline
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from diagram_planner.models.common import ToolResult
from diagram_planner.models.diagram import RenderContext, RenderResult


class DiagramType(str, Enum):
    """Supported diagram templates."""

    SWOT = "swot"
    KANBAN = "kanban"
    RETRO = "retro"
    FLOWCHART = "flowchart"


Renderer = Callable[[Any, RenderContext], RenderResult]


@dataclass(frozen=True)
class DiagramHandler:
    """
    Everything needed to plan and render one diagram type.

    Attributes:
        diagram_type: Registry key, also the `type` value of a request
        planner_prompt: System prompt for the planning model
        schema: Plan model used to validate the planner's reply
        render: Deterministic renderer for a validated plan
    """

    diagram_type: DiagramType
    planner_prompt: str
    schema: type[BaseModel]
    render: Renderer

    @property
    def json_schema(self) -> dict[str, Any]:
        """JSON Schema of the plan, using wire field names."""
        return self.schema.model_json_schema(by_alias=True)


class RenderCollector:
    """Accumulates created ids and per-object errors while a renderer runs."""

    def __init__(self) -> None:
        self.created_ids: list[str] = []
        self.errors: list[str] = []

    def record(self, result: ToolResult, context: str) -> str | None:
        """
        Record one primitive outcome.

        Args:
            result: Outcome of a create_* primitive
            context: Prefix naming what was being created (e.g. "Title")

        Returns:
            str | None: The created object id, or None if creation failed
        """
        if result.success:
            object_id = result.data["id"]
            self.created_ids.append(object_id)
            return object_id
        self.errors.append(f"{context}: {result.message}")
        return None

    def error(self, message: str) -> None:
        """Record a failure that did not come from a primitive."""
        self.errors.append(message)

    def finish(self, success_message: str, partial_label: str) -> RenderResult:
        """
        Build the final result.

        Args:
            success_message: Message used when nothing failed
            partial_label: Diagram name used in the partial-failure message

        Returns:
            RenderResult: success only if no error was recorded
        """
        if self.errors:
            return RenderResult(
                success=False,
                message=f"{partial_label} partially created with errors: {'; '.join(self.errors)}",
                created_ids=self.created_ids,
                errors=self.errors,
            )
        return RenderResult(
            success=True,
            message=success_message,
            created_ids=self.created_ids,
        )
