"""
Diagram domain models and schemas.

Render context and result types plus the request/response schemas of the
diagram API.

Dependencies: pydantic, diagram_planner.models.common
System role: Diagram API contracts
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from diagram_planner.models.common import ToolResult

if TYPE_CHECKING:
    from diagram_planner.boundary.board.document import BoardDocument


class Point(BaseModel):
    """Canvas-space point."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class RenderContext:
    """Everything a renderer needs besides the plan itself."""

    document: "BoardDocument"
    actor_id: str
    viewport_center: Point = field(default_factory=Point)


@dataclass
class RenderResult:
    """Outcome of rendering one plan onto a board."""

    success: bool
    message: str
    created_ids: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def to_tool_result(self) -> ToolResult:
        """Convert to the dispatcher's result shape."""
        data: dict[str, Any] = {"created_ids": list(self.created_ids)}
        if self.errors:
            data["errors"] = list(self.errors)
        return ToolResult(success=self.success, message=self.message, data=data)


class DiagramRequest(BaseModel):
    """Request schema for diagram creation."""

    type: str | None = Field(default=None, description="Diagram type, e.g. swot or flowchart")
    topic: str | None = Field(default=None, description="What the diagram should be about")
    viewport_center: Point = Field(
        default_factory=Point,
        description="Canvas point the diagram is centred on",
    )
    actor_id: str = Field(default="ai-agent", description="Actor id stamped on created objects")


class DiagramTypeInfo(BaseModel):
    """One supported diagram type with the plan schema its planner must satisfy."""

    type: str
    plan_schema: dict[str, Any] = Field(description="JSON Schema of the plan")
