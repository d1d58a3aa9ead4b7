"""
Structured diagram plan models.

Closed, versioned plan shapes produced by the planning model. Each model
doubles as the JSON Schema handed to the planner and as the validator for
its reply.

Dependencies: pydantic
System role: Planner output contracts
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

StickyColor = Literal["#FFEB3B", "#FF9800", "#E91E63", "#4CAF50", "#2196F3", "#9C27B0"]


class PlanModel(BaseModel):
    """Base for plan models: closed shape, aliased fields only accept their wire name."""

    model_config = ConfigDict(extra="forbid", frozen=True)


# =============================================================================
# Flowchart
# =============================================================================


class FlowchartNode(PlanModel):
    """Single flowchart step."""

    id: str = Field(min_length=1, max_length=20, description="Unique node identifier")
    label: str = Field(min_length=1, max_length=120, description="Text shown on the node")
    type: Literal["start", "end", "process", "decision"] = Field(
        description="Node role, drives its colour"
    )


class FlowchartEdge(PlanModel):
    """Directed connection between two node ids."""

    source: str = Field(alias="from", min_length=1, description="Source node id")
    target: str = Field(alias="to", min_length=1, description="Target node id")
    label: str | None = Field(default=None, max_length=30, description="Optional edge label")


class FlowchartPlan(PlanModel):
    """Flowchart plan (version 1)."""

    model_config = ConfigDict(title="FlowchartPlanV1")

    version: Literal[1]
    diagram_type: Literal["flowchart"] = Field(alias="diagramType")
    title: str = Field(min_length=1, max_length=80)
    direction: Literal["TB", "LR"] = Field(description="TB = top-to-bottom, LR = left-to-right")
    nodes: list[FlowchartNode] = Field(min_length=2, max_length=25)
    edges: list[FlowchartEdge] = Field(min_length=1, max_length=40)

    @model_validator(mode="after")
    def check_unique_node_ids(self) -> "FlowchartPlan":
        """Reject plans that reuse a node id."""
        seen: set[str] = set()
        for node in self.nodes:
            if node.id in seen:
                raise ValueError(f'Duplicate node id "{node.id}"')
            seen.add(node.id)
        return self


# =============================================================================
# Column boards (Kanban, Retro)
# =============================================================================


class ColumnCard(PlanModel):
    """Card inside a board column."""

    text: str = Field(min_length=1, max_length=220)
    color: StickyColor | None = None


class KanbanColumn(PlanModel):
    """Kanban column with its cards."""

    title: str = Field(min_length=1, max_length=40)
    color: StickyColor | None = None
    cards: list[ColumnCard] = Field(max_length=20)


class KanbanPlan(PlanModel):
    """Kanban board plan (version 1)."""

    model_config = ConfigDict(title="KanbanPlanV1")

    version: Literal[1]
    diagram_type: Literal["kanban"] = Field(alias="diagramType")
    title: str = Field(min_length=1, max_length=80)
    columns: list[KanbanColumn] = Field(min_length=2, max_length=6)


class RetroColumn(PlanModel):
    """Retrospective column with its cards."""

    title: str = Field(min_length=1, max_length=40)
    color: StickyColor | None = None
    cards: list[ColumnCard] = Field(max_length=15)


class RetroPlan(PlanModel):
    """Retrospective board plan (version 1)."""

    model_config = ConfigDict(title="RetroPlanV1")

    version: Literal[1]
    diagram_type: Literal["retro"] = Field(alias="diagramType")
    title: str = Field(min_length=1, max_length=80)
    columns: list[RetroColumn] = Field(min_length=2, max_length=5)


# =============================================================================
# SWOT
# =============================================================================


class SwotSticky(PlanModel):
    """Sticky note inside one SWOT quadrant."""

    text: str = Field(min_length=1, max_length=220)
    color: StickyColor | None = None


class SwotPlan(PlanModel):
    """SWOT analysis plan (version 1)."""

    model_config = ConfigDict(title="SWOTPlanV1")

    version: Literal[1]
    diagram_type: Literal["swot"] = Field(alias="diagramType")
    title: str = Field(min_length=1, max_length=80)
    strengths: list[SwotSticky] = Field(max_length=30)
    weaknesses: list[SwotSticky] = Field(max_length=30)
    opportunities: list[SwotSticky] = Field(max_length=30)
    threats: list[SwotSticky] = Field(max_length=30)


ColumnPlan = KanbanPlan | RetroPlan
DiagramPlan = FlowchartPlan | KanbanPlan | RetroPlan | SwotPlan
