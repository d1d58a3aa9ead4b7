"""
Kanban diagram handler.

Bundles the kanban planner prompt, plan model and renderer.
"""

from diagram_planner.core.diagrams.kanban.kanban_prompt import KANBAN_PLANNER_PROMPT
from diagram_planner.core.diagrams.kanban.kanban_renderer import render_kanban
from diagram_planner.core.diagrams.types import DiagramHandler, DiagramType
from diagram_planner.models.plans import KanbanPlan

KANBAN_HANDLER = DiagramHandler(
    diagram_type=DiagramType.KANBAN,
    planner_prompt=KANBAN_PLANNER_PROMPT,
    schema=KanbanPlan,
    render=render_kanban,
)

__all__ = ["KANBAN_HANDLER", "KANBAN_PLANNER_PROMPT", "render_kanban"]
