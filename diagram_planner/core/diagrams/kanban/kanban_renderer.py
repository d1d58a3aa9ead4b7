"""
Kanban renderer.

Dependencies: diagram_planner.core.diagrams.column_renderer
System role: Kanban board rendering
"""

from diagram_planner.core.diagrams.column_renderer import render_column_board
from diagram_planner.core.diagrams.layout_constants import KANBAN_COLUMN_COLORS, KANBAN_LAYOUT
from diagram_planner.models.diagram import RenderContext, RenderResult
from diagram_planner.models.plans import KanbanPlan


def render_kanban(plan: KanbanPlan, context: RenderContext) -> RenderResult:
    """Render a validated Kanban plan as side-by-side column frames."""
    return render_column_board(
        plan,
        context,
        layout=KANBAN_LAYOUT,
        palette=KANBAN_COLUMN_COLORS,
        board_label="Kanban board",
    )
