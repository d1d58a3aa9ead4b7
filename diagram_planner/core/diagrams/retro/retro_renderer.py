"""
Retrospective renderer.

Dependencies: diagram_planner.core.diagrams.column_renderer
System role: Retrospective board rendering
"""

from diagram_planner.core.diagrams.column_renderer import render_column_board
from diagram_planner.core.diagrams.layout_constants import RETRO_COLUMN_COLORS, RETRO_LAYOUT
from diagram_planner.models.diagram import RenderContext, RenderResult
from diagram_planner.models.plans import RetroPlan


def render_retro(plan: RetroPlan, context: RenderContext) -> RenderResult:
    """Render a validated retrospective plan as side-by-side column frames."""
    return render_column_board(
        plan,
        context,
        layout=RETRO_LAYOUT,
        palette=RETRO_COLUMN_COLORS,
        board_label="retro board",
    )
