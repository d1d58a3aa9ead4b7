"""
SWOT analysis handler: four fixed quadrants of stickies.
"""

from diagram_planner.core.diagrams.swot.swot_prompt import SWOT_PLANNER_PROMPT
from diagram_planner.core.diagrams.swot.swot_renderer import render_swot
from diagram_planner.core.diagrams.types import DiagramHandler, DiagramType
from diagram_planner.models.plans import SwotPlan

SWOT_HANDLER = DiagramHandler(
    diagram_type=DiagramType.SWOT,
    planner_prompt=SWOT_PLANNER_PROMPT,
    schema=SwotPlan,
    render=render_swot,
)

__all__ = ["SWOT_HANDLER", "SWOT_PLANNER_PROMPT", "render_swot"]
