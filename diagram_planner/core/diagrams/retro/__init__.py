"""
Retrospective board handler.

Reuses the column board renderer with the retrospective palette.
"""

from diagram_planner.core.diagrams.retro.retro_prompt import RETRO_PLANNER_PROMPT
from diagram_planner.core.diagrams.retro.retro_renderer import render_retro
from diagram_planner.core.diagrams.types import DiagramHandler, DiagramType
from diagram_planner.models.plans import RetroPlan

RETRO_HANDLER = DiagramHandler(
    diagram_type=DiagramType.RETRO,
    planner_prompt=RETRO_PLANNER_PROMPT,
    schema=RetroPlan,
    render=render_retro,
)

__all__ = ["RETRO_HANDLER", "RETRO_PLANNER_PROMPT", "render_retro"]
