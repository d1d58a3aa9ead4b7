"""
Flowchart handler.

The only template whose positions come from the layered layout engine
rather than fixed slots.
"""

from diagram_planner.core.diagrams.flowchart.flowchart_prompt import FLOWCHART_PLANNER_PROMPT
from diagram_planner.core.diagrams.flowchart.flowchart_renderer import render_flowchart
from diagram_planner.core.diagrams.types import DiagramHandler, DiagramType
from diagram_planner.models.plans import FlowchartPlan

FLOWCHART_HANDLER = DiagramHandler(
    diagram_type=DiagramType.FLOWCHART,
    planner_prompt=FLOWCHART_PLANNER_PROMPT,
    schema=FlowchartPlan,
    render=render_flowchart,
)

__all__ = ["FLOWCHART_HANDLER", "FLOWCHART_PLANNER_PROMPT", "render_flowchart"]
