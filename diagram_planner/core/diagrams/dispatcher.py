"""
Diagram dispatcher.

Single entry point for diagram creation: checks the request, resolves the
handler, drives the plan validator and hands the accepted plan to the
renderer. Every path returns a ToolResult; nothing is raised to the caller.

Dependencies: diagram_planner.core.diagrams, diagram_planner.core.exceptions
System role: Orchestrates plan -> validate -> render
"""

from collections.abc import Mapping
import logging
from typing import Any

from diagram_planner.core.diagrams.plan_validator import (
    MAX_PLAN_ATTEMPTS,
    Exhausted,
    PlanningService,
    plan_diagram,
)
from diagram_planner.core.diagrams.registry import (
    DIAGRAM_REGISTRY,
    DiagramRegistry,
    get_handler,
    supported_types,
)
from diagram_planner.core.exceptions import PlanningServiceError
from diagram_planner.models.common import ToolResult
from diagram_planner.models.diagram import RenderContext
from diagram_planner.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


async def handle_diagram(
    tool_input: Mapping[str, Any],
    context: RenderContext,
    planner: PlanningService,
    registry: DiagramRegistry = DIAGRAM_REGISTRY,
    max_attempts: int = MAX_PLAN_ATTEMPTS,
) -> ToolResult:
    """
    Plan and render one diagram.

    Input errors are reported before any planning call is made.

    Args:
        tool_input: {"type": ..., "topic": ...}
        context: Target document, actor id and viewport centre
        planner: Planning service
        registry: Diagram handlers by type name
        max_attempts: Planning attempt budget

    Returns:
        ToolResult: Render summary, or the reason nothing was created
    """
    diagram_type = tool_input.get("type")
    topic = tool_input.get("topic")

    if not diagram_type:
        return ToolResult.fail('Missing required parameter: "type"')
    if not topic:
        return ToolResult.fail('Missing required parameter: "topic"')

    handler = get_handler(str(diagram_type), registry)
    if handler is None:
        supported = ", ".join(supported_types(registry))
        return ToolResult.fail(
            f'Unknown diagram type: "{diagram_type}". Supported types: {supported}'
        )

    logger.info(
        f"{__name__}:handle_diagram - type={diagram_type} "
        f"topic={safe_log_value(topic, 120)} actor={context.actor_id}"
    )

    try:
        outcome = await plan_diagram(handler, str(topic), planner, max_attempts)
    except PlanningServiceError as e:
        return ToolResult.fail(e.message)

    if isinstance(outcome, Exhausted):
        return ToolResult.fail(outcome.message)

    result = handler.render(outcome.plan, context)
    return result.to_tool_result()
