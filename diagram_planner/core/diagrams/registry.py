"""
Diagram type registry.

Static mapping from diagram type name to its handler. Adding a template
only needs a new handler here.

Dependencies: diagram_planner.core.diagrams
System role: Diagram type lookup and tool advertisement
"""

from collections.abc import Mapping
from typing import Any

from diagram_planner.core.diagrams.flowchart import FLOWCHART_HANDLER
from diagram_planner.core.diagrams.kanban import KANBAN_HANDLER
from diagram_planner.core.diagrams.retro import RETRO_HANDLER
from diagram_planner.core.diagrams.swot import SWOT_HANDLER
from diagram_planner.core.diagrams.types import DiagramHandler

DiagramRegistry = Mapping[str, DiagramHandler]

DIAGRAM_REGISTRY: DiagramRegistry = {
    handler.diagram_type.value: handler
    for handler in (SWOT_HANDLER, KANBAN_HANDLER, RETRO_HANDLER, FLOWCHART_HANDLER)
}

DIAGRAM_TOOL_NAME = "createDiagram"


def get_handler(
    diagram_type: str,
    registry: DiagramRegistry = DIAGRAM_REGISTRY,
) -> DiagramHandler | None:
    """Return the handler for a type name, or None if unsupported."""
    return registry.get(diagram_type)


def supported_types(registry: DiagramRegistry = DIAGRAM_REGISTRY) -> list[str]:
    """Supported type names in registration order."""
    return list(registry)


def diagram_tool_definition(registry: DiagramRegistry = DIAGRAM_REGISTRY) -> dict[str, Any]:
    """
    Tool definition a tool-calling agent advertises for diagram creation.

    Returns:
        dict: name, description and JSON input schema with the type enum
    """
    types = supported_types(registry)
    return {
        "name": DIAGRAM_TOOL_NAME,
        "description": (
            "Create a structured diagram from a template. Use this for multi-object "
            "layouts such as SWOT analyses, Kanban boards, retrospectives and "
            "flowcharts. The diagram is planned, laid out and rendered with "
            "colour-coded elements automatically. Prefer this over creating frames "
            "and stickies by hand when a template fits."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "type": {
                    "type": "string",
                    "enum": types,
                    "description": f"The diagram template type. Supported: {', '.join(types)}.",
                },
                "topic": {
                    "type": "string",
                    "description": (
                        "The subject of the diagram, e.g. "
                        '"launching a catering business" or "password reset flow".'
                    ),
                },
            },
            "required": ["type", "topic"],
        },
    }
