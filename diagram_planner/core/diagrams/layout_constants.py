"""
Layout constants for the diagram templates.

Every renderer derives all object positions from these fixed canvas-space
pixel values plus the caller's viewport centre.

Dependencies: None
System role: Tunable geometry for diagram rendering
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FlowchartLayout:
    """Geometry for layered flowcharts."""

    node_size: float = 200.0
    layer_gap: float = 120.0
    node_gap: float = 60.0
    title_font_size: int = 36
    title_gap: float = 80.0
    edge_label_font_size: int = 14


@dataclass(frozen=True)
class ColumnLayout:
    """Geometry for column boards. Column width fits exactly one sticky plus padding."""

    sticky_size: float = 200.0
    gap: float = 24.0
    frame_pad: float = 40.0
    title_font_size: int = 36
    column_width: float = 280.0
    min_column_height: float = 400.0
    column_gap: float = 40.0
    title_gap: float = 90.0
    frame_title_offset: float = 80.0


@dataclass(frozen=True)
class SwotLayout:
    """Geometry for the 2x2 SWOT grid."""

    sticky_size: float = 200.0
    gap: float = 24.0
    frame_pad: float = 32.0
    title_font_size: int = 36
    quad_width: float = 560.0
    quad_height: float = 560.0
    quad_gap: float = 40.0
    title_gap: float = 90.0
    frame_title_offset: float = 80.0


FLOWCHART_LAYOUT = FlowchartLayout()
KANBAN_LAYOUT = ColumnLayout()
RETRO_LAYOUT = ColumnLayout()
SWOT_LAYOUT = SwotLayout()

FLOWCHART_NODE_COLORS: dict[str, str] = {
    "start": "#4CAF50",
    "end": "#E91E63",
    "process": "#2196F3",
    "decision": "#FF9800",
}

# Cycled by column index when a column has no colour of its own
KANBAN_COLUMN_COLORS: tuple[str, ...] = (
    "#2196F3",
    "#FF9800",
    "#4CAF50",
    "#E91E63",
    "#9C27B0",
    "#FFEB3B",
)

RETRO_COLUMN_COLORS: tuple[str, ...] = (
    "#4CAF50",
    "#FF9800",
    "#2196F3",
    "#E91E63",
    "#9C27B0",
)

SWOT_DEFAULT_COLORS: dict[str, str] = {
    "strengths": "#4CAF50",
    "weaknesses": "#FF9800",
    "opportunities": "#2196F3",
    "threats": "#E91E63",
}
