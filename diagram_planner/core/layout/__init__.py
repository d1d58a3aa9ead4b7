"""
Graph layout module.

Layered (Sugiyama-style) placement of directed graphs.
"""

from diagram_planner.core.layout.layered_layout import (
    LayoutSpacing,
    NodePosition,
    compute_flowchart_layout,
    edge_label_position,
)

__all__ = [
    "LayoutSpacing",
    "NodePosition",
    "compute_flowchart_layout",
    "edge_label_position",
]
