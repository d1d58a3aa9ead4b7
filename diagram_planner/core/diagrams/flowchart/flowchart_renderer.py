"""
Flowchart renderer.

Turns a validated FlowchartPlan into board objects: a title, one
colour-coded sticky note per node at its layered-layout position, one
arrow connector per edge and a small text label at the midpoint of each
labelled edge.

Dependencies: diagram_planner.core.layout, diagram_planner.boundary.board
System role: Graph-based template rendering
"""

import logging

from diagram_planner.boundary.board.primitives import (
    CreateConnectorInput,
    CreateStickyNoteInput,
    CreateTextInput,
    create_connector,
    create_sticky_note,
    create_text,
)
from diagram_planner.core.diagrams.layout_constants import (
    FLOWCHART_LAYOUT,
    FLOWCHART_NODE_COLORS,
    FlowchartLayout,
)
from diagram_planner.core.diagrams.types import RenderCollector
from diagram_planner.core.layout.layered_layout import (
    LayoutSpacing,
    NodePosition,
    compute_flowchart_layout,
    edge_label_position,
)
from diagram_planner.models.diagram import RenderContext, RenderResult
from diagram_planner.models.plans import FlowchartPlan
from diagram_planner.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

SNAP_POSITIONS = {
    "TB": ("bottom", "top"),
    "LR": ("right", "left"),
}


def render_flowchart(
    plan: FlowchartPlan,
    context: RenderContext,
    layout: FlowchartLayout = FLOWCHART_LAYOUT,
) -> RenderResult:
    """
    Render a validated flowchart plan onto the board.

    Edges whose endpoints are not plan nodes are skipped without an error.

    Args:
        plan: Validated flowchart plan
        context: Target document, actor id and viewport centre
        layout: Flowchart geometry

    Returns:
        RenderResult: Created ids and any per-object errors
    """
    document = context.document
    actor_id = context.actor_id

    spacing = LayoutSpacing(
        node_size=layout.node_size,
        layer_gap=layout.layer_gap,
        node_gap=layout.node_gap,
    )
    layout_positions = compute_flowchart_layout(plan.nodes, plan.edges, plan.direction, spacing)

    # Layout is centred on (0, 0); leave room for the title above the nodes
    offset_x = context.viewport_center.x
    offset_y = context.viewport_center.y + layout.title_gap / 2
    positions = {
        node_id: NodePosition(x=pos.x + offset_x, y=pos.y + offset_y)
        for node_id, pos in layout_positions.items()
    }

    node_ids = {node.id for node in plan.nodes}
    edges = [edge for edge in plan.edges if edge.source in node_ids and edge.target in node_ids]
    if len(edges) < len(plan.edges):
        logger.debug(
            f"{__name__}:render_flowchart - Dropped {len(plan.edges) - len(edges)} "
            "edges with unknown endpoints"
        )

    collector = RenderCollector()
    board_ids: dict[str, str] = {}

    with document.transact(origin=actor_id):
        min_x = min(pos.x for pos in positions.values())
        min_y = min(pos.y for pos in positions.values())
        collector.record(
            create_text(
                CreateTextInput(
                    text=plan.title,
                    x=min_x,
                    y=min_y - layout.title_gap,
                    font_size=layout.title_font_size,
                ),
                document,
                actor_id,
            ),
            "Title",
        )

        for node in plan.nodes:
            pos = positions.get(node.id)
            if pos is None:
                collector.error(f'Node "{node.id}": no computed position')
                continue
            board_id = collector.record(
                create_sticky_note(
                    CreateStickyNoteInput(
                        text=node.label,
                        x=pos.x,
                        y=pos.y,
                        color=FLOWCHART_NODE_COLORS[node.type],
                    ),
                    document,
                    actor_id,
                ),
                f'Node "{node.id}"',
            )
            if board_id is not None:
                board_ids[node.id] = board_id

        from_snap, to_snap = SNAP_POSITIONS[plan.direction]
        for edge in edges:
            from_id = board_ids.get(edge.source)
            to_id = board_ids.get(edge.target)
            if from_id is None or to_id is None:
                collector.error(f"Edge {edge.source}→{edge.target}: missing node")
                continue
            collector.record(
                create_connector(
                    CreateConnectorInput(
                        from_id=from_id,
                        to_id=to_id,
                        style="straight",
                        end_cap="arrow",
                        from_snap_to=from_snap,
                        to_snap_to=to_snap,
                    ),
                    document,
                    actor_id,
                ),
                f"Connector {edge.source}→{edge.target}",
            )

        for edge in edges:
            if not edge.label:
                continue
            label_pos = edge_label_position(
                positions[edge.source],
                positions[edge.target],
                layout.node_size,
            )
            collector.record(
                create_text(
                    CreateTextInput(
                        text=edge.label,
                        x=label_pos.x,
                        y=label_pos.y,
                        font_size=layout.edge_label_font_size,
                    ),
                    document,
                    actor_id,
                ),
                f'Edge label "{edge.label}"',
            )

    log_with_context(
        logger,
        logging.INFO,
        f"{__name__}:render_flowchart - Rendered flowchart",
        nodes=len(plan.nodes),
        edges=len(edges),
        objects=len(collector.created_ids),
        errors=len(collector.errors),
    )
    return collector.finish(
        f'Created flowchart "{plan.title}" with {len(plan.nodes)} nodes '
        f"and {len(edges)} connections",
        "Flowchart",
    )
