"""
Layered graph layout.

Positions the nodes of a directed graph without any planner-supplied
coordinates, in three phases:

1. Layer assignment: longest path from the roots (Kahn sweep).
2. Crossing reduction: barycenter ordering inside each layer.
3. Coordinates: (layer, rank) -> (x, y) for the requested direction,
   then the bounding box is centred on the origin.

Only ordered containers are iterated, so the same input always produces
the same positions.

Dependencies: None (pure function)
System role: Flowchart node placement
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
import logging
import math
from typing import Literal, Protocol

logger = logging.getLogger(__name__)

Direction = Literal["TB", "LR"]


class LayoutNode(Protocol):
    id: str


class LayoutEdge(Protocol):
    source: str
    target: str


@dataclass(frozen=True)
class NodePosition:
    """Top-left corner of a node, relative to the layout origin."""

    x: float
    y: float


@dataclass(frozen=True)
class LayoutSpacing:
    """Fixed sizes that drive coordinate assignment."""

    node_size: float = 200.0
    layer_gap: float = 120.0
    node_gap: float = 60.0


DEFAULT_SPACING = LayoutSpacing()


def compute_flowchart_layout(
    nodes: Sequence[LayoutNode],
    edges: Iterable[LayoutEdge],
    direction: Direction,
    spacing: LayoutSpacing = DEFAULT_SPACING,
) -> dict[str, NodePosition]:
    """
    Compute positions for every node of a directed graph.

    Edges whose endpoints are not both known node ids are ignored.

    Args:
        nodes: Graph nodes (anything with an `id`)
        edges: Directed edges (anything with `source` and `target`)
        direction: "TB" (layers stack downwards) or "LR" (layers run right)
        spacing: Node size and gaps

    Returns:
        dict[str, NodePosition]: Node id -> position, bounding box centred at (0, 0)
    """
    node_ids = list(dict.fromkeys(node.id for node in nodes))
    if not node_ids:
        return {}

    known = set(node_ids)
    forward: dict[str, list[str]] = {node_id: [] for node_id in node_ids}
    reverse: dict[str, list[str]] = {node_id: [] for node_id in node_ids}
    for edge in edges:
        if edge.source in known and edge.target in known and edge.source != edge.target:
            forward[edge.source].append(edge.target)
            reverse[edge.target].append(edge.source)

    layers = _assign_layers(node_ids, forward, reverse)
    layer_groups = _group_by_layer(layers)
    _order_within_layers(layer_groups, layers, reverse)
    positions = _compute_coordinates(layer_groups, direction, spacing)

    logger.debug(
        f"{__name__}:compute_flowchart_layout - nodes={len(node_ids)} "
        f"layers={len(layer_groups)} direction={direction}"
    )
    return _center_positions(positions)


def edge_label_position(
    from_pos: NodePosition,
    to_pos: NodePosition,
    node_size: float = DEFAULT_SPACING.node_size,
) -> NodePosition:
    """Midpoint between the centres of two nodes."""
    half = node_size / 2
    return NodePosition(
        x=(from_pos.x + half + to_pos.x + half) / 2,
        y=(from_pos.y + half + to_pos.y + half) / 2,
    )


# =============================================================================
# Phase 1: layer assignment
# =============================================================================


def _assign_layers(
    node_ids: list[str],
    forward: dict[str, list[str]],
    reverse: dict[str, list[str]],
) -> dict[str, int]:
    layers: dict[str, int] = {}
    indegree = {node_id: len(reverse[node_id]) for node_id in node_ids}

    queue = [node_id for node_id in node_ids if indegree[node_id] == 0]
    # Pure cycle: no roots, so the first node stands in for one
    if not queue:
        queue.append(node_ids[0])
    for root in queue:
        layers[root] = 0

    processed: set[str] = set()
    head = 0
    while head < len(queue):
        current = queue[head]
        head += 1
        processed.add(current)
        next_layer = layers[current] + 1

        for successor in forward[current]:
            # Back edge into an already placed node: leave it where it is
            if successor in processed:
                continue
            if next_layer > layers.get(successor, -1):
                layers[successor] = next_layer
            indegree[successor] -= 1
            if indegree[successor] == 0:
                queue.append(successor)

    for node_id in node_ids:
        layers.setdefault(node_id, 0)

    return layers


# =============================================================================
# Phase 2: ordering within layers
# =============================================================================


def _group_by_layer(layers: dict[str, int]) -> dict[int, list[str]]:
    groups: dict[int, list[str]] = {}
    for node_id, layer in layers.items():
        groups.setdefault(layer, []).append(node_id)
    return groups


def _order_within_layers(
    layer_groups: dict[int, list[str]],
    layers: dict[str, int],
    reverse: dict[str, list[str]],
) -> None:
    """Barycenter heuristic; sorts each layer group in place."""
    position_in_layer: dict[str, int] = {
        node_id: index for index, node_id in enumerate(layer_groups.get(0, []))
    }

    for layer in range(1, max(layer_groups) + 1):
        group = layer_groups.get(layer)
        if not group:
            continue

        barycenters: dict[str, float] = {}
        for node_id in group:
            preds = [
                pred for pred in reverse[node_id]
                if layers[pred] < layer and pred in position_in_layer
            ]
            if preds:
                barycenters[node_id] = sum(position_in_layer[p] for p in preds) / len(preds)
            else:
                barycenters[node_id] = math.inf

        # sorted() is stable, so ties keep their current order
        group[:] = sorted(group, key=lambda node_id: barycenters[node_id])
        for index, node_id in enumerate(group):
            position_in_layer[node_id] = index


# =============================================================================
# Phase 3: coordinates
# =============================================================================


def _compute_coordinates(
    layer_groups: dict[int, list[str]],
    direction: Direction,
    spacing: LayoutSpacing,
) -> dict[str, NodePosition]:
    layer_step = spacing.node_size + spacing.layer_gap
    node_step = spacing.node_size + spacing.node_gap
    positions: dict[str, NodePosition] = {}

    for layer, group in layer_groups.items():
        start = -((len(group) - 1) * node_step) / 2
        along = layer * layer_step
        for rank, node_id in enumerate(group):
            across = start + rank * node_step
            if direction == "TB":
                positions[node_id] = NodePosition(x=across, y=along)
            else:
                positions[node_id] = NodePosition(x=along, y=across)

    return positions


def _center_positions(positions: dict[str, NodePosition]) -> dict[str, NodePosition]:
    xs = [pos.x for pos in positions.values()]
    ys = [pos.y for pos in positions.values()]
    cx = (min(xs) + max(xs)) / 2
    cy = (min(ys) + max(ys)) / 2
    return {
        node_id: NodePosition(x=pos.x - cx, y=pos.y - cy)
        for node_id, pos in positions.items()
    }
