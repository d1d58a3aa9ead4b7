"""
SWOT renderer.

Turns a validated SwotPlan into a title plus a 2x2 grid of frames
(Strengths, Weaknesses, Opportunities, Threats) with stickies packed in a
grid inside each frame. Both frames of a row share the taller height.

Dependencies: diagram_planner.boundary.board, diagram_planner.core.diagrams
System role: Quadrant-based template rendering
"""

from dataclasses import dataclass
import logging
import math

from diagram_planner.boundary.board.primitives import (
    CreateFrameInput,
    CreateStickyNoteInput,
    CreateTextInput,
    create_frame,
    create_sticky_note,
    create_text,
)
from diagram_planner.core.diagrams.layout_constants import (
    SWOT_DEFAULT_COLORS,
    SWOT_LAYOUT,
    SwotLayout,
)
from diagram_planner.core.diagrams.types import RenderCollector
from diagram_planner.models.diagram import RenderContext, RenderResult
from diagram_planner.models.plans import SwotPlan, SwotSticky
from diagram_planner.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quadrant:
    """One SWOT frame and its contents."""

    key: str
    title: str
    stickies: list[SwotSticky]
    default_color: str


def stickies_per_row(layout: SwotLayout = SWOT_LAYOUT) -> int:
    """Number of sticky columns that fit inside one quadrant frame."""
    usable_width = layout.quad_width - 2 * layout.frame_pad
    return max(1, math.floor((usable_width + layout.gap) / (layout.sticky_size + layout.gap)))


def compute_quad_height(sticky_count: int, columns: int, layout: SwotLayout = SWOT_LAYOUT) -> float:
    """Frame height needed for a quadrant's stickies, never below the minimum."""
    if sticky_count == 0:
        return layout.quad_height
    rows = math.ceil(sticky_count / columns)
    needed = (
        layout.frame_title_offset
        + rows * (layout.sticky_size + layout.gap)
        - layout.gap
        + layout.frame_pad
    )
    return max(layout.quad_height, needed)


def render_swot(
    plan: SwotPlan,
    context: RenderContext,
    layout: SwotLayout = SWOT_LAYOUT,
) -> RenderResult:
    """
    Render a validated SWOT plan onto the board.

    Args:
        plan: Validated SWOT plan
        context: Target document, actor id and viewport centre
        layout: SWOT geometry

    Returns:
        RenderResult: Created ids and any per-object errors
    """
    document = context.document
    actor_id = context.actor_id

    # Top-left, top-right, bottom-left, bottom-right
    quadrants = [
        Quadrant("strengths", "Strengths", plan.strengths, SWOT_DEFAULT_COLORS["strengths"]),
        Quadrant("weaknesses", "Weaknesses", plan.weaknesses, SWOT_DEFAULT_COLORS["weaknesses"]),
        Quadrant("opportunities", "Opportunities", plan.opportunities, SWOT_DEFAULT_COLORS["opportunities"]),
        Quadrant("threats", "Threats", plan.threats, SWOT_DEFAULT_COLORS["threats"]),
    ]

    columns = stickies_per_row(layout)
    top_row_height = max(
        compute_quad_height(len(plan.strengths), columns, layout),
        compute_quad_height(len(plan.weaknesses), columns, layout),
    )
    bottom_row_height = max(
        compute_quad_height(len(plan.opportunities), columns, layout),
        compute_quad_height(len(plan.threats), columns, layout),
    )

    board_width = 2 * layout.quad_width + layout.quad_gap
    board_height = layout.title_gap + top_row_height + layout.quad_gap + bottom_row_height
    origin_x = context.viewport_center.x - board_width / 2
    origin_y = context.viewport_center.y - board_height / 2

    left_x = origin_x
    right_x = origin_x + layout.quad_width + layout.quad_gap
    top_y = origin_y + layout.title_gap
    bottom_y = top_y + top_row_height + layout.quad_gap
    frames = [
        (left_x, top_y, top_row_height),
        (right_x, top_y, top_row_height),
        (left_x, bottom_y, bottom_row_height),
        (right_x, bottom_y, bottom_row_height),
    ]

    collector = RenderCollector()

    with document.transact(origin=actor_id):
        collector.record(
            create_text(
                CreateTextInput(
                    text=plan.title,
                    x=origin_x,
                    y=origin_y,
                    font_size=layout.title_font_size,
                ),
                document,
                actor_id,
            ),
            "Title",
        )

        for quadrant, (frame_x, frame_y, frame_height) in zip(quadrants, frames):
            frame_id = collector.record(
                create_frame(
                    CreateFrameInput(
                        title=quadrant.title,
                        x=frame_x,
                        y=frame_y,
                        width=layout.quad_width,
                        height=frame_height,
                    ),
                    document,
                    actor_id,
                ),
                f"Frame {quadrant.title}",
            )
            if frame_id is None:
                continue

            inner_x = frame_x + layout.frame_pad
            inner_y = frame_y + layout.frame_title_offset
            for index, sticky in enumerate(quadrant.stickies):
                col = index % columns
                row = index // columns
                collector.record(
                    create_sticky_note(
                        CreateStickyNoteInput(
                            text=sticky.text,
                            x=inner_x + col * (layout.sticky_size + layout.gap),
                            y=inner_y + row * (layout.sticky_size + layout.gap),
                            color=sticky.color or quadrant.default_color,
                        ),
                        document,
                        actor_id,
                    ),
                    f"Sticky in {quadrant.title}",
                )

    total_stickies = sum(len(quadrant.stickies) for quadrant in quadrants)
    log_with_context(
        logger,
        logging.INFO,
        f"{__name__}:render_swot - Rendered SWOT diagram",
        stickies=total_stickies,
        objects=len(collector.created_ids),
        errors=len(collector.errors),
    )
    return collector.finish(
        f'Created SWOT diagram "{plan.title}" with 4 frames and {total_stickies} sticky notes',
        "SWOT diagram",
    )
