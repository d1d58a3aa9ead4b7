"""
Column board renderer.

Shared deterministic renderer for boards made of vertical columns of
cards (Kanban, Retro). Columns sit side by side as frames of equal height;
cards stack one per row inside their column.

Dependencies: diagram_planner.boundary.board, diagram_planner.core.diagrams
System role: Column-based template rendering
"""

from collections.abc import Sequence
import logging

from diagram_planner.boundary.board.primitives import (
    CreateFrameInput,
    CreateStickyNoteInput,
    CreateTextInput,
    create_frame,
    create_sticky_note,
    create_text,
)
from diagram_planner.core.diagrams.layout_constants import ColumnLayout
from diagram_planner.core.diagrams.types import RenderCollector
from diagram_planner.models.diagram import RenderContext, RenderResult
from diagram_planner.models.plans import ColumnPlan
from diagram_planner.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


def compute_column_height(card_count: int, layout: ColumnLayout) -> float:
    """
    Frame height needed to hold a column's cards.

    Args:
        card_count: Number of cards stacked in the column
        layout: Column geometry

    Returns:
        float: Required height, never below the minimum column height
    """
    if card_count == 0:
        return layout.min_column_height
    needed = (
        layout.frame_title_offset
        + card_count * (layout.sticky_size + layout.gap)
        - layout.gap
        + layout.frame_pad
    )
    return max(layout.min_column_height, needed)


def default_column_color(index: int, palette: Sequence[str]) -> str:
    """Palette colour for a column index, cycling when columns outnumber colours."""
    return palette[index % len(palette)]


def render_column_board(
    plan: ColumnPlan,
    context: RenderContext,
    layout: ColumnLayout,
    palette: Sequence[str],
    board_label: str,
) -> RenderResult:
    """
    Render a validated column plan onto the board.

    Creates a title above the columns, one frame per column and a sticky
    note per card. A column whose frame fails keeps none of its cards.

    Args:
        plan: Validated Kanban or Retro plan
        context: Target document, actor id and viewport centre
        layout: Column geometry
        palette: Default column colours
        board_label: Name used in result messages (e.g. "Kanban board")

    Returns:
        RenderResult: Created ids and any per-object errors
    """
    document = context.document
    actor_id = context.actor_id
    num_columns = len(plan.columns)

    column_height = max(compute_column_height(len(col.cards), layout) for col in plan.columns)

    board_width = num_columns * layout.column_width + (num_columns - 1) * layout.column_gap
    board_height = layout.title_gap + column_height
    origin_x = context.viewport_center.x - board_width / 2
    origin_y = context.viewport_center.y - board_height / 2

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

        for index, column in enumerate(plan.columns):
            column_x = origin_x + index * (layout.column_width + layout.column_gap)
            column_y = origin_y + layout.title_gap
            column_color = column.color or default_column_color(index, palette)

            frame_id = collector.record(
                create_frame(
                    CreateFrameInput(
                        title=column.title,
                        x=column_x,
                        y=column_y,
                        width=layout.column_width,
                        height=column_height,
                    ),
                    document,
                    actor_id,
                ),
                f"Frame {column.title}",
            )
            if frame_id is None:
                continue

            inner_x = column_x + layout.frame_pad
            inner_y = column_y + layout.frame_title_offset
            for row, card in enumerate(column.cards):
                collector.record(
                    create_sticky_note(
                        CreateStickyNoteInput(
                            text=card.text,
                            x=inner_x,
                            y=inner_y + row * (layout.sticky_size + layout.gap),
                            color=card.color or column_color,
                        ),
                        document,
                        actor_id,
                    ),
                    f"Card in {column.title}",
                )

    total_cards = sum(len(column.cards) for column in plan.columns)
    log_with_context(
        logger,
        logging.INFO,
        f"{__name__}:render_column_board - Rendered {board_label}",
        columns=num_columns,
        cards=total_cards,
        objects=len(collector.created_ids),
        errors=len(collector.errors),
    )
    return collector.finish(
        f'Created {board_label} "{plan.title}" with {num_columns} columns and {total_cards} cards',
        board_label[0].upper() + board_label[1:],
    )
