"""
Board object-creation primitives.

Each primitive takes a typed input plus the target document and actor id,
writes at most one object, and reports the outcome as a ToolResult. Failures
are returned, never raised, so callers can aggregate them.

Dependencies: pydantic, diagram_planner.boundary.board.document, diagram_planner.models
System role: Fallible low-level writes used by the diagram renderers
"""

import logging
import time
import uuid

from pydantic import BaseModel, Field

from diagram_planner.boundary.board.document import BoardDocument
from diagram_planner.models.board import (
    DEFAULT_FRAME_HEIGHT,
    DEFAULT_FRAME_WIDTH,
    DEFAULT_STICKY_COLOR,
    DEFAULT_TEXT_FILL,
    DEFAULT_TEXT_FONT_SIZE,
    DEFAULT_TEXT_HEIGHT,
    DEFAULT_TEXT_WIDTH,
    STICKY_SIZE,
    ConnectorCap,
    Connector,
    ConnectorEndpoint,
    Frame,
    SnapPosition,
    StickyNote,
    TextElement,
)
from diagram_planner.models.common import ToolResult

logger = logging.getLogger(__name__)

CONNECTOR_STYLES = ("straight", "curved")


class CreateStickyNoteInput(BaseModel):
    """Input for create_sticky_note."""

    text: str = ""
    x: float
    y: float
    color: str | None = None


class CreateTextInput(BaseModel):
    """Input for create_text."""

    text: str = ""
    x: float
    y: float
    font_size: int | None = Field(default=None, gt=0)
    color: str | None = None


class CreateFrameInput(BaseModel):
    """Input for create_frame."""

    title: str = "Frame"
    x: float
    y: float
    width: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)


class CreateConnectorInput(BaseModel):
    """Input for create_connector."""

    from_id: str
    to_id: str
    style: str = "straight"
    start_cap: ConnectorCap = "none"
    end_cap: ConnectorCap = "none"
    from_snap_to: SnapPosition = "auto"
    to_snap_to: SnapPosition = "auto"


def _now_ms() -> int:
    return int(time.time() * 1000)


def _limit_reached(document: BoardDocument) -> ToolResult | None:
    if len(document) >= document.max_objects:
        return ToolResult.fail(f"Object limit reached ({document.max_objects})")
    return None


def create_sticky_note(
    params: CreateStickyNoteInput,
    document: BoardDocument,
    actor_id: str,
) -> ToolResult:
    """
    Create a fixed-size sticky note.

    Returns:
        ToolResult: data={"id": ...} on success
    """
    limit = _limit_reached(document)
    if limit:
        return limit

    note = StickyNote(
        id=str(uuid.uuid4()),
        x=params.x,
        y=params.y,
        width=STICKY_SIZE,
        height=STICKY_SIZE,
        z_index=len(document),
        last_modified_by=actor_id,
        last_modified_at=_now_ms(),
        text=params.text,
        color=params.color or DEFAULT_STICKY_COLOR,
    )
    document.set(note)
    return ToolResult.ok(
        f'Created sticky note "{note.text}" at ({note.x}, {note.y})',
        {"id": note.id},
    )


def create_text(
    params: CreateTextInput,
    document: BoardDocument,
    actor_id: str,
) -> ToolResult:
    """
    Create a text element.

    Returns:
        ToolResult: data={"id": ...} on success
    """
    limit = _limit_reached(document)
    if limit:
        return limit

    text = TextElement(
        id=str(uuid.uuid4()),
        x=params.x,
        y=params.y,
        width=DEFAULT_TEXT_WIDTH,
        height=DEFAULT_TEXT_HEIGHT,
        z_index=len(document),
        last_modified_by=actor_id,
        last_modified_at=_now_ms(),
        text=params.text,
        font_size=params.font_size or DEFAULT_TEXT_FONT_SIZE,
        fill=params.color or DEFAULT_TEXT_FILL,
    )
    document.set(text)
    return ToolResult.ok(
        f'Created text "{text.text}" at ({text.x}, {text.y})',
        {"id": text.id},
    )


def create_frame(
    params: CreateFrameInput,
    document: BoardDocument,
    actor_id: str,
) -> ToolResult:
    """
    Create a frame. Frames always sit at the bottom of the z-order.

    Returns:
        ToolResult: data={"id": ...} on success
    """
    limit = _limit_reached(document)
    if limit:
        return limit

    frame = Frame(
        id=str(uuid.uuid4()),
        x=params.x,
        y=params.y,
        width=params.width or DEFAULT_FRAME_WIDTH,
        height=params.height or DEFAULT_FRAME_HEIGHT,
        z_index=0,
        last_modified_by=actor_id,
        last_modified_at=_now_ms(),
        title=params.title,
    )
    document.set(frame)
    return ToolResult.ok(
        f'Created frame "{frame.title}" at ({frame.x}, {frame.y})',
        {"id": frame.id},
    )


def create_connector(
    params: CreateConnectorInput,
    document: BoardDocument,
    actor_id: str,
) -> ToolResult:
    """
    Create a connector between two existing objects.

    Returns:
        ToolResult: data={"id": ...} on success; failure when either
            endpoint is missing or the style is unknown
    """
    limit = _limit_reached(document)
    if limit:
        return limit

    if params.from_id not in document:
        return ToolResult.fail(f'Source object "{params.from_id}" not found')
    if params.to_id not in document:
        return ToolResult.fail(f'Target object "{params.to_id}" not found')
    if params.style not in CONNECTOR_STYLES:
        return ToolResult.fail(
            f'Invalid connector style: "{params.style}". Must be "straight" or "curved".'
        )

    connector = Connector(
        id=str(uuid.uuid4()),
        x=0.0,
        y=0.0,
        width=0.0,
        height=0.0,
        z_index=len(document),
        last_modified_by=actor_id,
        last_modified_at=_now_ms(),
        start=ConnectorEndpoint(id=params.from_id, snap_to=params.from_snap_to),
        end=ConnectorEndpoint(id=params.to_id, snap_to=params.to_snap_to),
        style=params.style,
        start_cap=params.start_cap,
        end_cap=params.end_cap,
    )
    document.set(connector)
    return ToolResult.ok(
        f"Created connector from {params.from_id} to {params.to_id}",
        {"id": connector.id},
    )


def get_board_state(document: BoardDocument) -> ToolResult:
    """Return every object on the board as plain dicts."""
    objects = [obj.model_dump() for obj in document.objects()]
    return ToolResult.ok(f"Board has {len(objects)} objects", objects)
