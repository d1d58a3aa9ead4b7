"""
Board object models.

Typed shapes of the objects stored in a board document. Every object
carries its geometry, z-order and the actor id that last modified it.

Dependencies: pydantic
System role: Board document contents
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

DEFAULT_STICKY_COLOR = "#FFEB3B"
STICKY_SIZE = 200.0

DEFAULT_FRAME_WIDTH = 400.0
DEFAULT_FRAME_HEIGHT = 300.0
DEFAULT_FRAME_FILL = "#F5F5F5"

DEFAULT_TEXT_WIDTH = 200.0
DEFAULT_TEXT_HEIGHT = 50.0
DEFAULT_TEXT_FONT_SIZE = 16
DEFAULT_TEXT_FILL = "#333333"

DEFAULT_CONNECTOR_STROKE = "#333333"
DEFAULT_STROKE_WIDTH = 2

SnapPosition = Literal["auto", "top", "bottom", "left", "right"]
ConnectorStyle = Literal["straight", "curved"]
ConnectorCap = Literal["none", "arrow"]


class BaseBoardObject(BaseModel):
    """Fields shared by every board object."""

    id: str = Field(description="Object identifier (uuid4)")
    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0
    z_index: int = Field(default=0, description="Stacking order")
    last_modified_by: str = Field(description="Actor id stamped on the last change")
    last_modified_at: int = Field(description="Epoch milliseconds of the last change")
    parent_id: str | None = None


class StickyNote(BaseBoardObject):
    """Fixed-size sticky note."""

    type: Literal["sticky"] = "sticky"
    text: str = ""
    color: str = DEFAULT_STICKY_COLOR


class TextElement(BaseBoardObject):
    """Free-standing text."""

    type: Literal["text"] = "text"
    text: str = ""
    font_size: int = DEFAULT_TEXT_FONT_SIZE
    fill: str = DEFAULT_TEXT_FILL


class Frame(BaseBoardObject):
    """Titled container drawn behind its contents."""

    type: Literal["frame"] = "frame"
    title: str = "Frame"
    fill: str = DEFAULT_FRAME_FILL
    children_ids: list[str] = Field(default_factory=list)


class ConnectorEndpoint(BaseModel):
    """One end of a connector."""

    id: str
    snap_to: SnapPosition = "auto"


class Connector(BaseBoardObject):
    """Line between two objects that follows them when they move."""

    type: Literal["connector"] = "connector"
    start: ConnectorEndpoint
    end: ConnectorEndpoint
    stroke: str = DEFAULT_CONNECTOR_STROKE
    stroke_width: int = DEFAULT_STROKE_WIDTH
    style: ConnectorStyle = "straight"
    start_cap: ConnectorCap = "none"
    end_cap: ConnectorCap = "none"


BoardObject = Annotated[
    StickyNote | TextElement | Frame | Connector,
    Field(discriminator="type"),
]
