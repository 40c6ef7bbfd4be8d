"""Architectural element models — walls, openings, rooms, furniture."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

from .geometry import Point


class Units(str, Enum):
    IMPERIAL = "imperial"
    METRIC = "metric"


class RoomType(str, Enum):
    BEDROOM = "bedroom"
    BATHROOM = "bathroom"
    KITCHEN = "kitchen"
    LIVING = "living"
    DINING = "dining"
    OFFICE = "office"
    HALLWAY = "hallway"
    CLOSET = "closet"
    LAUNDRY = "laundry"
    GARAGE = "garage"
    OTHER = "other"


class SwingDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class Element(BaseModel):
    """Base for every identified element; unknown fields are rejected."""
    model_config = ConfigDict(extra="forbid")

    id: str


class Wall(Element):
    """A wall segment defined by two plan endpoints."""
    start: Point
    end: Point
    thickness: float = Field(default=6.0, gt=0)

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


class Door(Element):
    """A door hosted on a wall, positioned as a fraction along start→end."""
    wall_id: str
    position: float = Field(ge=0.0, le=1.0)
    width: float = Field(default=32.0, gt=0)
    swing_direction: SwingDirection = SwingDirection.LEFT
    swing_inward: bool = True


class Window(Element):
    """A window hosted on a wall, positioned as a fraction along start→end."""
    wall_id: str
    position: float = Field(ge=0.0, le=1.0)
    width: float = Field(default=36.0, gt=0)
    height: float = Field(default=48.0, gt=0)


class Room(Element):
    """A labelled group of walls. Wall ids are soft references."""
    name: str
    type: RoomType = RoomType.OTHER
    wall_ids: list[str] = []
    color: str | None = None

    @property
    def fill_color(self) -> str:
        from .catalog import ROOM_COLORS
        return self.color or ROOM_COLORS[self.type]


class FurnitureItem(Element):
    """A furniture footprint placed on the plan."""
    type: str
    position: Point
    rotation: float = 0.0  # Degrees
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    label: str | None = None
