"""Floorplan aggregate — the document the editor operates on."""

from __future__ import annotations
import uuid
from pydantic import BaseModel, ConfigDict, Field

from .elements import Door, Element, FurnitureItem, Room, Units, Wall, Window
from .parameters import EditorParams


def new_id(kind: str) -> str:
    """Opaque, never-reused identifier for a new element."""
    return f"{kind}-{uuid.uuid4().hex}"


class Floorplan(BaseModel):
    """
    Aggregate root holding every element of a plan.

    Only the command layer mutates a Floorplan; everything else reads
    snapshots through the query helpers below.
    """
    model_config = ConfigDict(extra="forbid")

    id: str
    name: str = "Untitled Floorplan"
    units: Units = Units.IMPERIAL
    scale: float = Field(default=10.0, gt=0)      # Pixels per inch at 100% zoom
    grid_size: float = Field(default=12.0, gt=0)  # Inches
    walls: list[Wall] = []
    doors: list[Door] = []
    windows: list[Window] = []
    rooms: list[Room] = []
    furniture: list[FurnitureItem] = []
    background_image: str | None = None

    @classmethod
    def create(cls, params: EditorParams | None = None) -> Floorplan:
        """Empty document with editor defaults."""
        if params is None:
            params = EditorParams()
        return cls(id=new_id("floorplan"), scale=params.scale, grid_size=params.grid_size)

    def get_wall(self, wall_id: str) -> Wall | None:
        return _find(self.walls, wall_id)

    def get_door(self, door_id: str) -> Door | None:
        return _find(self.doors, door_id)

    def get_window(self, window_id: str) -> Window | None:
        return _find(self.windows, window_id)

    def get_room(self, room_id: str) -> Room | None:
        return _find(self.rooms, room_id)

    def get_furniture(self, item_id: str) -> FurnitureItem | None:
        return _find(self.furniture, item_id)

    def find_element(self, element_id: str) -> Element | None:
        """Look an id up across all five collections."""
        for collection in self.collections():
            found = _find(collection, element_id)
            if found is not None:
                return found
        return None

    def openings_on_wall(self, wall_id: str) -> list[Door | Window]:
        doors = [d for d in self.doors if d.wall_id == wall_id]
        windows = [w for w in self.windows if w.wall_id == wall_id]
        return [*doors, *windows]

    def collections(self) -> list[list]:
        return [self.walls, self.doors, self.windows, self.rooms, self.furniture]

    def all_ids(self) -> list[str]:
        return [el.id for collection in self.collections() for el in collection]

    def element_count(self) -> int:
        return sum(len(c) for c in self.collections())


def _find(elements: list, element_id: str):
    for el in elements:
        if el.id == element_id:
            return el
    return None
