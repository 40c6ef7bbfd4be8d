from .geometry import (
    Point, distance, line_angle, point_at_fraction, snap_value, snap_point,
    project_fraction, distance_to_segment,
)
from .elements import (
    Element, Wall, Door, Window, Room, FurnitureItem,
    Units, RoomType, SwingDirection,
)
from .document import Floorplan, new_id
from .parameters import ElementDefaults, EditorParams
from .catalog import FurnitureSpec, FURNITURE_DIMENSIONS, ROOM_COLORS, get_furniture_spec

__all__ = [
    "Point", "distance", "line_angle", "point_at_fraction", "snap_value", "snap_point",
    "project_fraction", "distance_to_segment",
    "Element", "Wall", "Door", "Window", "Room", "FurnitureItem",
    "Units", "RoomType", "SwingDirection",
    "Floorplan", "new_id",
    "ElementDefaults", "EditorParams",
    "FurnitureSpec", "FURNITURE_DIMENSIONS", "ROOM_COLORS", "get_furniture_spec",
]
