"""Command layer — the only sanctioned way to mutate a floorplan.

Each command is applied through `HistoryEngine.record()` exactly once, so
one logical action is one undo step regardless of how many collections it
touches. Commands aimed at ids that do not exist are silent no-ops.
"""

from __future__ import annotations
import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from floorplan.models import (
    Door, EditorParams, Element, ElementDefaults, Floorplan, FurnitureItem,
    Point, Room, RoomType, SwingDirection, Units, Wall, Window, new_id,
)
from floorplan.core.history import HistoryEngine

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Element)


def clamp_position(position: float) -> float:
    return max(0.0, min(1.0, position))


def _patched(element: E, updates: Mapping[str, Any]) -> E:
    """Return a validated copy of `element` with `updates` applied (id kept)."""
    data = element.model_dump()
    data.update({k: v for k, v in updates.items() if k != "id"})
    if "position" in updates and isinstance(element, (Door, Window)):
        data["position"] = clamp_position(float(updates["position"]))
    return type(element).model_validate(data)


def _replace(elements: list[E], element_id: str, updates: Mapping[str, Any]) -> bool:
    for i, el in enumerate(elements):
        if el.id == element_id:
            patched = _patched(el, updates)
            if patched == el:
                return False
            elements[i] = patched
            return True
    return False


def _without(elements: list[E], ids: set[str]) -> list[E]:
    return [el for el in elements if el.id not in ids]


class FloorplanEditor:
    """Applies named edits to the document owned by a HistoryEngine."""

    def __init__(
        self,
        history: HistoryEngine | None = None,
        params: EditorParams | None = None,
        defaults: ElementDefaults | None = None,
    ) -> None:
        self.params = params or EditorParams()
        self.defaults = defaults or ElementDefaults()
        self.history = history or HistoryEngine(
            Floorplan.create(self.params), limit=self.params.history_limit,
        )

    @property
    def document(self) -> Floorplan:
        """Snapshot of the live document."""
        return self.history.present

    @property
    def scale(self) -> float:
        """Canvas pixels per document inch."""
        return self.history.peek(lambda doc: doc.scale)

    # -- History -----------------------------------------------------------

    def undo(self) -> bool:
        return self.history.undo()

    def redo(self) -> bool:
        return self.history.redo()

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    # -- Document ----------------------------------------------------------

    def set_floorplan(self, floorplan: Floorplan) -> bool:
        """Replace the whole document (load/import) as one undo step."""
        replacement = floorplan.model_copy(deep=True)

        def mutate(doc: Floorplan) -> None:
            for field in Floorplan.model_fields:
                setattr(doc, field, getattr(replacement, field))

        return self.history.record(mutate)

    def reset_floorplan(self) -> bool:
        logger.info("Resetting floorplan")
        return self.set_floorplan(Floorplan.create(self.params))

    def set_name(self, name: str) -> None:
        # Renaming is not an undoable edit
        self.history.amend(lambda doc: setattr(doc, "name", name))

    def set_units(self, units: Units | str) -> bool:
        def mutate(doc: Floorplan) -> None:
            doc.units = Units(units)

        return self.history.record(mutate)

    def set_background_image(self, image: str | None) -> bool:
        def mutate(doc: Floorplan) -> None:
            doc.background_image = image

        return self.history.record(mutate)

    # -- Walls -------------------------------------------------------------

    def add_wall(self, start: Point, end: Point, thickness: float | None = None) -> str:
        wall = Wall(
            id=new_id("wall"),
            start=start,
            end=end,
            thickness=self.defaults.wall_thickness if thickness is None else thickness,
        )
        self.history.record(lambda doc: doc.walls.append(wall))
        logger.debug("Added wall %s (%.1f in)", wall.id, wall.length)
        return wall.id

    def update_wall(self, wall_id: str, updates: Mapping[str, Any]) -> bool:
        return self.history.record(lambda doc: _replace(doc.walls, wall_id, updates))

    def remove_wall(self, wall_id: str) -> bool:
        """Remove a wall and, in the same step, every door/window on it."""
        def mutate(doc: Floorplan) -> bool:
            if doc.get_wall(wall_id) is None:
                return False
            doc.walls = _without(doc.walls, {wall_id})
            doc.doors = [d for d in doc.doors if d.wall_id != wall_id]
            doc.windows = [w for w in doc.windows if w.wall_id != wall_id]
            return True

        return self.history.record(mutate)

    # -- Doors -------------------------------------------------------------

    def add_door(
        self,
        wall_id: str,
        position: float,
        width: float | None = None,
        swing_direction: SwingDirection | str = SwingDirection.LEFT,
        swing_inward: bool = True,
    ) -> str:
        door = Door(
            id=new_id("door"),
            wall_id=wall_id,
            position=clamp_position(position),
            width=self.defaults.door_width if width is None else width,
            swing_direction=SwingDirection(swing_direction),
            swing_inward=swing_inward,
        )
        self.history.record(lambda doc: doc.doors.append(door))
        return door.id

    def update_door(self, door_id: str, updates: Mapping[str, Any]) -> bool:
        return self.history.record(lambda doc: _replace(doc.doors, door_id, updates))

    def remove_door(self, door_id: str) -> bool:
        return self._remove(door_id)

    # -- Windows -----------------------------------------------------------

    def add_window(
        self,
        wall_id: str,
        position: float,
        width: float | None = None,
        height: float | None = None,
    ) -> str:
        window = Window(
            id=new_id("window"),
            wall_id=wall_id,
            position=clamp_position(position),
            width=self.defaults.window_width if width is None else width,
            height=self.defaults.window_height if height is None else height,
        )
        self.history.record(lambda doc: doc.windows.append(window))
        return window.id

    def update_window(self, window_id: str, updates: Mapping[str, Any]) -> bool:
        return self.history.record(lambda doc: _replace(doc.windows, window_id, updates))

    def remove_window(self, window_id: str) -> bool:
        return self._remove(window_id)

    # -- Rooms -------------------------------------------------------------

    def add_room(
        self,
        name: str,
        type: RoomType | str,
        wall_ids: Iterable[str],
        color: str | None = None,
    ) -> str:
        room = Room(
            id=new_id("room"),
            name=name,
            type=RoomType(type),
            wall_ids=list(wall_ids),
            color=color,
        )
        self.history.record(lambda doc: doc.rooms.append(room))
        return room.id

    def update_room(self, room_id: str, updates: Mapping[str, Any]) -> bool:
        return self.history.record(lambda doc: _replace(doc.rooms, room_id, updates))

    def remove_room(self, room_id: str) -> bool:
        return self._remove(room_id)

    # -- Furniture ---------------------------------------------------------

    def add_furniture(
        self,
        type: str,
        position: Point,
        width: float,
        height: float,
        rotation: float = 0.0,
        label: str | None = None,
    ) -> str:
        item = FurnitureItem(
            id=new_id("furniture"),
            type=type,
            position=position,
            rotation=rotation,
            width=width,
            height=height,
            label=label,
        )
        self.history.record(lambda doc: doc.furniture.append(item))
        return item.id

    def update_furniture(self, item_id: str, updates: Mapping[str, Any]) -> bool:
        return self.history.record(lambda doc: _replace(doc.furniture, item_id, updates))

    def remove_furniture(self, item_id: str) -> bool:
        return self._remove(item_id)

    # -- Bulk --------------------------------------------------------------

    def remove_selected(self, ids: Iterable[str]) -> bool:
        """Remove every matching element across all collections as one step."""
        return self._remove(*ids)

    def _remove(self, *element_ids: str) -> bool:
        ids = set(element_ids)

        def mutate(doc: Floorplan) -> bool:
            if not ids.intersection(doc.all_ids()):
                return False
            removed_walls = {w.id for w in doc.walls if w.id in ids}
            doc.walls = _without(doc.walls, ids)
            doc.doors = [
                d for d in doc.doors
                if d.id not in ids and d.wall_id not in removed_walls
            ]
            doc.windows = [
                w for w in doc.windows
                if w.id not in ids and w.wall_id not in removed_walls
            ]
            doc.rooms = _without(doc.rooms, ids)
            doc.furniture = _without(doc.furniture, ids)
            return True

        return self.history.record(mutate)
