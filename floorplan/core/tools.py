"""Tool interaction state machine.

Turns press / move / release pointer gestures, reported in canvas pixel
space by the rendering surface, into single command-layer calls under the
active tool. Exploratory moves only update the preview and never touch
history.
"""

from __future__ import annotations
import logging
from enum import Enum
from pydantic import BaseModel

from floorplan.models import (
    EditorParams, Point, distance_to_segment, get_furniture_spec,
    project_fraction, snap_point,
)
from floorplan.core.editor import FloorplanEditor

logger = logging.getLogger(__name__)


class Tool(str, Enum):
    SELECT = "select"
    PAN = "pan"
    WALL = "wall"
    DOOR = "door"
    WINDOW = "window"
    FURNITURE = "furniture"
    MEASURE = "measure"


class GestureState(str, Enum):
    IDLE = "idle"
    DRAWING = "drawing"


class GestureKind(str, Enum):
    PRESS = "press"
    MOVE = "move"
    RELEASE = "release"


class GestureEvent(BaseModel):
    """Pointer event in canvas pixel coordinates."""
    kind: GestureKind
    x: float
    y: float

    @property
    def point(self) -> Point:
        return Point(x=self.x, y=self.y)


class ToolPresentation(BaseModel):
    """How the rendering surface should behave while a tool is active."""
    cursor: str
    hover_cursor: str
    selectable: bool  # Marquee selection enabled


TOOL_PRESENTATION: dict[Tool, ToolPresentation] = {
    Tool.SELECT: ToolPresentation(cursor="default", hover_cursor="move", selectable=True),
    Tool.PAN: ToolPresentation(cursor="grab", hover_cursor="grab", selectable=False),
    Tool.WALL: ToolPresentation(cursor="crosshair", hover_cursor="crosshair", selectable=False),
    Tool.DOOR: ToolPresentation(cursor="copy", hover_cursor="copy", selectable=False),
    Tool.WINDOW: ToolPresentation(cursor="copy", hover_cursor="copy", selectable=False),
    Tool.FURNITURE: ToolPresentation(cursor="copy", hover_cursor="copy", selectable=False),
    Tool.MEASURE: ToolPresentation(cursor="crosshair", hover_cursor="crosshair", selectable=False),
}

# Tools that run a press-drag-release gesture
DRAG_TOOLS = {Tool.WALL, Tool.MEASURE}


def presentation_for(tool: Tool | str) -> ToolPresentation:
    return TOOL_PRESENTATION[Tool(tool)]


class Preview(BaseModel):
    """Endpoints of the in-progress gesture, canvas pixels."""
    start: Point
    end: Point


class GestureOutcome(BaseModel):
    """What a single gesture event did."""
    action: str = "none"  # none | preview | committed | discarded | measured | placed
    element_id: str | None = None
    measurement: float | None = None  # Inches


class ToolStateMachine:
    """
    Interprets pointer gestures for the active tool.

    Also carries the editor's transient UI state: selection, zoom,
    grid/snap toggles and the furniture type armed for placement.
    """

    def __init__(self, editor: FloorplanEditor, params: EditorParams | None = None) -> None:
        self.editor = editor
        self.params = params or editor.params

        self.active_tool: Tool = Tool.SELECT
        self.state: GestureState = GestureState.IDLE
        self.preview: Preview | None = None

        self.selected_ids: list[str] = []
        self.zoom: float = 1.0
        self.snap_to_grid: bool = self.params.snap_to_grid
        self.show_grid: bool = self.params.show_grid
        self.selected_furniture_type: str | None = None

    # -- Tool & presentation -----------------------------------------------

    def set_active_tool(self, tool: Tool | str) -> None:
        tool = Tool(tool)
        if self.state == GestureState.DRAWING and tool != self.active_tool:
            logger.debug("Tool switched mid-gesture, cancelling")
            self.cancel()
        self.active_tool = tool

    @property
    def presentation(self) -> ToolPresentation:
        return presentation_for(self.active_tool)

    def cancel(self) -> None:
        """Drop any uncommitted gesture; nothing was recorded so nothing to undo."""
        self.state = GestureState.IDLE
        self.preview = None

    # -- Gestures ----------------------------------------------------------

    def handle(self, event: GestureEvent) -> GestureOutcome:
        if event.kind == GestureKind.PRESS:
            return self.press(event.point)
        if event.kind == GestureKind.MOVE:
            return self.move(event.point)
        return self.release(event.point)

    def press(self, point: Point) -> GestureOutcome:
        tool = self.active_tool
        if tool in DRAG_TOOLS:
            start = self.snap(point)
            self.state = GestureState.DRAWING
            self.preview = Preview(start=start, end=start)
            return GestureOutcome(action="preview")
        if tool == Tool.FURNITURE:
            return self._place_furniture(point)
        if tool in (Tool.DOOR, Tool.WINDOW):
            return self._place_opening(point)
        return GestureOutcome()

    def move(self, point: Point) -> GestureOutcome:
        if self.state != GestureState.DRAWING or self.preview is None:
            return GestureOutcome()
        self.preview = Preview(start=self.preview.start, end=self.snap(point))
        return GestureOutcome(action="preview")

    def release(self, point: Point) -> GestureOutcome:
        if self.state != GestureState.DRAWING or self.preview is None:
            return GestureOutcome()

        start = self.preview.start
        end = self.snap(point)
        tool = self.active_tool
        self.cancel()

        length_px = start.distance_to(end)
        scale = self._scale()

        if tool == Tool.MEASURE:
            return GestureOutcome(action="measured", measurement=length_px / scale)

        if length_px <= self.params.min_wall_length:
            logger.debug("Discarding %.1f px wall gesture", length_px)
            return GestureOutcome(action="discarded")

        wall_id = self.editor.add_wall(self.to_document(start), self.to_document(end))
        return GestureOutcome(action="committed", element_id=wall_id)

    def snap(self, point: Point) -> Point:
        """Snap a canvas point per axis when snapping is on."""
        if not self.snap_to_grid:
            return point
        return snap_point(point, self.params.snap_increment * self._scale())

    def to_document(self, point: Point) -> Point:
        """Canvas pixels to document inches."""
        scale = self._scale()
        return Point(x=point.x / scale, y=point.y / scale)

    def _scale(self) -> float:
        return self.editor.scale

    def _place_furniture(self, point: Point) -> GestureOutcome:
        spec = get_furniture_spec(self.selected_furniture_type or "")
        if spec is None:
            return GestureOutcome()
        position = self.to_document(self.snap(point))
        item_id = self.editor.add_furniture(
            self.selected_furniture_type, position, spec.width, spec.height,
            label=spec.label,
        )
        return GestureOutcome(action="placed", element_id=item_id)

    def _place_opening(self, point: Point) -> GestureOutcome:
        target = self.to_document(point)
        doc = self.editor.document

        best = None
        best_distance = float("inf")
        for wall in doc.walls:
            d = distance_to_segment(wall.start, wall.end, target)
            if d <= wall.thickness / 2 + self.params.opening_tolerance and d < best_distance:
                best, best_distance = wall, d
        if best is None:
            return GestureOutcome()

        fraction = project_fraction(best.start, best.end, target)
        if self.active_tool == Tool.DOOR:
            element_id = self.editor.add_door(best.id, fraction)
        else:
            element_id = self.editor.add_window(best.id, fraction)
        return GestureOutcome(action="placed", element_id=element_id)

    # -- Selection & view --------------------------------------------------

    def set_selected_ids(self, ids: list[str]) -> None:
        self.selected_ids = list(dict.fromkeys(ids))

    def add_to_selection(self, element_id: str) -> None:
        if element_id not in self.selected_ids:
            self.selected_ids.append(element_id)

    def remove_from_selection(self, element_id: str) -> None:
        self.selected_ids = [i for i in self.selected_ids if i != element_id]

    def clear_selection(self) -> None:
        self.selected_ids = []

    def delete_selection(self) -> bool:
        """Remove everything selected as a single undo step."""
        if not self.selected_ids:
            return False
        removed = self.editor.remove_selected(self.selected_ids)
        self.clear_selection()
        return removed

    def set_zoom(self, zoom: float) -> float:
        self.zoom = max(self.params.min_zoom, min(self.params.max_zoom, zoom))
        return self.zoom

    def toggle_snap(self) -> bool:
        self.snap_to_grid = not self.snap_to_grid
        return self.snap_to_grid

    def toggle_grid(self) -> bool:
        self.show_grid = not self.show_grid
        return self.show_grid

    def set_selected_furniture_type(self, furniture_type: str | None) -> None:
        self.selected_furniture_type = furniture_type
