"""Tool state machine: wall drawing gestures, snapping, placement tools."""

import pytest

from floorplan.core.tools import (
    GestureEvent, GestureKind, GestureState, Tool, presentation_for,
)
from floorplan.models import Point


def P(x, y):
    return Point(x=x, y=y)


class TestWallTool:
    def test_drag_commits_one_wall_in_inches(self, editor, tools):
        tools.set_active_tool(Tool.WALL)

        assert tools.press(P(3, 2)).action == "preview"
        assert tools.state == GestureState.DRAWING
        assert tools.preview.start == P(0, 0)

        tools.move(P(1195, 4))
        assert tools.preview.end == P(1200, 0)
        assert editor.history.past_length == 0

        outcome = tools.release(P(1201, 1))
        assert outcome.action == "committed"
        assert tools.state == GestureState.IDLE
        assert tools.preview is None

        wall = editor.document.get_wall(outcome.element_id)
        assert (wall.start.x, wall.start.y) == (0, 0)
        assert (wall.end.x, wall.end.y) == pytest.approx((120, 0))
        assert editor.history.past_length == 1

    def test_short_drag_is_discarded(self, editor, tools):
        tools.set_active_tool("wall")
        tools.snap_to_grid = False
        tools.press(P(0, 0))
        outcome = tools.release(P(8, 0))
        assert outcome.action == "discarded"
        assert editor.document.walls == []
        assert not editor.can_undo()

    def test_threshold_is_exclusive(self, editor, tools):
        tools.set_active_tool("wall")
        tools.snap_to_grid = False
        tools.press(P(0, 0))
        assert tools.release(P(10, 0)).action == "discarded"
        tools.press(P(0, 0))
        assert tools.release(P(10.5, 0)).action == "committed"

    def test_snapping_collapses_tiny_drag(self, editor, tools):
        tools.set_active_tool("wall")
        tools.press(P(2, 2))
        assert tools.release(P(25, 20)).action == "discarded"

    def test_switching_tool_mid_drag_cancels(self, editor, tools):
        tools.set_active_tool(Tool.WALL)
        tools.press(P(0, 0))
        tools.move(P(600, 0))

        tools.set_active_tool(Tool.SELECT)

        assert tools.state == GestureState.IDLE
        assert tools.preview is None
        assert tools.release(P(600, 0)).action == "none"
        assert editor.document.walls == []

    def test_snapping_can_be_disabled(self, tools):
        tools.set_active_tool(Tool.WALL)
        assert tools.toggle_snap() is False
        tools.press(P(3, 2))
        assert tools.preview.start == P(3, 2)

    def test_move_and_release_without_press_do_nothing(self, editor, tools):
        tools.set_active_tool(Tool.WALL)
        assert tools.move(P(10, 10)).action == "none"
        assert tools.release(P(10, 10)).action == "none"
        assert editor.document.walls == []

    def test_handle_dispatches_events(self, editor, tools):
        tools.set_active_tool(Tool.WALL)
        tools.handle(GestureEvent(kind=GestureKind.PRESS, x=0, y=0))
        tools.handle(GestureEvent(kind=GestureKind.MOVE, x=0, y=500))
        outcome = tools.handle(GestureEvent(kind=GestureKind.RELEASE, x=0, y=960))
        assert outcome.action == "committed"
        assert editor.document.walls[0].length == pytest.approx(96)


class TestOtherTools:
    def test_measure_never_mutates(self, editor, tools):
        tools.set_active_tool(Tool.MEASURE)
        tools.press(P(0, 0))
        outcome = tools.release(P(600, 0))
        assert outcome.action == "measured"
        assert outcome.measurement == pytest.approx(60.0)
        assert not editor.can_undo()

    def test_furniture_placement_uses_catalog(self, editor, tools):
        tools.set_active_tool(Tool.FURNITURE)
        tools.set_selected_furniture_type("chair")

        outcome = tools.press(P(205, 95))

        assert outcome.action == "placed"
        item = editor.document.get_furniture(outcome.element_id)
        assert (item.position.x, item.position.y) == pytest.approx((18, 12))
        assert (item.width, item.height) == (20, 20)
        assert item.label == "Chair"

    def test_furniture_tool_without_type_is_noop(self, editor, tools):
        tools.set_active_tool(Tool.FURNITURE)
        assert tools.press(P(100, 100)).action == "none"
        assert editor.document.furniture == []

    def test_door_tool_places_on_nearest_wall(self, editor, tools):
        wall_id = editor.add_wall(P(0, 0), P(120, 0))
        tools.set_active_tool(Tool.DOOR)

        outcome = tools.press(P(300, 20))

        door = editor.document.get_door(outcome.element_id)
        assert door.wall_id == wall_id
        assert door.position == pytest.approx(0.25)

    def test_window_tool_misses_empty_space(self, editor, tools):
        editor.add_wall(P(0, 0), P(120, 0))
        tools.set_active_tool(Tool.WINDOW)
        assert tools.press(P(300, 500)).action == "none"
        assert editor.document.windows == []


class TestPresentationAndSelection:
    def test_presentation_table(self):
        assert presentation_for("select").selectable is True
        assert presentation_for("pan").cursor == "grab"
        for tool in ("pan", "wall", "door", "window", "furniture", "measure"):
            assert presentation_for(tool).selectable is False
        assert presentation_for(Tool.WALL).cursor == "crosshair"

    def test_unknown_tool_raises(self, tools):
        with pytest.raises(ValueError):
            tools.set_active_tool("lasso")

    def test_delete_selection_is_one_step(self, editor, tools):
        a = editor.add_furniture("chair", P(0, 0), 20, 20)
        b = editor.add_wall(P(0, 0), P(50, 0))
        tools.set_selected_ids([a, b, a])
        assert tools.selected_ids == [a, b]
        before = editor.history.past_length

        assert tools.delete_selection()

        assert editor.history.past_length == before + 1
        assert editor.document.element_count() == 0
        assert tools.selected_ids == []

    def test_selection_helpers(self, tools):
        tools.add_to_selection("x")
        tools.add_to_selection("x")
        tools.add_to_selection("y")
        tools.remove_from_selection("x")
        assert tools.selected_ids == ["y"]
        tools.clear_selection()
        assert tools.delete_selection() is False

    def test_zoom_is_clamped(self, tools):
        assert tools.set_zoom(10) == 5
        assert tools.set_zoom(0.01) == 0.1
        assert tools.set_zoom(2) == 2
