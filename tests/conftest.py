"""Shared fixtures for the floorplan editor tests."""

import pytest

from floorplan.agent.bridge import AgentBridge
from floorplan.core.editor import FloorplanEditor
from floorplan.core.tools import ToolStateMachine
from floorplan.models import EditorParams, Point


@pytest.fixture
def params():
    """Editor defaults: 10 px per inch, 6 inch snap (60 px)."""
    return EditorParams()


@pytest.fixture
def editor(params):
    return FloorplanEditor(params=params)


@pytest.fixture
def tools(editor):
    return ToolStateMachine(editor)


@pytest.fixture
def bridge(editor):
    return AgentBridge(editor)


@pytest.fixture
def wall_with_openings(editor):
    """A 10 ft wall carrying one door and one window."""
    wall_id = editor.add_wall(Point(x=0, y=0), Point(x=120, y=0))
    door_id = editor.add_door(wall_id, 0.25)
    window_id = editor.add_window(wall_id, 0.75)
    return wall_id, door_id, window_id
