"""Door and window commands exposed to the agent."""

from __future__ import annotations
from pydantic import Field

from floorplan.agent.base import AgentCommand, CommandArguments
from floorplan.core.editor import FloorplanEditor
from floorplan.models import Floorplan, SwingDirection


class AddDoorArgs(CommandArguments):
    wall_id: str
    position: float = Field(ge=0.0, le=1.0)
    width: float | None = Field(default=None, gt=0)
    swing_direction: SwingDirection = SwingDirection.LEFT
    swing_inward: bool = True


class UpdateDoorArgs(CommandArguments):
    door_id: str
    position: float | None = Field(default=None, ge=0.0, le=1.0)
    width: float | None = Field(default=None, gt=0)
    swing_direction: SwingDirection | None = None
    swing_inward: bool | None = None


class RemoveDoorArgs(CommandArguments):
    door_id: str


class AddWindowArgs(CommandArguments):
    wall_id: str
    position: float = Field(ge=0.0, le=1.0)
    width: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)


class UpdateWindowArgs(CommandArguments):
    window_id: str
    position: float | None = Field(default=None, ge=0.0, le=1.0)
    width: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)


class RemoveWindowArgs(CommandArguments):
    window_id: str


def _require_wall(document: Floorplan, wall_id: str) -> str | None:
    if document.get_wall(wall_id) is None:
        return f"No wall with id {wall_id}"
    return None


def _patch(args: CommandArguments, *skip: str) -> dict:
    return args.model_dump(exclude_none=True, exclude=set(skip))


class AddDoorCommand(AgentCommand):
    arguments = AddDoorArgs

    def get_name(self) -> str:
        return "addDoor"

    def get_description(self) -> str:
        return "Add a door to an existing wall"

    def check(self, document: Floorplan, args: AddDoorArgs) -> str | None:
        return _require_wall(document, args.wall_id)

    def execute(self, editor: FloorplanEditor, args: AddDoorArgs) -> str:
        return editor.add_door(
            args.wall_id, args.position, args.width,
            swing_direction=args.swing_direction,
            swing_inward=args.swing_inward,
        )


class UpdateDoorCommand(AgentCommand):
    arguments = UpdateDoorArgs

    def get_name(self) -> str:
        return "updateDoor"

    def get_description(self) -> str:
        return "Change a door's position, width or swing"

    def check(self, document: Floorplan, args: UpdateDoorArgs) -> str | None:
        if document.get_door(args.door_id) is None:
            return f"No door with id {args.door_id}"
        return None

    def execute(self, editor: FloorplanEditor, args: UpdateDoorArgs) -> bool:
        return editor.update_door(args.door_id, _patch(args, "door_id"))


class RemoveDoorCommand(AgentCommand):
    arguments = RemoveDoorArgs

    def get_name(self) -> str:
        return "removeDoor"

    def get_description(self) -> str:
        return "Remove a door by its ID"

    def execute(self, editor: FloorplanEditor, args: RemoveDoorArgs) -> bool:
        return editor.remove_door(args.door_id)


class AddWindowCommand(AgentCommand):
    arguments = AddWindowArgs

    def get_name(self) -> str:
        return "addWindow"

    def get_description(self) -> str:
        return "Add a window to an existing wall"

    def check(self, document: Floorplan, args: AddWindowArgs) -> str | None:
        return _require_wall(document, args.wall_id)

    def execute(self, editor: FloorplanEditor, args: AddWindowArgs) -> str:
        return editor.add_window(args.wall_id, args.position, args.width, args.height)


class UpdateWindowCommand(AgentCommand):
    arguments = UpdateWindowArgs

    def get_name(self) -> str:
        return "updateWindow"

    def get_description(self) -> str:
        return "Change a window's position or size"

    def check(self, document: Floorplan, args: UpdateWindowArgs) -> str | None:
        if document.get_window(args.window_id) is None:
            return f"No window with id {args.window_id}"
        return None

    def execute(self, editor: FloorplanEditor, args: UpdateWindowArgs) -> bool:
        return editor.update_window(args.window_id, _patch(args, "window_id"))


class RemoveWindowCommand(AgentCommand):
    arguments = RemoveWindowArgs

    def get_name(self) -> str:
        return "removeWindow"

    def get_description(self) -> str:
        return "Remove a window by its ID"

    def execute(self, editor: FloorplanEditor, args: RemoveWindowArgs) -> bool:
        return editor.remove_window(args.window_id)
