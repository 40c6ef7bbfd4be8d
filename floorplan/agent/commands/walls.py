"""Wall commands exposed to the agent."""

from __future__ import annotations
from pydantic import Field

from floorplan.agent.base import AgentCommand, CommandArguments
from floorplan.core.editor import FloorplanEditor
from floorplan.models import Floorplan, Point, Wall


class AddWallArgs(CommandArguments):
    start_x: float
    start_y: float
    end_x: float
    end_y: float
    thickness: float | None = Field(default=None, gt=0)


class UpdateWallArgs(CommandArguments):
    wall_id: str
    start_x: float | None = None
    start_y: float | None = None
    end_x: float | None = None
    end_y: float | None = None
    thickness: float | None = Field(default=None, gt=0)


class RemoveWallArgs(CommandArguments):
    wall_id: str


class AddWallCommand(AgentCommand):
    arguments = AddWallArgs

    def get_name(self) -> str:
        return "addWall"

    def get_description(self) -> str:
        return "Add a wall to the floorplan. Coordinates are in inches from the top-left origin."

    def check(self, document: Floorplan, args: AddWallArgs) -> str | None:
        if args.start_x == args.end_x and args.start_y == args.end_y:
            return "Wall start and end points coincide"
        return None

    def execute(self, editor: FloorplanEditor, args: AddWallArgs) -> str:
        return editor.add_wall(
            Point(x=args.start_x, y=args.start_y),
            Point(x=args.end_x, y=args.end_y),
            args.thickness,
        )


def _merged_endpoints(wall: Wall, args: UpdateWallArgs) -> tuple[Point, Point]:
    """The wall's endpoints with any coordinates from the patch applied."""
    start = Point(
        x=wall.start.x if args.start_x is None else args.start_x,
        y=wall.start.y if args.start_y is None else args.start_y,
    )
    end = Point(
        x=wall.end.x if args.end_x is None else args.end_x,
        y=wall.end.y if args.end_y is None else args.end_y,
    )
    return start, end


class UpdateWallCommand(AgentCommand):
    arguments = UpdateWallArgs

    def get_name(self) -> str:
        return "updateWall"

    def get_description(self) -> str:
        return "Move a wall's endpoints or change its thickness"

    def check(self, document: Floorplan, args: UpdateWallArgs) -> str | None:
        wall = document.get_wall(args.wall_id)
        if wall is None:
            return f"No wall with id {args.wall_id}"
        start, end = _merged_endpoints(wall, args)
        if start == end:
            return "Wall start and end points coincide"
        return None

    def execute(self, editor: FloorplanEditor, args: UpdateWallArgs) -> bool:
        wall = editor.document.get_wall(args.wall_id)
        if wall is None:
            return False
        start, end = _merged_endpoints(wall, args)
        updates: dict = {"start": start, "end": end}
        if args.thickness is not None:
            updates["thickness"] = args.thickness
        return editor.update_wall(args.wall_id, updates)


class RemoveWallCommand(AgentCommand):
    arguments = RemoveWallArgs

    def get_name(self) -> str:
        return "removeWall"

    def get_description(self) -> str:
        return "Remove a wall by its ID, together with its doors and windows"

    def execute(self, editor: FloorplanEditor, args: RemoveWallArgs) -> bool:
        return editor.remove_wall(args.wall_id)
