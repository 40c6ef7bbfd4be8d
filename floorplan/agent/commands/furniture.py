"""Furniture commands exposed to the agent.

Agents name furniture by catalog type; footprints always come from the
catalog, so an unknown type is rejected rather than guessed.
"""

from __future__ import annotations
from pydantic import Field

from floorplan.agent.base import AgentCommand, CommandArguments
from floorplan.core.editor import FloorplanEditor
from floorplan.models import FURNITURE_DIMENSIONS, Floorplan, Point, get_furniture_spec


class AddFurnitureArgs(CommandArguments):
    type: str
    x: float
    y: float
    rotation: float = 0.0


class MoveFurnitureArgs(CommandArguments):
    furniture_id: str
    x: float
    y: float


class RotateFurnitureArgs(CommandArguments):
    furniture_id: str
    rotation: float


class UpdateFurnitureArgs(CommandArguments):
    furniture_id: str
    x: float | None = None
    y: float | None = None
    rotation: float | None = None
    width: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    label: str | None = None


class RemoveFurnitureArgs(CommandArguments):
    furniture_id: str


def _require_item(document: Floorplan, item_id: str) -> str | None:
    if document.get_furniture(item_id) is None:
        return f"No furniture with id {item_id}"
    return None


class AddFurnitureCommand(AgentCommand):
    arguments = AddFurnitureArgs

    def get_name(self) -> str:
        return "addFurniture"

    def get_description(self) -> str:
        return "Add furniture to the floorplan. Types: " + ", ".join(FURNITURE_DIMENSIONS)

    def check(self, document: Floorplan, args: AddFurnitureArgs) -> str | None:
        if get_furniture_spec(args.type) is None:
            return f"Unknown furniture type: {args.type}"
        return None

    def execute(self, editor: FloorplanEditor, args: AddFurnitureArgs) -> str:
        spec = get_furniture_spec(args.type)
        return editor.add_furniture(
            args.type,
            Point(x=args.x, y=args.y),
            spec.width,
            spec.height,
            rotation=args.rotation,
            label=spec.label,
        )


class MoveFurnitureCommand(AgentCommand):
    arguments = MoveFurnitureArgs

    def get_name(self) -> str:
        return "moveFurniture"

    def get_description(self) -> str:
        return "Move existing furniture to a new position"

    def check(self, document: Floorplan, args: MoveFurnitureArgs) -> str | None:
        return _require_item(document, args.furniture_id)

    def execute(self, editor: FloorplanEditor, args: MoveFurnitureArgs) -> bool:
        return editor.update_furniture(
            args.furniture_id, {"position": Point(x=args.x, y=args.y)},
        )


class RotateFurnitureCommand(AgentCommand):
    arguments = RotateFurnitureArgs

    def get_name(self) -> str:
        return "rotateFurniture"

    def get_description(self) -> str:
        return "Rotate existing furniture"

    def check(self, document: Floorplan, args: RotateFurnitureArgs) -> str | None:
        return _require_item(document, args.furniture_id)

    def execute(self, editor: FloorplanEditor, args: RotateFurnitureArgs) -> bool:
        return editor.update_furniture(args.furniture_id, {"rotation": args.rotation})


class UpdateFurnitureCommand(AgentCommand):
    arguments = UpdateFurnitureArgs

    def get_name(self) -> str:
        return "updateFurniture"

    def get_description(self) -> str:
        return "Change furniture position, rotation, size or label"

    def check(self, document: Floorplan, args: UpdateFurnitureArgs) -> str | None:
        return _require_item(document, args.furniture_id)

    def execute(self, editor: FloorplanEditor, args: UpdateFurnitureArgs) -> bool:
        item = editor.document.get_furniture(args.furniture_id)
        if item is None:
            return False
        updates = args.model_dump(exclude_none=True, exclude={"furniture_id", "x", "y"})
        if args.x is not None or args.y is not None:
            updates["position"] = Point(
                x=item.position.x if args.x is None else args.x,
                y=item.position.y if args.y is None else args.y,
            )
        return editor.update_furniture(args.furniture_id, updates)


class RemoveFurnitureCommand(AgentCommand):
    arguments = RemoveFurnitureArgs

    def get_name(self) -> str:
        return "removeFurniture"

    def get_description(self) -> str:
        return "Remove furniture by its ID"

    def execute(self, editor: FloorplanEditor, args: RemoveFurnitureArgs) -> bool:
        return editor.remove_furniture(args.furniture_id)
