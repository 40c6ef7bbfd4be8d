"""Room labelling commands exposed to the agent."""

from __future__ import annotations

from floorplan.agent.base import AgentCommand, CommandArguments
from floorplan.core.editor import FloorplanEditor
from floorplan.models import Floorplan, RoomType


class AddRoomArgs(CommandArguments):
    name: str
    type: RoomType
    wall_ids: list[str] = []
    color: str | None = None


class UpdateRoomArgs(CommandArguments):
    room_id: str
    name: str | None = None
    type: RoomType | None = None
    wall_ids: list[str] | None = None
    color: str | None = None


class RemoveRoomArgs(CommandArguments):
    room_id: str


class AddRoomCommand(AgentCommand):
    arguments = AddRoomArgs

    def get_name(self) -> str:
        return "addRoom"

    def get_description(self) -> str:
        return "Label a set of walls as a room"

    def execute(self, editor: FloorplanEditor, args: AddRoomArgs) -> str:
        return editor.add_room(args.name, args.type, args.wall_ids, color=args.color)


class UpdateRoomCommand(AgentCommand):
    arguments = UpdateRoomArgs

    def get_name(self) -> str:
        return "updateRoom"

    def get_description(self) -> str:
        return "Rename a room, change its type, colour or walls"

    def check(self, document: Floorplan, args: UpdateRoomArgs) -> str | None:
        if document.get_room(args.room_id) is None:
            return f"No room with id {args.room_id}"
        return None

    def execute(self, editor: FloorplanEditor, args: UpdateRoomArgs) -> bool:
        updates = args.model_dump(exclude_none=True, exclude={"room_id"})
        return editor.update_room(args.room_id, updates)


class RemoveRoomCommand(AgentCommand):
    arguments = RemoveRoomArgs

    def get_name(self) -> str:
        return "removeRoom"

    def get_description(self) -> str:
        return "Remove a room label by its ID (its walls stay)"

    def execute(self, editor: FloorplanEditor, args: RemoveRoomArgs) -> bool:
        return editor.remove_room(args.room_id)
