"""Whole-document commands: bulk removal, history navigation, clearing."""

from __future__ import annotations

from floorplan.agent.base import AgentCommand, CommandArguments, NoArguments
from floorplan.core.editor import FloorplanEditor
from floorplan.models import Floorplan


class RemoveSelectedArgs(CommandArguments):
    ids: list[str]


class ClearAllArgs(CommandArguments):
    confirm: bool = False


class RemoveSelectedCommand(AgentCommand):
    arguments = RemoveSelectedArgs

    def get_name(self) -> str:
        return "removeSelected"

    def get_description(self) -> str:
        return "Remove several elements of any kind at once"

    def execute(self, editor: FloorplanEditor, args: RemoveSelectedArgs) -> bool:
        return editor.remove_selected(args.ids)


class UndoCommand(AgentCommand):
    arguments = NoArguments

    def get_name(self) -> str:
        return "undo"

    def get_description(self) -> str:
        return "Undo the last change"

    def execute(self, editor: FloorplanEditor, args: NoArguments) -> bool:
        return editor.undo()


class RedoCommand(AgentCommand):
    arguments = NoArguments

    def get_name(self) -> str:
        return "redo"

    def get_description(self) -> str:
        return "Redo the last undone change"

    def execute(self, editor: FloorplanEditor, args: NoArguments) -> bool:
        return editor.redo()


class ClearAllCommand(AgentCommand):
    arguments = ClearAllArgs

    def get_name(self) -> str:
        return "clearAll"

    def get_description(self) -> str:
        return "Clear the entire floorplan (use with caution, requires confirm: true)"

    def check(self, document: Floorplan, args: ClearAllArgs) -> str | None:
        if not args.confirm:
            return "clearAll requires confirm: true"
        return None

    def execute(self, editor: FloorplanEditor, args: ClearAllArgs) -> bool:
        return editor.reset_floorplan()
