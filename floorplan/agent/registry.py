"""Command registry — stores and resolves the commands an agent may invoke."""

from __future__ import annotations

from floorplan.agent.base import AgentCommand


class CommandRegistry:
    """
    Central registry for all agent commands.

    Commands are registered at startup. During a conversation the bridge
    resolves each invocation's name here; names that are not registered
    are rejected.
    """

    def __init__(self) -> None:
        self._commands: dict[str, AgentCommand] = {}

    def register(self, command: AgentCommand) -> None:
        """Register an agent command."""
        self._commands[command.get_name()] = command

    def unregister(self, name: str) -> None:
        """Remove a command from the registry."""
        self._commands.pop(name, None)

    def get_command(self, name: str) -> AgentCommand | None:
        return self._commands.get(name)

    def list_commands(self) -> list[AgentCommand]:
        """Return all registered commands, in registration order."""
        return list(self._commands.values())

    def describe(self) -> list[dict]:
        """Tool descriptors (name, description, JSON schema) for the chat transport."""
        return [
            {
                "name": c.get_name(),
                "description": c.get_description(),
                "parameters": c.arguments.model_json_schema(by_alias=True),
            }
            for c in self._commands.values()
        ]


def create_default_registry() -> CommandRegistry:
    """Create a registry with the full command surface."""
    from floorplan.agent.commands.walls import (
        AddWallCommand, UpdateWallCommand, RemoveWallCommand,
    )
    from floorplan.agent.commands.openings import (
        AddDoorCommand, UpdateDoorCommand, RemoveDoorCommand,
        AddWindowCommand, UpdateWindowCommand, RemoveWindowCommand,
    )
    from floorplan.agent.commands.rooms import (
        AddRoomCommand, UpdateRoomCommand, RemoveRoomCommand,
    )
    from floorplan.agent.commands.furniture import (
        AddFurnitureCommand, MoveFurnitureCommand, RotateFurnitureCommand,
        UpdateFurnitureCommand, RemoveFurnitureCommand,
    )
    from floorplan.agent.commands.document import (
        RemoveSelectedCommand, UndoCommand, RedoCommand, ClearAllCommand,
    )

    registry = CommandRegistry()
    for command in (
        AddWallCommand(), UpdateWallCommand(), RemoveWallCommand(),
        AddDoorCommand(), UpdateDoorCommand(), RemoveDoorCommand(),
        AddWindowCommand(), UpdateWindowCommand(), RemoveWindowCommand(),
        AddRoomCommand(), UpdateRoomCommand(), RemoveRoomCommand(),
        AddFurnitureCommand(), MoveFurnitureCommand(), RotateFurnitureCommand(),
        UpdateFurnitureCommand(), RemoveFurnitureCommand(),
        RemoveSelectedCommand(), UndoCommand(), RedoCommand(), ClearAllCommand(),
    ):
        registry.register(command)
    return registry
