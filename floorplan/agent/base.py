"""Abstract base class for all agent commands.

Every command an external agent may invoke implements this interface.
Commands are:
- Declarative: each names itself and declares a pydantic argument model
- Guarded: each may reject arguments that are well-typed but unusable
- Thin: execution always delegates to the FloorplanEditor command layer
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from floorplan.core.editor import FloorplanEditor
from floorplan.models import Floorplan


class CommandArguments(BaseModel):
    """Base argument record; agents send camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NoArguments(CommandArguments):
    pass


class AgentCommand(ABC):
    """
    Base class for all agent commands.

    The bridge looks the command up by name, validates the raw arguments
    against `arguments`, asks `check()` for a rejection reason and then
    calls `execute()`.
    """

    arguments: type[CommandArguments] = NoArguments

    @abstractmethod
    def get_name(self) -> str:
        """Tool name as the agent sees it (e.g., 'addWall')."""
        ...

    @abstractmethod
    def get_description(self) -> str:
        ...

    def check(self, document: Floorplan, args: CommandArguments) -> str | None:
        """Return a rejection reason, or None if the invocation may run."""
        return None

    @abstractmethod
    def execute(self, editor: FloorplanEditor, args: CommandArguments) -> str | bool:
        """
        Apply the invocation through the command layer.

        Returns the new element id for creations, otherwise whether the
        document changed.
        """
        ...
