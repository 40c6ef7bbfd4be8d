"""API request/response schemas."""

from __future__ import annotations
from typing import Any
from pydantic import BaseModel

from floorplan.agent.bridge import InvocationResult
from floorplan.agent.stream import InvocationRequest
from floorplan.core.tools import GestureOutcome, Preview, Tool, ToolPresentation
from floorplan.models import Floorplan


class InvocationInput(BaseModel):
    """Invocation as sent by the chat client."""
    invocation_id: str | None = None
    name: str
    arguments: dict[str, Any] = {}

    def to_request(self) -> InvocationRequest:
        return InvocationRequest(
            invocation_id=self.invocation_id, name=self.name, arguments=self.arguments,
        )


class InvocationBatch(BaseModel):
    invocations: list[InvocationInput]


class InvocationBatchResponse(BaseModel):
    results: list[InvocationResult]
    floorplan: Floorplan


class ChunkRequest(BaseModel):
    """One piece of streamed assistant text."""
    chunk: str


class ChunkResponse(BaseModel):
    results: list[InvocationResult]
    text: str  # Prose so far, payloads stripped


class SessionResponse(BaseModel):
    session_id: str


class HistoryResponse(BaseModel):
    can_undo: bool
    can_redo: bool
    past: int
    future: int


class ToolRequest(BaseModel):
    tool: Tool


class ToolResponse(BaseModel):
    tool: Tool
    presentation: ToolPresentation


class GestureResponse(BaseModel):
    outcome: GestureOutcome
    state: str
    preview: Preview | None = None


class FurnitureTypeInfo(BaseModel):
    type: str
    label: str
    width: float
    height: float


class ContextResponse(BaseModel):
    context: str
