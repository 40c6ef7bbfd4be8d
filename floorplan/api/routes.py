"""FastAPI route definitions."""

from __future__ import annotations
from typing import Any

from fastapi import APIRouter, Body, HTTPException

from floorplan.models import FURNITURE_DIMENSIONS, Floorplan
from floorplan.core.tools import GestureEvent
from floorplan.services.editor_service import EditorService
from floorplan.api.schemas import (
    ChunkRequest, ChunkResponse, ContextResponse, FurnitureTypeInfo,
    GestureResponse, HistoryResponse, InvocationBatch, InvocationBatchResponse,
    SessionResponse, ToolRequest, ToolResponse,
)

router = APIRouter()

# Shared service instance
_service = EditorService()


def reset_service(service: EditorService | None = None) -> EditorService:
    """Swap in a fresh service; `create_app` calls this when handed one."""
    global _service
    _service = service or EditorService()
    return _service


@router.get("/floorplan", response_model=Floorplan)
async def get_floorplan() -> Floorplan:
    return _service.document


@router.put("/floorplan", response_model=Floorplan)
async def import_floorplan(document: dict[str, Any] = Body(...)) -> Floorplan:
    """Replace the live document with an imported one (one undo step)."""
    return _service.import_document(document)


@router.get("/floorplan/export")
async def export_floorplan() -> dict[str, str]:
    return {"document": _service.export_document()}


@router.get("/floorplan/context", response_model=ContextResponse)
async def floorplan_context() -> ContextResponse:
    return ContextResponse(context=_service.context())


@router.get("/history", response_model=HistoryResponse)
async def history() -> HistoryResponse:
    return HistoryResponse(**_service.history_state())


@router.post("/undo", response_model=HistoryResponse)
async def undo() -> HistoryResponse:
    _service.editor.undo()
    return HistoryResponse(**_service.history_state())


@router.post("/redo", response_model=HistoryResponse)
async def redo() -> HistoryResponse:
    _service.editor.redo()
    return HistoryResponse(**_service.history_state())


@router.post("/invocations", response_model=InvocationBatchResponse)
async def run_invocations(batch: InvocationBatch) -> InvocationBatchResponse:
    """Validate and execute a batch of agent tool invocations."""
    results = _service.run_invocations([i.to_request() for i in batch.invocations])
    return InvocationBatchResponse(results=results, floorplan=_service.document)


@router.post("/agent/sessions", response_model=SessionResponse)
async def open_session() -> SessionResponse:
    return SessionResponse(session_id=_service.open_session())


@router.post("/agent/sessions/{session_id}/chunks", response_model=ChunkResponse)
async def feed_chunk(session_id: str, request: ChunkRequest) -> ChunkResponse:
    """Feed streamed assistant text; completed invocations run immediately."""
    session = _service.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session {session_id}")
    results = session.feed(request.chunk)
    return ChunkResponse(results=results, text=session.clean_text())


@router.delete("/agent/sessions/{session_id}")
async def close_session(session_id: str) -> dict[str, str]:
    _service.close_session(session_id)
    return {"status": "closed"}


@router.put("/tool", response_model=ToolResponse)
async def set_tool(request: ToolRequest) -> ToolResponse:
    tool = _service.set_tool(request.tool)
    return ToolResponse(tool=tool, presentation=_service.tools.presentation)


@router.post("/gestures", response_model=GestureResponse)
async def gesture(event: GestureEvent) -> GestureResponse:
    outcome = _service.handle_gesture(event)
    tools = _service.tools
    return GestureResponse(outcome=outcome, state=tools.state.value, preview=tools.preview)


@router.get("/furniture-types", response_model=list[FurnitureTypeInfo])
async def furniture_types() -> list[FurnitureTypeInfo]:
    return [
        FurnitureTypeInfo(type=t, label=s.label, width=s.width, height=s.height)
        for t, s in FURNITURE_DIMENSIONS.items()
    ]


@router.get("/commands")
async def list_commands() -> list[dict]:
    """Tool descriptors for the chat transport."""
    return _service.bridge.registry.describe()


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
