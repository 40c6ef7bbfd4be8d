"""Editor service — the one object the API layer talks to."""

from __future__ import annotations
import logging
import uuid

from floorplan.models import EditorParams, Floorplan
from floorplan.core.editor import FloorplanEditor
from floorplan.core.tools import GestureEvent, GestureOutcome, Tool, ToolStateMachine
from floorplan.agent.bridge import AgentBridge, AgentSession, InvocationResult
from floorplan.agent.registry import CommandRegistry
from floorplan.agent.stream import InvocationRequest
from floorplan.io.serialization import dump_floorplan, load_floorplan

logger = logging.getLogger(__name__)


class EditorService:
    """
    Owns the single live document and every path that may change it.

    The editor, the tool state machine and the agent bridge all share one
    FloorplanEditor, so gestures and agent invocations go through the same
    synchronous command layer.
    """

    def __init__(
        self,
        params: EditorParams | None = None,
        registry: CommandRegistry | None = None,
    ) -> None:
        self.params = params or EditorParams()
        self.editor = FloorplanEditor(params=self.params)
        self.tools = ToolStateMachine(self.editor)
        self.bridge = AgentBridge(self.editor, registry)
        self._sessions: dict[str, AgentSession] = {}

    @property
    def document(self) -> Floorplan:
        return self.editor.document

    # -- Document ----------------------------------------------------------

    def import_document(self, data: str | bytes | dict) -> Floorplan:
        floorplan = load_floorplan(data)
        self.tools.cancel()
        self.tools.clear_selection()
        self.editor.set_floorplan(floorplan)
        logger.info("Imported floorplan %s (%d elements)", floorplan.id, floorplan.element_count())
        return self.document

    def export_document(self) -> str:
        return dump_floorplan(self.document)

    def history_state(self) -> dict[str, int | bool]:
        history = self.editor.history
        return {
            "can_undo": history.can_undo(),
            "can_redo": history.can_redo(),
            "past": history.past_length,
            "future": history.future_length,
        }

    # -- Tools -------------------------------------------------------------

    def set_tool(self, tool: Tool | str) -> Tool:
        self.tools.set_active_tool(tool)
        return self.tools.active_tool

    def handle_gesture(self, event: GestureEvent) -> GestureOutcome:
        return self.tools.handle(event)

    # -- Agent -------------------------------------------------------------

    def run_invocations(self, requests: list[InvocationRequest]) -> list[InvocationResult]:
        """Execute a batch as one session, so repeats within it run once."""
        return self.bridge.open_session().submit(requests)

    def open_session(self) -> str:
        while len(self._sessions) >= self.params.max_sessions:
            # Oldest first; dicts keep insertion order
            stale = next(iter(self._sessions))
            logger.info("Dropping abandoned agent session %s", stale)
            del self._sessions[stale]
        session_id = uuid.uuid4().hex
        self._sessions[session_id] = self.bridge.open_session()
        return session_id

    def get_session(self, session_id: str) -> AgentSession | None:
        return self._sessions.get(session_id)

    def close_session(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def context(self) -> str:
        return self.bridge.context()
