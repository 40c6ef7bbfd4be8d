"""Agent bridge — validates tool invocations and runs them through the editor.

An invocation is first resolved into a tagged variant: `ParsedInvocation`
when the name is registered and the arguments validate, otherwise
`RejectedInvocation`. Rejections are reported per invocation and logged;
they never raise and never end the session.
"""

from __future__ import annotations
import logging
from typing import Any
from pydantic import BaseModel, ConfigDict, ValidationError

from floorplan.agent.base import AgentCommand, CommandArguments
from floorplan.agent.context import generate_floorplan_context
from floorplan.agent.registry import CommandRegistry, create_default_registry
from floorplan.agent.stream import InvocationRequest, InvocationStreamParser
from floorplan.core.editor import FloorplanEditor
from floorplan.models import Floorplan

logger = logging.getLogger(__name__)


class ParsedInvocation(BaseModel):
    """An invocation whose name resolved and whose arguments validated."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    request: InvocationRequest
    command: AgentCommand
    args: CommandArguments


class RejectedInvocation(BaseModel):
    """An invocation that will not run, with the reason why."""
    request: InvocationRequest
    reason: str


class InvocationResult(BaseModel):
    """Outcome of one invocation, as shown in the conversation log."""
    invocation_id: str | None = None
    name: str
    arguments: dict[str, Any]
    executed: bool
    element_id: str | None = None
    message: str = ""


def _format_errors(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "arguments"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def parse_invocation(
    registry: CommandRegistry,
    request: InvocationRequest,
    document: Floorplan,
) -> ParsedInvocation | RejectedInvocation:
    """Resolve a raw request against the registry and the current document."""
    command = registry.get_command(request.name)
    if command is None:
        return RejectedInvocation(request=request, reason=f"Unknown command: {request.name}")

    try:
        args = command.arguments.model_validate(request.arguments)
    except ValidationError as exc:
        return RejectedInvocation(request=request, reason=f"Invalid arguments: {_format_errors(exc)}")

    reason = command.check(document, args)
    if reason is not None:
        return RejectedInvocation(request=request, reason=reason)
    return ParsedInvocation(request=request, command=command, args=args)


class AgentBridge:
    """Executes agent invocations against one editor."""

    def __init__(self, editor: FloorplanEditor, registry: CommandRegistry | None = None) -> None:
        self.editor = editor
        self.registry = registry or create_default_registry()

    def execute(self, request: InvocationRequest) -> InvocationResult:
        """Validate and run a single invocation."""
        parsed = parse_invocation(self.registry, request, self.editor.document)
        if isinstance(parsed, RejectedInvocation):
            logger.warning("Rejected %s: %s", request.name, parsed.reason)
            return self._result(request, executed=False, message=parsed.reason)

        try:
            outcome = parsed.command.execute(self.editor, parsed.args)
        except ValueError as exc:
            logger.warning("Command %s failed: %s", request.name, exc)
            return self._result(request, executed=False, message=str(exc))

        if isinstance(outcome, str):
            logger.info("Executed %s -> %s", request.name, outcome)
            return self._result(request, executed=True, element_id=outcome)
        if not outcome:
            logger.info("Executed %s with no effect", request.name)
            return self._result(request, executed=False, message="No change to the floorplan")
        logger.info("Executed %s", request.name)
        return self._result(request, executed=True)

    def open_session(self) -> AgentSession:
        return AgentSession(self)

    def context(self) -> str:
        return generate_floorplan_context(self.editor.document)

    def _result(self, request: InvocationRequest, **fields: Any) -> InvocationResult:
        return InvocationResult(
            invocation_id=request.invocation_id,
            name=request.name,
            arguments=request.arguments,
            **fields,
        )


class AgentSession:
    """
    One streamed assistant reply.

    Each chunk is parsed and its invocations executed to completion before
    `feed()` returns. Invocations with the same name and argument set run
    at most once per session.
    """

    def __init__(self, bridge: AgentBridge) -> None:
        self.bridge = bridge
        self.parser = InvocationStreamParser()
        self.results: list[InvocationResult] = []
        self._seen: set[str] = set()

    def feed(self, chunk: str) -> list[InvocationResult]:
        return self.submit(self.parser.feed(chunk))

    def submit(self, requests: list[InvocationRequest]) -> list[InvocationResult]:
        results: list[InvocationResult] = []
        for request in requests:
            key = request.content_key()
            if key in self._seen:
                logger.debug("Skipping duplicate %s invocation", request.name)
                continue
            self._seen.add(key)
            results.append(self.bridge.execute(request))
        self.results.extend(results)
        return results

    def clean_text(self) -> str:
        return self.parser.clean_text()
