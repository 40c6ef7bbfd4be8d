"""Resumable parser for tool invocations embedded in a streamed chat reply.

The chat transport delivers prose interleaved with JSON payloads such as

    9:{"toolCallId":"call_1","toolName":"addWall","args":{...}}

or the plain `{"invocationId", "name", "arguments"}` shape. Text arrives in
arbitrary chunks, so a payload may be cut at a chunk boundary. The parser
keeps the whole buffer, resumes scanning where the last complete payload
ended, and only emits a payload once its closing brace has arrived.
"""

from __future__ import annotations
import hashlib
import json
import logging
import re
from typing import Any
from pydantic import AliasChoices, BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

# Stream-part tag written in front of a payload, e.g. "9:"
_PART_TAG = re.compile(r"[a-z0-9]:$", re.IGNORECASE)

# Opening of a payload that carries an invocation id
_PAYLOAD_START = re.compile(r'\{\s*"(?:toolCallId|invocationId)"')


class InvocationRequest(BaseModel):
    """A structured request to run one named command."""
    invocation_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("invocationId", "toolCallId", "invocation_id"),
    )
    name: str = Field(validation_alias=AliasChoices("name", "toolName"))
    arguments: dict[str, Any] = Field(
        validation_alias=AliasChoices("arguments", "args", "input"),
    )

    def content_key(self) -> str:
        """Stable key for the name + argument set, independent of key order."""
        canonical = json.dumps(
            {"name": self.name, "arguments": self.arguments},
            sort_keys=True, separators=(",", ":"), default=str,
        )
        return hashlib.sha1(canonical.encode("utf-8")).hexdigest()

    def emission_key(self) -> str:
        return self.invocation_id or self.content_key()


def find_object_end(text: str, start: int) -> int | None:
    """
    Index just past the JSON object opening at `text[start]`.

    Returns None while the object is still incomplete.
    """
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i + 1
    return None


def _opens_object(text: str, index: int) -> bool | None:
    """Whether the brace at `index` starts a JSON object (None: undecidable yet)."""
    for ch in text[index + 1:index + 65]:
        if not ch.isspace():
            return ch in "\"}"
    if len(text) - index > 64:
        return False
    return None


class InvocationStreamParser:
    """
    Accumulates streamed text and yields each complete invocation once.

    Re-feeding the same text or parsing a growing buffer never re-emits a
    payload: emitted payloads are remembered by invocation id, or by a
    content hash when the payload carries no id.
    """

    def __init__(self) -> None:
        self._buffer = ""
        self._cursor = 0
        self._emitted: set[str] = set()
        self._spans: list[tuple[int, int]] = []

    @property
    def buffer(self) -> str:
        return self._buffer

    def feed(self, chunk: str) -> list[InvocationRequest]:
        """Append a chunk and return invocations completed by it."""
        self._buffer += chunk
        return self._drain()

    def _drain(self) -> list[InvocationRequest]:
        found: list[InvocationRequest] = []
        text = self._buffer

        while True:
            start = text.find("{", self._cursor)
            if start == -1:
                self._cursor = len(text)
                break

            opens = _opens_object(text, start)
            if opens is None:
                self._cursor = start
                break
            if not opens:
                self._cursor = start + 1
                continue

            end = find_object_end(text, start)
            if end is None:
                if _PAYLOAD_START.search(text, start + 1):
                    # Never closes before a later payload; stray brace in prose
                    logger.debug("Skipping unterminated object at offset %d", start)
                    self._cursor = start + 1
                    continue
                # Payload cut at the chunk boundary; resume here next time
                self._cursor = start
                break

            request = self._parse(text[start:end])
            if request is None:
                # Not an invocation; nested objects may still hold one
                self._cursor = start + 1
                continue

            self._cursor = end
            self._spans.append((start, end))
            key = request.emission_key()
            if key in self._emitted:
                continue
            self._emitted.add(key)
            found.append(request)

        return found

    def _parse(self, raw: str) -> InvocationRequest | None:
        try:
            return InvocationRequest.model_validate_json(raw)
        except ValidationError:
            logger.debug("Skipping non-invocation object: %.60s", raw)
            return None

    def clean_text(self) -> str:
        """The buffered prose with invocation payloads (and their tags) removed."""
        pieces: list[str] = []
        last = 0
        for start, end in self._spans:
            before = self._buffer[last:start]
            pieces.append(_PART_TAG.sub("", before))
            last = end
        pieces.append(self._buffer[last:])
        text = "".join(pieces)
        return re.sub(r"\n{3,}", "\n\n", text).strip()


def parse_invocations(text: str) -> list[InvocationRequest]:
    """Parse every complete invocation in a finished piece of text."""
    return InvocationStreamParser().feed(text)
