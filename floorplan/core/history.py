"""Snapshot-based undo/redo history over the floorplan document."""

from __future__ import annotations
import logging
from typing import Callable, TypeVar

from floorplan.models import Floorplan

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_HISTORY = 50

# A mutation edits the working copy in place and returns False when
# nothing changed, so no snapshot is recorded for it.
Mutation = Callable[[Floorplan], "bool | None"]


class HistoryEngine:
    """
    Owns the live document as a past / present / future triple.

    Every mutating command goes through `record()` exactly once, which
    snapshots the pre-mutation document onto `past` and clears `future`.
    Undo and redo at the stack boundaries are silent no-ops.
    """

    def __init__(self, present: Floorplan | None = None, limit: int = MAX_HISTORY) -> None:
        self.limit = limit
        self._past: list[Floorplan] = []
        self._present: Floorplan = present if present is not None else Floorplan.create()
        self._future: list[Floorplan] = []

    @property
    def present(self) -> Floorplan:
        """Deep copy of the live document."""
        return self._present.model_copy(deep=True)

    @property
    def past(self) -> list[Floorplan]:
        return [doc.model_copy(deep=True) for doc in self._past]

    @property
    def future(self) -> list[Floorplan]:
        return [doc.model_copy(deep=True) for doc in self._future]

    @property
    def past_length(self) -> int:
        return len(self._past)

    @property
    def future_length(self) -> int:
        return len(self._future)

    def record(self, mutation: Mutation) -> bool:
        """Apply `mutation` as one undoable step. Returns True if recorded."""
        working = self._present.model_copy(deep=True)
        if mutation(working) is False:
            return False

        self._past.append(self._present)
        if len(self._past) > self.limit:
            # Oldest snapshots are dropped for good
            del self._past[: len(self._past) - self.limit]
        self._future.clear()
        self._present = working
        return True

    def peek(self, reader: Callable[[Floorplan], T]) -> T:
        """Run a read-only function against the present without copying it."""
        return reader(self._present)

    def amend(self, mutation: Mutation) -> None:
        """Edit the present document in place without an undo step."""
        mutation(self._present)

    def undo(self) -> bool:
        if not self._past:
            logger.debug("Undo requested with empty history")
            return False
        previous = self._past.pop()
        self._future.insert(0, self._present)
        self._present = previous
        return True

    def redo(self) -> bool:
        if not self._future:
            logger.debug("Redo requested with empty future")
            return False
        following = self._future.pop(0)
        self._past.append(self._present)
        self._present = following
        return True

    def can_undo(self) -> bool:
        return len(self._past) > 0

    def can_redo(self) -> bool:
        return len(self._future) > 0

    def clear(self) -> None:
        """Forget both stacks, keeping the present document."""
        self._past.clear()
        self._future.clear()
