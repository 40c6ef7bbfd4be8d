"""Export and import of whole floorplan documents as JSON."""

from __future__ import annotations
import logging
from collections import Counter
from pathlib import Path
from pydantic import ValidationError

from floorplan.models import Floorplan

logger = logging.getLogger(__name__)


class MalformedFloorplanError(ValueError):
    """Raised when an imported document is not a consistent floorplan."""
    pass


def dump_floorplan(floorplan: Floorplan, indent: int | None = 2) -> str:
    return floorplan.model_dump_json(indent=indent)


def check_references(floorplan: Floorplan) -> list[str]:
    """Problems that make a structurally valid document unusable."""
    problems: list[str] = []

    duplicates = [i for i, n in Counter(floorplan.all_ids()).items() if n > 1]
    for element_id in sorted(duplicates):
        problems.append(f"Duplicate element id {element_id}")

    wall_ids = {w.id for w in floorplan.walls}
    for door in floorplan.doors:
        if door.wall_id not in wall_ids:
            problems.append(f"Door {door.id} references missing wall {door.wall_id}")
    for window in floorplan.windows:
        if window.wall_id not in wall_ids:
            problems.append(f"Window {window.id} references missing wall {window.wall_id}")
    return problems


def load_floorplan(data: str | bytes | dict) -> Floorplan:
    """
    Parse a document from JSON text or an already-decoded mapping.

    Raises:
        MalformedFloorplanError: If the document fails schema validation,
            repeats an id, or hosts a door/window on a wall it does not have.
    """
    try:
        if isinstance(data, dict):
            floorplan = Floorplan.model_validate(data)
        else:
            floorplan = Floorplan.model_validate_json(data)
    except ValidationError as exc:
        raise MalformedFloorplanError(f"Invalid floorplan document: {exc}") from exc

    problems = check_references(floorplan)
    if problems:
        logger.warning("Rejecting floorplan %s: %d problem(s)", floorplan.id, len(problems))
        raise MalformedFloorplanError("; ".join(problems))
    return floorplan


def save_floorplan_file(floorplan: Floorplan, path: str | Path) -> None:
    Path(path).write_text(dump_floorplan(floorplan), encoding="utf-8")


def load_floorplan_file(path: str | Path) -> Floorplan:
    return load_floorplan(Path(path).read_text(encoding="utf-8"))
