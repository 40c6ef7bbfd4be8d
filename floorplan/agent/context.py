"""Plain-text summary of a floorplan used to ground agent turns.

The output is a pure function of the document: the same elements always
render to the same text, so retried turns see identical context.
"""

from __future__ import annotations

from floorplan.models import Floorplan


def _num(value: float) -> str:
    """Render a measurement without float noise (120.0 -> '120', 10.25 -> '10.25')."""
    rounded = round(value, 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0")


def _pt(x: float, y: float) -> str:
    return f'({_num(x)}", {_num(y)}")'


def generate_floorplan_context(floorplan: Floorplan) -> str:
    lines: list[str] = [f'Current floorplan state ("{floorplan.name}", units: {floorplan.units.value}):']

    if not floorplan.walls:
        lines.append("- No walls (empty floorplan)")
    else:
        lines.append(f"\nWalls ({len(floorplan.walls)}):")
        for i, wall in enumerate(floorplan.walls, start=1):
            lines.append(
                f"  {i}. ID: {wall.id}, from {_pt(wall.start.x, wall.start.y)} "
                f"to {_pt(wall.end.x, wall.end.y)}, length: {round(wall.length)}\", "
                f"thickness: {_num(wall.thickness)}\""
            )

    if floorplan.doors:
        lines.append(f"\nDoors ({len(floorplan.doors)}):")
        for i, door in enumerate(floorplan.doors, start=1):
            lines.append(
                f"  {i}. ID: {door.id}, on wall {door.wall_id}, "
                f"position: {door.position * 100:.0f}%, width: {_num(door.width)}\", "
                f"swing: {door.swing_direction.value}{' inward' if door.swing_inward else ' outward'}"
            )

    if floorplan.windows:
        lines.append(f"\nWindows ({len(floorplan.windows)}):")
        for i, window in enumerate(floorplan.windows, start=1):
            lines.append(
                f"  {i}. ID: {window.id}, on wall {window.wall_id}, "
                f"position: {window.position * 100:.0f}%, "
                f"size: {_num(window.width)}\"x{_num(window.height)}\""
            )

    if floorplan.furniture:
        lines.append(f"\nFurniture ({len(floorplan.furniture)}):")
        for i, item in enumerate(floorplan.furniture, start=1):
            lines.append(
                f"  {i}. ID: {item.id}, type: {item.type}, "
                f"at {_pt(item.position.x, item.position.y)}, "
                f"{_num(item.width)}\"x{_num(item.height)}\", rotation: {_num(item.rotation)}°"
            )

    if floorplan.rooms:
        lines.append(f"\nRooms ({len(floorplan.rooms)}):")
        for i, room in enumerate(floorplan.rooms, start=1):
            lines.append(
                f"  {i}. ID: {room.id}, \"{room.name}\" ({room.type.value}), "
                f"walls: [{', '.join(room.wall_ids)}]"
            )

    return "\n".join(lines)
