"""Lookup tables: standard furniture dimensions and room fill colours."""

from __future__ import annotations
from pydantic import BaseModel

from .elements import RoomType


class FurnitureSpec(BaseModel):
    """Footprint of a catalog furniture type (width x depth, inches)."""
    width: float
    height: float
    label: str


FURNITURE_DIMENSIONS: dict[str, FurnitureSpec] = {
    "bed-twin": FurnitureSpec(width=39, height=75, label="Twin Bed"),
    "bed-full": FurnitureSpec(width=54, height=75, label="Full Bed"),
    "bed-queen": FurnitureSpec(width=60, height=80, label="Queen Bed"),
    "bed-king": FurnitureSpec(width=76, height=80, label="King Bed"),
    "sofa-2": FurnitureSpec(width=60, height=36, label="2-Seat Sofa"),
    "sofa-3": FurnitureSpec(width=84, height=36, label="3-Seat Sofa"),
    "dining-table-4": FurnitureSpec(width=48, height=36, label="Dining Table (4)"),
    "dining-table-6": FurnitureSpec(width=72, height=36, label="Dining Table (6)"),
    "desk": FurnitureSpec(width=60, height=30, label="Desk"),
    "chair": FurnitureSpec(width=20, height=20, label="Chair"),
    "armchair": FurnitureSpec(width=32, height=34, label="Armchair"),
    "coffee-table": FurnitureSpec(width=48, height=24, label="Coffee Table"),
    "nightstand": FurnitureSpec(width=24, height=18, label="Nightstand"),
    "dresser": FurnitureSpec(width=60, height=18, label="Dresser"),
    "toilet": FurnitureSpec(width=18, height=28, label="Toilet"),
    "sink-bathroom": FurnitureSpec(width=24, height=20, label="Bathroom Sink"),
    "bathtub": FurnitureSpec(width=60, height=32, label="Bathtub"),
    "shower": FurnitureSpec(width=36, height=36, label="Shower"),
    "sink-kitchen": FurnitureSpec(width=33, height=22, label="Kitchen Sink"),
    "stove": FurnitureSpec(width=30, height=26, label="Stove"),
    "refrigerator": FurnitureSpec(width=36, height=30, label="Refrigerator"),
    "dishwasher": FurnitureSpec(width=24, height=24, label="Dishwasher"),
}


ROOM_COLORS: dict[RoomType, str] = {
    RoomType.BEDROOM: "#E3F2FD",
    RoomType.BATHROOM: "#E8F5E9",
    RoomType.KITCHEN: "#FFF3E0",
    RoomType.LIVING: "#FCE4EC",
    RoomType.DINING: "#F3E5F5",
    RoomType.OFFICE: "#E0F7FA",
    RoomType.HALLWAY: "#ECEFF1",
    RoomType.CLOSET: "#FFF8E1",
    RoomType.LAUNDRY: "#E1F5FE",
    RoomType.GARAGE: "#EFEBE9",
    RoomType.OTHER: "#F5F5F5",
}


def get_furniture_spec(furniture_type: str) -> FurnitureSpec | None:
    return FURNITURE_DIMENSIONS.get(furniture_type)
