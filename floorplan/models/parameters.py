"""Element defaults and editor configuration."""

from __future__ import annotations
from pydantic import BaseModel, Field


class ElementDefaults(BaseModel):
    """Default element dimensions (inches)."""
    wall_thickness: float = 6.0
    door_width: float = 32.0
    window_width: float = 36.0
    window_height: float = 48.0


class EditorParams(BaseModel):
    """User-adjustable editor settings."""
    scale: float = Field(default=10.0, gt=0)      # Canvas pixels per inch at 100% zoom
    grid_size: float = Field(default=12.0, gt=0)  # Inches (1 foot)
    snap_increment: float = 6.0      # Inches
    snap_to_grid: bool = True
    show_grid: bool = True
    min_wall_length: float = 10.0    # Canvas pixels, independent of zoom
    history_limit: int = 50
    min_zoom: float = 0.1
    max_zoom: float = 5.0
    opening_tolerance: float = 6.0   # Inches beyond half wall thickness
    max_sessions: int = Field(default=32, ge=1)  # Open agent streams kept per service
