"""
Core Models Package

Immutable data models shared by the compositor stages.

All models here are frozen dataclasses, so a grid or rectangle handed
to the decode pool or the renderer can never change under it.
"""

from .grid import FitMode, GridSpec, GridPreset, GRID_PRESETS, PageSize, round_half_up
from .geometry import Rect, DrawRect

__all__ = [
    "FitMode",
    "GridSpec",
    "GridPreset",
    "GRID_PRESETS",
    "PageSize",
    "Rect",
    "DrawRect",
    "round_half_up",
]
