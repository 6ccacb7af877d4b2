"""
photogrid Core Package

Data models shared by the compositor: grids, page sizes, fit modes
and pixel rectangles. Everything here is immutable and free of
Pillow state, so it can be passed between threads freely.
"""

from .models import (
    FitMode,
    GridSpec,
    GridPreset,
    GRID_PRESETS,
    PageSize,
    Rect,
    DrawRect,
)

__all__ = [
    "FitMode",
    "GridSpec",
    "GridPreset",
    "GRID_PRESETS",
    "PageSize",
    "Rect",
    "DrawRect",
]
