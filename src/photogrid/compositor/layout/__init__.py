"""
Module: compositor.layout

Purpose:
    Page sizing and grid layout planning.
    Converts a request into a LayoutPlan of cell rectangles.

Key Functions:
    - resolve_page_size(): Grid -> physical print size
    - plan_layout(): Main entry point for layout

Key Classes:
    - LayoutPlan: Canvas, margin and cell rectangles

Dependencies:
    - core.models: GridSpec, PageSize, Rect

Used By:
    - compositor.controller: Main composition controller
"""

from .models import LayoutPlan
from .page_sizes import (
    PAGE_SIZE_CATALOG,
    SHAPE_DEFAULTS,
    STANDARD_SIZES,
    resolve_page_size,
    nearest_standard_size,
    default_max_cell_width,
)
from .planner import plan_layout, validate_request, cell_position

__all__ = [
    # Models
    "LayoutPlan",
    # Page sizes
    "PAGE_SIZE_CATALOG",
    "SHAPE_DEFAULTS",
    "STANDARD_SIZES",
    "resolve_page_size",
    "nearest_standard_size",
    "default_max_cell_width",
    # Planning
    "plan_layout",
    "validate_request",
    "cell_position",
]
