"""
Module: compositor.layout.page_sizes

Purpose:
    Map a grid to the physical photo print it is printed on.

    Lookup precedence:
    1. Exact preset id in PAGE_SIZE_CATALOG
    2. Shape default for (cols, rows) in SHAPE_DEFAULTS
    3. Nearest entry of STANDARD_SIZES to the grid's natural footprint
       (2x3 inch cells with 0.1 inch gutters), by L1 distance in inches

    Resolution is pure and total: every grid, including None, resolves.

Key Functions:
    - resolve_page_size(): GridSpec -> PageSize
    - nearest_standard_size(): Footprint -> closest standard print
    - default_max_cell_width(): Base cell size for ASPECT_PRESERVE

Dependencies:
    - core.models: GridSpec, PageSize

Used By:
    - compositor.layout.planner: Canvas and cell sizing
    - compositor.controller: Page label on CompositeResult
"""

from __future__ import annotations

import logging
from typing import Optional

from photogrid.core.models import GridSpec, PageSize

logger = logging.getLogger(__name__)

# Constants
DEFAULT_PAGE_SIZE = PageSize(4, 6, "4x6")
CELL_GUTTER_IN = 0.1  # Gutter between cells when deriving sizes from a page
NATURAL_CELL_WIDTH_IN = 2.0
NATURAL_CELL_HEIGHT_IN = 3.0

PAGE_SIZE_CATALOG: dict[str, PageSize] = {
    "5x5-single": PageSize(5, 5, "5x5"),
    "4x6-single": PageSize(4, 6, "4x6"),
    "2x4-vertical-2": PageSize(2, 4, "2x4"),
    "4x6-4cut": PageSize(4, 6, "4x6"),
    "5x7-6cut": PageSize(5, 7, "5x7"),
}

SHAPE_DEFAULTS: dict[tuple[int, int], PageSize] = {
    (1, 1): PageSize(4, 6, "4x6"),
    (2, 1): PageSize(2, 4, "2x4"),
    (2, 2): PageSize(4, 6, "4x6"),
    (3, 2): PageSize(5, 7, "5x7"),
}

# Order matters: on equal distance the earlier size wins
STANDARD_SIZES: tuple[PageSize, ...] = (
    PageSize(2, 4, "2x4"),
    PageSize(4, 6, "4x6"),
    PageSize(5, 7, "5x7"),
    PageSize(8, 10, "8x10"),
)


def resolve_page_size(grid: Optional[GridSpec]) -> PageSize:
    """
    Resolve the print size for a grid.

    Zero or negative cols/rows are treated as 1, matching the kiosk
    which never lets an empty grid reach the printer.

    Args:
        grid: Grid layout, or None for the default 4x6 print

    Returns:
        PageSize for the grid (never raises)

    Example:
        >>> resolve_page_size(GridSpec(2, 2, "4x6-4cut")).label
        '4x6'
        >>> resolve_page_size(GridSpec(3, 2)).label
        '5x7'
    """
    if grid is None:
        return DEFAULT_PAGE_SIZE

    if grid.id is not None and grid.id in PAGE_SIZE_CATALOG:
        return PAGE_SIZE_CATALOG[grid.id]

    cols = grid.cols if grid.cols > 0 else 1
    rows = grid.rows if grid.rows > 0 else 1

    shape_default = SHAPE_DEFAULTS.get((cols, rows))
    if shape_default is not None:
        return shape_default

    width_in = NATURAL_CELL_WIDTH_IN * cols + CELL_GUTTER_IN * (cols - 1)
    height_in = NATURAL_CELL_HEIGHT_IN * rows + CELL_GUTTER_IN * (rows - 1)
    page = nearest_standard_size(width_in, height_in)
    logger.debug(
        f"No preset for grid {cols}x{rows} (id={grid.id!r}); "
        f"footprint {width_in:.1f}x{height_in:.1f}in -> {page.label}"
    )
    return page


def nearest_standard_size(width_in: float, height_in: float) -> PageSize:
    """
    Closest standard print by L1 distance in inches.

    Ties keep the first size in STANDARD_SIZES order.

    Example:
        >>> nearest_standard_size(3, 5).label  # equidistant from 2x4 and 4x6
        '2x4'
    """
    closest = STANDARD_SIZES[0]
    min_diff = abs(width_in - closest.width_in) + abs(height_in - closest.height_in)
    for size in STANDARD_SIZES[1:]:
        diff = abs(width_in - size.width_in) + abs(height_in - size.height_in)
        if diff < min_diff:
            min_diff = diff
            closest = size
    return closest


def default_max_cell_width(page: PageSize, grid: GridSpec) -> float:
    """
    Largest square cell (in inches) that fits the grid on the page.

    Used as the ASPECT_PRESERVE base size when the caller gives none.
    Leaves CELL_GUTTER_IN between neighbouring cells.

    Example:
        >>> default_max_cell_width(PageSize(2, 4, "2x4"), GridSpec(2, 1))
        0.95
    """
    available_width = page.width_in - CELL_GUTTER_IN * (grid.cols - 1)
    available_height = page.height_in - CELL_GUTTER_IN * (grid.rows - 1)
    return min(available_width / grid.cols, available_height / grid.rows)
