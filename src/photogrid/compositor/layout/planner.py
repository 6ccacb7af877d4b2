"""
Module: compositor.layout.planner

Purpose:
    Compute canvas size, margin and per-cell rectangles for a request.

Algorithm:
    CROP_FILL (fixed physical canvas):
    1. Canvas = page size x dpi
    2. Margin = margin_percent of the shorter canvas side
    3. Cells share what is left after cols+1 / rows+1 margins

    ASPECT_PRESERVE (canvas sized to content):
    1. Start from max_cell_width_in (explicit or derived from the page)
    2. Each photo proposes an uncropped footprint from its aspect ratio
    3. Cell = widest x tallest proposal, so no photo is shrunk further
       (starts from 0 x 0, so an all-portrait set gets a narrower cell
       than M x M; the kiosk browser code starts from M x M)
    4. Margin = margin_percent of the shorter cell side
    5. Canvas = margins + cells

    Both modes place photos column-major: photo i goes to
    row i % rows, column i // rows.

Key Functions:
    - plan_layout(): Main entry point
    - cell_position(): Grid (row, col) of a photo index

Dependencies:
    - core.models: GridSpec, PageSize, Rect
    - compositor.config: CompositeRequest

Used By:
    - compositor.controller: render_grid
"""

from __future__ import annotations

import logging
from typing import Sequence

from photogrid.core.models import FitMode, GridSpec, PageSize, Rect, round_half_up

from ..config import CompositeRequest
from ..errors import InvalidGridError, InvalidRequestError
from .models import LayoutPlan
from .page_sizes import default_max_cell_width

logger = logging.getLogger(__name__)


def plan_layout(
    request: CompositeRequest,
    page: PageSize,
    image_aspects: Sequence[float],
) -> LayoutPlan:
    """
    Plan the composite layout for a request.

    Args:
        request: Photos, grid and rendering options
        page: Resolved print size for request.grid
        image_aspects: width/height of each decoded photo, in input order
            (only used by ASPECT_PRESERVE)

    Returns:
        LayoutPlan with one cell per photo in placement order

    Raises:
        InvalidGridError: If the grid has zero columns or rows
        InvalidRequestError: If photo or aspect counts differ from the
            cell count, or margins leave no room for cells

    Example:
        >>> request = CompositeRequest.build(photos, GridSpec(2, 1, "2x4-vertical-2"))
        >>> plan = plan_layout(request, resolve_page_size(request.grid), [1.0, 1.0])
        >>> plan.cell_width, plan.cell_height
        (282, 1176)
    """
    grid = request.grid
    validate_request(request)
    if len(image_aspects) != grid.cell_count:
        raise InvalidRequestError(
            f"Expected {grid.cell_count} image aspects, got {len(image_aspects)}"
        )

    if request.fit_mode is FitMode.CROP_FILL:
        plan = _plan_crop_fill(grid, page, request.dpi, request.margin_percent)
    else:
        max_cell_width_in = request.max_cell_width_in
        if max_cell_width_in is None:
            max_cell_width_in = default_max_cell_width(page, grid)
        plan = _plan_aspect_preserve(
            grid, page, request.dpi, request.margin_percent,
            max_cell_width_in, image_aspects,
        )

    logger.debug(
        f"Planned {grid.cols}x{grid.rows} {plan.fit_mode.value} layout: "
        f"canvas {plan.canvas_width}x{plan.canvas_height}, "
        f"cell {plan.cell_width}x{plan.cell_height}, margin {plan.margin_px}px"
    )
    return plan


def validate_request(request: CompositeRequest) -> None:
    """
    Check grid shape and photo count.

    Runs before any decode or pixel work. The grid is checked first,
    so an empty grid reports InvalidGridError even with no photos.

    Raises:
        InvalidGridError: If cols or rows is below 1
        InvalidRequestError: If len(photos) != cols * rows
    """
    grid = request.grid
    if grid.cols < 1 or grid.rows < 1:
        raise InvalidGridError(f"Invalid grid {grid.cols}x{grid.rows}: need at least 1x1")
    if request.photo_count != grid.cell_count:
        raise InvalidRequestError(
            f"Expected {grid.cell_count} photos, got {request.photo_count}"
        )


def cell_position(index: int, rows: int) -> tuple[int, int]:
    """
    Grid position of a photo index (column-major).

    Fills a column top to bottom before moving right. For a 2x2 grid:
        [0] [2]
        [1] [3]

    Returns:
        (row, col)
    """
    return index % rows, index // rows


def _plan_crop_fill(
    grid: GridSpec,
    page: PageSize,
    dpi: int,
    margin_percent: float,
) -> LayoutPlan:
    """Fixed canvas from the page size; cells absorb what margins leave."""
    canvas_width, canvas_height = page.to_pixels(dpi)
    margin = round_half_up(min(canvas_width, canvas_height) * margin_percent / 100)

    # Floor so cells are whole pixels; any remainder widens the far margin
    cell_width = (canvas_width - margin * (grid.cols + 1)) // grid.cols
    cell_height = (canvas_height - margin * (grid.rows + 1)) // grid.rows
    if cell_width <= 0 or cell_height <= 0:
        raise InvalidRequestError(
            f"Margin of {margin_percent}% leaves no room for cells on "
            f"{canvas_width}x{canvas_height} canvas"
        )

    return LayoutPlan(
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        margin_px=margin,
        cell_width=cell_width,
        cell_height=cell_height,
        cells=_place_cells(grid, margin, cell_width, cell_height),
        fit_mode=FitMode.CROP_FILL,
        page_size=page,
        cols=grid.cols,
        rows=grid.rows,
    )


def _plan_aspect_preserve(
    grid: GridSpec,
    page: PageSize,
    dpi: int,
    margin_percent: float,
    max_cell_width_in: float,
    image_aspects: Sequence[float],
) -> LayoutPlan:
    """Cell sized to hold every photo uncropped; canvas derived from cells."""
    cell_width_in = 0.0
    cell_height_in = 0.0
    for aspect in image_aspects:
        if aspect <= 0:
            raise InvalidRequestError(f"Image aspect must be positive: {aspect}")
        if aspect > 1:
            # Wide: full base width, shorter height
            candidate = (max_cell_width_in, max_cell_width_in / aspect)
        else:
            # Tall or square: full base height, narrower width
            candidate = (max_cell_width_in * aspect, max_cell_width_in)
        cell_width_in = max(cell_width_in, candidate[0])
        cell_height_in = max(cell_height_in, candidate[1])

    cell_width = max(1, round_half_up(cell_width_in * dpi))
    cell_height = max(1, round_half_up(cell_height_in * dpi))
    margin = round_half_up(min(cell_width, cell_height) * margin_percent / 100)

    canvas_width = margin + (cell_width + margin) * grid.cols
    canvas_height = margin + (cell_height + margin) * grid.rows

    return LayoutPlan(
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        margin_px=margin,
        cell_width=cell_width,
        cell_height=cell_height,
        cells=_place_cells(grid, margin, cell_width, cell_height),
        fit_mode=FitMode.ASPECT_PRESERVE,
        page_size=page,
        cols=grid.cols,
        rows=grid.rows,
    )


def _place_cells(
    grid: GridSpec,
    margin: int,
    cell_width: int,
    cell_height: int,
) -> tuple[Rect, ...]:
    """Cell rectangles in column-major placement order."""
    cells = []
    for index in range(grid.cell_count):
        row, col = cell_position(index, grid.rows)
        cells.append(
            Rect(
                x=margin + col * (cell_width + margin),
                y=margin + row * (cell_height + margin),
                width=cell_width,
                height=cell_height,
            )
        )
    return tuple(cells)
