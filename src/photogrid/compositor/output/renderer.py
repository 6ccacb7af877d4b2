"""
Module: compositor.output.renderer

Purpose:
    Paint decoded photos into their planned cells on a single canvas.
    The canvas is created and filled with the background before any
    photo is drawn; only margin pixels (and letterbox bands in
    ASPECT_PRESERVE) keep the background colour.

Key Functions:
    - render_composite(): Main rendering function

Dependencies:
    - PIL: Canvas and pasting
    - compositor.layout.models: LayoutPlan
    - compositor.images.cropper: Crop / fit geometry

Used By:
    - compositor.controller: render_grid
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from PIL import Image

from photogrid.core.models import FitMode, Rect

from ..images.cropper import crop_to_cell, fit_within, scale_to_rect
from ..layout.models import LayoutPlan

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "white"


def render_composite(
    images: Sequence[Image.Image],
    plan: LayoutPlan,
    fit_mode: Optional[FitMode] = None,
    *,
    background: str = DEFAULT_BACKGROUND,
) -> Image.Image:
    """
    Render photos into a new RGB canvas following a layout plan.

    Args:
        images: Decoded photos; images[i] goes into plan.cells[i]
        plan: Layout plan from plan_layout()
        fit_mode: Drawing policy (defaults to the plan's fit mode)
        background: Canvas fill colour

    Returns:
        New RGB image of plan.canvas_size

    Raises:
        ValueError: If the image count differs from the cell count

    Example:
        >>> canvas = render_composite(images, plan)
        >>> canvas.size == plan.canvas_size
        True
    """
    if len(images) != len(plan.cells):
        raise ValueError(f"Expected {len(plan.cells)} images for plan, got {len(images)}")

    mode = fit_mode or plan.fit_mode
    canvas = Image.new("RGB", plan.canvas_size, background)

    for index, (image, cell) in enumerate(zip(images, plan.cells)):
        if mode is FitMode.CROP_FILL:
            _draw_crop_fill(canvas, image, cell)
        else:
            _draw_aspect_preserve(canvas, image, cell)
        logger.debug(f"Drew photo {index} ({image.width}x{image.height}) into cell {cell.box}")

    return canvas


def _draw_crop_fill(canvas: Image.Image, image: Image.Image, cell: Rect) -> None:
    """Cover the whole cell, discarding overhang outside the crop box."""
    tile = crop_to_cell(image, cell)
    canvas.paste(tile, (cell.x, cell.y))


def _draw_aspect_preserve(canvas: Image.Image, image: Image.Image, cell: Rect) -> None:
    """Draw the whole photo centered in the cell, leaving letterbox bands."""
    target = fit_within(image.size, cell).snap()
    # Rounding can push a centered edge one pixel past the cell
    x = min(target.x, cell.right - target.width)
    y = min(target.y, cell.bottom - target.height)
    tile = scale_to_rect(image, target)
    canvas.paste(tile, (max(cell.x, x), max(cell.y, y)))
