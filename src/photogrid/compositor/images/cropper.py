"""
Module: compositor.images.cropper

Purpose:
    Per-cell placement geometry for the two fit policies.

Key Functions:
    - crop_fill_box(): Source region that exactly covers a cell
    - fit_within(): Letterboxed destination rectangle inside a cell
    - crop_to_cell(): Crop + resample a photo to a cell's size

Dependencies:
    - PIL: Resampling
    - core.models: Rect, DrawRect

Used By:
    - compositor.output.renderer: Painting cells
"""

from __future__ import annotations

from typing import Tuple

from PIL import Image

from photogrid.core.models import DrawRect, Rect

# Resampling filter for every scale operation
RESAMPLE = Image.Resampling.LANCZOS


def crop_fill_box(
    image_size: Tuple[int, int],
    cell: Rect,
) -> Tuple[float, float, float, float]:
    """
    Source region of a photo that fills a cell without distortion.

    The region has the cell's aspect ratio and is centered, so the
    excess is cropped symmetrically from left/right (photo wider than
    cell) or top/bottom (photo taller than cell).

    Args:
        image_size: (width, height) of the source photo
        cell: Destination cell

    Returns:
        (left, top, right, bottom) in source pixels, possibly fractional

    Example:
        >>> crop_fill_box((100, 100), Rect(0, 0, 50, 100))
        (25.0, 0.0, 75.0, 100.0)
    """
    img_w, img_h = image_size
    img_aspect = img_w / img_h
    cell_aspect = cell.aspect

    if img_aspect > cell_aspect:
        # Wider than the cell: keep full height, trim the sides
        src_h = float(img_h)
        src_w = img_h * cell_aspect
        src_x = (img_w - src_w) / 2
        src_y = 0.0
    else:
        # Taller than the cell: keep full width, trim top and bottom
        src_w = float(img_w)
        src_h = img_w / cell_aspect
        src_x = 0.0
        src_y = (img_h - src_h) / 2

    return (src_x, src_y, src_x + src_w, src_y + src_h)


def fit_within(image_size: Tuple[int, int], cell: Rect) -> DrawRect:
    """
    Destination rectangle that shows a whole photo inside a cell.

    The photo is scaled to touch the cell on one axis and centered on
    the other; the returned rectangle keeps the photo's aspect ratio
    exactly.

    Args:
        image_size: (width, height) of the source photo
        cell: Destination cell

    Returns:
        DrawRect in canvas coordinates

    Example:
        >>> fit_within((200, 100), Rect(0, 0, 100, 100))
        DrawRect(x=0.0, y=25.0, width=100.0, height=50.0)
    """
    img_w, img_h = image_size
    img_aspect = img_w / img_h

    if img_aspect > cell.aspect:
        draw_w = float(cell.width)
        draw_h = cell.width / img_aspect
        draw_x = float(cell.x)
        draw_y = cell.y + (cell.height - draw_h) / 2
    else:
        draw_h = float(cell.height)
        draw_w = cell.height * img_aspect
        draw_x = cell.x + (cell.width - draw_w) / 2
        draw_y = float(cell.y)

    return DrawRect(x=draw_x, y=draw_y, width=draw_w, height=draw_h)


def crop_to_cell(image: Image.Image, cell: Rect) -> Image.Image:
    """
    Crop and resample a photo so it covers a cell exactly.

    Args:
        image: Source photo
        cell: Destination cell

    Returns:
        New image of exactly cell.size
    """
    box = crop_fill_box(image.size, cell)
    return image.resize(cell.size, resample=RESAMPLE, box=box)


def scale_to_rect(image: Image.Image, rect: Rect) -> Image.Image:
    """Resample a whole photo to a rectangle's size."""
    return image.resize(rect.size, resample=RESAMPLE)
