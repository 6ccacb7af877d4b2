"""
Module: compositor.output.print_sheet

Purpose:
    Render a finished composite onto a single PDF page of its physical
    print size, for print services that want a page rather than a
    bare JPEG. The page holds the raster only.

Key Functions:
    - render_print_sheet(): CompositeResult -> PDF bytes

Dependencies:
    - reportlab: PDF generation

Used By:
    - photogrid.cli: --pdf option
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

if TYPE_CHECKING:
    from ..controller import CompositeResult

logger = logging.getLogger(__name__)

POINTS_PER_INCH = 72.0


def render_print_sheet(result: CompositeResult) -> bytes:
    """
    Place a composite centered on a page of its resolved print size.

    The image is scaled to fit the page while keeping its aspect ratio.
    CROP_FILL composites fill the page exactly; ASPECT_PRESERVE ones
    may leave white bands.

    Args:
        result: Output of compose_grid()

    Returns:
        PDF document bytes

    Example:
        >>> pdf = render_print_sheet(compose_grid(photos, grid))
        >>> pdf[:4]
        b'%PDF'
    """
    page = result.page_size
    page_width_pt = page.width_in * POINTS_PER_INCH
    page_height_pt = page.height_in * POINTS_PER_INCH

    scale = min(page_width_pt / result.width, page_height_pt / result.height)
    draw_width = result.width * scale
    draw_height = result.height * scale
    x_pt = (page_width_pt - draw_width) / 2
    # PDF origin is bottom-left
    y_pt = (page_height_pt - draw_height) / 2

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=(page_width_pt, page_height_pt))
    c.setTitle(f"Photo print {page.label}")
    c.drawImage(
        ImageReader(io.BytesIO(result.data)),
        x_pt,
        y_pt,
        width=draw_width,
        height=draw_height,
        preserveAspectRatio=True,
    )
    c.showPage()
    c.save()

    logger.info(
        f"Rendered {result.width}x{result.height} composite to {page.label} print sheet"
    )
    return buf.getvalue()
