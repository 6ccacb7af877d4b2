"""
Module: compositor.controller

Purpose:
    Orchestrate one grid composition.
    Validate → Resolve page → Decode → Plan → Render → Overlay → Encode

Key Functions:
    - compose_grid(): Main entry point, returns encoded JPEG
    - render_grid(): Same pipeline up to the raw canvas (no encoding)

Key Classes:
    - CompositeResult: Encoded composite plus layout metadata

Dependencies:
    - compositor.layout: Page sizes and planning
    - compositor.images: Concurrent decoding
    - compositor.output: Rendering, overlays and encoding

Used By:
    - photogrid.cli: Command line entry point
    - Kiosk backend: save / print / download steps
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from PIL import Image

from photogrid.common.timing import TimingLog, timed_phase
from photogrid.core.models import FitMode, GridSpec, PageSize

from .config import CompositeConfig, CompositeRequest
from .images import PhotoSource, decode_all
from .layout import LayoutPlan, plan_layout, resolve_page_size, validate_request
from .output import apply_overlays, encode_jpeg, render_composite, to_data_url
from .output.encoder import JPEG_MIME_TYPE
from .output.overlay import OverlaySpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositeResult:
    """
    Finished composite (immutable).

    Downstream consumers treat data as an opaque blob; width, height
    and page_size are what the save and print steps need.

    Attributes:
        data: JPEG bytes
        width: Pixel width of the encoded image
        height: Pixel height of the encoded image
        page_size: Physical print size for the grid
        fit_mode: Fit policy used
        plan: Layout the grid was rendered with

    Example:
        >>> result = compose_grid(photos, GridSpec.from_preset("4x6-4cut"))
        >>> result.page_size.label, result.width, result.height
        ('4x6', 1200, 1800)
    """
    data: bytes
    width: int
    height: int
    page_size: PageSize
    fit_mode: FitMode
    plan: LayoutPlan

    @property
    def mime_type(self) -> str:
        return JPEG_MIME_TYPE

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def to_data_url(self) -> str:
        """Base64 data URL for browser-side preview and download."""
        return to_data_url(self.data, self.mime_type)


def compose_grid(
    photos: Sequence[PhotoSource],
    grid: GridSpec,
    config: Optional[CompositeConfig] = None,
    *,
    overlays: Sequence[OverlaySpec] = (),
) -> CompositeResult:
    """
    Compose photos into one print-ready JPEG.

    Args:
        photos: Photo sources in placement order (column-major)
        grid: Chosen grid layout
        config: Rendering options (defaults: 300 dpi, 2% margin, CROP_FILL)
        overlays: Post-process layers (frames, stickers) applied after
            the grid is rendered

    Returns:
        CompositeResult with JPEG bytes and layout metadata

    Raises:
        InvalidGridError: If the grid has zero columns or rows
        InvalidRequestError: If the photo count does not match the grid
        ImageDecodeError: If any photo cannot be decoded
        EncodeError: If the canvas cannot be encoded

    Example:
        >>> result = compose_grid(
        ...     [jpeg_a, jpeg_b],
        ...     GridSpec(cols=2, rows=1, id="2x4-vertical-2"),
        ... )
        >>> result.size
        (600, 1200)
    """
    request = CompositeRequest.build(photos, grid, config)
    timings = TimingLog()

    image, plan, page = _render(request, overlays, timings)

    with timed_phase(timings, "encode"):
        data = encode_jpeg(image, quality=request.config.jpeg_quality)

    logger.info(
        f"Composed {grid.cols}x{grid.rows} grid ({request.fit_mode.value}, "
        f"{page.label}) into {image.width}x{image.height} JPEG: {timings.summary()}"
    )

    return CompositeResult(
        data=data,
        width=image.width,
        height=image.height,
        page_size=page,
        fit_mode=request.fit_mode,
        plan=plan,
    )


def render_grid(
    request: CompositeRequest,
    overlays: Sequence[OverlaySpec] = (),
) -> Tuple[Image.Image, LayoutPlan, PageSize]:
    """
    Run the pipeline up to the raw canvas, without encoding.

    Identical requests with identical photo bytes always produce
    pixel-identical canvases.

    Args:
        request: Photos, grid and config
        overlays: Post-process layers

    Returns:
        (canvas, plan, page_size)

    Raises:
        InvalidGridError, InvalidRequestError, ImageDecodeError
    """
    return _render(request, overlays, TimingLog())


def _render(
    request: CompositeRequest,
    overlays: Sequence[OverlaySpec],
    timings: TimingLog,
) -> Tuple[Image.Image, LayoutPlan, PageSize]:
    # Count and shape are checked before any decode or pixel work
    validate_request(request)

    page = resolve_page_size(request.grid)

    with timed_phase(timings, "decode"):
        images = decode_all(request.photos, max_workers=request.config.max_decode_workers)

    aspects = [img.width / img.height for img in images]

    with timed_phase(timings, "plan"):
        plan = plan_layout(request, page, aspects)

    with timed_phase(timings, "render"):
        canvas = render_composite(
            images, plan, request.fit_mode, background=request.config.background
        )

    if overlays:
        with timed_phase(timings, "overlay"):
            canvas = apply_overlays(canvas, overlays)
        logger.debug(f"Applied {len(overlays)} overlays, canvas now {canvas.size}")

    return canvas, plan, page
