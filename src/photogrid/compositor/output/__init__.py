"""
Module: compositor.output

Purpose:
    Rendering and output generation for the compositor.
    Paints the planned grid, applies post-process overlays, encodes
    JPEG and lays the result onto a print sheet.

Key Functions:
    - render_composite(): Paint photos into a LayoutPlan
    - encode_jpeg(): Canvas -> JPEG bytes
    - apply_overlay(): Frame / sticker / text post-process
    - render_print_sheet(): Composite -> page-sized PDF

Dependencies:
    - PIL: Image handling
    - reportlab: PDF generation
    - compositor.layout.models: LayoutPlan

Used By:
    - compositor.controller: Pipeline orchestration
"""

from .renderer import render_composite
from .encoder import encode_jpeg, to_data_url
from .overlay import (
    FrameStyle,
    LayerOverlay,
    TextOverlay,
    FRAME_PRESETS,
    get_frame,
    apply_overlay,
    apply_overlays,
)
from .print_sheet import render_print_sheet

__all__ = [
    "render_composite",
    "encode_jpeg",
    "to_data_url",
    "FrameStyle",
    "LayerOverlay",
    "TextOverlay",
    "FRAME_PRESETS",
    "get_frame",
    "apply_overlay",
    "apply_overlays",
    "render_print_sheet",
]
