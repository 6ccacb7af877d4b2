"""
Module: compositor.images

Purpose:
    Image access for the compositor.
    Decodes photo sources and computes per-cell crop / fit geometry.

Key Functions:
    - decode_photo(): Decode a single source
    - decode_all(): Concurrent, order-preserving decode of all sources
    - crop_fill_box(): Crop region for CROP_FILL
    - fit_within(): Letterbox rectangle for ASPECT_PRESERVE

Dependencies:
    - PIL: Image manipulation
    - core.models: Rect, DrawRect

Used By:
    - compositor.output.renderer: Cell painting
    - compositor.controller: Image loading
"""

from .provider import PhotoSource, decode_photo, decode_all
from .cropper import crop_fill_box, fit_within, crop_to_cell, scale_to_rect

__all__ = [
    "PhotoSource",
    "decode_photo",
    "decode_all",
    "crop_fill_box",
    "fit_within",
    "crop_to_cell",
    "scale_to_rect",
]
