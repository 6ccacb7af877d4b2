"""
Module: compositor

Purpose:
    Grid photo composition engine for the photobooth kiosk.
    Takes the captured photos and the chosen grid layout and produces
    one print-ready JPEG with correct physical size, margins and
    per-cell placement, in either CROP_FILL or ASPECT_PRESERVE mode.

Key Functions:
    - compose_grid(): Main entry point
    - render_grid(): Pipeline without encoding
    - resolve_page_size(): Grid -> physical print size
    - plan_layout(): Canvas and cell rectangles

Key Classes:
    - CompositeConfig: Rendering options
    - CompositeRequest: Photos + grid + options
    - CompositeResult: Encoded composite
    - LayoutPlan: Planned layout

Dependencies:
    - PIL: Image manipulation
    - reportlab: Print sheet PDF

Used By:
    - photogrid.cli
"""

from .config import CompositeConfig, CompositeRequest
from .errors import (
    CompositeError,
    InvalidRequestError,
    InvalidGridError,
    ImageDecodeError,
    EncodeError,
)
from .layout import LayoutPlan, plan_layout, resolve_page_size
from .controller import compose_grid, render_grid, CompositeResult

__all__ = [
    # Config
    "CompositeConfig",
    "CompositeRequest",
    # Errors
    "CompositeError",
    "InvalidRequestError",
    "InvalidGridError",
    "ImageDecodeError",
    "EncodeError",
    # Layout
    "LayoutPlan",
    "plan_layout",
    "resolve_page_size",
    # Controller
    "compose_grid",
    "render_grid",
    "CompositeResult",
]
