"""
Module: grid

Purpose:
    Grid, page and fit-policy models shared by every stage of the
    compositor. A GridSpec is created once when the customer picks a
    layout and is read-only from then on.

Key Classes:
    - GridSpec: cols x rows arrangement with an optional preset id
    - GridPreset: A kiosk layout offered on the grid selection screen
    - PageSize: Physical print dimensions in inches
    - FitMode: How a photo is fitted into its cell

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - compositor.layout.page_sizes: Resolves PageSize from GridSpec
    - compositor.layout.planner: Builds LayoutPlan
    - compositor.controller: Request validation
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FitMode(Enum):
    """
    Fitting policy for placing a photo inside its grid cell.

    Both policies are user-selectable and produce different layouts.

    Attributes:
        CROP_FILL: Fixed physical canvas. Every cell is fully covered and
                   whatever overhangs the cell aspect is cropped away
                   symmetrically.
        ASPECT_PRESERVE: Canvas is derived from the photos. Nothing is
                         cropped; photos are centered and letterboxed
                         with the background colour.

    Example:
        >>> FitMode.parse("aspect")
        <FitMode.ASPECT_PRESERVE: 'aspect_preserve'>
    """

    CROP_FILL = "crop_fill"
    ASPECT_PRESERVE = "aspect_preserve"

    @classmethod
    def parse(cls, value: str | FitMode) -> FitMode:
        """
        Parse a fit mode from its value or a short alias.

        Args:
            value: FitMode, "crop_fill"/"crop" or "aspect_preserve"/"aspect"/"fit"

        Returns:
            Matching FitMode

        Raises:
            ValueError: If the string is not a known mode or alias
        """
        if isinstance(value, FitMode):
            return value
        key = str(value).strip().lower().replace("-", "_")
        aliases = {
            "crop": cls.CROP_FILL,
            "fill": cls.CROP_FILL,
            "aspect": cls.ASPECT_PRESERVE,
            "fit": cls.ASPECT_PRESERVE,
        }
        if key in aliases:
            return aliases[key]
        return cls(key)


@dataclass(frozen=True, slots=True)
class GridSpec:
    """
    A fixed cols x rows arrangement of equal-sized photo cells.

    No validation happens here: page-size lookup must accept any grid,
    and the layout planner rejects empty grids with InvalidGridError.

    Attributes:
        cols: Number of columns
        rows: Number of rows
        id: Preset identifier such as "4x6-4cut" (optional)

    Example:
        >>> grid = GridSpec(cols=2, rows=2, id="4x6-4cut")
        >>> grid.cell_count
        4
    """

    cols: int
    rows: int
    id: Optional[str] = None

    @property
    def cell_count(self) -> int:
        """Number of photos the grid holds."""
        return self.cols * self.rows

    @classmethod
    def from_preset(cls, preset_id: str) -> GridSpec:
        """
        Build the grid of a known kiosk preset.

        Raises:
            KeyError: If preset_id is not in GRID_PRESETS
        """
        preset = GRID_PRESETS[preset_id]
        return cls(cols=preset.cols, rows=preset.rows, id=preset.id)


@dataclass(frozen=True)
class GridPreset:
    """Layout choice shown on the kiosk grid selection screen."""

    id: str
    name: str
    description: str
    cols: int
    rows: int


GRID_PRESETS: dict[str, GridPreset] = {
    preset.id: preset
    for preset in (
        GridPreset("5x5-single", "SINGLE", "Single photo", 1, 1),
        GridPreset("4x6-single", "SINGLE", "Single photo", 1, 1),
        GridPreset("2x4-vertical-2", "V-2 CUT", "2 vertical photos", 2, 1),
        GridPreset("4x6-4cut", "4 CUT", "4 grid cells", 2, 2),
        GridPreset("5x7-6cut", "6 CUT", "6 grid cells", 3, 2),
    )
}


@dataclass(frozen=True, slots=True)
class PageSize:
    """
    Physical print size.

    Attributes:
        width_in: Page width in inches
        height_in: Page height in inches
        label: Size name passed to the print service, e.g. "4x6"
    """

    width_in: float
    height_in: float
    label: str

    def to_pixels(self, dpi: int) -> tuple[int, int]:
        """Page size in whole pixels at dpi (half-up rounding)."""
        return round_half_up(self.width_in * dpi), round_half_up(self.height_in * dpi)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero for positives.

    Unlike round(), 0.5 -> 1 and 2.5 -> 3.
    """
    return int(math.floor(value + 0.5))
