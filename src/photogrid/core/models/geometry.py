"""
Module: geometry

Purpose:
    Pixel rectangles for grid cells and drawn photo regions.

Key Classes:
    - Rect: Integer cell rectangle on the output canvas
    - DrawRect: Float rectangle a photo is scaled into

Dependencies:
    - dataclasses (std)
"""

from __future__ import annotations

from dataclasses import dataclass

from .grid import round_half_up


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Axis-aligned pixel rectangle, origin at the canvas top-left.

    Invariants:
        - x >= 0, y >= 0
        - width > 0, height > 0

    Example:
        >>> cell = Rect(x=12, y=12, width=282, height=1176)
        >>> cell.box
        (12, 12, 294, 1188)
    """

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        """Validate rectangle on construction."""
        if self.x < 0 or self.y < 0:
            raise ValueError(f"origin must be non-negative: ({self.x}, {self.y})")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"size must be positive: {self.width}x{self.height}")

    @property
    def right(self) -> int:
        """X coordinate one past the last column (exclusive)."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Y coordinate one past the last row (exclusive)."""
        return self.y + self.height

    @property
    def aspect(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def box(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) tuple for PIL."""
        return (self.x, self.y, self.right, self.bottom)

    def contains(self, x: int, y: int) -> bool:
        """True if pixel (x, y) lies inside the rectangle."""
        return self.x <= x < self.right and self.y <= y < self.bottom


@dataclass(frozen=True, slots=True)
class DrawRect:
    """
    Unrounded destination rectangle of a letterboxed photo.

    Kept in floats so the drawn aspect ratio can be checked exactly;
    snap() gives the raster rectangle actually painted.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def snap(self) -> Rect:
        """Round to whole pixels, keeping at least one pixel per side."""
        return Rect(
            x=round_half_up(self.x),
            y=round_half_up(self.y),
            width=max(1, round_half_up(self.width)),
            height=max(1, round_half_up(self.height)),
        )
