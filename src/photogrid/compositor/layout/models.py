"""
Module: compositor.layout.models

Purpose:
    Data model for a planned grid layout. A LayoutPlan is computed
    fresh for every request and never mutated afterwards.

Key Classes:
    - LayoutPlan: Canvas size, margin and cell rectangles

Dependencies:
    - dataclasses (std)
    - core.models: Rect, PageSize, FitMode

Used By:
    - compositor.layout.planner: Creates LayoutPlans
    - compositor.output.renderer: Paints photos into plan.cells
"""

from __future__ import annotations

from dataclasses import dataclass

from photogrid.core.models import FitMode, PageSize, Rect


@dataclass(frozen=True)
class LayoutPlan:
    """
    Complete layout for one composite (immutable).

    Cells are listed in placement order: cells[i] receives photo i.
    Placement is column-major, so for a 2x2 grid cells[1] is the
    bottom-left cell, not the top-right one.

    Attributes:
        canvas_width: Output width in pixels
        canvas_height: Output height in pixels
        margin_px: Margin around and between cells in pixels
        cell_width: Width shared by every cell
        cell_height: Height shared by every cell
        cells: One Rect per photo, in placement order
        fit_mode: Fit policy the plan was computed for
        page_size: Print size the plan was computed for
        cols: Grid columns
        rows: Grid rows

    Example:
        >>> plan.canvas_size
        (600, 1200)
        >>> plan.cell_at(row=0, col=1)
        Rect(x=306, y=12, width=282, height=1176)
    """

    canvas_width: int
    canvas_height: int
    margin_px: int
    cell_width: int
    cell_height: int
    cells: tuple[Rect, ...]
    fit_mode: FitMode
    page_size: PageSize
    cols: int
    rows: int

    @property
    def canvas_size(self) -> tuple[int, int]:
        """(width, height) in pixels, as Pillow expects."""
        return (self.canvas_width, self.canvas_height)

    @property
    def cell_count(self) -> int:
        return len(self.cells)

    def cell_at(self, row: int, col: int) -> Rect:
        """
        Cell rectangle at a grid position.

        Raises:
            IndexError: If row/col is outside the grid
        """
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) outside {self.cols}x{self.rows} grid")
        return self.cells[col * self.rows + row]
