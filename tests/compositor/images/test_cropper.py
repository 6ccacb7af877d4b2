"""
Unit tests for per-cell crop and fit geometry.
"""

import pytest

from photogrid.compositor.images.cropper import (
    crop_fill_box,
    crop_to_cell,
    fit_within,
)
from photogrid.core.models import DrawRect, Rect


class TestCropFillBox:
    """Source region covering the cell with its aspect ratio."""

    def test_box_when_photo_wider_then_sides_trimmed(self):
        assert crop_fill_box((100, 100), Rect(0, 0, 50, 100)) == (25.0, 0.0, 75.0, 100.0)

    def test_box_when_photo_taller_then_top_bottom_trimmed(self):
        assert crop_fill_box((100, 100), Rect(0, 0, 100, 50)) == (0.0, 25.0, 100.0, 75.0)

    def test_box_when_same_aspect_then_whole_photo(self):
        assert crop_fill_box((400, 300), Rect(10, 10, 200, 150)) == (0.0, 0.0, 400.0, 300.0)

    def test_box_when_computed_then_matches_cell_aspect(self):
        """Region aspect equals cell aspect, so drawing never distorts."""
        cell = Rect(12, 12, 282, 1176)

        left, top, right, bottom = crop_fill_box((1920, 1080), cell)

        assert (right - left) / (bottom - top) == pytest.approx(cell.aspect)
        assert left == pytest.approx(1920 - right)  # centered


class TestFitWithin:
    """Letterboxed destination rectangle."""

    def test_fit_when_wide_photo_in_square_then_bands_top_bottom(self):
        rect = fit_within((200, 100), Rect(0, 0, 100, 100))
        assert rect == DrawRect(x=0.0, y=25.0, width=100.0, height=50.0)

    def test_fit_when_tall_photo_in_square_then_bands_left_right(self):
        rect = fit_within((100, 200), Rect(10, 20, 100, 100))
        assert rect == DrawRect(x=35.0, y=20.0, width=50.0, height=100.0)

    @pytest.mark.parametrize("size", [(640, 480), (480, 640), (1000, 999), (3, 7)])
    def test_fit_when_any_photo_then_aspect_kept_and_inside(self, size):
        cell = Rect(6, 6, 285, 285)

        rect = fit_within(size, cell)

        assert abs(rect.aspect - size[0] / size[1]) < 1e-6
        assert rect.x >= cell.x and rect.y >= cell.y
        assert rect.x + rect.width <= cell.right + 1e-9
        assert rect.y + rect.height <= cell.bottom + 1e-9


class TestCropToCell:

    def test_crop_when_applied_then_exact_cell_size(self, make_image):
        tile = crop_to_cell(make_image(640, 480), Rect(0, 0, 100, 300))
        assert tile.size == (100, 300)

    def test_crop_when_center_coloured_then_edges_discarded(self, make_image):
        """A wide photo with red sides and a blue middle keeps only blue."""
        image = make_image(300, 100, "red")
        image.paste((0, 0, 255), (100, 0, 200, 100))

        tile = crop_to_cell(image, Rect(0, 0, 50, 50))

        assert tile.getpixel((25, 25)) == (0, 0, 255)
        assert tile.getpixel((2, 25))[2] > 200
