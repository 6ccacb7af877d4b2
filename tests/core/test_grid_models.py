"""
Unit tests for grid, page size and geometry models.
"""

import pytest

from photogrid.core.models import (
    DrawRect,
    FitMode,
    GridSpec,
    GRID_PRESETS,
    PageSize,
    Rect,
    round_half_up,
)


class TestGridSpec:
    """Tests for GridSpec dataclass."""

    def test_cell_count_when_2x3_then_6(self):
        """cell_count should be cols * rows."""
        assert GridSpec(cols=2, rows=3).cell_count == 6

    def test_from_preset_when_known_id_then_shape_and_id(self):
        """Preset ids map to the kiosk grid shapes."""
        # Act
        grid = GridSpec.from_preset("5x7-6cut")

        # Assert
        assert (grid.cols, grid.rows, grid.id) == (3, 2, "5x7-6cut")

    def test_from_preset_when_unknown_id_then_raises(self):
        with pytest.raises(KeyError):
            GridSpec.from_preset("9x9-mega")

    def test_zero_grid_when_constructed_then_allowed(self):
        """Validation is the planner's job; the model accepts any shape."""
        grid = GridSpec(cols=0, rows=0)
        assert grid.cell_count == 0

    def test_presets_when_listed_then_match_kiosk_screen(self):
        shapes = {pid: (p.cols, p.rows) for pid, p in GRID_PRESETS.items()}
        assert shapes == {
            "5x5-single": (1, 1),
            "4x6-single": (1, 1),
            "2x4-vertical-2": (2, 1),
            "4x6-4cut": (2, 2),
            "5x7-6cut": (3, 2),
        }


class TestFitMode:
    """Tests for FitMode parsing."""

    @pytest.mark.parametrize("value,expected", [
        ("crop_fill", FitMode.CROP_FILL),
        ("crop", FitMode.CROP_FILL),
        ("aspect-preserve", FitMode.ASPECT_PRESERVE),
        ("ASPECT", FitMode.ASPECT_PRESERVE),
        ("fit", FitMode.ASPECT_PRESERVE),
        (FitMode.CROP_FILL, FitMode.CROP_FILL),
    ])
    def test_parse_when_alias_then_mode(self, value, expected):
        assert FitMode.parse(value) is expected

    def test_parse_when_unknown_then_raises(self):
        with pytest.raises(ValueError):
            FitMode.parse("stretch")


class TestPageSize:

    def test_to_pixels_when_300dpi_then_inches_times_dpi(self):
        assert PageSize(4, 6, "4x6").to_pixels(300) == (1200, 1800)

    def test_round_half_up_when_half_then_rounds_up(self):
        """Unlike round(), halves go up (0.5 -> 1, 2.5 -> 3)."""
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(5.7) == 6
        assert round_half_up(5.4) == 5


class TestRect:

    def test_box_when_created_then_pil_tuple(self):
        cell = Rect(x=12, y=12, width=282, height=1176)
        assert cell.box == (12, 12, 294, 1188)
        assert cell.right == 294
        assert cell.bottom == 1188

    def test_contains_when_on_edges_then_right_bottom_exclusive(self):
        cell = Rect(0, 0, 10, 10)
        assert cell.contains(0, 0)
        assert cell.contains(9, 9)
        assert not cell.contains(10, 5)
        assert not cell.contains(5, 10)

    def test_init_when_zero_width_then_raises(self):
        with pytest.raises(ValueError, match="size must be positive"):
            Rect(0, 0, 0, 10)

    def test_init_when_negative_origin_then_raises(self):
        with pytest.raises(ValueError, match="origin must be non-negative"):
            Rect(-1, 0, 10, 10)


class TestDrawRect:

    def test_snap_when_fractional_then_rounds_half_up(self):
        rect = DrawRect(x=10.5, y=0.0, width=99.5, height=50.2)
        assert rect.snap() == Rect(11, 0, 100, 50)

    def test_snap_when_tiny_then_keeps_one_pixel(self):
        rect = DrawRect(x=0.0, y=0.0, width=0.2, height=10.0)
        assert rect.snap().width == 1
