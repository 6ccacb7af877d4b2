import io
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import photogrid
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def make_image():
    """Factory fixture: make_image(width, height, color) -> PIL RGB image."""
    def _make(width, height, color="red"):
        return Image.new("RGB", (width, height), color)
    return _make


@pytest.fixture
def make_photo():
    """Factory fixture: make_photo(width, height, color, fmt) -> encoded bytes."""
    def _make(width, height, color="red", fmt="PNG"):
        img = Image.new("RGB", (width, height), color)
        buf = io.BytesIO()
        img.save(buf, format=fmt)
        return buf.getvalue()
    return _make


@pytest.fixture
def four_colour_photos(make_photo):
    """Four distinct solid squares: red, green, blue, yellow."""
    return [
        make_photo(120, 120, "red"),
        make_photo(120, 120, (0, 255, 0)),
        make_photo(120, 120, "blue"),
        make_photo(120, 120, "yellow"),
    ]


@pytest.fixture
def colour_close():
    """Checker: colour_close(actual, expected, tolerance=3) -> bool."""
    def _close(actual, expected, tolerance=3):
        return len(actual) == len(expected) and all(
            abs(a - e) <= tolerance for a, e in zip(actual, expected)
        )
    return _close
