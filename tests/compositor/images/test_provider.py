"""
Tests for compositor.images.provider

Test Coverage:
- decode_photo(): bytes, data URLs, base64, PIL images, failures
- decode_all(): order preservation, error index, single-photo path
"""

import base64
import time

import pytest
from PIL import Image

from photogrid.compositor.errors import ImageDecodeError
from photogrid.compositor.images import provider
from photogrid.compositor.images.provider import decode_all, decode_photo


class TestDecodePhoto:
    """Single-source decoding."""

    def test_decode_when_png_bytes_then_rgb_image(self, make_photo):
        # Arrange
        data = make_photo(40, 30, "blue")

        # Act
        image = decode_photo(data, 0)

        # Assert
        assert image.mode == "RGB"
        assert image.size == (40, 30)
        assert image.getpixel((5, 5)) == (0, 0, 255)

    def test_decode_when_jpeg_bytes_then_loaded(self, make_photo):
        image = decode_photo(make_photo(64, 48, "red", fmt="JPEG"), 0)
        assert image.size == (64, 48)

    def test_decode_when_data_url_then_same_as_bytes(self, make_photo):
        data = make_photo(20, 20, (0, 255, 0))
        url = "data:image/png;base64," + base64.b64encode(data).decode("ascii")

        image = decode_photo(url, 0)

        assert image.size == (20, 20)
        assert image.getpixel((10, 10)) == (0, 255, 0)

    def test_decode_when_raw_base64_then_decoded(self, make_photo):
        text = base64.b64encode(make_photo(8, 8, "red")).decode("ascii")
        assert decode_photo(text, 0).size == (8, 8)

    def test_decode_when_pil_image_then_copy_returned(self, make_image):
        original = make_image(10, 10, "red")

        image = decode_photo(original, 0)
        image.putpixel((0, 0), (0, 0, 0))

        assert original.getpixel((0, 0)) == (255, 0, 0)

    def test_decode_when_rgba_then_flattened_onto_white(self):
        """Fully transparent pixels become white, not black."""
        rgba = Image.new("RGBA", (4, 4), (255, 0, 0, 0))

        image = decode_photo(rgba, 0)

        assert image.mode == "RGB"
        assert image.getpixel((0, 0)) == (255, 255, 255)

    def test_decode_when_grayscale_then_converted(self):
        image = decode_photo(Image.new("L", (4, 4), 128), 0)
        assert image.mode == "RGB"
        assert image.getpixel((1, 1)) == (128, 128, 128)


class TestDecodeFailures:

    def test_decode_when_garbage_bytes_then_error_with_index(self):
        with pytest.raises(ImageDecodeError) as exc_info:
            decode_photo(b"not an image", 3)

        assert exc_info.value.index == 3
        assert "index 3" in str(exc_info.value)

    def test_decode_when_none_then_error(self):
        with pytest.raises(ImageDecodeError) as exc_info:
            decode_photo(None, 1)
        assert exc_info.value.reason == "missing photo"

    def test_decode_when_empty_bytes_then_error(self):
        with pytest.raises(ImageDecodeError):
            decode_photo(b"", 0)

    def test_decode_when_invalid_base64_then_error(self):
        with pytest.raises(ImageDecodeError):
            decode_photo("data:image/png;base64,@@@@", 0)

    def test_decode_when_non_base64_data_url_then_error(self):
        with pytest.raises(ImageDecodeError, match="base64"):
            decode_photo("data:text/plain,hello", 0)

    def test_decode_when_truncated_png_then_error(self, make_photo):
        data = make_photo(50, 50, "red")
        with pytest.raises(ImageDecodeError):
            decode_photo(data[: len(data) // 2], 0)

    def test_decode_when_unsupported_type_then_error(self):
        with pytest.raises(ImageDecodeError, match="unsupported"):
            decode_photo(12345, 0)

    def test_decode_when_pixels_exceed_limit_then_error_with_index(
        self, make_photo, monkeypatch
    ):
        """Pillow's decompression-bomb guard surfaces as a decode error."""
        # Arrange
        data = make_photo(20, 20, "red")
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)

        # Act
        with pytest.raises(ImageDecodeError) as exc_info:
            decode_photo(data, 3)

        # Assert
        assert exc_info.value.index == 3

    def test_decode_when_zero_area_image_then_error(self):
        with pytest.raises(ImageDecodeError) as exc_info:
            decode_photo(Image.new("RGB", (0, 0)), 2)

        assert exc_info.value.index == 2
        assert exc_info.value.reason == "empty image"


class TestDecodeAll:
    """Concurrent barrier decode."""

    def test_decode_all_when_empty_then_empty(self):
        assert decode_all([]) == []

    def test_decode_all_when_single_then_decoded_inline(self, make_photo):
        images = decode_all([make_photo(5, 5, "red")])
        assert len(images) == 1

    def test_decode_all_when_many_then_order_matches_input(self, four_colour_photos):
        images = decode_all(four_colour_photos)

        colours = [img.getpixel((60, 60)) for img in images]
        assert colours == [(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0)]

    def test_decode_all_when_completion_order_reversed_then_order_preserved(
        self, monkeypatch, make_image
    ):
        """Later photos finish first; results still follow input order."""
        # Arrange
        def slow_decode(source, index):
            time.sleep(0.02 * (4 - index))
            return make_image(index + 1, 1)

        monkeypatch.setattr(provider, "decode_photo", slow_decode)

        # Act
        images = decode_all(["a", "b", "c", "d"], max_workers=4)

        # Assert
        assert [img.width for img in images] == [1, 2, 3, 4]

    def test_decode_all_when_one_fails_then_reports_its_index(self, make_photo):
        sources = [make_photo(5, 5), b"broken", make_photo(5, 5)]

        with pytest.raises(ImageDecodeError) as exc_info:
            decode_all(sources)

        assert exc_info.value.index == 1

    def test_decode_all_when_several_fail_then_lowest_index(self, make_photo):
        sources = [make_photo(5, 5), make_photo(5, 5), b"bad", None, b"bad"]

        with pytest.raises(ImageDecodeError) as exc_info:
            decode_all(sources)

        assert exc_info.value.index == 2

    def test_decode_all_when_single_worker_then_still_ordered(self, four_colour_photos):
        images = decode_all(four_colour_photos, max_workers=1)
        assert images[3].getpixel((0, 0)) == (255, 255, 0)
