"""
Unit tests for JPEG encoding and data URLs.
"""

import base64
import io

import pytest
from PIL import Image

from photogrid.compositor.errors import EncodeError
from photogrid.compositor.output.encoder import JPEG_MIME_TYPE, encode_jpeg, to_data_url


class TestEncodeJpeg:

    def test_encode_when_rgb_then_jpeg_bytes(self, make_image):
        data = encode_jpeg(make_image(64, 32, "red"))

        assert data[:2] == b"\xff\xd8"
        with Image.open(io.BytesIO(data)) as decoded:
            assert decoded.format == "JPEG"
            assert decoded.size == (64, 32)

    def test_encode_when_rgba_then_converted(self):
        data = encode_jpeg(Image.new("RGBA", (10, 10), (0, 0, 255, 255)))

        with Image.open(io.BytesIO(data)) as decoded:
            assert decoded.mode == "RGB"

    def test_encode_when_same_pixels_then_same_bytes(self, make_image):
        image = make_image(50, 50, "blue")
        assert encode_jpeg(image) == encode_jpeg(image)

    def test_encode_when_lower_quality_then_smaller(self, make_image):
        image = make_image(200, 200, "white")
        for x in range(0, 200, 7):
            image.paste((x, 255 - x, 40), (x, 0, x + 3, 200))

        assert len(encode_jpeg(image, quality=30)) < len(encode_jpeg(image, quality=95))

    def test_encode_when_pillow_fails_then_encode_error(self, make_image, monkeypatch):
        image = make_image(10, 10)

        def broken_save(*args, **kwargs):
            raise OSError("encoder error -2")

        monkeypatch.setattr(image, "save", broken_save)

        with pytest.raises(EncodeError, match="10x10"):
            encode_jpeg(image)


class TestDataUrl:

    def test_data_url_when_jpeg_then_browser_format(self):
        url = to_data_url(b"\xff\xd8abc")

        assert url.startswith(f"data:{JPEG_MIME_TYPE};base64,")
        assert base64.b64decode(url.split(",", 1)[1]) == b"\xff\xd8abc"
