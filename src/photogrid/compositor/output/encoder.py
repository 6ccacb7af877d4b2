"""
Module: compositor.output.encoder

Purpose:
    Serialize a finished canvas to JPEG bytes.

Key Functions:
    - encode_jpeg(): Canvas -> JPEG bytes
    - to_data_url(): JPEG bytes -> browser data URL

Dependencies:
    - PIL: JPEG encoder

Used By:
    - compositor.controller: compose_grid
"""

from __future__ import annotations

import base64
import io
import logging

from PIL import Image

from ..errors import EncodeError

logger = logging.getLogger(__name__)

DEFAULT_QUALITY = 95
JPEG_MIME_TYPE = "image/jpeg"


def encode_jpeg(image: Image.Image, quality: int = DEFAULT_QUALITY) -> bytes:
    """
    Encode an image as baseline JPEG.

    Pillow's default chroma subsampling is kept. Output is
    deterministic for identical pixels and the same libjpeg build.

    Args:
        image: Canvas to encode (converted to RGB if needed)
        quality: JPEG quality 1-100

    Returns:
        Encoded JPEG bytes

    Raises:
        EncodeError: If Pillow cannot write the image
    """
    if image.mode != "RGB":
        image = image.convert("RGB")

    buf = io.BytesIO()
    try:
        image.save(buf, format="JPEG", quality=quality)
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(f"JPEG encoding failed for {image.width}x{image.height} canvas: {e}") from e

    data = buf.getvalue()
    logger.debug(f"Encoded {image.width}x{image.height} JPEG ({len(data)} bytes, q={quality})")
    return data


def to_data_url(data: bytes, mime_type: str = JPEG_MIME_TYPE) -> str:
    """Base64 data URL, as the kiosk's browser screens expect."""
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"
