"""
Module: compositor.images.provider

Purpose:
    Turn photo sources into decoded RGB images, concurrently.

    A source is whatever the capture or edit screen handed over:
    encoded bytes, a base64 data URL (the browser wire format), a
    raw base64 string, or an already-decoded PIL image. Nothing here
    touches the filesystem or the network.

Key Functions:
    - decode_photo(): Decode a single source
    - decode_all(): Decode every source in a thread pool and wait for all

Key Classes:
    - ImageDecodeError (re-exported from compositor.errors)

Dependencies:
    - PIL: Decoding, EXIF orientation, alpha flattening
    - concurrent.futures (std): Decode pool

Used By:
    - compositor.controller: render_grid
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Sequence, Union

from PIL import Image, ImageOps, UnidentifiedImageError

from ..errors import ImageDecodeError

logger = logging.getLogger(__name__)

PhotoSource = Union[bytes, bytearray, memoryview, str, Image.Image]

DATA_URL_PREFIX = "data:"
DEFAULT_MAX_WORKERS = 4


def decode_photo(source: PhotoSource, index: int) -> Image.Image:
    """
    Decode one photo source into a fully loaded RGB image.

    EXIF orientation is applied (browsers honour it when drawing),
    transparency is flattened onto white, and pixel data is loaded
    eagerly so a truncated file fails here rather than mid-render.

    Args:
        source: Encoded bytes, data URL, base64 string or PIL image
        index: Position of the photo in the request (for error reporting)

    Returns:
        New RGB image owned by the caller

    Raises:
        ImageDecodeError: If the source is missing or cannot be decoded
    """
    if source is None:
        raise ImageDecodeError(index, "missing photo")

    try:
        if isinstance(source, Image.Image):
            image = source.copy()
        else:
            data = _source_bytes(source)
            if not data:
                raise ImageDecodeError(index, "empty photo data")
            with Image.open(io.BytesIO(data)) as opened:
                opened.load()
                image = ImageOps.exif_transpose(opened)
                if image is opened:
                    image = opened.copy()
        if image.width < 1 or image.height < 1:
            raise ImageDecodeError(index, "empty image")
        return _to_rgb(image)
    except ImageDecodeError:
        raise
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
        TypeError,
        binascii.Error,
    ) as e:
        raise ImageDecodeError(index, str(e)) from e


def decode_all(
    sources: Sequence[PhotoSource],
    *,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> List[Image.Image]:
    """
    Decode every source concurrently and wait for all of them.

    This is a barrier, not a pipeline: nothing is returned until every
    decode has finished. Results are collected in submission order, so
    image i always corresponds to source i whichever decode completes
    first.

    Args:
        sources: Photo sources in placement order
        max_workers: Upper bound on decode threads

    Returns:
        Decoded images in the same order as sources

    Raises:
        ImageDecodeError: For the lowest failing index; decodes not yet
            started are cancelled
    """
    if not sources:
        return []

    if len(sources) == 1:
        # Single photo - no thread overhead
        return [decode_photo(sources[0], 0)]

    workers = max(1, min(max_workers, len(sources)))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="photogrid-decode") as pool:
        futures: List[Future] = [
            pool.submit(decode_photo, source, index)
            for index, source in enumerate(sources)
        ]
        images: List[Image.Image] = []
        for index, future in enumerate(futures):
            try:
                images.append(future.result())
            except ImageDecodeError:
                for pending in futures[index + 1:]:
                    pending.cancel()
                logger.error(f"Decode failed for photo {index} of {len(sources)}")
                raise

    logger.debug(f"Decoded {len(images)} photos with {workers} workers")
    return images


def _source_bytes(source: PhotoSource) -> bytes:
    """Raw encoded bytes of a non-PIL source."""
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if isinstance(source, str):
        text = source.strip()
        if text.startswith(DATA_URL_PREFIX):
            header, sep, payload = text.partition(",")
            if not sep or ";base64" not in header:
                raise ValueError("only base64 data URLs are supported")
            text = payload
        return base64.b64decode(text, validate=True)
    raise TypeError(f"unsupported photo source type: {type(source).__name__}")


def _to_rgb(image: Image.Image) -> Image.Image:
    """Convert any mode to RGB, compositing transparency over white."""
    if image.mode == "RGB":
        return image
    if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
        return Image.alpha_composite(background, rgba).convert("RGB")
    return image.convert("RGB")
