"""
Module: compositor.output.overlay

Purpose:
    Post-process layers drawn onto a finished composite: decorative
    frame borders, sticker layers and text stickers. Each overlay is a
    plain spec object; apply_overlay() dispatches on its type and
    always returns a new image.

Key Classes:
    - FrameStyle: Border / padding / inner border / film holes
    - LayerOverlay: RGBA layer alpha-composited at a position
    - TextOverlay: Text (or emoji) sticker centered on a point

Key Functions:
    - apply_overlay(): Apply one overlay spec
    - apply_overlays(): Apply several in order
    - get_frame(): Look up a kiosk frame preset

Dependencies:
    - PIL: Image drawing

Used By:
    - compositor.controller: overlays= argument of compose_grid
    - photogrid.cli: --frame option
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

# Film strip hole settings
HOLE_DIAMETER = 8
HOLE_MARGIN = 10
HOLE_COUNT = 4
HOLE_COLOR = "#333333"

DEFAULT_FONT_SIZE = 48
DEFAULT_TEXT_COLOR = "black"


@dataclass(frozen=True)
class FrameStyle:
    """
    Decorative border around the whole composite.

    The canvas grows by border_width + padding on every side, plus
    (bottom_padding - padding) extra at the bottom for polaroid-style
    frames.

    Attributes:
        id: Preset identifier
        name: Display name
        border_width: Outer border thickness in pixels
        border_color: Border and padding fill colour
        padding: Gap between border and photo in pixels
        bottom_padding: Bottom gap replacing padding (None = same as padding)
        inner_border_width: Thickness of a line hugging the photo (0 = none)
        inner_border_color: Colour of that line
        film_holes: Draw film-strip sprocket holes on both sides
    """

    id: str
    name: str
    border_width: int = 0
    border_color: str = "#FFFFFF"
    padding: int = 0
    bottom_padding: Optional[int] = None
    inner_border_width: int = 0
    inner_border_color: Optional[str] = None
    film_holes: bool = False

    @property
    def is_empty(self) -> bool:
        """True if the frame adds nothing to the image."""
        return (
            self.border_width == 0
            and self.padding == 0
            and not self.bottom_padding
            and not self.film_holes
        )

    @property
    def extra_bottom(self) -> int:
        if self.bottom_padding is None:
            return 0
        return self.bottom_padding - self.padding


@dataclass(frozen=True)
class LayerOverlay:
    """
    Pre-rendered layer (e.g. a sticker sheet) composited over the image.

    Attributes:
        layer: Image with alpha; converted to RGBA when drawn
        position: Top-left corner on the target image
    """

    layer: Image.Image
    position: Tuple[int, int] = (0, 0)


@dataclass(frozen=True)
class TextOverlay:
    """
    Text sticker centered on a point, optionally rotated.

    Attributes:
        text: Text or emoji to draw
        position: Center point on the target image
        font_size: Font size in pixels
        color: Fill colour
        rotation: Counter-clockwise rotation in degrees
    """

    text: str
    position: Tuple[int, int]
    font_size: int = DEFAULT_FONT_SIZE
    color: str = DEFAULT_TEXT_COLOR
    rotation: float = 0.0


OverlaySpec = Union[FrameStyle, LayerOverlay, TextOverlay]


FRAME_PRESETS: dict[str, FrameStyle] = {
    frame.id: frame
    for frame in (
        FrameStyle("none", "No Frame"),
        FrameStyle("classic-white", "Classic White", 20, "#FFFFFF", 10),
        FrameStyle("elegant-black", "Elegant Black", 15, "#000000", 5),
        FrameStyle("polaroid", "Polaroid", 15, "#F5F5F5", 15, bottom_padding=60),
        FrameStyle("gold-luxury", "Gold Luxury", 25, "#FFD700", 8,
                   inner_border_width=3, inner_border_color="#B8860B"),
        FrameStyle("modern-rose", "Modern Rose", 18, "#FF6B6A", 10),
        FrameStyle("vintage-wood", "Vintage Wood", 30, "#8B4513", 0),
        FrameStyle("neon-glow", "Neon Glow", 12, "#00FFFF", 5),
        FrameStyle("double-border", "Double Border", 20, "#2C3E50", 15,
                   inner_border_width=5, inner_border_color="#ECF0F1"),
        FrameStyle("rounded-modern", "Rounded Modern", 15, "#FFFFFF", 10),
        FrameStyle("pastel-dream", "Pastel Dream", 20, "#FFE5EC", 12,
                   inner_border_width=2, inner_border_color="#FFC1D5"),
        FrameStyle("film-strip", "Film Strip", 25, "#1a1a1a", 5, film_holes=True),
    )
}


def get_frame(frame_id: str) -> FrameStyle:
    """
    Look up a kiosk frame preset.

    Raises:
        KeyError: If frame_id is unknown
    """
    try:
        return FRAME_PRESETS[frame_id]
    except KeyError:
        raise KeyError(f"Unknown frame {frame_id!r}; choose from {sorted(FRAME_PRESETS)}") from None


def apply_overlay(image: Image.Image, overlay: OverlaySpec) -> Image.Image:
    """
    Apply one overlay spec to an image.

    The input is copied, never modified.

    Args:
        image: Finished composite
        overlay: FrameStyle, LayerOverlay or TextOverlay

    Returns:
        New RGB image (larger than the input for non-empty frames)

    Raises:
        TypeError: If overlay is not a known spec type

    Example:
        >>> framed = apply_overlay(composite, get_frame("polaroid"))
        >>> framed.height == composite.height + 2 * (15 + 15) + 45
        True
    """
    if isinstance(overlay, FrameStyle):
        return _apply_frame(image, overlay)
    if isinstance(overlay, LayerOverlay):
        return _apply_layer(image, overlay)
    if isinstance(overlay, TextOverlay):
        return _apply_text(image, overlay)
    raise TypeError(f"Unsupported overlay spec: {type(overlay).__name__}")


def apply_overlays(image: Image.Image, overlays: Iterable[OverlaySpec]) -> Image.Image:
    """Apply overlays in order; returns a copy even when there are none."""
    result = image.copy()
    for overlay in overlays:
        result = apply_overlay(result, overlay)
    return result


def _apply_frame(image: Image.Image, frame: FrameStyle) -> Image.Image:
    """Grow the canvas and draw border, inner border and film holes."""
    if frame.is_empty:
        return image.copy()

    inset = frame.border_width + frame.padding
    width = image.width + inset * 2
    height = image.height + inset * 2 + frame.extra_bottom

    result = Image.new("RGB", (width, height), frame.border_color)
    draw = ImageDraw.Draw(result)

    if frame.inner_border_width and frame.inner_border_color:
        size = frame.inner_border_width
        draw.rectangle(
            (inset - size, inset - size, inset + image.width + size - 1, inset + image.height + size - 1),
            fill=frame.inner_border_color,
        )

    result.paste(image.convert("RGB"), (inset, inset))

    if frame.film_holes:
        _draw_film_holes(draw, width, height)

    logger.debug(f"Applied frame {frame.id!r}: {image.size} -> {result.size}")
    return result


def _draw_film_holes(draw: ImageDraw.ImageDraw, width: int, height: int) -> None:
    """Sprocket holes down both edges, evenly spaced top to bottom."""
    radius = HOLE_DIAMETER / 2
    spacing = (height - HOLE_MARGIN * 2) / (HOLE_COUNT - 1)
    for i in range(HOLE_COUNT):
        cy = HOLE_MARGIN + i * spacing
        for cx in (HOLE_MARGIN, width - HOLE_MARGIN):
            draw.ellipse((cx - radius, cy - radius, cx + radius, cy + radius), fill=HOLE_COLOR)


def _apply_layer(image: Image.Image, overlay: LayerOverlay) -> Image.Image:
    """Alpha-composite a layer; parts outside the image are clipped."""
    base = image.convert("RGBA")
    layer = overlay.layer.convert("RGBA")
    canvas = Image.new("RGBA", base.size, (0, 0, 0, 0))
    canvas.paste(layer, overlay.position)
    return Image.alpha_composite(base, canvas).convert("RGB")


def _apply_text(image: Image.Image, overlay: TextOverlay) -> Image.Image:
    """Render text on its own layer, rotate it, composite it centered."""
    font = _load_font(overlay.font_size)
    probe = ImageDraw.Draw(Image.new("RGBA", (1, 1)))
    left, top, right, bottom = probe.textbbox((0, 0), overlay.text, font=font)

    text_layer = Image.new("RGBA", (max(1, right - left), max(1, bottom - top)), (0, 0, 0, 0))
    ImageDraw.Draw(text_layer).text((-left, -top), overlay.text, fill=overlay.color, font=font)
    if overlay.rotation:
        text_layer = text_layer.rotate(overlay.rotation, expand=True, resample=Image.Resampling.BICUBIC)

    cx, cy = overlay.position
    position = (cx - text_layer.width // 2, cy - text_layer.height // 2)
    return _apply_layer(image, LayerOverlay(text_layer, position))


def _load_font(size: int) -> ImageFont.FreeTypeFont:
    """
    Load a TrueType font for text stickers.

    Falls back to Pillow's built-in font if none is installed.
    """
    font_options = [
        "arial.ttf",        # Windows
        "Arial.ttf",        # Mac
        "DejaVuSans.ttf",   # Linux
        "NotoColorEmoji.ttf",
    ]
    for font_name in font_options:
        try:
            return ImageFont.truetype(font_name, size)
        except (IOError, OSError):
            continue

    logger.warning("Could not load TrueType font, using default")
    return ImageFont.load_default()
