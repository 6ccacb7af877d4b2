"""
Module: compositor.config

Purpose:
    Configuration dataclasses for a composition call. Immutable
    configuration with validation on construction, passed by value
    into the layout planner; there is no global configuration state.

Key Classes:
    - CompositeConfig: Rendering options (dpi, margin, fit mode, ...)
    - CompositeRequest: Photos + grid + config for one composition

Dependencies:
    - dataclasses (std)
    - core.models: GridSpec, FitMode

Used By:
    - compositor.controller: compose_grid / render_grid
    - compositor.layout.planner: plan_layout
    - photogrid.cli: Builds config from flags and settings files
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional, Sequence

from photogrid.core.models import FitMode, GridSpec

logger = logging.getLogger(__name__)

DEFAULT_DPI = 300
DEFAULT_MARGIN_PERCENT = 2.0
DEFAULT_JPEG_QUALITY = 95


@dataclass(frozen=True)
class CompositeConfig:
    """
    Rendering options for a grid composite (immutable).

    Attributes:
        dpi: Print resolution in dots per inch
        margin_percent: Margin as a percentage of the reference size
            (shorter canvas side for CROP_FILL, shorter cell side for
            ASPECT_PRESERVE)
        fit_mode: How photos are fitted into cells
        max_cell_width_in: ASPECT_PRESERVE base cell size in inches;
            None derives it from the page size
        jpeg_quality: Pillow JPEG quality (1-100)
        background: Canvas fill colour (any Pillow colour spec)
        max_decode_workers: Thread pool size for decoding photos

    Example:
        >>> config = CompositeConfig(dpi=300, fit_mode=FitMode.ASPECT_PRESERVE)
        >>> config.margin_percent
        2.0
    """

    dpi: int = DEFAULT_DPI
    margin_percent: float = DEFAULT_MARGIN_PERCENT
    fit_mode: FitMode = FitMode.CROP_FILL
    max_cell_width_in: Optional[float] = None
    jpeg_quality: int = DEFAULT_JPEG_QUALITY
    background: str = "white"
    max_decode_workers: int = 4

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive: {self.dpi}")
        if self.margin_percent < 0:
            raise ValueError(f"margin_percent must be non-negative: {self.margin_percent}")
        if self.max_cell_width_in is not None and self.max_cell_width_in <= 0:
            raise ValueError(f"max_cell_width_in must be positive: {self.max_cell_width_in}")
        if not 1 <= self.jpeg_quality <= 100:
            raise ValueError(f"jpeg_quality must be in 1..100: {self.jpeg_quality}")
        if self.max_decode_workers < 1:
            raise ValueError(f"max_decode_workers must be >= 1: {self.max_decode_workers}")
        if not isinstance(self.fit_mode, FitMode):
            raise ValueError(f"fit_mode must be a FitMode: {self.fit_mode!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CompositeConfig:
        """
        Build a config from kiosk settings (e.g. parsed JSON).

        Unknown keys are ignored. A malformed value is logged and the
        default is used instead, so a bad settings file never stops
        the booth from printing.

        Args:
            data: Mapping of field name to raw value

        Returns:
            Validated CompositeConfig
        """
        defaults = cls()
        converters = {
            "dpi": int,
            "margin_percent": float,
            "fit_mode": FitMode.parse,
            "max_cell_width_in": lambda v: None if v is None else float(v),
            "jpeg_quality": int,
            "background": str,
            "max_decode_workers": int,
        }
        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            raw = data[f.name]
            try:
                value = converters[f.name](raw)
                # Validate the single field against otherwise-default values
                cls(**{f.name: value})
            except (TypeError, ValueError) as e:
                logger.warning(
                    f"Invalid setting {f.name}={raw!r} ({e}); "
                    f"using default {getattr(defaults, f.name)!r}"
                )
                continue
            values[f.name] = value

        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            logger.debug(f"Ignoring unknown settings: {sorted(unknown)}")

        return cls(**values)


@dataclass(frozen=True)
class CompositeRequest:
    """
    Everything needed to compose one grid image (immutable).

    The photo count is not checked here; plan_layout and the controller
    reject a mismatch with InvalidRequestError before any pixel work.

    Attributes:
        photos: Ordered photo sources (bytes, data URLs or PIL images)
        grid: Chosen grid layout
        config: Rendering options
    """

    photos: tuple
    grid: GridSpec
    config: CompositeConfig = field(default_factory=CompositeConfig)

    @classmethod
    def build(
        cls,
        photos: Sequence[Any],
        grid: GridSpec,
        config: Optional[CompositeConfig] = None,
    ) -> CompositeRequest:
        """Create a request from any photo sequence."""
        return cls(photos=tuple(photos), grid=grid, config=config or CompositeConfig())

    @property
    def dpi(self) -> int:
        return self.config.dpi

    @property
    def margin_percent(self) -> float:
        return self.config.margin_percent

    @property
    def fit_mode(self) -> FitMode:
        return self.config.fit_mode

    @property
    def max_cell_width_in(self) -> Optional[float]:
        return self.config.max_cell_width_in

    @property
    def photo_count(self) -> int:
        return len(self.photos)
