"""
Command line entry point: compose photo files into a grid print.

Example:
    photogrid a.jpg b.jpg c.jpg d.jpg --grid 4x6-4cut -o print.jpg --pdf print.pdf
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from photogrid import __version__
from photogrid.compositor import CompositeConfig, CompositeError, compose_grid
from photogrid.compositor.output import FRAME_PRESETS, get_frame, render_print_sheet
from photogrid.core.models import GRID_PRESETS, FitMode, GridSpec

logger = logging.getLogger("photogrid")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photogrid",
        description="Compose photobooth photos into a print-ready grid image",
    )
    parser.add_argument("photos", nargs="+", type=Path, help="Photo files in placement order (column-major)")
    parser.add_argument("-o", "--output", type=Path, required=True, help="Output JPEG path")

    grid_group = parser.add_argument_group("grid")
    grid_group.add_argument("--grid", choices=sorted(GRID_PRESETS), help="Kiosk grid preset")
    grid_group.add_argument("--cols", type=int, help="Grid columns (when no preset)")
    grid_group.add_argument("--rows", type=int, help="Grid rows (when no preset)")

    render_group = parser.add_argument_group("rendering")
    render_group.add_argument("--config", type=Path, help="JSON settings file (dpi, margin_percent, fit_mode, ...)")
    render_group.add_argument("--fit", help="Fit mode: crop | aspect")
    render_group.add_argument("--dpi", type=int, help="Print resolution")
    render_group.add_argument("--margin", type=float, help="Margin percent")
    render_group.add_argument("--max-cell-width", type=float, help="ASPECT_PRESERVE base cell width in inches")
    render_group.add_argument("--frame", choices=sorted(FRAME_PRESETS), help="Decorative frame preset")
    render_group.add_argument("--pdf", type=Path, help="Also write a page-sized PDF print sheet")

    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_grid(args: argparse.Namespace, parser: argparse.ArgumentParser) -> GridSpec:
    if args.grid:
        return GridSpec.from_preset(args.grid)
    if args.cols is None or args.rows is None:
        parser.error("either --grid or both --cols and --rows are required")
    return GridSpec(cols=args.cols, rows=args.rows)


def _resolve_config(args: argparse.Namespace) -> CompositeConfig:
    settings: dict = {}
    if args.config:
        settings.update(json.loads(args.config.read_text(encoding="utf-8")))

    # Flags override the settings file
    overrides = {
        "fit_mode": FitMode.parse(args.fit) if args.fit else None,
        "dpi": args.dpi,
        "margin_percent": args.margin,
        "max_cell_width_in": args.max_cell_width,
    }
    settings.update({key: value for key, value in overrides.items() if value is not None})
    return CompositeConfig.from_dict(settings)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    grid = _resolve_grid(args, parser)
    try:
        config = _resolve_config(args)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load settings: {e}")
        return 2

    photos: List[bytes] = []
    for path in args.photos:
        try:
            photos.append(path.read_bytes())
        except OSError as e:
            logger.error(f"Could not read {path}: {e}")
            return 2

    overlays = [get_frame(args.frame)] if args.frame else []

    try:
        result = compose_grid(photos, grid, config, overlays=overlays)
    except CompositeError as e:
        logger.error(f"Composition failed: {e}")
        return 1

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_bytes(result.data)
    logger.info(f"Wrote {result.width}x{result.height} {result.page_size.label} composite to {args.output}")

    if args.pdf:
        args.pdf.parent.mkdir(parents=True, exist_ok=True)
        args.pdf.write_bytes(render_print_sheet(result))
        logger.info(f"Wrote print sheet to {args.pdf}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
