"""CLI entry point: check a loading sheet and draw its envelope chart.

Usage:
    python -m wnb.cli --sheet loading.json --output wb.svg --cg-range 400 550 --mass-range 500 800

Exit status: 0 within limits, 3 outside the envelope, 1 on unreadable input
or a calculation error, 2 on bad arguments.

The loading sheet is an ``Airplane`` in JSON, e.g.::

    {
      "callsign": "PH-DHA",
      "moments": [
        {"name": "Empty", "arm": {"value": 0.4294}, "mass": {"value": 517}},
        {"name": "Fuel", "arm": {"value": 0.325},
         "mass": {"unit": "avgas", "volume": {"value": 55}}}
      ],
      "limits": {
        "min_mass": {"value": 558}, "max_mass": {"value": 750},
        "min_cg": {"value": 427}, "max_cg": {"value": 523}
      }
    }
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from wnb.contracts.airplane import Airplane
from wnb.contracts.enums import PlotAxis
from wnb.contracts.visualization import AxisRange, Canvas, DomainWindow, RenderConfig
from wnb.errors import WeightBalanceError
from wnb.services.visualizer import render
from wnb.services.weight_balance import compute_report

logger = logging.getLogger(__name__)


def _pixels(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number of pixels, got {raw}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Aircraft weight & balance check")
    parser.add_argument("--sheet", type=Path, required=True, help="Loading sheet (Airplane JSON)")
    parser.add_argument("--output", type=Path, help="Write the envelope chart (SVG) here")
    parser.add_argument(
        "--cg-range", type=float, nargs=2, metavar=("MIN", "MAX"),
        help="Horizontal window (mm, or kg m with --x-axis moment)",
    )
    parser.add_argument(
        "--mass-range", type=float, nargs=2, metavar=("MIN", "MAX"), help="Mass window (kg)"
    )
    parser.add_argument("--width", type=_pixels, default=1000, help="Canvas width in px")
    parser.add_argument("--height", type=_pixels, default=1000, help="Canvas height in px")
    parser.add_argument(
        "--x-axis", choices=[a.value for a in PlotAxis], default=PlotAxis.CENTER_OF_GRAVITY.value
    )
    parser.add_argument("--title", help="Chart caption (defaults to the callsign)")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_dotenv()

    if args.output is not None and (args.cg_range is None or args.mass_range is None):
        logger.error("--output requires --cg-range and --mass-range")
        return 2

    # 1. Load the sheet
    logger.info("Reading loading sheet: %s", args.sheet)
    try:
        airplane = Airplane.model_validate_json(args.sheet.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        logger.error("Cannot load %s: %s", args.sheet, exc)
        return 1

    # 2. Report
    try:
        report = compute_report(airplane)
    except WeightBalanceError as exc:
        logger.error("%s", exc)
        return 1

    logger.info(
        "%s: mass %.1f kg, moment %.2f kg m, CG %.1f mm (%s)",
        report.callsign,
        report.total_mass_kg,
        report.total_moment_kgm,
        report.center_of_gravity_mm,
        report.details,
    )

    # 3. Chart (optional)
    if args.output is not None:
        try:
            config = RenderConfig(
                canvas=Canvas(width_px=args.width, height_px=args.height),
                domain_window=DomainWindow(
                    cg=AxisRange(min=args.cg_range[0], max=args.cg_range[1]),
                    mass=AxisRange(min=args.mass_range[0], max=args.mass_range[1]),
                ),
                x_axis=PlotAxis(args.x_axis),
                title=args.title,
            )
        except ValidationError as exc:
            logger.error("Invalid chart options: %s", exc)
            return 2

        try:
            visualization = render(airplane, config)
        except WeightBalanceError as exc:
            logger.error("Cannot render chart: %s", exc)
            return 1

        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(visualization.markup, encoding="utf-8")
        logger.info("Wrote %s chart: %s", visualization.format.value, args.output)

    return 0 if report.within_limits else 3


if __name__ == "__main__":
    sys.exit(main())
