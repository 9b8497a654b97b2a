"""Weight & balance chart: envelope polygon plus the loading point, as SVG.

The whole canvas is the plot area. Each axis maps its value window linearly
onto the canvas:

    px = (x - x_min) / (x_max - x_min) * width_px
    py = height_px - (mass - mass_min) / (mass_max - mass_min) * height_px

Values outside the window extrapolate off-canvas; nothing is clipped or
clamped, so the window must be chosen wide enough by the caller.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from wnb.adapters.svg_writer import SvgDocument
from wnb.contracts.airplane import Airplane
from wnb.contracts.enums import EnvelopeStatus, PlotAxis
from wnb.contracts.units import millimeters_to_meters
from wnb.contracts.visualization import AxisRange, RenderConfig, Visualization
from wnb.errors import RenderingError

logger = logging.getLogger(__name__)

ENVELOPE_COLOR = "red"
ENVELOPE_OPACITY = "0.2"
INSIDE_COLOR = "green"
OUTSIDE_COLOR = "red"
GRID_COLOR = "#dddddd"
TEXT_COLOR = "black"
FONT_FAMILY = "sans-serif"

MARKER_RADIUS_PX = 5.0
GRID_DIVISIONS = 10
CAPTION_FONT_PX = 32
LABEL_FONT_PX = 16
TICK_FONT_PX = 11

X_LABELS: dict[PlotAxis, str] = {
    PlotAxis.CENTER_OF_GRAVITY: "Center of Gravity [mm]",
    PlotAxis.MASS_MOMENT: "Mass Moment [kg m]",
}
Y_LABEL = "Mass [kg]"


@dataclass(frozen=True)
class AxisTransform:
    """Affine map from a value window onto ``[0, size_px]`` pixels.

    ``inverted`` flips the axis so that larger values are drawn nearer the
    origin edge (SVG y grows downward while mass grows upward).
    """

    window: AxisRange
    size_px: int
    inverted: bool = False

    def __call__(self, value: float) -> float:
        px = (value - self.window.min) / self.window.width * self.size_px
        if not math.isfinite(px):
            raise RenderingError(
                f"{value!r} has no finite pixel position in {self.window.min} .. {self.window.max}"
            )
        return self.size_px - px if self.inverted else px


def axis_transforms(config: RenderConfig) -> tuple[AxisTransform, AxisTransform]:
    """Build the (x, y) transforms for ``config``.

    Raises:
        RenderingError: If either window axis has zero or infinite width.
    """
    window = config.domain_window
    for label, axis in (("Horizontal", window.cg), ("Mass", window.mass)):
        if axis.width == 0:
            raise RenderingError(f"{label} window has zero width ({axis.min} .. {axis.max})")
        if not math.isfinite(axis.width):
            raise RenderingError(f"{label} window is too wide ({axis.min} .. {axis.max})")

    x = AxisTransform(window=window.cg, size_px=config.canvas.width_px)
    y = AxisTransform(window=window.mass, size_px=config.canvas.height_px, inverted=True)
    return x, y


def _x_value(axis: PlotAxis) -> Callable[[float, float], float]:
    """Horizontal plot value for a (cg_mm, mass_kg) pair."""
    if axis == PlotAxis.MASS_MOMENT:
        return lambda cg_mm, mass_kg: millimeters_to_meters(cg_mm) * mass_kg
    return lambda cg_mm, mass_kg: cg_mm


def render(airplane: Airplane, config: RenderConfig) -> Visualization:
    """Draw the envelope of ``airplane.limits`` and its current loading point.

    Raises:
        RenderingError: If the domain window has zero or infinite width on
            either axis, or a point lands at no finite pixel position.
        DivisionByZeroError: If the airplane carries no mass (no point to draw).
    """
    x_tf, y_tf = axis_transforms(config)
    x_of = _x_value(config.x_axis)

    cg_mm = airplane.center_of_gravity().millimeters()
    mass_kg = airplane.total_mass().kilograms()
    status = airplane.within_limits()

    width = config.canvas.width_px
    height = config.canvas.height_px
    doc = SvgDocument(width, height)
    doc.rect(0, 0, width, height, class_="background", fill="white")

    _draw_grid(doc, x_tf, y_tf)

    corners = [
        (x_tf(x_of(p.cg_mm, p.mass_kg)), y_tf(p.mass_kg)) for p in airplane.limits.envelope()
    ]
    doc.polygon(
        corners,
        class_="envelope",
        fill=ENVELOPE_COLOR,
        fill_opacity=ENVELOPE_OPACITY,
        stroke=ENVELOPE_COLOR,
        stroke_width="1",
    )

    point_x = x_tf(x_of(cg_mm, mass_kg))
    point_y = y_tf(mass_kg)
    doc.circle(
        point_x,
        point_y,
        MARKER_RADIUS_PX,
        class_="loading",
        fill=INSIDE_COLOR if status == EnvelopeStatus.OK else OUTSIDE_COLOR,
    )

    _draw_labels(doc, config.title or airplane.callsign, X_LABELS[config.x_axis])

    logger.debug(
        "Rendered %s (%s): point at (%.1f, %.1f) px on %dx%d canvas",
        airplane.callsign, status.value, point_x, point_y, width, height,
    )
    return Visualization(markup=doc.to_string())


def _draw_grid(doc: SvgDocument, x_tf: AxisTransform, y_tf: AxisTransform) -> None:
    """Evenly spaced grid lines with their values, inside the window."""
    grid = doc.group(class_="grid", stroke=GRID_COLOR, stroke_width="1")
    ticks = doc.group(
        class_="ticks", fill=TEXT_COLOR, font_family=FONT_FAMILY, font_size=str(TICK_FONT_PX)
    )

    for i in range(GRID_DIVISIONS + 1):
        x_value = x_tf.window.min + x_tf.window.width * i / GRID_DIVISIONS
        px = x_tf(x_value)
        doc.line(px, 0, px, y_tf.size_px, parent=grid)
        doc.text(px + 2, y_tf.size_px - 4, f"{x_value:g}", parent=ticks)

        y_value = y_tf.window.min + y_tf.window.width * i / GRID_DIVISIONS
        py = y_tf(y_value)
        doc.line(0, py, x_tf.size_px, py, parent=grid)
        doc.text(2, py - 2, f"{y_value:g}", parent=ticks)


def _draw_labels(doc: SvgDocument, caption: str, x_label: str) -> None:
    width = doc.width_px
    height = doc.height_px
    labels = doc.group(class_="labels", fill=TEXT_COLOR, font_family=FONT_FAMILY)

    doc.text(
        width / 2, CAPTION_FONT_PX + 8, caption,
        parent=labels, class_="caption", font_size=str(CAPTION_FONT_PX), text_anchor="middle",
    )
    doc.text(
        width / 2, height - TICK_FONT_PX - 12, x_label,
        parent=labels, class_="x-label", font_size=str(LABEL_FONT_PX), text_anchor="middle",
    )
    y_label_x = TICK_FONT_PX + LABEL_FONT_PX + 8
    doc.text(
        y_label_x, height / 2, Y_LABEL,
        parent=labels,
        class_="y-label",
        font_size=str(LABEL_FONT_PX),
        text_anchor="middle",
        transform=f"rotate(-90 {y_label_x} {height / 2:g})",
    )
