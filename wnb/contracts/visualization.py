"""Rendering configuration and output for weight & balance charts."""

from pydantic import Field

from wnb.contracts.common import Finite, ValueModel
from wnb.contracts.enums import PlotAxis, VisualizationFormat


class Canvas(ValueModel):
    """Drawing size in pixels."""

    width_px: int = Field(..., gt=0)
    height_px: int = Field(..., gt=0)


class AxisRange(ValueModel):
    """Value-space interval mapped onto one canvas axis.

    ``min`` maps to the left (x) or bottom (y) edge of the canvas. A zero-width
    range is accepted here and rejected when rendering.
    """

    min: Finite
    max: Finite

    @property
    def width(self) -> float:
        return self.max - self.min


class DomainWindow(ValueModel):
    """Visible part of (CG, mass) space.

    ``cg`` is read in millimeters when plotting the center of gravity and in
    kg·m when plotting the mass moment (``PlotAxis.MASS_MOMENT``).
    """

    cg: AxisRange
    mass: AxisRange


class RenderConfig(ValueModel):
    """How to draw an airplane's envelope and loading point."""

    canvas: Canvas
    domain_window: DomainWindow
    x_axis: PlotAxis = PlotAxis.CENTER_OF_GRAVITY
    title: str | None = Field(default=None, description="Caption; defaults to the callsign")


class Visualization(ValueModel):
    """A rendered chart. Only SVG markup is produced today."""

    format: VisualizationFormat = VisualizationFormat.SVG
    markup: str

    @property
    def media_type(self) -> str:
        return "image/svg+xml"
