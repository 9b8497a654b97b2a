"""Weight & balance contracts — Pydantic v2 models for loading calculations.

Value data (immutable, created once per calculation)
----------------------------------------------------
- ``Volume``, ``Mass``, ``LeverArm``, ``CenterOfGravity``, ``MassMoment`` —
  unit-tagged measures with canonical-unit accessors
- ``Moment`` — one load: a mass at a lever arm
- ``Limits`` / ``EnvelopePoint`` — the certified mass/CG envelope
- ``Airplane`` — callsign + ordered moments + limits

Calculated (never persisted)
----------------------------
- ``LoadingReport`` — totals, CG and envelope status
- ``Visualization`` — rendered chart markup, driven by a ``RenderConfig``
"""

from wnb.contracts.enums import (
    EnvelopeStatus,
    LengthUnit,
    MassUnit,
    PlotAxis,
    VisualizationFormat,
    VolumeUnit,
)
from wnb.contracts.common import ValueModel
from wnb.contracts.units import (
    CenterOfGravity,
    LeverArm,
    Mass,
    MassMoment,
    Volume,
    fuel_density_kg_per_liter,
    meters_to_millimeters,
    millimeters_to_meters,
)
from wnb.contracts.moment import Moment
from wnb.contracts.limits import EnvelopePoint, Limits
from wnb.contracts.airplane import Airplane
from wnb.contracts.report import LoadingReport
from wnb.contracts.visualization import (
    AxisRange,
    Canvas,
    DomainWindow,
    RenderConfig,
    Visualization,
)

__all__ = [
    # Enums
    "EnvelopeStatus",
    "LengthUnit",
    "MassUnit",
    "PlotAxis",
    "VisualizationFormat",
    "VolumeUnit",
    # Common
    "ValueModel",
    # Measures
    "CenterOfGravity",
    "LeverArm",
    "Mass",
    "MassMoment",
    "Volume",
    "fuel_density_kg_per_liter",
    "meters_to_millimeters",
    "millimeters_to_meters",
    # Domain models
    "Moment",
    "EnvelopePoint",
    "Limits",
    "Airplane",
    "LoadingReport",
    # Rendering
    "AxisRange",
    "Canvas",
    "DomainWindow",
    "RenderConfig",
    "Visualization",
]
