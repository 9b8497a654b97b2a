"""Enumerations shared across all weight & balance contracts."""

from enum import Enum


class VolumeUnit(str, Enum):
    LITER = "L"
    GALLON = "gal"


class LengthUnit(str, Enum):
    """Unit of a longitudinal position measured from the datum."""
    METER = "m"
    MILLIMETER = "mm"


class MassUnit(str, Enum):
    """How a mass was entered: directly in kilograms or as a fuel volume."""
    KILOGRAM = "kg"
    AVGAS = "avgas"
    MOGAS = "mogas"


class EnvelopeStatus(str, Enum):
    """Classification of a loading against the certified envelope."""
    OK = "ok"
    UNDERWEIGHT = "underweight"
    OVERWEIGHT = "overweight"
    FORWARD_CG_EXCEEDED = "forward_cg_exceeded"
    AFT_CG_EXCEEDED = "aft_cg_exceeded"


class PlotAxis(str, Enum):
    """Quantity plotted on the horizontal axis of a weight & balance chart."""
    CENTER_OF_GRAVITY = "cg"
    MASS_MOMENT = "moment"


class VisualizationFormat(str, Enum):
    SVG = "svg"
