"""Unit-tagged measures: volume, mass, lever arm, center of gravity, moment.

Each measure is a closed set of variants selected by its ``unit`` tag, never a
class hierarchy. Arithmetic only ever happens on the canonical accessors:

==================  ==================  =====================
Measure             Variants            Canonical accessor
==================  ==================  =====================
``Volume``          L, gal              ``liters()``
``Mass``            kg, avgas, mogas    ``kilograms()``
``LeverArm``        m, mm               ``meters()``
``CenterOfGravity`` m, mm               ``millimeters()``
``MassMoment``      kg·m                ``kilogram_meters()``
==================  ==================  =====================

Lever arms and centers of gravity share the same datum; positive values are
aft of it and negative values are valid positions ahead of it.
"""

from __future__ import annotations

from pydantic import model_validator

from wnb import config
from wnb.contracts.common import Finite, NonNegativeFinite, ValueModel
from wnb.contracts.enums import LengthUnit, MassUnit, VolumeUnit

MILLIMETERS_PER_METER = 1000.0


def meters_to_millimeters(meters: float) -> float:
    return meters * MILLIMETERS_PER_METER


def millimeters_to_meters(millimeters: float) -> float:
    return millimeters / MILLIMETERS_PER_METER


def fuel_density_kg_per_liter(unit: MassUnit) -> float:
    """Configured density of the fuel behind a fuel-mass unit tag."""
    if unit is MassUnit.AVGAS:
        return config.avgas_density_kg_per_liter()
    if unit is MassUnit.MOGAS:
        return config.mogas_density_kg_per_liter()
    raise ValueError(f"{unit.value} is not a fuel")


class Volume(ValueModel):
    """A fuel volume, never negative."""

    unit: VolumeUnit = VolumeUnit.LITER
    value: NonNegativeFinite

    @classmethod
    def liter(cls, value: float) -> Volume:
        return cls.create(unit=VolumeUnit.LITER, value=value)

    @classmethod
    def gallon(cls, value: float) -> Volume:
        return cls.create(unit=VolumeUnit.GALLON, value=value)

    def liters(self) -> float:
        if self.unit is VolumeUnit.GALLON:
            return self.value * config.LITERS_PER_GALLON
        return self.value

    def gallons(self) -> float:
        if self.unit is VolumeUnit.GALLON:
            return self.value
        return self.value / config.LITERS_PER_GALLON

    def __str__(self) -> str:
        return f"{self.value:.2f}{self.unit.value}"


class Mass(ValueModel):
    """A mass entered in kilograms or as a volume of fuel.

    ``kg`` masses carry ``value``; ``avgas`` and ``mogas`` masses carry
    ``volume`` and are converted through the configured fuel density (see
    ``wnb.config``) each time ``kilograms()`` is called.
    """

    unit: MassUnit = MassUnit.KILOGRAM
    value: NonNegativeFinite | None = None
    volume: Volume | None = None

    @model_validator(mode="after")
    def check_payload(self) -> Mass:
        if self.unit is MassUnit.KILOGRAM:
            if self.value is None or self.volume is not None:
                raise ValueError("a kg mass needs a value and no volume")
        elif self.volume is None or self.value is not None:
            raise ValueError(f"an {self.unit.value} mass needs a volume and no value")
        return self

    @classmethod
    def kilo(cls, value: float) -> Mass:
        return cls.create(unit=MassUnit.KILOGRAM, value=value)

    @classmethod
    def avgas(cls, volume: Volume) -> Mass:
        return cls.create(unit=MassUnit.AVGAS, volume=volume)

    @classmethod
    def mogas(cls, volume: Volume) -> Mass:
        return cls.create(unit=MassUnit.MOGAS, volume=volume)

    @property
    def is_fuel(self) -> bool:
        return self.unit is not MassUnit.KILOGRAM

    def kilograms(self) -> float:
        if self.volume is None:
            return self.value
        return self.volume.liters() * fuel_density_kg_per_liter(self.unit)

    def to_avgas(self) -> Mass:
        """Express this mass as liters of avgas."""
        liters = self.kilograms() / config.avgas_density_kg_per_liter()
        return Mass.avgas(Volume.liter(liters))

    def to_mogas(self) -> Mass:
        """Express this mass as liters of mogas."""
        liters = self.kilograms() / config.mogas_density_kg_per_liter()
        return Mass.mogas(Volume.liter(liters))

    def unit_label(self) -> str:
        """Unit shown next to the entered value, e.g. ``kg`` or ``0.72kg/L``."""
        if self.volume is None:
            return "kg"
        density = fuel_density_kg_per_liter(self.unit)
        if self.volume.unit is VolumeUnit.GALLON:
            return f"{density * config.LITERS_PER_GALLON:.2f}kg/gal"
        return f"{density:.2f}kg/L"

    def __str__(self) -> str:
        if self.volume is None:
            return f"{self.value:.2f}kg"
        return f"{self.volume} {self.unit.value}"


class LeverArm(ValueModel):
    """Longitudinal distance of a load from the datum."""

    unit: LengthUnit = LengthUnit.METER
    value: Finite

    @classmethod
    def meter(cls, value: float) -> LeverArm:
        return cls.create(unit=LengthUnit.METER, value=value)

    @classmethod
    def millimeter(cls, value: float) -> LeverArm:
        return cls.create(unit=LengthUnit.MILLIMETER, value=value)

    def meters(self) -> float:
        if self.unit is LengthUnit.MILLIMETER:
            return millimeters_to_meters(self.value)
        return self.value


class CenterOfGravity(ValueModel):
    """Balance point position, relative to the same datum as ``LeverArm``."""

    unit: LengthUnit = LengthUnit.MILLIMETER
    value: Finite

    @classmethod
    def millimeter(cls, value: float) -> CenterOfGravity:
        return cls.create(unit=LengthUnit.MILLIMETER, value=value)

    @classmethod
    def meter(cls, value: float) -> CenterOfGravity:
        return cls.create(unit=LengthUnit.METER, value=value)

    def millimeters(self) -> float:
        if self.unit is LengthUnit.METER:
            return meters_to_millimeters(self.value)
        return self.value

    def meters(self) -> float:
        if self.unit is LengthUnit.METER:
            return self.value
        return millimeters_to_meters(self.value)


class MassMoment(ValueModel):
    """Torque of a mass about the datum, in kg·m."""

    value: Finite

    @classmethod
    def kgm(cls, value: float) -> MassMoment:
        return cls.create(value=value)

    def kilogram_meters(self) -> float:
        return self.value
