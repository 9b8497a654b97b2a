"""Moment — one loaded item: a mass placed at a lever arm."""

from __future__ import annotations

from pydantic import Field

from wnb.contracts.common import ValueModel
from wnb.contracts.units import LeverArm, Mass, MassMoment


class Moment(ValueModel):
    """A load station entry on the loading sheet (crew, baggage, fuel, ...)."""

    name: str = Field(default="", max_length=100, description="e.g. 'Pilot', 'Fuel main'")
    arm: LeverArm
    mass: Mass

    @classmethod
    def new(cls, arm: LeverArm, mass: Mass, name: str = "") -> Moment:
        return cls.create(name=name, arm=arm, mass=mass)

    def torque(self) -> MassMoment:
        """Mass (kg) × arm (m).

        Raises:
            InvalidInputError: If the product overflows to infinity.
        """
        return MassMoment.kgm(self.mass.kilograms() * self.arm.meters())
