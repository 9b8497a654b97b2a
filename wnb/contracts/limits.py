"""Certified mass / center-of-gravity limits (the envelope).

The envelope is an axis-aligned rectangle in (CG, mass) space. Consumers that
need the shape (the visualizer) go through ``Limits.envelope()`` and
``Limits.classify()`` only, so an aircraft with a non-rectangular CG envelope
can later be supported by a model that returns its own polygon from those two
methods.
"""

from __future__ import annotations

from pydantic import Field, model_validator

from wnb.contracts.common import Finite, ValueModel
from wnb.contracts.enums import EnvelopeStatus
from wnb.contracts.units import CenterOfGravity, Mass


class EnvelopePoint(ValueModel):
    """A corner of the weight & balance envelope.

    The ordered list of points forms a closed polygon.
    """

    cg_mm: Finite = Field(..., description="Center of gravity in mm aft of datum")
    mass_kg: Finite = Field(..., ge=0, description="Mass in kg")


class Limits(ValueModel):
    """Legal mass range and forward/aft CG limits."""

    min_mass: Mass = Field(..., description="Minimum flying mass")
    max_mass: Mass = Field(..., description="Maximum take-off mass (MTOW)")
    min_cg: CenterOfGravity = Field(..., description="Forward CG limit")
    max_cg: CenterOfGravity = Field(..., description="Aft CG limit")

    @model_validator(mode="after")
    def check_ordering(self) -> Limits:
        if self.min_mass.kilograms() > self.max_mass.kilograms():
            raise ValueError(
                f"min_mass {self.min_mass.kilograms():.2f} kg > "
                f"max_mass {self.max_mass.kilograms():.2f} kg"
            )
        if self.min_cg.millimeters() > self.max_cg.millimeters():
            raise ValueError(
                f"min_cg {self.min_cg.millimeters():.1f} mm > "
                f"max_cg {self.max_cg.millimeters():.1f} mm"
            )
        return self

    @classmethod
    def new(
        cls,
        min_mass: Mass,
        max_mass: Mass,
        min_cg: CenterOfGravity,
        max_cg: CenterOfGravity,
    ) -> Limits:
        return cls.create(min_mass=min_mass, max_mass=max_mass, min_cg=min_cg, max_cg=max_cg)

    def contains_mass(self, mass: Mass) -> bool:
        return self.min_mass.kilograms() <= mass.kilograms() <= self.max_mass.kilograms()

    def contains_cg(self, cg: CenterOfGravity) -> bool:
        return self.min_cg.millimeters() <= cg.millimeters() <= self.max_cg.millimeters()

    def classify(self, mass: Mass, cg: CenterOfGravity) -> EnvelopeStatus:
        """Classify a (mass, CG) pair. A mass violation is reported before a CG one."""
        kg = mass.kilograms()
        if kg < self.min_mass.kilograms():
            return EnvelopeStatus.UNDERWEIGHT
        if kg > self.max_mass.kilograms():
            return EnvelopeStatus.OVERWEIGHT

        mm = cg.millimeters()
        if mm < self.min_cg.millimeters():
            return EnvelopeStatus.FORWARD_CG_EXCEEDED
        if mm > self.max_cg.millimeters():
            return EnvelopeStatus.AFT_CG_EXCEEDED
        return EnvelopeStatus.OK

    def envelope(self) -> list[EnvelopePoint]:
        """Corners in drawing order: forward-light, aft-light, aft-heavy, forward-heavy."""
        fwd = self.min_cg.millimeters()
        aft = self.max_cg.millimeters()
        light = self.min_mass.kilograms()
        heavy = self.max_mass.kilograms()
        return [
            EnvelopePoint(cg_mm=fwd, mass_kg=light),
            EnvelopePoint(cg_mm=aft, mass_kg=light),
            EnvelopePoint(cg_mm=aft, mass_kg=heavy),
            EnvelopePoint(cg_mm=fwd, mass_kg=heavy),
        ]
