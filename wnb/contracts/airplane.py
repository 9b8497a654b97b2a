"""Airplane — a loading snapshot checked against its certified limits.

Totals are recomputed from the moments on every call and never stored. The
aggregate is frozen: adding a load returns a new ``Airplane``.
"""

from __future__ import annotations

import logging

from pydantic import Field

from wnb import config
from wnb.contracts.common import ValueModel
from wnb.contracts.enums import EnvelopeStatus, VolumeUnit
from wnb.contracts.limits import Limits
from wnb.contracts.moment import Moment
from wnb.contracts.units import (
    CenterOfGravity,
    LeverArm,
    Mass,
    MassMoment,
    Volume,
    fuel_density_kg_per_liter,
    meters_to_millimeters,
)
from wnb.errors import DivisionByZeroError

logger = logging.getLogger(__name__)


class Airplane(ValueModel):
    """An aircraft identified by its callsign, its loads, and its envelope."""

    callsign: str = Field(..., min_length=1, description="Registration or callsign, e.g. PH-DHA")
    moments: tuple[Moment, ...] = Field(
        default_factory=tuple,
        description="Loading sheet entries, in the order they were entered",
    )
    limits: Limits

    @classmethod
    def new(cls, callsign: str, moments: list[Moment], limits: Limits) -> Airplane:
        return cls.create(callsign=callsign, moments=tuple(moments), limits=limits)

    def total_mass(self) -> Mass:
        """Sum of all masses in kg.

        Raises:
            InvalidInputError: If the sum overflows to infinity.
        """
        return Mass.kilo(sum(m.mass.kilograms() for m in self.moments))

    def total_moment(self) -> MassMoment:
        """Sum of all torques in kg·m.

        Raises:
            InvalidInputError: If a torque or the sum overflows to infinity.
        """
        return MassMoment.kgm(sum(m.torque().kilogram_meters() for m in self.moments))

    def center_of_gravity(self) -> CenterOfGravity:
        """Mass-weighted average arm, in millimeters.

        Raises:
            DivisionByZeroError: If the total mass is zero.
        """
        kg = self.total_mass().kilograms()
        if kg == 0:
            raise DivisionByZeroError(self.callsign)
        cg_m = self.total_moment().kilogram_meters() / kg
        return CenterOfGravity.millimeter(meters_to_millimeters(cg_m))

    def within_limits(self) -> EnvelopeStatus:
        """Classify the loading against ``limits``.

        Raises:
            DivisionByZeroError: If the total mass is zero.
        """
        return self.limits.classify(self.total_mass(), self.center_of_gravity())

    def with_moment(self, moment: Moment) -> Airplane:
        """Return a copy with ``moment`` appended to the loading sheet.

        Raises:
            InvalidInputError: If ``moment`` is not a valid ``Moment``.
        """
        return Airplane.create(
            callsign=self.callsign,
            moments=(*self.moments, moment),
            limits=self.limits,
        )

    def max_loadable_moment(
        self,
        name: str,
        arm: LeverArm,
        like: Mass,
        max_volume: Volume | None = None,
    ) -> Moment:
        """Largest load that can be added at ``arm`` without leaving the envelope.

        The load is bounded by the remaining mass up to ``max_mass`` and, when
        ``arm`` lies outside the CG range, by the CG limit on that side. It is
        expressed in the same kind as ``like`` (kg, or avgas/mogas in the same
        volume unit); fuel is additionally capped at ``max_volume`` (e.g. the
        tank capacity). The magnitude of ``like`` is ignored.

        Returns:
            A ``Moment`` ready to pass to ``with_moment()``.
        """
        total_kg = self.total_mass().kilograms()
        total_kgm = self.total_moment().kilogram_meters()
        arm_m = arm.meters()
        fwd_m = self.limits.min_cg.meters()
        aft_m = self.limits.max_cg.meters()

        kg = self.limits.max_mass.kilograms() - total_kg
        if arm_m > aft_m:
            kg = min(kg, (aft_m * total_kg - total_kgm) / (arm_m - aft_m))
        elif arm_m < fwd_m:
            kg = min(kg, (total_kgm - fwd_m * total_kg) / (fwd_m - arm_m))
        kg = max(kg, 0.0)

        logger.debug(
            "%s: max %.2f kg loadable at %.3f m (total %.2f kg)",
            self.callsign, kg, arm_m, total_kg,
        )
        return Moment.new(arm, _mass_like(kg, like, max_volume), name=name)


def _mass_like(kg: float, like: Mass, max_volume: Volume | None) -> Mass:
    """Express ``kg`` in the same kind of mass as ``like``."""
    if like.volume is None:
        return Mass.kilo(kg)

    liters = kg / fuel_density_kg_per_liter(like.unit)
    if max_volume is not None:
        liters = min(liters, max_volume.liters())

    if like.volume.unit is VolumeUnit.GALLON:
        volume = Volume.gallon(liters / config.LITERS_PER_GALLON)
    else:
        volume = Volume.liter(liters)
    return Mass.create(unit=like.unit, volume=volume)
