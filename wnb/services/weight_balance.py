"""Weight & balance report from an airplane's loading sheet."""

from __future__ import annotations

from wnb.contracts.airplane import Airplane
from wnb.contracts.enums import EnvelopeStatus
from wnb.contracts.report import LoadingReport


def compute_report(airplane: Airplane) -> LoadingReport:
    """Evaluate totals, CG and envelope status.

    Mass limits are checked before CG limits; the details string names the
    violated limit with the offending value, e.g.
    ``"Overweight: 750.6 kg > 750.0 kg"``.

    Raises:
        DivisionByZeroError: If the airplane carries no mass.
    """
    total_mass_kg = airplane.total_mass().kilograms()
    total_moment_kgm = airplane.total_moment().kilogram_meters()
    cg_mm = airplane.center_of_gravity().millimeters()
    status = airplane.within_limits()
    limits = airplane.limits

    if status == EnvelopeStatus.UNDERWEIGHT:
        details = f"Underweight: {total_mass_kg:.1f} kg < {limits.min_mass.kilograms():.1f} kg"
    elif status == EnvelopeStatus.OVERWEIGHT:
        details = f"Overweight: {total_mass_kg:.1f} kg > {limits.max_mass.kilograms():.1f} kg"
    elif status == EnvelopeStatus.FORWARD_CG_EXCEEDED:
        details = f"CG too far forward: {cg_mm:.1f} mm < {limits.min_cg.millimeters():.1f} mm"
    elif status == EnvelopeStatus.AFT_CG_EXCEEDED:
        details = f"CG too far aft: {cg_mm:.1f} mm > {limits.max_cg.millimeters():.1f} mm"
    else:
        details = "Within limits"

    return LoadingReport(
        callsign=airplane.callsign,
        total_mass_kg=total_mass_kg,
        total_moment_kgm=total_moment_kgm,
        center_of_gravity_mm=cg_mm,
        status=status,
        details=details,
    )
