"""Loading report — the computed weight & balance summary of an airplane.

Calculated, never persisted: built by ``wnb.services.weight_balance``.
"""

from pydantic import Field

from wnb.contracts.common import ValueModel
from wnb.contracts.enums import EnvelopeStatus


class LoadingReport(ValueModel):
    """Totals, balance point, and envelope verdict for one loading snapshot."""

    callsign: str
    total_mass_kg: float = Field(..., ge=0)
    total_moment_kgm: float
    center_of_gravity_mm: float
    status: EnvelopeStatus
    details: str = ""

    @property
    def within_limits(self) -> bool:
        return self.status == EnvelopeStatus.OK
