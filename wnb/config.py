"""Library-wide settings for fuel conversions.

Fuel densities are read from the environment each time they are needed so an
operator can audit or override them without touching code:

- ``WNB_AVGAS_DENSITY_KG_PER_LITER`` (default 0.72)
- ``WNB_MOGAS_DENSITY_KG_PER_LITER`` (default 0.74)

Callers may populate the environment from a ``.env`` file (see ``wnb.cli``
and ``wnb.api.app``); this module never reads files itself.
"""

from __future__ import annotations

import math
import os

from wnb.errors import InvalidInputError

# Aviation gasoline (100LL) at 15 deg C
DEFAULT_AVGAS_DENSITY_KG_PER_LITER = 0.72
# Automotive gasoline (EN 228)
DEFAULT_MOGAS_DENSITY_KG_PER_LITER = 0.74

# US gallon
LITERS_PER_GALLON = 378541.0 / 100000.0

AVGAS_DENSITY_ENV = "WNB_AVGAS_DENSITY_KG_PER_LITER"
MOGAS_DENSITY_ENV = "WNB_MOGAS_DENSITY_KG_PER_LITER"


def avgas_density_kg_per_liter() -> float:
    """Avgas density in kg/L, honoring ``WNB_AVGAS_DENSITY_KG_PER_LITER``."""
    return _density_from_env(AVGAS_DENSITY_ENV, DEFAULT_AVGAS_DENSITY_KG_PER_LITER)


def mogas_density_kg_per_liter() -> float:
    """Mogas density in kg/L, honoring ``WNB_MOGAS_DENSITY_KG_PER_LITER``."""
    return _density_from_env(MOGAS_DENSITY_ENV, DEFAULT_MOGAS_DENSITY_KG_PER_LITER)


def _density_from_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default

    try:
        density = float(raw)
    except ValueError:
        raise InvalidInputError(f"{name} must be a number, got {raw!r}") from None

    if not math.isfinite(density) or density <= 0:
        raise InvalidInputError(f"{name} must be a positive density in kg/L, got {raw!r}")
    return density
