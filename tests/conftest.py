"""Shared fixtures: the PH-DHA loading sheet and pinned fuel densities."""

from __future__ import annotations

import pytest

from tests.builders import phdha
from wnb.config import AVGAS_DENSITY_ENV, MOGAS_DENSITY_ENV
from wnb.contracts.airplane import Airplane


@pytest.fixture(autouse=True)
def default_fuel_densities(monkeypatch):
    """Every test runs with the built-in densities (avgas 0.72 kg/L)."""
    monkeypatch.delenv(AVGAS_DENSITY_ENV, raising=False)
    monkeypatch.delenv(MOGAS_DENSITY_ENV, raising=False)


@pytest.fixture
def airplane() -> Airplane:
    return phdha()
