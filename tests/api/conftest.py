"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from tests.builders import phdha
from wnb.api.app import app


@pytest.fixture
def sheet() -> dict:
    """The PH-DHA loading sheet as a JSON request body."""
    return phdha().to_dict()


@pytest.fixture
async def client():
    """httpx AsyncClient wired to the app."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
