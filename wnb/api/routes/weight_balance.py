"""Weight & balance endpoints — loading report and envelope chart."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel

from wnb.contracts.airplane import Airplane
from wnb.contracts.visualization import RenderConfig
from wnb.errors import DivisionByZeroError, InvalidInputError, RenderingError
from wnb.services.visualizer import render
from wnb.services.weight_balance import compute_report

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/weight-balance", tags=["weight-balance"])


class PlotRequest(BaseModel):
    """Airplane to draw and how to draw it."""

    airplane: Airplane
    config: RenderConfig


@router.post("/report")
async def create_report(airplane: Airplane) -> dict:
    """Compute totals, CG and envelope status for a loading sheet."""
    try:
        report = compute_report(airplane)
    except (DivisionByZeroError, InvalidInputError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.info("%s: %s", report.callsign, report.details)
    return report.to_dict()


@router.post("/plot")
async def create_plot(request: PlotRequest) -> Response:
    """Render the envelope and loading point as an SVG document."""
    try:
        visualization = render(request.airplane, request.config)
    except (DivisionByZeroError, InvalidInputError, RenderingError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    return Response(content=visualization.markup, media_type=visualization.media_type)
