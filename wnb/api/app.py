"""FastAPI application factory."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env file from project root (fuel density overrides, CORS origins)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from wnb.api.routes import weight_balance  # noqa: E402

API_VERSION = "0.1.0"

app = FastAPI(
    title="Weight & Balance API",
    description="Aircraft loading, center of gravity and envelope checks",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(weight_balance.router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": API_VERSION}
