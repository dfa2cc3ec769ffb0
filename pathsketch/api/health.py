"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from pathsketch import __version__
from pathsketch.models.responses import HealthResponse
from pathsketch.svg.commands import COMMAND_TYPES

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        commands_supported="".join(sorted(COMMAND_TYPES)),
    )
