"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from pathsketch.api import health, paths

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(paths.router)
