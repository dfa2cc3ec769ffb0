"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    commands_supported: str = ""


class PathOpModel(BaseModel):
    kind: str
    args: list[float] = Field(default_factory=list)


class PathResponse(BaseModel):
    ops: list[PathOpModel] = Field(default_factory=list)
    d: str = ""
    subpaths: int = 0
    end_point: tuple[float, float] | None = None
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    length: float = 0.0
    area: float = 0.0
    winding: str = "degenerate"
    processing_time_ms: float = 0.0


class ErrorResponse(BaseModel):
    error: str
    detail: str
