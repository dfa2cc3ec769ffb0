"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParsePathRequest(BaseModel):
    d: str = Field(..., description="Path data (SVG 'd' attribute subset)")
    signed_continuation: bool | None = Field(
        default=None,
        description="Accept '-', '+' and '.' as repeated-argument starts (server default when omitted)",
    )


class CircleRequest(BaseModel):
    radius: float = Field(..., description="Circle radius, must be > 0")
    cx: float = Field(default=0.0, description="Center x")
    cy: float = Field(default=0.0, description="Center y")
