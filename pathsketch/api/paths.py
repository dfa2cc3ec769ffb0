"""POST /api/paths/* — parse path data, build circles, report geometry."""

from __future__ import annotations

import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from pathsketch.config import settings
from pathsketch.models.requests import CircleRequest, ParsePathRequest
from pathsketch.models.responses import ErrorResponse, PathOpModel, PathResponse
from pathsketch.svg.builder import Path, SegmentPathBuilder, replay
from pathsketch.svg.config import ParserConfig
from pathsketch.svg.errors import InvalidRadius, ParseError
from pathsketch.svg.parser import parse_path
from pathsketch.svg.primitives import approximate_circle
from pathsketch.utils.geometry import flatten, path_bbox, to_polygon, winding_direction

router = APIRouter(prefix="/paths")

_WINDING = {1: "CCW", -1: "CW", 0: "degenerate"}


def describe_path(path: Path, started: float) -> PathResponse:
    """Geometry summary of a recorded Path."""
    samples = settings.flatten_samples

    segments = replay(path, SegmentPathBuilder())
    length = float(sum(seg.length() for seg in segments))

    winding = _WINDING[winding_direction(flatten(path, samples))]

    return PathResponse(
        ops=[PathOpModel(**op.to_dict()) for op in path],
        d=path.to_d(precision=settings.d_precision),
        subpaths=path.subpath_count,
        end_point=path.end_point,
        bbox=path_bbox(path, samples),
        length=round(length, 6),
        area=round(float(to_polygon(path, samples).area), 6),
        winding=winding,
        processing_time_ms=round((time.perf_counter() - started) * 1000, 3),
    )


@router.post("/parse", response_model=PathResponse)
async def parse(req: ParsePathRequest) -> PathResponse:
    started = time.perf_counter()
    config = ParserConfig.from_settings()
    if req.signed_continuation is not None:
        config.signed_continuation = req.signed_continuation
    path = parse_path(req.d, config=config)
    return describe_path(path, started)


@router.post("/circle", response_model=PathResponse)
async def circle(req: CircleRequest) -> PathResponse:
    started = time.perf_counter()
    path = approximate_circle(req.radius, req.cx, req.cy)
    return describe_path(path, started)


async def path_error_handler(request: Request, exc: Exception) -> JSONResponse:
    body = ErrorResponse(error=type(exc).__name__, detail=str(exc))
    return JSONResponse(status_code=422, content=body.model_dump())


EXCEPTION_HANDLERS = {
    ParseError: path_error_handler,
    InvalidRadius: path_error_handler,
}
