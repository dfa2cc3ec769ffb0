"""Geometry helpers over built Paths. Curve sampling goes through svgpathtools."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import MultiPolygon, Polygon
from shapely.ops import unary_union
from svgpathtools import Line

from pathsketch.svg.builder import SegmentPathBuilder, replay

if TYPE_CHECKING:
    from pathsketch.svg.builder import Path


def flatten(path: Path, samples_per_segment: int = 16) -> list[NDArray[np.float64]]:
    """Polyline approximation of each subpath: one Nx2 array per subpath.

    Lines contribute their end point. Curves contribute samples_per_segment
    points (excluding their start) taken with seg.point(t). Subpaths are split
    by SegmentPathBuilder, so a close adds the segment back to the start and
    closed rings repeat their first point.
    """
    interior = np.linspace(0.0, 1.0, samples_per_segment + 1)[1:-1]
    rings: list[NDArray[np.float64]] = []

    for subpath in replay(path, SegmentPathBuilder(split_subpaths=True)):
        points: list[complex] = [subpath[0].start]
        for seg in subpath:
            if not isinstance(seg, Line):
                points.extend(seg.point(float(t)) for t in interior)
            points.append(seg.end)
        pts = np.asarray(points, dtype=np.complex128)
        rings.append(np.column_stack([pts.real, pts.imag]))

    return rings


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area. Positive = CCW, Negative = CW (y up)."""
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    # Treat the ring as closed even when the last point does not repeat the first
    return float(0.5 * (np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]) + (x[-1] * y[0] - x[0] * y[-1])))


def winding_direction(rings: list[NDArray[np.float64]]) -> int:
    """Return 1 for CCW, -1 for CW, 0 if degenerate, from the net signed area of all rings."""
    sa = sum(signed_area(ring) for ring in rings)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def path_bbox(path: Path, samples_per_segment: int = 16) -> tuple[float, float, float, float]:
    rings = flatten(path, samples_per_segment)
    if not rings:
        return (0.0, 0.0, 0.0, 0.0)
    return bbox(np.vstack(rings))


def to_polygon(path: Path, samples_per_segment: int = 16) -> Polygon | MultiPolygon:
    """Union of the regions enclosed by each subpath.

    Each subpath with at least three points becomes a ring. Inner rings are
    unioned, not subtracted as holes. Invalid rings are repaired with buffer(0).
    """
    polys: list[Polygon] = []
    for ring in flatten(path, samples_per_segment):
        if len(ring) < 3:
            continue
        poly = Polygon(ring)
        if not poly.is_valid:
            poly = poly.buffer(0)
        if not poly.is_empty:
            polys.append(poly)

    if not polys:
        return Polygon()
    if len(polys) == 1:
        return polys[0]
    return unary_union(polys)
