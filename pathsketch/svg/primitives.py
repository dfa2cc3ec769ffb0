"""Primitive shapes emitted straight into a PathBuilder."""

from __future__ import annotations

import math
from typing import Any

from pathsketch.svg.builder import PathBuilder, RecordingPathBuilder
from pathsketch.svg.errors import InvalidRadius

# Control-point distance for a quarter circle as one cubic, as a fraction of
# the radius. Max radial error is about 0.027% of r.
KAPPA = 0.5522847498


def approximate_circle(radius: float, cx: float, cy: float, builder: PathBuilder | None = None) -> Any:
    """Circle of *radius* around (cx, cy) as four cubic quarter arcs.

    Starts at the rightmost point and visits (cx, cy - r), (cx - r, cy),
    (cx, cy + r) before returning to the start. The last endpoint is the start
    point, so close() is not called.
    """
    if isinstance(radius, bool) or not isinstance(radius, (int, float)):
        raise InvalidRadius(radius)
    if not math.isfinite(radius) or radius <= 0:
        raise InvalidRadius(radius)

    if builder is None:
        builder = RecordingPathBuilder()

    r = float(radius)
    k = KAPPA * r

    builder.move_to(cx + r, cy)
    builder.cubic_to(cx + r, cy - k, cx + k, cy - r, cx, cy - r)
    builder.cubic_to(cx - k, cy - r, cx - r, cy - k, cx - r, cy)
    builder.cubic_to(cx - r, cy + k, cx - k, cy + r, cx, cy + r)
    builder.cubic_to(cx + k, cy + r, cx + r, cy + k, cx + r, cy)

    return builder.finish()
