"""Tests for the four-cubic circle approximation."""

from __future__ import annotations

import math

import numpy as np
import pytest

from pathsketch.svg.builder import PathOp, SegmentPathBuilder
from pathsketch.svg.errors import InvalidRadius
from pathsketch.svg.primitives import KAPPA, approximate_circle
from pathsketch.utils.geometry import flatten, signed_area


def test_starts_at_rightmost_point():
    path = approximate_circle(100, 256, 256)
    assert path[0] == PathOp("move", (356.0, 256.0))


def test_four_cubics_back_to_start():
    path = approximate_circle(100, 256, 256)
    assert [op.kind for op in path] == ["move", "cubic", "cubic", "cubic", "cubic"]
    x, y = path.end_point
    assert x == pytest.approx(356.0, abs=1e-4)
    assert y == pytest.approx(256.0, abs=1e-4)


def test_quadrant_order():
    path = approximate_circle(100, 256, 256)
    ends = [op.end_point for op in path.ops[1:]]
    assert ends == [(256.0, 156.0), (156.0, 256.0), (256.0, 356.0), (356.0, 256.0)]


def test_control_points_use_kappa():
    path = approximate_circle(100, 0, 0)
    x1, y1, x2, y2, _, _ = path[1].args
    assert (x1, y1) == pytest.approx((100.0, -100 * KAPPA))
    assert (x2, y2) == pytest.approx((100 * KAPPA, -100.0))


def test_no_explicit_close(call_log):
    calls = approximate_circle(5, 0, 0, builder=call_log)
    assert ("close",) not in calls
    assert calls[-1] == ("finish",)


def test_radial_error_is_small():
    r = 100.0
    path = approximate_circle(r, 10, -20)
    (ring,) = flatten(path, samples_per_segment=64)
    dist = np.hypot(ring[:, 0] - 10, ring[:, 1] + 20)
    assert np.max(np.abs(dist - r)) < 3e-4 * r


def test_orientation():
    # Right -> smaller y -> left -> larger y: negative shoelace area
    (ring,) = flatten(approximate_circle(1, 0, 0))
    assert signed_area(ring) < 0


def test_segment_builder_length():
    seg_path = approximate_circle(50, 0, 0, builder=SegmentPathBuilder())
    assert len(seg_path) == 4
    assert seg_path.isclosed()
    assert seg_path.length() == pytest.approx(2 * math.pi * 50, rel=1e-3)


@pytest.mark.parametrize("radius", [0, -1, -0.5, float("nan"), float("inf")])
def test_invalid_radius(radius):
    with pytest.raises(InvalidRadius) as exc:
        approximate_circle(radius, 0, 0)
    assert exc.value.radius is radius


def test_invalid_radius_type():
    with pytest.raises(InvalidRadius):
        approximate_circle("10", 0, 0)  # type: ignore[arg-type]


def test_invalid_radius_makes_no_calls(call_log):
    with pytest.raises(InvalidRadius):
        approximate_circle(0, 0, 0, builder=call_log)
    assert call_log.calls == []
