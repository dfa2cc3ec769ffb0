"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pathsketch.svg.builder import PathOp


SQUARE_D = "M0 0L10 0L10 10L0 10Z"

SQUARE_OPS = [
    PathOp("move", (0.0, 0.0)),
    PathOp("line", (10.0, 0.0)),
    PathOp("line", (10.0, 10.0)),
    PathOp("line", (0.0, 10.0)),
    PathOp("close"),
]

# Letter "P"-style logo outline: absolute moves, H/V lines and cubics
LOGO_D = (
    "M105 57.0273V453.751H252.659C448.259 461.723 428.124 276.022 352.856 253.513"
    "V243.197C424.768 204.274 423.809 54.6826 252.659 57.0273H105Z"
)

# Same square drawn twice, the second one offset by 20 with relative commands
TWO_SQUARES_D = "M0 0h10v10h-10z m20 0 h10 v10 h-10 z"


class CallLog:
    """PathBuilder that records raw calls, for checking exact call order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))

    def cubic_to(self, x1, y1, x2, y2, x, y):
        self.calls.append(("cubic_to", x1, y1, x2, y2, x, y))

    def quad_to(self, cx, cy, x, y):
        self.calls.append(("quad_to", cx, cy, x, y))

    def close(self):
        self.calls.append(("close",))

    def finish(self):
        self.calls.append(("finish",))
        return tuple(self.calls)


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


@pytest.fixture
def square_d() -> str:
    return SQUARE_D


@pytest.fixture
def logo_d() -> str:
    return LOGO_D
