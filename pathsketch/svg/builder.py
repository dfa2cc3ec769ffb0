"""Path builders — the sink that parse_path() and approximate_circle() draw into.

Any object with move_to/line_to/cubic_to/quad_to/close/finish works. Two are
provided:

    RecordingPathBuilder  -> Path (immutable list of PathOp)
    SegmentPathBuilder    -> svgpathtools.Path (Line/QuadraticBezier/CubicBezier)

A builder is single use: after finish() every call raises BuilderFinished.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Literal, Protocol, Sequence, runtime_checkable

import numpy as np
from svgpathtools import CubicBezier, Line, QuadraticBezier
from svgpathtools import Path as SegmentPath

from pathsketch.svg.errors import BuilderFinished

logger = logging.getLogger(__name__)

OpKind = Literal["move", "line", "cubic", "quad", "close"]

# Number of coordinates carried by each op kind
OP_ARITY: dict[str, int] = {"move": 2, "line": 2, "cubic": 6, "quad": 4, "close": 0}


@runtime_checkable
class PathBuilder(Protocol):
    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def cubic_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> None: ...

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None: ...

    def close(self) -> None: ...

    def finish(self) -> Any: ...


@dataclass(frozen=True)
class PathOp:
    """One primitive drawing operation with absolute coordinates."""

    kind: OpKind
    args: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        expected = OP_ARITY[self.kind]
        if len(self.args) != expected:
            raise ValueError(f"{self.kind} op takes {expected} coordinates, got {len(self.args)}")

    @property
    def end_point(self) -> tuple[float, float] | None:
        if not self.args:
            return None
        return (self.args[-2], self.args[-1])

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "args": list(self.args)}


class Path(Sequence[PathOp]):
    """Immutable, ordered sequence of PathOps produced by RecordingPathBuilder."""

    __slots__ = ("_ops",)

    def __init__(self, ops: Sequence[PathOp] = ()) -> None:
        self._ops: tuple[PathOp, ...] = tuple(ops)

    def __getitem__(self, index):  # type: ignore[override]
        if isinstance(index, slice):
            return Path(self._ops[index])
        return self._ops[index]

    def __len__(self) -> int:
        return len(self._ops)

    def __iter__(self) -> Iterator[PathOp]:
        return iter(self._ops)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._ops == other._ops
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._ops)

    def __repr__(self) -> str:
        return f"Path({list(self._ops)!r})"

    @property
    def ops(self) -> tuple[PathOp, ...]:
        return self._ops

    @property
    def end_point(self) -> tuple[float, float] | None:
        """Pen position after the last op that moves it."""
        for op in reversed(self._ops):
            if op.args:
                return op.end_point
        return None

    @property
    def subpath_count(self) -> int:
        return sum(1 for op in self._ops if op.kind == "move")

    def transformed(self, a: float, b: float, c: float, d: float, e: float, f: float) -> Path:
        """Apply the affine map (x, y) -> (a*x + c*y + e, b*x + d*y + f)."""
        matrix = np.array([[a, c], [b, d]], dtype=np.float64)
        offset = np.array([e, f], dtype=np.float64)

        ops: list[PathOp] = []
        for op in self._ops:
            if not op.args:
                ops.append(op)
                continue
            pts = np.asarray(op.args, dtype=np.float64).reshape(-1, 2)
            moved = pts @ matrix.T + offset
            ops.append(PathOp(op.kind, tuple(float(v) for v in moved.ravel())))
        return Path(ops)

    def to_d(self, precision: int = 4, quad_letter: str = "S") -> str:
        from pathsketch.svg.serializer import path_to_d

        return path_to_d(self, precision=precision, quad_letter=quad_letter)


class _SingleUseBuilder:
    def __init__(self) -> None:
        self._finished = False

    def _check_open(self) -> None:
        if self._finished:
            raise BuilderFinished(f"{type(self).__name__} already finished")


class RecordingPathBuilder(_SingleUseBuilder):
    """Records every call as a PathOp; finish() returns a Path."""

    def __init__(self) -> None:
        super().__init__()
        self._ops: list[PathOp] = []

    def _push(self, kind: OpKind, *args: float) -> None:
        self._check_open()
        self._ops.append(PathOp(kind, tuple(float(a) for a in args)))

    def move_to(self, x: float, y: float) -> None:
        self._push("move", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._push("line", x, y)

    def cubic_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> None:
        self._push("cubic", x1, y1, x2, y2, x, y)

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._push("quad", cx, cy, x, y)

    def close(self) -> None:
        self._push("close")

    @property
    def last(self) -> PathOp | None:
        """Most recently recorded op, or None before the first call."""
        return self._ops[-1] if self._ops else None

    def finish(self) -> Path:
        self._check_open()
        self._finished = True
        return Path(self._ops)


class SegmentPathBuilder(_SingleUseBuilder):
    """Builds an svgpathtools.Path. Points are complex numbers x + yj.

    Moves produce no segment; they only set the start of the next subpath.
    close() adds a Line back to that start unless the pen is already there.

    With split_subpaths=True, finish() returns one svgpathtools.Path per
    subpath instead of a single Path: a move or a close ends the current one,
    and subpaths with no segments are dropped.
    """

    def __init__(self, split_subpaths: bool = False) -> None:
        super().__init__()
        self._split = split_subpaths
        self._segments: list[Any] = []
        self._subpaths: list[list[Any]] = []
        self._pen = 0j
        self._start = 0j

    def _end_subpath(self) -> None:
        if self._split and self._segments:
            self._subpaths.append(self._segments)
            self._segments = []

    def move_to(self, x: float, y: float) -> None:
        self._check_open()
        self._end_subpath()
        self._pen = self._start = complex(x, y)

    def line_to(self, x: float, y: float) -> None:
        self._check_open()
        end = complex(x, y)
        self._segments.append(Line(self._pen, end))
        self._pen = end

    def cubic_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> None:
        self._check_open()
        end = complex(x, y)
        self._segments.append(CubicBezier(self._pen, complex(x1, y1), complex(x2, y2), end))
        self._pen = end

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._check_open()
        end = complex(x, y)
        self._segments.append(QuadraticBezier(self._pen, complex(cx, cy), end))
        self._pen = end

    def close(self) -> None:
        self._check_open()
        if abs(self._pen - self._start) > 1e-12:
            self._segments.append(Line(self._pen, self._start))
        self._pen = self._start
        self._end_subpath()

    def finish(self) -> SegmentPath | list[SegmentPath]:
        self._check_open()
        self._finished = True
        if self._split:
            self._end_subpath()
            logger.debug("SegmentPathBuilder finished with %d subpaths", len(self._subpaths))
            return [SegmentPath(*segments) for segments in self._subpaths]
        logger.debug("SegmentPathBuilder finished with %d segments", len(self._segments))
        return SegmentPath(*self._segments)


def replay(path: Path, builder: PathBuilder) -> Any:
    """Feed a recorded Path into another builder and return its finish()."""
    for op in path:
        if op.kind == "move":
            builder.move_to(*op.args)
        elif op.kind == "line":
            builder.line_to(*op.args)
        elif op.kind == "cubic":
            builder.cubic_to(*op.args)
        elif op.kind == "quad":
            builder.quad_to(*op.args)
        else:
            builder.close()
    return builder.finish()
