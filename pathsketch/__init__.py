"""pathsketch — path data strings and circles as PathBuilder operations."""

from __future__ import annotations

__version__ = "0.1.0"

from pathsketch.svg.builder import (  # noqa: E402
    Path,
    PathBuilder,
    PathOp,
    RecordingPathBuilder,
    SegmentPathBuilder,
    replay,
)
from pathsketch.svg.errors import (  # noqa: E402
    ArityMismatch,
    BuilderFinished,
    CoordinateOverflow,
    InvalidRadius,
    MalformedNumber,
    ParseError,
    UnexpectedEndOfInput,
    UnsupportedCommand,
)
from pathsketch.svg.parser import parse_commands, parse_path  # noqa: E402
from pathsketch.svg.primitives import KAPPA, approximate_circle  # noqa: E402

__all__ = [
    "ArityMismatch",
    "BuilderFinished",
    "CoordinateOverflow",
    "InvalidRadius",
    "KAPPA",
    "MalformedNumber",
    "ParseError",
    "Path",
    "PathBuilder",
    "PathOp",
    "RecordingPathBuilder",
    "SegmentPathBuilder",
    "UnexpectedEndOfInput",
    "UnsupportedCommand",
    "approximate_circle",
    "parse_commands",
    "parse_path",
    "replay",
]
