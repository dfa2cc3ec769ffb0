"""Path commands as a closed set of value types.

Arity is checked once, in build_commands(). After that every command carries
exactly the coordinates it needs and emit() only does cursor arithmetic.

Note on S/s: in this library they draw a *quadratic* curve through one control
point (quad_to). That is not the SVG smooth-cubic meaning and is intentional.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, NamedTuple, Union

from pathsketch.svg.errors import ArityMismatch, UnexpectedEndOfInput, UnsupportedCommand

if TYPE_CHECKING:
    from pathsketch.svg.builder import PathBuilder


class Cursor(NamedTuple):
    """Current pen position."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class MoveAbs:
    letter: ClassVar[str] = "M"
    arity: ClassVar[int] = 2
    x: float
    y: float

    def emit(self, cursor: Cursor, builder: PathBuilder) -> Cursor:
        builder.move_to(self.x, self.y)
        return Cursor(self.x, self.y)


@dataclass(frozen=True)
class MoveRel:
    letter: ClassVar[str] = "m"
    arity: ClassVar[int] = 2
    dx: float
    dy: float

    def emit(self, cursor: Cursor, builder: PathBuilder) -> Cursor:
        end = Cursor(cursor.x + self.dx, cursor.y + self.dy)
        builder.move_to(*end)
        return end


@dataclass(frozen=True)
class LineAbs:
    letter: ClassVar[str] = "L"
    arity: ClassVar[int] = 2
    x: float
    y: float

    def emit(self, cursor: Cursor, builder: PathBuilder) -> Cursor:
        builder.line_to(self.x, self.y)
        return Cursor(self.x, self.y)


@dataclass(frozen=True)
class LineRel:
    letter: ClassVar[str] = "l"
    arity: ClassVar[int] = 2
    dx: float
    dy: float

    def emit(self, cursor: Cursor, builder: PathBuilder) -> Cursor:
        end = Cursor(cursor.x + self.dx, cursor.y + self.dy)
        builder.line_to(*end)
        return end


@dataclass(frozen=True)
class HorizontalAbs:
    letter: ClassVar[str] = "H"
    arity: ClassVar[int] = 1
    x: float

    def emit(self, cursor: Cursor, builder: PathBuilder) -> Cursor:
        end = Cursor(self.x, cursor.y)
        builder.line_to(*end)
        return end


@dataclass(frozen=True)
class HorizontalRel:
    letter: ClassVar[str] = "h"
    arity: ClassVar[int] = 1
    dx: float

    def emit(self, cursor: Cursor, builder: PathBuilder) -> Cursor:
        end = Cursor(cursor.x + self.dx, cursor.y)
        builder.line_to(*end)
        return end


@dataclass(frozen=True)
class VerticalAbs:
    letter: ClassVar[str] = "V"
    arity: ClassVar[int] = 1
    y: float

    def emit(self, cursor: Cursor, builder: PathBuilder) -> Cursor:
        end = Cursor(cursor.x, self.y)
        builder.line_to(*end)
        return end


@dataclass(frozen=True)
class VerticalRel:
    letter: ClassVar[str] = "v"
    arity: ClassVar[int] = 1
    dy: float

    def emit(self, cursor: Cursor, builder: PathBuilder) -> Cursor:
        end = Cursor(cursor.x, cursor.y + self.dy)
        builder.line_to(*end)
        return end


@dataclass(frozen=True)
class CubicAbs:
    letter: ClassVar[str] = "C"
    arity: ClassVar[int] = 6
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    def emit(self, cursor: Cursor, builder: PathBuilder) -> Cursor:
        builder.cubic_to(self.x1, self.y1, self.x2, self.y2, self.x, self.y)
        return Cursor(self.x, self.y)


@dataclass(frozen=True)
class CubicRel:
    letter: ClassVar[str] = "c"
    arity: ClassVar[int] = 6
    dx1: float
    dy1: float
    dx2: float
    dy2: float
    dx: float
    dy: float

    def emit(self, cursor: Cursor, builder: PathBuilder) -> Cursor:
        x, y = cursor
        end = Cursor(x + self.dx, y + self.dy)
        builder.cubic_to(x + self.dx1, y + self.dy1, x + self.dx2, y + self.dy2, *end)
        return end


@dataclass(frozen=True)
class SmoothAbs:
    letter: ClassVar[str] = "S"
    arity: ClassVar[int] = 4
    x1: float
    y1: float
    x: float
    y: float

    def emit(self, cursor: Cursor, builder: PathBuilder) -> Cursor:
        builder.quad_to(self.x1, self.y1, self.x, self.y)
        return Cursor(self.x, self.y)


@dataclass(frozen=True)
class SmoothRel:
    letter: ClassVar[str] = "s"
    arity: ClassVar[int] = 4
    dx1: float
    dy1: float
    dx: float
    dy: float

    def emit(self, cursor: Cursor, builder: PathBuilder) -> Cursor:
        x, y = cursor
        end = Cursor(x + self.dx, y + self.dy)
        builder.quad_to(x + self.dx1, y + self.dy1, *end)
        return end


@dataclass(frozen=True)
class Close:
    letter: ClassVar[str] = "Z"
    arity: ClassVar[int] = 0

    def emit(self, cursor: Cursor, builder: PathBuilder) -> Cursor:
        builder.close()
        return cursor


PathCommand = Union[
    MoveAbs, MoveRel, LineAbs, LineRel,
    HorizontalAbs, HorizontalRel, VerticalAbs, VerticalRel,
    CubicAbs, CubicRel, SmoothAbs, SmoothRel, Close,
]

COMMAND_TYPES: dict[str, type] = {
    cls.letter: cls
    for cls in (
        MoveAbs, MoveRel, LineAbs, LineRel,
        HorizontalAbs, HorizontalRel, VerticalAbs, VerticalRel,
        CubicAbs, CubicRel, SmoothAbs, SmoothRel, Close,
    )
}
COMMAND_TYPES["z"] = Close


def build_commands(letter: str, args: list[float], at_end: bool = False) -> list[PathCommand]:
    """Validate one letter + argument group and expand implicit repetition.

    "L1 2 3 4" becomes [LineAbs(1, 2), LineAbs(3, 4)]. The argument count must
    be a positive multiple of the command's arity; Z takes none.
    """
    cls = COMMAND_TYPES.get(letter)
    if cls is None:
        raise UnsupportedCommand(letter)

    arity = cls.arity
    if arity == 0:
        if args:
            raise ArityMismatch(letter, 0, len(args))
        return [cls()]

    if not args:
        if at_end:
            raise UnexpectedEndOfInput(letter)
        raise ArityMismatch(letter, arity, 0)
    if len(args) % arity:
        raise ArityMismatch(letter, arity, len(args))

    return [cls(*args[i:i + arity]) for i in range(0, len(args), arity)]
