"""Typed failures for path data parsing and primitive construction.

Every ParseError is fatal to the parse_path() call that raised it: no partial
path is returned.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for path data failures."""


class UnsupportedCommand(ParseError):
    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Unsupported path command {command!r}")


class ArityMismatch(ParseError):
    def __init__(self, command: str, expected: int, actual: int) -> None:
        self.command = command
        self.expected = expected
        self.actual = actual
        if expected:
            need = f"a multiple of {expected}"
        else:
            need = "no"
        super().__init__(f"Command {command!r} takes {need} arguments, got {actual}")


class MalformedNumber(ParseError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Cannot parse {token!r} as a number")


class UnexpectedEndOfInput(ParseError):
    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Path data ended before arguments of {command!r}")


class CoordinateOverflow(ParseError):
    """Relative arithmetic pushed an absolute coordinate past the float range."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Command {command!r} produced a non-finite coordinate")


class InvalidRadius(ValueError):
    def __init__(self, radius: float) -> None:
        self.radius = radius
        super().__init__(f"Circle radius must be a finite number > 0, got {radius!r}")


class BuilderFinished(RuntimeError):
    """A path builder was used after finish()."""
