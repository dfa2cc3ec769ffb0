"""Path data parser — tokenize, group, build commands, drive a PathBuilder.

    >>> parse_path("M0 0L10 0L10 10Z").ops
    (PathOp(kind='move', args=(0.0, 0.0)), PathOp(kind='line', args=(10.0, 0.0)), ...)

Supported letters: m M l L h H v V c C s S z Z. Anything else (arcs, T/Q, ...)
raises UnsupportedCommand. No state survives between calls.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from pathsketch.svg.builder import PathBuilder, RecordingPathBuilder, replay
from pathsketch.svg.commands import Cursor, PathCommand, build_commands
from pathsketch.svg.config import ParserConfig
from pathsketch.svg.errors import CoordinateOverflow, ParseError
from pathsketch.svg.tokenizer import group_tokens, tokenize

logger = logging.getLogger(__name__)


def parse_commands(d: str, config: ParserConfig | None = None) -> list[PathCommand]:
    """Parse path data into validated commands without drawing anything."""
    if config is None:
        config = ParserConfig()

    groups = group_tokens(tokenize(d, config.separators), config.signed_continuation)

    commands: list[PathCommand] = []
    last = len(groups) - 1
    for i, (letter, args) in enumerate(groups):
        commands.extend(build_commands(letter, args, at_end=(i == last)))
    return commands


def parse_path(d: str, builder: PathBuilder | None = None, config: ParserConfig | None = None) -> Any:
    """Parse path data and return whatever builder.finish() returns.

    With no builder a RecordingPathBuilder is used, so the result is a Path.
    Empty or separator-only input makes no builder calls besides finish().

    Commands are first drawn into a private recorder so that a coordinate
    overflowing to inf/nan raises CoordinateOverflow before the caller's
    builder sees any call.
    """
    try:
        commands = parse_commands(d, config)
        recorder = RecordingPathBuilder()
        cursor = Cursor()
        for command in commands:
            cursor = command.emit(cursor, recorder)
            op = recorder.last
            if op is not None and not all(math.isfinite(v) for v in op.args):
                raise CoordinateOverflow(command.letter)
    except ParseError as e:
        logger.debug("Rejected path data %.60r: %s", d, e)
        raise

    path = recorder.finish()
    logger.debug("Parsed %d commands, pen ends at (%g, %g)", len(commands), cursor.x, cursor.y)
    if builder is None:
        return path
    return replay(path, builder)
