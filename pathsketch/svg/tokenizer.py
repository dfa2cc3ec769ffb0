"""Path data tokenizer — character scan + implicit-repetition grouping.

Two passes, both left to right with no backtracking:

    tokenize("M105 57.02V453.7")   -> ["M105", "57.02", "V453.7"]
    group_tokens([...])            -> [("M", [105.0, 57.02]), ("V", [453.7])]

A command letter always starts a new token, so its first argument rides along
in the same token ("M105"); later arguments arrive as bare numeric tokens.
"""

from __future__ import annotations

import enum
import logging
import math
import re

from pathsketch.svg.errors import ArityMismatch, MalformedNumber, UnsupportedCommand

logger = logging.getLogger(__name__)

DEFAULT_SEPARATORS = " ,\t\r\n"

ASCII_DIGITS = frozenset("0123456789")

_CLOSE_LETTERS = frozenset("Zz")
_SIGNED_STARTS = frozenset("-+.")

# Optional sign, then digits with an optional fraction, or a bare fraction
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


class ScanState(enum.Enum):
    IDLE = "idle"
    ACCUMULATING_NUMBER = "number"
    ACCUMULATING_COMMAND = "command"


class CharClass(enum.Enum):
    SEPARATOR = "separator"
    LETTER = "letter"
    OTHER = "other"


# (state, char class) -> (emit the buffered token first, next state).
# The buffer is non-empty exactly when the state is not IDLE, and every
# non-IDLE target state takes the current character into the buffer.
TRANSITIONS: dict[tuple[ScanState, CharClass], tuple[bool, ScanState]] = {
    (ScanState.IDLE, CharClass.SEPARATOR): (False, ScanState.IDLE),
    (ScanState.IDLE, CharClass.LETTER): (False, ScanState.ACCUMULATING_COMMAND),
    (ScanState.IDLE, CharClass.OTHER): (False, ScanState.ACCUMULATING_NUMBER),
    (ScanState.ACCUMULATING_NUMBER, CharClass.SEPARATOR): (True, ScanState.IDLE),
    (ScanState.ACCUMULATING_NUMBER, CharClass.LETTER): (True, ScanState.ACCUMULATING_COMMAND),
    (ScanState.ACCUMULATING_NUMBER, CharClass.OTHER): (False, ScanState.ACCUMULATING_NUMBER),
    (ScanState.ACCUMULATING_COMMAND, CharClass.SEPARATOR): (True, ScanState.IDLE),
    # Adjacent letters: "ZM" -> "Z", "M..."
    (ScanState.ACCUMULATING_COMMAND, CharClass.LETTER): (True, ScanState.ACCUMULATING_COMMAND),
    # First argument glued to its letter: "M105"
    (ScanState.ACCUMULATING_COMMAND, CharClass.OTHER): (False, ScanState.ACCUMULATING_COMMAND),
}


def classify(ch: str, separators: str = DEFAULT_SEPARATORS) -> CharClass:
    if ch in separators:
        return CharClass.SEPARATOR
    if ch.isalpha():
        return CharClass.LETTER
    return CharClass.OTHER


def tokenize(d: str, separators: str = DEFAULT_SEPARATORS) -> list[str]:
    """Split path data into command tokens and numeric tokens.

    Separators end a token. A letter ends the current token and opens a
    command token. Anything else (digits, signs, '.') extends the current one.
    """
    tokens: list[str] = []
    buffer: list[str] = []
    state = ScanState.IDLE

    for ch in d:
        emit, state = TRANSITIONS[(state, classify(ch, separators))]
        if emit:
            tokens.append("".join(buffer))
            buffer.clear()
        if state is not ScanState.IDLE:
            buffer.append(ch)

    if state is not ScanState.IDLE:
        tokens.append("".join(buffer))
    return tokens


def is_continuation(token: str, signed: bool = True) -> bool:
    """True when *token* is another argument for the preceding command."""
    first = token[0]
    if first in ASCII_DIGITS:
        return True
    return signed and first in _SIGNED_STARTS


def parse_number(token: str) -> float:
    """Plain ASCII decimal with optional sign; no exponents, underscores or inf."""
    if not _DECIMAL_RE.fullmatch(token):
        raise MalformedNumber(token)
    value = float(token)
    # Enough digits overflow to inf
    if not math.isfinite(value):
        raise MalformedNumber(token)
    return value


def group_tokens(tokens: list[str], signed_continuation: bool = True) -> list[tuple[str, list[float]]]:
    """Attach numeric tokens to the command letter that precedes them."""
    groups: list[tuple[str, list[float]]] = []
    i = 0
    n = len(tokens)

    while i < n:
        token = tokens[i]
        i += 1
        letter = token[0]

        if not letter.isalpha():
            # Numbers with no command in front of them
            raise UnsupportedCommand(letter)

        if letter in _CLOSE_LETTERS:
            if len(token) > 1:
                raise ArityMismatch(letter, 0, 1)
            groups.append((letter, []))
            continue

        args: list[float] = []
        if len(token) > 1:
            args.append(parse_number(token[1:]))
        while i < n and is_continuation(tokens[i], signed_continuation):
            args.append(parse_number(tokens[i]))
            i += 1

        groups.append((letter, args))

    logger.debug("Grouped %d tokens into %d commands", n, len(groups))
    return groups
