"""Parser configuration — controls tokenizer continuation rules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParserConfig:
    """Knobs for a single parse_path() call."""

    # Accept "-", "+" and "." as the first character of a repeated argument.
    # False restores the digit-only check: "l5 5 -3 2" then fails on "-3".
    signed_continuation: bool = True

    # Characters that end the current token
    separators: str = " ,\t\r\n"

    @classmethod
    def from_settings(cls) -> "ParserConfig":
        from pathsketch.config import settings

        return cls(signed_continuation=settings.signed_continuation)
