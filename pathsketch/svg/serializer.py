"""Write path data and small SVG documents from built Paths."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from xml.sax.saxutils import escape

if TYPE_CHECKING:
    from pathsketch.svg.builder import Path

# Attribute values are double-quoted
_ATTR_ENTITIES = {'"': "&quot;"}

# S here means "quadratic through one control point", see commands.py.
_LETTERS = {"move": "M", "line": "L", "cubic": "C", "quad": "S", "close": "Z"}


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def path_to_d(path: Path, precision: int = 4, quad_letter: str = "S") -> str:
    """Absolute path data for *path*.

    With the default quad_letter="S", parse_path() reads the result back to the
    same ops. Pass "Q" for documents meant for standard SVG renderers.
    """
    parts: list[str] = []
    for op in path:
        letter = quad_letter if op.kind == "quad" else _LETTERS[op.kind]
        if op.args:
            parts.append(letter + " ".join(_fmt(v, precision) for v in op.args))
        else:
            parts.append(letter)
    return " ".join(parts)


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 512.0,
    canvas_h: float = 512.0,
    title: str = "",
) -> str:
    """Generate SVG markup from element definitions (one dict of attributes per element).

    The title and attribute values are XML-escaped. Tag and attribute names
    are written as given.
    """
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {_fmt(canvas_w, 4)} {_fmt(canvas_h, 4)}" xmlns="http://www.w3.org/2000/svg">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f'{k}="{escape(str(v), _ATTR_ENTITIES)}"' for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)
