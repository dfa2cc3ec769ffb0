"""Tests for path data / SVG output."""

from __future__ import annotations

from pathsketch.svg.builder import Path, PathOp
from pathsketch.svg.parser import parse_path
from pathsketch.svg.primitives import approximate_circle
from pathsketch.svg.serializer import path_to_d, serialize_svg
from tests.conftest import LOGO_D, SQUARE_D


def test_square_d():
    assert path_to_d(parse_path(SQUARE_D)) == "M0 0 L10 0 L10 10 L0 10 Z"


def test_relative_input_written_absolute():
    assert parse_path("M10 10l5 5h-15").to_d() == "M10 10 L15 15 L0 15"


def test_logo_reparses_to_same_ops():
    path = parse_path(LOGO_D)
    assert parse_path(path.to_d()) == path


def test_precision_and_negative_zero():
    path = Path([PathOp("move", (1.23456789, -0.00001))])
    assert path_to_d(path, precision=3) == "M1.235 0"
    assert path_to_d(path, precision=0) == "M1 0"


def test_quad_letter():
    path = parse_path("M0 0S5 5 10 0")
    assert path.to_d() == "M0 0 S5 5 10 0"
    assert path.to_d(quad_letter="Q") == "M0 0 Q5 5 10 0"


def test_empty_path():
    assert path_to_d(Path()) == ""


def test_serialize_svg():
    circle = approximate_circle(100, 256, 256)
    svg = serialize_svg([{"d": circle.to_d(), "fill": "#000000"}], title="demo")
    assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert 'viewBox="0 0 512 512"' in svg
    assert "<title>demo</title>" in svg
    assert '<path d="M356 256 C356 200.7715' in svg
    assert 'fill="#000000"' in svg
    assert svg.endswith("</svg>")


def test_serialize_svg_other_tag():
    svg = serialize_svg([{"tag": "circle", "cx": 5, "cy": 5, "r": 2}], canvas_w=10, canvas_h=10)
    assert '<circle cx="5" cy="5" r="2" />' in svg


def test_serialize_svg_escapes_title_and_attributes():
    svg = serialize_svg([{"d": "M0 0", "data-note": 'a "b" <c> & d'}], title="x < y & \"z\"")
    assert '<title>x &lt; y &amp; "z"</title>' in svg
    assert 'data-note="a &quot;b&quot; &lt;c&gt; &amp; d"' in svg
    assert "<c>" not in svg
