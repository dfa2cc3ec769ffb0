"""
pathsketch demo
Builds a circle and a logo outline on a 512x512 canvas and writes logo.svg.
"""
import sys

from pathsketch import SegmentPathBuilder, approximate_circle, parse_path, replay
from pathsketch.svg.serializer import serialize_svg
from pathsketch.utils.geometry import path_bbox, to_polygon

LOGO_D = (
    "M105 57.0273V453.751H252.659C448.259 461.723 428.124 276.022 352.856 253.513"
    "V243.197C424.768 204.274 423.809 54.6826 252.659 57.0273H105Z"
)

circle = approximate_circle(100.0, 256.0, 256.0)
logo = parse_path(LOGO_D)

for name, path in (("circle", circle), ("logo", logo)):
    xmin, ymin, xmax, ymax = path_bbox(path)
    segments = replay(path, SegmentPathBuilder())
    print(f"--- {name} ---")
    print(f"  Operations: {len(path)}")
    print(f"  Bounding box: x=[{xmin:.2f}, {xmax:.2f}] y=[{ymin:.2f}, {ymax:.2f}]")
    print(f"  Path length: {sum(seg.length() for seg in segments):.2f}")
    print(f"  Filled area: {to_polygon(path).area:.2f}")

svg = serialize_svg(
    [
        {"d": circle.to_d(quad_letter="Q"), "fill": "#000000"},
        {"d": logo.to_d(quad_letter="Q"), "fill": "#810E68"},
    ],
    title="pathsketch demo",
)

out = sys.argv[1] if len(sys.argv) > 1 else "logo.svg"
with open(out, "w", encoding="utf-8") as f:
    f.write(svg)
print(f"\nWrote {out}")
