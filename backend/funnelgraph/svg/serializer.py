"""Write SVG markup for a computed funnel geometry."""

from __future__ import annotations

from xml.sax.saxutils import quoteattr

from funnelgraph.engine.curves import path_data
from funnelgraph.engine.geometry import FunnelGeometry
from funnelgraph.engine.orientation import Orientation
from funnelgraph.utils.math_helpers import format_number, round_point

ColorSpec = str | list[str]


def fill_mode(color: ColorSpec) -> str:
    """A string or a one-item list fills solid; longer lists become a gradient."""
    if isinstance(color, str) or len(color) == 1:
        return "solid"
    return "gradient"


def gradient_stops(colors: list[str]) -> list[tuple[str, str]]:
    """(offset, colour) pairs spread evenly from 0% to 100%."""
    n = len(colors)
    return [(f"{round_point(100 * i / (n - 1))}%", color) for i, color in enumerate(colors)]


def gradient_vector(direction: Orientation) -> dict[str, str]:
    """Vertical gradients run top to bottom; horizontal is the SVG default."""
    if direction is Orientation.VERTICAL:
        return {"x1": "0", "x2": "0", "y1": "0", "y2": "1"}
    return {}


def render_svg(
    geometry: FunnelGeometry,
    colors: list[ColorSpec],
    gradient_direction: Orientation = Orientation.HORIZONTAL,
) -> str:
    """One <path> per outline, with solid fills or per-path linear gradients."""
    width = format_number(geometry.width)
    height = format_number(geometry.height)
    defs: list[str] = []
    paths: list[str] = []

    for i, outline in enumerate(geometry.outlines):
        color = colors[i]
        d = path_data(outline)

        if fill_mode(color) == "solid":
            solid = color if isinstance(color, str) else color[0]
            paths.append(f"  <path d={quoteattr(d)} fill={quoteattr(solid)} stroke={quoteattr(solid)} />")
            continue

        gradient_id = f"funnelGradient-{i + 1}"
        vector = "".join(f' {k}="{v}"' for k, v in gradient_vector(gradient_direction).items())
        defs.append(f'    <linearGradient id="{gradient_id}"{vector}>')
        for offset, stop in gradient_stops(color):
            defs.append(f'      <stop offset="{offset}" stop-color={quoteattr(stop)} />')
        defs.append("    </linearGradient>")
        fill = f"url(#{gradient_id})"
        paths.append(f'  <path d={quoteattr(d)} fill="{fill}" stroke="{fill}" />')

    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}"'
        f' viewBox="0 0 {width} {height}">',
    ]
    if defs:
        lines.append("  <defs>")
        lines.extend(defs)
        lines.append("  </defs>")
    lines.extend(paths)
    lines.append("</svg>")
    return "\n".join(lines)
