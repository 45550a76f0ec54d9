"""Engine configuration — curve shape and fallback colours."""

from __future__ import annotations

from dataclasses import dataclass, field

from funnelgraph.engine.curves import DEFAULT_CURVE_TENSION


def _default_colors() -> list[str]:
    return ["#FF4589", "#FF5050", "#05DF9D", "#4FF2FD", "#2D9CDB", "#A0BBFF", "#EC77FF", "#3A1D9E"]


@dataclass
class EngineConfig:
    """Tunables shared by the geometry pipeline and the SVG renderer."""

    # Fraction of the main-axis span between an endpoint and its control point.
    # 0.5 puts both control points on the midpoint: a symmetric S-curve.
    curve_tension: float = DEFAULT_CURVE_TENSION

    # Fixed fallback list, cycled when no colours are supplied.
    default_colors: list[str] = field(default_factory=_default_colors)

    def colors_for(self, count: int) -> list[str]:
        """First `count` fallback colours, wrapping around the list."""
        return [self.default_colors[i % len(self.default_colors)] for i in range(count)]
