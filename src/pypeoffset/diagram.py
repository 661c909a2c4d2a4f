"""
Offset diagram geometry and SVG rendering.

The offset is drawn as a right triangle in model units (+Y up):

            end
            /|
   travel  / |  rise
          /  |
   start /___| corner
           run

The travel leg carries the pipe; its label shows the (possibly diameter
corrected) travel, so it can read longer than the drawn hypotenuse.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .offset_calculator import DiagramData, format_angle
from .report import DEFAULT_PRECISION

# =============================================================================
# SVG STYLING
# =============================================================================

LEG_STROKE_WIDTH = 0.75
TRAVEL_STROKE_WIDTH = 2.5
LEG_COLOR = "#888888"
TRAVEL_COLOR = "#000000"
LABEL_COLOR = "#333333"
FONT_SIZE = 6
LABEL_GAP = 4


# =============================================================================
# DATA STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass
class OffsetDiagram:
    """Triangle vertices and labels for one offset.

    Attributes:
        start: Where the travel leaves the lower run (angle vertex)
        corner: Foot of the rise, at the end of the run
        end: Where the travel meets the upper run
        rise_label, run_label, travel_label, angle_label: Display text
    """

    start: Point
    corner: Point
    end: Point
    rise_label: str
    run_label: str
    travel_label: str
    angle_label: str

    @property
    def points(self) -> np.ndarray:
        """Vertices as a 3x2 array (start, corner, end)."""
        return np.array(
            [
                [self.start.x, self.start.y],
                [self.corner.x, self.corner.y],
                [self.end.x, self.end.y],
            ],
            dtype=float,
        )


def build_diagram(data: DiagramData, precision: int = DEFAULT_PRECISION) -> OffsetDiagram:
    """Lay out the offset triangle for a calculation snapshot."""
    return OffsetDiagram(
        start=Point(0.0, 0.0),
        corner=Point(data.run, 0.0),
        end=Point(data.run, data.rise),
        rise_label=f"Rise: {data.rise:.{precision}f}",
        run_label=f"Run: {data.run:.{precision}f}",
        travel_label=f"Travel: {data.travel:.{precision}f}",
        angle_label=f"Angle: {format_angle(data.angle)}°",
    )


# =============================================================================
# SVG RENDERING
# =============================================================================


def to_view_coords(
    points: np.ndarray,
    width: float,
    height: float,
    margin: float,
) -> np.ndarray:
    """
    Scale model points into an SVG view box, centered, aspect preserved.

    The largest extent drives the scale, so a zero-width triangle (90° offset)
    still fits.
    """
    mins = points.min(axis=0)
    extents = points.max(axis=0) - mins
    available = np.array([width - 2 * margin, height - 2 * margin], dtype=float)
    if np.any(available <= 0):
        raise ValueError(f"Margin {margin} leaves no drawing area in {width}x{height}")

    scales = np.where(extents > 0, available / np.where(extents > 0, extents, 1.0), np.inf)
    scale = float(scales.min())
    if not np.isfinite(scale):
        scale = 1.0

    offset = (available - extents * scale) / 2
    view = (points - mins) * scale
    view[:, 0] = margin + offset[0] + view[:, 0]
    # SVG Y grows downward
    view[:, 1] = height - margin - offset[1] - view[:, 1]
    return view


def render_svg(
    diagram: OffsetDiagram,
    width: float = 200.0,
    height: float = 150.0,
    margin: float = 20.0,
) -> str:
    """Render the diagram as a standalone SVG document string."""
    (sx, sy), (cx, cy), (ex, ey) = to_view_coords(diagram.points, width, height, margin)

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
        '<g id="offset-diagram">',
        f'<line x1="{sx:.2f}" y1="{sy:.2f}" x2="{cx:.2f}" y2="{cy:.2f}" '
        f'stroke="{LEG_COLOR}" stroke-width="{LEG_STROKE_WIDTH}" stroke-dasharray="3,2"/>',
        f'<line x1="{cx:.2f}" y1="{cy:.2f}" x2="{ex:.2f}" y2="{ey:.2f}" '
        f'stroke="{LEG_COLOR}" stroke-width="{LEG_STROKE_WIDTH}" stroke-dasharray="3,2"/>',
        f'<line x1="{sx:.2f}" y1="{sy:.2f}" x2="{ex:.2f}" y2="{ey:.2f}" '
        f'stroke="{TRAVEL_COLOR}" stroke-width="{TRAVEL_STROKE_WIDTH}" stroke-linecap="round"/>',
        _text((sx + cx) / 2, sy + LABEL_GAP + FONT_SIZE, diagram.run_label, "middle"),
        _text(cx + LABEL_GAP, (cy + ey) / 2, diagram.rise_label, "start"),
        _text((sx + ex) / 2 - LABEL_GAP, (sy + ey) / 2 - LABEL_GAP, diagram.travel_label, "end"),
        _text(sx, sy + LABEL_GAP + 2 * FONT_SIZE, diagram.angle_label, "start"),
        "</g>",
        "</svg>",
    ]
    return "\n".join(parts) + "\n"


def write_svg(diagram: OffsetDiagram, path: str | Path, **kwargs) -> Path:
    """Render the diagram and write it to path. Returns the path written."""
    path = Path(path)
    path.write_text(render_svg(diagram, **kwargs), encoding="utf-8")
    return path


def _text(x: float, y: float, label: str, anchor: str) -> str:
    return (
        f'<text x="{x:.2f}" y="{y:.2f}" fill="{LABEL_COLOR}" '
        f'font-family="Arial" font-size="{FONT_SIZE}" text-anchor="{anchor}">{label}</text>'
    )
