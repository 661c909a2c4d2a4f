"""
Text summaries of offset results.
"""

from __future__ import annotations

from .offset_calculator import OffsetResult, format_angle

DEFAULT_PRECISION = 2


def result_rows(result: OffsetResult, precision: int = DEFAULT_PRECISION) -> list[tuple[str, str]]:
    """
    Label/value rows for an offset result, in display order.

    Lengths are fixed to `precision` decimals; the pipe diameter row only
    appears when a diameter was given.
    """
    rows = [
        ("Travel", f"{result.travel:.{precision}f}"),
        ("Rise", f"{result.rise:.{precision}f}"),
        ("Run", f"{result.run:.{precision}f}"),
        ("Cut length", f"{result.cut_length:.{precision}f}"),
        ("Angle", f"{format_angle(result.diagram.angle)}°"),
    ]
    if result.diagram.pipe_diameter is not None:
        rows.append(("Pipe diameter", f"{result.diagram.pipe_diameter:.{precision}f}"))
    return rows


def format_result(result: OffsetResult, precision: int = DEFAULT_PRECISION) -> str:
    """Aligned multi-line summary of an offset result."""
    rows = result_rows(result, precision)
    label_width = max(len(label) for label, _ in rows) + 1
    return "\n".join(f"{label + ':':<{label_width}} {value}" for label, value in rows)
