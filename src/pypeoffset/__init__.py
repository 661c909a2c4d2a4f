"""
Pipe offset calculator.

Computes travel, run and cut length for a pipe offset made with two equal
fittings, plus data for drawing the offset.
"""

from .offset_calculator import (
    SUPPORTED_ANGLES,
    DiagramData,
    InvalidAngleError,
    InvalidOffsetDistanceError,
    InvalidPipeDiameterError,
    OffsetCalculator,
    OffsetParameters,
    OffsetResult,
    OffsetValidationError,
    UnsupportedAngleError,
)
from .inputs import parameters_from_text, parse_number
from .report import format_result, result_rows
from .diagram import OffsetDiagram, Point, build_diagram, render_svg, write_svg
from .config import JobSettings, OffsetJob, OffsetJobFile

__all__ = [
    # Calculator
    "SUPPORTED_ANGLES",
    "OffsetCalculator",
    "OffsetParameters",
    "OffsetResult",
    "DiagramData",
    # Errors
    "OffsetValidationError",
    "InvalidOffsetDistanceError",
    "InvalidAngleError",
    "UnsupportedAngleError",
    "InvalidPipeDiameterError",
    # Input parsing
    "parse_number",
    "parameters_from_text",
    # Reports
    "format_result",
    "result_rows",
    # Diagrams
    "Point",
    "OffsetDiagram",
    "build_diagram",
    "render_svg",
    "write_svg",
    # Job files
    "JobSettings",
    "OffsetJob",
    "OffsetJobFile",
]
