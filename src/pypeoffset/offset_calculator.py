"""
Pipe offset calculator.

Converts an offset distance and a fitting angle into the dimensions needed to
fabricate a simple (two equal fittings) pipe offset:

    rise   = offset distance (vertical leg)
    run    = rise / tan(angle)     (horizontal leg)
    travel = rise / sin(angle)     (angled pipe, fitting to fitting)

When the pipe diameter is known, travel grows by diameter / sin(angle) to
account for centerline rather than face measurement.

Example:
    calculator = OffsetCalculator()
    result = calculator.calculate_offset(OffsetParameters(offset_distance=100, angle=45))
    result.travel  # 141.42...
"""

from __future__ import annotations

import logging
import math
import numbers
import warnings
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# =============================================================================
# SUPPORTED ANGLES
# =============================================================================

# Trade-standard fitting angles in degrees
SUPPORTED_ANGLES: tuple[float, ...] = (15, 22.5, 30, 45, 60, 90)


# =============================================================================
# ERRORS
# =============================================================================


class OffsetValidationError(ValueError):
    """Base class for rejected offset parameters.

    Attributes:
        field: Name of the offending parameter
    """

    field: str = ""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidOffsetDistanceError(OffsetValidationError):
    field = "offset_distance"

    def __init__(self, message: str = "Invalid offset distance: must be a positive finite number"):
        super().__init__(message)


class InvalidAngleError(OffsetValidationError):
    field = "angle"

    def __init__(self, message: str = "Invalid angle: must be a valid finite number"):
        super().__init__(message)


class UnsupportedAngleError(OffsetValidationError):
    """Angle is a finite number but not one of the supported fitting angles."""

    field = "angle"

    def __init__(self, angle: float, supported_angles: tuple[float, ...] = SUPPORTED_ANGLES):
        self.angle = angle
        self.supported_angles = tuple(supported_angles)
        super().__init__(
            f"Unsupported angle: {format_angle(angle)}. "
            f"Supported angles are: {', '.join(format_angle(a) for a in self.supported_angles)}"
        )


class InvalidPipeDiameterError(OffsetValidationError):
    field = "pipe_diameter"

    def __init__(self, message: str = "Invalid pipe diameter: must be a non-negative finite number"):
        super().__init__(message)


# =============================================================================
# DATA STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class OffsetParameters:
    """Input for an offset calculation.

    Attributes:
        offset_distance: Required vertical offset (the rise), > 0
        angle: Fitting angle in degrees, one of SUPPORTED_ANGLES
        pipe_diameter: Optional pipe outside diameter, >= 0
    """

    offset_distance: float
    angle: float
    pipe_diameter: float | None = None


@dataclass(frozen=True)
class DiagramData:
    """Snapshot of a calculation for drawing a labeled offset triangle."""

    offset_distance: float
    angle: float
    travel: float
    rise: float
    run: float
    pipe_diameter: float | None = None


@dataclass(frozen=True)
class OffsetResult:
    """Calculated offset dimensions.

    Attributes:
        travel: Length of the angled pipe section (diameter corrected)
        rise: Vertical leg, equal to the requested offset distance
        run: Horizontal leg
        cut_length: Length to cut the angled pipe to (equal to travel)
        diagram: Data for rendering the offset diagram
    """

    travel: float
    rise: float
    run: float
    cut_length: float
    diagram: DiagramData


# =============================================================================
# HELPERS
# =============================================================================


def format_angle(angle: float) -> str:
    """Format an angle without a trailing '.0' (45.0 -> '45', 22.5 -> '22.5')."""
    if isinstance(angle, float) and angle.is_integer():
        return str(int(angle))
    return str(angle)


def _is_finite_number(value) -> bool:
    # bool is an int subclass but never a meaningful dimension
    if value is None or isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float are still finite
        return True


def _divide(numerator: float, denominator: float) -> float:
    """numerator / denominator, saturating to inf for ints beyond float range."""
    try:
        return numerator / denominator
    except OverflowError:
        return math.copysign(math.inf, denominator)


# =============================================================================
# CALCULATOR
# =============================================================================


class OffsetCalculator:
    """Stateless pipe offset calculator.

    Safe to share between threads; it holds no mutable state.
    """

    def get_supported_angles(self) -> list[float]:
        """Return the supported angles (degrees) as a new list."""
        return list(SUPPORTED_ANGLES)

    def is_angle_supported(self, angle: float) -> bool:
        return angle in SUPPORTED_ANGLES

    def validate_parameters(self, params: OffsetParameters) -> None:
        """
        Check offset parameters in order: distance, angle, pipe diameter.

        Raises:
            InvalidOffsetDistanceError: distance missing, not finite or <= 0
            InvalidAngleError: angle missing or not finite
            UnsupportedAngleError: angle not in SUPPORTED_ANGLES
            InvalidPipeDiameterError: diameter given but not finite or < 0
        """
        if not _is_finite_number(params.offset_distance) or params.offset_distance <= 0:
            raise InvalidOffsetDistanceError()

        if not _is_finite_number(params.angle):
            raise InvalidAngleError()

        if not self.is_angle_supported(params.angle):
            raise UnsupportedAngleError(params.angle)

        if params.pipe_diameter is not None:
            if not _is_finite_number(params.pipe_diameter) or params.pipe_diameter < 0:
                raise InvalidPipeDiameterError()

    def calculate_offset(self, params: OffsetParameters) -> OffsetResult:
        """
        Calculate pipe offset dimensions.

        Uses sin(angle) = rise / travel and tan(angle) = rise / run. At 90°
        the floating point tangent is huge but finite, so run comes out as a
        tiny positive residue rather than exactly zero.

        Args:
            params: Offset distance, angle and optional pipe diameter

        Returns:
            OffsetResult with travel, rise, run, cut length and diagram data

        Raises:
            OffsetValidationError: If any parameter is invalid (see
                validate_parameters). Nothing is computed in that case.
        """
        self.validate_parameters(params)

        offset_distance = params.offset_distance
        angle = params.angle
        pipe_diameter = params.pipe_diameter

        angle_rad = math.radians(angle)

        rise = offset_distance
        travel = _divide(rise, math.sin(angle_rad))
        run = _divide(rise, math.tan(angle_rad))

        # Centerline measurement lengthens the angled run
        if pipe_diameter is not None and pipe_diameter > 0:
            travel += _divide(pipe_diameter, math.sin(angle_rad))

        if not (math.isfinite(travel) and math.isfinite(run)):
            warnings.warn(
                f"Offset of {offset_distance} at {format_angle(angle)}° exceeds the "
                f"floating point range (travel={travel}, run={run})",
                RuntimeWarning,
                stacklevel=2,
            )

        cut_length = travel

        diagram = DiagramData(
            offset_distance=rise,
            angle=angle,
            travel=travel,
            rise=rise,
            run=run,
            pipe_diameter=pipe_diameter,
        )

        logger.debug(
            "Offset %s at %s deg (diameter=%s): travel=%.6f run=%.6f",
            offset_distance, angle, pipe_diameter, travel, run,
        )

        return OffsetResult(
            travel=travel,
            rise=rise,
            run=run,
            cut_length=cut_length,
            diagram=diagram,
        )
