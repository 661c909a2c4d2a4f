"""
Parsing of user-entered offset fields.

Entry fields hand over raw text. Blank text means "not given"; anything that
is not a number is rejected with the error type of the field it came from.
Range checks are left to OffsetCalculator.calculate_offset.
"""

from __future__ import annotations

from .offset_calculator import (
    InvalidAngleError,
    InvalidOffsetDistanceError,
    InvalidPipeDiameterError,
    OffsetParameters,
    OffsetValidationError,
)

_FIELD_ERRORS: dict[str, type[OffsetValidationError]] = {
    "offset_distance": InvalidOffsetDistanceError,
    "angle": InvalidAngleError,
    "pipe_diameter": InvalidPipeDiameterError,
}

_FIELD_LABELS = {
    "offset_distance": "offset distance",
    "angle": "angle",
    "pipe_diameter": "pipe diameter",
}


def parse_number(text: str | float | None, field: str) -> float | None:
    """
    Convert entered text to a float.

    Args:
        text: Raw field value. Numbers are passed through unchanged.
        field: One of "offset_distance", "angle", "pipe_diameter"

    Returns:
        The parsed value, or None for blank input

    Raises:
        ValueError: If field is unknown
        OffsetValidationError: Subclass matching field if text is not a number

    Examples:
        >>> parse_number(" 12.5 ", "offset_distance")
        12.5
        >>> parse_number("", "pipe_diameter") is None
        True
    """
    if field not in _FIELD_ERRORS:
        raise ValueError(f"Unknown field: {field}. Use: {list(_FIELD_ERRORS.keys())}")

    if text is None:
        return None
    if not isinstance(text, str):
        return text

    text = text.strip()
    if not text:
        return None

    try:
        return float(text)
    except ValueError:
        raise _FIELD_ERRORS[field](
            f"Invalid {_FIELD_LABELS[field]}: cannot parse '{text}' as a number"
        ) from None


def parameters_from_text(
    offset_distance: str,
    angle: str | float,
    pipe_diameter: str | None = "",
) -> OffsetParameters:
    """Build OffsetParameters from entered text; blank diameter means none."""
    return OffsetParameters(
        offset_distance=parse_number(offset_distance, "offset_distance"),
        angle=parse_number(angle, "angle"),
        pipe_diameter=parse_number(pipe_diameter, "pipe_diameter"),
    )
