"""Write gradients back out as CSS `linear-gradient()` values."""

from typing import Sequence

from cssgrad.gradient.direction import GradientDirection, parse_direction
from cssgrad.gradient.stop import ColorStop


def serialize_stops(stops: Sequence[ColorStop]) -> str:
    return ", ".join(stop.to_css() for stop in stops)


def serialize_gradient(direction: GradientDirection, stops: Sequence[ColorStop]) -> str:
    """Create a `linear-gradient()` value.

    Positions and angles are written with one decimal place, so parsing the
    result gives back the same gradient up to that rounding.
    """
    if isinstance(direction, str):
        direction = parse_direction(direction)
    return f"linear-gradient({direction.to_css()}, {serialize_stops(stops)})"
