"""Gradient directions and the geometry of the rotational direction control.

All angles follow the CSS `linear-gradient()` convention:

                  0deg (to top)
                       |
    270deg (to left) --+-- 90deg (to right)
                       |
                 180deg (to bottom)

That is, 0 degrees points up and angles increase clockwise. Points are in
screen coordinates, so y grows downward: "up" is (0, -1).
"""

from dataclasses import dataclass
import re
from typing import Tuple, Union

import numpy as np

from cssgrad.util import NUMBER


KEYWORD_ANGLES = {
    "to top": 0.0,
    "to top right": 45.0,
    "to right": 90.0,
    "to bottom right": 135.0,
    "to bottom": 180.0,
    "to bottom left": 225.0,
    "to left": 270.0,
    "to top left": 315.0,
}

# Only the four cardinal angles snap back to a keyword. The diagonal keywords
# describe corner-to-corner gradients, which are only 45deg multiples for
# square boxes.
CARDINAL_KEYWORDS = {0.0: "to top", 90.0: "to right", 180.0: "to bottom", 270.0: "to left"}

ANGLE_TOKEN = re.compile(f"({NUMBER.pattern})deg")


def normalize_degrees(degrees):
    """Wrap an angle into [0, 360)."""
    degrees = float(np.mod(degrees, 360.0))
    # np.mod(-1e-20, 360) == 360.0 due to rounding
    return 0.0 if degrees == 360.0 else degrees


@dataclass(frozen=True)
class NamedDirection:
    keyword: str

    def __post_init__(self):
        if self.keyword not in KEYWORD_ANGLES:
            raise ValueError(f"Unknown direction keyword: {self.keyword!r}")

    @property
    def degrees(self):
        return KEYWORD_ANGLES[self.keyword]

    def to_css(self):
        return self.keyword


@dataclass(frozen=True)
class AngleDirection:
    degrees: float

    def __post_init__(self):
        object.__setattr__(self, "degrees", normalize_degrees(self.degrees))

    def to_css(self):
        return f"{self.degrees:.1f}deg"


GradientDirection = Union[NamedDirection, AngleDirection]


def parse_direction(token: str) -> GradientDirection:
    """Parse a direction token: a `to ...` keyword or `<number>deg`."""
    # Collapse runs of whitespace, so "to  top   left" is still a keyword
    token = " ".join(token.split()).lower()
    if token in KEYWORD_ANGLES:
        return NamedDirection(token)

    match = ANGLE_TOKEN.fullmatch(token)
    if match:
        return AngleDirection(float(match[1]))

    raise ValueError(f"Unknown gradient direction: {token!r}")


def direction_to_angle(direction) -> float:
    """Get the angle in degrees of a direction (or direction token)."""
    if isinstance(direction, str):
        direction = parse_direction(direction)
    return direction.degrees


def angle_to_direction(degrees) -> GradientDirection:
    """Convert an angle to a direction, preferring a keyword on exact match.

    There is no tolerance: 89.99 stays an angle, even though it displays as
    "90.0deg".
    """
    degrees = normalize_degrees(degrees)
    if degrees in CARDINAL_KEYWORDS:
        return NamedDirection(CARDINAL_KEYWORDS[degrees])
    return AngleDirection(round(degrees, 1))


def angle_to_point(degrees, radius=1.0) -> Tuple[float, float]:
    """Get the point at `degrees` on a circle of `radius` centered on (0, 0)."""
    theta = np.deg2rad(degrees)
    return float(radius * np.sin(theta)), float(-radius * np.cos(theta))


def point_to_angle(dx, dy) -> float:
    """Get the angle of the offset (dx, dy) from a circle's center.

    The center itself has no angle, so it maps to 0.
    """
    if dx == 0 and dy == 0:
        return 0.0
    # atan2 measures from the +x axis (90deg in CSS terms). Adding 90 rotates
    # that onto the CSS zero, which points up.
    return normalize_degrees(np.rad2deg(np.arctan2(dy, dx)) + 90.0)


def dot_position(direction, dial_size, dot_size) -> Tuple[float, float]:
    """Get the (left, top) offset of the direction dot inside a square dial.

    The dot is kept inside the dial, so its center travels on a circle of
    radius `dial_size / 2 - dot_size / 2`.
    """
    center = dial_size / 2
    dot_radius = dot_size / 2
    x, y = angle_to_point(direction_to_angle(direction), center - dot_radius)
    return center + x - dot_radius, center + y - dot_radius
