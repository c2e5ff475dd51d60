"""Parse CSS `linear-gradient()` values.

Parsing is best-effort. A value that isn't a linear gradient at all gives
`None`, so the caller can fall back to a default. Inside a gradient, a color
stop that can't be understood is dropped with a warning, and the rest of the
gradient is kept:

    linear-gradient(to right, #f00, banana, #00f 80%)
                              ^^^^  ^^^^^^  ^^^^^^^^
                              kept  dropped   kept

Dropped stops are never replaced by a placeholder color.
"""

import re
from typing import List, Optional, Tuple
import warnings

from cssgrad.color import FormatError, ensure_rgba
from cssgrad.gradient.direction import GradientDirection, parse_direction
from cssgrad.gradient.stop import ColorStop
from cssgrad.util import NUMBER, clamp, split_top_level


GRADIENT = re.compile(r"linear-gradient\(\s*([^,]+),\s*(.+)\)", re.DOTALL)

COLOR_STOP = re.compile(
    r"""
\s*
(?P<color>rgba?\([^)]*\)|\#[0-9A-Fa-f]+)    # Color (validated by ensure_rgba)
(?:\s+(?P<position>{number})%?)?            # Optional position, may be negative
\s*
""".format(number=NUMBER.pattern),
    re.VERBOSE,
)


def parse_color_stop(token: str) -> Optional[ColorStop]:
    """Parse one color stop, or return None (with a warning) if it's invalid."""
    match = COLOR_STOP.fullmatch(token)
    if match is None:
        warnings.warn(f"Skipping unknown color stop: {token.strip()!r}")
        return None

    try:
        color = ensure_rgba(match["color"])
    except FormatError as e:
        warnings.warn(f"Skipping color stop {token.strip()!r}: {e}")
        return None

    position = match["position"]
    if position is not None:
        position = float(position)
        if not 0 <= position <= 100:
            warnings.warn(f"Clamping color stop position to [0, 100]: {position}")
            position = clamp(position)

    return ColorStop(color, position)


def parse_gradient(
    text: str,
) -> Optional[Tuple[GradientDirection, List[ColorStop]]]:
    """Parse a `linear-gradient()` value into a direction and raw color stops.

    Positions of the returned stops may be `None`; use normalize_stops() to
    fill them in.
    """
    if not text:
        return None
    match = GRADIENT.search(text)
    if match is None:
        return None

    try:
        direction = parse_direction(match[1])
    except ValueError as e:
        warnings.warn(str(e))
        return None

    stops = []
    for token in split_top_level(match[2]):
        stop = parse_color_stop(token)
        if stop is not None:
            stops.append(stop)

    if not stops:
        warnings.warn(f"No valid color stops in gradient: {text!r}")
        return None
    return direction, stops
