"""Convert between hex and RGBA color notation."""

from dataclasses import dataclass, replace
import re
from typing import List

from cssgrad.util import NUMBER, format_number


HEX_COLOR = re.compile(r"#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})")
RGBA_COLOR = re.compile(r"rgba?\([^)]*\)")

# Used by hex_colors_to_rgba(). The lookahead stops us from eating the start
# of a longer (invalid) hex run.
HEX_IN_TEXT = re.compile(r"#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})(?![0-9A-Fa-f])")


class FormatError(ValueError):
    """A color token couldn't be parsed, or a channel is out of range."""


@dataclass(frozen=True)
class RgbaColor:
    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, float):
                if not value.is_integer():
                    raise FormatError(f"Channel `{name}` isn't integral: {value}")
                # Frozen, so go through object.__setattr__
                object.__setattr__(self, name, int(value))
            if not 0 <= getattr(self, name) <= 255:
                raise FormatError(f"Channel `{name}` out of range: {value}")

        alpha = float(self.alpha)
        if not 0.0 <= alpha <= 1.0:
            raise FormatError(f"Alpha out of range: {self.alpha}")
        object.__setattr__(self, "alpha", alpha)

    @property
    def rgb(self):
        return (self.red, self.green, self.blue)

    def with_rgb(self, red, green, blue):
        """Replace the RGB channels, keeping alpha."""
        return replace(self, red=red, green=green, blue=blue)

    def with_alpha(self, alpha):
        """Replace alpha, keeping the RGB channels."""
        return replace(self, alpha=alpha)

    def to_css(self):
        return "rgba({}, {}, {}, {})".format(*self.rgb, format_number(self.alpha))

    def __str__(self):
        return self.to_css()


def hex_to_rgba(hex_color: str) -> RgbaColor:
    """Convert `#rgb` or `#rrggbb` to an opaque RgbaColor."""
    if not isinstance(hex_color, str) or not HEX_COLOR.fullmatch(hex_color):
        raise FormatError(f"Color isn't in hex format: {hex_color!r}")

    digits = hex_color[1:]
    if len(digits) == 3:
        # #f0c -> #ff00cc
        digits = "".join(c * 2 for c in digits)
    return RgbaColor(
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def rgba_to_hex(color) -> str:
    """Convert a color to lowercase `#rrggbb`. Alpha is dropped."""
    color = ensure_rgba(color)
    return "#{:02x}{:02x}{:02x}".format(*color.rgb)


def parse_rgba(text: str) -> List[float]:
    """Extract [r, g, b, a] from a loosely formatted RGBA expression.

    Only the first four numbers are used. Alpha defaults to 1 if there are just
    three.
    """
    numbers = [float(n) for n in NUMBER.findall(text)][:4]
    if len(numbers) < 3:
        raise FormatError(f"Expected at least 3 numbers in color: {text!r}")
    if len(numbers) == 3:
        numbers.append(1.0)
    return numbers


def ensure_rgba(color) -> RgbaColor:
    """Convert a hex or `rgb(a)(...)` color to an RgbaColor."""
    if isinstance(color, RgbaColor):
        return color
    if not isinstance(color, str):
        raise FormatError(f"Expected a color string, not {type(color).__name__}")

    color = color.strip()
    if color.startswith("#"):
        return hex_to_rgba(color)
    if not RGBA_COLOR.fullmatch(color):
        raise FormatError(f"Unknown color format: {color!r}")

    # Unlike parse_rgba(), we're strict about the number of channels here
    channels = NUMBER.findall(color)
    if len(channels) not in (3, 4):
        raise FormatError(f"Expected 3 or 4 channels, got {len(channels)}: {color!r}")
    r, g, b, a = parse_rgba(color)
    return RgbaColor(r, g, b, a)


def hex_colors_to_rgba(text: str) -> str:
    """Rewrite every hex color in `text` as `rgba(...)`."""
    return HEX_IN_TEXT.sub(lambda m: hex_to_rgba(m[0]).to_css(), text)
