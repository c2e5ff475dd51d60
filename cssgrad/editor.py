"""Edit a linear gradient while keeping its text, stops, and direction in sync.

The UI layer owns the widgets and events. It calls the commands here to change
a GradientModel, then reads the result back with to_text() and friends to
re-render. Every command mutates the model in place and also returns it.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Tuple
import warnings

from cssgrad.color import RgbaColor, ensure_rgba
from cssgrad.gradient.direction import (
    AngleDirection,
    GradientDirection,
    NamedDirection,
    angle_to_direction,
    angle_to_point,
    parse_direction,
    point_to_angle,
)
from cssgrad.gradient.normalize import normalize_stops, sort_stops
from cssgrad.gradient.parser import parse_gradient
from cssgrad.gradient.serializer import serialize_gradient, serialize_stops
from cssgrad.gradient.stop import ColorStop
from cssgrad.util import clamp


# Order used by the direction toggle button
TOGGLE_DIRECTIONS = [
    "to top",
    "to bottom",
    "to left",
    "to right",
    "to top left",
    "to top right",
    "to bottom left",
    "to bottom right",
]

# Color of a stop added by clicking the slider
NEW_STOP_COLOR = RgbaColor(255, 255, 255, 1.0)


class EmptyInputError(Exception):
    """Tried to remove the last color stop of a gradient."""


@dataclass(frozen=True)
class EditorOptions:
    default_direction: str = "to right"
    default_stops: Tuple[Tuple[str, float], ...] = (
        ("rgba(255, 0, 0, 1)", 0.0),
        ("rgba(0, 0, 255, 1)", 100.0),
    )
    # Gradient text to use when the initial text is empty
    default_value: Optional[str] = None


@dataclass
class GradientModel:
    direction: GradientDirection
    stops: List[ColorStop] = field(default_factory=list)

    def __str__(self):
        return to_text(self)


def _as_direction(direction) -> GradientDirection:
    if isinstance(direction, (NamedDirection, AngleDirection)):
        return direction
    return parse_direction(direction)


def _from_text(text) -> Optional[GradientModel]:
    parsed = parse_gradient(text.strip()) if text else None
    if parsed is None:
        return None
    direction, stops = parsed
    return GradientModel(direction, sort_stops(normalize_stops(stops)))


def initialize_model(
    initial_text=None,
    default_direction="to right",
    default_stops: Sequence[Tuple[object, float]] = EditorOptions.default_stops,
    default_value=None,
) -> GradientModel:
    """Create a model from `initial_text`, falling back to the defaults.

    The fallbacks are tried in order: `initial_text`, `default_value` (also
    gradient text), then `default_direction` with `default_stops` (a sequence
    of (color, position) pairs).
    """
    for text in (initial_text, default_value):
        model = _from_text(text)
        if model is not None:
            return model

    stops = [ColorStop(ensure_rgba(color), clamp(float(pos))) for color, pos in default_stops]
    return GradientModel(_as_direction(default_direction), sort_stops(stops))


def initialize_from_options(initial_text=None, options=EditorOptions()) -> GradientModel:
    return initialize_model(
        initial_text,
        options.default_direction,
        options.default_stops,
        options.default_value,
    )


# Stop commands


def add_stop(model: GradientModel, color=NEW_STOP_COLOR, position=50.0) -> GradientModel:
    """Add a stop, clamping its position to [0, 100]."""
    model.stops.append(ColorStop(ensure_rgba(color), clamp(float(position))))
    model.stops = sort_stops(model.stops)
    return model


def move_stop(model: GradientModel, index, position) -> GradientModel:
    """Move a stop (e.g. while dragging it), keeping the stops sorted.

    After this, `index` may no longer refer to the moved stop.
    """
    stop = model.stops[index]
    model.stops[index] = replace(stop, position=clamp(float(position)))
    model.stops = sort_stops(model.stops)
    return model


def remove_stop(model: GradientModel, index, strict=False) -> GradientModel:
    """Remove a stop. Removing the last stop does nothing.

    With `strict=True`, removing the last stop raises EmptyInputError instead.
    """
    if len(model.stops) <= 1:
        if strict:
            raise EmptyInputError("Can't remove the last color stop")
        warnings.warn("Ignoring removal of the last color stop")
        return model
    del model.stops[index]
    return model


def can_remove_stops(model: GradientModel) -> bool:
    """Whether the UI should offer to delete stops."""
    return len(model.stops) > 2


def set_stop_color(model: GradientModel, index, color) -> GradientModel:
    """Change the RGB channels of a stop, keeping its alpha."""
    stop = model.stops[index]
    new_color = stop.color.with_rgb(*ensure_rgba(color).rgb)
    model.stops[index] = replace(stop, color=new_color)
    return model


def set_stop_alpha(model: GradientModel, index, alpha) -> GradientModel:
    """Change the alpha of a stop, keeping its RGB channels."""
    stop = model.stops[index]
    model.stops[index] = replace(stop, color=stop.color.with_alpha(alpha))
    return model


def apply_preset(model: GradientModel, colors: Sequence) -> GradientModel:
    """Replace the stops with evenly spaced `colors`, drawn left to right."""
    stops = [ColorStop(ensure_rgba(color)) for color in colors]
    if not stops:
        raise ValueError("A preset needs at least one color")
    model.stops = normalize_stops(stops)
    model.direction = NamedDirection("to right")
    return model


# Direction commands


def set_direction(model: GradientModel, direction) -> GradientModel:
    """Set the direction from a direction value or a CSS token."""
    model.direction = _as_direction(direction)
    return model


def cycle_direction(model: GradientModel) -> GradientModel:
    """Switch to the next keyword direction, in toggle button order."""
    try:
        i = TOGGLE_DIRECTIONS.index(model.direction.to_css())
    except ValueError:
        # Angles restart the cycle
        i = -1
    model.direction = NamedDirection(TOGGLE_DIRECTIONS[(i + 1) % len(TOGGLE_DIRECTIONS)])
    return model


def angle_from_pointer_offset(dx, dy) -> float:
    """Angle of the pointer relative to the center of the direction dial."""
    return point_to_angle(dx, dy)


def pointer_direction(dx, dy) -> GradientDirection:
    return angle_to_direction(point_to_angle(dx, dy))


def point_from_angle(degrees, radius) -> Tuple[float, float]:
    return angle_to_point(degrees, radius)


# Output


def to_text(model: GradientModel) -> str:
    return serialize_gradient(model.direction, sort_stops(model.stops))


def to_preview_style(model: GradientModel) -> str:
    """Value for a preview element's `background` style."""
    return to_text(model)


def slider_background(model: GradientModel) -> str:
    """Background of the stop slider track, which is always drawn left to right."""
    return f"linear-gradient(to right, {serialize_stops(sort_stops(model.stops))})"


def slider_position(offset, width) -> float:
    """Convert a pointer offset along the slider to a stop position."""
    if width <= 0:
        return 0.0
    return clamp(offset / width * 100)


class EditorSession:
    """Owns the gradient model of each editor widget.

    Each widget (identified by any hashable ID) has at most one model.
    """

    def __init__(self, options=EditorOptions()):
        self.options = options
        self.models: Dict[object, GradientModel] = {}

    def open(self, widget_id, initial_text=None, options=None) -> GradientModel:
        """Create the model for a widget. Reopening returns the existing model."""
        if widget_id in self.models:
            warnings.warn(f"Editor already open for widget: {widget_id!r}")
            return self.models[widget_id]
        model = initialize_from_options(initial_text, options or self.options)
        self.models[widget_id] = model
        return model

    def get(self, widget_id) -> GradientModel:
        try:
            return self.models[widget_id]
        except KeyError:
            raise KeyError(f"No editor open for widget: {widget_id!r}") from None

    def close(self, widget_id):
        self.models.pop(widget_id, None)

    def __contains__(self, widget_id):
        return widget_id in self.models

    def __len__(self):
        return len(self.models)
