"""Shared fixtures for the cssgrad test suite."""

import pytest

from cssgrad.color import RgbaColor
from cssgrad.editor import GradientModel
from cssgrad.gradient.direction import NamedDirection
from cssgrad.gradient.stop import ColorStop


RED = RgbaColor(255, 0, 0)
GREEN = RgbaColor(0, 255, 0)
BLUE = RgbaColor(0, 0, 255)


@pytest.fixture
def red_to_blue():
    """Two-stop model, red at 0% to blue at 100%."""
    return GradientModel(
        NamedDirection("to right"),
        [ColorStop(RED, 0.0), ColorStop(BLUE, 100.0)],
    )


@pytest.fixture
def three_stops():
    """Red, green, blue at 0%, 50%, 100%."""
    return GradientModel(
        NamedDirection("to right"),
        [ColorStop(RED, 0.0), ColorStop(GREEN, 50.0), ColorStop(BLUE, 100.0)],
    )
