"""Fill in missing color stop positions."""

from dataclasses import replace
from typing import List

from cssgrad.gradient.stop import ColorStop


def normalize_stops(stops: List[ColorStop]) -> List[ColorStop]:
    """Give every stop without a position an evenly spaced one.

    The i-th of n stops gets `i * 100 / (n - 1)`, counting every stop, so
    explicit positions don't affect where implicit ones go. Explicit positions
    are never moved, even if an implicit stop ends up crossing one:

        #f00, #0f0 10%, #00f  ->  #f00 0%, #0f0 10%, #00f 100%
        #f00 90%, #0f0, #00f  ->  #f00 90%, #0f0 50%, #00f 100%

    Use sort_stops() before rendering.
    """
    if len(stops) == 1:
        (stop,) = stops
        return [stop if stop.position is not None else replace(stop, position=0.0)]

    step = 100 / (len(stops) - 1) if stops else 0
    return [
        stop if stop.position is not None else replace(stop, position=i * step)
        for i, stop in enumerate(stops)
    ]


def sort_stops(stops: List[ColorStop]) -> List[ColorStop]:
    """Sort stops by position. Stops at the same position keep their order."""
    return sorted(stops, key=lambda stop: stop.position)
