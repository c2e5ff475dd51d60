"""Utility functions."""

import re

import numpy as np

# Signed integer or decimal number ("12", "-1.5", ".5"). Shared by colors,
# stop positions, and angles so they all accept the same numbers.
NUMBER = re.compile(r"-?(?:\d+(?:\.\d+)?|\.\d+)")


def format_number(num):
    """Format a number the way CSS authors write it ("1", "0.5", not "1.0")."""
    # Never in exponent form ("1e-05"), which NUMBER can't read back
    return np.format_float_positional(float(num), trim="-")


def clamp(value, low=0.0, high=100.0):
    return min(high, max(low, value))


def split_top_level(s, sep=","):
    """Split `s` on `sep`, ignoring separators nested inside parentheses."""
    parts = []
    depth = 0
    start = 0
    for i, char in enumerate(s):
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(0, depth - 1)
        elif char == sep and depth == 0:
            parts.append(s[start:i])
            start = i + 1
    parts.append(s[start:])
    return parts
