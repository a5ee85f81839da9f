# color_oscillator.py

"""
Bounded random walk over a point's hue, saturation and lightness.

Each channel moves by a random amount up to color_speed in its current
direction, is clamped into its range, and turns around when it touches
either end of the range.
"""

import numpy as np

import constants
from point import Direction


def step_channel(value: float, direction: Direction, lower: float, upper: float,
                 speed: float, rng: np.random.Generator):
    """Advances one channel. Returns the new (value, direction)."""
    value = value + int(direction) * rng.random() * speed
    value = min(max(value, lower), upper)

    if value <= lower:
        direction = Direction.INCREASING
    elif value >= upper:
        direction = Direction.DECREASING
    return value, direction


def advance_color(point, settings, rng: np.random.Generator):
    """
    Advances all three channels of a point in place.

    Data Contract:
    - Inputs: point (Point), settings (Settings), rng (np.random.Generator).
    - Outputs: None.
    - Side Effects: Mutates point.h/s/l and their directions.
    - Invariants: h in [0, 360], s in [s_min, s_max], l in [l_min, l_max] afterwards.
    """
    speed = settings.color_speed
    point.h, point.h_dir = step_channel(point.h, point.h_dir, constants.HUE_MIN, constants.HUE_MAX, speed, rng)
    point.s, point.s_dir = step_channel(point.s, point.s_dir, settings.s_min, settings.s_max, speed, rng)
    point.l, point.l_dir = step_channel(point.l, point.l_dir, settings.l_min, settings.l_max, speed, rng)


def hsla_tuple(point):
    """Rounded (h, s, l, a) with a on pygame's 0..100 scale."""
    return (int(round(point.h)), int(round(point.s)), int(round(point.l)), 100)


def format_hsla(point):
    h, s, l, _ = hsla_tuple(point)
    return f"hsla({h},{s}%,{l}%,1)"
