# point.py

import logging
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

import constants

logger = logging.getLogger(constants.LOGGER_NAME)


class Direction(IntEnum):
    """Drift direction of a color channel. int(direction) is the multiplier."""
    INCREASING = 1
    DECREASING = -1


@dataclass(eq=False)
class Point:
    """
    A single vertex of the drawn polyline.

    Equality is identity: the closing duplicate of a PointSet is the same
    object as its first point.
    """
    x: float
    y: float
    vx: float
    vy: float
    h: float
    s: float
    l: float
    h_dir: Direction = Direction.INCREASING
    s_dir: Direction = Direction.INCREASING
    l_dir: Direction = Direction.INCREASING

    @property
    def speed(self):
        return float(np.hypot(self.vx, self.vy))


def random_direction(rng: np.random.Generator) -> Direction:
    return Direction.INCREASING if rng.random() < 0.5 else Direction.DECREASING


def random_velocity(v_min: float, v_max: float, rng: np.random.Generator):
    """
    Draws a velocity whose magnitude is uniform in [v_min, v_max].

    The angle is uniform within a quadrant and each axis gets an independent
    random sign, so all four quadrants are equally likely.
    """
    magnitude = rng.uniform(v_min, v_max)
    angle = rng.uniform(0.0, np.pi / 2)
    sign_x = 1.0 if rng.random() < 0.5 else -1.0
    sign_y = 1.0 if rng.random() < 0.5 else -1.0
    return sign_x * magnitude * np.cos(angle), sign_y * magnitude * np.sin(angle)


def create_point(settings, width: float, height: float, rng: np.random.Generator) -> Point:
    """
    Creates an independently randomized point inside the viewport.

    Data Contract:
    - Inputs: settings (Settings), viewport width/height, rng (np.random.Generator).
    - Outputs: A new Point.
    - Invariants: speed in [v_min, v_max], s in [s_min, s_max], l in [l_min, l_max].
    """
    vx, vy = random_velocity(settings.v_min, settings.v_max, rng)
    point = Point(
        x=float(rng.uniform(0.0, width)),
        y=float(rng.uniform(0.0, height)),
        vx=float(vx),
        vy=float(vy),
        h=float(rng.uniform(constants.HUE_MIN, constants.HUE_MAX)),
        s=float(rng.uniform(settings.s_min, settings.s_max)),
        l=float(rng.uniform(settings.l_min, settings.l_max)),
        h_dir=random_direction(rng),
        s_dir=random_direction(rng),
        l_dir=random_direction(rng),
    )
    logger.debug(f"Point created: pos=({point.x:.1f}, {point.y:.1f}), v=({point.vx:.2f}, {point.vy:.2f})")
    return point
