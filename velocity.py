# velocity.py

"""
Randomized velocity redirection applied when a point bounces off a wall.

The wall bounce itself (clamp + negate one component) happens in PointSet.
This module then rotates the reflected velocity by a random angle that keeps
it inside the quadrant it is already pointing into, and rescales its
magnitude by a random factor limited to [v_min, v_max].

Angles are measured with the y axis pointing up, i.e. a velocity with vy <= 0
(moving up the screen) has an angle in [0, pi].
"""

import logging

import numba
import numpy as np

import constants
from point import random_velocity

logger = logging.getLogger(constants.LOGGER_NAME)

HALF_PI = np.pi / 2

# --- JIT-Compiled Kernels ---
# Pure scalar functions, compiled by Numba in nopython mode. Exceptions are
# raised from the Python wrappers, the kernels only return sentinel values.

@numba.jit(nopython=True)
def _classify_quadrant_jit(vx, vy):
    """
    Returns the quadrant (1-4) the velocity points into, or 0 if it has a NaN
    component. 1 = (+x, up), 2 = (-x, up), 3 = (-x, down), 4 = (+x, down).
    """
    if vx != vx or vy != vy:
        return 0
    if vy > 0:
        return 4 if vx > 0 else 3
    return 1 if vx > 0 else 2

@numba.jit(nopython=True, fastmath=True)
def _rotate_and_scale_jit(vx, vy, rotation, scale):
    """Rotates (vx, vy) by `rotation` (y-up sense) and multiplies it by `scale`."""
    cos_r = np.cos(rotation)
    sin_r = np.sin(rotation)
    return scale * (vx * cos_r + vy * sin_r), scale * (vy * cos_r - vx * sin_r)


class QuadrantError(RuntimeError):
    """A velocity could not be assigned to one of the four quadrants."""


def classify_quadrant(vx: float, vy: float) -> int:
    quadrant = _classify_quadrant_jit(float(vx), float(vy))
    if quadrant == 0:
        raise QuadrantError(f"quadrant of velocity ({vx}, {vy}) is undefined")
    return quadrant


def velocity_angle(vx: float, vy: float, quadrant: int) -> float:
    """Angle of the velocity in [0, 2*pi), disambiguated by its quadrant."""
    magnitude = np.hypot(vx, vy)
    raw_angle = np.arccos(np.clip(vx / magnitude, -1.0, 1.0))
    if quadrant in (1, 2):
        return float(raw_angle)
    return float(2 * np.pi - raw_angle)


def rotation_bounds(quadrant: int, angle: float):
    """
    Rotations that carry `angle` exactly onto the two edges of its quadrant.

    Returns (r_min, r_max) with r_max - r_min == pi / 2.
    """
    if quadrant == 1:
        r_min = -angle
    elif quadrant == 2:
        r_min = HALF_PI - angle
    elif quadrant == 3:
        r_min = np.pi - angle
    elif quadrant == 4:
        r_min = 3 * HALF_PI - angle
    else:
        raise QuadrantError(f"quadrant of angle can not be {quadrant}")
    return r_min, r_min + HALF_PI


def randomize_velocity(vx: float, vy: float, settings, rng: np.random.Generator):
    """
    Randomly rotates and rescales an already reflected velocity.

    Data Contract:
    - Inputs:
        - vx, vy (float): The velocity after the wall reflection.
        - settings (Settings): Supplies v_min, v_max and v_change.
        - rng (np.random.Generator): Source of all randomness.
    - Outputs: The new (vx, vy) as floats.
    - Invariants:
        - The new direction lies in the same quadrant as the input direction.
        - If the input magnitude is within [v_min, v_max], so is the output's.
    - Raises: QuadrantError if the velocity has a NaN component.
    """
    v_min, v_max = settings.v_min, settings.v_max
    speed = float(np.hypot(vx, vy))
    if speed == 0.0:
        # No direction to preserve; start over from a fresh velocity.
        logger.debug("Zero velocity on bounce, drawing a new one.")
        new_vx, new_vy = random_velocity(v_min, v_max, rng)
        return float(new_vx), float(new_vy)

    quadrant = classify_quadrant(vx, vy)
    angle = velocity_angle(vx, vy, quadrant)
    r_min, _ = rotation_bounds(quadrant, angle)

    scale = 1.0 + rng.random() * settings.v_change
    rotation = r_min + rng.random() * HALF_PI
    if rng.random() > 0.5:
        scale = 1.0 / scale

    # Limit the scale so the resulting speed stays inside [v_min, v_max]. The
    # result is the geometric mean of speed and the clamped target, so a speed
    # already outside the limits only moves part of the way back per bounce.
    scale = np.sqrt(min(max(speed * scale, v_min), v_max) / speed)

    new_vx, new_vy = _rotate_and_scale_jit(float(vx), float(vy), float(rotation), float(scale))
    return float(new_vx), float(new_vy)
