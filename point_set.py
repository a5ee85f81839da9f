# point_set.py

import logging

import numpy as np

import constants
from color_oscillator import advance_color, hsla_tuple
from point import create_point
from velocity import randomize_velocity

logger = logging.getLogger(constants.LOGGER_NAME)


class PointSet:
    """
    Manages the ordered points of the drawn loop and their per-tick physics.

    Data Contract:
    - Inputs:
        - settings (Settings): Live settings; num_points is kept in sync here.
        - rng (np.random.Generator): The master random number generator.
        - bounds (tuple): The (width, height) of the viewport.
    - Outputs: None. This class modifies its internal state.
    - Side Effects: Writes settings.num_points on every lifecycle change.
    - Invariants: len(self.points) == settings.num_points + 1, and the last
      element is the very same object as the first (the closing duplicate).
    """
    def __init__(self, settings, rng: np.random.Generator, bounds: tuple):
        self.settings = settings
        self.rng = rng
        self.width, self.height = bounds
        self.points = []
        self.create(settings.num_points)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    @property
    def num_points(self):
        return len(self.points) - 1

    def _new_point(self):
        return create_point(self.settings, self.width, self.height, self.rng)

    def create(self, n: int):
        """Replaces all points with n fresh ones plus the closing duplicate."""
        self.settings.set_num_points(n)
        n = self.settings.num_points
        self.points = [self._new_point() for _ in range(n)]
        self.points.append(self.points[0])
        logger.info(f"PointSet created with {n} points.")

    def grow(self, k: int) -> int:
        """Inserts up to k new points before the closing duplicate. Returns how many were added."""
        old_count = self.num_points
        self.settings.set_num_points(old_count + max(k, 0))
        added = self.settings.num_points - old_count
        for _ in range(added):
            self.points.insert(len(self.points) - 1, self._new_point())
        if added:
            logger.debug(f"Added {added} point(s), now {self.num_points}.")
        return added

    def shrink(self, k: int) -> int:
        """Removes up to k of the last real points. Returns how many were removed."""
        old_count = self.num_points
        self.settings.set_num_points(old_count - max(k, 0))
        removed = old_count - self.settings.num_points
        if removed:
            # The closing duplicate sits at -1; the real tail is [-1 - removed, -1)
            del self.points[-1 - removed:-1]
            logger.debug(f"Removed {removed} point(s), {self.num_points} remain.")
        return removed

    def resize(self, n: int) -> int:
        """Grows or shrinks to n points. Returns the signed change in count."""
        delta = n - self.num_points
        if delta > 0:
            return self.grow(delta)
        if delta < 0:
            return -self.shrink(-delta)
        return 0

    def set_bounds(self, width: float, height: float):
        self.width, self.height = width, height

    def move(self):
        """
        Advances every real point by its velocity and bounces it off the walls.

        Each axis is handled independently: a coordinate at or beyond a wall is
        clamped onto it, that velocity component is negated, and the velocity is
        then randomly redirected. Returns the number of bounces this tick.
        """
        step_size = self.settings.step_size
        bounces = 0
        for point in self.points[:-1]:
            point.x += point.vx * step_size
            point.y += point.vy * step_size

            if point.x <= 0:
                point.x = 0.0
                point.vx *= -1
                point.vx, point.vy = randomize_velocity(point.vx, point.vy, self.settings, self.rng)
                bounces += 1
            elif point.x >= self.width:
                point.x = float(self.width)
                point.vx *= -1
                point.vx, point.vy = randomize_velocity(point.vx, point.vy, self.settings, self.rng)
                bounces += 1

            if point.y <= 0:
                point.y = 0.0
                point.vy *= -1
                point.vx, point.vy = randomize_velocity(point.vx, point.vy, self.settings, self.rng)
                bounces += 1
            elif point.y >= self.height:
                point.y = float(self.height)
                point.vy *= -1
                point.vx, point.vy = randomize_velocity(point.vx, point.vy, self.settings, self.rng)
                bounces += 1
        return bounces

    def advance_colors(self):
        """Steps the color walk of every real point and returns one color per element."""
        for point in self.points[:-1]:
            advance_color(point, self.settings, self.rng)
        return [hsla_tuple(point) for point in self.points]

    def colors(self):
        return [hsla_tuple(point) for point in self.points]
