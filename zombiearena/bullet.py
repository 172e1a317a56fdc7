"""Bullets fired by the player."""

from __future__ import annotations

import math

from zombiearena.geometry import Rect, Vector


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


class Bullet:
    """A small square projectile travelling in a straight line."""

    SPEED = 1000.0
    RANGE = 1000.0
    SIZE = 2.0

    def __init__(self) -> None:
        self.position = Vector()
        self.in_flight = False
        self.speed = self.SPEED
        self._velocity = Vector()
        self._min_x = self._max_x = 0.0
        self._min_y = self._max_y = 0.0

    @property
    def bounds(self) -> Rect:
        """The area the bullet occupies."""
        return Rect(self.position.x, self.position.y, self.SIZE, self.SIZE)

    def shoot(self, start_x: float, start_y: float, target_x: float, target_y: float) -> None:
        """Launch the bullet from the start point towards the target."""
        self.in_flight = True
        self.position = Vector(start_x, start_y)

        gradient = abs(_divide(start_x - target_x, start_y - target_y))
        distance_y = self.speed / (1 + gradient)
        distance_x = self.speed * (gradient / (1 + gradient))
        if target_x < start_x:
            distance_x = -distance_x
        if target_y < start_y:
            distance_y = -distance_y
        self._velocity = Vector(distance_x, distance_y)

        self._min_x = start_x - self.RANGE
        self._max_x = start_x + self.RANGE
        self._min_y = start_y - self.RANGE
        self._max_y = start_y + self.RANGE

    def stop(self) -> None:
        """Take the bullet out of flight."""
        self.in_flight = False

    def update(self, elapsed: float) -> None:
        """Advance the bullet by ``elapsed`` seconds; it stops when out of range."""
        self.position = Vector(
            self.position.x + self._velocity.x * elapsed,
            self.position.y + self._velocity.y * elapsed,
        )
        x, y = self.position.x, self.position.y
        if x < self._min_x or x > self._max_x or y < self._min_y or y > self._max_y:
            self.in_flight = False