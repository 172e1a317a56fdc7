"""Zombies that chase the player."""

from __future__ import annotations

import enum
import math
import random

from zombiearena.geometry import Rect, Vector


class ZombieKind(enum.Enum):
    """The three breeds of zombie."""

    BLOATER = 0
    CHASER = 1
    CRAWLER = 2


_STATS = {
    ZombieKind.BLOATER: (20.0, 5.0, "bloater.png"),
    ZombieKind.CHASER: (40.0, 1.0, "chaser.png"),
    ZombieKind.CRAWLER: (10.0, 3.0, "crawler.png"),
}


class Zombie:
    """A zombie that walks straight towards the player until shot dead."""

    SIZE = 50
    DEAD_TEXTURE = "blood.png"

    def __init__(self) -> None:
        self.position = Vector()
        self.kind: ZombieKind | None = None
        self.speed = 0.0
        self.health = 0.0
        self.alive = False
        self.rotation = 0.0
        self.texture: str | None = None
        self._sprite_position = Vector()

    @property
    def bounds(self) -> Rect:
        """The area the zombie's sprite covers."""
        return Rect.around(self._sprite_position, self.SIZE, self.rotation)

    def spawn(self, start_x: float, start_y: float, kind: ZombieKind, rng: random.Random) -> None:
        """Bring the zombie to life at the start point with a random speed factor."""
        self.kind = ZombieKind(kind)
        self.position = Vector(start_x, start_y)
        speed, health, texture = _STATS[self.kind]
        self.speed = speed
        self.health = health
        self.texture = texture
        self.alive = True
        modifier = (rng.randrange(101 - 70) + 70) / 100
        self.speed *= modifier

    def update(self, elapsed: float, player_location: Vector) -> None:
        """Step towards the player for ``elapsed`` seconds."""
        if not self.alive:
            return
        step = self.speed * elapsed
        player_x, player_y = player_location.x, player_location.y
        x, y = self.position.x, self.position.y
        if x < player_x:
            x += step
        if x > player_x:
            x -= step
        if y < player_y:
            y += step
        if y > player_y:
            y -= step
        self.position = Vector(x, y)
        self._sprite_position = self.position
        angle = (math.atan2(player_y - y, player_x - x) * 180) / 3.141
        self.rotation = angle % 360.0

    def hit(self) -> bool:
        """Take one point of damage; return True if that killed the zombie."""
        self.health -= 1
        if self.health < 0:
            self.alive = False
            self.texture = self.DEAD_TEXTURE
            return True
        return False