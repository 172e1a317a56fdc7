"""Health and ammunition pickups that appear in the arena."""

from __future__ import annotations

import enum
import random

from zombiearena.geometry import Rect, Vector


class PickupKind(enum.Enum):
    """What a pickup gives the player."""

    HEALTH = 1
    AMMO = 2


class Pickup:
    """A pickup that spawns at a random place, lives a while, then waits to return."""

    HEALTH_START_VALUE = 50
    AMMO_START_VALUE = 12
    START_WAIT_TIME = 10
    START_SECONDS_TO_LIVE = 5
    SIZE = 50
    ARENA_MARGIN = 50

    def __init__(self, kind: PickupKind, rng: random.Random | None = None) -> None:
        self.kind = PickupKind(kind)
        self._rng = rng if rng is not None else random.Random()
        if self.kind is PickupKind.HEALTH:
            self.texture = "health_pickup.png"
            self.value = self.HEALTH_START_VALUE
        else:
            self.texture = "ammo_pickup.png"
            self.value = self.AMMO_START_VALUE
        self.position = Vector()
        self.arena = Rect()
        self.spawned = False
        self.seconds_since_spawn = 0.0
        self.seconds_since_despawn = 0.0
        self.seconds_to_live = float(self.START_SECONDS_TO_LIVE)
        self.seconds_to_wait = float(self.START_WAIT_TIME)

    @property
    def bounds(self) -> Rect:
        """The area the pickup occupies."""
        return Rect.around(self.position, self.SIZE)

    def set_arena(self, arena: Rect) -> None:
        """Place the pickup within ``arena`` shrunk by a margin, and spawn it."""
        self.arena = arena.inset(self.ARENA_MARGIN)
        self.spawn()

    def spawn(self) -> None:
        """Appear at a random spot in the arena."""
        width, height = int(self.arena.width), int(self.arena.height)
        if width <= 0 or height <= 0:
            raise ValueError("pickup has no arena to spawn in")
        self.position = Vector(self._rng.randrange(width), self._rng.randrange(height))
        self.seconds_since_spawn = 0.0
        self.spawned = True

    def update(self, elapsed: float) -> None:
        """Advance the spawn and respawn timers by ``elapsed`` seconds."""
        if self.spawned:
            self.seconds_since_spawn += elapsed
        else:
            self.seconds_since_despawn += elapsed

        if self.seconds_since_despawn > self.seconds_to_wait and not self.spawned:
            self.spawn()

        if self.seconds_since_spawn > self.seconds_to_live and self.spawned:
            self.spawned = False
            self.seconds_since_despawn = 0.0

    def collect(self) -> int:
        """Take the pickup away and return what it is worth."""
        self.spawned = False
        self.seconds_since_despawn = 0.0
        return self.value

    def upgrade(self) -> None:
        """Make the pickup worth more and come back sooner."""
        if self.kind is PickupKind.HEALTH:
            self.value += int(self.HEALTH_START_VALUE * 0.5)
        else:
            self.value += int(self.AMMO_START_VALUE * 0.5)
        self.seconds_to_live += self.START_SECONDS_TO_LIVE // 10
        self.seconds_to_wait -= self.START_WAIT_TIME // 10