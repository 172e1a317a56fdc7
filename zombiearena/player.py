"""The player character."""

from __future__ import annotations

import enum
import math

from zombiearena.geometry import Rect, Vector


class Direction(enum.Enum):
    """A direction the player can walk in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Player:
    """The player: position, health, speed and facing."""

    START_SPEED = 200.0
    START_HEALTH = 100
    SIZE = 50
    TEXTURE = "player.png"
    HIT_COOLDOWN_MS = 200
    HIT_DAMAGE = 10

    def __init__(self) -> None:
        self.speed = self.START_SPEED
        self.health = self.START_HEALTH
        self.max_health = self.START_HEALTH
        self.position = Vector()
        self.rotation = 0.0
        self.arena = Rect()
        self.resolution = Vector()
        self.tile_size = 0
        self.last_hit = 0.0
        self._sprite_position = Vector()
        self._pressed: set[Direction] = set()

    @property
    def center(self) -> Vector:
        """Where the player is."""
        return self.position

    @property
    def bounds(self) -> Rect:
        """The area the player's sprite covers."""
        return Rect.around(self._sprite_position, self.SIZE, self.rotation)

    def spawn(self, arena: Rect, resolution: Vector, tile_size: int) -> None:
        """Place the player in the middle of ``arena``."""
        self.position = Vector(arena.width // 2, arena.height // 2)
        self.arena = arena
        self.tile_size = tile_size
        self.resolution = resolution

    def move(self, direction: Direction) -> None:
        """Start walking in ``direction``."""
        self._pressed.add(direction)

    def stop(self, direction: Direction) -> None:
        """Stop walking in ``direction``."""
        self._pressed.discard(direction)

    def update(self, elapsed: float, mouse_position: Vector) -> None:
        """Move for ``elapsed`` seconds, keep inside the arena and face the mouse."""
        step = self.speed * elapsed
        x, y = self.position.x, self.position.y
        if Direction.UP in self._pressed:
            y -= step
        if Direction.DOWN in self._pressed:
            y += step
        if Direction.RIGHT in self._pressed:
            x += step
        if Direction.LEFT in self._pressed:
            x -= step
        self._sprite_position = Vector(x, y)

        arena, tile = self.arena, self.tile_size
        x = min(x, arena.width - tile)
        x = max(x, arena.left + tile)
        y = min(y, arena.height - tile)
        y = max(y, arena.top + tile)
        self.position = Vector(x, y)

        angle = (
            math.atan2(
                mouse_position.y - self.resolution.y / 2,
                mouse_position.x - self.resolution.x / 2,
            )
            * 180
        ) / 3.141
        self.rotation = angle % 360.0

    def hit(self, time_hit: float) -> bool:
        """Take damage at ``time_hit`` seconds unless hit very recently."""
        if int(time_hit * 1000) - int(self.last_hit * 1000) > self.HIT_COOLDOWN_MS:
            self.last_hit = time_hit
            self.health -= self.HIT_DAMAGE
            return True
        return False

    def upgrade_speed(self) -> None:
        """Raise the speed by a fifth of the starting speed."""
        self.speed += self.START_SPEED * 0.2

    def upgrade_health(self) -> None:
        """Raise the maximum health by a fifth of the starting health."""
        self.max_health += int(self.START_HEALTH * 0.2)

    def increase_health_level(self, amount: int) -> None:
        """Heal by ``amount``, never beyond the maximum."""
        self.health = min(self.health + amount, self.max_health)