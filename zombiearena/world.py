"""Building a wave's world: the tiled arena floor and the horde of zombies."""

from __future__ import annotations

import random
from dataclasses import dataclass

from zombiearena.geometry import Rect, Vector
from zombiearena.zombie import Zombie, ZombieKind

TILE_SIZE = 50
TILE_TYPES = 3
WALL_TEXTURE_TOP = TILE_TYPES * TILE_SIZE
HORDE_MARGIN = 20


@dataclass(frozen=True)
class Tile:
    """One square of the arena floor and the part of the texture sheet it shows."""

    column: int
    row: int
    texture_top: int
    size: int = TILE_SIZE

    @property
    def position(self) -> Vector:
        """The tile's top-left corner in world coordinates."""
        return Vector(self.column * self.size, self.row * self.size)

    @property
    def vertices(self) -> tuple[Vector, Vector, Vector, Vector]:
        """The four corners of the tile, clockwise from the top left."""
        x, y, s = self.column * self.size, self.row * self.size, self.size
        return Vector(x, y), Vector(x + s, y), Vector(x + s, y + s), Vector(x, y + s)

    @property
    def tex_coords(self) -> tuple[Vector, Vector, Vector, Vector]:
        """The matching corners in the texture sheet."""
        top, s = self.texture_top, self.size
        return Vector(0, top), Vector(s, top), Vector(s, top + s), Vector(0, top + s)

    @property
    def is_wall(self) -> bool:
        """True for the wall tiles around the arena's edge."""
        return self.texture_top == WALL_TEXTURE_TOP


def create_background(arena: Rect, rng: random.Random) -> list[Tile]:
    """Lay out the floor tiles of ``arena``: walls on the border, random floor inside."""
    columns = int(arena.width) // TILE_SIZE
    rows = int(arena.height) // TILE_SIZE
    tiles = []
    for column in range(columns):
        for row in range(rows):
            if row in (0, rows - 1) or column in (0, columns - 1):
                texture_top = WALL_TEXTURE_TOP
            else:
                texture_top = rng.randrange(TILE_TYPES) * TILE_SIZE
            tiles.append(Tile(column, row, texture_top))
    return tiles


def create_horde(num_zombies: int, arena: Rect, rng: random.Random) -> list[Zombie]:
    """Spawn ``num_zombies`` zombies of random kinds along the edges of ``arena``."""
    if num_zombies < 0:
        raise ValueError("the number of zombies cannot be negative")
    max_x = int(arena.width) - HORDE_MARGIN
    min_x = int(arena.left) + HORDE_MARGIN
    max_y = int(arena.height) - HORDE_MARGIN
    min_y = int(arena.top) + HORDE_MARGIN

    zombies = []
    for _ in range(num_zombies):
        side = rng.randrange(4)
        if side == 0:
            x, y = min_x, rng.randrange(max_y) + min_y
        elif side == 1:
            x, y = max_x, rng.randrange(max_y) + min_y
        elif side == 2:
            x, y = rng.randrange(max_x) + min_x, min_y
        else:
            x, y = rng.randrange(max_x) + min_x, max_y
        kind = ZombieKind(rng.randrange(3))
        zombie = Zombie()
        zombie.spawn(x, y, kind, rng)
        zombies.append(zombie)
    return zombies