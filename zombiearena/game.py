"""The game's rules: states, waves, shooting, collisions and the HUD."""

from __future__ import annotations

import enum
import random
from collections.abc import Iterable

from zombiearena.bullet import Bullet
from zombiearena.geometry import Rect, Vector
from zombiearena.pickup import Pickup, PickupKind
from zombiearena.player import Direction, Player
from zombiearena.world import TILE_SIZE, create_background, create_horde

BULLET_COUNT = 100
START_BULLETS_SPARE = 24
START_CLIP_SIZE = 6
START_ARENA_SIZE = 500
ARENA_GROWTH = 100
KILL_SCORE = 10
UPGRADE_CHOICES = range(7)


class State(enum.Enum):
    """The phase the game is in."""

    PAUSED = enum.auto()
    LEVELING_UP = enum.auto()
    GAME_OVER = enum.auto()
    PLAYING = enum.auto()
    NEXTWAVE = enum.auto()


class Game:
    """Everything that changes while the game runs, independent of any window."""

    def __init__(
        self,
        rng: random.Random | None = None,
        resolution: Vector = Vector(1920, 1080),
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.resolution = resolution
        self.state = State.GAME_OVER
        self.wave = 0
        self.player = Player()
        self.arena = Rect(0, 0, START_ARENA_SIZE, START_ARENA_SIZE)
        self.background = []
        self.zombies = []
        self.num_zombies_alive = 0
        self.bullets = [Bullet() for _ in range(BULLET_COUNT)]
        self.current_bullet = 0
        self.bullets_spare = START_BULLETS_SPARE
        self.bullets_in_clip = START_CLIP_SIZE
        self.clip_size = START_CLIP_SIZE
        self.fire_rate = 3.0
        self.last_pressed = 0.0
        self.game_time_total = 0.0
        self.score = 0
        self.hi_score = 0
        self.health_pickup = Pickup(PickupKind.HEALTH, self.rng)
        self.ammo_pickup = Pickup(PickupKind.AMMO, self.rng)
        self.view_center = Vector(resolution.x / 2, resolution.y / 2)
        self.mouse_world_position = Vector()

    def press_enter(self) -> None:
        """Pause, resume, or begin a new game from the game-over screen."""
        if self.state is State.PLAYING:
            self.state = State.PAUSED
        elif self.state is State.PAUSED:
            self.state = State.PLAYING
        elif self.state is State.GAME_OVER:
            self.state = State.LEVELING_UP
            self.wave = 0
            self.current_bullet = 0
            self.bullets_spare = START_BULLETS_SPARE
            self.bullets_in_clip = START_CLIP_SIZE
            self.clip_size = START_CLIP_SIZE
            self.fire_rate = 1.0
            self.score = 0
            self.player = Player()

    def reload(self) -> None:
        """Refill the clip from the spare bullets while playing."""
        if self.state is not State.PLAYING:
            return
        if self.bullets_spare >= self.clip_size:
            self.bullets_in_clip = self.clip_size
            self.bullets_spare -= self.clip_size
        elif self.bullets_spare > 0:
            self.bullets_in_clip = self.bullets_spare
            self.bullets_spare = 0

    def choose_upgrade(self, choice: int) -> None:
        """Apply level-up option ``choice`` (0 means none) and move on to the next wave."""
        if choice not in UPGRADE_CHOICES:
            raise ValueError(f"no such upgrade: {choice!r}")
        if self.state is not State.LEVELING_UP:
            return
        if choice == 1:
            self.fire_rate += 1
        elif choice == 2:
            self.clip_size += self.clip_size
        elif choice == 3:
            self.player.upgrade_health()
        elif choice == 4:
            self.player.upgrade_speed()
        elif choice == 5:
            self.health_pickup.upgrade()
        elif choice == 6:
            self.ammo_pickup.upgrade()
        self.state = State.NEXTWAVE

    def start_next_wave(self) -> None:
        """Grow the arena, rebuild it, and fill it with a larger horde."""
        self.wave += 1
        growth = (self.wave - 1) * ARENA_GROWTH
        self.arena = Rect(0, 0, self.arena.width + growth, self.arena.height + growth)
        self.background = create_background(self.arena, self.rng)
        self.player.spawn(self.arena, self.resolution, TILE_SIZE)
        self.zombies = create_horde(self.wave * 2, self.arena, self.rng)
        self.num_zombies_alive = len(self.zombies)
        self.health_pickup.set_arena(self.arena)
        self.ammo_pickup.set_arena(self.arena)
        self.state = State.PLAYING

    def fire(self, target_x: float, target_y: float) -> bool:
        """Shoot from the player towards the target if the gun is ready; say if it fired."""
        if self.state is not State.PLAYING or self.bullets_in_clip <= 0:
            return False
        since_last = int(self.game_time_total * 1000) - int(self.last_pressed * 1000)
        if since_last <= 1000 / self.fire_rate:
            return False
        center = self.player.center
        self.bullets[self.current_bullet].shoot(center.x, center.y, target_x, target_y)
        self.current_bullet = (self.current_bullet + 1) % BULLET_COUNT
        self.last_pressed = self.game_time_total
        self.bullets_in_clip -= 1
        return True

    def update(self, elapsed: float, mouse_screen: Vector, directions: Iterable[Direction]) -> None:
        """Advance the game by ``elapsed`` seconds with the given mouse and held directions."""
        if self.state is State.NEXTWAVE:
            self.start_next_wave()
        if self.state is not State.PLAYING:
            return

        held = set(directions)
        for direction in Direction:
            if direction in held:
                self.player.move(direction)
            else:
                self.player.stop(direction)

        self.game_time_total += elapsed
        self.mouse_world_position = Vector(
            self.view_center.x - self.resolution.x / 2 + mouse_screen.x,
            self.view_center.y - self.resolution.y / 2 + mouse_screen.y,
        )
        self.player.update(elapsed, mouse_screen)
        player_position = self.player.center
        self.view_center = player_position

        for zombie in self.zombies:
            zombie.update(elapsed, player_position)
        for bullet in self.bullets:
            if bullet.in_flight:
                bullet.update(elapsed)
        self.health_pickup.update(elapsed)
        self.ammo_pickup.update(elapsed)

        self._shoot_zombies()
        self._bite_player()
        self._collect_pickups()

    def _shoot_zombies(self) -> None:
        for bullet in self.bullets:
            for zombie in self.zombies:
                if not (bullet.in_flight and zombie.alive):
                    continue
                if not bullet.bounds.intersects(zombie.bounds):
                    continue
                bullet.stop()
                if zombie.hit():
                    self.score += KILL_SCORE
                    self.hi_score = max(self.hi_score, self.score)
                    self.num_zombies_alive -= 1
                    if self.num_zombies_alive == 0:
                        self.state = State.NEXTWAVE

    def _bite_player(self) -> None:
        for zombie in self.zombies:
            if self.player.bounds.intersects(zombie.bounds) and zombie.alive:
                self.player.hit(self.game_time_total)
                if self.player.health <= 0:
                    self.state = State.GAME_OVER

    def _collect_pickups(self) -> None:
        player_bounds = self.player.bounds
        if player_bounds.intersects(self.health_pickup.bounds) and self.health_pickup.spawned:
            self.player.increase_health_level(self.health_pickup.collect())
        if player_bounds.intersects(self.ammo_pickup.bounds) and self.ammo_pickup.spawned:
            self.bullets_spare += self.ammo_pickup.collect()

    @property
    def health_bar_size(self) -> Vector:
        """Width and height of the health bar on the HUD."""
        return Vector(self.player.health * 3, 70)

    def hud(self) -> dict[str, str]:
        """The texts shown on the heads-up display."""
        return {
            "ammo": f"{self.bullets_in_clip}/{self.bullets_spare}",
            "score": f"Score:{self.score}",
            "hi_score": f"Hi Score:{self.hi_score}",
            "wave": f"Wave:{self.wave}",
            "zombies": f"Zombies:{self.num_zombies_alive}",
        }