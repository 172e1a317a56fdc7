"""The game window: input, the frame loop and drawing."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable
from pathlib import Path

import pygame

from zombiearena.game import Game, State
from zombiearena.geometry import Rect, Vector
from zombiearena.player import Direction

RESOLUTION = Vector(1920, 1080)
WINDOW_SIZE = (800, 600)
TITLE = "Zombie Arena"
FONT_FILE = "zombiecontrol.ttf"
WHITE = (255, 255, 255)
RED = (255, 0, 0)

LEVEL_UP_LINES = (
    "0- Start the normal game",
    "1- Increased rate of fire",
    "2- Increased clip size(next reload)",
    "3- Increased max health",
    "4- Increased run speed",
    "5- More and better health pickups",
    "6- More and better ammo pickups",
)
PAUSED_LINES = ("Press Enter ", "to continue")
GAME_OVER_TEXT = "Press Enter to play"

_UPGRADE_KEYS = {
    pygame.K_0: 0,
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
    pygame.K_5: 5,
    pygame.K_6: 6,
}

_MOVEMENT_KEYS = {
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}

_FALLBACK_COLOURS = {
    "player.png": (60, 120, 220),
    "bloater.png": (120, 160, 60),
    "chaser.png": (200, 200, 60),
    "crawler.png": (140, 90, 40),
    "blood.png": (120, 0, 0),
    "health_pickup.png": (220, 40, 40),
    "ammo_pickup.png": (220, 180, 40),
    "crosshair.png": (255, 255, 255),
    "ammo_icon.png": (220, 180, 40),
    "background.png": (30, 30, 30),
}

_FLOOR_BANDS = ((90, 70, 40), (110, 110, 110), (50, 110, 50), (70, 70, 90))


def translate_key(key: int) -> Callable[[Game], None] | None:
    """Return what pressing ``key`` does to a game, or None if the key does nothing."""
    if key == pygame.K_RETURN:
        return Game.press_enter
    if key == pygame.K_r:
        return Game.reload
    if key in _UPGRADE_KEYS:
        choice = _UPGRADE_KEYS[key]

        def upgrade(game: Game) -> None:
            game.choose_upgrade(choice)

        return upgrade
    return None


class _Stopwatch:
    """Measures the seconds between restarts."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def restart(self) -> float:
        now = time.perf_counter()
        elapsed, self._start = now - self._start, now
        return elapsed


class _Assets:
    """Images and fonts loaded from a directory, with plain stand-ins for missing files."""

    def __init__(self, directory: Path) -> None:
        self._directory = directory
        self._images: dict[str, pygame.Surface] = {}
        self._fonts: dict[int, pygame.font.Font] = {}

    def image(self, name: str, size: tuple[int, int] = (50, 50)) -> pygame.Surface:
        if name not in self._images:
            try:
                surface = pygame.image.load(str(self._directory / name)).convert_alpha()
            except (pygame.error, OSError):
                surface = pygame.Surface(size, pygame.SRCALPHA)
                surface.fill(_FALLBACK_COLOURS.get(name, WHITE))
            self._images[name] = surface
        return self._images[name]

    def background_sheet(self) -> pygame.Surface:
        name = "background_sheet.png"
        if name not in self._images:
            try:
                surface = pygame.image.load(str(self._directory / name)).convert_alpha()
            except (pygame.error, OSError):
                surface = pygame.Surface((50, 50 * len(_FLOOR_BANDS)))
                for band, colour in enumerate(_FLOOR_BANDS):
                    surface.fill(colour, pygame.Rect(0, band * 50, 50, 50))
            self._images[name] = surface
        return self._images[name]

    def font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            path = self._directory / FONT_FILE
            self._fonts[size] = pygame.font.Font(str(path) if path.is_file() else None, size)
        return self._fonts[size]


def _blit_centred(target: pygame.Surface, image: pygame.Surface, centre: Vector, rotation: float = 0.0) -> None:
    rotated = pygame.transform.rotate(image, -rotation) if rotation else image
    target.blit(rotated, rotated.get_rect(center=(round(centre.x), round(centre.y))))


def _centre(bounds: Rect) -> Vector:
    return Vector(bounds.left + bounds.width / 2, bounds.top + bounds.height / 2)


def _text(target: pygame.Surface, assets: _Assets, size: int, lines, position: tuple[float, float]) -> None:
    font = assets.font(size)
    x, y = position
    for line in lines:
        rendered = font.render(line, True, WHITE)
        target.blit(rendered, (x, y))
        y += font.get_linesize()


def _draw_playing(canvas: pygame.Surface, game: Game, assets: _Assets) -> None:
    offset = Vector(
        game.view_center.x - game.resolution.x / 2,
        game.view_center.y - game.resolution.y / 2,
    )

    def to_screen(point: Vector) -> Vector:
        return Vector(point.x - offset.x, point.y - offset.y)

    sheet = assets.background_sheet()
    for tile in game.background:
        area = pygame.Rect(0, tile.texture_top, tile.size, tile.size)
        corner = to_screen(tile.position)
        canvas.blit(sheet, (round(corner.x), round(corner.y)), area)

    for bullet in game.bullets:
        if bullet.in_flight:
            corner = to_screen(bullet.position)
            canvas.fill(WHITE, pygame.Rect(round(corner.x), round(corner.y), 2, 2))

    player = game.player
    _blit_centred(canvas, assets.image(player.TEXTURE), to_screen(_centre(player.bounds)), player.rotation)
    for zombie in game.zombies:
        if zombie.texture is not None:
            _blit_centred(canvas, assets.image(zombie.texture), to_screen(_centre(zombie.bounds)), zombie.rotation)
    _blit_centred(canvas, assets.image("crosshair.png"), to_screen(game.mouse_world_position))
    for pickup in (game.ammo_pickup, game.health_pickup):
        if pickup.spawned:
            _blit_centred(canvas, assets.image(pickup.texture), to_screen(pickup.position))

    bar = game.health_bar_size
    if bar.x > 0:
        canvas.fill(RED, pygame.Rect(450, 980, round(bar.x), round(bar.y)))
    canvas.blit(assets.image("ammo_icon.png"), (20, 980))
    hud = game.hud()
    _text(canvas, assets, 55, [hud["ammo"]], (200, 980))
    _text(canvas, assets, 55, [hud["score"]], (20, 0))
    _text(canvas, assets, 55, [hud["hi_score"]], (1400, 0))
    _text(canvas, assets, 55, [hud["wave"]], (1250, 980))
    _text(canvas, assets, 55, [hud["zombies"]], (1500, 980))


def _draw(canvas: pygame.Surface, game: Game, assets: _Assets) -> None:
    canvas.fill((0, 0, 0))
    size = (int(game.resolution.x), int(game.resolution.y))
    if game.state is State.PLAYING:
        _draw_playing(canvas, game, assets)
    elif game.state is State.LEVELING_UP:
        canvas.blit(assets.image("background.png", size), (0, 0))
        _text(canvas, assets, 80, LEVEL_UP_LINES, (150, 250))
    elif game.state is State.PAUSED:
        _text(canvas, assets, 155, PAUSED_LINES, (400, 400))
    elif game.state is State.GAME_OVER:
        canvas.blit(assets.image("background.png", size), (0, 0))
        rendered = assets.font(125).render(GAME_OVER_TEXT, True, WHITE)
        canvas.blit(rendered, rendered.get_rect(center=(size[0] // 2, size[1] // 2)))


def _frame_count(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("the number of frames cannot be negative")
    return value


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="zombiearena", description="Survive the zombie horde.")
    parser.add_argument("--assets", type=Path, default=Path.cwd(), help="directory holding images and the font")
    parser.add_argument("--windowed", action="store_true", help="run in a window instead of full screen")
    parser.add_argument("--frames", type=_frame_count, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    args = _parse_args(argv)
    pygame.display.init()
    pygame.font.init()
    try:
        flags = 0 if args.windowed else pygame.FULLSCREEN
        window = pygame.display.set_mode(WINDOW_SIZE, flags)
        pygame.display.set_caption(TITLE)
        pygame.mouse.set_visible(False)
        canvas = pygame.Surface((int(RESOLUTION.x), int(RESOLUTION.y)))
        assets = _Assets(args.assets)
        game = Game(resolution=RESOLUTION)
        clock = _Stopwatch()
        frames = 0

        running = True
        while running and (args.frames is None or frames < args.frames):
            frames += 1
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    action = translate_key(event.key)
                    if action is not None:
                        before = game.state
                        action(game)
                        if before is State.PAUSED and game.state is State.PLAYING:
                            clock.restart()
            pressed = pygame.key.get_pressed()
            if pressed[pygame.K_ESCAPE]:
                running = False

            if game.state is State.NEXTWAVE:
                game.start_next_wave()
                clock.restart()

            if game.state is State.PLAYING:
                if pygame.mouse.get_pressed()[0]:
                    target = game.mouse_world_position
                    game.fire(target.x, target.y)
                window_width, window_height = window.get_size()
                mouse_x, mouse_y = pygame.mouse.get_pos()
                mouse = Vector(
                    mouse_x * RESOLUTION.x / max(window_width, 1),
                    mouse_y * RESOLUTION.y / max(window_height, 1),
                )
                held = [direction for key, direction in _MOVEMENT_KEYS.items() if pressed[key]]
                game.update(clock.restart(), mouse, held)

            _draw(canvas, game, assets)
            pygame.transform.smoothscale(canvas, window.get_size(), window)
            pygame.display.flip()
        return 0
    finally:
        pygame.quit()