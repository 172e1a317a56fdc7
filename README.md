# zombiearena

A top-down survival shooter. You stand in the middle of a walled arena
while waves of zombies close in from its edges. Clear a wave to pick an
upgrade; each new wave comes with a bigger arena and twice as many
zombies as the wave number.

## Installing

```
pip install .
```

The game draws with pygame.

## Playing

```
zombiearena
```

Options:

| Option | Meaning |
| --- | --- |
| `--assets DIR` | directory holding the images and the font (default: the working directory) |
| `--windowed` | run in a window instead of full screen |
| `--frames N` | stop after N frames |

The game looks in the assets directory for `player.png`, `bloater.png`,
`chaser.png`, `crawler.png`, `blood.png`, `health_pickup.png`,
`ammo_pickup.png`, `crosshair.png`, `background_sheet.png`,
`background.png`, `ammo_icon.png` and the font `zombiecontrol.ttf`.
Any image that is missing is drawn as a plain coloured block, and a
missing font is replaced by pygame's default font, so the game runs
without any assets at all.

| Key | Action |
| --- | --- |
| Enter | start a game from the title screen, pause and resume |
| W A S D | move |
| Left mouse button | fire towards the crosshair |
| R | reload |
| 0 to 6 | pick an upgrade between waves |
| Escape | quit |

Upgrades offered between waves:

0. Start the normal game
1. Increased rate of fire
2. Increased clip size (next reload)
3. Increased max health
4. Increased run speed
5. More and better health pickups
6. More and better ammo pickups

Each kill scores 10 points; the high score is kept for as long as the
program runs. Health and ammo pickups appear for a few seconds at a time
somewhere in the arena. A zombie touching you costs 10 health at most
once every 0.2 seconds; at zero health the game is over.

## Using the game logic

The rules run without a window. `zombiearena.game.Game` holds the whole
state of a session (its phase is a `zombiearena.game.State`) and is
driven by `press_enter()`, `choose_upgrade(choice)`, `start_next_wave()`,
`fire(target_x, target_y)`, `reload()` and
`update(elapsed, mouse_screen, directions)`; `hud()` returns the texts
the heads-up display shows. `Game` takes an optional `random.Random`, so
a seeded generator gives repeatable waves.

The actors live in `zombiearena.player` (`Player`, `Direction`),
`zombiearena.zombie` (`Zombie`, `ZombieKind`), `zombiearena.bullet`
(`Bullet`) and `zombiearena.pickup` (`Pickup`, `PickupKind`).
`zombiearena.world` builds the tiled floor (`create_background`, a list
of `Tile`) and each wave's horde (`create_horde`), and
`zombiearena.geometry` provides `Vector` and `Rect`. The window and the
frame loop are in `zombiearena.app`.

## Running the tests

```
pip install ".[test]"
pytest
```