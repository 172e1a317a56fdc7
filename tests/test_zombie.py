import math
import random

import pytest

from zombiearena.geometry import Vector
from zombiearena.zombie import Zombie, ZombieKind


def _spawned(kind, seed=1, x=100.0, y=100.0):
    zombie = Zombie()
    zombie.spawn(x, y, kind, random.Random(seed))
    return zombie


def test_new_zombie_is_dead():
    assert Zombie().alive is False


@pytest.mark.parametrize(
    "kind, base_speed",
    [(ZombieKind.BLOATER, 20), (ZombieKind.CHASER, 40), (ZombieKind.CRAWLER, 10)],
)
def test_speed_within_modifier_range(kind, base_speed):
    for seed in range(30):
        zombie = _spawned(kind, seed)
        assert zombie.alive is True
        assert 0.7 * base_speed - 1e-9 <= zombie.speed <= base_speed + 1e-9


@pytest.mark.parametrize(
    "kind, texture",
    [
        (ZombieKind.BLOATER, "bloater.png"),
        (ZombieKind.CHASER, "chaser.png"),
        (ZombieKind.CRAWLER, "crawler.png"),
    ],
)
def test_texture_by_kind(kind, texture):
    assert _spawned(kind).texture == texture


def test_same_seed_same_speed():
    first = _spawned(ZombieKind.CHASER, 9).speed
    second = _spawned(ZombieKind.CHASER, 9).speed
    assert first == pytest.approx(second)
    assert 28.0 - 1e-9 <= first <= 40.0 + 1e-9
    speeds = {_spawned(ZombieKind.CHASER, s).speed for s in range(20)}
    assert len(speeds) > 1


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        _spawned(7)


def test_zombie_approaches_player():
    zombie = _spawned(ZombieKind.CHASER)
    target = Vector(400, 300)
    before = math.dist((zombie.position.x, zombie.position.y), (target.x, target.y))
    zombie.update(0.5, target)
    after = math.dist((zombie.position.x, zombie.position.y), (target.x, target.y))
    assert after < before


def test_update_steps_by_speed_on_each_axis():
    zombie = _spawned(ZombieKind.CRAWLER)
    zombie.update(1.0, Vector(0, 500))
    assert zombie.position.x == pytest.approx(100.0 - zombie.speed)
    assert zombie.position.y == pytest.approx(100.0 + zombie.speed)


def test_chaser_dies_on_second_hit():
    zombie = _spawned(ZombieKind.CHASER)
    assert zombie.hit() is False
    assert zombie.alive is True
    assert zombie.hit() is True
    assert zombie.alive is False
    assert zombie.texture == Zombie.DEAD_TEXTURE


def test_bloater_takes_six_hits():
    zombie = _spawned(ZombieKind.BLOATER)
    results = [zombie.hit() for _ in range(6)]
    assert results == [False] * 5 + [True]


def test_dead_zombie_does_not_move():
    zombie = _spawned(ZombieKind.CHASER)
    zombie.hit()
    zombie.hit()
    before = zombie.position
    zombie.update(1.0, Vector(500, 500))
    assert zombie.position == before


def test_bounds_follow_zombie_after_update():
    zombie = _spawned(ZombieKind.CRAWLER)
    zombie.update(0.1, Vector(100, 500))
    box = zombie.bounds
    assert box.left + box.width / 2 == pytest.approx(zombie.position.x)
    assert box.top + box.height / 2 == pytest.approx(zombie.position.y)
    assert 0.0 <= zombie.rotation < 360.0