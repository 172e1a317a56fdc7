import random

import pytest

from zombiearena.geometry import Rect
from zombiearena.pickup import Pickup, PickupKind


def _placed(kind=PickupKind.HEALTH, seed=3):
    pickup = Pickup(kind, random.Random(seed))
    pickup.set_arena(Rect(0, 0, 500, 500))
    return pickup


def test_start_values():
    assert Pickup(PickupKind.HEALTH).collect() == 50
    assert Pickup(PickupKind.AMMO).collect() == 12


def test_textures_by_kind():
    assert Pickup(PickupKind.HEALTH).texture == "health_pickup.png"
    assert Pickup(PickupKind.AMMO).texture == "ammo_pickup.png"


def test_kind_from_number():
    assert Pickup(2).kind is PickupKind.AMMO


def test_upgrade_raises_value():
    health = Pickup(PickupKind.HEALTH)
    health.upgrade()
    assert health.collect() == 75
    ammo = Pickup(PickupKind.AMMO)
    ammo.upgrade()
    assert ammo.collect() == 18


def test_set_arena_spawns_inside():
    for seed in range(20):
        pickup = _placed(seed=seed)
        assert pickup.spawned is True
        assert 0 <= pickup.position.x < pickup.arena.width
        assert 0 <= pickup.position.y < pickup.arena.height


def test_same_seed_same_position():
    first = _placed(seed=7)
    second = _placed(seed=7)
    assert (first.position.x, first.position.y) == (
        second.position.x,
        second.position.y,
    )
    assert 0 <= first.position.x < first.arena.width
    assert 0 <= first.position.y < first.arena.height
    spread = {
        (p.position.x, p.position.y) for p in (_placed(seed=s) for s in range(10))
    }
    assert len(spread) > 1


def test_spawn_without_arena_raises():
    with pytest.raises(ValueError):
        Pickup(PickupKind.AMMO).spawn()


def test_collect_despawns():
    pickup = _placed()
    pickup.collect()
    assert pickup.spawned is False


def test_pickup_expires_then_returns():
    pickup = _placed()
    pickup.update(4.0)
    assert pickup.spawned is True
    pickup.update(1.5)
    assert pickup.spawned is False
    pickup.update(9.0)
    assert pickup.spawned is False
    pickup.update(1.5)
    assert pickup.spawned is True


def test_upgraded_pickup_returns_sooner():
    plain = _placed()
    upgraded = _placed()
    upgraded.upgrade()
    plain.collect()
    upgraded.collect()
    plain.update(9.5)
    upgraded.update(9.5)
    assert plain.spawned is False
    assert upgraded.spawned is True


def test_bounds_centred_on_position():
    pickup = _placed()
    box = pickup.bounds
    assert box.left + box.width / 2 == pytest.approx(pickup.position.x)
    assert box.width == Pickup.SIZE