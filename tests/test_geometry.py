import pytest

from zombiearena.geometry import Rect, Vector


def test_overlapping_rects_intersect():
    assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))


def test_touching_edges_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10))


def test_separate_rects_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(30, 30, 5, 5))


@pytest.mark.parametrize(
    "a, b",
    [
        (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)),
        (Rect(0, 0, 10, 10), Rect(10, 0, 10, 10)),
        (Rect(-5, -5, 3, 3), Rect(0, 0, 1, 1)),
        (Rect(2, 2, 1, 1), Rect(0, 0, 10, 10)),
    ],
)
def test_intersects_is_symmetric(a, b):
    assert a.intersects(b) == b.intersects(a)


def test_negative_size_is_normalised():
    assert Rect(10, 10, -10, -10).intersects(Rect(2, 2, 3, 3))


def test_contained_rect_intersects():
    assert Rect(0, 0, 100, 100).intersects(Rect(40, 40, 2, 2))


def test_inset_moves_corner_and_shrinks():
    assert Rect(0, 0, 500, 500).inset(50) == Rect(50, 50, 450, 450)


def test_inset_zero_is_identity():
    rect = Rect(3, 4, 20, 30)
    assert rect.inset(0) == rect


def test_around_unrotated_is_centred():
    box = Rect.around(Vector(100, 100), 50)
    assert box.width == 50
    assert box.height == 50
    assert box.left + box.width / 2 == 100
    assert box.top + box.height / 2 == 100


def test_around_quarter_turn_keeps_size():
    box = Rect.around(Vector(10, 20), 50, 90)
    assert box.width == pytest.approx(50)
    assert box.height == pytest.approx(50)


def test_around_diagonal_grows_but_stays_centred():
    box = Rect.around(Vector(0, 0), 50, 45)
    assert box.width > 50
    assert box.left + box.width / 2 == pytest.approx(0)
    assert box.top + box.height / 2 == pytest.approx(0)