import pytest

from quadkit.rect import (
    Circle,
    Rect,
    RectOffset,
    cartesian_to_polar,
    clamp,
    polar_to_cartesian,
)
from quadkit.vector import Vec2


def test_edges_and_corners():
    r = Rect(2.0, 3.0, 4.0, 5.0)
    assert r.left() == 2.0
    assert r.top() == 3.0
    assert r.point() == Vec2(2.0, 3.0)
    assert r.size() == Vec2(4.0, 5.0)
    assert r.right() - r.left() == r.w
    assert r.bottom() - r.top() == r.h


def test_center_of_unit_square():
    assert Rect(0.0, 0.0, 2.0, 2.0).center() == Vec2(1.0, 1.0)


def test_contains_excludes_right_and_bottom():
    r = Rect(0.0, 0.0, 10.0, 10.0)
    assert r.contains(Vec2(0.0, 0.0))
    assert not r.contains(Vec2(10.0, 5.0))
    assert not r.contains(Vec2(5.0, 10.0))


def test_overlaps():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    assert a.overlaps(Rect(5.0, 5.0, 10.0, 10.0))
    assert not a.overlaps(Rect(10.0, 0.0, 10.0, 10.0))


def test_intersect():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    assert a.intersect(Rect(5.0, 5.0, 10.0, 10.0)) == Rect(5.0, 5.0, 5.0, 5.0)
    assert a.intersect(Rect(20.0, 20.0, 1.0, 1.0)) is None


def test_combine_contains_both():
    a = Rect(0.0, 0.0, 2.0, 2.0)
    b = Rect(5.0, 6.0, 1.0, 1.0)
    c = a.combine_with(b)
    assert c.left() == a.left()
    assert c.top() == a.top()
    assert c.right() == b.right()
    assert c.bottom() == b.bottom()


def test_offset_round_trip():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    d = Vec2(7.0, -2.0)
    assert r.offset(d).offset(-d) == r


def test_move_to_and_scale():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    r.move_to(Vec2(8.0, 9.0))
    assert r.point() == Vec2(8.0, 9.0)
    r.scale(2.0, 2.0)
    r.scale(0.5, 0.5)
    assert r.size() == Vec2(3.0, 4.0)


def test_rect_offset_constructor_order():
    o = RectOffset(1.0, 2.0, 3.0, 4.0)
    assert (o.left, o.right, o.top, o.bottom) == (1.0, 2.0, 3.0, 4.0)


def test_circle_contains_is_strict():
    c = Circle(0.0, 0.0, 1.0)
    assert c.contains(Vec2(0.5, 0.0))
    assert not c.contains(Vec2(1.0, 0.0))


def test_circle_overlaps():
    c = Circle(0.0, 0.0, 1.0)
    assert c.overlaps(Circle(1.5, 0.0, 1.0))
    assert not c.overlaps(Circle(2.0, 0.0, 1.0))


def test_circle_overlaps_rect():
    assert not Circle(0.0, 0.0, 1.0).overlaps_rect(Rect(10.0, 10.0, 1.0, 1.0))
    assert Circle(0.0, 0.0, 1.0).overlaps_rect(Rect(-0.5, -0.5, 1.0, 1.0))
    assert not Circle(0.0, 0.0, 1.0).overlaps_rect(Rect(1.0, 1.0, 1.0, 1.0))
    assert Circle(0.0, 0.0, 1.5).overlaps_rect(Rect(1.0, 1.0, 1.0, 1.0))


def test_circle_move_scale_offset():
    c = Circle(1.0, 2.0, 3.0)
    c.move_to(Vec2(4.0, 5.0))
    assert c.point() == Vec2(4.0, 5.0)
    c.scale(2.0)
    c.scale(0.5)
    assert c.radius() == 3.0
    d = Vec2(1.0, -1.0)
    assert c.offset(d).offset(-d) == c


def test_polar_round_trip():
    back = cartesian_to_polar(polar_to_cartesian(2.0, 0.7))
    assert back.x == pytest.approx(2.0)
    assert back.y == pytest.approx(0.7)


def test_polar_zero_angle():
    assert polar_to_cartesian(3.0, 0.0) == Vec2(3.0, 0.0)


@pytest.mark.parametrize(
    "value, expected", [(-5, 0), (5, 5), (15, 10)]
)
def test_clamp(value, expected):
    assert clamp(value, 0, 10) == expected