import pytest

from thomaslate.geometry import Rect, Vector2


def test_vector_default_is_origin():
    assert Vector2() == Vector2(0, 0)


def test_vector_addition_is_commutative():
    a = Vector2(1.5, -2.0)
    b = Vector2(3.0, 4.25)
    assert a + b == b + a


def test_vector_addition_with_origin_is_identity():
    a = Vector2(7.0, -3.0)
    assert a + Vector2() == a


def test_vector_add_value():
    assert Vector2(1, 2) + Vector2(3, 4) == Vector2(4, 6)


def test_vector_scalar_multiplication_matches_repeated_addition():
    a = Vector2(2.5, -1.0)
    assert a * 2 == a + a


def test_vector_multiplication_by_zero():
    assert Vector2(9.0, -4.0) * 0 == Vector2(0, 0)


def test_vector_add_rejects_non_vector():
    with pytest.raises(TypeError):
        Vector2(1, 1) + 3


def test_vector_is_immutable():
    v = Vector2(1, 1)
    with pytest.raises(AttributeError):
        v.x = 5
    assert v.x == 1
    assert v == Vector2(1, 1)


def test_overlapping_rects_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b) is True
    assert b.intersects(a) is True


def test_touching_rects_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert a.intersects(b) is False
    assert b.intersects(a) is False


def test_disjoint_rects_do_not_intersect():
    assert Rect(0, 0, 5, 5).intersects(Rect(100, 100, 5, 5)) is False


def test_contained_rect_intersects():
    assert Rect(0, 0, 100, 100).intersects(Rect(40, 40, 1, 1)) is True


def test_empty_rect_never_intersects():
    assert Rect().intersects(Rect(-10, -10, 20, 20)) is False
    assert Rect(-10, -10, 20, 20).intersects(Rect()) is False


def test_negative_size_describes_mirrored_area():
    mirrored = Rect(10, 10, -10, -10)
    assert mirrored.intersects(Rect(2, 2, 2, 2)) is True
    assert mirrored.intersects(Rect(20, 20, 2, 2)) is False