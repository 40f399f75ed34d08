import math

import pytest

from gravity.vector_utils import Vector2, clamp


@pytest.mark.parametrize("x, y", [(3, 4), (-1, 0), (0, -7.5), (1e-9, 2e-9), (123.4, -567.8)])
def test_unit_has_length_one(x, y):
    assert Vector2(x, y).unit().length() == pytest.approx(1.0)


def test_unit_of_zero_vector_is_zero():
    assert Vector2(0, 0).unit() == Vector2(0.0, 0.0)


def test_length():
    assert Vector2(3, 4).length() == 5.0
    assert Vector2(-3, -4).length() == 5.0


def test_unit_keeps_direction():
    u = Vector2(3, 3).unit()
    assert u.x == pytest.approx(1 / math.sqrt(2))
    assert u.y == pytest.approx(1 / math.sqrt(2))


def test_operations_return_new_values():
    a = Vector2(1, 2)
    b = Vector2(3, 5)
    assert a + b == Vector2(4, 7)
    assert b - a == Vector2(2, 3)
    assert a.scale(3) == Vector2(3, 6)
    assert a == Vector2(1, 2)


def test_vector_is_immutable():
    v = Vector2(1, 2)
    with pytest.raises(AttributeError):
        v.x = 5


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2
