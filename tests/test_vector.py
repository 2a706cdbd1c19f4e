import math
import pytest

from core.vector import Vector3


def test_arithmetic():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, 5.0, 6.0)
    assert a + b == Vector3(5.0, 7.0, 9.0)
    assert b - a == Vector3(3.0, 3.0, 3.0)
    assert a * 2 == Vector3(2.0, 4.0, 6.0)
    assert 2 * a == a * 2
    assert b / 2 == Vector3(2.0, 2.5, 3.0)
    assert -a == Vector3(-1.0, -2.0, -3.0)


def test_dot_and_length():
    a = Vector3(1.0, 2.0, 2.0)
    assert a.dot(Vector3(2.0, 0.0, 1.0)) == 4.0
    assert a.length_squared() == 9.0
    assert a.length() == 3.0


def test_is_immutable():
    a = Vector3(0.0, 0.0, 1.0)
    with pytest.raises(AttributeError):
        a.x = 5.0


def test_hashable_value_type():
    assert len({Vector3(0, 0, 1), Vector3(0.0, 0.0, 1.0)}) == 1


def test_nan_propagates():
    a = Vector3(math.nan, 0.0, 0.0)
    assert math.isnan(a.dot(a))
