import math
import pytest
from core.vector import Vector3
from core.ray import Ray

# --- Tests for Vector3 ---

def test_vector_arithmetic():
    a = Vector3(1, 2, 3)
    b = Vector3(4, 5, 6)
    assert a + b == Vector3(5, 7, 9)
    assert b - a == Vector3(3, 3, 3)
    assert a * 2 == Vector3(2, 4, 6)
    assert 2 * a == Vector3(2, 4, 6)
    assert a * b == Vector3(4, 10, 18)
    assert b / 2 == Vector3(2, 2.5, 3)
    assert -a == Vector3(-1, -2, -3)

def test_dot_and_cross():
    x = Vector3(1, 0, 0)
    y = Vector3(0, 1, 0)
    assert x.dot(y) == 0
    assert x.cross(y) == Vector3(0, 0, 1)
    assert y.cross(x) == Vector3(0, 0, -1)
    assert Vector3(1, 2, 3).dot(Vector3(4, 5, 6)) == 32

def test_normalize_unit_length():
    v = Vector3(3, 4, 12).normalize()
    assert math.isclose(v.length(), 1.0, rel_tol=1e-12)
    assert math.isclose(v.x, 3 / 13)

def test_normalize_zero_vector_returns_zero():
    """Normalizing a zero vector is defined, not an error."""
    assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

def test_from_sequence():
    assert Vector3.from_sequence([1, 2, 3]) == Vector3(1, 2, 3)
    with pytest.raises(ValueError):
        Vector3.from_sequence([1, 2])

# --- Tests for Ray ---

def test_ray_direction_is_normalized():
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -5))
    assert ray.direction == Vector3(0, 0, -1)
    assert ray.at(2.0) == Vector3(0, 0, -2)
