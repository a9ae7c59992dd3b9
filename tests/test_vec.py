import math
import random

import pytest

from planetaryorbits.engine.vec import DegenerateScalarError, Vector2D


def random_vectors(n=50, seed=0xf00d):
    rng = random.Random(seed)
    return [Vector2D(rng.uniform(-1e4, 1e4), rng.uniform(-1e4, 1e4)) for _ in range(n)]


def test_operations_return_new_values():
    a = Vector2D(1, 2)
    b = Vector2D(3, -4)

    assert a.add(b) == Vector2D(4, -2)
    assert a.subtract(b) == Vector2D(-2, 6)
    assert a.multiply(3) == Vector2D(3, 6)
    assert b.divide(2) == Vector2D(1.5, -2)

    # operands untouched
    assert a == Vector2D(1, 2)
    assert b == Vector2D(3, -4)


def test_operators_match_methods():
    a = Vector2D(1.5, -2)
    b = Vector2D(0.5, 4)
    assert a + b == a.add(b)
    assert a - b == a.subtract(b)
    assert a * 2 == 2 * a == a.multiply(2)
    assert a / 4 == a.divide(4)
    assert -a == Vector2D(-1.5, 2)


def test_frozen():
    v = Vector2D(1, 1)
    with pytest.raises(AttributeError):
        v.x = 5  # type: ignore


def test_add_then_subtract_is_identity():
    vectors = random_vectors()
    for a, b in zip(vectors, reversed(vectors)):
        result = a.add(b).subtract(b)
        assert result.x == pytest.approx(a.x, abs=1e-9)
        assert result.y == pytest.approx(a.y, abs=1e-9)


def test_magnitude():
    assert Vector2D(3, 4).magnitude() == 5
    assert Vector2D(3, 4).magnitude_sqr() == 25
    assert Vector2D().magnitude() == 0


def test_magnitude_sqr_is_magnitude_squared():
    for v in random_vectors():
        assert v.magnitude_sqr() == pytest.approx(v.magnitude() ** 2, rel=1e-12)


def test_divide_by_zero_raises():
    with pytest.raises(DegenerateScalarError):
        Vector2D(1, 1).divide(0)
    with pytest.raises(ZeroDivisionError):
        Vector2D(1, 1) / 0.0


def test_unit():
    u = Vector2D(0, -7).unit()
    assert u == Vector2D(0, -1)
    assert math.isclose(Vector2D(2, 9).unit().magnitude(), 1.0)
    assert Vector2D(0, 0).unit() is None
