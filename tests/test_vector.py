"""Tests for antrivals.geometry.vector."""

import math

import pytest

from antrivals.geometry.vector import ZERO, Vector2


class TestVector2:
    """Arithmetic and magnitude helpers."""

    def test_arithmetic(self) -> None:
        a = Vector2(1.0, 2.0)
        b = Vector2(3.0, -1.0)
        assert a + b == Vector2(4.0, 1.0)
        assert a - b == Vector2(-2.0, 3.0)
        assert a * 2 == Vector2(2.0, 4.0)
        assert 2 * a == Vector2(2.0, 4.0)
        assert -a == Vector2(-1.0, -2.0)

    def test_normalized_zero_stays_zero(self) -> None:
        assert ZERO.normalized() == ZERO
        assert ZERO.with_length(5.0) == ZERO

    def test_with_length(self) -> None:
        v = Vector2(3.0, 4.0).with_length(10.0)
        assert v.x == pytest.approx(6.0)
        assert v.y == pytest.approx(8.0)

    def test_limit_only_shrinks(self) -> None:
        assert Vector2(0.5, 0.0).limit(1.0) == Vector2(0.5, 0.0)
        limited = Vector2(3.0, 4.0).limit(1.0)
        assert limited.length() == pytest.approx(1.0)
        assert limited.x == pytest.approx(0.6)
        assert limited.y == pytest.approx(0.8)

    def test_rotate_quarter_turn(self) -> None:
        v = Vector2(1.0, 0.0).rotate(math.pi / 2)
        assert v.x == pytest.approx(0.0, abs=1e-12)
        assert v.y == pytest.approx(1.0)

    def test_rotate_half_turn(self) -> None:
        v = Vector2(2.0, 1.0).rotate(math.pi)
        assert v.x == pytest.approx(-2.0)
        assert v.y == pytest.approx(-1.0)

    def test_from_angle_and_distance(self) -> None:
        v = Vector2.from_angle(math.pi / 2, 3.0)
        assert v.y == pytest.approx(3.0)
        assert Vector2(0.0, 0.0).distance_to(Vector2(3.0, 4.0)) == pytest.approx(5.0)

    def test_random_unit(self, rng) -> None:
        for _ in range(20):
            assert Vector2.random_unit(rng).length() == pytest.approx(1.0)
