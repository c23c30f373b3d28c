#!/usr/bin/env python3
"""
Test Suite for Physics Module

Tests cover:
1. Vector2D operations (add, subtract, scale, divide, dot, magnitude, normalization)
2. Heading helpers (bearing of a vector, bearing between points, polar construction)
3. Euler integration of velocity and position
4. Exponential drag composition
"""

import math
import pytest
from numpy.testing import assert_allclose

from spacewar.physics import (
    Vector2D,
    heading_degrees,
    angle_degrees,
    from_angular,
    integrate_velocity,
    integrate_position,
    drag_factor,
)


# =============================================================================
# VECTOR2D TESTS
# =============================================================================

class TestVector2DBasicOperations:
    """Tests for basic Vector2D arithmetic operations."""

    @pytest.mark.parametrize("v1,v2,expected", [
        (Vector2D(1, 2), Vector2D(3, 4), Vector2D(4, 6)),
        (Vector2D(0, 0), Vector2D(1, 1), Vector2D(1, 1)),
        (Vector2D(-1, -2), Vector2D(1, 2), Vector2D(0, 0)),
    ])
    def test_addition(self, v1, v2, expected):
        """Test vector addition."""
        assert v1 + v2 == expected

    def test_subtraction(self):
        assert Vector2D(5, 7) - Vector2D(2, 3) == Vector2D(3, 4)

    def test_scalar_multiplication_both_sides(self):
        v = Vector2D(1.5, -2.0)
        assert v * 2 == Vector2D(3.0, -4.0)
        assert 2 * v == Vector2D(3.0, -4.0)

    def test_division(self):
        assert Vector2D(3, 6) / 3 == Vector2D(1, 2)

    def test_division_by_zero_raises(self):
        with pytest.raises(ValueError):
            Vector2D(1, 1) / 0

    def test_negation(self):
        assert -Vector2D(1, -2) == Vector2D(-1, 2)

    def test_dot_product(self):
        assert Vector2D(1, 2).dot(Vector2D(3, 4)) == 11


class TestVector2DMagnitude:
    """Tests for magnitude, normalization and distance."""

    def test_magnitude(self):
        assert Vector2D(3, 4).magnitude == 5.0
        assert Vector2D(3, 4).magnitude_squared == 25.0

    def test_normalized(self):
        n = Vector2D(3, 4).normalized()
        assert n.magnitude == pytest.approx(1.0)
        assert n.x == pytest.approx(0.6)

    def test_normalized_zero_vector(self):
        assert Vector2D(0, 0).normalized() == Vector2D(0, 0)

    def test_distance_to(self):
        assert Vector2D(1, 1).distance_to(Vector2D(4, 5)) == pytest.approx(5.0)

    def test_is_finite(self):
        assert Vector2D(1, 2).is_finite()
        assert not Vector2D(math.nan, 0).is_finite()
        assert not Vector2D(0, math.inf).is_finite()

    def test_tuple_round_trip(self):
        assert Vector2D.from_tuple(Vector2D(1.5, 2.5).to_tuple()) == Vector2D(1.5, 2.5)


# =============================================================================
# HEADING TESTS
# =============================================================================

class TestHeadings:
    """Tests for bearings in degrees."""

    @pytest.mark.parametrize("vector,expected", [
        (Vector2D(1, 0), 0.0),
        (Vector2D(0, 1), 90.0),
        (Vector2D(-1, 0), 180.0),
        (Vector2D(0, -1), 270.0),
        (Vector2D(1, 1), 45.0),
    ])
    def test_heading_degrees(self, vector, expected):
        assert heading_degrees(vector) == pytest.approx(expected)

    def test_zero_vector_heading_is_zero(self):
        assert heading_degrees(Vector2D(0, 0)) == 0.0

    def test_angle_degrees_points_from_origin_to_target(self):
        assert angle_degrees(Vector2D(10, 10), Vector2D(10, 20)) == pytest.approx(90.0)

    def test_from_angular(self):
        v = from_angular(2.0, 90.0)
        assert_allclose(v.to_tuple(), (0.0, 2.0), atol=1e-12)

    def test_from_angular_wraps_past_full_turn(self):
        assert_allclose(from_angular(1.0, 450.0).to_tuple(),
                        from_angular(1.0, 90.0).to_tuple(), atol=1e-12)


# =============================================================================
# INTEGRATION TESTS
# =============================================================================

class TestIntegration:
    """Tests for Euler steps and drag."""

    def test_integrate_velocity(self):
        v = integrate_velocity(Vector2D(1, 0), Vector2D(0, 2), 0.5)
        assert v == Vector2D(1, 1)

    def test_integrate_position(self):
        p = integrate_position(Vector2D(10, 10), Vector2D(2, -4), 0.5)
        assert p == Vector2D(11, 8)

    def test_zero_dt_is_identity(self):
        assert integrate_position(Vector2D(3, 4), Vector2D(100, 100), 0.0) == Vector2D(3, 4)
        assert drag_factor(0.5, 0.0) == 1.0

    def test_drag_one_unit(self):
        assert drag_factor(0.5, 1.0) == pytest.approx(0.5)

    @pytest.mark.parametrize("dt", [0.016, 0.1, 1.0, 3.7])
    def test_drag_composes_over_split_ticks(self, dt):
        """Two half ticks of drag equal one full tick."""
        assert drag_factor(0.5, dt / 2) ** 2 == pytest.approx(drag_factor(0.5, dt))
