#!/usr/bin/env python3
"""
Physics Module for the Spacewar Klingon Combat Core

Implements the 2D kinematics shared by every per-tick pass:
- 2D vector operations (screen/math convention, degrees measured from +X)
- Heading helpers (vector <-> bearing in degrees)
- Euler integration of thrust into velocity and velocity into position
- Frame-rate independent exponential drag
"""

from __future__ import annotations

import math
from dataclasses import dataclass


# =============================================================================
# VECTOR2D CLASS
# =============================================================================

@dataclass
class Vector2D:
    """
    2D vector for positions, velocities and thrust in the play area.

    Bearings are measured in degrees counter-clockwise from the +X axis,
    the same convention used for shot headings and evasion offsets.
    """
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        """Vector addition."""
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        """Vector subtraction."""
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        """Scalar multiplication."""
        return Vector2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2D:
        """Right scalar multiplication."""
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2D:
        """Scalar division."""
        if scalar == 0:
            raise ValueError("Cannot divide vector by zero")
        return Vector2D(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2D:
        """Negation."""
        return Vector2D(-self.x, -self.y)

    def dot(self, other: Vector2D) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    @property
    def magnitude(self) -> float:
        """Vector magnitude (length)."""
        return math.hypot(self.x, self.y)

    @property
    def magnitude_squared(self) -> float:
        """Squared magnitude (avoids sqrt for comparisons)."""
        return self.x**2 + self.y**2

    def normalized(self) -> Vector2D:
        """Return unit vector in same direction."""
        mag = self.magnitude
        if mag == 0:
            return Vector2D(0.0, 0.0)
        return self / mag

    def distance_to(self, other: Vector2D) -> float:
        """Distance to another point."""
        return (self - other).magnitude

    def is_finite(self) -> bool:
        """True when neither component is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: tuple[float, float]) -> Vector2D:
        """Create from tuple."""
        return cls(t[0], t[1])

    @classmethod
    def zero(cls) -> Vector2D:
        """Zero vector."""
        return cls(0.0, 0.0)

    def __repr__(self) -> str:
        return f"Vector2D({self.x:.6g}, {self.y:.6g})"


# =============================================================================
# HEADINGS
# =============================================================================

def heading_degrees(vector: Vector2D) -> float:
    """
    Bearing of a vector in degrees, normalized to [0, 360).

    The zero vector has a bearing of 0.
    """
    if vector.x == 0 and vector.y == 0:
        return 0.0
    return math.degrees(math.atan2(vector.y, vector.x)) % 360.0


def angle_degrees(origin: Vector2D, target: Vector2D) -> float:
    """Bearing in degrees from ``origin`` toward ``target``."""
    return heading_degrees(target - origin)


def from_angular(magnitude: float, degrees: float) -> Vector2D:
    """Build a vector of the given length pointing along a bearing."""
    radians = math.radians(degrees)
    return Vector2D(magnitude * math.cos(radians), magnitude * math.sin(radians))


# =============================================================================
# INTEGRATION
# =============================================================================

def integrate_velocity(velocity: Vector2D, acceleration: Vector2D, dt: float) -> Vector2D:
    """Euler step: v' = v + a * dt."""
    return velocity + acceleration * dt


def integrate_position(position: Vector2D, velocity: Vector2D, dt: float) -> Vector2D:
    """Euler step: p' = p + v * dt."""
    return position + velocity * dt


def drag_factor(drag: float, dt: float) -> float:
    """
    Velocity multiplier for exponential drag over ``dt``.

    ``drag`` is the fraction of velocity kept after one time unit, so
    applying ``drag_factor(drag, a)`` then ``drag_factor(drag, b)`` equals
    ``drag_factor(drag, a + b)`` regardless of how a tick is split.
    """
    return math.pow(drag, dt)
