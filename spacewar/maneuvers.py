#!/usr/bin/env python3
"""
Klingon Maneuvering for the Spacewar Combat Core.

Each tick every klingon picks a thrust vector from its tactical situation
relative to the player ship, then integrates velocity and position and
bleeds off speed through drag:

- Beyond tactical range: no thrust (disengaged)
- Inside the evasion limit: thrust perpendicular to the ship (break off)
- Antimatter below the runaway threshold: thrust straight away (flee)
- Otherwise: pursue, bending from head-on at tactical range to
  perpendicular strafing at the evasion limit

Thrust is capped by the antimatter reserve but does not spend it.
"""

from __future__ import annotations

from .config import KlingonConfig
from .klingon import Klingon
from .physics import (
    Vector2D,
    angle_degrees,
    drag_factor,
    from_angular,
    integrate_position,
    integrate_velocity,
)
from .world import Ship, World


# =============================================================================
# TACTICS
# =============================================================================

# Heading offsets in degrees, added to the bearing toward the ship
BREAK_OFF_OFFSET_DEG = 90.0
RUNAWAY_OFFSET_DEG = 180.0
MAX_EVASION_OFFSET_DEG = 90.0


def evasion_angle(distance: float, config: KlingonConfig) -> float:
    """
    Heading offset while pursuing inside tactical range.

    0 degrees at ``tactical_range`` and beyond, 90 degrees at
    ``evasion_limit`` and closer, linear in between.
    """
    base = config.tactical_range - config.evasion_limit
    actual = min(base, max(0.0, config.tactical_range - distance))
    return MAX_EVASION_OFFSET_DEG * actual / base


def tactical_heading(klingon: Klingon, ship: Ship, config: KlingonConfig) -> float:
    """Bearing in degrees the klingon wants to thrust along."""
    distance = klingon.position.distance_to(ship.position)
    if klingon.position == ship.position:
        degrees = 0.0
    else:
        degrees = angle_degrees(klingon.position, ship.position)

    if distance < config.evasion_limit:
        return degrees + BREAK_OFF_OFFSET_DEG
    if klingon.antimatter < config.antimatter_runaway_threshold:
        return degrees + RUNAWAY_OFFSET_DEG
    return degrees + evasion_angle(distance, config)


def effective_thrust(klingon: Klingon, config: KlingonConfig) -> float:
    """Thrust magnitude: weakened by shield damage, capped by antimatter."""
    return min(klingon.antimatter, config.thrust * klingon.shield_efficiency(config))


def thrust_if_close(ship: Ship, klingon: Klingon, config: KlingonConfig) -> Klingon:
    """Set the klingon's thrust vector for this tick."""
    distance = klingon.position.distance_to(ship.position)
    if distance > config.tactical_range:
        klingon.thrust = Vector2D.zero()
    else:
        klingon.thrust = from_angular(
            effective_thrust(klingon, config),
            tactical_heading(klingon, ship, config),
        )
    return klingon


# =============================================================================
# KINEMATICS
# =============================================================================

def accelerate_klingon(dt: float, klingon: Klingon) -> Klingon:
    klingon.velocity = integrate_velocity(klingon.velocity, klingon.thrust, dt)
    return klingon


def move_klingon(dt: float, klingon: Klingon) -> Klingon:
    klingon.position = integrate_position(klingon.position, klingon.velocity, dt)
    return klingon


def calc_drag(dt: float, config: KlingonConfig) -> float:
    """Velocity multiplier for ``dt`` of drag."""
    return drag_factor(config.drag, dt)


def drag_klingon(dt: float, klingon: Klingon, config: KlingonConfig) -> Klingon:
    klingon.velocity = klingon.velocity * calc_drag(dt, config)
    return klingon


# =============================================================================
# PASS
# =============================================================================

def klingon_motion(dt: float, world: World, config: KlingonConfig) -> World:
    """Run the motion pass: choose thrust, accelerate, move, apply drag."""
    ship = world.ship
    for klingon in world.klingons:
        thrust_if_close(ship, klingon, config)
        accelerate_klingon(dt, klingon)
        move_klingon(dt, klingon)
        drag_klingon(dt, klingon, config)
    return world
