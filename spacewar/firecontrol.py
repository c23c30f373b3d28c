#!/usr/bin/env python3
"""
Fire Control for the Spacewar Klingon Combat Core.

This module implements:
- Proximity-gated weapon charging (charge rate scales with shield health)
- Phaser and kinetic readiness checks
- Intercept firing solutions against the moving player ship
- The offense pass: at most one shot per klingon per tick, phaser first
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .config import KlingonConfig
from .klingon import Klingon
from .physics import Vector2D, heading_degrees
from .projectile import Shot, ShotKind
from .world import Ship, World


# =============================================================================
# FIRING SOLUTION
# =============================================================================

@dataclass
class InterceptSolution:
    """
    Launch parameters that put a projectile on a collision course.

    Attributes:
        velocity: Projectile launch velocity.
        bearing: Heading of ``velocity`` in degrees.
        time_to_intercept: Time until projectile and target meet
            (``math.inf`` if the target outruns the shot along the line of fire).
    """
    velocity: Vector2D
    bearing: float
    time_to_intercept: float


def firing_solution(
    attacker: Vector2D,
    target: Vector2D,
    target_velocity: Vector2D,
    shot_speed: float
) -> Optional[InterceptSolution]:
    """
    Aim a fixed-speed projectile at a target moving in a straight line.

    The target's velocity is split into a part along the line of fire and
    a part across it. The projectile copies the crossing part so the two
    never drift apart sideways, and puts the rest of its speed along the
    line of fire.

    Args:
        attacker: Launch position.
        target: Current target position.
        target_velocity: Target velocity.
        shot_speed: Projectile speed.

    Returns:
        The InterceptSolution, or None when no solution exists: the attacker
        sits on the target, or the target crosses the line of fire faster
        than the projectile can fly. At exactly the projectile speed the
        shot matches the crossing motion and never closes.
    """
    line_of_fire = target - attacker
    baseline = line_of_fire.magnitude
    if baseline == 0:
        return None

    direction = line_of_fire / baseline
    closing_component = target_velocity.dot(direction)
    crossing = target_velocity - direction * closing_component

    crossing_speed_sq = crossing.magnitude_squared
    if crossing_speed_sq > shot_speed * shot_speed:
        return None

    along_speed = math.sqrt(shot_speed * shot_speed - crossing_speed_sq)
    velocity = direction * along_speed + crossing

    closing_rate = along_speed - closing_component
    time_to_intercept = baseline / closing_rate if closing_rate > 0 else math.inf

    return InterceptSolution(
        velocity=velocity,
        bearing=heading_degrees(velocity),
        time_to_intercept=time_to_intercept,
    )


# =============================================================================
# CHARGING AND READINESS
# =============================================================================

def charge_weapon(dt: float, klingon: Klingon, ship: Ship, config: KlingonConfig) -> Klingon:
    """Charge weapons while the ship is within kinetic firing distance."""
    if klingon.position.distance_to(ship.position) < config.kinetic_firing_distance:
        klingon.weapon_charge += dt * klingon.shield_efficiency(config)
    return klingon


def ready_to_fire_phaser(klingon: Klingon, ship: Ship, config: KlingonConfig) -> bool:
    """Phaser needs range, antimatter above its cost, and a full phaser charge."""
    return (
        klingon.position.distance_to(ship.position) < config.phaser_firing_distance
        and klingon.antimatter > config.phaser_power
        and klingon.weapon_charge >= config.phaser_threshold
    )


def ready_to_fire_kinetic(klingon: Klingon, config: KlingonConfig) -> bool:
    """Kinetics need antimatter above their cost, rounds left, and a full kinetic charge."""
    return (
        klingon.antimatter > config.kinetic_power
        and klingon.kinetics > 0
        and klingon.weapon_charge >= config.kinetic_threshold
    )


# =============================================================================
# FIRING
# =============================================================================

def _aim(klingon: Klingon, ship: Ship, speed: float, kind: ShotKind) -> Optional[Shot]:
    solution = firing_solution(klingon.position, ship.position, ship.velocity, speed)
    if solution is None:
        logger.warning(
            f"No firing solution for {kind.value} from "
            f"({klingon.x:.1f}, {klingon.y:.1f}); holding fire"
        )
        return None
    return Shot.launch(klingon.position, solution.bearing, speed, kind)


def phaser_shot(klingon: Klingon, ship: Ship, config: KlingonConfig) -> Optional[Shot]:
    return _aim(klingon, ship, config.phaser_velocity, ShotKind.KLINGON_PHASER)


def kinetic_shot(klingon: Klingon, ship: Ship, config: KlingonConfig) -> Optional[Shot]:
    return _aim(klingon, ship, config.kinetic_velocity, ShotKind.KLINGON_KINETIC)


def apply_phaser_costs(klingon: Klingon, config: KlingonConfig) -> Klingon:
    klingon.weapon_charge -= config.phaser_threshold
    klingon.antimatter -= config.phaser_power
    return klingon


def apply_kinetic_costs(klingon: Klingon, config: KlingonConfig) -> Klingon:
    klingon.weapon_charge -= config.kinetic_threshold
    klingon.kinetics -= 1
    klingon.antimatter -= config.kinetic_power
    return klingon


def fire_charged_weapon(klingon: Klingon, ship: Ship, config: KlingonConfig) -> Optional[Shot]:
    """
    Fire at most one weapon, phaser before kinetic.

    Costs are only paid when a shot actually leaves the tube. A ready
    weapon without a firing solution holds fire for this tick.

    Returns:
        The launched Shot, or None.
    """
    if ready_to_fire_phaser(klingon, ship, config):
        shot = phaser_shot(klingon, ship, config)
        if shot is not None:
            apply_phaser_costs(klingon, config)
        return shot
    if ready_to_fire_kinetic(klingon, config):
        shot = kinetic_shot(klingon, ship, config)
        if shot is not None:
            apply_kinetic_costs(klingon, config)
        return shot
    return None


def klingon_offense(dt: float, world: World, config: KlingonConfig) -> World:
    """
    Run the offense pass: charge every klingon, then fire whatever is ready.

    Does nothing once the game is over.
    """
    if world.game_over:
        return world

    ship = world.ship
    new_shots: list[Shot] = []
    for klingon in world.klingons:
        charge_weapon(dt, klingon, ship, config)
        shot = fire_charged_weapon(klingon, ship, config)
        if shot is not None:
            logger.debug(
                f"Klingon at ({klingon.x:.1f}, {klingon.y:.1f}) fired "
                f"{shot.kind.value} on bearing {shot.bearing:.1f}"
            )
            new_shots.append(shot)

    world.shots.extend(new_shots)
    return world
