#!/usr/bin/env python3
"""
Klingon Defense Pass.

Resolves the hits deposited on each klingon since the last tick, removes
klingons whose shields went negative (one explosion each), and recharges
the survivors' shields from their antimatter reserve.

Phaser damage falls off linearly with beam range and is deliberately not
floored: a beam that travelled further than ``phaser_range`` contributes
negative damage.
"""

from __future__ import annotations

from typing import Iterable

from loguru import logger

from .config import KlingonConfig
from .klingon import Hit, Klingon, WeaponKind
from .world import Explosion, World


EXPLOSION_KIND = "klingon"


# =============================================================================
# DAMAGE
# =============================================================================

def damage_by_phasers(ranges: Iterable[float], config: KlingonConfig) -> float:
    """
    Total damage from a volley of phaser beams.

    Each beam contributes ``phaser_damage * (1 - range / phaser_range)``.

    Args:
        ranges: Range at which each beam struck.
        config: Tuning constants.

    Returns:
        Summed damage (may be negative for over-range beams).
    """
    return sum(
        config.phaser_damage * (1 - r / config.phaser_range)
        for r in ranges
    )


def hit_damage(hit: Hit, config: KlingonConfig) -> float:
    """
    Damage a hit inflicts.

    Raises:
        ValueError: If the weapon kind is not one the defense pass knows.
    """
    if hit.weapon in (WeaponKind.TORPEDO, WeaponKind.KINETIC):
        return hit.damage.amount
    if hit.weapon == WeaponKind.PHASER:
        return damage_by_phasers(hit.damage.ranges, config)
    raise ValueError(f"Unknown weapon kind in hit: {hit.weapon!r}")


def hit_klingon(klingon: Klingon, config: KlingonConfig) -> Klingon:
    """Apply the pending hit (if any) to shields and empty the hit slot."""
    if klingon.hit is not None:
        klingon.shields -= hit_damage(klingon.hit, config)
    klingon.hit = None
    return klingon


# =============================================================================
# SHIELDS
# =============================================================================

def recharge_shield(dt: float, klingon: Klingon, config: KlingonConfig) -> Klingon:
    """
    Recharge shields, paying for each point with antimatter.

    The recharge is the smallest of the shield deficit, what the recharge
    rate allows in ``dt``, and what the antimatter reserve can pay for, so
    shields never exceed the maximum and antimatter never goes negative.
    """
    shield_deficit = config.klingon_shields - klingon.shields
    max_charge = dt * config.shield_recharge_rate
    affordable = klingon.antimatter / config.shield_recharge_cost
    charge = min(shield_deficit, max_charge, affordable)
    klingon.antimatter -= charge * config.shield_recharge_cost
    klingon.shields += charge
    return klingon


def klingon_destruction(dead: Iterable[Klingon]) -> list[Explosion]:
    """One explosion per destroyed klingon."""
    return [Explosion(EXPLOSION_KIND, klingon) for klingon in dead]


# =============================================================================
# PASS
# =============================================================================

def klingon_defense(dt: float, world: World, config: KlingonConfig) -> World:
    """
    Run the defense pass over every klingon.

    Args:
        dt: Elapsed time for this tick.
        world: Snapshot to update; its klingon list is replaced.
        config: Tuning constants.

    Returns:
        The same world, with survivors recharged and casualties moved to
        the explosion list.
    """
    klingons = [hit_klingon(k, config) for k in world.klingons]
    dead = [k for k in klingons if k.shields < 0]
    alive = [k for k in klingons if k.shields >= 0]

    for klingon in dead:
        logger.debug(
            f"Klingon destroyed at ({klingon.x:.1f}, {klingon.y:.1f}), "
            f"shields {klingon.shields:.2f}"
        )

    world.klingons = [recharge_shield(dt, k, config) for k in alive]
    world.explosions.extend(klingon_destruction(dead))
    return world
