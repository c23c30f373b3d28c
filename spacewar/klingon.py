#!/usr/bin/env python3
"""
Klingon Entity Model for the Spacewar Combat Core.

Defines the hostile unit record and the incoming-hit inbox it carries:
- WeaponKind: the player weapon that produced a hit
- DamageAmount / PhaserRanges: the two damage payload variants
- Hit: weapon kind plus matching payload, deposited by the collision code
- Klingon: one hostile unit
- create_random_klingon / initialize: batch creation at world start
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .config import KlingonConfig
from .physics import Vector2D


# =============================================================================
# HITS
# =============================================================================

class WeaponKind(Enum):
    """Player weapons that can strike a klingon."""
    PHASER = "phaser"
    TORPEDO = "torpedo"
    KINETIC = "kinetic"


@dataclass(frozen=True)
class DamageAmount:
    """Scalar damage payload (torpedo and kinetic hits)."""
    amount: float


@dataclass(frozen=True)
class PhaserRanges:
    """Phaser payload: the range of each beam that connected."""
    ranges: tuple[float, ...]


DamagePayload = Union[DamageAmount, PhaserRanges]

_PAYLOAD_FOR_WEAPON = {
    WeaponKind.PHASER: PhaserRanges,
    WeaponKind.TORPEDO: DamageAmount,
    WeaponKind.KINETIC: DamageAmount,
}


@dataclass(frozen=True)
class Hit:
    """
    An incoming damage event waiting in a klingon's single-slot inbox.

    Attributes:
        weapon: Which player weapon produced the hit.
        damage: DamageAmount for torpedoes and kinetics, PhaserRanges for phasers.
    """
    weapon: WeaponKind
    damage: DamagePayload

    def __post_init__(self) -> None:
        expected = _PAYLOAD_FOR_WEAPON.get(self.weapon)
        if expected is None:
            raise ValueError(f"Unknown weapon kind: {self.weapon!r}")
        if not isinstance(self.damage, expected):
            raise ValueError(
                f"{self.weapon.value} hit needs a {expected.__name__} payload, "
                f"got {type(self.damage).__name__}"
            )

    @classmethod
    def phaser(cls, ranges) -> Hit:
        """Phaser hit from the range of every beam that struck."""
        return cls(WeaponKind.PHASER, PhaserRanges(tuple(float(r) for r in ranges)))

    @classmethod
    def torpedo(cls, amount: float) -> Hit:
        return cls(WeaponKind.TORPEDO, DamageAmount(float(amount)))

    @classmethod
    def kinetic(cls, amount: float) -> Hit:
        return cls(WeaponKind.KINETIC, DamageAmount(float(amount)))


# =============================================================================
# KLINGON
# =============================================================================

@dataclass
class Klingon:
    """
    One hostile unit.

    Attributes:
        position: World coordinates.
        shields: Current shields; destroyed once below zero.
        antimatter: Shared reserve for shield recharge, weapons and (as a cap) thrust.
        kinetics: Remaining kinetic rounds.
        weapon_charge: Accumulator gating weapon readiness.
        velocity: Current velocity.
        thrust: Thrust vector chosen this tick.
        hit: Pending incoming hit, cleared by the defense pass.
    """
    position: Vector2D
    shields: float
    antimatter: float
    kinetics: int
    weapon_charge: float = 0.0
    velocity: Vector2D = field(default_factory=Vector2D.zero)
    thrust: Vector2D = field(default_factory=Vector2D.zero)
    hit: Optional[Hit] = None

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def shield_efficiency(self, config: KlingonConfig) -> float:
        """Current shields as a fraction of the configured maximum."""
        return self.shields / config.klingon_shields


def create_random_klingon(
    config: KlingonConfig,
    rng: Optional[random.Random] = None
) -> Klingon:
    """
    Create a fully powered klingon at a random spot in known space.

    Args:
        config: Tuning constants (bounds and maxima).
        rng: Random source; the module-level generator when omitted.

    Returns:
        A Klingon with full shields, antimatter and kinetics, no weapon
        charge, zero thrust and a small random drift velocity.
    """
    rng = rng or random
    speed = config.initial_speed
    return Klingon(
        position=Vector2D(
            rng.uniform(0.0, config.known_space_x),
            rng.uniform(0.0, config.known_space_y),
        ),
        shields=config.klingon_shields,
        antimatter=config.klingon_antimatter,
        kinetics=config.klingon_kinetics,
        weapon_charge=0.0,
        velocity=Vector2D(rng.uniform(-speed, speed), rng.uniform(-speed, speed)),
        thrust=Vector2D.zero(),
    )


def initialize(
    config: KlingonConfig,
    count: Optional[int] = None,
    rng: Optional[random.Random] = None
) -> list[Klingon]:
    """Create ``count`` (default ``config.number_of_klingons``) independent klingons."""
    if count is None:
        count = config.number_of_klingons
    return [create_random_klingon(config, rng) for _ in range(count)]


def validate_klingon(klingon: Klingon) -> None:
    """
    Check a klingon record's structure.

    Raises:
        ValueError: If a numeric field is not a finite number, kinetics is
            not integral, or the hit slot holds something other than a Hit.
    """
    for name in ("shields", "antimatter", "weapon_charge"):
        value = getattr(klingon, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"klingon {name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise ValueError(f"klingon {name} must be finite, got {value!r}")
    if isinstance(klingon.kinetics, bool) or not isinstance(klingon.kinetics, int):
        raise ValueError(f"klingon kinetics must be an integer, got {klingon.kinetics!r}")
    for name in ("position", "velocity", "thrust"):
        vector = getattr(klingon, name)
        if not isinstance(vector, Vector2D) or not vector.is_finite():
            raise ValueError(f"klingon {name} must be a finite Vector2D, got {vector!r}")
    if klingon.hit is not None and not isinstance(klingon.hit, Hit):
        raise ValueError(f"klingon hit must be a Hit, got {klingon.hit!r}")
