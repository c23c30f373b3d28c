"""Spacewar klingon combat core."""

from .config import KlingonConfig

from .klingon import (
    WeaponKind,
    DamageAmount,
    PhaserRanges,
    Hit,
    Klingon,
    create_random_klingon,
    initialize,
    validate_klingon,
)

from .physics import Vector2D

from .projectile import Shot, ShotKind

from .world import Explosion, Ship, World

from .defense import klingon_defense
from .firecontrol import InterceptSolution, firing_solution, klingon_offense
from .maneuvers import evasion_angle, klingon_motion

from .simulation import (
    KlingonSimulation,
    SimulationEvent,
    SimulationEventType,
    update_klingons,
)

__all__ = [
    # Configuration
    "KlingonConfig",
    # Entity model
    "WeaponKind",
    "DamageAmount",
    "PhaserRanges",
    "Hit",
    "Klingon",
    "create_random_klingon",
    "initialize",
    "validate_klingon",
    # Physics
    "Vector2D",
    # World
    "Shot",
    "ShotKind",
    "Explosion",
    "Ship",
    "World",
    # Passes
    "klingon_defense",
    "InterceptSolution",
    "firing_solution",
    "klingon_offense",
    "evasion_angle",
    "klingon_motion",
    # Simulation
    "KlingonSimulation",
    "SimulationEvent",
    "SimulationEventType",
    "update_klingons",
]
