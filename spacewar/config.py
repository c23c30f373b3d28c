"""
Klingon tuning configuration.

Every gameplay constant used by the defense, offense and motion passes lives
on one ``KlingonConfig`` value that is passed into each computation, so tests
and scenarios can run with non-default tuning.

Times are in seconds, distances in world units, rates per second.
"""

import json
from dataclasses import dataclass, asdict, fields
from typing import Dict, Any
from pathlib import Path


@dataclass
class KlingonConfig:
    """Tunable constants for the klingon population."""
    # Population and play area
    number_of_klingons: int = 20
    known_space_x: float = 100_000.0
    known_space_y: float = 100_000.0

    # Unit maxima
    klingon_shields: float = 200.0
    klingon_antimatter: float = 1_000.0
    klingon_kinetics: int = 20
    initial_speed: float = 2.0  # per-axis bound on the random starting velocity

    # Shields
    shield_recharge_rate: float = 5.0  # shield points per second
    shield_recharge_cost: float = 2.0  # antimatter per shield point

    # Incoming phaser fire (player weapon)
    phaser_damage: float = 100.0
    phaser_range: float = 10_000.0

    # Klingon phaser
    phaser_threshold: float = 3.0
    phaser_power: float = 50.0
    phaser_velocity: float = 400.0
    phaser_firing_distance: float = 6_000.0

    # Klingon kinetics
    kinetic_threshold: float = 2.0
    kinetic_power: float = 20.0
    kinetic_velocity: float = 250.0
    kinetic_firing_distance: float = 10_000.0

    # Maneuvering
    evasion_limit: float = 1_500.0
    tactical_range: float = 8_000.0
    antimatter_runaway_threshold: float = 200.0
    thrust: float = 40.0
    drag: float = 0.5  # fraction of velocity kept per second

    def __post_init__(self) -> None:
        if self.number_of_klingons < 0:
            raise ValueError("number_of_klingons must be non-negative")
        for name in ("known_space_x", "known_space_y", "klingon_shields",
                     "shield_recharge_cost", "phaser_range",
                     "phaser_velocity", "kinetic_velocity"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.tactical_range <= self.evasion_limit:
            raise ValueError(
                f"tactical_range ({self.tactical_range}) must exceed "
                f"evasion_limit ({self.evasion_limit})"
            )
        if not 0 < self.drag <= 1:
            raise ValueError(f"drag must be in (0, 1], got {self.drag}")

    @classmethod
    def from_json(cls, path: str) -> 'KlingonConfig':
        """Load configuration from JSON file."""
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Klingon config not found: {path}")

        with open(config_path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'KlingonConfig':
        """Create configuration from dictionary; missing keys keep their defaults."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown klingon config keys: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return asdict(self)
