#!/usr/bin/env python3
"""
Projectile Records for the Spacewar Combat Core

Klingon shots are handed to the projectile subsystem at launch and never
touched again by this package. A shot carries:
- Its launch position (the firing klingon's position)
- Its bearing in degrees and the matching launch velocity vector
- A kind tag telling the projectile subsystem how to fly and score it
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .physics import Vector2D, from_angular


class ShotKind(Enum):
    """Projectile tags produced by klingons."""
    KLINGON_PHASER = "klingon-phaser"
    KLINGON_KINETIC = "klingon-kinetic"


@dataclass
class Shot:
    """
    A projectile launched by a klingon.

    Attributes:
        position: Launch position in world coordinates.
        bearing: Launch heading in degrees.
        velocity: Launch velocity vector (speed along ``bearing``).
        kind: Projectile tag.
    """
    position: Vector2D
    bearing: float
    velocity: Vector2D
    kind: ShotKind

    @property
    def speed(self) -> float:
        """Launch speed."""
        return self.velocity.magnitude

    @classmethod
    def launch(cls, position: Vector2D, bearing: float, speed: float, kind: ShotKind) -> Shot:
        """Build a shot flying at ``speed`` along ``bearing``."""
        return cls(
            position=Vector2D(position.x, position.y),
            bearing=bearing,
            velocity=from_angular(speed, bearing),
            kind=kind,
        )
