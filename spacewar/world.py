"""
World snapshot threaded through the klingon passes.

The klingon passes own ``klingons``, append to ``shots`` and ``explosions``,
and only ever read ``ship`` and ``game_over``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .klingon import Klingon
from .physics import Vector2D
from .projectile import Shot


@dataclass(frozen=True)
class Ship:
    """Read-only snapshot of the player ship."""
    position: Vector2D
    velocity: Vector2D = field(default_factory=Vector2D.zero)


@dataclass
class Explosion:
    """
    Explosion request for the particle subsystem.

    Attributes:
        kind: What blew up ("klingon").
        item: Last known state of the destroyed object.
    """
    kind: str
    item: Any

    @property
    def position(self) -> Vector2D:
        return self.item.position


@dataclass
class World:
    """Everything one tick reads or writes."""
    ship: Ship
    klingons: list[Klingon] = field(default_factory=list)
    shots: list[Shot] = field(default_factory=list)
    explosions: list[Explosion] = field(default_factory=list)
    game_over: bool = False
