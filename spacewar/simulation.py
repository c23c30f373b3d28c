#!/usr/bin/env python3
"""
Klingon Simulation Driver for the Spacewar Combat Core.

Runs the per-tick klingon pipeline in its fixed order:

    defense (hits, destruction, shield recharge)
      -> offense (charging, firing)
        -> motion (thrust, integration, drag)

``update_klingons`` is the single-tick transform; ``KlingonSimulation``
wraps it with a clock, a seeded population and an event log.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional

from loguru import logger

from .config import KlingonConfig
from .defense import klingon_defense
from .firecontrol import klingon_offense
from .klingon import initialize
from .maneuvers import klingon_motion
from .world import Ship, World


# =============================================================================
# SIMULATION CONSTANTS
# =============================================================================

DEFAULT_TIME_STEP = 0.1  # seconds


# =============================================================================
# PIPELINE
# =============================================================================

def update_klingons(dt: float, world: World, config: KlingonConfig) -> World:
    """
    Advance every klingon by one tick.

    Args:
        dt: Elapsed time; must be finite and non-negative.
        world: Snapshot to update in place.
        config: Tuning constants.

    Returns:
        The updated world.

    Raises:
        ValueError: If ``dt`` is negative or not finite.
    """
    if not math.isfinite(dt) or dt < 0:
        raise ValueError(f"Tick duration must be finite and non-negative, got {dt}")
    world = klingon_defense(dt, world, config)
    world = klingon_offense(dt, world, config)
    world = klingon_motion(dt, world, config)
    return world


# =============================================================================
# EVENTS
# =============================================================================

class SimulationEventType(Enum):
    """Types of events that can occur during simulation."""
    SIMULATION_STARTED = auto()
    SIMULATION_ENDED = auto()
    KLINGON_DESTROYED = auto()
    SHOT_FIRED = auto()


@dataclass
class SimulationEvent:
    """
    An event that occurs during simulation.

    Attributes:
        event_type: The type of event.
        timestamp: Simulation time when event occurred (seconds).
        data: Additional event-specific data.
    """
    event_type: SimulationEventType
    timestamp: float
    data: dict = field(default_factory=dict)

    def __str__(self) -> str:
        return f"T+{self.timestamp:.1f}s {self.event_type.name}"


# =============================================================================
# DRIVER
# =============================================================================

class KlingonSimulation:
    """
    Tick-driven klingon simulation against a player ship.

    Usage:
        sim = KlingonSimulation(config, Ship(Vector2D(5000, 5000)), seed=7)
        sim.add_event_callback(print)
        sim.run(duration=60.0)

    Attributes:
        config: Tuning constants.
        world: Current snapshot.
        time_step: Tick duration in seconds.
        current_time: Simulation time elapsed.
        tick_count: Ticks executed so far.
        events: Every event logged so far.
    """

    def __init__(
        self,
        config: KlingonConfig,
        ship: Ship,
        time_step: float = DEFAULT_TIME_STEP,
        seed: Optional[int] = None,
        world: Optional[World] = None
    ) -> None:
        """
        Initialize the simulation.

        Args:
            config: Tuning constants.
            ship: Player ship snapshot.
            time_step: Tick duration in seconds.
            seed: Random seed for the initial population.
            world: Pre-built world; a fresh population is created when omitted.
        """
        if time_step <= 0:
            raise ValueError(f"time_step must be positive, got {time_step}")
        self.config = config
        self.time_step = time_step
        self.rng = random.Random(seed)
        if world is None:
            world = World(ship=ship, klingons=initialize(config, rng=self.rng))
        self.world = world
        self.current_time: float = 0.0
        self.tick_count: int = 0
        self.events: list[SimulationEvent] = []
        self._event_callbacks: list[Callable[[SimulationEvent], None]] = []
        self._running = False

    @property
    def klingons_remaining(self) -> int:
        return len(self.world.klingons)

    def set_ship(self, ship: Ship) -> None:
        """Replace the player ship snapshot before the next tick."""
        self.world.ship = ship

    def step(self) -> list[SimulationEvent]:
        """
        Execute a single tick.

        Returns:
            List of events that occurred during this tick.
        """
        shots_before = len(self.world.shots)
        explosions_before = len(self.world.explosions)

        self.world = update_klingons(self.time_step, self.world, self.config)
        self.current_time += self.time_step
        self.tick_count += 1

        step_events = []
        for explosion in self.world.explosions[explosions_before:]:
            step_events.append(self._log_event(
                SimulationEventType.KLINGON_DESTROYED,
                data={'position': explosion.position.to_tuple()}
            ))
        for shot in self.world.shots[shots_before:]:
            step_events.append(self._log_event(
                SimulationEventType.SHOT_FIRED,
                data={'kind': shot.kind.value, 'bearing': shot.bearing}
            ))
        return step_events

    def run(self, duration: float) -> None:
        """
        Run for ``duration`` seconds, or until stopped or every klingon is gone.
        """
        self._running = True
        self._log_event(SimulationEventType.SIMULATION_STARTED, data={
            'klingons': self.klingons_remaining
        })
        logger.info(f"Klingon simulation started with {self.klingons_remaining} klingons")

        # Counted in ticks; summing float steps drifts past the end
        last_tick = self.tick_count + round(duration / self.time_step)
        while self._running and self.tick_count < last_tick and self.world.klingons:
            self.step()

        self._running = False
        self._log_event(SimulationEventType.SIMULATION_ENDED, data={
            'duration': self.current_time,
            'ticks': self.tick_count,
            'klingons_remaining': self.klingons_remaining,
            'shots_fired': len(self.world.shots),
        })
        logger.info(
            f"Klingon simulation ended at T+{self.current_time:.1f}s: "
            f"{self.klingons_remaining} klingons, {len(self.world.shots)} shots"
        )

    def stop(self) -> None:
        """Stop the simulation."""
        self._running = False

    # -------------------------------------------------------------------------
    # Event Logging
    # -------------------------------------------------------------------------

    def add_event_callback(self, callback: Callable[[SimulationEvent], None]) -> None:
        """
        Register a callback to be called for each simulation event.

        Args:
            callback: Function that takes a SimulationEvent.
        """
        self._event_callbacks.append(callback)

    def remove_event_callback(self, callback: Callable[[SimulationEvent], None]) -> None:
        """Remove an event callback."""
        if callback in self._event_callbacks:
            self._event_callbacks.remove(callback)

    def _log_event(
        self,
        event_type: SimulationEventType,
        data: Optional[dict] = None
    ) -> SimulationEvent:
        """Log a simulation event and notify callbacks."""
        event = SimulationEvent(
            event_type=event_type,
            timestamp=self.current_time,
            data=data or {}
        )
        self.events.append(event)
        for callback in self._event_callbacks:
            callback(event)
        return event
