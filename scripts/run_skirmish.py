#!/usr/bin/env python3
"""
Run a seeded klingon skirmish against a drifting player ship.

The ship holds a constant velocity and periodically lands phaser hits on
the nearest klingon so destruction and shield recharge get exercised.
Prints a summary of shots fired, klingons lost and surviving shield levels.
"""

import sys
from pathlib import Path

# Add project root to path for proper imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import argparse

import numpy as np

from spacewar import (
    Hit,
    KlingonConfig,
    KlingonSimulation,
    Ship,
    ShotKind,
    SimulationEventType,
    Vector2D,
)


DEFAULT_CONFIG_PATH = project_root / "data" / "klingon_config.json"


def nearest_klingon(sim: KlingonSimulation):
    ship_pos = sim.world.ship.position
    return min(
        sim.world.klingons,
        key=lambda k: k.position.distance_to(ship_pos),
        default=None,
    )


def main():
    parser = argparse.ArgumentParser(description="Run a klingon skirmish")
    parser.add_argument("--config", default=str(DEFAULT_CONFIG_PATH),
                        help="Klingon tuning JSON file")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--duration", type=float, default=120.0,
                        help="Simulated seconds")
    parser.add_argument("--time-step", type=float, default=0.1,
                        help="Tick duration in seconds")
    parser.add_argument("--klingons", type=int, default=None,
                        help="Override the number of klingons")
    parser.add_argument("--hit-interval", type=int, default=20,
                        help="Ticks between player phaser hits (0 disables)")
    args = parser.parse_args()

    config = KlingonConfig.from_json(args.config)
    if args.klingons is not None:
        data = config.to_dict()
        data["number_of_klingons"] = args.klingons
        config = KlingonConfig.from_dict(data)

    center = Vector2D(config.known_space_x / 2, config.known_space_y / 2)
    ship = Ship(position=center, velocity=Vector2D(15.0, -5.0))
    sim = KlingonSimulation(config, ship, time_step=args.time_step, seed=args.seed)

    print(f"Skirmish: {sim.klingons_remaining} klingons, {args.duration:.0f}s, seed {args.seed}")

    total_ticks = round(args.duration / args.time_step)
    while sim.tick_count < total_ticks and sim.klingons_remaining:
        ship = sim.world.ship
        sim.set_ship(Ship(
            position=ship.position + ship.velocity * sim.time_step,
            velocity=ship.velocity,
        ))
        if args.hit_interval and sim.tick_count % args.hit_interval == 0:
            target = nearest_klingon(sim)
            if target is not None:
                distance = target.position.distance_to(sim.world.ship.position)
                target.hit = Hit.phaser([distance])
        for event in sim.step():
            if event.event_type == SimulationEventType.KLINGON_DESTROYED:
                print(f"  {event}  at {event.data['position'][0]:.0f}, {event.data['position'][1]:.0f}")

    shots = sim.world.shots
    phasers = sum(1 for s in shots if s.kind == ShotKind.KLINGON_PHASER)
    kinetics = sum(1 for s in shots if s.kind == ShotKind.KLINGON_KINETIC)
    shields = np.array([k.shields for k in sim.world.klingons], dtype=float)

    print("=" * 60)
    print(f"Ticks:              {sim.tick_count}")
    print(f"Klingons destroyed: {len(sim.world.explosions)}")
    print(f"Klingons remaining: {sim.klingons_remaining}")
    print(f"Phaser shots:       {phasers}")
    print(f"Kinetic shots:      {kinetics}")
    if shields.size:
        print(f"Shields mean/min:   {shields.mean():.1f} / {shields.min():.1f}")


if __name__ == "__main__":
    main()
