"""
Tests for klingon maneuvering.

Tests cover:
- Evasion angle interpolation across the engagement envelope
- Tactical heading selection (pursue, strafe, break off, run away)
- Thrust magnitude and disengagement
- Integration and drag in the motion pass
"""

import pytest
from numpy.testing import assert_allclose

from spacewar.config import KlingonConfig
from spacewar.klingon import Klingon
from spacewar.maneuvers import (
    evasion_angle,
    tactical_heading,
    effective_thrust,
    thrust_if_close,
    accelerate_klingon,
    move_klingon,
    calc_drag,
    drag_klingon,
    klingon_motion,
)
from spacewar.physics import Vector2D
from spacewar.world import Ship, World


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def config():
    return KlingonConfig(
        klingon_shields=100.0,
        klingon_antimatter=1000.0,
        tactical_range=500.0,
        evasion_limit=100.0,
        antimatter_runaway_threshold=200.0,
        thrust=10.0,
        drag=0.5,
    )


@pytest.fixture
def ship():
    return Ship(position=Vector2D(0.0, 0.0))


def make_klingon(x=300.0, y=0.0, shields=100.0, antimatter=1000.0, velocity=None):
    return Klingon(
        position=Vector2D(x, y),
        shields=shields,
        antimatter=antimatter,
        kinetics=5,
        velocity=velocity or Vector2D(0.0, 0.0),
    )


# =============================================================================
# EVASION ANGLE TESTS
# =============================================================================

class TestEvasionAngle:
    def test_boundaries(self, config):
        assert evasion_angle(500.0, config) == 0.0
        assert evasion_angle(100.0, config) == 90.0

    def test_midpoint(self, config):
        assert evasion_angle(300.0, config) == pytest.approx(45.0)

    def test_clamped_outside_envelope(self, config):
        assert evasion_angle(10_000.0, config) == 0.0
        assert evasion_angle(0.0, config) == 90.0

    def test_monotonic(self, config):
        distances = [600, 500, 450, 400, 300, 200, 150, 100, 50]
        angles = [evasion_angle(d, config) for d in distances]
        assert angles == sorted(angles)


# =============================================================================
# HEADING AND THRUST TESTS
# =============================================================================

class TestTacticalHeading:
    def test_graduated_pursuit(self, config, ship):
        # Bearing to the ship is 180; 45 degrees of evasion at 300
        assert tactical_heading(make_klingon(x=300.0), ship, config) == pytest.approx(225.0)

    def test_pure_pursuit_at_tactical_range(self, config, ship):
        assert tactical_heading(make_klingon(x=0.0, y=500.0), ship, config) == pytest.approx(270.0)

    def test_break_off_inside_evasion_limit(self, config, ship):
        assert tactical_heading(make_klingon(x=50.0), ship, config) == pytest.approx(270.0)

    def test_break_off_beats_runaway(self, config, ship):
        k = make_klingon(x=50.0, antimatter=10.0)
        assert tactical_heading(k, ship, config) == pytest.approx(270.0)

    def test_runaway_when_low_on_antimatter(self, config, ship):
        k = make_klingon(x=300.0, antimatter=100.0)
        assert tactical_heading(k, ship, config) == pytest.approx(360.0)

    def test_coincident_positions(self, config, ship):
        assert tactical_heading(make_klingon(x=0.0), ship, config) == pytest.approx(90.0)


class TestThrust:
    def test_scaled_by_shields(self, config):
        assert effective_thrust(make_klingon(shields=50.0), config) == pytest.approx(5.0)

    def test_capped_by_antimatter(self, config):
        assert effective_thrust(make_klingon(antimatter=3.0), config) == pytest.approx(3.0)

    def test_pursuit_thrust_vector(self, config, ship):
        k = thrust_if_close(ship, make_klingon(x=500.0), config)
        assert_allclose(k.thrust.to_tuple(), (-10.0, 0.0), atol=1e-9)

    def test_disengaged_beyond_tactical_range(self, config, ship):
        k = thrust_if_close(ship, make_klingon(x=500.1), config)
        assert k.thrust == Vector2D(0.0, 0.0)

    def test_thrust_does_not_spend_antimatter(self, config, ship):
        k = thrust_if_close(ship, make_klingon(x=300.0, antimatter=500.0), config)
        assert k.thrust.magnitude == pytest.approx(10.0)
        assert k.antimatter == 500.0


# =============================================================================
# KINEMATICS TESTS
# =============================================================================

class TestKinematics:
    def test_accelerate(self):
        k = make_klingon(velocity=Vector2D(1.0, 1.0))
        k.thrust = Vector2D(2.0, -4.0)
        accelerate_klingon(0.5, k)
        assert k.velocity == Vector2D(2.0, -1.0)

    def test_move(self):
        k = make_klingon(x=10.0, y=10.0, velocity=Vector2D(4.0, -2.0))
        move_klingon(0.25, k)
        assert k.position == Vector2D(11.0, 9.5)

    def test_calc_drag(self, config):
        assert calc_drag(1.0, config) == pytest.approx(0.5)
        assert calc_drag(2.0, config) == pytest.approx(0.25)

    @pytest.mark.parametrize("dt", [0.01, 0.5, 1.0, 2.5])
    def test_drag_split_equals_whole(self, config, dt):
        whole = drag_klingon(dt, make_klingon(velocity=Vector2D(8.0, -3.0)), config)
        split = make_klingon(velocity=Vector2D(8.0, -3.0))
        drag_klingon(dt / 2, split, config)
        drag_klingon(dt / 2, split, config)
        assert_allclose(split.velocity.to_tuple(), whole.velocity.to_tuple(), rtol=1e-12)


class TestKlingonMotion:
    def test_full_step(self, config, ship):
        k = make_klingon(x=500.0, velocity=Vector2D(0.0, 2.0))
        world = klingon_motion(1.0, World(ship=ship, klingons=[k]), config)
        moved = world.klingons[0]
        # thrust (-10, 0); v = (-10, 2); p = (490, 2); drag halves v
        assert_allclose(moved.position.to_tuple(), (490.0, 2.0), atol=1e-9)
        assert_allclose(moved.velocity.to_tuple(), (-5.0, 1.0), atol=1e-9)

    def test_coasting_klingon_out_of_range(self, config, ship):
        k = make_klingon(x=10_000.0, velocity=Vector2D(4.0, 0.0))
        world = klingon_motion(1.0, World(ship=ship, klingons=[k]), config)
        assert world.klingons[0].position == Vector2D(10_004.0, 0.0)
        assert world.klingons[0].velocity == Vector2D(2.0, 0.0)

    def test_zero_dt_changes_nothing(self, config, ship):
        k = make_klingon(x=300.0, velocity=Vector2D(3.0, -1.0))
        world = klingon_motion(0.0, World(ship=ship, klingons=[k]), config)
        assert world.klingons[0].position == Vector2D(300.0, 0.0)
        assert world.klingons[0].velocity == Vector2D(3.0, -1.0)

    def test_motion_ignores_game_over(self, config, ship):
        k = make_klingon(x=10_000.0, velocity=Vector2D(4.0, 0.0))
        world = klingon_motion(1.0, World(ship=ship, klingons=[k], game_over=True), config)
        assert world.klingons[0].position == Vector2D(10_004.0, 0.0)
