from __future__ import annotations

import pytest

from physics import BirdPhysics, GravityPhase
from settings import (
    AUTO_FLAP_INTERVAL,
    AUTO_FLAP_RATIO,
    FLAP,
    GRAVITY,
    INITIAL_GRAVITY,
    INITIAL_GRAVITY_DURATION,
    SCREEN_HEIGHT,
)


def test_reset_centers_bird_and_starts_grace_window() -> None:
    physics = BirdPhysics()
    physics.bird.y = 10.0
    physics.bird.vy = 3.0
    physics.reset()

    assert physics.bird.y == SCREEN_HEIGHT / 2
    assert physics.bird.vy == 0.0
    assert physics.in_grace_window
    assert physics.grace_ticks == INITIAL_GRAVITY_DURATION


def test_grace_window_uses_initial_gravity_then_normal() -> None:
    physics = BirdPhysics()
    for _ in range(INITIAL_GRAVITY_DURATION):
        before = physics.bird.vy
        physics.step()
        assert physics.bird.vy == pytest.approx(before + INITIAL_GRAVITY)
        assert physics.bird.gravity_phase is GravityPhase.INITIAL

    assert not physics.in_grace_window
    for _ in range(10):
        before = physics.bird.vy
        physics.step()
        assert physics.bird.vy == pytest.approx(before + GRAVITY)
        assert physics.bird.gravity_phase is GravityPhase.NORMAL


def test_velocity_is_applied_after_gravity() -> None:
    physics = BirdPhysics()
    y0 = physics.bird.y
    physics.step()
    assert physics.bird.y == pytest.approx(y0 + INITIAL_GRAVITY)


@pytest.mark.parametrize("grace_ticks", [INITIAL_GRAVITY_DURATION, 0])
def test_manual_flap_overrides_velocity(grace_ticks: int) -> None:
    physics = BirdPhysics()
    physics.grace_ticks = grace_ticks
    physics.bird.vy = 7.5
    physics.input.auto_flap_timer = 11

    physics.flap()

    assert physics.bird.vy == FLAP
    assert physics.input.space_held
    assert physics.input.auto_flap_timer == 0


def test_auto_flap_fires_at_interval_when_held_after_grace() -> None:
    physics = BirdPhysics()
    physics.grace_ticks = 0
    physics.flap()

    fired = [physics.step() for _ in range(AUTO_FLAP_INTERVAL)]

    assert fired[:-1] == [False] * (AUTO_FLAP_INTERVAL - 1)
    assert fired[-1] is True
    assert physics.bird.vy == pytest.approx(FLAP * AUTO_FLAP_RATIO)
    assert physics.input.auto_flap_timer == 0


def test_no_auto_flap_during_grace_window() -> None:
    physics = BirdPhysics()
    physics.flap()

    fired = [physics.step() for _ in range(INITIAL_GRAVITY_DURATION)]

    assert not any(fired)
    assert physics.input.auto_flap_timer == 0


def test_release_stops_auto_flap() -> None:
    physics = BirdPhysics()
    physics.grace_ticks = 0
    physics.flap()
    for _ in range(AUTO_FLAP_INTERVAL - 1):
        physics.step()
    physics.input.release()

    assert physics.step() is False
    assert physics.input.auto_flap_timer == 0


def test_new_physics_centers_bird_on_its_canvas() -> None:
    physics = BirdPhysics(canvas_height=300)
    assert physics.bird.y == 150
    assert physics.grace_ticks == INITIAL_GRAVITY_DURATION
