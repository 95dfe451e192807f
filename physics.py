from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from settings import (
    AUTO_FLAP_INTERVAL,
    AUTO_FLAP_RATIO,
    FLAP,
    GRAVITY,
    INITIAL_GRAVITY,
    INITIAL_GRAVITY_DURATION,
    SCREEN_HEIGHT,
)


class GravityPhase(Enum):
    INITIAL = "initial"
    NORMAL = "normal"


@dataclass
class BirdState:
    y: float = SCREEN_HEIGHT / 2
    vy: float = 0.0
    gravity_phase: GravityPhase = GravityPhase.INITIAL


@dataclass
class InputState:
    space_held: bool = False
    auto_flap_timer: int = 0

    def release(self) -> None:
        self.space_held = False
        self.auto_flap_timer = 0


class BirdPhysics:
    """1차원 수직 적분기. 한 번의 step()이 고정 물리 스텝 하나."""

    def __init__(self, canvas_height: float = SCREEN_HEIGHT) -> None:
        self.canvas_height = canvas_height
        self.reset()

    def reset(self) -> None:
        self.bird = BirdState(y=self.canvas_height / 2)
        self.input = InputState()
        self.grace_ticks = INITIAL_GRAVITY_DURATION

    @property
    def in_grace_window(self) -> bool:
        return self.grace_ticks > 0

    def active_gravity(self) -> float:
        return INITIAL_GRAVITY if self.in_grace_window else GRAVITY

    def flap(self) -> None:
        # 유예 시간과 관계없이 즉시 최대 힘으로
        self.bird.vy = FLAP
        self.input.space_held = True
        self.input.auto_flap_timer = 0

    def step(self) -> bool:
        """중력 → 자동 날갯짓 → 위치 순으로 적분한다. 자동 날갯짓이 나갔으면 True."""
        bird = self.bird
        bird.gravity_phase = GravityPhase.INITIAL if self.in_grace_window else GravityPhase.NORMAL
        bird.vy += self.active_gravity()

        auto_flapped = False
        if self.input.space_held and not self.in_grace_window:
            self.input.auto_flap_timer += 1
            if self.input.auto_flap_timer >= AUTO_FLAP_INTERVAL:
                bird.vy = FLAP * AUTO_FLAP_RATIO
                self.input.auto_flap_timer = 0
                auto_flapped = True

        bird.y += bird.vy

        if self.grace_ticks > 0:
            self.grace_ticks -= 1
        return auto_flapped
