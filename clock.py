from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from settings import COUNTDOWN_START, COUNTDOWN_STEP_MS, MAX_STEPS_PER_FRAME, SIM_STEP_MS


@dataclass(frozen=True)
class TickContext:
    """한 프레임에 코어로 넘기는 두 개의 시간 소스.

    now_ms: 벽시계(ms). 일시정지 카운트다운만 이 값을 본다.
    steps: 이번 프레임에 돌릴 고정 물리 스텝 수(논리 시계).
    """

    now_ms: int
    steps: int = 1


class FixedStepScheduler:
    """실제 경과 시간을 고정 크기 물리 스텝 수로 바꾼다(렌더 FPS와 무관)."""

    def __init__(self, step_ms: float = SIM_STEP_MS, max_steps: int = MAX_STEPS_PER_FRAME) -> None:
        self.step_ms = step_ms
        self.max_steps = max_steps
        self._accum_ms = 0.0

    def advance(self, elapsed_ms: float, now_ms: int) -> TickContext:
        self._accum_ms += max(0.0, elapsed_ms)
        steps = int(self._accum_ms // self.step_ms)
        if steps > self.max_steps:
            # 창 드래그 등으로 멈췄다가 돌아오면 밀린 시간을 버린다
            steps = self.max_steps
            self._accum_ms = 0.0
        else:
            self._accum_ms -= steps * self.step_ms
        return TickContext(now_ms=now_ms, steps=steps)


class PauseCountdown:
    """재개 전 3→0 카운트다운. 틱이 아니라 벽시계 1초마다 1씩 줄어든다."""

    def __init__(self, start: int = COUNTDOWN_START, step_ms: int = COUNTDOWN_STEP_MS) -> None:
        self.start_value = start
        self.step_ms = step_ms
        self.value = 0
        self.active = False
        self._mark_ms: Optional[int] = None

    def begin(self) -> None:
        # 시작 시각은 다음 update()에서 처음 샘플링한 벽시계로 잡는다
        self.value = self.start_value
        self.active = True
        self._mark_ms = None

    def cancel(self) -> None:
        self.active = False
        self.value = 0
        self._mark_ms = None

    def update(self, now_ms: int) -> bool:
        """카운트다운이 0에 도달한 그 호출에서만 True."""
        if not self.active:
            return False
        if self._mark_ms is None:
            self._mark_ms = now_ms
            return False
        if now_ms - self._mark_ms >= self.step_ms:
            self.value -= 1
            self._mark_ms = now_ms
        if self.value <= 0:
            self.cancel()
            return True
        return False
