from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Tuple

from settings import (
    GAP_RANGE_MARGIN,
    GAP_TOP_MIN,
    PIPE_COUNT,
    PIPE_FIRST_X,
    PIPE_GAP,
    PIPE_SPACING,
    PIPE_SPEED,
    PIPE_WIDTH,
    SCREEN_HEIGHT,
)


@dataclass
class Obstacle:
    x: float
    gap_top: float

    @property
    def gap_bottom(self) -> float:
        return self.gap_top + PIPE_GAP

    @property
    def right(self) -> float:
        return self.x + PIPE_WIDTH

    def is_off_screen(self) -> bool:
        return self.x < -PIPE_WIDTH


class ObstacleStream:
    """항상 3개만 살아 있는 파이프 열.

    맨 왼쪽 파이프가 화면 밖으로 나가면 빼고, 마지막 파이프 + PIPE_SPACING 위치에
    새 갭으로 하나를 붙인다. 이 재활용이 끝없는 코스를 만든다.
    """

    def __init__(self, canvas_height: float = SCREEN_HEIGHT, rng: Optional[random.Random] = None) -> None:
        self.canvas_height = canvas_height
        self.rng = rng or random.Random()
        # maxlen이 있는 deque라 append하면 왼쪽 것이 자동으로 빠진다
        self._pipes: Deque[Obstacle] = deque(maxlen=PIPE_COUNT)
        self.reset()

    def _random_gap_top(self) -> float:
        span = self.canvas_height - PIPE_GAP - GAP_RANGE_MARGIN
        return self.rng.random() * span + GAP_TOP_MIN

    def reset(self) -> None:
        self._pipes.clear()
        for i in range(PIPE_COUNT):
            self._pipes.append(Obstacle(x=float(PIPE_FIRST_X + i * PIPE_SPACING), gap_top=self._random_gap_top()))

    def __len__(self) -> int:
        return len(self._pipes)

    def __iter__(self):
        return iter(self._pipes)

    @property
    def pipes(self) -> Tuple[Obstacle, ...]:
        return tuple(self._pipes)

    def scroll(self, speed: float = PIPE_SPEED) -> bool:
        """모든 파이프를 왼쪽으로 밀고, 재활용이 일어났으면 True(점수 +1 대상)."""
        for pipe in self._pipes:
            pipe.x -= speed
        if not self._pipes[0].is_off_screen():
            return False
        last_x = self._pipes[-1].x
        self._pipes.append(Obstacle(x=last_x + PIPE_SPACING, gap_top=self._random_gap_top()))
        return True
