from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from obstacles import Obstacle
from settings import BIRD_SIZE, BIRD_X, PIPE_WIDTH, SCREEN_HEIGHT


class CollisionKind(Enum):
    PIPE = "pipe"
    CEILING = "ceiling"
    FLOOR = "floor"


def hits_obstacle(bird_y: float, pipe: Obstacle, *, bird_x: float = BIRD_X, size: float = BIRD_SIZE) -> bool:
    half = size / 2
    # 경계에 딱 닿는 건 충돌이 아니다(모두 엄격한 부등호)
    overlaps_column = bird_x + half > pipe.x and bird_x - half < pipe.x + PIPE_WIDTH
    if not overlaps_column:
        return False
    return bird_y - half < pipe.gap_top or bird_y + half > pipe.gap_bottom


def out_of_bounds(bird_y: float, *, canvas_height: float = SCREEN_HEIGHT, size: float = BIRD_SIZE) -> Optional[CollisionKind]:
    half = size / 2
    if bird_y + half > canvas_height:
        return CollisionKind.FLOOR
    if bird_y - half < 0:
        return CollisionKind.CEILING
    return None


def detect_collision(
    bird_y: float,
    pipes: Iterable[Obstacle],
    *,
    canvas_height: float = SCREEN_HEIGHT,
) -> Optional[CollisionKind]:
    """처음 발견된 충돌 하나만 돌려준다. 체력 개념은 없다."""
    for pipe in pipes:
        if hits_obstacle(bird_y, pipe):
            return CollisionKind.PIPE
    return out_of_bounds(bird_y, canvas_height=canvas_height)
