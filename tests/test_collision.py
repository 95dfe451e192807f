from __future__ import annotations

import pytest

from collision import CollisionKind, detect_collision, hits_obstacle, out_of_bounds
from obstacles import Obstacle
from settings import BIRD_SIZE, BIRD_X, SCREEN_HEIGHT

HALF = BIRD_SIZE // 2


@pytest.fixture
def pipe() -> Obstacle:
    # 새의 열(64..96)과 겹치는 파이프, 갭 200..380
    return Obstacle(x=70.0, gap_top=200.0)


def test_tangent_to_gap_top_does_not_collide(pipe: Obstacle) -> None:
    assert not hits_obstacle(pipe.gap_top + HALF, pipe)
    assert hits_obstacle(pipe.gap_top + HALF - 1, pipe)


def test_tangent_to_gap_bottom_does_not_collide(pipe: Obstacle) -> None:
    assert not hits_obstacle(pipe.gap_bottom - HALF, pipe)
    assert hits_obstacle(pipe.gap_bottom - HALF + 1, pipe)


def test_horizontal_tangency_does_not_collide() -> None:
    bird_y = 50.0  # 갭 위쪽, 세로로는 확실히 벗어남
    assert not hits_obstacle(bird_y, Obstacle(x=BIRD_X + HALF, gap_top=200.0))
    assert hits_obstacle(bird_y, Obstacle(x=BIRD_X + HALF - 1, gap_top=200.0))
    assert not hits_obstacle(bird_y, Obstacle(x=BIRD_X - HALF - 60, gap_top=200.0))


def test_bounds() -> None:
    assert out_of_bounds(HALF) is None
    assert out_of_bounds(HALF - 1) is CollisionKind.CEILING
    assert out_of_bounds(SCREEN_HEIGHT - HALF) is None
    assert out_of_bounds(SCREEN_HEIGHT - HALF + 1) is CollisionKind.FLOOR


def test_detect_collision_reports_first_hit(pipe: Obstacle) -> None:
    far = Obstacle(x=400.0, gap_top=100.0)
    assert detect_collision(300.0, [far, pipe]) is None
    assert detect_collision(100.0, [far, pipe]) is CollisionKind.PIPE
    # 파이프와 천장에 동시에 닿으면 파이프가 먼저 판정된다
    assert detect_collision(0.0, [pipe]) is CollisionKind.PIPE
    assert detect_collision(0.0, [far]) is CollisionKind.CEILING
