from __future__ import annotations

import random

from obstacles import ObstacleStream
from settings import GAP_TOP_MIN, PIPE_COUNT, PIPE_FIRST_X, PIPE_GAP, PIPE_SPACING, PIPE_SPEED, PIPE_WIDTH, SCREEN_HEIGHT


def test_initial_stream_has_three_spaced_pipes() -> None:
    stream = ObstacleStream(rng=random.Random(3))

    xs = [p.x for p in stream]
    assert xs == [PIPE_FIRST_X + i * PIPE_SPACING for i in range(PIPE_COUNT)]
    for pipe in stream:
        assert GAP_TOP_MIN <= pipe.gap_top <= SCREEN_HEIGHT - PIPE_GAP - 50
        assert pipe.gap_bottom == pipe.gap_top + PIPE_GAP


def test_scroll_moves_every_pipe_left() -> None:
    stream = ObstacleStream(rng=random.Random(3))
    before = [p.x for p in stream]

    recycled = stream.scroll()

    assert recycled is False
    assert [p.x for p in stream] == [x - PIPE_SPEED for x in before]


def test_recycle_keeps_exactly_three_sorted_pipes() -> None:
    stream = ObstacleStream(rng=random.Random(3))
    recycles = 0

    for _ in range(3000):
        last_x = stream.pipes[-1].x
        if stream.scroll():
            recycles += 1
            # 새 파이프는 (이동 후) 마지막 파이프 + 간격 위치
            assert stream.pipes[-1].x == (last_x - PIPE_SPEED) + PIPE_SPACING
            assert stream.pipes[0].x >= -PIPE_WIDTH
        xs = [p.x for p in stream]
        assert len(stream) == PIPE_COUNT
        assert xs == sorted(xs)

    assert recycles > 5


def test_first_recycle_happens_once_pipe_is_fully_off_screen() -> None:
    stream = ObstacleStream(rng=random.Random(3))
    steps = 0
    while not stream.scroll():
        steps += 1
        assert steps < 1000

    # x < -PIPE_WIDTH 가 처음 참이 되는 스텝
    assert PIPE_FIRST_X - (steps + 1) * PIPE_SPEED < -PIPE_WIDTH
    assert PIPE_FIRST_X - steps * PIPE_SPEED >= -PIPE_WIDTH


def test_seeded_streams_generate_identical_gaps() -> None:
    a = ObstacleStream(rng=random.Random(99))
    b = ObstacleStream(rng=random.Random(99))

    for _ in range(600):
        a.scroll()
        b.scroll()

    assert [p.gap_top for p in a] == [p.gap_top for p in b]


def test_reset_regenerates_initial_layout() -> None:
    stream = ObstacleStream(rng=random.Random(5))
    for _ in range(500):
        stream.scroll()

    stream.reset()

    assert [p.x for p in stream] == [PIPE_FIRST_X + i * PIPE_SPACING for i in range(PIPE_COUNT)]
