from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from audio import SilentAudio
from clock import PauseCountdown, TickContext
from collision import CollisionKind, detect_collision
from cosmetics import CosmeticStore, SelectResult
from obstacles import Obstacle, ObstacleStream
from physics import BirdPhysics, BirdState
from preferences import PreferenceStore
from settings import BIRD_ANIM_SPEED, SCREEN_HEIGHT

logger = logging.getLogger(__name__)


class GameMode(Enum):
    MENU = "menu"
    SHOP = "shop"
    PLAYING = "playing"
    PAUSED = "paused"
    PAUSE_COUNTDOWN = "pause_countdown"
    GAME_OVER = "game_over"
    QUIT = "quit"


class Key(Enum):
    FLAP = "flap"
    PAUSE = "pause"
    QUIT = "quit"


@dataclass
class GameSession:
    mode: GameMode = GameMode.MENU
    score: int = 0
    high_score: int = 0


@dataclass(frozen=True)
class Region:
    """클릭 가능한 사각형 영역(경계 포함)."""

    x: int
    y: int
    w: int
    h: int

    def contains(self, pos: Tuple[float, float]) -> bool:
        mx, my = pos
        return self.x <= mx <= self.x + self.w and self.y <= my <= self.y + self.h


MENU_BUTTONS: Dict[str, Region] = {
    "play": Region(120, 250, 160, 60),
    "shop": Region(120, 350, 160, 60),
    "quit": Region(120, 440, 160, 60),
}
BACK_BUTTON = Region(40, SCREEN_HEIGHT - 50, 80, 40)
SHOP_SLOT_SIZE = 64


def shop_slot(index: int) -> Region:
    """상점 스킨 칸: 한 줄에 4개씩."""
    return Region(60 + (index % 4) * 100, 120 + (index // 4) * 140, SHOP_SLOT_SIZE, SHOP_SLOT_SIZE)


@dataclass(frozen=True)
class RenderSnapshot:
    mode: GameMode
    bird: BirdState
    pipes: Tuple[Obstacle, ...]
    score: int
    high_score: int
    skin_id: int
    frame_index: int
    countdown: int
    hovered_button: Optional[str]
    unlocked_ids: FrozenSet[int]
    game_over_reason: Optional[CollisionKind]
    shop_feedback: Optional[SelectResult]


class GameStateMachine:
    """메뉴 → 플레이 → 일시정지 → 게임오버 → 종료(메뉴로 복귀) 흐름과 점수를 가진다.

    입력 핸들러(on_*)와 tick()만 상태를 바꾼다. 둘 다 호스트 루프 한 곳에서 호출된다.
    """

    def __init__(
        self,
        *,
        audio=None,
        prefs: Optional[PreferenceStore] = None,
        rng: Optional[random.Random] = None,
        canvas_height: float = SCREEN_HEIGHT,
    ) -> None:
        self.audio = audio if audio is not None else SilentAudio()
        self.prefs = prefs if prefs is not None else PreferenceStore()
        loaded = self.prefs.load()
        self.cosmetics = CosmeticStore(self.prefs, unlocked_ids=loaded.unlocked_ids, selected_id=loaded.selected_id)
        self.session = GameSession(mode=GameMode.MENU, high_score=loaded.high_score)
        self.canvas_height = canvas_height
        self.physics = BirdPhysics(canvas_height)
        self.pipes = ObstacleStream(canvas_height, rng)
        self.countdown = PauseCountdown()
        self.hovered_button: Optional[str] = None
        self.frame_index = 0
        self._frame_tick = 0
        self.game_over_reason: Optional[CollisionKind] = None
        self.shop_feedback: Optional[SelectResult] = None

    # -------------------
    # 상태 / 부수효과
    # -------------------
    @property
    def mode(self) -> GameMode:
        return self.session.mode

    def _set_mode(self, mode: GameMode) -> None:
        if mode is not self.session.mode:
            logger.debug("mode %s -> %s", self.session.mode.value, mode.value)
        self.session.mode = mode

    def _cue(self, name: str) -> None:
        # 오디오 실패가 상태 전이에 영향을 주면 안 된다
        try:
            getattr(self.audio, name)()
        except Exception:
            logger.warning("audio cue %r failed", name, exc_info=True)

    def reset_run(self) -> None:
        self.physics.reset()
        self.pipes.reset()
        self.session.score = 0
        self.frame_index = 0
        self._frame_tick = 0
        self.countdown.cancel()
        self.game_over_reason = None

    def start_play(self) -> None:
        self.reset_run()
        self._set_mode(GameMode.PLAYING)
        self._cue("start_music")

    def _quit(self) -> None:
        self.countdown.cancel()
        self._set_mode(GameMode.QUIT)
        self._cue("stop_music")

    # -------------------
    # 입력
    # -------------------
    def on_pointer_move(self, pos: Tuple[float, float]) -> None:
        if self.mode is not GameMode.MENU:
            self.hovered_button = None
            return
        self.hovered_button = next((name for name, region in MENU_BUTTONS.items() if region.contains(pos)), None)

    def on_click(self, pos: Tuple[float, float]) -> None:
        if self.mode is GameMode.MENU:
            if MENU_BUTTONS["play"].contains(pos):
                self.start_play()
            elif MENU_BUTTONS["shop"].contains(pos):
                self.shop_feedback = None
                self._set_mode(GameMode.SHOP)
            elif MENU_BUTTONS["quit"].contains(pos):
                self._quit()
            return

        if self.mode is GameMode.SHOP:
            if BACK_BUTTON.contains(pos):
                self._set_mode(GameMode.MENU)
                return
            for idx, skin in enumerate(self.cosmetics.catalog()):
                if shop_slot(idx).contains(pos):
                    self.shop_feedback = self.cosmetics.attempt_select(skin.id, self.session.score)
                    if self.shop_feedback is not SelectResult.REJECTED:
                        self.frame_index = 0
                        self._frame_tick = 0
                    return
        # 그 외 위치/모드의 클릭은 무시

    def on_key_down(self, key: Key) -> None:
        mode = self.mode
        if mode in (GameMode.MENU, GameMode.SHOP, GameMode.QUIT):
            return

        if mode is GameMode.PAUSE_COUNTDOWN:
            if key is Key.QUIT:
                self._quit()
            elif key is Key.PAUSE:
                self.countdown.cancel()
                self._set_mode(GameMode.PAUSED)
            return

        if mode is GameMode.PAUSED:
            if key is Key.PAUSE:
                self.countdown.begin()
                self._set_mode(GameMode.PAUSE_COUNTDOWN)
            elif key is Key.QUIT:
                self._quit()
            return

        if mode is GameMode.GAME_OVER:
            if key is Key.FLAP:
                self.start_play()
            elif key is Key.QUIT:
                self._quit()
            return

        # PLAYING
        if key is Key.FLAP:
            self.physics.flap()
            self._cue("flap")
        elif key is Key.PAUSE:
            self._set_mode(GameMode.PAUSED)
            self._cue("stop_music")
        elif key is Key.QUIT:
            self._quit()

    def on_key_up(self, key: Key) -> None:
        if key is Key.FLAP:
            self.physics.input.release()

    # -------------------
    # 틱
    # -------------------
    def tick(self, ctx: TickContext) -> RenderSnapshot:
        mode = self.mode
        if mode is GameMode.QUIT:
            # 종료는 프로세스 종료가 아니라 "메뉴로 나가기"
            self.reset_run()
            self.physics.input.release()
            self._set_mode(GameMode.MENU)
        elif mode is GameMode.PAUSE_COUNTDOWN:
            if self.countdown.update(ctx.now_ms):
                self._set_mode(GameMode.PLAYING)
                self._cue("start_music")
        elif mode is GameMode.PLAYING:
            for _ in range(ctx.steps):
                self.update_play()
                if self.mode is not GameMode.PLAYING:
                    break
        return self.snapshot()

    def update_play(self) -> None:
        """물리 → 파이프 스크롤/재활용 → 충돌, 고정 스텝 하나."""
        if self.physics.step():
            self._cue("flap")

        if self.pipes.scroll():
            self._award_point()

        self._animate()

        kind = detect_collision(self.physics.bird.y, self.pipes, canvas_height=self.canvas_height)
        if kind is not None:
            self.game_over_reason = kind
            self._set_mode(GameMode.GAME_OVER)
            self._cue("death")
            self._cue("stop_music")

    def _award_point(self) -> None:
        self.session.score += 1
        self._cue("point")
        if self.session.score > self.session.high_score:
            self.session.high_score = self.session.score
            self.prefs.save_high_score(self.session.high_score)

    def _animate(self) -> None:
        self._frame_tick += 1
        if self._frame_tick >= BIRD_ANIM_SPEED:
            self._frame_tick = 0
            frame_count = max(1, len(self.cosmetics.selected.frames))
            self.frame_index = (self.frame_index + 1) % frame_count

    def snapshot(self) -> RenderSnapshot:
        return RenderSnapshot(
            mode=self.mode,
            bird=replace(self.physics.bird),
            pipes=tuple(replace(p) for p in self.pipes),
            score=self.session.score,
            high_score=self.session.high_score,
            skin_id=self.cosmetics.selected_id,
            frame_index=self.frame_index,
            countdown=self.countdown.value,
            hovered_button=self.hovered_button,
            unlocked_ids=frozenset(self.cosmetics.unlocked_ids),
            game_over_reason=self.game_over_reason,
            shop_feedback=self.shop_feedback,
        )
