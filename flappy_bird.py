from __future__ import annotations

import logging
from typing import Optional

import pygame

from audio import AudioCues, SilentAudio
from clock import FixedStepScheduler
from game_state import GameStateMachine, Key
from preferences import PreferenceStore
from renderer import GameRenderer
from settings import FPS, SCREEN_HEIGHT, SCREEN_WIDTH, get_log_level, is_muted

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    pygame.K_SPACE: Key.FLAP,
    pygame.K_p: Key.PAUSE,
    pygame.K_q: Key.QUIT,
    pygame.K_ESCAPE: Key.QUIT,
}


class FlappyBirdGame:
    """pygame 창/이벤트/프레임 페이싱만 담당하는 얇은 호스트. 게임 규칙은 GameStateMachine에 있다."""

    def __init__(self, *, prefs: Optional[PreferenceStore] = None) -> None:
        pygame.init()
        pygame.display.set_caption("Flappy Bird")
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.clock = pygame.time.Clock()
        self.scheduler = FixedStepScheduler()
        self.running = True

        audio = SilentAudio() if is_muted() else AudioCues()
        self.machine = GameStateMachine(audio=audio, prefs=prefs)
        self.renderer = GameRenderer(self.screen, self.machine.cosmetics.catalog())

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            key = KEY_BINDINGS.get(event.key)
            if key is not None:
                self.machine.on_key_down(key)
        elif event.type == pygame.KEYUP:
            key = KEY_BINDINGS.get(event.key)
            if key is not None:
                self.machine.on_key_up(key)
        elif event.type == pygame.MOUSEMOTION:
            self.machine.on_pointer_move(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.machine.on_click(event.pos)

    def run(self, quit_on_exit: bool = True) -> None:
        while self.running:
            elapsed_ms = self.clock.tick(FPS)

            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                break

            ctx = self.scheduler.advance(elapsed_ms, pygame.time.get_ticks())
            snapshot = self.machine.tick(ctx)
            self.renderer.draw(snapshot)
            pygame.display.flip()

        if quit_on_exit:
            pygame.quit()


def run_game(*, quit_on_exit: bool = True) -> None:
    logging.basicConfig(level=get_log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    FlappyBirdGame().run(quit_on_exit=quit_on_exit)


if __name__ == "__main__":
    run_game()
