from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

import pygame

from collision import CollisionKind
from cosmetics import CosmeticSkin, SelectResult
from game_state import BACK_BUTTON, MENU_BUTTONS, GameMode, Region, RenderSnapshot, shop_slot
from settings import BIRD_SIZE, BIRD_X, FONT_CANDIDATES, PIPE_GAP, PIPE_WIDTH
from ui_common import draw_button, draw_card, draw_center_message, draw_game_over_ui, draw_text_center

logger = logging.getLogger(__name__)

BG_COLOR = (78, 192, 202)
TEXT_COLOR = (30, 30, 30)
PIPE_FILL = (64, 200, 110)
PIPE_EDGE = (20, 80, 40)

MENU_BUTTON_STYLE = {
    "play": ("게임시작", (40, 167, 69), (92, 217, 122)),
    "shop": ("상점", (0, 123, 255), (77, 163, 255)),
    "quit": ("종료", (220, 53, 69), (255, 107, 122)),
}

GAME_OVER_REASONS = {
    CollisionKind.PIPE: "파이프에 부딪혔어요!",
    CollisionKind.CEILING: "천장에 부딪혔어요!",
    CollisionKind.FLOOR: "바닥에 떨어졌어요!",
}

SHOP_FEEDBACK = {
    SelectResult.SELECTED: "선택 완료!",
    SelectResult.PURCHASED: "구매 완료!",
    SelectResult.REJECTED: "점수가 부족해요",
}


def get_font(size: int, bold: bool = False) -> pygame.font.Font:
    for name in FONT_CANDIDATES:
        font_path = pygame.font.match_font(name, bold=bold)
        if font_path:
            return pygame.font.Font(font_path, size)
    return pygame.font.SysFont(None, size, bold=bold)


def _to_rect(region: Region) -> pygame.Rect:
    return pygame.Rect(region.x, region.y, region.w, region.h)


def _load_frames(paths: List[Path], size: int) -> List[pygame.Surface]:
    frames: List[pygame.Surface] = []
    for path in paths:
        image = pygame.image.load(path.as_posix()).convert_alpha()
        if image.get_size() != (size, size):
            image = pygame.transform.smoothscale(image, (size, size))
        frames.append(image)
    return frames


class GameRenderer:
    """RenderSnapshot을 화면에 그린다. 코어 상태는 절대 건드리지 않는다."""

    def __init__(self, screen: pygame.Surface, catalog: List[CosmeticSkin]) -> None:
        self.screen = screen
        self.catalog = {skin.id: skin for skin in catalog}
        self.font_title = get_font(44, bold=True)
        self.font_big = get_font(32, bold=True)
        self.font = get_font(20)
        self.font_small = get_font(16)
        # 스킨별 프레임 캐시. 로딩 실패한 스킨은 빈 리스트(도형으로 폴백)
        self._frames: Dict[int, List[pygame.Surface]] = {}

    def _skin_frames(self, skin_id: int) -> List[pygame.Surface]:
        if skin_id in self._frames:
            return self._frames[skin_id]
        skin = self.catalog.get(skin_id)
        frames: List[pygame.Surface] = []
        if skin is not None:
            try:
                frames = _load_frames(list(skin.frames), BIRD_SIZE)
            except (pygame.error, FileNotFoundError, OSError) as e:
                logger.warning("skin %s frames unavailable, drawing placeholder: %s", skin.display_name, e)
                frames = []
        self._frames[skin_id] = frames
        return frames

    # -------------------
    # 부품
    # -------------------
    def draw_background(self) -> None:
        self.screen.fill(BG_COLOR)

    def draw_pipes(self, snap: RenderSnapshot) -> None:
        height = self.screen.get_height()
        for pipe in snap.pipes:
            top = pygame.Rect(int(pipe.x), 0, PIPE_WIDTH, int(pipe.gap_top))
            bottom_y = int(pipe.gap_top + PIPE_GAP)
            bottom = pygame.Rect(int(pipe.x), bottom_y, PIPE_WIDTH, max(0, height - bottom_y))
            for rect in (top, bottom):
                if rect.height <= 0:
                    continue
                pygame.draw.rect(self.screen, PIPE_FILL, rect)
                pygame.draw.rect(self.screen, PIPE_EDGE, rect, width=3)

            # 입구 림
            rim_h = 12
            for rim in (
                pygame.Rect(top.x - 4, top.bottom - rim_h, top.width + 8, rim_h),
                pygame.Rect(bottom.x - 4, bottom.top, bottom.width + 8, rim_h),
            ):
                pygame.draw.rect(self.screen, PIPE_FILL, rim, border_radius=4)
                pygame.draw.rect(self.screen, PIPE_EDGE, rim, width=2, border_radius=4)

    def draw_bird_at(self, skin_id: int, frame_index: int, center: tuple[int, int], size: int = BIRD_SIZE) -> None:
        frames = self._skin_frames(skin_id)
        if frames:
            image = frames[frame_index % len(frames)]
            if size != BIRD_SIZE:
                image = pygame.transform.smoothscale(image, (size, size))
            self.screen.blit(image, image.get_rect(center=center))
            return

        # 폴백: 간단한 도형 새
        skin = self.catalog.get(skin_id)
        color = skin.color if skin is not None else (255, 220, 60)
        cx, cy = center
        r = size // 2
        pygame.draw.circle(self.screen, color, center, r)
        pygame.draw.circle(self.screen, (40, 40, 40), (cx + r // 3, cy - r // 3), max(2, size // 12))
        pygame.draw.polygon(
            self.screen,
            (255, 140, 60),
            [(cx + r - 2, cy - 3), (cx + r + size // 4, cy), (cx + r - 2, cy + 3)],
        )

    def draw_hud(self, snap: RenderSnapshot) -> None:
        score = self.font_big.render(f"점수 {snap.score}", True, TEXT_COLOR)
        self.screen.blit(score, (20, 20))
        best = self.font.render(f"최고 점수 {snap.high_score}", True, TEXT_COLOR)
        self.screen.blit(best, (20, 60))

    # -------------------
    # 화면
    # -------------------
    def draw_menu(self, snap: RenderSnapshot) -> None:
        self.draw_background()
        draw_text_center(self.screen, self.font_title, "Flappy Bird", 100, color=(255, 255, 255))
        draw_text_center(self.screen, self.font, f"최고 점수 {snap.high_score}", 200, color=TEXT_COLOR)
        for name, region in MENU_BUTTONS.items():
            label, color, hover = MENU_BUTTON_STYLE[name]
            draw_button(
                self.screen,
                self.font_big,
                _to_rect(region),
                label,
                color=color,
                hover_color=hover,
                hovered=snap.hovered_button == name,
            )

    def draw_shop(self, snap: RenderSnapshot) -> None:
        self.draw_background()
        draw_text_center(self.screen, self.font_title, "새 상점", 60, color=(255, 255, 255))
        draw_text_center(self.screen, self.font_small, "클릭해서 구매/선택", 95, color=(255, 255, 255))

        for idx, skin in enumerate(self.catalog.values()):
            rect = _to_rect(shop_slot(idx))
            owned = skin.id in snap.unlocked_ids
            draw_card(self.screen, rect, fill=(255, 255, 255) if owned else (170, 170, 170))
            self.draw_bird_at(skin.id, 0, rect.center, size=48)
            draw_text_center(self.screen, self.font_small, skin.display_name, rect.bottom + 16, x=rect.centerx)
            if not owned:
                caption, color = f"가격 {skin.unlock_cost}", (255, 240, 0)
            elif skin.id == snap.skin_id:
                caption, color = "선택됨", (0, 160, 0)
            else:
                caption, color = "보유", (255, 255, 255)
            draw_text_center(self.screen, self.font_small, caption, rect.bottom + 36, color=color, x=rect.centerx)

        if snap.shop_feedback is not None:
            draw_text_center(self.screen, self.font, SHOP_FEEDBACK[snap.shop_feedback], 420)

        back = _to_rect(BACK_BUTTON)
        draw_card(self.screen, back)
        draw_text_center(self.screen, self.font, "뒤로", back.centery, x=back.centerx)

    def draw_play(self, snap: RenderSnapshot) -> None:
        self.draw_background()
        self.draw_pipes(snap)
        self.draw_bird_at(snap.skin_id, snap.frame_index, (BIRD_X, int(snap.bird.y)))
        self.draw_hud(snap)

    def draw(self, snap: RenderSnapshot) -> None:
        mode = snap.mode
        if mode in (GameMode.MENU, GameMode.QUIT):
            self.draw_menu(snap)
            return
        if mode is GameMode.SHOP:
            self.draw_shop(snap)
            return

        self.draw_play(snap)
        if mode is GameMode.GAME_OVER:
            reason = GAME_OVER_REASONS.get(snap.game_over_reason, "부딪혔어요!")
            draw_game_over_ui(
                self.screen,
                font_title=self.font_title,
                font=self.font,
                font_small=self.font_small,
                reason=reason,
                score=snap.score,
                high_score=snap.high_score,
                hint="SPACE: 재시작  |  Q: 메뉴",
            )
        elif mode is GameMode.PAUSED:
            draw_center_message(
                self.screen,
                font_title=self.font_title,
                font=self.font,
                title="일시정지",
                lines=["P: 계속하기", "Q: 메뉴로"],
            )
        elif mode is GameMode.PAUSE_COUNTDOWN:
            draw_center_message(
                self.screen,
                font_title=self.font_title,
                font=self.font_title,
                title="준비!",
                lines=[str(snap.countdown)],
            )
