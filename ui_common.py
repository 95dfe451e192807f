from __future__ import annotations

from typing import Optional

import pygame


def draw_overlay(surface: pygame.Surface, *, alpha: int = 120) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, max(0, min(255, alpha))))
    surface.blit(overlay, (0, 0))


def draw_card(surface: pygame.Surface, rect: pygame.Rect, *, fill=(255, 255, 255)) -> None:
    # 흰색 카드 + 검은 테두리 + 살짝 그림자
    shadow = pygame.Surface((rect.width + 10, rect.height + 10), pygame.SRCALPHA)
    pygame.draw.rect(shadow, (0, 0, 0, 40), shadow.get_rect(), border_radius=18)
    surface.blit(shadow, (rect.x - 5, rect.y - 3))

    pygame.draw.rect(surface, fill, rect, border_radius=18)
    pygame.draw.rect(surface, (40, 40, 40), rect, width=2, border_radius=18)


def draw_text_center(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    y: int,
    *,
    color=(20, 20, 20),
    x: Optional[int] = None,
) -> None:
    rendered = font.render(text, True, color)
    cx = surface.get_width() // 2 if x is None else x
    surface.blit(rendered, rendered.get_rect(center=(cx, y)))


def draw_button(
    surface: pygame.Surface,
    font: pygame.font.Font,
    rect: pygame.Rect,
    label: str,
    *,
    color: tuple[int, int, int],
    hover_color: tuple[int, int, int],
    hovered: bool,
) -> None:
    """메뉴 버튼: 호버 시 밝은 색으로."""
    pygame.draw.rect(surface, hover_color if hovered else color, rect, border_radius=12)
    pygame.draw.rect(surface, (40, 40, 40), rect, width=2, border_radius=12)
    draw_text_center(surface, font, label, rect.centery, color=(255, 255, 255), x=rect.centerx)


def draw_game_over_ui(
    surface: pygame.Surface,
    *,
    font_title: pygame.font.Font,
    font: pygame.font.Font,
    font_small: pygame.font.Font,
    reason: str,
    score: int,
    high_score: int,
    hint: str,
) -> None:
    """게임오버 UI(오버레이 + 카드 + 텍스트)."""
    draw_overlay(surface, alpha=120)

    w, _ = surface.get_size()
    card = pygame.Rect((w - 340) // 2, 170, 340, 250)
    draw_card(surface, card)

    draw_text_center(surface, font_title, "게임오버", card.top + 46)
    draw_text_center(surface, font, reason, card.top + 88, color=(60, 60, 60))
    draw_text_center(surface, font_title, str(score), card.top + 140, color=(35, 35, 35))
    draw_text_center(surface, font_small, f"최고 점수 {high_score}", card.top + 182, color=(70, 70, 70))
    draw_text_center(surface, font_small, hint, card.top + 222, color=(70, 70, 70))


def draw_center_message(
    surface: pygame.Surface,
    *,
    font_title: pygame.font.Font,
    font: pygame.font.Font,
    title: str,
    lines: list[str],
) -> None:
    """일시정지/카운트다운처럼 어두운 오버레이 위 가운데 글자."""
    draw_overlay(surface, alpha=128)
    h = surface.get_height()
    draw_text_center(surface, font_title, title, h // 2 - 50, color=(255, 255, 255))
    y = h // 2
    for line in lines:
        draw_text_center(surface, font, line, y, color=(255, 255, 255))
        y += 40
