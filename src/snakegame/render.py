# render.py
from typing import List, Tuple

import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, HUD_HEIGHT,
    BG, GRID, GREEN, LIME, RED, TEXT, GOLD,
    Difficulty,
)
from .session import Snapshot


# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, HUD_HEIGHT + gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect.inflate(-2, -2))

def hud_text(snap: Snapshot) -> str:
    sound = "on" if snap.sound_enabled else "off"
    return (
        f"Score: {snap.score}   Best: {snap.high_score}   "
        f"Speed: {snap.speed_level}   {snap.difficulty.label}   Sound: {sound}"
    )

def overlay_lines(snap: Snapshot) -> List[Tuple[str, Tuple[int, int, int]]]:
    """Text shown over the board; empty while playing."""
    if snap.running:
        return []
    if snap.over:
        lines = [("GAME OVER", (240, 240, 250)), (f"Final score: {snap.score}", TEXT)]
        if snap.is_new_record:
            lines.append(("New record!", GOLD))
        lines.append(("Space to reset, Enter to play again", TEXT))
        return lines
    if snap.paused:
        return [("PAUSED", (240, 240, 250)), ("Space to resume", TEXT)]
    choices = "  ".join(f"{i}:{d.label}" for i, d in enumerate(Difficulty, start=1))
    return [
        ("SNAKE", (240, 240, 250)),
        ("Space or Enter to start", TEXT),
        (choices, TEXT),
        ("Arrows to steer, M toggles sound", TEXT),
    ]


# ---------- Draw ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    screen.fill(BG)
    pygame.draw.rect(screen, GRID, pygame.Rect(0, HUD_HEIGHT, WIDTH, HEIGHT - HUD_HEIGHT))
    # food
    draw_cell(screen, snap.food[0], snap.food[1], RED)
    # snake
    for idx, (x, y) in enumerate(snap.snake):
        draw_cell(screen, x, y, LIME if idx == 0 else GREEN)
    # score
    txt = font.render(hud_text(snap), True, TEXT)
    screen.blit(txt, (8, 6))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    lines = overlay_lines(snap)
    if not lines:
        return
    # Dim with translucent overlay
    overlay = pygame.Surface((WIDTH, HEIGHT - HUD_HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, HUD_HEIGHT))

    top = HUD_HEIGHT + (HEIGHT - HUD_HEIGHT) // 2 - 16 * len(lines)
    for i, (text, color) in enumerate(lines):
        surf = font.render(text, True, color)
        screen.blit(surf, surf.get_rect(center=(WIDTH // 2, top + 32 * i + 16)))

def draw_frame(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    draw_game(screen, font, snap)
    draw_overlay(screen, font, snap)
