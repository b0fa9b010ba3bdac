"""Window, main loop and on-screen text of the game."""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import pygame

from blockfall.colors import DARK_BLUE, LIGHT_BLUE, WHITE
from blockfall.game import CLEAR_SOUND, ROTATE_SOUND, Game

WINDOW_SIZE = (500, 620)
FPS = 60
FALL_INTERVAL = 0.2
FONT_PATH = Path("Font/monogram.ttf")
FONT_SIZE = 38
MUSIC_PATH = Path("Sounds/music.mp3")
SOUND_PATHS = {ROTATE_SOUND: Path("Sounds/rotate.mp3"), CLEAR_SOUND: Path("Sounds/clear.mp3")}


@dataclass
class EventTimer:
    """Fires once every time at least `interval` seconds have passed."""

    interval: float
    last_update_time: float = 0.0

    def triggered(self, now: float) -> bool:
        """Return True and restart the interval if it has elapsed by `now`."""
        if now - self.last_update_time >= self.interval:
            self.last_update_time = now
            return True
        return False


def _load_font() -> pygame.font.Font:
    try:
        return pygame.font.Font(str(FONT_PATH), FONT_SIZE)
    except (OSError, pygame.error):
        return pygame.font.Font(None, FONT_SIZE)


def _init_audio() -> dict[str, pygame.mixer.Sound]:
    try:
        pygame.mixer.init()
    except pygame.error:
        return {}
    try:
        pygame.mixer.music.load(str(MUSIC_PATH))
        pygame.mixer.music.play(-1)
    except pygame.error:
        pass
    sounds = {}
    for name, path in SOUND_PATHS.items():
        try:
            sounds[name] = pygame.mixer.Sound(str(path))
        except (OSError, pygame.error):
            continue
    return sounds


def _rounded_box(surface: pygame.Surface, rect: pygame.Rect) -> None:
    radius = int(0.3 * min(rect.width, rect.height) / 2)
    pygame.draw.rect(surface, LIGHT_BLUE, rect, border_radius=radius)


def _draw_frame(screen: pygame.Surface, font: pygame.font.Font, game: Game) -> None:
    screen.fill(DARK_BLUE)
    screen.blit(font.render("Score", True, WHITE), (365, 15))
    screen.blit(font.render("Next", True, WHITE), (370, 175))
    if game.game_over:
        screen.blit(font.render("GAME OVER", True, WHITE), (320, 450))
    _rounded_box(screen, pygame.Rect(320, 55, 170, 60))
    score_image = font.render(str(game.score), True, WHITE)
    screen.blit(score_image, (320 + (170 - score_image.get_width()) / 2, 65))
    _rounded_box(screen, pygame.Rect(320, 215, 170, 180))
    game.draw(screen)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Blockfall")
        clock = pygame.time.Clock()
        font = _load_font()
        sounds = _init_audio()

        def play_sound(name: str) -> None:
            sound = sounds.get(name)
            if sound is not None:
                sound.play()

        game = Game(play_sound=play_sound)
        timer = EventTimer(FALL_INTERVAL)
        start = time.monotonic()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        game.handle_input(event.key)
            if not running:
                break
            if timer.triggered(time.monotonic() - start):
                game.move_block_down()
            _draw_frame(screen, font, game)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())