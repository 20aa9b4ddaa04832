"""Window, drawing back end and main loop of the game."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Optional, Sequence

import pygame

from wherestarget.frametimer import Colors, FrameTimer
from wherestarget.gamemath import Rect, Screen
from wherestarget.scenes import KEY_SPACE, Game, InputState

DEFAULT_SPRITE_SHEET = "Resources/Textures/Where's_Target.png"
FONT_SIZE = 16
TARGET_FPS = 60


def _to_color(color: int) -> pygame.Color:
    return pygame.Color(
        (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF, (color >> 24) & 0xFF
    )


class PygameRenderer:
    """Draws onto a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._font: Optional[pygame.font.Font] = None

    def draw_sprite(self, dest: Rect, source: Rect, sheet: Any) -> None:
        """Draw the ``source`` area of ``sheet`` stretched over ``dest``."""
        if sheet is None or dest.width <= 0 or dest.height <= 0:
            return
        area = pygame.Rect(source.left, source.top, source.width, source.height)
        area = area.clip(sheet.get_rect())
        if area.width == 0 or area.height == 0:
            return
        image = pygame.transform.scale(sheet.subsurface(area), (dest.width, dest.height))
        self.surface.blit(image, (dest.left, dest.top))

    def draw_box(self, rect: Rect, color: int) -> None:
        """Draw the outline of ``rect``."""
        pygame.draw.rect(
            self.surface,
            _to_color(color),
            pygame.Rect(rect.left, rect.top, rect.width, rect.height),
            1,
        )

    def draw_text(self, x: int, y: int, text: str, color: int) -> None:
        """Draw ``text`` with its top-left corner at (x, y)."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        image = self._font.render(text, True, _to_color(color))
        self.surface.blit(image, (x, y))


def draw_frame_rate(renderer: Any, x: int, y: int, color: int, fps: int) -> None:
    """Draw the frame rate as a three-wide number followed by 'fps'."""
    renderer.draw_text(x, y, f"{fps:3d}fps", color)


def _read_input() -> InputState:
    pressed = pygame.key.get_pressed()
    keys = KEY_SPACE if pressed[pygame.K_SPACE] else 0
    mouse_x, mouse_y = pygame.mouse.get_pos()
    left_pressed = bool(pygame.mouse.get_pressed()[0])
    return InputState(keys=keys, mouse_x=mouse_x, mouse_y=mouse_y, left_pressed=left_pressed)


def _load_sheet(path: str) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(path).convert_alpha()
    except (pygame.error, FileNotFoundError):
        return None


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wherestarget", description=Game.TITLE)
    parser.add_argument(
        "--windowed", action="store_true", help="run in a window instead of full screen"
    )
    parser.add_argument("--show-fps", action="store_true", help="draw the frame rate")
    parser.add_argument(
        "--sprite-sheet", default=DEFAULT_SPRITE_SHEET, help="path of the sprite sheet"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game until the window is closed or Escape is pressed."""
    args = _parse_args(argv)

    try:
        pygame.init()
        flags = 0 if args.windowed else pygame.FULLSCREEN
        screen = pygame.display.set_mode((Screen.WIDTH, Screen.HEIGHT), flags, 32)
    except pygame.error as error:
        print(f"cannot open the display: {error}", file=sys.stderr)
        pygame.quit()
        return -1

    if args.windowed:
        pygame.display.set_caption(Game.TITLE)

    renderer = PygameRenderer(screen)
    frame_timer = FrameTimer(TARGET_FPS)
    game = Game(sheet=_load_sheet(args.sprite_sheet))

    pygame.mouse.set_visible(False)
    game.initialize()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        if not running or pygame.key.get_pressed()[pygame.K_ESCAPE]:
            break

        frame_timer.update()
        if frame_timer.is_update_frame:
            game.update(frame_timer.elapsed_time, _read_input())
        game.render(renderer)

        if args.show_fps:
            draw_frame_rate(renderer, 10, 10, Colors.WHITE, frame_timer.frame_rate)

        pygame.display.flip()
        screen.fill((0, 0, 0))

    game.finalize()
    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())