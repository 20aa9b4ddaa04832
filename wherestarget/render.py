"""Drawing interface and the sprite-sheet number display."""

from __future__ import annotations

from typing import Any, Protocol, Tuple

from wherestarget.gamemath import Rect


class Renderer(Protocol):
    """Something that can draw sprites, boxes and text."""

    def draw_sprite(self, dest: Rect, source: Rect, sheet: Any) -> None:
        """Draw the ``source`` area of ``sheet`` stretched over ``dest``."""

    def draw_box(self, rect: Rect, color: int) -> None:
        """Draw the outline of ``rect`` in an 0xAARRGGBB colour."""

    def draw_text(self, x: int, y: int, text: str, color: int) -> None:
        """Draw ``text`` with its top-left corner at (x, y)."""


def _truncating_divmod(number: int, base: int) -> Tuple[int, int]:
    quotient = abs(number) // base
    if number < 0:
        quotient = -quotient
    return quotient, number - quotient * base


class NumberRenderer:
    """Draws a number right-aligned in a fixed count of digits."""

    NUMBER_WIDTH = 16
    NUMBER_HEIGHT = 24
    SHEET_ROW = 48

    def __init__(
        self, position: Tuple[int, int], digit: int, zero_padding: bool = False
    ) -> None:
        self.position = position
        self.digit = digit
        self.zero_padding = zero_padding
        self.max = 10**digit - 1
        self.number = 0
        self.width = self.NUMBER_WIDTH
        self.height = self.NUMBER_HEIGHT

    def set_size(self, width: int, height: int) -> None:
        """Set the on-screen size of each digit."""
        self.width = width
        self.height = height

    def render(self, renderer: Renderer, sheet: Any) -> None:
        """Draw the number, clamped to the largest value that fits."""
        number = min(self.number, self.max)
        x, y = self.position
        for place in range(self.digit):
            offset_x = (self.digit - place - 1) * self.width
            number, figure = _truncating_divmod(number, 10)
            source_x = figure * self.NUMBER_WIDTH
            renderer.draw_sprite(
                Rect(x + offset_x, y, x + offset_x + self.width, y + self.height),
                Rect(
                    source_x,
                    self.SHEET_ROW,
                    source_x + self.NUMBER_WIDTH,
                    self.SHEET_ROW + self.NUMBER_HEIGHT,
                ),
                sheet,
            )
            if number == 0 and not self.zero_padding:
                break