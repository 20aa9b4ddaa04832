"""The moving target, the aiming cursor and its point-of-impact effect."""

from __future__ import annotations

import math
import random
from enum import IntEnum
from typing import Any, Optional, Tuple

from wherestarget.frametimer import Colors
from wherestarget.gamemath import Rect, Screen, Vector2D
from wherestarget.render import Renderer

_PI = 3.1415926


class _AnimationState(IntEnum):
    NONE = -1
    ANIM01 = 0
    ANIM02 = 1
    ANIM03 = 2
    ANIM04 = 3


class PointOfImpact:
    """A short four-frame animation shown where a shot lands."""

    ANIMATION_INTERVAL = 4
    SIZE = 32
    FRAME_SIZE = 16
    FRAMES: Tuple[Tuple[int, int], ...] = (
        (0 + 16 * 0, 152),
        (0 + 16 * 1, 152),
        (0 + 16 * 2, 152),
        (0 + 16 * 3, 152),
    )

    def __init__(self) -> None:
        self.position = Vector2D()
        self._state = _AnimationState.NONE
        self._counter = 0
        self._is_active = False

    @property
    def is_animating(self) -> bool:
        """Whether an animation is currently playing."""
        return self._state is not _AnimationState.NONE

    def update(self) -> None:
        """Advance the animation, ending it after the last frame."""
        if self._state is _AnimationState.NONE:
            return
        self._counter += 1
        if self._counter > self.ANIMATION_INTERVAL:
            self._counter = 0
            if self._state is _AnimationState.ANIM04:
                self._state = _AnimationState.NONE
            else:
                self._state = _AnimationState(self._state + 1)

    def render(self, renderer: Renderer, sheet: Any) -> None:
        """Draw the current animation frame, if any."""
        if self._state is _AnimationState.NONE:
            return
        source_x, source_y = self.FRAMES[self._state]
        x = int(self.position.x)
        y = int(self.position.y)
        renderer.draw_sprite(
            Rect(x, y, x + self.SIZE, y + self.SIZE),
            Rect(source_x, source_y, source_x + self.FRAME_SIZE, source_y + self.FRAME_SIZE),
            sheet,
        )

    def point_hit(self, position: Vector2D) -> None:
        """Start the animation centred on ``position`` unless one is playing."""
        if self._state is not _AnimationState.NONE:
            return
        half = self.SIZE // 2
        self.position = Vector2D(position.x - half, position.y - half)
        self._counter = 0
        self._state = _AnimationState.ANIM01
        self._is_active = True

    @property
    def bounding_box(self) -> Rect:
        """The area covered by the effect."""
        return Rect(
            int(self.position.x),
            int(self.position.y),
            int(self.position.x + self.SIZE),
            int(self.position.y + self.SIZE),
        )

    @property
    def is_active(self) -> bool:
        """Whether a shot has ever been fired."""
        return self._is_active


class Target:
    """A target wandering around the screen and bouncing off its edges."""

    SIZE = 64
    SPEED = 2

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._is_active = False
        self.position = Vector2D()
        self.velocity = Vector2D()
        self._angle = 0.0

    def _set_velocity(self) -> None:
        self.velocity = Vector2D(
            math.cos(self._angle) * self.SPEED, math.sin(self._angle) * self.SPEED
        )

    def initialize(self, position: Vector2D) -> None:
        """Activate the target at ``position`` heading in a random direction."""
        self._is_active = True
        self.position = Vector2D(position.x, position.y)
        self._angle = self._rng.random() * 2.0 * _PI
        self._set_velocity()

    def update(self) -> None:
        """Turn slightly at random, move, and bounce off the screen edges."""
        if not self._is_active:
            return
        self._angle += (self._rng.random() - 0.5) * 0.6
        self._set_velocity()
        self.position = self.position + self.velocity

        if self.position.x < 0 or self.position.x + self.SIZE > Screen.WIDTH:
            self._angle = _PI - self._angle
        if self.position.y < 0 or self.position.y + self.SIZE > Screen.HEIGHT:
            self._angle = -self._angle

    def render(self, renderer: Renderer, sheet: Any) -> None:
        """Draw the target, or its fallen form once hit."""
        x = int(self.position.x)
        y = int(self.position.y)
        if not self._is_active:
            renderer.draw_sprite(
                Rect(x, y, x + self.SIZE, y + self.SIZE // 2),
                Rect(0, 80, 64, 104),
                sheet,
            )
        else:
            renderer.draw_sprite(
                Rect(x, y, x + self.SIZE // 2, y + self.SIZE),
                Rect(80, 0, 112, 64),
                sheet,
            )

    def finalize(self) -> None:
        """End the round, bringing the target to a standstill."""
        self.velocity = Vector2D()

    def spawn(self, position: Vector2D) -> None:
        """Bring the target into play at ``position``."""
        self.initialize(position)

    @property
    def bounding_box(self) -> Rect:
        """The area the target can be hit in."""
        return Rect(
            int(self.position.x),
            int(self.position.y),
            int(self.position.x + self.SIZE),
            int(self.position.y + self.SIZE),
        )

    @property
    def is_active(self) -> bool:
        """Whether the target is still in play."""
        return self._is_active

    def on_hit(self) -> None:
        """Take the target out of play."""
        self._is_active = False


class Aim:
    """The aiming cursor that follows the mouse and fires on a left click."""

    SIZE = 48.0

    def __init__(self) -> None:
        self.position = Vector2D()
        self.point_of_impact = PointOfImpact()
        self.in_play = False

    def initialize(self, position: Vector2D) -> None:
        """Place the cursor at ``position``."""
        self.position = Vector2D(position.x, position.y)
        self.in_play = True

    def update(self, mouse_x: int, mouse_y: int, left_pressed: bool) -> None:
        """Centre the cursor on the mouse and fire if the left button is down."""
        half = self.SIZE / 2
        self.position = Vector2D(float(mouse_x) - half, float(mouse_y) - half)
        if left_pressed:
            self.point_of_impact.point_hit(self.center_position)
        self.point_of_impact.update()

    def render(self, renderer: Renderer, sheet: Any) -> None:
        """Draw the cursor, the impact effect and the effect's hit box."""
        renderer.draw_sprite(
            Rect(
                int(self.position.x),
                int(self.position.y),
                int(self.position.x + self.SIZE),
                int(self.position.y + self.SIZE),
            ),
            Rect(0, 0, 64, 64),
            sheet,
        )
        self.point_of_impact.render(renderer, sheet)
        renderer.draw_box(self.point_of_impact.bounding_box, Colors.BLUE)

    def finalize(self) -> None:
        """End the round, taking the cursor out of play."""
        self.in_play = False

    @property
    def center_position(self) -> Vector2D:
        """The point the cursor is aiming at."""
        half = self.SIZE / 2
        return Vector2D(self.position.x + half, self.position.y + half)