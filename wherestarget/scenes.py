"""The game's scenes and the scene manager that switches between them."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional, Protocol, Union

from wherestarget.entities import Aim, Target
from wherestarget.frametimer import Colors
from wherestarget.gamemath import Screen, Vector2D
from wherestarget.render import Renderer

KEY_SPACE = 0x200
"""Bit set in ``InputState.keys`` while the space key is held."""


class SceneID(IntEnum):
    """Identifies a scene of the game."""

    NONE = -1
    TITLE = 0
    GAMEPLAY = 1
    GAMEOVER = 2


@dataclass(frozen=True)
class InputState:
    """The player's input sampled for one frame."""

    keys: int = 0
    mouse_x: int = 0
    mouse_y: int = 0
    left_pressed: bool = False


class _SceneHost(Protocol):
    rng: random.Random
    sheet: Any

    def request_scene_change(self, scene_id: SceneID) -> None:
        """Ask for a change of scene at the start of the next update."""


class TitleScene:
    """The title screen; space starts a game."""

    def __init__(self, game: _SceneHost) -> None:
        self._game = game
        self.active = False

    def initialize(self) -> None:
        """Enter the scene."""
        self.active = True

    def update(self, input_state: InputState, key_trigger: int) -> None:
        """Start a game when space has just been pressed."""
        if key_trigger & KEY_SPACE:
            self._game.request_scene_change(SceneID.GAMEPLAY)

    def render(self, renderer: Renderer) -> None:
        """Draw the scene's caption."""
        renderer.draw_text(10, 30, "Titleシーン", Colors.WHITE)

    def finalize(self) -> None:
        """Leave the scene."""
        self.active = False


class GamePlayScene:
    """The round itself: shoot the wandering target."""

    FONT_SIZE = 50
    GAMEOVER = "Game Over"
    GAMECLEAR = "Game Clear"

    def __init__(self, game: _SceneHost) -> None:
        self._game = game
        self.aim = Aim()
        self.target = Target(game.rng)

    def initialize(self) -> None:
        """Centre the cursor and drop the target at a random spot."""
        self.aim.initialize(Vector2D(float(Screen.CENTER_X), float(Screen.CENTER_Y)))
        rng = self._game.rng
        position = Vector2D(
            float(rng.randint(0, Screen.WIDTH - Target.SIZE)),
            float(rng.randint(0, Screen.HEIGHT - Target.SIZE)),
        )
        self.target.initialize(position)

    def update(self, input_state: InputState, key_trigger: int) -> None:
        """Move the target and cursor, resolve shots and check for the end."""
        self.target.update()
        self.aim.update(input_state.mouse_x, input_state.mouse_y, input_state.left_pressed)
        self._check_target_hit()

        if self._is_game_clear() or self._is_game_over():
            self._game.request_scene_change(SceneID.GAMEOVER)

    def render(self, renderer: Renderer) -> None:
        """Draw the target, its hit box, the cursor and the caption."""
        sheet = self._game.sheet
        self.target.render(renderer, sheet)
        renderer.draw_box(self.target.bounding_box, Colors.RED)
        self.aim.render(renderer, sheet)
        renderer.draw_text(10, 30, "ゲームプレイシーン", Colors.WHITE)

    def finalize(self) -> None:
        """Finish the round."""
        self.target.finalize()
        self.aim.finalize()

    def _is_game_clear(self) -> bool:
        return not self.target.is_active

    def _is_game_over(self) -> bool:
        return False

    def _check_target_hit(self) -> None:
        impact = self.aim.point_of_impact
        if not impact.is_active or not self.target.is_active:
            return
        if impact.bounding_box.intersects(self.target.bounding_box):
            self.target.on_hit()


class GameOverScene:
    """The end-of-round screen; space plays again."""

    def __init__(self, game: _SceneHost) -> None:
        self._game = game
        self.active = False

    def initialize(self) -> None:
        """Enter the scene."""
        self.active = True

    def update(self, input_state: InputState, key_trigger: int) -> None:
        """Start a new round when space has just been pressed."""
        if key_trigger & KEY_SPACE:
            self._game.request_scene_change(SceneID.GAMEPLAY)

    def render(self, renderer: Renderer) -> None:
        """Draw the scene's caption."""
        renderer.draw_text(10, 30, "GameOverシーン", Colors.WHITE)

    def finalize(self) -> None:
        """Leave the scene."""
        self.active = False


_Scene = Union[TitleScene, GamePlayScene, GameOverScene]


class Game:
    """Owns the scenes, tracks input edges and switches scenes on request."""

    TITLE = "Where's Target?"

    def __init__(self, rng: Optional[random.Random] = None, sheet: Any = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.sheet = sheet
        self._key = 0
        self._old_key = 0
        self._current_scene_id = SceneID.NONE
        self._requested_scene_id = SceneID.NONE
        self.title_scene = TitleScene(self)
        self.gameplay_scene = GamePlayScene(self)
        self.gameover_scene = GameOverScene(self)
        self._scenes: Dict[SceneID, _Scene] = {
            SceneID.TITLE: self.title_scene,
            SceneID.GAMEPLAY: self.gameplay_scene,
            SceneID.GAMEOVER: self.gameover_scene,
        }

    @property
    def current_scene_id(self) -> SceneID:
        """The scene now running."""
        return self._current_scene_id

    @property
    def requested_scene_id(self) -> SceneID:
        """The scene waiting to be switched to, or NONE."""
        return self._requested_scene_id

    def _current_scene(self) -> Optional[_Scene]:
        return self._scenes.get(self._current_scene_id)

    def initialize(self) -> None:
        """Start at the title screen."""
        self._set_start_scene(SceneID.TITLE)

    def update(self, elapsed_time: float, input_state: InputState) -> None:
        """Advance one game step with this frame's input."""
        self._old_key = self._key
        self._key = input_state.keys
        key_trigger = ~self._old_key & self._key

        if self._requested_scene_id is not SceneID.NONE:
            self._change_scene()

        scene = self._current_scene()
        if scene is not None:
            scene.update(input_state, key_trigger)

    def render(self, renderer: Renderer) -> None:
        """Draw the current scene."""
        scene = self._current_scene()
        if scene is not None:
            scene.render(renderer)

    def finalize(self) -> None:
        """Shut down the current scene."""
        scene = self._current_scene()
        if scene is not None:
            scene.finalize()

    def request_scene_change(self, scene_id: SceneID) -> None:
        """Switch to ``scene_id`` at the start of the next update."""
        self._requested_scene_id = SceneID(scene_id)

    def _set_start_scene(self, scene_id: SceneID) -> None:
        self._current_scene_id = scene_id
        scene = self._current_scene()
        if scene is not None:
            scene.initialize()

    def _change_scene(self) -> None:
        scene = self._current_scene()
        if scene is not None:
            scene.finalize()
        self._current_scene_id = self._requested_scene_id
        scene = self._current_scene()
        if scene is not None:
            scene.initialize()
        self._requested_scene_id = SceneID.NONE