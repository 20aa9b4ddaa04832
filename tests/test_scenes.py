import random

import pytest

from wherestarget.frametimer import Colors
from wherestarget.gamemath import Screen, Vector2D
from wherestarget.entities import Target
from wherestarget.scenes import (
    KEY_SPACE,
    Game,
    GameOverScene,
    GamePlayScene,
    InputState,
    SceneID,
    TitleScene,
)


class RecordingRenderer:
    def __init__(self):
        self.sprites = []
        self.boxes = []
        self.texts = []

    def draw_sprite(self, dest, source, sheet):
        self.sprites.append((dest, source, sheet))

    def draw_box(self, rect, color):
        self.boxes.append((rect, color))

    def draw_text(self, x, y, text, color):
        self.texts.append((x, y, text, color))


class FakeHost:
    def __init__(self, seed=0):
        self.rng = random.Random(seed)
        self.sheet = "sheet"
        self.requests = []

    def request_scene_change(self, scene_id):
        self.requests.append(scene_id)


def new_game(seed=1):
    game = Game(rng=random.Random(seed), sheet="sheet")
    game.initialize()
    return game


def test_game_starts_at_title():
    game = new_game()
    assert game.current_scene_id is SceneID.TITLE
    assert game.requested_scene_id is SceneID.NONE


def test_title_space_trigger_requests_gameplay():
    host = FakeHost()
    scene = TitleScene(host)
    scene.update(InputState(), 0)
    assert host.requests == []
    scene.update(InputState(keys=KEY_SPACE), KEY_SPACE)
    assert host.requests == [SceneID.GAMEPLAY]


def test_gameover_space_trigger_requests_gameplay():
    host = FakeHost()
    scene = GameOverScene(host)
    scene.update(InputState(keys=KEY_SPACE), 0)
    assert host.requests == []
    scene.update(InputState(keys=KEY_SPACE), KEY_SPACE)
    assert host.requests == [SceneID.GAMEPLAY]


def test_scene_change_happens_on_next_update():
    game = new_game()
    game.update(0.0, InputState(keys=KEY_SPACE))
    assert game.current_scene_id is SceneID.TITLE
    assert game.requested_scene_id is SceneID.GAMEPLAY
    game.update(0.0, InputState())
    assert game.current_scene_id is SceneID.GAMEPLAY
    assert game.requested_scene_id is SceneID.NONE


def test_held_key_does_not_retrigger():
    game = new_game()
    game.update(0.0, InputState(keys=KEY_SPACE))
    game.update(0.0, InputState(keys=KEY_SPACE))
    assert game.current_scene_id is SceneID.GAMEPLAY
    # Space is still held but has not been newly pressed.
    game.update(0.0, InputState(keys=KEY_SPACE))
    assert game.requested_scene_id is SceneID.NONE


@pytest.mark.parametrize("seed", range(20))
def test_gameplay_places_target_on_screen(seed):
    host = FakeHost(seed)
    scene = GamePlayScene(host)
    scene.initialize()
    box = scene.target.bounding_box
    assert scene.target.is_active
    assert 0 <= box.left and box.right <= Screen.WIDTH
    assert 0 <= box.top and box.bottom <= Screen.HEIGHT
    centre = scene.aim.center_position
    assert (centre.x, centre.y) == (Screen.CENTER_X, Screen.CENTER_Y)


def test_gameplay_hit_clears_round():
    host = FakeHost()
    scene = GamePlayScene(host)
    scene.initialize()
    scene.target.initialize(Vector2D(600.0, 300.0))
    half = Target.SIZE // 2
    scene.update(InputState(mouse_x=600 + half, mouse_y=300 + half, left_pressed=True), 0)
    assert not scene.target.is_active
    assert host.requests == [SceneID.GAMEOVER]


def test_gameplay_miss_keeps_playing():
    host = FakeHost()
    scene = GamePlayScene(host)
    scene.initialize()
    scene.target.initialize(Vector2D(600.0, 300.0))
    scene.update(InputState(mouse_x=50, mouse_y=50, left_pressed=True), 0)
    assert scene.target.is_active
    assert host.requests == []


def test_gameplay_without_click_does_not_hit():
    host = FakeHost()
    scene = GamePlayScene(host)
    scene.initialize()
    scene.target.initialize(Vector2D(600.0, 300.0))
    scene.update(InputState(mouse_x=632, mouse_y=332), 0)
    assert scene.target.is_active
    assert host.requests == []


def test_gameplay_render_draws_target_box_and_caption():
    host = FakeHost()
    scene = GamePlayScene(host)
    scene.initialize()
    renderer = RecordingRenderer()
    scene.render(renderer)
    assert (scene.target.bounding_box, Colors.RED) in renderer.boxes
    assert (10, 30, "ゲームプレイシーン", Colors.WHITE) in renderer.texts
    assert all(sheet == "sheet" for _, _, sheet in renderer.sprites)
    assert renderer.sprites


def test_game_renders_current_scene_caption():
    game = new_game()
    renderer = RecordingRenderer()
    game.render(renderer)
    assert renderer.texts == [(10, 30, "Titleシーン", Colors.WHITE)]


def test_gameover_render_caption():
    renderer = RecordingRenderer()
    GameOverScene(FakeHost()).render(renderer)
    assert renderer.texts == [(10, 30, "GameOverシーン", Colors.WHITE)]


def test_full_round_trip_through_scenes():
    game = new_game()
    game.update(0.0, InputState(keys=KEY_SPACE))
    game.update(0.0, InputState())
    assert game.current_scene_id is SceneID.GAMEPLAY

    game.gameplay_scene.target.initialize(Vector2D(600.0, 300.0))
    game.update(0.0, InputState(mouse_x=632, mouse_y=332, left_pressed=True))
    assert game.requested_scene_id is SceneID.GAMEOVER
    game.update(0.0, InputState())
    assert game.current_scene_id is SceneID.GAMEOVER

    game.update(0.0, InputState(keys=KEY_SPACE))
    game.update(0.0, InputState())
    assert game.current_scene_id is SceneID.GAMEPLAY


def test_request_scene_change_accepts_plain_value():
    game = new_game()
    game.request_scene_change(int(SceneID.GAMEOVER))
    assert game.requested_scene_id is SceneID.GAMEOVER
    with pytest.raises(ValueError):
        game.request_scene_change(7)