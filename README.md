# Where's Target?

A small arcade game. A target wanders around the screen, turning a little at
random every frame and bouncing off the edges. Move the crosshair with the
mouse and hold or click the left button to fire: an impact effect appears
under the crosshair, and if it overlaps the target, the target is down and the
game moves to the game-over screen.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window and reads the mouse and keyboard.

## Playing

```
wherestarget
```

- **Space** on the title screen starts a round.
- **Mouse** moves the crosshair; **left button** shoots.
- Once the target is hit the game-over screen appears; **Space** starts a new round.
- **Escape**, or closing the window, quits.

Options:

- `--windowed` runs in a 1280 × 720 window titled "Where's Target?" instead of
  full screen.
- `--show-fps` draws the frame rate in the top-left corner.
- `--sprite-sheet PATH` sets the image the artwork is cut from; the default is
  `Resources/Textures/Where's_Target.png` relative to the working directory.

The game updates at a fixed 60 frames per second. The command exits with
status 0 when the game ends normally and -1 when the display cannot be opened.

## What it does not do

The sprite sheet is not shipped with the package. If it cannot be loaded the
game still runs, but the target, crosshair and impact effect are not drawn;
only the scene captions and the outline boxes of the target and the impact
area appear. There is no score, timer, sound or saved state: the game-over
screen shows only its caption, and the round cannot be lost.

## Using the pieces

The game logic does not depend on a window and can be driven directly:

- `wherestarget.gamemath` — `Vector2D`, `Rect` (with `intersection` and
  `intersects`), `Screen`, and the helpers `dot`, `cross`, `length`,
  `normalize`, `to_degrees`, `to_radians`, `normalize_angle_pi`,
  `normalize_angle_2pi`.
- `wherestarget.frametimer` — `FrameTimer`, a fixed- or variable-rate frame
  clock that accepts any microsecond clock function, plus the `Colors` palette.
- `wherestarget.render` — the `Renderer` drawing protocol (`draw_sprite`,
  `draw_box`, `draw_text`) and `NumberRenderer`, which draws a right-aligned
  number from sprite-sheet digits.
- `wherestarget.entities` — `Target`, `Aim` and `PointOfImpact`.
- `wherestarget.scenes` — `Game`, `TitleScene`, `GamePlayScene`,
  `GameOverScene`, `SceneID` and `InputState`.
- `wherestarget.app` — `PygameRenderer`, `draw_frame_rate` and `main`.

For example, a `Game` can be stepped with made-up input:

```python
import random
from wherestarget.scenes import Game, InputState, KEY_SPACE, SceneID

game = Game(rng=random.Random(1))
game.initialize()
game.update(1 / 60, InputState(keys=KEY_SPACE))  # space pressed on the title
game.update(1 / 60, InputState())                 # scene switch happens here
assert game.current_scene_id is SceneID.GAMEPLAY
```

## Running the tests

```
pip install .[test]
pytest
```