# shootemup

A small side-scrolling shoot 'em up built on pygame. You fly a ship around a
960×544 window titled "Shooter 01" and fire bullets to the right. The package
also ships two small display demos: one opens a white window, the other draws
a sprite.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Playing

```
shootemup [--assets DIR]
```

The game loads `personaje.png` (the player) and `bala.png` (bullets) from the
assets directory given by `--assets`. The default is `../assets`, relative to
the current directory. If the window cannot be opened or an image cannot be
loaded, the command prints the error and exits with status 1.

Controls:

- Arrow keys move the ship 4 pixels per frame. It cannot leave the top or left
  edge, and stops 70 pixels short of the bottom and right edges.
- Left Ctrl fires. Each bullet travels right at 16 pixels per frame. After a
  shot the gun takes 8 frames to reload. Bullets are removed once they pass the
  right edge of the window.
- Close the window to quit.

The loop waits between frames so that it runs at about 60 frames per second.

## Demos

```
shootemup-window
```

Opens a full-screen window filled with white and waits until it is closed.

```
shootemup-sprite [IMAGE]
```

Opens a 960×544 window titled "SDL Test" and draws an image on black, scaled
to one sixth of its size. The image is `personaje.png` in the current
directory unless another file is given. It is placed at the centre of a
1000×1000 area whose top-left corner is the window's top-left corner, so on a
960×544 window it sits low and to the right. If the image cannot be loaded, the
command prints the error and exits with status 2. The window stays open until
it is closed.

## Using the pieces

The game logic does not need a display, so you can drive it from code:

- `shootemup.entities` holds the screen size and speed constants and `Entity`,
  a game object with a position, velocity, size, health, reload counter and
  texture. `Entity.move()` advances it by one frame of its velocity.
- `shootemup.input.InputState` tracks which keys are held down, by scancode.
  `key_down` and `key_up` ignore auto-repeats and scancodes of 350 or more.
  `handle_event` takes one pygame event, `poll` drains the pygame event queue,
  and `should_close` turns true once a quit event has been seen. `scancode in
  state` works like `state.pressed(scancode)`.
- `shootemup.stage.Stage` holds the player and the live bullets.
  `Stage.logic(keys)` advances one frame from any container of held scancodes,
  `Stage.fire_bullet()` launches a bullet, and `Stage.draw(target)` draws the
  player and bullets onto a surface. `load_stage(asset_dir)` builds a stage
  from an assets directory.
- `shootemup.draw` has the rendering helpers: `load_texture` (raises
  `FileNotFoundError` for a missing file and `ValueError` for one that cannot
  be decoded), `blit`, `prepare_scene` (clears to the background colour) and
  `present_scene`.
- `shootemup.app.FrameLimiter` works out how long to wait between frames;
  `next_wait(now)` returns the wait in milliseconds without sleeping.
  `init_display()` opens the game window and raises `RuntimeError` on failure.
- `shootemup.demos.sprite_destination(width, height)` gives the rectangle where
  the sprite demo draws its image.

## What it does not do

The game is only a moving ship and its bullets. There are no enemies, no
collisions, no health loss, no score and no levels; nothing is saved between
runs, and there is no sound.