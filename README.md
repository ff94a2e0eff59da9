# ptsd

Practical tools for simple design: a small library for writing 2D games in
Python. It gives you a window and a frame loop, game objects arranged in a
tree and drawn in z-index order, images, text, frame-based animation,
keyboard and mouse input, background music and sound effects, colours,
logging and a small asset cache.

The package depends on `pygame` and `numpy`. The tests run with `pytest`,
which is available through the `test` extra (`pip install ptsd[test]`).

## The pieces

| Module | What it offers |
| --- | --- |
| `ptsd.config` | `TITLE`, `WINDOW_WIDTH` / `WINDOW_HEIGHT` (1280 × 720), `FPS_CAP` (60, 0 turns the cap off), `DEFAULT_LOG_LEVEL` |
| `ptsd.logger` | `Level`, `init()`, `set_level()`, `get_level()` |
| `ptsd.transform` | `Transform` (translation, rotation in radians, scale), `Matrices`, `convert_to_uniform_buffer_data()` |
| `ptsd.asset_store` | `AssetStore`: load-once caching keyed by file path |
| `ptsd.color` | `Color` with `from_rgb`, `from_hex`, `from_hsl`, `from_hsv`, `from_name`, `to_sdl_color`; the `Colors` palette |
| `ptsd.keycode` | `Keycode`: keyboard scancodes plus `MOUSE_LB`, `MOUSE_MB`, `MOUSE_RB` |
| `ptsd.clock` | `Clock` for elapsed and per-frame delta time; `default_clock()` |
| `ptsd.inputs` | `InputState`: pressed / down / up key queries, cursor, scroll, mouse motion, exit; `default_input()` |
| `ptsd.load_text_file` | `load_text_file()` |
| `ptsd.missing_texture` | The built-in placeholder image: `missing_texture_bytes()`, `missing_texture_surface()`, `decode_base64()`, `decode_base64_length()` |
| `ptsd.drawable` | `Drawable`, the abstract base of everything that can be drawn |
| `ptsd.image` | `Image`, `load_surface()` |
| `ptsd.text` | `Text`: rendered text with a font, size and colour |
| `ptsd.game_object` | `GameObject`: a drawable with a transform, z-index, pivot, visibility and children |
| `ptsd.animation` | `Animation` and its `State` (`PLAY`, `PAUSE`, `COOLDOWN`, `ENDED`) |
| `ptsd.renderer` | `Renderer`: draws a tree of game objects, lowest z-index first |
| `ptsd.audio` | `BGM` (one piece of music at a time), `SFX` (sound effects), `load_music()`, `load_chunk()` |
| `ptsd.context` | `Context`: the window and the frame loop |
| `ptsd.debug_message` | `describe_debug_message()` and `debug_message_callback()` for graphics-driver debug messages |

## A game loop

```python
from ptsd.context import Context
from ptsd.game_object import GameObject
from ptsd.image import Image
from ptsd.inputs import default_input
from ptsd.keycode import Keycode
from ptsd.renderer import Renderer

context = Context.get_instance()
player = GameObject(Image("sprites/player.png"), z_index=5)
root = Renderer([player])
keys = default_input()

while not context.exit:
    context.setup()
    if keys.is_key_pressed(Keycode.RIGHT):
        player.transform.translation[0] += 4
    if keys.is_key_up(Keycode.ESCAPE) or keys.exit_requested:
        context.exit = True
    root.update()
    context.update()

context.close()
```

`Context.get_instance()` creates the shared context on first use (and again
after it has been closed). Creating a context initialises logging, the
display, fonts and the mixer and opens the window; it raises `RuntimeError`
if the video system or the window cannot be set up. A `Context` can also be
built directly, with the keyword options `width`, `height`, `title`, `clock`,
`input_state` and `sleep`, and used as a context manager that closes it on
exit.

Each frame begins with `setup()`, which counts frames (`frame`), and ends with
`update()`, which reads pending events into the input state, shows the frame,
clears the window to black, sleeps so that frames are no shorter than the FPS
cap allows, and advances the clock. `set_window_icon(path)` returns `False`
if the image cannot be read. `close()` stops all sound and shuts the window,
fonts and mixer down; after that, `setup()`, `update()` and `surface` raise
`RuntimeError`.

## Coordinates and transforms

The origin is the centre of the window, with x to the right and y up. A
`Transform` applies translation, then rotation (radians), then scale.
`convert_to_uniform_buffer_data()` turns a transform, the size of what is
drawn and a z-index into the model and projection `Matrices` used for
drawing.

```python
import math
from ptsd.transform import Transform, convert_to_uniform_buffer_data

transform = Transform()
transform.rotation += math.radians(90)
matrices = convert_to_uniform_buffer_data(transform, (64, 64), 5)
```

## Game objects and the renderer

`GameObject(drawable=None, z_index=0.0, pivot=(0, 0), visible=True,
children=None)` has a `transform`, a `drawable`, a `z_index`, a `pivot` (in
pixels from the drawable's centre) and a list of `children`. `draw()` does
nothing when the object is hidden or has no drawable. `scaled_size` is the
drawable's size times the transform's scale and raises `ValueError` without a
drawable. `remove_child()` removes every occurrence of that object.
`copy.copy()` gives a copy that shares the drawable but has its own
transform, pivot and child list.

`Renderer` holds root objects (`add_child`, `add_children`, `remove_child`).
Its `update()` draws every object in the tree, lowest z-index first, so
greater z-indices end up on top. Each object is drawn with its own
transform; a child's transform is not combined with its parent's.

## Images, text and animation

`Image(path)` loads a file once and shares it between all images of the same
path; if it cannot be loaded, the built-in placeholder image is shown
instead. `set_image(path)` switches to another file and `size` is the
image's size in pixels.

`Text(font, size, text, color=Color(127, 127, 127))` renders a string with
the font file at `font`, or pygame's built-in font when `font` is `None`;
`"\n"` starts a new line. It raises `OSError` if the font cannot be opened.
`set_text()` and `set_color()` re-render it.

`Animation(paths, play, interval, looping=True, cooldown=100, *, clock=None)`
shows one image per frame, `interval` milliseconds apart. Frames advance by
whole steps each time the animation is drawn. A looping animation rests for
`cooldown` milliseconds after its last frame and then starts again; a
non-looping one ends on its last frame until `play()` is called, which
starts it over. `pause()` stops a playing or resting animation.
`set_current_frame(index)` jumps to a frame (raising `IndexError` when out of
range); done while ended or resting, the next `play()` starts from that
frame. `interval` must be positive and `cooldown` not negative, otherwise
`ValueError` is raised; an animation needs at least one frame.

Drawing goes onto the window's display surface; drawing without a window
raises `RuntimeError`.

## Input

`default_input()` is the input state the context updates every frame:

- `is_key_pressed(key)` is true while a key is held;
- `is_key_down(key)` only on the frame it went down;
- `is_key_up(key)` only on the frame it was released.

Mouse buttons use `Keycode.MOUSE_LB`, `MOUSE_MB` and `MOUSE_RB`.
`cursor_position` is relative to the window centre with y up;
`scrolled` and `scroll_distance` report the mouse wheel, `mouse_moving`
mouse motion and `exit_requested` a request to close the window.
`set_cursor_position(pos)` moves the system cursor to `pos` in window pixels
from the top-left corner.

An `InputState` can also be fed by hand: `update(events, mouse_position)`
starts a new frame from a list of pygame events and a raw cursor position,
and `process_event(event)` folds in a single event.

## Colours

```python
from ptsd.color import Color, Colors

white = Color.from_rgb(255, 255, 255)
red = Color.from_name(Colors.RED)
teal = Color.from_hex("008080FF")     # the alpha byte is required
sky = Color.from_hsv(0.55, 0.4, 0.9)
```

`from_rgb` raises `ValueError` for components outside 0–255, and
`from_hex` does the same for a string that does not start with hex digits.
`from_hex` also takes an integer `0xRRGGBBAA`. `to_sdl_color()` returns the
colour as four 8-bit integers, and `str(color)` gives `Color(r,g,b,a)`.

## Time

`default_clock()` is the clock the context advances every frame.
`elapsed_ms()` is the time since the clock was created and `delta_ms` the
time between the last two `update()` calls. A `Clock(counter, frequency)`
can be built with any tick counter, which makes timing easy to control in
tests.

## Audio

`BGM(path)` plays music streamed from disk; only one piece plays at a time,
and all music shares one volume. It offers `play(loop=-1)` (-1 loops
forever), `fade_in(tick, loop=-1)`, `fade_out(tick)`, `pause()`, `resume()`,
`load_media(path)`, and a `volume` property from 0 to 128 with
`volume_up()` / `volume_down()`. If the file cannot be read, `music` is
`None` and playing does nothing.

`SFX(path)` holds a short sound in memory, with `play(loop=0, duration=-1)`,
`fade_in(tick, loop=-1, duration=-1)`, `load_media(path)` and the same volume
controls; its `volume` is -1 when nothing could be loaded. Files are loaded
once and shared.

## Caching assets

```python
from ptsd.asset_store import AssetStore

def read_bytes(path):
    with open(path, "rb") as stream:
        return stream.read()

store = AssetStore(read_bytes)
store.load("sprites/cat-0.bmp")        # optional preload
data = store.get("sprites/cat-0.bmp")  # loaded once, then served from the cache
store.remove("sprites/cat-0.bmp")      # no error if it was never loaded
```

## Logging and files

`logger.init()` sends the framework's messages (logger name `ptsd`) to the
console in the form `ptsd [info] message` at the default level;
`set_level(Level.INFO)` and `get_level()` change and read it.
`load_text_file(path)` returns a file's full text and raises `OSError` when
it cannot be opened.

## What it does not do

This is a library only: it installs no command to run. Drawing is done by
scaling and rotating pygame surfaces onto the window; there is no shader
pipeline and no on-screen debugging interface.