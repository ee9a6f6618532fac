# gnengine

A small 2D game engine built on pygame.

## What it contains

- `gnengine.events`: event dataclasses. These cover the window (`WindowCloseEvent`,
  `WindowResizeEvent`), the keyboard (`KeyPressedEvent`, `KeyRepeatEvent`,
  `KeyReleasedEvent`, `KeysHeldEvent` with a list of `KeyHeldInfo`) and the mouse
  (`MouseMovedEvent`, `MouseScrolledEvent`, `MouseButtonPressedEvent`,
  `MouseButtonReleasedEvent`). There is also a `TestEvent` that carries a message.
  Every event has a `handled` flag, which can only be set by keyword. `KeyEvent` and
  `MouseButtonEvent` are base classes and raise `TypeError` if you create them directly.
- `gnengine.event_manager`:
  - `EventManager` keeps callbacks for each event type. `subscribe(event_type, callback)`
    returns an integer id, and `unsubscribe(event_type, subscription_id)` removes it.
    `dispatch(event)` calls the subscribers of exactly `type(event)`, in the order they
    subscribed. `init()` clears all subscriptions and starts the ids again from 0.
  - `EventListenerComponent` holds at most one listener per event type.
    `add_listener` replaces any earlier listener for that type. `remove_listener` takes
    one listener away, and `close()` unsubscribes all of them. It can also be used as a
    context manager.
- `gnengine.input_manager`: `InputManager(event_manager, key_state_source=None, clock=None)`.
  `event_processing(events=None)` turns pygame events into engine events. It reads the
  pygame queue when no events are passed in, and returns `False` on quit or window close.
  A key held down produces only one `KeyPressedEvent`, and the time of the press is
  recorded. `update_key_states()` stores the frame's key snapshot. While any key is down,
  it also dispatches a `KeysHeldEvent` listing the keys in scancode order, each with its
  held duration in milliseconds. `is_key_pressed`, `is_key_down` and `is_key_up` take a
  scancode. By default the key states come from `pygame.key.get_pressed()` and the time
  comes from `pygame.time.get_ticks()`.
- `gnengine.texture`: `Texture`, which holds a surface together with its width and height.
- `gnengine.render_manager`: `RenderManager`.
  - `init(screen)` attaches the surface to draw on.
  - `clear()` fills it with black.
  - `present()` flips the display, and only when the screen is the display surface.
  - `render_texture(texture, x, y, w=0, h=0)` draws a texture. If `w` or `h` is 0 the
    texture is drawn at its own size; otherwise it is scaled. Problems are logged, not raised.
- `gnengine.texture_manager`: `TextureManager(asset_root="")`.
  - `load_texture(file_path)` loads `bmp`, `png`, `jpg`, `jpeg` or `gif` files from under
    `asset_root`, and caches them by path. It returns `False` on failure, and also when
    `init(screen)` has not been called.
  - `get_texture(file_path)` returns the cached texture, or `None`.
- `gnengine.text`: `Text(screen, font, text, color)`. It raises `ValueError` when the
  screen or font is `None`. It re-renders itself on `set_text` and `set_color`, and exposes
  `text`, `color`, `surface`, `width` and `height`. `render(x, y)` blits it to the screen.
- `gnengine.text_manager`: `TextManager(screen)`. `load_font(font_id, file_path, font_size)`
  loads a font under an id. `create_text(font_id, text, color)` returns a `Text`, or
  `None` when the font id is unknown.
- `gnengine.objects`:
  - `TestObject` and `BlankObject` listen for key events. They print the name and scancode
    of each key pressed or released. They move 5 and 0.5 pixels per frame respectively for
    each held W, A, S or D key. `update()` draws `example_png.png` at their position, if
    that file loaded.
  - `TextObject(text, x, y)` draws a `Text` at a position that can be changed.
- `gnengine.scene`: the abstract `Scene` base class, with `on_enter`, `on_exit`,
  `handle_event`, `update` and `render`. It also provides `MainMenuScene`, which tracks
  `active`, the `elapsed` time while active, and `start_requested`; Enter sets
  `start_requested`. The menu prints a line on enter and exit, and fills the screen
  black when rendered.
- `gnengine.application`: `Application` and `main()`.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Running the demo

```
gnengine
```

This opens a resizable 1280×720 window titled "Text main callback", capped at 60 frames
per second. It tries to load two files from the current directory:

- the font `CookieRun Regular.ttf` (size 24), used to show "Hello, GNEngine!" at (100, 100);
- the image `example_png.png`, shown as a sprite that W, A, S and D move.

If either file is missing, the error is logged and that item is simply not drawn. Close
the window to quit. From code, `Application(image_asset_root=..., font_asset_root=...)`
lets you point at other asset directories. Call `init()`, `run()` and `quit()` on it.

## Using the event bus

```python
from gnengine.event_manager import EventManager, EventListenerComponent
from gnengine.events import KeyPressedEvent

manager = EventManager()
with EventListenerComponent(manager) as listener:
    listener.add_listener(KeyPressedEvent, lambda e: print("pressed", e.key_code))
    manager.dispatch(KeyPressedEvent(4))
# leaving the block unsubscribes everything the component registered
```

## What it does not do

- There is no scene manager. Scenes must be entered, updated, rendered and switched by your own code.
- There is no sprite animation. Textures are single still images.