"""Event types passed through the engine's event manager."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Event:
    """Base of every engine event.

    A listener may set ``handled`` once it has dealt with the event.
    """

    handled: bool = field(default=False, kw_only=True)


@dataclass
class TestEvent(Event):
    """A simple event carrying a message, used for trying out listeners."""

    __test__ = False

    message: str


# --- Window events ---


@dataclass
class WindowCloseEvent(Event):
    """Sent when the window is closed."""


@dataclass
class WindowResizeEvent(Event):
    """Sent when the window is resized."""

    width: int
    height: int


# --- Keyboard events ---


@dataclass
class KeyEvent(Event):
    """Base of keyboard events; not meant to be created directly."""

    key_code: int

    def __post_init__(self) -> None:
        if type(self) is KeyEvent:
            raise TypeError("KeyEvent cannot be instantiated directly")


@dataclass
class KeyPressedEvent(KeyEvent):
    """Sent when a key goes down."""


@dataclass
class KeyRepeatEvent(KeyEvent):
    """Sent while a key is kept down."""

    repeat_time: int


@dataclass
class KeyReleasedEvent(KeyEvent):
    """Sent when a key is released."""


@dataclass(frozen=True)
class KeyHeldInfo:
    """One held key and how long, in milliseconds, it has been down."""

    scancode: int
    duration_ms: int


@dataclass
class KeysHeldEvent(Event):
    """Lists every key held down in the current frame."""

    held_keys: list[KeyHeldInfo]

    def __post_init__(self) -> None:
        self.held_keys = list(self.held_keys)


# --- Mouse events ---


@dataclass
class MouseMovedEvent(Event):
    """Sent when the mouse cursor moves."""

    mouse_x: float
    mouse_y: float


@dataclass
class MouseScrolledEvent(Event):
    """Sent when the mouse wheel scrolls."""

    x_offset: float
    y_offset: float


@dataclass
class MouseButtonEvent(Event):
    """Base of mouse button events; not meant to be created directly."""

    button: int

    def __post_init__(self) -> None:
        if type(self) is MouseButtonEvent:
            raise TypeError("MouseButtonEvent cannot be instantiated directly")


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    """Sent when a mouse button goes down."""


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    """Sent when a mouse button is released."""