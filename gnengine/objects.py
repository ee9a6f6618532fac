"""Simple game objects: key-driven sprites and positioned text."""

from __future__ import annotations

import functools
import logging

import pygame

from gnengine.event_manager import EventListenerComponent, EventManager
from gnengine.events import KeyPressedEvent, KeyReleasedEvent, KeysHeldEvent
from gnengine.render_manager import RenderManager
from gnengine.text import ColorLike, Text
from gnengine.texture import Texture
from gnengine.texture_manager import TextureManager

logger = logging.getLogger(__name__)

TEXTURE_FILE = "example_png.png"
START_POSITION = (100.0, 100.0)

_DIRECTIONS = {
    pygame.KSCAN_W: (0.0, -1.0),
    pygame.KSCAN_S: (0.0, 1.0),
    pygame.KSCAN_A: (-1.0, 0.0),
    pygame.KSCAN_D: (1.0, 0.0),
}


@functools.lru_cache(maxsize=None)
def _scancode_names() -> dict[int, str]:
    prefix = "KSCAN_"
    names: dict[int, str] = {}
    for attribute in dir(pygame):
        if attribute.startswith(prefix):
            names.setdefault(getattr(pygame, attribute), attribute[len(prefix):])
    return names


def _scancode_name(scancode: int) -> str:
    return _scancode_names().get(scancode, "")


def _announce(action: str, key_code: int) -> None:
    print(f"Key {action}: {_scancode_name(key_code)} (Scancode: {key_code})")


def _step(event: KeysHeldEvent, speed: float) -> tuple[float, float]:
    """Total displacement for the held direction keys at the given speed."""
    dx = dy = 0.0
    for info in event.held_keys:
        ux, uy = _DIRECTIONS.get(info.scancode, (0.0, 0.0))
        dx += ux * speed
        dy += uy * speed
    return dx, dy


class _KeyMovingObject:
    """Shared set-up for textured objects that follow the direction keys."""

    move_speed: float = 0.0

    def __init__(
        self,
        event_manager: EventManager,
        texture_manager: TextureManager,
        render_manager: RenderManager,
    ) -> None:
        self._listener = EventListenerComponent(event_manager)
        self._texture_manager = texture_manager
        self._render_manager = render_manager
        self.x, self.y = START_POSITION
        self.texture: Texture | None = None

        self._listener.add_listener(KeyPressedEvent, self.on_press_event)
        self._listener.add_listener(KeyReleasedEvent, self.on_release_event)
        self._listener.add_listener(KeysHeldEvent, self.on_keys_held_event)

        if texture_manager.load_texture(TEXTURE_FILE):
            self.texture = texture_manager.get_texture(TEXTURE_FILE)
        else:
            logger.error("Failed to load texture for %s.", type(self).__name__)

    def on_press_event(self, event: KeyPressedEvent) -> None:
        raise NotImplementedError

    def on_release_event(self, event: KeyReleasedEvent) -> None:
        raise NotImplementedError

    def on_keys_held_event(self, event: KeysHeldEvent) -> None:
        raise NotImplementedError


class TestObject(_KeyMovingObject):
    """Moves five pixels per frame for each held direction key."""

    __test__ = False

    move_speed = 5.0

    def on_press_event(self, event: KeyPressedEvent) -> None:
        """Print the name and scancode of the pressed key."""
        _announce("Pressed", event.key_code)

    def on_release_event(self, event: KeyReleasedEvent) -> None:
        """Print the name and scancode of the released key."""
        _announce("Released", event.key_code)

    def on_keys_held_event(self, event: KeysHeldEvent) -> None:
        """Move by ``move_speed`` for every held W, A, S or D key."""
        dx, dy = _step(event, self.move_speed)
        self.x += dx
        self.y += dy

    def update(self) -> None:
        """Draw the texture at the current position, if it was loaded."""
        if self.texture is not None:
            self._render_manager.render_texture(self.texture, self.x, self.y)


class BlankObject(_KeyMovingObject):
    """Moves half a pixel per frame for each held direction key."""

    move_speed = 0.5

    def on_press_event(self, event: KeyPressedEvent) -> None:
        """Print the name and scancode of the pressed key."""
        _announce("Pressed", event.key_code)

    def on_release_event(self, event: KeyReleasedEvent) -> None:
        """Print the name and scancode of the released key."""
        _announce("Released", event.key_code)

    def on_keys_held_event(self, event: KeysHeldEvent) -> None:
        """Move by ``move_speed`` for every held W, A, S or D key."""
        dx, dy = _step(event, self.move_speed)
        self.x += dx
        self.y += dy

    def update(self) -> None:
        """Draw the texture at the current position, if it was loaded."""
        if self.texture is not None:
            self._render_manager.render_texture(self.texture, self.x, self.y)


class TextObject:
    """Text shown at a position in the game world."""

    def __init__(self, text: Text | None, x: float, y: float) -> None:
        self.text = text
        self.x = x
        self.y = y

    def render(self) -> None:
        """Draw the text at the object's position."""
        if self.text is not None:
            self.text.render(self.x, self.y)

    def set_text(self, new_text: str) -> None:
        """Change the text's content."""
        if self.text is not None:
            self.text.set_text(new_text)

    def set_color(self, new_color: ColorLike) -> None:
        """Change the text's colour."""
        if self.text is not None:
            self.text.set_color(new_color)

    def set_position(self, x: float, y: float) -> None:
        """Move the object to (x, y)."""
        self.x = x
        self.y = y