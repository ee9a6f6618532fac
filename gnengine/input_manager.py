"""Turns pygame input into engine events and tracks key state."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

import pygame

from gnengine.event_manager import EventManager
from gnengine.events import (
    KeyHeldInfo,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeysHeldEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)

SCANCODE_COUNT = 512

KeyStateSource = Callable[[], Sequence[bool]]


def _pygame_key_states() -> Sequence[bool]:
    # Iterating the wrapper yields the raw states in scancode order.
    return tuple(pygame.key.get_pressed())


class InputManager:
    """Dispatches input events and answers key-state queries by scancode.

    ``key_state_source`` returns the live keyboard state indexed by scancode;
    ``clock`` returns the current time in milliseconds.
    """

    def __init__(
        self,
        event_manager: EventManager,
        key_state_source: KeyStateSource | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._event_manager = event_manager
        self._key_state_source = key_state_source or _pygame_key_states
        self._clock = clock or pygame.time.get_ticks
        self._previous_key_states: tuple[bool, ...] = (False,) * SCANCODE_COUNT
        self._pressed_keys: set[int] = set()
        self._key_press_times: dict[int, int] = {}

    def _snapshot(self) -> tuple[bool, ...]:
        return tuple(bool(state) for state in self._key_state_source())

    def init(self) -> bool:
        """Take the initial key-state snapshot."""
        self._previous_key_states = self._snapshot()
        return True

    def update_key_states(self) -> None:
        """Remember this frame's key states and dispatch the held keys, if any."""
        self._previous_key_states = self._snapshot()
        if not self._pressed_keys:
            return
        now = self._clock()
        held = [
            KeyHeldInfo(
                scancode,
                now - self._key_press_times[scancode]
                if scancode in self._key_press_times
                else 0,
            )
            for scancode in sorted(self._pressed_keys)
        ]
        self._event_manager.dispatch(KeysHeldEvent(held))

    def event_processing(self, events: Iterable[pygame.event.Event] | None = None) -> bool:
        """Dispatch pending events; return False once the window should close.

        Reads from the pygame event queue when ``events`` is not given.
        """
        if events is None:
            events = pygame.event.get()
        dispatch = self._event_manager.dispatch
        for event in events:
            match event.type:
                case pygame.QUIT | pygame.WINDOWCLOSE:
                    dispatch(WindowCloseEvent())
                    return False
                case pygame.KEYDOWN:
                    scancode = event.scancode
                    if scancode not in self._key_press_times:
                        dispatch(KeyPressedEvent(scancode))
                        self._key_press_times[scancode] = self._clock()
                        self._pressed_keys.add(scancode)
                case pygame.KEYUP:
                    scancode = event.scancode
                    dispatch(KeyReleasedEvent(scancode))
                    self._pressed_keys.discard(scancode)
                    self._key_press_times.pop(scancode, None)
                case pygame.WINDOWRESIZED:
                    dispatch(WindowResizeEvent(event.x, event.y))
                case pygame.MOUSEMOTION:
                    x, y = event.pos
                    dispatch(MouseMovedEvent(float(x), float(y)))
                case pygame.MOUSEWHEEL:
                    dispatch(MouseScrolledEvent(float(event.x), float(event.y)))
                case pygame.MOUSEBUTTONDOWN:
                    dispatch(MouseButtonPressedEvent(event.button))
                case pygame.MOUSEBUTTONUP:
                    dispatch(MouseButtonReleasedEvent(event.button))
                case _:
                    pass
        return True

    def is_key_pressed(self, key: int) -> bool:
        """Whether the key is down right now."""
        return bool(self._key_state_source()[key])

    def is_key_down(self, key: int) -> bool:
        """Whether the key went down since the last update."""
        return bool(self._key_state_source()[key]) and not self._previous_key_states[key]

    def is_key_up(self, key: int) -> bool:
        """Whether the key was released since the last update."""
        return not self._key_state_source()[key] and self._previous_key_states[key]