"""Scenes: self-contained screens with their own input, logic and drawing."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame

_BACKGROUND = (0, 0, 0)
_START_KEYS = frozenset({pygame.K_RETURN, pygame.K_KP_ENTER})


class Scene(ABC):
    """A screen of the game, entered and left by a scene manager."""

    @abstractmethod
    def on_enter(self) -> None:
        """Called when the scene becomes active."""

    @abstractmethod
    def on_exit(self) -> None:
        """Called when the scene stops being active."""

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> None:
        """Handle one input event."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the scene's logic by ``delta_time`` seconds."""

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Draw the scene on ``screen``."""


class MainMenuScene(Scene):
    """The main menu: tracks whether it is active and whether Enter was pressed."""

    def __init__(self) -> None:
        self.active = False
        self.elapsed = 0.0
        self.start_requested = False

    def on_enter(self) -> None:
        """Activate the menu and reset its state."""
        self.active = True
        self.elapsed = 0.0
        self.start_requested = False
        print("MainMenuScene 진입")

    def on_exit(self) -> None:
        """Deactivate the menu."""
        self.active = False
        print("MainMenuScene 종료")

    def handle_event(self, event: pygame.event.Event) -> None:
        """Pressing Enter requests that the game start."""
        if event.type == pygame.KEYDOWN and getattr(event, "key", None) in _START_KEYS:
            self.start_requested = True

    def update(self, delta_time: float) -> None:
        """Accumulate the time spent in the menu while it is active."""
        if self.active:
            self.elapsed += delta_time

    def render(self, screen: pygame.Surface) -> None:
        """Paint the menu background on ``screen``."""
        screen.fill(_BACKGROUND)