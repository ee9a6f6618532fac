"""A piece of text rendered with a font, ready to be drawn."""

from __future__ import annotations

from typing import Sequence, Union

import pygame

ColorLike = Union[pygame.Color, Sequence[int]]


class Text:
    """Text in a font and colour, re-rendered whenever either changes."""

    def __init__(
        self,
        screen: pygame.Surface | None,
        font: pygame.font.Font | None,
        text: str,
        color: ColorLike,
    ) -> None:
        if screen is None or font is None:
            raise ValueError("screen or font is None")
        self._screen = screen
        self._font = font
        self._text = text
        self._color = pygame.Color(color)
        self._surface = self._create_surface()

    @property
    def text(self) -> str:
        return self._text

    @property
    def color(self) -> pygame.Color:
        return pygame.Color(self._color)

    @property
    def surface(self) -> pygame.Surface:
        """The rendered text."""
        return self._surface

    @property
    def width(self) -> int:
        return self._surface.get_width()

    @property
    def height(self) -> int:
        return self._surface.get_height()

    def render(self, x: float, y: float) -> None:
        """Draw the text with its top-left corner at (x, y)."""
        self._screen.blit(self._surface, (x, y))

    def set_text(self, new_text: str) -> None:
        """Replace the text and re-render it."""
        self._text = new_text
        self._surface = self._create_surface()

    def set_color(self, new_color: ColorLike) -> None:
        """Replace the colour and re-render the text."""
        self._color = pygame.Color(new_color)
        self._surface = self._create_surface()

    def _create_surface(self) -> pygame.Surface:
        try:
            return self._font.render(self._text, True, self._color)
        except pygame.error as exc:
            raise RuntimeError(f"Failed to create surface from text: {exc}") from exc