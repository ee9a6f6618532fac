"""Loading fonts by id and making Text objects from them."""

from __future__ import annotations

import logging

import pygame

from gnengine.text import ColorLike, Text

logger = logging.getLogger(__name__)


class TextManager:
    """Keeps loaded fonts by id and creates texts drawn on ``screen``."""

    def __init__(self, screen: pygame.Surface | None) -> None:
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise RuntimeError(f"Failed to initialize fonts: {exc}") from exc
        self._screen = screen
        self._fonts: dict[str, pygame.font.Font] = {}

    def load_font(self, font_id: str, file_path: str, font_size: int) -> bool:
        """Load the font file at ``file_path`` under ``font_id``; False on failure."""
        try:
            font = pygame.font.Font(file_path, font_size)
        except (pygame.error, OSError) as exc:
            logger.error("Failed to load font %s: %s", file_path, exc)
            return False
        self._fonts[font_id] = font
        return True

    def create_text(self, font_id: str, text: str, color: ColorLike) -> Text | None:
        """Make a Text in the font ``font_id``, or None if no such font is loaded."""
        font = self._fonts.get(font_id)
        if font is None:
            return None
        return Text(self._screen, font, text, color)