"""Clearing, drawing textures on and presenting the target screen."""

from __future__ import annotations

import logging

import pygame

from gnengine.texture import Texture

logger = logging.getLogger(__name__)

BACKGROUND = (0, 0, 0, 255)


class RenderManager:
    """Draws onto a screen surface owned by someone else."""

    def __init__(self) -> None:
        self._screen: pygame.Surface | None = None

    @property
    def screen(self) -> pygame.Surface | None:
        """The surface drawn on, or None before a successful init."""
        return self._screen

    def init(self, screen: pygame.Surface | None) -> bool:
        """Attach the surface to draw on; False if none is given."""
        if screen is None:
            logger.error("RenderManager.init - screen is None")
            return False
        self._screen = screen
        return True

    def clear(self) -> None:
        """Fill the screen with the black background."""
        if self._screen is not None:
            self._screen.fill(BACKGROUND)

    def present(self) -> None:
        """Show what has been drawn, when the screen is the display window."""
        if self._screen is not None and self._screen is pygame.display.get_surface():
            pygame.display.flip()

    def render_texture(
        self,
        texture: Texture | None,
        x: float,
        y: float,
        w: float = 0,
        h: float = 0,
    ) -> None:
        """Draw ``texture`` with its top-left corner at (x, y).

        If ``w`` or ``h`` is 0 the texture is drawn at its own size,
        otherwise it is scaled to ``w`` by ``h``.
        """
        if self._screen is None:
            logger.error("RenderManager.render_texture - screen is None")
            return
        if texture is None:
            logger.error("RenderManager.render_texture - texture is None")
            return
        if texture.surface is None:
            logger.error("RenderManager.render_texture - texture has no surface")
            return

        surface = texture.surface
        if w == 0 or h == 0:
            size = (texture.width, texture.height)
        else:
            size = (round(w), round(h))
        if size != surface.get_size():
            surface = pygame.transform.scale(surface, size)

        try:
            self._screen.blit(surface, (x, y))
        except pygame.error as exc:
            logger.error("RenderManager.render_texture - failed to render texture: %s", exc)