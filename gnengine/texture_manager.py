"""Loading image files into textures and looking them up by path."""

from __future__ import annotations

import logging
import os

import pygame

from gnengine.texture import Texture

logger = logging.getLogger(__name__)

_IMAGE_EXTENSIONS = frozenset({"bmp", "png", "jpg", "jpeg", "gif"})


class TextureManager:
    """Caches textures loaded from files under ``asset_root``."""

    def __init__(self, asset_root: str | os.PathLike[str] = "") -> None:
        self._asset_root = os.fspath(asset_root)
        self._screen: pygame.Surface | None = None
        self._textures: dict[str, Texture] = {}

    def init(self, screen: pygame.Surface | None) -> bool:
        """Attach the screen textures are made for; False if none is given."""
        if screen is None:
            logger.error("TextureManager.init - screen is None")
            return False
        self._screen = screen
        return True

    def load_texture(self, file_path: str) -> bool:
        """Load the image at ``file_path`` under the asset root.

        Returns True if the texture is now available, including when it was
        loaded before; False on an unsupported format or a failed load.
        """
        if file_path in self._textures:
            logger.warning("TextureManager.load_texture - texture already loaded: %s", file_path)
            return True

        full_path = os.path.join(self._asset_root, file_path)
        extension = file_path[file_path.rfind(".") + 1:]
        if extension not in _IMAGE_EXTENSIONS:
            logger.error("TextureManager.load_texture - unsupported file format for %s", full_path)
            return False

        try:
            surface = pygame.image.load(full_path)
        except (pygame.error, OSError) as exc:
            logger.error("TextureManager.load_texture - failed to load %s: %s", full_path, exc)
            return False

        if self._screen is None:
            logger.error(
                "TextureManager.load_texture - no screen to create texture for %s", full_path
            )
            return False

        width, height = surface.get_size()
        self._textures[file_path] = Texture(surface, width, height)
        return True

    def get_texture(self, file_path: str) -> Texture | None:
        """Return the texture loaded from ``file_path``, or None if there is none."""
        texture = self._textures.get(file_path)
        if texture is None:
            logger.error("TextureManager.get_texture - texture not found: %s", file_path)
        return texture