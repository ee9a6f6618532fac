"""Image data ready to be drawn by the render manager."""

from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass
class Texture:
    """A drawable surface together with its native size in pixels."""

    surface: pygame.Surface | None
    width: int
    height: int