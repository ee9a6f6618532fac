"""A small 2D game engine on pygame: events, input, textures, text, game objects and scenes."""

__version__ = "0.1.0"