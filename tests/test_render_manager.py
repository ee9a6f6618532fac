import pygame
import pytest

from gnengine.render_manager import RenderManager
from gnengine.texture import Texture

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)


@pytest.fixture
def screen():
    return pygame.Surface((50, 50))


@pytest.fixture
def manager(screen):
    m = RenderManager()
    assert m.init(screen)
    m.clear()
    return m


@pytest.fixture
def red_texture():
    surface = pygame.Surface((4, 4))
    surface.fill(RED)
    return Texture(surface, 4, 4)


def test_init_rejects_none():
    m = RenderManager()
    assert m.init(None) is False
    assert m.screen is None


def test_init_keeps_screen(screen):
    m = RenderManager()
    assert m.init(screen) is True
    assert m.screen is screen


def test_clear_fills_black(screen):
    m = RenderManager()
    m.init(screen)
    screen.fill((255, 255, 255))
    m.clear()
    assert tuple(m.screen.get_at((0, 0))) == BLACK
    assert tuple(m.screen.get_at((49, 49))) == BLACK


def test_render_at_native_size(manager, red_texture):
    manager.render_texture(red_texture, 10, 10)
    drawn = manager.screen
    assert tuple(drawn.get_at((10, 10))) == RED
    assert tuple(drawn.get_at((13, 13))) == RED
    assert tuple(drawn.get_at((14, 14))) == BLACK
    assert tuple(drawn.get_at((9, 9))) == BLACK


def test_render_scaled(manager, red_texture):
    manager.render_texture(red_texture, 10, 10, 8, 8)
    drawn = manager.screen
    assert tuple(drawn.get_at((17, 17))) == RED
    assert tuple(drawn.get_at((18, 18))) == BLACK


def test_zero_dimension_uses_native_size(manager, red_texture):
    manager.render_texture(red_texture, 0, 0, 0, 20)
    drawn = manager.screen
    assert tuple(drawn.get_at((3, 3))) == RED
    assert tuple(drawn.get_at((4, 10))) == BLACK


def test_none_texture_draws_nothing(manager):
    before = pygame.image.tobytes(manager.screen, "RGBA")
    manager.render_texture(None, 0, 0)
    manager.render_texture(Texture(None, 4, 4), 0, 0)
    assert pygame.image.tobytes(manager.screen, "RGBA") == before
    assert tuple(manager.screen.get_at((0, 0))) == BLACK


def test_render_without_screen_leaves_texture_alone(red_texture):
    m = RenderManager()
    m.render_texture(red_texture, 0, 0)
    assert m.screen is None
    assert tuple(red_texture.surface.get_at((0, 0))) == RED