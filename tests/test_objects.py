import pygame
import pytest

from gnengine.event_manager import EventManager
from gnengine.events import KeyHeldInfo, KeyPressedEvent, KeyReleasedEvent, KeysHeldEvent
from gnengine.objects import BlankObject, TestObject, TextObject
from gnengine.render_manager import RenderManager
from gnengine.text import Text
from gnengine.texture_manager import TextureManager

RED = (255, 0, 0)
BLACK = (0, 0, 0)


@pytest.fixture
def screen():
    return pygame.Surface((300, 300))


def _make_managers(root, screen):
    event_manager = EventManager()
    texture_manager = TextureManager(root)
    texture_manager.init(screen)
    render_manager = RenderManager()
    render_manager.init(screen)
    return event_manager, texture_manager, render_manager


@pytest.fixture
def managers(tmp_path, screen):
    image = pygame.Surface((10, 10))
    image.fill(RED)
    pygame.image.save(image, str(tmp_path / "example_png.png"))
    return _make_managers(tmp_path, screen)


@pytest.fixture
def empty_managers(tmp_path, screen):
    return _make_managers(tmp_path, screen)


def _held(*scancodes):
    return KeysHeldEvent([KeyHeldInfo(code, 0) for code in scancodes])


def test_test_object_moves_right_by_five(managers):
    event_manager = managers[0]
    obj = TestObject(*managers)
    event_manager.dispatch(_held(pygame.KSCAN_D))
    event_manager.dispatch(_held(pygame.KSCAN_D))
    assert (obj.x, obj.y) == (110.0, 100.0)


def test_test_object_pinned_step(managers):
    event_manager = managers[0]
    obj = TestObject(*managers)
    event_manager.dispatch(_held(pygame.KSCAN_D))
    assert (obj.x, obj.y) == (105.0, 100.0)


def test_blank_object_pinned_step(managers):
    event_manager = managers[0]
    obj = BlankObject(*managers)
    event_manager.dispatch(_held(pygame.KSCAN_D))
    assert (obj.x, obj.y) == (100.5, 100.0)


@pytest.mark.parametrize("cls", [TestObject, BlankObject])
@pytest.mark.parametrize(
    "scancode, direction",
    [
        (pygame.KSCAN_W, (0, -1)),
        (pygame.KSCAN_S, (0, 1)),
        (pygame.KSCAN_A, (-1, 0)),
        (pygame.KSCAN_D, (1, 0)),
    ],
)
def test_direction_keys_move(managers, cls, scancode, direction):
    event_manager = managers[0]
    obj = cls(*managers)
    start = (obj.x, obj.y)
    event_manager.dispatch(_held(scancode))
    assert (obj.x - start[0], obj.y - start[1]) == (
        direction[0] * cls.move_speed,
        direction[1] * cls.move_speed,
    )


def test_start_position(managers):
    obj = TestObject(*managers)
    assert (obj.x, obj.y) == (100.0, 100.0)


def test_other_keys_and_empty_event_do_not_move(managers):
    event_manager = managers[0]
    obj = TestObject(*managers)
    event_manager.dispatch(_held())
    event_manager.dispatch(_held(pygame.KSCAN_SPACE))
    assert (obj.x, obj.y) == (100.0, 100.0)


def test_opposite_keys_cancel(managers):
    event_manager = managers[0]
    obj = TestObject(*managers)
    event_manager.dispatch(_held(pygame.KSCAN_A, pygame.KSCAN_D, pygame.KSCAN_W, pygame.KSCAN_S))
    assert (obj.x, obj.y) == (100.0, 100.0)


def test_texture_loaded(managers):
    obj = TestObject(*managers)
    assert obj.texture.width == 10
    assert obj.texture.height == 10


def test_update_draws_at_position(managers):
    render_manager = managers[2]
    obj = TestObject(*managers)
    obj.update()
    drawn = render_manager.screen
    assert drawn.get_at((100, 100)) == obj.texture.surface.get_at((0, 0))
    assert drawn.get_at((100, 100))[:3] == RED
    assert drawn.get_at((99, 100))[:3] == BLACK


def test_update_after_move_draws_at_new_position(managers):
    event_manager = managers[0]
    render_manager = managers[2]
    obj = TestObject(*managers)
    event_manager.dispatch(_held(pygame.KSCAN_D))
    obj.update()
    drawn = render_manager.screen
    assert drawn.get_at((int(obj.x), 100))[:3] == RED
    assert drawn.get_at((int(obj.x) - 1, 100))[:3] == BLACK


def test_missing_texture_draws_nothing(empty_managers):
    render_manager = empty_managers[2]
    obj = BlankObject(*empty_managers)
    assert obj.texture is None
    obj.update()
    drawn = render_manager.screen
    assert drawn.get_bounding_rect(min_alpha=0).size == drawn.get_size()
    assert drawn.get_at((100, 100))[:3] == BLACK


def test_press_and_release_print(managers, capsys):
    event_manager = managers[0]
    TestObject(*managers)
    event_manager.dispatch(KeyPressedEvent(pygame.KSCAN_D))
    event_manager.dispatch(KeyReleasedEvent(pygame.KSCAN_D))
    out = capsys.readouterr().out
    assert f"Key Pressed: D (Scancode: {pygame.KSCAN_D})" in out
    assert f"Key Released: D (Scancode: {pygame.KSCAN_D})" in out


@pytest.fixture
def font():
    pygame.font.init()
    return pygame.font.Font(None, 24)


@pytest.fixture
def alpha_screen():
    surface = pygame.Surface((300, 200), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    return surface


def test_text_object_renders_at_position(font, alpha_screen):
    text_object = TextObject(Text(alpha_screen, font, "Hi", (255, 255, 255)), 10, 20)
    text_object.render()
    rect = alpha_screen.get_bounding_rect()
    assert rect.width > 0
    assert rect.left >= 10
    assert rect.top >= 20


def test_text_object_set_position(font, alpha_screen):
    text_object = TextObject(Text(alpha_screen, font, "Hi", (255, 255, 255)), 10, 20)
    text_object.set_position(150, 120)
    text_object.render()
    rect = alpha_screen.get_bounding_rect()
    assert (text_object.x, text_object.y) == (150, 120)
    assert rect.left >= 150
    assert rect.top >= 120


def test_text_object_set_text_and_color(font, alpha_screen):
    text_object = TextObject(Text(alpha_screen, font, "Hi", (255, 255, 255)), 0, 0)
    text_object.set_text("Bye")
    text_object.set_color((255, 0, 0))
    assert text_object.text.text == "Bye"
    assert text_object.text.color == pygame.Color(255, 0, 0)


def test_text_object_without_text_keeps_position_changes():
    text_object = TextObject(None, 1, 2)
    text_object.set_text("ignored")
    text_object.set_color((1, 2, 3))
    text_object.render()
    text_object.set_position(3, 4)
    assert text_object.text is None
    assert (text_object.x, text_object.y) == (3, 4)