"""The application: window, managers and the main loop."""

from __future__ import annotations

import logging
import os

import pygame

from gnengine.event_manager import EventManager
from gnengine.input_manager import InputManager
from gnengine.objects import TestObject, TextObject
from gnengine.render_manager import RenderManager
from gnengine.text_manager import TextManager
from gnengine.texture_manager import TextureManager

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Text main callback"
WINDOW_SIZE = (1280, 720)
FONT_FILE = "CookieRun Regular.ttf"
FONT_ID = "cookie-run"
FONT_SIZE = 24
GREETING = "Hello, GNEngine!"


class Application:
    """Owns the window and the managers and runs the frame loop."""

    def __init__(
        self,
        image_asset_root: str | os.PathLike[str] = "",
        font_asset_root: str | os.PathLike[str] = "",
        width: int = WINDOW_SIZE[0],
        height: int = WINDOW_SIZE[1],
        max_fps: int = 60,
    ) -> None:
        self.width = width
        self.height = height
        self.max_fps = max_fps
        self._font_asset_root = os.fspath(font_asset_root)
        self.is_running = False
        self.screen: pygame.Surface | None = None

        self.event_manager = EventManager()
        self.input_manager = InputManager(self.event_manager)
        self.texture_manager = TextureManager(image_asset_root)
        self.render_manager = RenderManager()
        self.text_manager: TextManager | None = None
        self.test_text: TextObject | None = None
        self.test_object: TestObject | None = None
        self._clock: pygame.time.Clock | None = None

    def init(self) -> None:
        """Open the window and set up every manager and object.

        Raises RuntimeError if the display cannot be started.
        """
        pygame.init()
        if not pygame.display.get_init():
            raise RuntimeError(f"pygame display init failed: {pygame.get_error()}")
        try:
            self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        except pygame.error as exc:
            pygame.quit()
            raise RuntimeError(f"Failed to create window: {exc}") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        self._clock = pygame.time.Clock()

        self.render_manager.init(self.screen)
        self.texture_manager.init(self.screen)

        self.event_manager.init()
        self.input_manager.init()

        self.text_manager = TextManager(self.screen)
        self.text_manager.load_font(
            FONT_ID, os.path.join(self._font_asset_root, FONT_FILE), FONT_SIZE
        )
        self.test_text = TextObject(
            self.text_manager.create_text(FONT_ID, GREETING, (255, 255, 255, 255)),
            100.0,
            100.0,
        )
        self.test_object = TestObject(
            self.event_manager, self.texture_manager, self.render_manager
        )

    def run(self) -> None:
        """Process input, update and draw frames until the window closes."""
        self.is_running = True
        while self.is_running:
            if not self.input_manager.event_processing():
                self.is_running = False
                break

            self.input_manager.update_key_states()

            self.render_manager.clear()
            if self.test_object is not None:
                self.test_object.update()
            if self.test_text is not None:
                self.test_text.render()
            self.render_manager.present()

            if self._clock is not None and self.max_fps:
                self._clock.tick(self.max_fps)

    def quit(self) -> None:
        """Close the window and shut pygame down."""
        print("cleaning up and quitting... ")
        self.is_running = False
        self.screen = None
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the application; return the process exit status."""
    application = Application()
    try:
        application.init()
    except RuntimeError as exc:
        logger.error("Application initialize: %s", exc)
        logger.error("Application exited with errors: %s", exc)
        return 1

    application.run()
    application.quit()
    print("Application exited successfully!")
    return 0