"""The window and per-frame loop plumbing shared by the whole framework."""

from __future__ import annotations

import logging
import os
import time
from typing import Callable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from . import logger  # noqa: E402
from .clock import Clock, default_clock  # noqa: E402
from .config import FPS_CAP, TITLE, WINDOW_HEIGHT, WINDOW_WIDTH  # noqa: E402
from .inputs import InputState, default_input  # noqa: E402
from .logger import LOGGER_NAME  # noqa: E402

_log = logging.getLogger(LOGGER_NAME)


def _sleep_ms(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000.0)


class Context:
    """Owns the window, audio and fonts, and paces frames to ``FPS_CAP``.

    Call :meth:`setup` at the start of each frame and :meth:`update` at the
    end. Use :meth:`get_instance` for the shared context, or the object as
    a context manager to close it automatically.
    """

    _instance: Optional["Context"] = None

    def __init__(
        self,
        *,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        title: str = TITLE,
        clock: Optional[Clock] = None,
        input_state: Optional[InputState] = None,
        sleep: Callable[[int], None] = _sleep_ms,
    ) -> None:
        logger.init()

        try:
            pygame.display.init()
        except pygame.error as exc:
            _log.error("Failed to initialize SDL")
            _log.error("%s", exc)
            raise RuntimeError("cannot initialise the video system") from exc

        try:
            pygame.font.init()
        except pygame.error as exc:
            _log.error("Failed to initialize SDL_ttf")
            _log.error("%s", exc)

        try:
            pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=2048)
        except pygame.error as exc:
            _log.error("Failed to initialize SDL_mixer")
            _log.error("%s", exc)

        try:
            self._surface = pygame.display.set_mode((int(width), int(height)))
        except pygame.error as exc:
            _log.error("Failed to create window")
            _log.error("%s", exc)
            raise RuntimeError("cannot create the window") from exc
        pygame.display.set_caption(title)

        _log.info("Display Info")
        _log.info("  Driver: %s", pygame.display.get_driver())
        _log.info("  pygame: %s", pygame.version.ver)
        _log.info("  SDL: %s", ".".join(str(v) for v in pygame.get_sdl_version()))

        self.exit = False
        self.window_width = int(width)
        self.window_height = int(height)
        self.clock = clock if clock is not None else default_clock()
        self.input = input_state if input_state is not None else default_input()
        self._sleep = sleep
        self._frame = 0
        self._closed = False
        self._before_update = self.clock.elapsed_ms()

    @classmethod
    def get_instance(cls) -> "Context":
        """The shared context, created on first use or after it was closed."""
        if cls._instance is None or cls._instance.closed:
            cls._instance = cls()
        return cls._instance

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def frame(self) -> int:
        """Number of frames started with :meth:`setup`."""
        return self._frame

    @property
    def surface(self) -> pygame.Surface:
        """The window's drawing surface."""
        self._require_open()
        return self._surface

    def _require_open(self) -> None:
        if self._closed:
            raise RuntimeError("context is closed")

    def set_window_icon(self, path: str) -> bool:
        """Use the image at ``path`` as the window icon; False if it cannot be read."""
        self._require_open()
        try:
            image = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            _log.error("Failed to load window icon: '%s'", path)
            _log.error("%s", exc)
            return False
        pygame.display.set_icon(image)
        return True

    def setup(self) -> None:
        """Begin a new frame."""
        self._require_open()
        self._frame += 1

    def update(self) -> None:
        """Finish the frame: gather input, show it, clear, wait out the frame cap."""
        self._require_open()
        self.input.poll()
        pygame.display.flip()
        self._surface.fill((0, 0, 0))

        frame_time = 1000.0 / FPS_CAP if FPS_CAP != 0 else 0.0
        after_update = self.clock.elapsed_ms()
        update_time = after_update - self._before_update
        if update_time < frame_time:
            self._sleep(int(frame_time - update_time))
        self._before_update = self.clock.elapsed_ms()

        self.clock.update()

    def close(self) -> None:
        """Stop all sound and shut the window and subsystems down."""
        if self._closed:
            return
        self._closed = True
        if pygame.mixer.get_init():
            pygame.mixer.stop()
            pygame.mixer.quit()
        if pygame.font.get_init():
            pygame.font.quit()
        pygame.display.quit()
        if Context._instance is self:
            Context._instance = None

    def __enter__(self) -> "Context":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()