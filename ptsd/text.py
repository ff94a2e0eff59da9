"""Rendered text, drawn as a textured quad."""

from __future__ import annotations

import logging
import os
from typing import Optional, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .color import Color  # noqa: E402
from .drawable import Drawable  # noqa: E402
from .logger import LOGGER_NAME  # noqa: E402
from .transform import Matrices  # noqa: E402

_log = logging.getLogger(LOGGER_NAME)


class Text(Drawable):
    """A string rendered with a TrueType font; newlines start new lines.

    ``font`` is a font file path, or None for the built-in font.
    """

    def __init__(
        self,
        font: Optional[str],
        size: int,
        text: str,
        color: Color = Color(127, 127, 127),
    ) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self._font = pygame.font.Font(font, size)
        except (OSError, pygame.error) as exc:
            _log.error("Failed to create text")
            _log.error("%s", exc)
            raise OSError(f"cannot open font '{font}'") from exc
        self._text = text
        self._color = color
        self._surface = self._render()

    @property
    def text(self) -> str:
        return self._text

    @property
    def color(self) -> Color:
        return self._color

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def size(self) -> Tuple[float, float]:
        width, height = self._surface.get_size()
        return (float(width), float(height))

    def set_text(self, text: str) -> None:
        """Replace the string and re-render."""
        self._text = text
        self._surface = self._render()

    def set_color(self, color: Color) -> None:
        """Replace the colour and re-render."""
        self._color = color
        self._surface = self._render()

    def draw(self, data: Matrices) -> None:
        self._render_surface(self._surface, data)

    def _render(self) -> pygame.Surface:
        r, g, b, a = self._color.to_sdl_color()
        lines = [
            self._font.render(line, True, (r, g, b)) for line in self._text.split("\n")
        ]
        width = max(line.get_width() for line in lines)
        height = sum(line.get_height() for line in lines)
        surface = pygame.Surface((max(width, 1), max(height, 1)), pygame.SRCALPHA)
        y = 0
        for line in lines:
            surface.blit(line, (0, y), special_flags=pygame.BLEND_RGBA_MAX)
            y += line.get_height()
        if a < 255:
            surface.fill((255, 255, 255, a), special_flags=pygame.BLEND_RGBA_MULT)
        return surface