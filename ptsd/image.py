"""Images loaded from disk, drawn as textured quads."""

from __future__ import annotations

import logging
import os
from typing import Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .asset_store import AssetStore  # noqa: E402
from .drawable import Drawable  # noqa: E402
from .logger import LOGGER_NAME  # noqa: E402
from .missing_texture import missing_texture_surface  # noqa: E402
from .transform import Matrices  # noqa: E402

_log = logging.getLogger(LOGGER_NAME)


def load_surface(filepath: str) -> pygame.Surface:
    """Load ``filepath``; fall back to the placeholder texture if it fails."""
    try:
        return pygame.image.load(filepath)
    except (pygame.error, OSError) as exc:
        _log.error("Failed to load image: '%s'", filepath)
        _log.error("%s", exc)
        return missing_texture_surface()


class Image(Drawable):
    """An image file shown on a quad; files are loaded once and shared."""

    _store: AssetStore[pygame.Surface] = AssetStore(load_surface)

    def __init__(self, filepath: str) -> None:
        self._path = filepath
        self._surface = self._store.get(filepath)

    @property
    def path(self) -> str:
        return self._path

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def size(self) -> Tuple[float, float]:
        width, height = self._surface.get_size()
        return (float(width), float(height))

    def set_image(self, filepath: str) -> None:
        """Show the image at ``filepath`` instead."""
        self._path = filepath
        self._surface = self._store.get(filepath)

    def draw(self, data: Matrices) -> None:
        self._render_surface(self._surface, data)