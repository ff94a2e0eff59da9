"""Base class for anything that can be drawn by a game object."""

from __future__ import annotations

import math
import os
from abc import ABC, abstractmethod
from typing import Optional, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np  # noqa: E402
import pygame  # noqa: E402

from .transform import Matrices  # noqa: E402


class Drawable(ABC):
    """Something with a size that can draw itself given model and projection matrices."""

    @property
    @abstractmethod
    def size(self) -> Tuple[float, float]:
        """Width and height in pixels."""

    @abstractmethod
    def draw(self, data: Matrices) -> None:
        """Draw onto the window using ``data``."""

    def _render_surface(
        self,
        surface: pygame.Surface,
        data: Matrices,
        target: Optional[pygame.Surface] = None,
    ) -> None:
        """Map ``surface`` onto the unit quad transformed by ``data`` and blit it.

        ``target`` defaults to the window's display surface.
        """
        if target is None:
            target = pygame.display.get_surface()
            if target is None:
                raise RuntimeError("no display surface to draw on")
        if surface.get_width() == 0 or surface.get_height() == 0:
            return
        width, height = target.get_size()
        clip = np.asarray(data.projection, dtype=np.float64) @ np.asarray(
            data.model, dtype=np.float64
        )

        def to_pixels(x: float, y: float) -> np.ndarray:
            c = clip @ np.array((x, y, 0.0, 1.0))
            w = c[3] if c[3] else 1.0
            return np.array(
                ((c[0] / w + 1.0) / 2.0 * width, (1.0 - c[1] / w) / 2.0 * height)
            )

        top_left = to_pixels(-0.5, 0.5)
        across = to_pixels(0.5, 0.5) - top_left
        down = to_pixels(-0.5, -0.5) - top_left
        centre = to_pixels(0.0, 0.0)

        out_w = round(math.hypot(*across))
        out_h = round(math.hypot(*down))
        if out_w == 0 or out_h == 0:
            return

        image = pygame.transform.scale(surface, (out_w, out_h))
        if across[0] * down[1] - across[1] * down[0] < 0:
            image = pygame.transform.flip(image, False, True)
        angle = -math.degrees(math.atan2(across[1], across[0]))
        if angle:
            image = pygame.transform.rotate(image, angle)
        rect = image.get_rect(center=(round(centre[0]), round(centre[1])))
        target.blit(image, rect)