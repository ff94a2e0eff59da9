import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np  # noqa: E402
import pygame  # noqa: E402
import pytest  # noqa: E402

from ptsd.config import WINDOW_HEIGHT, WINDOW_WIDTH  # noqa: E402
from ptsd.context import Context  # noqa: E402
from ptsd.drawable import Drawable  # noqa: E402
from ptsd.transform import Transform, convert_to_uniform_buffer_data  # noqa: E402

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)
CX, CY = WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2


class Square(Drawable):
    def __init__(self, side, target):
        self._surface = pygame.Surface((side, side))
        self._surface.fill(RED[:3])
        self._target = target

    @property
    def size(self):
        return (float(self._surface.get_width()), float(self._surface.get_height()))

    def draw(self, data):
        self._render_surface(self._surface, data, self._target)


@pytest.fixture
def ctx():
    context = Context(sleep=lambda ms: None)
    context.surface.fill((0, 0, 0))
    yield context
    context.close()


def test_abstract_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Drawable()


def test_centred_square_lands_in_window_centre(ctx):
    square = Square(10, ctx.surface)
    square.draw(convert_to_uniform_buffer_data(Transform(), square.size, 0))
    assert ctx.surface.get_at((CX, CY)) == RED
    assert ctx.surface.get_at((CX - 40, CY)) == BLACK


def test_scale_widens_drawn_area(ctx):
    square = Square(10, ctx.surface)
    transform = Transform(scale=(4, 1))
    square.draw(convert_to_uniform_buffer_data(transform, square.size, 0))
    assert ctx.surface.get_at((CX + 15, CY)) == RED
    assert ctx.surface.get_at((CX, CY + 15)) == BLACK


def test_translation_moves_up_and_right(ctx):
    square = Square(10, ctx.surface)
    transform = Transform(translation=(100, 100))
    square.draw(convert_to_uniform_buffer_data(transform, square.size, 0))
    assert ctx.surface.get_at((CX + 100, CY - 100)) == RED
    assert ctx.surface.get_at((CX, CY)) == BLACK


def test_offscreen_leaves_target_untouched(ctx):
    square = Square(10, ctx.surface)
    transform = Transform(translation=(WINDOW_WIDTH * 2, 0))
    square.draw(convert_to_uniform_buffer_data(transform, square.size, 0))
    assert not pygame.surfarray.array3d(ctx.surface).any()


def test_zero_scale_draws_nothing(ctx):
    square = Square(10, ctx.surface)
    transform = Transform(scale=(0, 0))
    square.draw(convert_to_uniform_buffer_data(transform, square.size, 0))
    assert np.count_nonzero(pygame.surfarray.array3d(ctx.surface)) == 0