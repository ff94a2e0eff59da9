import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402
import pytest  # noqa: E402

from ptsd.config import WINDOW_HEIGHT, WINDOW_WIDTH  # noqa: E402
from ptsd.context import Context  # noqa: E402
from ptsd.image import Image, load_surface  # noqa: E402
from ptsd.transform import Transform, convert_to_uniform_buffer_data  # noqa: E402

RED = (255, 0, 0, 255)


def _write_bmp(path, size, colour=RED[:3]):
    surface = pygame.Surface(size)
    surface.fill(colour)
    pygame.image.save(surface, str(path))
    return str(path)


@pytest.fixture
def ctx():
    context = Context(sleep=lambda ms: None)
    context.surface.fill((0, 0, 0))
    yield context
    context.close()


def test_load_surface_reads_file(tmp_path):
    path = _write_bmp(tmp_path / "a.bmp", (7, 3))
    assert load_surface(path).get_size() == (7, 3)


def test_load_surface_missing_file_gives_placeholder(tmp_path):
    surface = load_surface(str(tmp_path / "missing.png"))
    assert surface.get_size() == (256, 256)


def test_image_size_matches_file(tmp_path):
    image = Image(_write_bmp(tmp_path / "b.bmp", (5, 9)))
    assert image.size == (5.0, 9.0)


def test_missing_image_uses_placeholder_size(tmp_path):
    assert Image(str(tmp_path / "nope.png")).size == (256.0, 256.0)


def test_set_image_changes_size_and_path(tmp_path):
    image = Image(_write_bmp(tmp_path / "c.bmp", (4, 4)))
    other = _write_bmp(tmp_path / "d.bmp", (6, 2))
    image.set_image(other)
    assert image.size == (6.0, 2.0)
    assert image.path == other


def test_same_path_is_cached(tmp_path):
    path = _write_bmp(tmp_path / "e.bmp", (3, 3))
    first = Image(path)
    _write_bmp(tmp_path / "e.bmp", (8, 8))
    second = Image(path)
    assert second.size == first.size
    assert second.surface is first.surface


def test_draw_paints_window_centre(tmp_path, ctx):
    image = Image(_write_bmp(tmp_path / "f.bmp", (4, 4)))
    image.draw(convert_to_uniform_buffer_data(Transform(), image.size, 0))
    assert ctx.surface.get_at((WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2)) == RED


def test_draw_without_display_raises(tmp_path):
    pygame.display.quit()
    image = Image(_write_bmp(tmp_path / "g.bmp", (4, 4)))
    with pytest.raises(RuntimeError):
        image.draw(convert_to_uniform_buffer_data(Transform(), image.size, 0))