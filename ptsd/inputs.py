"""Keyboard and mouse state gathered once per frame from window events."""

from __future__ import annotations

import os
from typing import Callable, Iterable, Optional, Sequence, Set, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .config import WINDOW_HEIGHT, WINDOW_WIDTH  # noqa: E402
from .keycode import Keycode  # noqa: E402

Vec2 = Tuple[float, float]


def _warp_mouse(position: Tuple[int, int]) -> None:
    pygame.mouse.set_pos(position)


class InputState:
    """Key, mouse-button, cursor, scroll and quit state for the current frame.

    A key is *pressed* while held, *down* on the frame it was first pressed
    and *up* on the frame it was released. Mouse buttons are tracked as
    keys numbered ``Keycode.NUM_SCANCODES + button``.
    """

    def __init__(
        self,
        window_size: Sequence[int] = (WINDOW_WIDTH, WINDOW_HEIGHT),
        warp: Callable[[Tuple[int, int]], None] = _warp_mouse,
    ) -> None:
        width, height = window_size
        self._half_width = float(width) / 2
        self._half_height = float(height) / 2
        self._warp = warp
        self._held: Set[int] = set()
        self._was_held: Set[int] = set()
        self.cursor_position: Vec2 = (0.0, 0.0)
        self.scroll_distance: Vec2 = (-1.0, -1.0)
        self.scrolled = False
        self.mouse_moving = False
        self.exit_requested = False

    def is_key_pressed(self, key: Keycode) -> bool:
        """True while ``key`` is held."""
        return int(key) in self._held

    def is_key_down(self, key: Keycode) -> bool:
        """True on the frame ``key`` went down."""
        code = int(key)
        return code in self._held and code not in self._was_held

    def is_key_up(self, key: Keycode) -> bool:
        """True on the frame ``key`` was released."""
        code = int(key)
        return code not in self._held and code in self._was_held

    def _set_held(self, code: int, held: bool) -> None:
        if held:
            self._held.add(code)
        else:
            self._held.discard(code)

    def process_event(self, event) -> None:
        """Fold one window event into the current frame's state."""
        kind = event.type
        if kind in (pygame.KEYDOWN, pygame.KEYUP):
            self._set_held(int(event.scancode), kind == pygame.KEYDOWN)
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            code = int(Keycode.NUM_SCANCODES) + int(event.button)
            self._set_held(code, kind == pygame.MOUSEBUTTONDOWN)

        if kind == pygame.MOUSEWHEEL:
            self.scrolled = True
            self.scroll_distance = (float(event.x), float(event.y))
        if kind == pygame.MOUSEMOTION:
            self.mouse_moving = True
        self.exit_requested = kind == pygame.QUIT

    def update(self, events: Iterable, mouse_position: Sequence[float]) -> None:
        """Start a new frame from the raw cursor position and pending events.

        ``mouse_position`` is in window pixels from the top-left corner; the
        stored cursor position is relative to the window centre with y up.
        """
        x, y = mouse_position
        self.cursor_position = (
            float(x) - self._half_width,
            -(float(y) - self._half_height),
        )
        self.scrolled = False
        self.mouse_moving = False
        self._was_held = set(self._held)
        for event in events:
            self.process_event(event)

    def poll(self) -> None:
        """Run :meth:`update` with the events and cursor from the live window."""
        self.update(pygame.event.get(), pygame.mouse.get_pos())

    def set_cursor_position(self, pos: Sequence[float]) -> None:
        """Move the system cursor to ``pos`` in window pixels."""
        x, y = pos
        self._warp((int(x), int(y)))


_default: Optional[InputState] = None


def default_input() -> InputState:
    """The input state shared by the whole framework."""
    global _default
    if _default is None:
        _default = InputState()
    return _default