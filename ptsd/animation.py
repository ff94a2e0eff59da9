"""Frame-by-frame animations built from a list of image files."""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Iterable, Optional, Tuple

from .clock import Clock, default_clock
from .drawable import Drawable
from .image import Image
from .logger import LOGGER_NAME, TRACE
from .transform import Matrices

_log = logging.getLogger(LOGGER_NAME)


class State(Enum):
    """Playback state of an :class:`Animation`."""

    PLAY = auto()
    PAUSE = auto()
    COOLDOWN = auto()
    ENDED = auto()


class Animation(Drawable):
    """A sequence of images shown one after another.

    ``interval`` is the time between frames and ``cooldown`` the pause
    before a looping animation starts over, both in milliseconds. Frames
    advance while the animation is drawn.
    """

    def __init__(
        self,
        paths: Iterable[str],
        play: bool,
        interval: float,
        looping: bool = True,
        cooldown: int = 100,
        *,
        clock: Optional[Clock] = None,
    ) -> None:
        paths = list(paths)
        if not paths:
            raise ValueError("an animation needs at least one frame")
        self._frames = [Image(path) for path in paths]
        self._state = State.PLAY if play else State.PAUSE
        self.interval = interval
        self.looping = bool(looping)
        self.cooldown = cooldown
        self._clock = clock if clock is not None else default_clock()
        self._frame_changed = False
        self._cooldown_end = 0
        self._time_since_frame = 0.0
        self._index = 0

    @property
    def interval(self) -> float:
        """Milliseconds between frames."""
        return self._interval

    @interval.setter
    def interval(self, value: float) -> None:
        if value <= 0:
            raise ValueError("interval must be positive")
        self._interval = float(value)

    @property
    def cooldown(self) -> int:
        """Milliseconds to wait before a looping animation restarts."""
        return self._cooldown

    @cooldown.setter
    def cooldown(self, value: int) -> None:
        if value < 0:
            raise ValueError("cooldown must not be negative")
        self._cooldown = int(value)

    @property
    def state(self) -> State:
        return self._state

    @property
    def current_frame_index(self) -> int:
        return self._index

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    @property
    def size(self) -> Tuple[float, float]:
        """Size of the current frame."""
        return self._frames[self._index].size

    def set_current_frame(self, index: int) -> None:
        """Jump to frame ``index``.

        When set while ended or cooling down, the next :meth:`play` starts
        from this frame rather than the first.
        """
        if not 0 <= index < len(self._frames):
            raise IndexError(f"frame index {index} out of range")
        self._index = index
        if self._state in (State.ENDED, State.COOLDOWN):
            self._frame_changed = True

    def draw(self, data: Matrices) -> None:
        """Draw the current frame, then advance the animation."""
        self._frames[self._index].draw(data)
        self._update()

    def play(self) -> None:
        """Start playing; an ended or cooling-down animation starts over."""
        if self._state is State.PLAY:
            return
        if self._state in (State.ENDED, State.COOLDOWN):
            if not self._frame_changed:
                self._index = 0
            self._frame_changed = False
        self._state = State.PLAY

    def pause(self) -> None:
        """Pause a playing or cooling-down animation."""
        if self._state in (State.PLAY, State.COOLDOWN):
            self._state = State.PAUSE

    def _update(self) -> None:
        now = int(self._clock.elapsed_ms())
        if self._state in (State.PAUSE, State.ENDED):
            _log.log(TRACE, "[ANI] is pause")
            return

        if self._state is State.COOLDOWN:
            if now >= self._cooldown_end:
                self.play()
            return

        self._time_since_frame += self._clock.delta_ms
        steps = int(self._time_since_frame / self._interval)
        if steps <= 0:
            return

        self._index += steps
        self._time_since_frame = 0.0

        total = len(self._frames)
        if self._index >= total:
            if self.looping:
                self._cooldown_end = now + self._cooldown
                self._state = State.COOLDOWN
            else:
                self._state = State.ENDED
            self._index = total - 1