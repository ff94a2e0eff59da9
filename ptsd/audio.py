"""Background music and sound effects on the 0-128 volume scale."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .asset_store import AssetStore  # noqa: E402
from .logger import LOGGER_NAME  # noqa: E402

_log = logging.getLogger(LOGGER_NAME)

MAX_VOLUME = 128


def _to_level(volume: float) -> int:
    return int(round(volume * MAX_VOLUME))


def _to_fraction(level: int) -> float:
    return min(level, MAX_VOLUME) / MAX_VOLUME


def load_music(filepath: str) -> Optional[str]:
    """Return ``filepath`` if it names a readable file, else None."""
    if os.path.isfile(filepath) and os.access(filepath, os.R_OK):
        return filepath
    _log.debug("Failed to load BGM: '%s'", filepath)
    _log.debug("No such readable file")
    return None


def load_chunk(filepath: str) -> Optional[Any]:
    """Load a sound effect into memory, or return None if it cannot be loaded."""
    try:
        return pygame.mixer.Sound(filepath)
    except (pygame.error, OSError) as exc:
        _log.debug("Failed to load SFX: '%s'", filepath)
        _log.debug("%s", exc)
        return None


class BGM:
    """Background music streamed from disk.

    Only one piece of music plays at a time; playing another stops the
    first. The volume is shared by all music.
    """

    _store: AssetStore[Optional[str]] = AssetStore(load_music)

    def __init__(
        self,
        path: str,
        *,
        player: Any = None,
        store: Optional[AssetStore] = None,
    ) -> None:
        self._player = player if player is not None else pygame.mixer.music
        self._assets = store if store is not None else BGM._store
        self._music = self._assets.get(path)

    @property
    def music(self) -> Optional[str]:
        """The loaded music file, or None if loading failed."""
        return self._music

    @property
    def volume(self) -> int:
        """Music volume from 0 (mute) to 128."""
        return _to_level(self._player.get_volume())

    @volume.setter
    def volume(self, level: int) -> None:
        if level < 0:
            return
        self._player.set_volume(_to_fraction(level))

    def load_media(self, path: str) -> None:
        self._music = self._assets.get(path)

    def volume_up(self, step: int = 1) -> None:
        self.volume = self.volume + step

    def volume_down(self, step: int = 1) -> None:
        self.volume = self.volume - step

    def _prepare(self) -> bool:
        if self._music is None:
            _log.debug("No music loaded")
            return False
        self._player.load(self._music)
        return True

    def play(self, loop: int = -1) -> None:
        """Play, stopping any current music; -1 loops forever."""
        if self._prepare():
            self._player.play(loop)

    def fade_in(self, tick: int, loop: int = -1) -> None:
        """Play, fading in over ``tick`` milliseconds."""
        if self._prepare():
            self._player.play(loop, fade_ms=tick)

    def fade_out(self, tick: int) -> None:
        """Fade the music out over ``tick`` milliseconds."""
        self._player.fadeout(tick)

    def pause(self) -> None:
        self._player.pause()

    def resume(self) -> None:
        self._player.unpause()


class SFX:
    """A sound effect held in memory; use :class:`BGM` for long audio."""

    _store: AssetStore[Optional[Any]] = AssetStore(load_chunk)

    def __init__(self, path: str, *, store: Optional[AssetStore] = None) -> None:
        self._assets = store if store is not None else SFX._store
        self._chunk = self._assets.get(path)

    @property
    def chunk(self) -> Optional[Any]:
        """The loaded sound, or None if loading failed."""
        return self._chunk

    @property
    def volume(self) -> int:
        """Volume from 0 (mute) to 128; -1 if nothing is loaded."""
        if self._chunk is None:
            return -1
        return _to_level(self._chunk.get_volume())

    @volume.setter
    def volume(self, level: int) -> None:
        if self._chunk is None or level < 0:
            return
        self._chunk.set_volume(_to_fraction(level))

    def load_media(self, path: str) -> None:
        self._chunk = self._assets.get(path)

    def volume_up(self, step: int = 1) -> None:
        self.volume = self.volume + step

    def volume_down(self, step: int = 1) -> None:
        self.volume = self.volume - step

    def play(self, loop: int = 0, duration: int = -1) -> None:
        """Play ``loop`` extra times, cut off after ``duration`` ms (-1: whole)."""
        if self._chunk is None:
            return
        self._chunk.play(loops=loop, maxtime=max(duration, 0))

    def fade_in(self, tick: int, loop: int = -1, duration: int = -1) -> None:
        """Play, fading in over ``tick`` milliseconds."""
        if self._chunk is None:
            return
        self._chunk.play(loops=loop, maxtime=max(duration, 0), fade_ms=max(tick, 0))