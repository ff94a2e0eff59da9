"""Cache of loaded resources keyed by file path."""

from __future__ import annotations

from typing import Callable, Dict, Generic, TypeVar

T = TypeVar("T")


class AssetStore(Generic[T]):
    """Loads assets through ``loader`` and keeps them for later retrieval.

    Missing files are for the loader to handle.
    """

    def __init__(self, loader: Callable[[str], T]) -> None:
        self._loader = loader
        self._assets: Dict[str, T] = {}

    def load(self, filepath: str) -> None:
        """Load ``filepath`` now, replacing any cached copy."""
        self._assets[filepath] = self._loader(filepath)

    def get(self, filepath: str) -> T:
        """Return the asset for ``filepath``, loading and caching it if needed."""
        try:
            return self._assets[filepath]
        except KeyError:
            self.load(filepath)
            return self._assets[filepath]

    def remove(self, filepath: str) -> None:
        """Forget ``filepath``; nothing happens if it is not cached."""
        self._assets.pop(filepath, None)

    def __contains__(self, filepath: object) -> bool:
        return filepath in self._assets

    def __len__(self) -> int:
        return len(self._assets)