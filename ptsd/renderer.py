"""Draws a tree of game objects in z-index order."""

from __future__ import annotations

import heapq
from itertools import count
from typing import Iterable, List, Optional, Tuple

from .game_object import GameObject


class Renderer:
    """Holds root game objects and draws them and all their descendants.

    Objects with a lower z-index are drawn first, so greater z-indices end
    up on top.
    """

    def __init__(self, children: Optional[Iterable[GameObject]] = None) -> None:
        self.children: List[GameObject] = list(children) if children else []

    def add_child(self, child: GameObject) -> None:
        self.children.append(child)

    def add_children(self, children: Iterable[GameObject]) -> None:
        self.children.extend(children)

    def remove_child(self, child: GameObject) -> None:
        """Remove every occurrence of ``child``."""
        self.children = [c for c in self.children if c is not child]

    def update(self) -> None:
        """Draw every object in the tree, lowest z-index first."""
        stack = list(self.children)
        queue: List[Tuple[float, int, GameObject]] = []
        order = count()
        while stack:
            current = stack.pop()
            heapq.heappush(queue, (current.z_index, next(order), current))
            stack.extend(current.children)
        while queue:
            heapq.heappop(queue)[2].draw()