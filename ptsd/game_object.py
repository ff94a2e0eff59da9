"""Game objects: a drawable with a transform, z-index, pivot and children."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .drawable import Drawable
from .transform import Transform, convert_to_uniform_buffer_data


class GameObject:
    """An object in the scene; subclass it to build your own.

    A greater ``z_index`` draws on top. ``pivot`` is the point, in pixels
    from the drawable's centre, that the object rotates and scales about.
    """

    def __init__(
        self,
        drawable: Optional[Drawable] = None,
        z_index: float = 0.0,
        pivot: Sequence[float] = (0.0, 0.0),
        visible: bool = True,
        children: Optional[Iterable["GameObject"]] = None,
    ) -> None:
        self.transform = Transform()
        self.drawable = drawable
        self.z_index = float(z_index)
        self.pivot = np.array(pivot, dtype=np.float32)
        self.visible = visible
        self.children: List[GameObject] = list(children) if children else []

    def __copy__(self) -> "GameObject":
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone.transform = self.transform.copy()
        clone.pivot = self.pivot.copy()
        clone.children = list(self.children)
        return clone

    @property
    def scaled_size(self) -> Tuple[float, float]:
        """The drawable's size multiplied by the transform's scale."""
        if self.drawable is None:
            raise ValueError("game object has no drawable")
        width, height = self.drawable.size
        sx, sy = (float(v) for v in self.transform.scale)
        return (width * sx, height * sy)

    def add_child(self, child: "GameObject") -> None:
        self.children.append(child)

    def remove_child(self, child: "GameObject") -> None:
        """Remove every occurrence of ``child``."""
        self.children = [c for c in self.children if c is not child]

    def draw(self) -> None:
        """Draw the drawable, unless hidden or absent."""
        if not self.visible or self.drawable is None:
            return
        size = self.drawable.size
        data = convert_to_uniform_buffer_data(self.transform, size, self.z_index)
        offset = np.eye(4, dtype=np.float32)
        offset[0, 3] = -float(self.pivot[0]) / size[0]
        offset[1, 3] = -float(self.pivot[1]) / size[1]
        data.model = data.model @ offset
        self.drawable.draw(data)