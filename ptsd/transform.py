"""2D transforms and their conversion to shader matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .config import WINDOW_HEIGHT, WINDOW_WIDTH

_NEAR_CLIP = -100.0
_FAR_CLIP = 100.0


def _vec2(values: Sequence[float]) -> np.ndarray:
    array = np.array(values, dtype=np.float32)
    if array.shape != (2,):
        raise ValueError(f"expected two components, got {array.shape}")
    return array


@dataclass(eq=False)
class Transform:
    """Translation, rotation (radians) and scale, applied in that order."""

    translation: np.ndarray = field(default_factory=lambda: np.zeros(2, np.float32))
    rotation: float = 0.0
    scale: np.ndarray = field(default_factory=lambda: np.ones(2, np.float32))

    def __post_init__(self) -> None:
        self.translation = _vec2(self.translation)
        self.scale = _vec2(self.scale)
        self.rotation = float(self.rotation)

    def copy(self) -> "Transform":
        return Transform(self.translation.copy(), self.rotation, self.scale.copy())


@dataclass(eq=False)
class Matrices:
    """Model and projection matrices, laid out so that ``m @ v`` transforms ``v``."""

    model: np.ndarray
    projection: np.ndarray


def _translate(x: float, y: float, z: float) -> np.ndarray:
    m = np.eye(4, dtype=np.float32)
    m[:3, 3] = (x, y, z)
    return m


def _scale(x: float, y: float, z: float) -> np.ndarray:
    return np.diag(np.array([x, y, z, 1.0], dtype=np.float32))


def _rotate_z(angle: float) -> np.ndarray:
    m = np.eye(4, dtype=np.float32)
    c, s = math.cos(angle), math.sin(angle)
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


def _ortho(left, right, bottom, top, near, far) -> np.ndarray:
    m = np.eye(4, dtype=np.float32)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def convert_to_uniform_buffer_data(
    transform: Transform, size: Sequence[float], z_index: float
) -> Matrices:
    """Build the matrices a drawable of ``size`` needs under ``transform``."""
    width, height = (float(v) for v in size)
    projection = _ortho(0.0, 1.0, 0.0, 1.0, _NEAR_CLIP, _FAR_CLIP)
    view = _scale(1.0 / WINDOW_WIDTH, 1.0 / WINDOW_HEIGHT, 1.0) @ _translate(
        WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2, 0.0
    )
    tx, ty = (float(v) for v in transform.translation)
    sx, sy = (float(v) for v in transform.scale)
    model = (
        _translate(tx, ty, float(z_index))
        @ _rotate_z(transform.rotation)
        @ _scale(sx * width, sy * height, 1.0)
    )
    return Matrices(model=model, projection=projection @ view)