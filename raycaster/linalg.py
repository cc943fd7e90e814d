"""Small vector and matrix helpers built on numpy.

Matrices are 4x4 arrays acting on column vectors: a point ``p`` is mapped
by ``matrix @ [x, y, z, 1]``.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

ArrayLike = "np.ndarray | Sequence[float]"


def vec3(x: float, y: float, z: float) -> np.ndarray:
    """Return a three-component float vector."""
    return np.array([x, y, z], dtype=float)


def normalize(v) -> np.ndarray:
    """Return ``v`` scaled to unit length.

    A zero vector yields NaN components, as no direction can be derived.
    """
    v = np.asarray(v, dtype=float)
    length = np.linalg.norm(v)
    with np.errstate(divide="ignore", invalid="ignore"):
        return v / length


def reflect(incident, normal) -> np.ndarray:
    """Reflect ``incident`` about the unit vector ``normal``."""
    incident = np.asarray(incident, dtype=float)
    normal = np.asarray(normal, dtype=float)
    return incident - 2.0 * np.dot(normal, incident) * normal


def refract(incident, normal, eta: float) -> np.ndarray:
    """Refract unit ``incident`` through a surface with unit ``normal``.

    ``eta`` is the ratio of refractive indices. On total internal
    reflection the zero vector is returned.
    """
    incident = np.asarray(incident, dtype=float)
    normal = np.asarray(normal, dtype=float)
    cos_i = float(np.dot(normal, incident))
    k = 1.0 - eta * eta * (1.0 - cos_i * cos_i)
    if k < 0.0:
        return np.zeros(3)
    return eta * incident - (eta * cos_i + math.sqrt(k)) * normal


def translate(matrix, offset) -> np.ndarray:
    """Return ``matrix`` followed by a translation by ``offset``."""
    t = np.eye(4)
    t[:3, 3] = np.asarray(offset, dtype=float)
    return np.asarray(matrix, dtype=float) @ t


def scale(matrix, factors) -> np.ndarray:
    """Return ``matrix`` followed by a per-axis scaling by ``factors``."""
    s = np.diag([*np.asarray(factors, dtype=float), 1.0])
    return np.asarray(matrix, dtype=float) @ s


def rotate(matrix, angle: float, axis) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = normalize(axis)
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    r = np.array(
        [
            [t * x * x + c, t * x * y - s * z, t * x * z + s * y, 0.0],
            [t * x * y + s * z, t * y * y + c, t * y * z - s * x, 0.0],
            [t * x * z - s * y, t * y * z + s * x, t * z * z + c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return np.asarray(matrix, dtype=float) @ r