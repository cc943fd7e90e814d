"""Spheres, optionally placed with a model transform."""

from __future__ import annotations

import math

import numpy as np

from .linalg import normalize
from .scene_object import SceneObject


class Sphere(SceneObject):
    """A sphere of ``radius`` around ``center`` in object space."""

    def __init__(self, center=(0.0, 0.0, 0.0), radius: float = 1.0) -> None:
        super().__init__()
        self.center = np.asarray(center, dtype=float).copy()
        self.radius = float(radius)

    def intersect(self, p0, direction) -> float:
        """Return the distance along the ray to the nearest hit, or -1."""
        local_p0 = (self.inverse_transform @ np.append(np.asarray(p0, dtype=float), 1.0))[:3]
        local_dir = (self.inverse_transform @ np.append(np.asarray(direction, dtype=float), 0.0))[:3]
        t_scale = float(np.linalg.norm(local_dir))
        local_dir = normalize(local_dir)

        vdif = local_p0 - self.center
        b = float(np.dot(local_dir, vdif))
        length = float(np.linalg.norm(vdif))
        c = length * length - self.radius * self.radius
        delta = b * b - c
        if delta <= 0:
            return -1.0

        root = math.sqrt(delta)
        t1 = (-b - root) / t_scale
        t2 = (-b + root) / t_scale
        if t1 < 0:
            return t2 if t2 > 0 else -1.0
        return t1

    def normal(self, point) -> np.ndarray:
        """Return the unit normal at ``point``, assumed to lie on the sphere."""
        local = (self.inverse_transform @ np.append(np.asarray(point, dtype=float), 1.0))[:3]
        n = local - self.center
        n = (self.normal_transform @ np.append(n, 0.0))[:3]
        return normalize(n)