"""Upright cylinders with a closed top cap."""

from __future__ import annotations

import math

import numpy as np

from .linalg import normalize, vec3
from .scene_object import SceneObject

EPSILON = 0.001


class Cylinder(SceneObject):
    """A cylinder around the y axis through ``center``, from its base up ``height``."""

    def __init__(self, center=(0.0, 0.0, 0.0), radius: float = 1.0, height: float = 1.0) -> None:
        super().__init__()
        self.center = np.asarray(center, dtype=float).copy()
        self.radius = float(radius)
        self.height = float(height)

    def intersect(self, p0, direction) -> float:
        """Return the distance along the ray to the visible hit, or -1."""
        p0 = np.asarray(p0, dtype=float)
        d = np.asarray(direction, dtype=float)
        cx, cy, cz = self.center
        ox = p0[0] - cx
        oz = p0[2] - cz

        a = d[0] * d[0] + d[2] * d[2]
        b = 2 * (ox * d[0] + oz * d[2])
        c = ox * ox + oz * oz - self.radius * self.radius
        delta = b * b - 4 * a * c
        if delta < EPSILON:
            return -1.0

        root = math.sqrt(delta)
        t1 = (-b - root) / (2 * a)
        t2 = (-b + root) / (2 * a)

        bottom = cy
        top = cy + self.height
        y1 = p0[1] + t1 * d[1]
        y2 = p0[1] + t2 * d[1]

        t = -1.0
        if t1 > EPSILON:
            if bottom <= y1 <= top:
                t = t1
        elif t2 > EPSILON and bottom <= y2 <= top:
            t = t2

        # Entering above the side and leaving through it means crossing the top cap.
        if y1 >= top and d[1] != 0:
            cap_t = (top - p0[1]) / d[1]
            if cap_t > 0 and bottom <= y2 <= top:
                t = cap_t

        return float(t)

    def normal(self, point) -> np.ndarray:
        """Return the unit normal at ``point`` on a cap or the side."""
        p = np.asarray(point, dtype=float)
        cx, cy, cz = self.center
        if abs(p[1] - cy) < EPSILON:
            return vec3(0, -1, 0)
        if abs(p[1] - (cy + self.height)) < EPSILON:
            return vec3(0, 1, 0)
        return normalize(vec3(p[0] - cx, 0.0, p[2] - cz))