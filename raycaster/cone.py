"""Upright cones with their apex above the base centre."""

from __future__ import annotations

import math

import numpy as np

from .linalg import normalize, vec3
from .scene_object import SceneObject

EPSILON = 0.001


class Cone(SceneObject):
    """A cone with base of ``radius`` at ``center`` and apex ``height`` above it."""

    def __init__(self, center=(0.0, 0.0, 0.0), radius: float = 1.0, height: float = 1.0) -> None:
        super().__init__()
        self.center = np.asarray(center, dtype=float).copy()
        self.radius = float(radius)
        self.height = float(height)
        self.angle = math.atan(self.radius / self.height)

    def intersect(self, p0, direction) -> float:
        """Return the distance along the ray to the visible hit, or -1."""
        p0 = np.asarray(p0, dtype=float)
        d = np.asarray(direction, dtype=float)
        tan_theta = math.tan(self.angle)
        tan2 = tan_theta * tan_theta
        dx, dy, dz = d
        cx, cy, cz = self.center

        x = p0[0] - cx
        y = self.height + cy - p0[1]
        z = p0[2] - cz

        a = dx * dx + dz * dz - dy * dy * tan2
        b = 2 * x * dx + 2 * z * dz + 2 * tan2 * y * dy
        c = x * x + z * z - tan2 * y * y

        delta = b * b - 4 * a * c
        if delta < 0.0 or a == 0:
            return -1.0

        root = math.sqrt(delta)
        t1 = (-b - root) / (2 * a)
        t2 = (-b + root) / (2 * a)

        bottom = cy
        top = cy + self.height
        y1 = p0[1] + t1 * dy
        y2 = p0[1] + t2 * dy

        t = -1.0
        if t1 > EPSILON:
            if bottom <= y1 <= top:
                t = t1
        elif t2 > EPSILON and bottom <= y2 <= top:
            t = t2
        return float(t)

    def normal(self, point) -> np.ndarray:
        """Return the unit normal at ``point`` on the slanted surface."""
        p = np.asarray(point, dtype=float)
        cx, _, cz = self.center
        ox = p[0] - cx
        oz = p[2] - cz
        n = vec3(ox, self.radius / self.height * math.sqrt(ox * ox + oz * oz), oz)
        return normalize(n)