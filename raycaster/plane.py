"""Planar polygons: quads and triangles."""

from __future__ import annotations

import numpy as np

from .linalg import normalize
from .scene_object import SceneObject

PARALLEL_TOLERANCE = 1.0e-4


class Plane(SceneObject):
    """A flat convex quad ``a, b, c, d`` or, without ``d``, a triangle ``a, b, c``."""

    def __init__(self, a, b, c, d=None) -> None:
        super().__init__()
        self.a = np.asarray(a, dtype=float).copy()
        self.b = np.asarray(b, dtype=float).copy()
        self.c = np.asarray(c, dtype=float).copy()
        self.d = np.zeros(3) if d is None else np.asarray(d, dtype=float).copy()
        self.num_verts = 3 if d is None else 4

    def is_inside(self, point) -> bool:
        """Return whether ``point`` on the plane lies strictly inside the polygon."""
        q = np.asarray(point, dtype=float)
        n = self.normal(q)
        a, b, c, d = self.a, self.b, self.c, self.d
        ua, ub, uc, ud = b - a, c - b, d - c, a - d
        if self.num_verts == 3:
            uc = a - c
        ka = float(np.dot(np.cross(ua, q - a), n))
        kb = float(np.dot(np.cross(ub, q - b), n))
        kc = float(np.dot(np.cross(uc, q - c), n))
        kd = float(np.dot(np.cross(ud, q - d), n)) if self.num_verts == 4 else ka
        signs = (ka, kb, kc, kd)
        return all(k > 0 for k in signs) or all(k < 0 for k in signs)

    def intersect(self, p0, direction) -> float:
        """Return the distance along the ray to the polygon, or -1."""
        p0 = np.asarray(p0, dtype=float)
        d = np.asarray(direction, dtype=float)
        n = self.normal(p0)
        d_dot_n = float(np.dot(d, n))
        if abs(d_dot_n) < PARALLEL_TOLERANCE:
            return -1.0
        t = float(np.dot(self.a - p0, n)) / d_dot_n
        if t < 0:
            return -1.0
        return t if self.is_inside(p0 + d * t) else -1.0

    def normal(self, point) -> np.ndarray:
        """Return the unit normal of the plane; ``point`` is not used."""
        return normalize(np.cross(self.c - self.b, self.a - self.b))