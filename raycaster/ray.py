"""Rays and nearest-hit search over a list of scene objects."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .linalg import normalize
from .scene_object import SceneObject

RAY_STEP = 0.005
MAX_DISTANCE = 1.0e6


class Ray:
    """A ray with a unit direction and the result of its nearest-hit search.

    The origin is nudged a short step along the direction so that rays
    leaving a surface do not immediately hit it again.
    """

    def __init__(self, source, direction) -> None:
        self.direction = normalize(direction)
        self.p0 = np.asarray(source, dtype=float) + RAY_STEP * self.direction
        self.hit = np.zeros(3)
        self.index: int | None = None
        self.dist = 0.0

    def closest_pt(self, scene_objects: Sequence[SceneObject]) -> int | None:
        """Record the nearest intersection with ``scene_objects``.

        Sets ``hit``, ``index`` and ``dist`` and returns ``index``, which
        stays ``None`` when nothing is hit closer than ``MAX_DISTANCE``.
        """
        t_min = MAX_DISTANCE
        for i, obj in enumerate(scene_objects):
            t = obj.intersect(self.p0, self.direction)
            if 0 < t < t_min:
                self.hit = self.p0 + self.direction * t
                self.index = i
                self.dist = t
                t_min = t
        return self.index