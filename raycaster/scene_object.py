"""Base class for renderable objects and their material properties."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from .linalg import normalize, reflect, vec3

AMBIENT_TERM = 0.2


class SceneObject(ABC):
    """An object in the scene with a material and an optional transform."""

    def __init__(self) -> None:
        self._color = vec3(1, 1, 1)
        self.reflective = False
        self.refractive = False
        self.specular = True
        self.transparent = False
        self.reflection_coeff = 0.8
        self.refraction_coeff = 0.8
        self.transparency_coeff = 0.8
        self.refractive_index = 1.0
        self.shininess = 50.0
        self.transform = np.eye(4)
        self.inverse_transform = np.eye(4)
        self.normal_transform = np.eye(4)

    @property
    def color(self) -> np.ndarray:
        return self._color

    @color.setter
    def color(self, value) -> None:
        self._color = np.asarray(value, dtype=float).copy()

    @abstractmethod
    def intersect(self, p0, direction) -> float:
        """Return the ray parameter of the nearest hit, or -1 if there is none."""

    @abstractmethod
    def normal(self, point) -> np.ndarray:
        """Return the unit surface normal at ``point``."""

    def set_transform(self, transform) -> None:
        """Place the object with a 4x4 model ``transform``."""
        transform = np.asarray(transform, dtype=float)
        self.transform = transform
        self.normal_transform = transform.T.copy()
        self.inverse_transform = np.linalg.inv(transform)

    def lighting(self, light_pos, view_vec, hit) -> np.ndarray:
        """Phong colour at ``hit`` lit from ``light_pos`` and seen along ``view_vec``."""
        normal_vec = self.normal(hit)
        light_vec = normalize(np.asarray(light_pos, dtype=float) - np.asarray(hit, dtype=float))
        l_dot_n = float(np.dot(light_vec, normal_vec))
        specular_term = 0.0
        if self.specular:
            refl_vec = reflect(-light_vec, normal_vec)
            r_dot_v = float(np.dot(refl_vec, view_vec))
            if r_dot_v > 0:
                specular_term = r_dot_v**self.shininess
        return AMBIENT_TERM * self.color + l_dot_n * self.color + specular_term * np.ones(3)