"""Recursive ray tracer with shadows, reflection, refraction and transparency."""

from __future__ import annotations

import argparse
import math
import random
import sys
from typing import Sequence

import numpy as np
from PIL import Image

from .cone import Cone
from .cylinder import Cylinder
from .linalg import normalize, reflect, refract, rotate, scale, translate, vec3
from .plane import Plane
from .ray import Ray
from .scene_object import SceneObject
from .sphere import Sphere
from .texture import Texture, load_texture

EYE_DISTANCE = 10.0
DIVISIONS = 500
MAX_STEPS = 10
XMIN, XMAX = -10.0, 10.0
YMIN, YMAX = -10.0, 10.0

EYE = vec3(0.0, 0.0, 3.0)
BACKGROUND = vec3(0.0, 0.0, 0.0)
LIGHT_POSITIONS = (vec3(20, 23, 15), vec3(-20, 23, 15))
SPOT_POSITION = vec3(0, 5, -5)
SPOT_TARGET = vec3(0, -15, -40)
SPOT_CUTOFF_DEGREES = 15.0

AMBIENT_FACTOR = 0.2
SHADOW_AMBIENT = 0.2
TRANSPARENT_SHADOW_FACTOR = 0.8

CHECKER_LIGHT = vec3(1.0, 1.0, 1.0)
CHECKER_DARK = vec3(0.2, 0.2, 0.2)
CHECKER_TILE = 1

TEXTURE_CYLINDER_CENTER = vec3(-12.0, -17.0, -23.0)
TEXTURE_HALF_HEIGHT = 8.0

DEFAULT_CHECKER_INDEX = 0
DEFAULT_TEXTURED_INDEX = 16


def disk_rand(radius: float, rng: random.Random) -> np.ndarray:
    """Return a random point on a disk of ``radius`` in the xy plane."""
    angle = rng.uniform(0.0, 2.0 * 3.14159)
    r = rng.uniform(0.0, radius)
    return vec3(r * math.cos(angle), r * math.sin(angle), 0.0)


class RayTracer:
    """Traces rays through a list of scene objects.

    ``checker_index`` names the object painted with a chessboard pattern and
    ``textured_index`` the cylinder wrapped with ``texture``; either may be
    ``None`` to disable the effect.
    """

    def __init__(
        self,
        scene_objects: Sequence[SceneObject],
        texture: Texture | None = None,
        checker_index: int | None = DEFAULT_CHECKER_INDEX,
        textured_index: int | None = DEFAULT_TEXTURED_INDEX,
        anti_alias: bool = False,
    ) -> None:
        self.scene_objects = list(scene_objects)
        self.texture = texture
        self.checker_index = checker_index
        self.textured_index = textured_index
        self.anti_alias = anti_alias
        self._spot_dir = normalize(SPOT_TARGET - SPOT_POSITION)
        self._spot_cutoff = math.cos(math.radians(SPOT_CUTOFF_DEGREES))

    def _point_light(self, obj: SceneObject, light_pos, view_vec, hit) -> np.ndarray:
        light_vec = light_pos - hit
        shadow_ray = Ray(hit, light_vec)
        caster = shadow_ray.closest_pt(self.scene_objects)
        in_shadow = caster is not None and shadow_ray.dist < np.linalg.norm(light_vec)
        if not in_shadow:
            return obj.lighting(light_pos, view_vec, hit)
        if self.scene_objects[caster].transparent:
            total = obj.lighting(light_pos, view_vec, hit)
            shadow_ambient = SHADOW_AMBIENT * obj.color
            return shadow_ambient + TRANSPARENT_SHADOW_FACTOR * (total - shadow_ambient)
        return np.zeros(3)

    def _spot_light(self, obj: SceneObject, view_vec, hit) -> np.ndarray:
        spot_vec = SPOT_POSITION - hit
        shadow_ray = Ray(hit, normalize(spot_vec))
        caster = shadow_ray.closest_pt(self.scene_objects)
        if caster is not None and shadow_ray.dist < np.linalg.norm(spot_vec):
            return np.zeros(3)
        if float(np.dot(normalize(-spot_vec), self._spot_dir)) >= self._spot_cutoff:
            return obj.lighting(SPOT_POSITION, view_vec, hit)
        return np.zeros(3)

    def trace(self, ray: Ray, step: int = 1) -> np.ndarray:
        """Return the colour seen along ``ray`` at recursion depth ``step``."""
        index = ray.closest_pt(self.scene_objects)
        if index is None:
            return BACKGROUND.copy()
        obj = self.scene_objects[index]
        hit = ray.hit
        view_vec = -ray.direction

        color = AMBIENT_FACTOR * obj.color
        for light_pos in LIGHT_POSITIONS:
            color = color + self._point_light(obj, light_pos, view_vec, hit)
        color = color + self._spot_light(obj, view_vec, hit)

        if obj.reflective and step < MAX_STEPS:
            reflected_dir = reflect(ray.direction, obj.normal(hit))
            reflected = self.trace(Ray(hit, reflected_dir), step + 1)
            color = color + obj.reflection_coeff * reflected

        if obj.refractive and step < MAX_STEPS:
            n_in = obj.normal(hit)
            eta = 1.0 / obj.refractive_index
            if float(np.dot(ray.direction, n_in)) > 0:
                n_in = -n_in
                eta = obj.refractive_index
            g = refract(ray.direction, n_in, eta)
            g_len = float(np.linalg.norm(g))
            if g_len == 0:
                return color
            if g_len > 0:
                inside = Ray(hit, g)
                inside.closest_pt(self.scene_objects)
                n_out = obj.normal(inside.hit)
                if float(np.dot(inside.direction, n_out)) > 0:
                    n_out = -n_out
                h = refract(g, n_out, 1.0 / eta)
                refracted = self.trace(Ray(inside.hit, h), step + 1)
                color = color + obj.refraction_coeff * refracted

        if step < MAX_STEPS and obj.transparent:
            through = Ray(hit, ray.direction)
            through.closest_pt(self.scene_objects)
            beyond = Ray(through.hit, through.direction)
            coeff = obj.transparency_coeff
            color = coeff * color + (1.0 - coeff) * self.trace(beyond, step + 1)

        if index == self.checker_index:
            ix = int(hit[0] / CHECKER_TILE)
            iz = int(hit[2] / CHECKER_TILE)
            obj.color = CHECKER_LIGHT if (ix + iz) % 2 == 0 else CHECKER_DARK

        if index == self.textured_index and self.texture is not None:
            local = hit - TEXTURE_CYLINDER_CENTER
            alpha = math.atan2(local[2], local[0])
            s = (alpha + math.pi) / (2 * math.pi)
            t = (local[1] + TEXTURE_HALF_HEIGHT) / (2 * TEXTURE_HALF_HEIGHT)
            if 0 < s < 1 and 0 < t < 1:
                color = self.texture.color_at(s, t)
                obj.color = color

        return color

    def anti_aliasing(
        self, eye, xp, yp, cell_x, cell_y, threshold, depth, max_depth
    ) -> np.ndarray:
        """Adaptively supersample the cell at (``xp``, ``yp``) and return its colour."""
        eye = np.asarray(eye, dtype=float)
        offsets = ((0.25, 0.25), (0.25, 0.75), (0.75, 0.25), (0.75, 0.75))
        samples = [
            self.trace(Ray(eye, vec3(xp + fx * cell_x, yp + fy * cell_y, -EYE_DISTANCE)), 1)
            for fx, fy in offsets
        ]
        max_diff = max(float(np.linalg.norm(samples[0] - other)) for other in samples[1:])
        if max_diff < threshold or depth >= max_depth:
            return sum(samples) / 4.0

        half_x = 0.5 * cell_x
        half_y = 0.5 * cell_y
        corners = ((xp, yp), (xp + half_x, yp), (xp, yp + half_y), (xp + half_x, yp + half_y))
        total = sum(
            self.anti_aliasing(eye, x, y, half_x, half_y, threshold, depth + 1, max_depth)
            for x, y in corners
        )
        return total / 4.0

    def render(self, divisions: int = DIVISIONS) -> np.ndarray:
        """Render the view as a (rows, columns, 3) array with row 0 at the top."""
        if divisions <= 0:
            raise ValueError("divisions must be positive")
        cell_x = (XMAX - XMIN) / divisions
        cell_y = (YMAX - YMIN) / divisions
        image = np.zeros((divisions, divisions, 3))
        for i in range(divisions):
            xp = XMIN + i * cell_x
            for j in range(divisions):
                yp = YMIN + j * cell_y
                if self.anti_alias:
                    col = self.anti_aliasing(EYE, xp, yp, cell_x, cell_y, 0.1, 0, 5)
                else:
                    direction = vec3(xp + 0.5 * cell_x, yp + 0.5 * cell_y, -EYE_DISTANCE)
                    col = self.trace(Ray(EYE, direction), 1)
                image[divisions - 1 - j, i] = col
        return image


def build_scene() -> list[SceneObject]:
    """Create the room, table, spheres, cylinders and cones of the demo scene."""
    objects: list[SceneObject] = []

    def add(obj: SceneObject, color) -> SceneObject:
        obj.color = color
        objects.append(obj)
        return obj

    add(Plane((-20, -17, -30), (-20, -17, -20), (20, -17, -20), (20, -17, -30)), (0.502, 1.0, 0.859))
    add(Plane((35, -25, 50), (35, -25, -50), (-35, -25, -50), (-35, -25, 50)), (0.275, 0.510, 0.706))
    add(Plane((-35, 25, -50), (35, 25, -50), (35, 25, 50), (-35, 25, 50)), (0.502, 1.0, 0.859))
    add(Plane((-35, -25, -50), (-35, 25, -50), (-35, 25, 50), (-35, -25, 50)), (0.455, 0.0, 0.722))
    add(Plane((35, 25, -50), (35, -25, -50), (35, -25, 50), (35, 25, 50)), (0.412, 0.188, 0.765))
    add(Plane((-35, -25, -50), (35, -25, -50), (35, 25, -50), (-35, 25, -50)), (0, 0.18, 0.65))
    add(Plane((-35, 25, 40), (35, 25, 40), (35, -25, 40), (-35, -25, 40)), (0, 0.18, 0.65))

    mirror = add(Plane((25, 15, -43), (25, -6, -49), (-25, -6, -49), (-25, 15, -43)), (0, 0, 0))
    mirror.reflective = True
    mirror.reflection_coeff = 1.0

    for x, z in ((-10.0, -30.0), (10.0, -30.0), (-10.0, -21.0), (10.0, -21.0)):
        add(Cylinder((x, -25.0, z), 0.5, 8.0), (0.4, 0.2, 0.1))

    sphere1 = add(Sphere((-12.0, -5.0, -23.0), 3), (0.369, 0.376, 0.808))
    sphere1.transparent = True
    sphere1.transparency_coeff = 0.7

    sphere2 = add(Sphere((0.0, -5.0, -23.0), 3), (0, 0, 0))
    sphere2.reflective = True
    sphere2.reflection_coeff = 1.0

    cdr = 3.14159265 / 180.0
    transform = translate(np.eye(4), (12.0, -5.0, -23.0))
    transform = scale(transform, (1.3, 0.8, 1.0))
    transform = rotate(transform, 15 * cdr, (0.0, 1.0, 0.0))
    sphere3 = Sphere((0, 0, 0), 3)
    sphere3.set_transform(transform)
    add(sphere3, (1, 1, 0))

    cylinder1 = add(Cylinder((12.0, -17.0, -23.0), 2.5, 8.0), (0.208, 0.369, 0.231))
    cylinder1.refractive = True
    cylinder1.refraction_coeff = 0.8
    cylinder1.refractive_index = 1.5

    add(Cylinder((-12.0, -17.0, -23.0), 2.5, 8.0), (0.0, 0.0, 0.0))
    add(Cone((0.0, -17.0, -23.0), 2.5, 8.0), (0.208, 0.369, 0.231))
    add(Cone((-17.0, -17.0, -27.0), 3.0, 20.0), (0.208, 0.369, 0.231))
    return objects


def _to_image(pixels: np.ndarray) -> Image.Image:
    data = np.clip(pixels, 0.0, 1.0) * 255.0
    return Image.fromarray(np.round(data).astype(np.uint8), "RGB")


def main(argv=None) -> int:
    """Render the demo scene to an image file."""
    parser = argparse.ArgumentParser(description="Render the ray traced demo scene.")
    parser.add_argument("--size", type=int, default=DIVISIONS, help="cells per side")
    parser.add_argument("--texture", default="Flowers.jpg", help="texture for the cylinder")
    parser.add_argument("--output", default="raytrace.png", help="output image path")
    parser.add_argument("--anti-alias", action="store_true", help="use adaptive supersampling")
    args = parser.parse_args(argv)
    if args.size <= 0:
        parser.error("--size must be positive")

    try:
        texture = load_texture(args.texture)
        print(f"Texture successfully loaded:  Width = {texture.width} Height = {texture.height}")
    except OSError:
        print("Couldn't load texture. ", file=sys.stderr)
        texture = Texture()

    tracer = RayTracer(build_scene(), texture=texture, anti_alias=args.anti_alias)
    _to_image(tracer.render(args.size)).save(args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())