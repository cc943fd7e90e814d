import numpy as np
import pytest

from raycaster.linalg import scale, translate, vec3
from raycaster.sphere import Sphere


def _hit(p0, d, t):
    d = np.asarray(d, dtype=float)
    d = d / np.linalg.norm(d)
    return np.asarray(p0, dtype=float) + t * d


def test_miss_returns_minus_one():
    s = Sphere(vec3(0, 0, 0), 1.0)
    assert s.intersect(vec3(5, 5, 5), vec3(0, 0, -1)) == -1.0


def test_hit_point_lies_on_surface():
    center = vec3(1, 2, -3)
    s = Sphere(center, 2.0)
    p0 = vec3(1.5, 2.5, 10)
    d = vec3(0, 0, -1)
    t = s.intersect(p0, d)
    assert t > 0
    assert np.linalg.norm(_hit(p0, d, t) - center) == pytest.approx(2.0)


def test_nearest_of_two_roots_is_returned():
    s = Sphere(vec3(0, 0, 0), 1.0)
    p0 = vec3(0, 0, 5)
    t = s.intersect(p0, vec3(0, 0, -1))
    # The near side faces the ray origin.
    assert _hit(p0, vec3(0, 0, -1), t)[2] > 0


def test_origin_inside_uses_far_root():
    s = Sphere(vec3(0, 0, 0), 3.0)
    p0 = vec3(0, 0, 0)
    t = s.intersect(p0, vec3(1, 0, 0))
    assert t == pytest.approx(3.0)


def test_sphere_behind_ray_is_missed():
    s = Sphere(vec3(0, 0, 0), 1.0)
    assert s.intersect(vec3(0, 0, 5), vec3(0, 0, 1)) == -1.0


def test_tangent_ray_is_a_miss():
    s = Sphere(vec3(0, 0, 0), 1.0)
    assert s.intersect(vec3(1, 0, 5), vec3(0, 0, -1)) == -1.0


def test_normal_is_unit_and_radial():
    center = vec3(1, 1, 1)
    s = Sphere(center, 2.0)
    point = center + vec3(0, 2, 0)
    n = s.normal(point)
    assert np.linalg.norm(n) == pytest.approx(1.0)
    assert np.allclose(n, (point - center) / 2.0)


def test_translated_sphere_matches_moved_center():
    offset = vec3(3, -2, -10)
    moved = Sphere(vec3(0, 0, 0), 1.5)
    moved.set_transform(translate(np.eye(4), offset))
    placed = Sphere(offset, 1.5)
    p0 = vec3(3.2, -2.1, 5)
    d = vec3(0, 0, -1)
    assert moved.intersect(p0, d) == pytest.approx(placed.intersect(p0, d))


def test_translated_sphere_normal_matches_moved_center():
    offset = vec3(3, -2, -10)
    moved = Sphere(vec3(0, 0, 0), 1.0)
    moved.set_transform(translate(np.eye(4), offset))
    placed = Sphere(offset, 1.0)
    point = offset + vec3(0, 0, 1)
    assert np.allclose(moved.normal(point), placed.normal(point))


def test_uniform_scale_equals_larger_radius():
    scaled = Sphere(vec3(0, 0, 0), 1.0)
    scaled.set_transform(scale(np.eye(4), vec3(2, 2, 2)))
    big = Sphere(vec3(0, 0, 0), 2.0)
    p0 = vec3(0.3, 0.1, 10)
    d = vec3(0, 0, -1)
    assert scaled.intersect(p0, d) == pytest.approx(big.intersect(p0, d))