import numpy as np
import pytest

from raycaster.linalg import vec3
from raycaster.plane import Plane

A = vec3(-1, -1, 0)
B = vec3(1, -1, 0)
C = vec3(1, 1, 0)
D = vec3(-1, 1, 0)


@pytest.fixture
def square():
    return Plane(A, B, C, D)


@pytest.fixture
def triangle():
    return Plane(A, B, C)


def test_vertex_counts(square, triangle):
    assert square.num_verts == 4
    assert triangle.num_verts == 3


def test_normal_is_unit_and_perpendicular(square):
    n = square.normal(vec3(0, 0, 0))
    assert np.linalg.norm(n) == pytest.approx(1.0)
    assert np.dot(n, B - A) == pytest.approx(0.0)
    assert np.dot(n, D - A) == pytest.approx(0.0)


def test_normal_follows_winding():
    forward = Plane(A, B, C, D).normal(vec3(0, 0, 0))
    backward = Plane(D, C, B, A).normal(vec3(0, 0, 0))
    assert np.allclose(forward, -backward)


def test_hit_from_front(square):
    p0 = vec3(0.2, 0.3, 5)
    d = vec3(0, 0, -1)
    t = square.intersect(p0, d)
    assert t == pytest.approx(5.0)
    assert (p0 + t * d)[2] == pytest.approx(0.0)


def test_hit_from_back(square):
    p0 = vec3(-0.4, 0.1, -5)
    d = vec3(0, 0, 1)
    t = square.intersect(p0, d)
    assert t > 0
    assert (p0 + t * d)[2] == pytest.approx(0.0)


def test_outside_polygon_is_missed(square):
    assert square.intersect(vec3(3, 0, 5), vec3(0, 0, -1)) == -1.0


def test_parallel_ray_is_missed(square):
    assert square.intersect(vec3(0, 0, 1), vec3(1, 0, 0)) == -1.0


def test_plane_behind_ray_is_missed(square):
    assert square.intersect(vec3(0, 0, -5), vec3(0, 0, -1)) == -1.0


def test_is_inside_square_and_triangle(square, triangle):
    centroid = (A + B + C) / 3
    corner = vec3(-0.9, 0.9, 0)
    assert square.is_inside(centroid)
    assert triangle.is_inside(centroid)
    assert square.is_inside(corner)
    assert not triangle.is_inside(corner)


def test_triangle_intersection_respects_edges(triangle):
    d = vec3(0, 0, -1)
    assert triangle.intersect(vec3(0.5, -0.5, 5), d) > 0
    assert triangle.intersect(vec3(-0.5, 0.5, 5), d) == -1.0