import math

import numpy as np
import pytest

from raycaster.cylinder import Cylinder
from raycaster.linalg import normalize, vec3


@pytest.fixture
def cyl():
    return Cylinder(vec3(0, 0, 0), 1.0, 2.0)


def _hit(p0, d, t):
    return np.asarray(p0, dtype=float) + t * np.asarray(d, dtype=float)


def test_side_hit_lies_on_surface(cyl):
    p0 = vec3(0, 1, 5)
    d = vec3(0, 0, -1)
    t = cyl.intersect(p0, d)
    q = _hit(p0, d, t)
    assert t > 0
    assert math.hypot(q[0], q[2]) == pytest.approx(1.0)
    assert q[2] > 0


def test_ray_above_is_missed(cyl):
    assert cyl.intersect(vec3(0, 3, 5), vec3(0, 0, -1)) == -1.0


def test_ray_below_is_missed(cyl):
    assert cyl.intersect(vec3(0, -1, 5), vec3(0, 0, -1)) == -1.0


def test_vertical_ray_is_missed(cyl):
    assert cyl.intersect(vec3(0, 5, 0), vec3(0, -1, 0)) == -1.0


def test_ray_wide_of_cylinder_is_missed(cyl):
    assert cyl.intersect(vec3(4, 1, 5), vec3(0, 0, -1)) == -1.0


def test_top_cap_hit(cyl):
    p0 = vec3(0, 5, 3)
    d = normalize(vec3(0, -1, -1))
    t = cyl.intersect(p0, d)
    q = _hit(p0, d, t)
    assert t > 0
    assert q[1] == pytest.approx(cyl.height)
    assert math.hypot(q[0], q[2]) <= cyl.radius


def test_origin_inside_hits_far_wall(cyl):
    p0 = vec3(0, 1, 0)
    d = vec3(1, 0, 0)
    t = cyl.intersect(p0, d)
    q = _hit(p0, d, t)
    assert t > 0
    assert q[0] == pytest.approx(1.0)


def test_cap_normals(cyl):
    assert np.allclose(cyl.normal(vec3(0.5, 0, 0)), [0, -1, 0])
    assert np.allclose(cyl.normal(vec3(0.5, 2, 0)), [0, 1, 0])


def test_side_normal_is_unit_and_horizontal():
    c = Cylinder(vec3(2, -1, 3), 1.5, 4.0)
    point = vec3(2 + 1.5 * math.cos(0.7), 1.0, 3 + 1.5 * math.sin(0.7))
    n = c.normal(point)
    assert np.linalg.norm(n) == pytest.approx(1.0)
    assert n[1] == 0.0
    assert np.allclose(n, (point - c.center) * [1, 0, 1] / 1.5)