"""Unit tests for ray-sphere intersection."""

import math

import pytest

from core.ray import Ray
from core.vector import Vector3
from geometry.sphere import Sphere

INF = math.inf


class TestSphereHit:

    def test_hit_from_outside(self, near_sphere):
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        rec = near_sphere.hit(ray, 0.0, INF)
        assert rec is not None
        assert rec.t == 0.5
        assert rec.p == Vector3(0.0, 0.0, -0.5)
        assert rec.normal == Vector3(0.0, 0.0, 1.0)
        assert rec.front_face is True

    def test_miss(self, near_sphere):
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))
        assert near_sphere.hit(ray, 0.0, INF) is None

    def test_tangent_ray_misses(self, near_sphere):
        """A zero discriminant counts as a miss."""
        ray = Ray(Vector3(0.0, 0.5, 0.0), Vector3(0.0, 0.0, -1.0))
        assert near_sphere.hit(ray, 0.0, INF) is None

    def test_roots_symmetric_about_projected_center(self):
        """Both roots sit at equal distance from the center's projection."""
        sphere = Sphere(Vector3(0.0, 0.0, -5.0), 1.0)
        direction = Vector3(0.0, 0.0, -2.0)
        ray = Ray(Vector3(0.0, 0.0, 0.0), direction)
        t_center = (sphere.center - ray.origin).dot(direction) / direction.length_squared()

        near = sphere.hit(ray, 0.0, INF)
        far = sphere.hit(ray, t_center, INF)
        assert near.t == 2.0
        assert far.t == 3.0
        assert t_center - near.t == pytest.approx(far.t - t_center)

    def test_translation_consistent(self):
        """Moving ray and sphere together leaves t unchanged."""
        offset = Vector3(3.0, -2.0, 7.0)
        direction = Vector3(0.2, 0.1, -1.0)
        sphere = Sphere(Vector3(0.5, 0.0, -4.0), 1.0)
        moved = Sphere(sphere.center + offset, 1.0)

        rec = sphere.hit(Ray(Vector3.zero(), direction), 0.0, INF)
        rec_moved = moved.hit(Ray(offset, direction), 0.0, INF)
        assert rec_moved.t == pytest.approx(rec.t)
        assert (rec_moved.p - offset - rec.p).length() < 1e-9

    def test_falls_back_to_far_root(self):
        """With the near root before t_min, the far root is returned."""
        sphere = Sphere(Vector3(0.0, 0.0, -1.0), 0.5)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        rec = sphere.hit(ray, 1.0, INF)
        assert rec.t == 1.5
        assert rec.normal == Vector3(0.0, 0.0, -1.0)

    def test_ray_from_inside(self):
        """From inside, the hit is the exit point and the normal stays outward."""
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 2.0)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))
        rec = sphere.hit(ray, 0.0, INF)
        assert rec.t == 2.0
        assert rec.normal == Vector3(1.0, 0.0, 0.0)
        assert rec.front_face is False

    def test_both_roots_outside_interval(self, near_sphere):
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert near_sphere.hit(ray, 0.0, 0.25) is None
        assert near_sphere.hit(ray, 2.0, INF) is None

    def test_interval_is_closed(self, near_sphere):
        """A root exactly at t_min or t_max is accepted."""
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert near_sphere.hit(ray, 0.0, 0.5).t == 0.5
        assert near_sphere.hit(ray, 0.5, INF).t == 0.5

    def test_normal_is_unit_length(self):
        sphere = Sphere(Vector3(1.0, 2.0, -6.0), 1.5)
        ray = Ray(Vector3.zero(), Vector3(0.15, 0.35, -1.0))
        rec = sphere.hit(ray, 0.0, INF)
        assert rec is not None
        assert rec.normal.length() == pytest.approx(1.0)


class TestSphereConstruction:

    @pytest.mark.parametrize("radius", [0.0, -1.0, math.nan])
    def test_rejects_non_positive_radius(self, radius):
        with pytest.raises(ValueError):
            Sphere(Vector3.zero(), radius)
