"""Shared fixtures for the ray tracer tests."""

import math

import pytest

from camera.camera import Camera
from core.vector import Vector3
from geometry.hittable import HitRecord, Hittable
from geometry.sphere import Sphere
from geometry.world import HittableList


class FixedHit(Hittable):
    """Test surface that reports a hit at a fixed t with a marker normal."""

    def __init__(self, t, marker):
        self.t = t
        self.marker = marker

    def hit(self, ray, t_min, t_max):
        if self.t < t_min or t_max < self.t:
            return None
        return HitRecord(p=ray.at(self.t), normal=Vector3(self.marker, 0.0, 0.0), t=self.t)


@pytest.fixture
def near_sphere():
    return Sphere(Vector3(0.0, 0.0, -1.0), 0.5)


@pytest.fixture
def far_sphere():
    return Sphere(Vector3(0.0, 0.0, -3.0), 0.5)


@pytest.fixture
def single_sphere_world(near_sphere):
    return HittableList([near_sphere])


@pytest.fixture
def forward_camera():
    """Camera at the origin looking down -z, 2:1 viewport."""
    return Camera(
        origin=Vector3(0.0, 0.0, 0.0),
        yaw=1.5 * math.pi,
        pitch=0.0,
        focal_length=1.0,
        aspect_ratio=2.0,
    )
