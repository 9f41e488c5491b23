"""Unit tests for the Ray class."""

import pytest

from core.ray import Ray
from core.vector import Vector3


class TestRay:

    def test_at_origin(self):
        ray = Ray(Vector3(1.0, 2.0, 3.0), Vector3(0.0, 0.0, -1.0))
        assert ray.at(0.0) == Vector3(1.0, 2.0, 3.0)

    def test_at_positive_t(self):
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))
        assert ray.at(5.0) == Vector3(5.0, 0.0, 0.0)

    def test_at_negative_t(self):
        """No validation of t: points behind the origin are allowed."""
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert ray.at(-3.0) == Vector3(0.0, -3.0, 0.0)

    def test_direction_is_not_normalized(self):
        ray = Ray(Vector3.zero(), Vector3(0.0, 0.0, -2.0))
        assert ray.direction == Vector3(0.0, 0.0, -2.0)
        assert ray.at(1.5) == Vector3(0.0, 0.0, -3.0)

    def test_read_only(self):
        ray = Ray(Vector3.zero(), Vector3(1.0, 0.0, 0.0))
        with pytest.raises(AttributeError):
            ray.origin = Vector3(1.0, 1.0, 1.0)

    def test_at_does_not_mutate(self):
        origin = Vector3(1.0, 1.0, 1.0)
        ray = Ray(origin, Vector3(1.0, 0.0, 0.0))
        ray.at(10.0)
        assert ray.origin == Vector3(1.0, 1.0, 1.0)
