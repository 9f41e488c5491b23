"""Unit tests for the HittableList closest-hit query."""

import math

from conftest import FixedHit
from core.ray import Ray
from core.vector import Vector3
from geometry.world import HittableList

INF = math.inf


def forward_ray():
    return Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))


class TestClosestHit:

    def test_returns_nearest_of_two_spheres(self, near_sphere, far_sphere):
        world = HittableList([near_sphere, far_sphere])
        assert world.hit(forward_ray(), 0.0, INF).t == 0.5

    def test_order_does_not_change_result(self, near_sphere, far_sphere):
        world = HittableList([far_sphere, near_sphere])
        assert world.hit(forward_ray(), 0.0, INF).t == 0.5

    def test_empty_world_misses(self):
        assert HittableList().hit(forward_ray(), 0.0, INF) is None

    def test_miss(self, near_sphere, far_sphere):
        world = HittableList([near_sphere, far_sphere])
        ray = Ray(Vector3.zero(), Vector3(1.0, 0.0, 0.0))
        assert world.hit(ray, 0.0, INF) is None

    def test_respects_t_max(self, near_sphere, far_sphere):
        world = HittableList([near_sphere, far_sphere])
        assert world.hit(forward_ray(), 0.0, 0.4) is None

    def test_first_member_wins_exact_tie(self):
        world = HittableList([FixedHit(1.0, 1.0), FixedHit(1.0, 2.0), FixedHit(1.0, 3.0)])
        rec = world.hit(forward_ray(), 0.0, INF)
        assert rec.normal.x == 1.0

    def test_later_member_wins_when_strictly_closer(self):
        world = HittableList([FixedHit(2.0, 1.0), FixedHit(1.0, 2.0), FixedHit(1.0, 3.0)])
        rec = world.hit(forward_ray(), 0.0, INF)
        assert rec.t == 1.0
        assert rec.normal.x == 2.0

    def test_nested_lists(self, near_sphere, far_sphere):
        """A HittableList can hold other HittableLists."""
        inner = HittableList([far_sphere])
        world = HittableList([inner, HittableList([near_sphere])])
        assert world.hit(forward_ray(), 0.0, INF).t == 0.5


class TestContainer:

    def test_add_len_iter_clear(self, near_sphere, far_sphere):
        world = HittableList()
        world.add(near_sphere)
        world.add(far_sphere)
        assert len(world) == 2
        assert list(world) == [near_sphere, far_sphere]
        world.clear()
        assert len(world) == 0
