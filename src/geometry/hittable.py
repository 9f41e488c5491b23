# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "front_face")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0.0, front_face: bool = True):
        self.p = p              # Intersection point
        self.normal = normal    # Outward surface normal at intersection
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the ray approached from outside

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Stores the outward normal and records which side the ray came from.

        The normal is kept outward-facing even for hits from inside; the
        shader visualizes the signed outward normal.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(p={self.p!r}, normal={self.normal!r}, "
                f"t={self.t}, front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
