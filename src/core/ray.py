# core/ray.py
from core.vector import Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin and direction.

    The direction is not required to be unit length. A ray is read-only once
    constructed.
    """
    __slots__ = ("_origin", "_direction")

    def __init__(self, origin: Vector3, direction: Vector3):
        self._origin = origin
        self._direction = direction

    @property
    def origin(self) -> Vector3:
        return self._origin

    @property
    def direction(self) -> Vector3:
        return self._direction

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self._origin + self._direction * t

    def __repr__(self) -> str:
        return f"Ray({self._origin!r}, {self._direction!r})"
