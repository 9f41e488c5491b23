# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray

WORLD_UP = Vector3(0.0, 1.0, 0.0)


class Camera:
    """
    Orbit camera described by an origin, yaw/pitch angles and a focal length.

    The basis vectors are derived state; call update_camera() after changing
    origin, yaw, pitch or focal_length directly.
    """
    def __init__(self, origin: Vector3, yaw: float, pitch: float,
                 focal_length: float, aspect_ratio: float,
                 viewport_height: float = 2.0):
        self.origin = origin
        self.yaw = yaw              # In radians
        self.pitch = pitch          # In radians
        self.focal_length = focal_length
        self.viewport_height = viewport_height
        self.viewport_width = aspect_ratio * viewport_height
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        # Degenerate when the view direction is parallel to WORLD_UP.
        self.direction = Vector3(
            math.cos(self.yaw) * math.cos(self.pitch),
            math.sin(self.pitch),
            math.sin(self.yaw) * math.cos(self.pitch)
        ).normalize()

        self.right = self.direction.cross(WORLD_UP).normalize()
        self.up = self.right.cross(self.direction).normalize()

        self.horizontal = self.right * self.viewport_width
        self.vertical = self.up * self.viewport_height

    def get_ray(self, u: float, v: float) -> Ray:
        """
        Generates the ray for normalized pixel coordinates (u, v) in [0, 1].
        """
        direction = (self.horizontal * u +
                     self.vertical * v -
                     Vector3(0.0, 0.0, self.focal_length))
        return Ray(self.origin, direction)

    def __repr__(self) -> str:
        return (f"Camera(origin={self.origin!r}, yaw={self.yaw}, "
                f"pitch={self.pitch}, focal_length={self.focal_length})")
