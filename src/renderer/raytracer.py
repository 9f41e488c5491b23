# renderer/raytracer.py
import logging
from typing import List, Optional

import numpy as np

from camera.camera import Camera
from geometry.hittable import Hittable
from geometry.sphere import Sphere
from geometry.world import HittableList
from renderer.cpu_kernels import render_spheres_kernel
from renderer.shading import ray_color

logger = logging.getLogger(__name__)

BACKENDS = ("auto", "python", "numba")


def collect_spheres(world: Hittable) -> Optional[List[Sphere]]:
    """
    Flattens a scene into its spheres, depth first, keeping list order.

    Returns None if the scene holds anything other than spheres and
    HittableLists.
    """
    spheres = []
    stack = [world]
    while stack:
        obj = stack.pop()
        if isinstance(obj, Sphere):
            spheres.append(obj)
        elif isinstance(obj, HittableList):
            stack.extend(reversed(obj.objects))
        else:
            return None
    return spheres


class Renderer:
    """
    Renders frames of width x height packed 0xRRGGBB pixels.

    backend selects how the per-pixel loop runs:
      "python" walks the Hittable object model for every pixel.
      "numba"  runs a compiled loop over the flattened sphere arrays.
      "auto"   uses numba when the scene flattens to spheres, python otherwise.

    The returned frame buffer is reused between calls.
    """
    def __init__(self, width: int, height: int, backend: str = "auto"):
        if width < 2 or height < 2:
            raise ValueError(f"Render size must be at least 2x2, got {width}x{height}")
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend {backend!r}, expected one of {BACKENDS}")
        self.width = width
        self.height = height
        self.backend = backend
        self.frame = np.zeros(width * height, dtype=np.uint32)

        # Flattened scene data for the compiled path
        self.fallback_scene = None
        self.sphere_centers = None
        self.sphere_radii = None

    def update_scene_data(self, world: Hittable) -> bool:
        """
        Extracts sphere centers and radii from the world for the compiled
        path. render_frame calls this every frame.

        Returns False if the world cannot be flattened.
        """
        spheres = collect_spheres(world)
        if spheres is None:
            self.sphere_centers = None
            self.sphere_radii = None
            return False

        self.sphere_centers = np.zeros((len(spheres), 3), dtype=np.float64)
        self.sphere_radii = np.zeros(len(spheres), dtype=np.float64)
        for idx, sphere in enumerate(spheres):
            self.sphere_centers[idx] = [sphere.center.x, sphere.center.y, sphere.center.z]
            self.sphere_radii[idx] = sphere.radius
        return True

    def resolve_backend(self, world: Hittable) -> str:
        if self.backend == "python":
            return "python"
        # Rescan every call: the world may have been edited in place.
        if self.update_scene_data(world):
            self.fallback_scene = None
            return "numba"
        if self.backend == "numba":
            raise ValueError("The numba backend only renders scenes made of spheres")
        if world is not self.fallback_scene:
            logger.warning("Scene is not sphere-only; falling back to the python backend")
            self.fallback_scene = world
        return "python"

    def render_frame(self, camera: Camera, world: Hittable) -> np.ndarray:
        """
        Renders one frame from the camera's current state.

        Pixel (i, j) is stored at j * width + i and uses the ray for
        u = i / (width - 1), v = j / (height - 1).
        """
        if self.resolve_backend(world) == "numba":
            self._render_compiled(camera)
        else:
            self._render_python(camera, world)
        return self.frame

    def _render_python(self, camera: Camera, world: Hittable):
        width, height = self.width, self.height
        frame = self.frame
        for j in range(height):
            v = j / (height - 1)
            row = j * width
            for i in range(width):
                u = i / (width - 1)
                ray = camera.get_ray(u, v)
                frame[row + i] = ray_color(ray, world).to_packed()

    def _render_compiled(self, camera: Camera):
        render_spheres_kernel(
            self.width, self.height,
            np.array(list(camera.origin), dtype=np.float64),
            np.array(list(camera.horizontal), dtype=np.float64),
            np.array(list(camera.vertical), dtype=np.float64),
            float(camera.focal_length),
            self.sphere_centers, self.sphere_radii,
            self.frame
        )
