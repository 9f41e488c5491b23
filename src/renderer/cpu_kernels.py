# renderer/cpu_kernels.py
"""
Compiled per-pixel loop for scenes made only of spheres.

Mirrors the arithmetic of the object model operation for operation
(Camera.get_ray, Sphere.hit, HittableList.hit, ray_color and Color
quantization), so both paths produce the same pixels. error_model="numpy"
makes float division by zero return inf/nan as in the object model.
"""
import math

from numba import njit

from core.color import quantize_channel as _quantize_channel


@njit(error_model="numpy")
def hit_sphere(ox, oy, oz, dx, dy, dz, cx, cy, cz, radius, t_min, t_max):
    """Returns (hit, t) for the nearest root of a ray-sphere intersection in [t_min, t_max]."""
    ocx = ox - cx
    ocy = oy - cy
    ocz = oz - cz

    a = dx * dx + dy * dy + dz * dz
    half_b = ocx * dx + ocy * dy + ocz * dz
    c = (ocx * ocx + ocy * ocy + ocz * ocz) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant <= 0:
        return False, 0.0

    sqrtd = math.sqrt(discriminant)
    root = (-half_b - sqrtd) / a
    if root < t_min or t_max < root:
        root = (-half_b + sqrtd) / a
        if root < t_min or t_max < root:
            return False, 0.0

    return True, root


quantize_channel = njit(_quantize_channel)


@njit(error_model="numpy")
def render_spheres_kernel(width, height, origin, horizontal, vertical,
                          focal_length, centers, radii, out):
    """
    Renders one frame into out (uint32, row-major, 0xRRGGBB).

    Spheres are tested in array order; a later sphere replaces the current
    hit only with a strictly smaller t.
    """
    ox = origin[0]
    oy = origin[1]
    oz = origin[2]
    n_spheres = radii.shape[0]

    for j in range(height):
        v = j / (height - 1)
        for i in range(width):
            u = i / (width - 1)

            dx = (horizontal[0] * u + vertical[0] * v) - 0.0
            dy = (horizontal[1] * u + vertical[1] * v) - 0.0
            dz = (horizontal[2] * u + vertical[2] * v) - focal_length

            hit_anything = False
            closest_so_far = math.inf
            hit_index = -1
            for k in range(n_spheres):
                hit, t = hit_sphere(ox, oy, oz, dx, dy, dz,
                                    centers[k, 0], centers[k, 1], centers[k, 2],
                                    radii[k], 0.0, closest_so_far)
                if hit and (not hit_anything or t < closest_so_far):
                    hit_anything = True
                    closest_so_far = t
                    hit_index = k

            if hit_anything:
                radius = radii[hit_index]
                nx = ((ox + dx * closest_so_far) - centers[hit_index, 0]) / radius
                ny = ((oy + dy * closest_so_far) - centers[hit_index, 1]) / radius
                nz = ((oz + dz * closest_so_far) - centers[hit_index, 2]) / radius
                r = 0.5 * (nx + 1.0)
                g = 0.5 * (ny + 1.0)
                b = 0.5 * (nz + 1.0)
            else:
                length = math.sqrt(dx * dx + dy * dy + dz * dz)
                t = 0.5 * (dy / length + 1.0)
                r = (1.0 - t) * 1.0 + t * 0.5
                g = (1.0 - t) * 1.0 + t * 0.7
                b = (1.0 - t) * 1.0 + t * 1.0

            out[j * width + i] = ((quantize_channel(r) << 16) |
                                  (quantize_channel(g) << 8) |
                                  quantize_channel(b))
