# renderer/shading.py
from core.color import Color, SKY_BLUE, WHITE
from core.ray import Ray
from geometry.hittable import Hittable

INFINITY = float("inf")


def background_color(ray: Ray) -> Color:
    """
    Vertical sky gradient: white looking straight down, sky blue straight up.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return Color.lerp(WHITE, SKY_BLUE, t)


def ray_color(ray: Ray, world: Hittable) -> Color:
    """
    Returns the color seen along the ray.

    A hit is tinted by its normal, each component mapped from [-1, 1] to
    [0, 1]. A miss shows the background gradient.
    """
    rec = world.hit(ray, 0.0, INFINITY)
    if rec is not None:
        n = rec.normal
        return 0.5 * Color(n.x + 1.0, n.y + 1.0, n.z + 1.0)
    return background_color(ray)
