# geometry/world.py
from typing import Iterable, Iterator, List, Optional
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    An ordered list of Hittable objects that is itself Hittable.

    hit() queries every member and returns the closest intersection. On an
    exact tie in t the member that comes first in the list wins.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None and (hit_record is None or rec.t < closest_so_far):
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
