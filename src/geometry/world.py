# src/geometry/world.py
from typing import Iterable, Iterator, List, Optional
from core.ray import Ray
from core.interval import Interval
from geometry.hittable import Hittable, HitRecord

class HittableList(Hittable):
    """
    An ordered list of Hittable objects that is itself Hittable, so lists
    can be nested to build a scene graph.

    Intersection is a linear scan: the search interval shrinks to the
    closest hit found so far, so the nearest valid hit wins.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def extend(self, objects: Iterable[Hittable]):
        self.objects.extend(objects)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
