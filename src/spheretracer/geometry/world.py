# geometry/world.py
from typing import Iterable, Optional, Tuple
from spheretracer.core.ray import Ray
from spheretracer.geometry.hittable import Hittable, HitRecord

class Scene:
    """
    An ordered, read-only collection of Hittable objects.

    Nearest-hit queries scan every object; with equal distances the
    object added first wins.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self._objects: Tuple[Hittable, ...] = tuple(objects)

    @property
    def objects(self) -> Tuple[Hittable, ...]:
        return self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self):
        return iter(self._objects)

    def closest(self, ray: Ray) -> Tuple[Optional[Hittable], float]:
        """
        Returns the nearest object hit by the ray and its distance,
        or (None, inf) when nothing is hit.
        """
        closest_so_far = float("inf")
        hit_object = None
        for obj in self._objects:
            t = obj.hit(ray)
            if 0 < t < closest_so_far:
                closest_so_far = t
                hit_object = obj
        return hit_object, closest_so_far

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        hit_object, t = self.closest(ray)
        if hit_object is None:
            return None
        return hit_object.hit_record(ray, t)

    def __repr__(self) -> str:
        return f"Scene({len(self._objects)} objects)"
