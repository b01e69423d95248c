from spheretracer.geometry.hittable import EPSILON, MISS, HitRecord, Hittable
from spheretracer.geometry.sphere import Sphere
from spheretracer.geometry.world import Scene

__all__ = ["EPSILON", "MISS", "HitRecord", "Hittable", "Sphere", "Scene"]
