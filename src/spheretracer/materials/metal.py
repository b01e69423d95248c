# materials/metal.py
import random
from typing import Optional, Tuple
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3
from spheretracer.core.utils import reflect, random_unit_vector
from spheretracer.geometry.hittable import HitRecord
from spheretracer.materials.material import Material, MaterialKind

class Metal(Material):
    """
    Metal material: a mirror reflection blurred by fuzz (0 is a perfect mirror).
    """
    kind = MaterialKind.METAL

    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction, rec.normal)
        fuzzed = reflected + random_unit_vector(rng) * self.fuzz

        if fuzzed.dot(rec.normal) > 0:
            return Ray(rec.p, fuzzed), self.albedo

        return None  # Absorb the ray if fuzz pushed it below the surface

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
