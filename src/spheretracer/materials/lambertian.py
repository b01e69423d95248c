# materials/lambertian.py
import random
from typing import Tuple
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3
from spheretracer.core.utils import random_unit_vector
from spheretracer.geometry.hittable import HitRecord
from spheretracer.materials.material import Material, MaterialKind

class Lambertian(Material):
    """
    Lambertian diffuse material.
    """
    kind = MaterialKind.DIFFUSE

    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Tuple[Ray, Vector3]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (scattered_ray, attenuation).
        """
        # Normal plus a point on the unit sphere gives a cosine-weighted bounce.
        scatter_direction = rec.normal + random_unit_vector(rng)
        return Ray(rec.p, scatter_direction), self.albedo

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
