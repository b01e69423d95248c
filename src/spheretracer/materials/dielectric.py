# materials/dielectric.py
import math
import random
from typing import Tuple
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3, ONE
from spheretracer.core.utils import reflect, refract, schlick
from spheretracer.geometry.hittable import HitRecord
from spheretracer.materials.material import Material, MaterialKind

class Dielectric(Material):
    """
    Clear refractive material (glass, water) with index of refraction ior.
    """
    kind = MaterialKind.DIELECTRIC

    def __init__(self, ior: float):
        self.ior = ior

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Tuple[Ray, Vector3]:
        # Glass doesn't absorb light
        attenuation = ONE

        # Entering or exiting decides the index ratio and normal side
        ni_over_nt = 1.0 / self.ior if rec.front_face else self.ior
        normal = rec.facing_normal()

        unit_direction = ray_in.direction
        cos_theta = min(-unit_direction.dot(normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        # Total internal reflection
        if ni_over_nt * sin_theta > 1.0:
            return Ray(rec.p, reflect(unit_direction, normal)), attenuation

        if rng.random() < schlick(cos_theta, ni_over_nt):
            direction = reflect(unit_direction, normal)
        else:
            direction = refract(unit_direction, normal, ni_over_nt)
        return Ray(rec.p, direction), attenuation

    def __repr__(self) -> str:
        return f"Dielectric(ior={self.ior})"
