# materials/material.py
import enum
import random
from typing import Optional, Tuple
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3, ZERO
from spheretracer.geometry.hittable import HitRecord

class MaterialKind(enum.Enum):
    DIFFUSE = "diffuse"
    METAL = "metal"
    DIELECTRIC = "dielectric"
    EMISSIVE = "emissive"

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Each subclass is one MaterialKind and carries its own parameters.
    """
    kind: MaterialKind = None

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if no scattering occurs.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self) -> Vector3:
        """
        Light given off by the surface. Only light sources emit.
        """
        return ZERO
