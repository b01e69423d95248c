# geometry/sphere.py
import math
from spheretracer.core.vector import Vector3
from spheretracer.core.ray import Ray
from spheretracer.geometry.hittable import Hittable, MISS, EPSILON

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    The radius is signed: a negative radius turns the outward normal
    inwards, which models the inner wall of a hollow glass shell.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray) -> float:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c

        if discriminant < 0:
            return MISS

        sqrt_disc = math.sqrt(discriminant)
        # Nearest root first; from inside the sphere only the far one is ahead.
        root = (-b - sqrt_disc) / (2 * a)
        if root > EPSILON:
            return root
        root = (-b + sqrt_disc) / (2 * a)
        if root > EPSILON:
            return root
        return MISS

    def normal_at(self, point: Vector3) -> Vector3:
        return (point - self.center) / self.radius

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
