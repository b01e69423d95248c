# geometry/hittable.py
from spheretracer.core.vector import Vector3
from spheretracer.core.ray import Ray

# Distance returned by Hittable.hit when the ray misses.
MISS = -1.0

# Hits closer than this are ignored so a bounced ray does not
# re-hit the surface it starts on (shadow acne).
EPSILON = 0.001

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material = None):
        self.p = p              # Intersection point
        self.normal = normal    # Outward surface normal at intersection
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the ray arrived from outside
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Stores the outward normal and records which side the ray came from.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal

    def facing_normal(self) -> Vector3:
        """
        The normal flipped, if needed, to point against the incoming ray.
        """
        return self.normal if self.front_face else -self.normal

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    material = None

    def hit(self, ray: Ray) -> float:
        """
        Returns the distance along the ray to the nearest intersection
        beyond EPSILON, or MISS.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def normal_at(self, point: Vector3) -> Vector3:
        raise NotImplementedError("normal_at() must be implemented by subclasses.")

    def hit_record(self, ray: Ray, t: float) -> HitRecord:
        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.set_face_normal(ray, self.normal_at(rec.p))
        rec.material = self.material
        return rec
