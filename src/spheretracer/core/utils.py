# core/utils.py
import math
import random
from spheretracer.core.vector import Vector3

def random_in_unit_sphere(rng: random.Random) -> Vector3:
    """
    Returns a random point inside the unit ball, by rejection sampling the
    enclosing cube. Acceptance is about pi/6 per trial.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng: random.Random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2 * v.dot(n))

def refract(uv: Vector3, n: Vector3, eta_ratio: float) -> Vector3:
    """
    Bends the unit direction uv through a surface with unit normal n
    (facing against uv), following Snell's law.

    Args:
        uv: Incident unit direction.
        n: Unit normal on the incident side.
        eta_ratio: Refractive index of the incident medium over the
            transmitting one.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * eta_ratio
    r_out_parallel = n * -math.sqrt(max(0.0, 1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel

def schlick(cos_theta: float, eta_ratio: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - eta_ratio) / (1.0 + eta_ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
