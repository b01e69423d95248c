# renderer/raytracer.py
import random
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3, ZERO
from spheretracer.geometry.world import Scene

SKY_WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

def background(ray: Ray) -> Vector3:
    """
    Sky gradient: white looking straight down, blue looking straight up,
    blended linearly on the direction's y component.
    """
    t = 0.5 * (ray.direction.y + 1.0)
    return SKY_WHITE * (1.0 - t) + SKY_BLUE * t

class PathTracer:
    """
    Recursive Monte Carlo radiance estimator over a read-only scene.

    Every random draw comes from ``rng``, so a tracer owned by one worker
    never shares generator state with another.
    """
    def __init__(self, scene: Scene, rng: random.Random = None):
        self.scene = scene
        self.rng = rng if rng is not None else random.Random()

    def trace(self, ray: Ray, depth: int) -> Vector3:
        """
        Returns the radiance arriving along ``ray`` using at most ``depth``
        bounces. An exhausted budget contributes no light.
        """
        if depth <= 0:
            return ZERO

        rec = self.scene.hit(ray)
        if rec is None:
            return background(ray)

        scattered = rec.material.scatter(ray, rec, self.rng)
        if scattered is None:
            # Light sources end the path with their emission, absorbed
            # metal bounces emit nothing.
            return rec.material.emitted()

        bounce, attenuation = scattered
        return attenuation * self.trace(bounce, depth - 1)
