from spheretracer.core.vector import Vector3
from spheretracer.core.ray import Ray
from spheretracer.geometry.sphere import Sphere
from spheretracer.geometry.world import Scene
from spheretracer.renderer.raytracer import PathTracer, background
from spheretracer.renderer.sampler import Renderer
from spheretracer.config import RenderSettings

__version__ = "0.1.0"

__all__ = [
    "Vector3",
    "Ray",
    "Sphere",
    "Scene",
    "PathTracer",
    "background",
    "Renderer",
    "RenderSettings",
]
