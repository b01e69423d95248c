# materials/presets.py
from spheretracer.core.vector import Vector3
from spheretracer.materials.metal import Metal
from spheretracer.materials.lambertian import Lambertian
from spheretracer.materials.dielectric import Dielectric
from spheretracer.materials.diffuse_light import DiffuseLight

class MetalPresets:
    """Predefined metal materials with realistic properties."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.8)

    @staticmethod
    def silver() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.0)

    @staticmethod
    def copper() -> Metal:
        return Metal(Vector3(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def chrome() -> Metal:
        return Metal(Vector3(0.9, 0.9, 0.9), fuzz=0.05)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.3)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

class LightPresets:
    """Predefined light sources with different colors and intensities."""

    @staticmethod
    def warm_light(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Vector3(1.0, 0.95, 0.9) * intensity)

    @staticmethod
    def cool_light(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Vector3(0.9, 0.95, 1.0) * intensity)

    @staticmethod
    def daylight(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Vector3(1.0, 1.0, 1.0) * intensity)

class ColorPresets:
    """Common color presets for materials."""

    RED = Vector3(0.8, 0.2, 0.2)
    GREEN = Vector3(0.2, 0.8, 0.2)
    BLUE = Vector3(0.2, 0.3, 0.9)
    GRAY = Vector3(0.5, 0.5, 0.5)
    WHITE = Vector3(0.9, 0.9, 0.9)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

# Names accepted by the "preset" key of a scene file material.
PRESETS = {
    "gold": MetalPresets.gold,
    "silver": MetalPresets.silver,
    "copper": MetalPresets.copper,
    "chrome": MetalPresets.chrome,
    "brushed_metal": MetalPresets.brushed_metal,
    "glass": DielectricPresets.glass,
    "water": DielectricPresets.water,
    "diamond": DielectricPresets.diamond,
    "warm_light": LightPresets.warm_light,
    "cool_light": LightPresets.cool_light,
    "daylight": LightPresets.daylight,
}
