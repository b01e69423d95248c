# materials/diffuse_light.py
from spheretracer.core.vector import Vector3
from spheretracer.materials.material import Material, MaterialKind

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance.
    """
    kind = MaterialKind.EMISSIVE

    def __init__(self, emit: Vector3):
        self.emit = emit

    def scatter(self, ray_in, rec, rng):
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self) -> Vector3:
        return self.emit

    def __repr__(self) -> str:
        return f"DiffuseLight({self.emit!r})"
