from spheretracer.materials.material import Material, MaterialKind
from spheretracer.materials.lambertian import Lambertian
from spheretracer.materials.metal import Metal
from spheretracer.materials.dielectric import Dielectric
from spheretracer.materials.diffuse_light import DiffuseLight

__all__ = [
    "Material",
    "MaterialKind",
    "Lambertian",
    "Metal",
    "Dielectric",
    "DiffuseLight",
]
