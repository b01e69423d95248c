# scenes.py
import json
import math
from typing import Any, Dict

from spheretracer.core.vector import Vector3
from spheretracer.geometry.sphere import Sphere
from spheretracer.geometry.world import Scene
from spheretracer.materials import Lambertian, Metal, Dielectric, DiffuseLight, MaterialKind
from spheretracer.materials.presets import PRESETS, ColorPresets, MetalPresets, DielectricPresets

class SceneError(ValueError):
    """Raised for scene files that cannot be turned into a Scene."""

class SceneDescription:
    """
    A loaded scene plus the camera placement stored alongside it.
    Angles are kept in degrees here and converted for the Camera.
    """
    def __init__(self, scene: Scene, camera: Dict[str, Any] = None):
        self.scene = scene
        self.camera = camera or {}

    @property
    def camera_position(self) -> Vector3:
        return self.camera.get("position", Vector3(0.0, 0.0, 0.0))

    @property
    def yaw(self) -> float:
        return math.radians(self.camera.get("yaw", 0.0))

    @property
    def pitch(self) -> float:
        return math.radians(self.camera.get("pitch", 0.0))

    @property
    def fov(self):
        return self.camera.get("fov")

def reference_scene() -> Scene:
    """
    Default scene: diffuse, mirror, fuzzy gold and hollow glass spheres
    over a large ground sphere, with one small light above.
    """
    return Scene([
        Sphere(Vector3(0, 2, -5), 1, ColorPresets.matte(ColorPresets.RED)),
        Sphere(Vector3(-2, 0, -4), 1, MetalPresets.silver()),
        Sphere(Vector3(2, 0, -6), 1, MetalPresets.gold()),
        Sphere(Vector3(0, -0.4, -3), 0.6, DielectricPresets.glass()),
        # Negative radius: inner wall of the glass shell
        Sphere(Vector3(0, -0.4, -3), -0.55, DielectricPresets.glass()),
        Sphere(Vector3(-1.5, 3.5, -6), 0.5, DiffuseLight(Vector3(4.0, 4.0, 4.0))),
        Sphere(Vector3(0, -101, -5), 100, ColorPresets.matte(ColorPresets.GRAY)),
    ])

def _vector(value, where: str) -> Vector3:
    if (not isinstance(value, (list, tuple)) or len(value) != 3
            or not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value)):
        raise SceneError(f"{where}: expected a list of three numbers, got {value!r}")
    return Vector3.from_iterable(value)

def _number(spec: Dict[str, Any], key: str, where: str, default=None) -> float:
    if key not in spec:
        if default is None:
            raise SceneError(f"{where}: missing '{key}'")
        return default
    value = spec[key]
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise SceneError(f"{where}: '{key}' must be a number, got {value!r}")
    return float(value)

def material_from_dict(spec: Dict[str, Any], where: str = "material"):
    """
    Build a material from its scene-file form, e.g.
    ``{"type": "metal", "albedo": [0.8, 0.8, 0.8], "fuzz": 0.1}`` or
    ``{"preset": "glass"}``.
    """
    if not isinstance(spec, dict):
        raise SceneError(f"{where}: expected an object, got {spec!r}")

    if "preset" in spec:
        name = spec["preset"]
        if name not in PRESETS:
            raise SceneError(f"{where}: unknown preset {name!r}, expected one of {sorted(PRESETS)}")
        return PRESETS[name]()

    try:
        kind = MaterialKind(spec.get("type"))
    except ValueError:
        expected = [k.value for k in MaterialKind]
        raise SceneError(f"{where}: unknown material type {spec.get('type')!r}, expected one of {expected}") from None

    if kind is MaterialKind.DIFFUSE:
        return Lambertian(_vector(spec.get("albedo"), f"{where}.albedo"))
    if kind is MaterialKind.METAL:
        return Metal(_vector(spec.get("albedo"), f"{where}.albedo"),
                     _number(spec, "fuzz", where, default=0.0))
    if kind is MaterialKind.DIELECTRIC:
        ior = _number(spec, "ior", where)
        if ior <= 0:
            raise SceneError(f"{where}: 'ior' must be positive, got {ior}")
        return Dielectric(ior)
    return DiffuseLight(_vector(spec.get("emission"), f"{where}.emission"))

def scene_from_dict(data: Dict[str, Any]) -> SceneDescription:
    if not isinstance(data, dict) or not isinstance(data.get("spheres"), list):
        raise SceneError("scene must be an object with a 'spheres' list")

    spheres = []
    for index, entry in enumerate(data["spheres"]):
        where = f"spheres[{index}]"
        if not isinstance(entry, dict):
            raise SceneError(f"{where}: expected an object, got {entry!r}")
        radius = _number(entry, "radius", where)
        if radius == 0:
            raise SceneError(f"{where}: radius must be nonzero")
        spheres.append(Sphere(
            _vector(entry.get("center"), f"{where}.center"),
            radius,
            material_from_dict(entry.get("material"), f"{where}.material"),
        ))

    camera = {}
    camera_spec = data.get("camera", {})
    if not isinstance(camera_spec, dict):
        raise SceneError(f"camera: expected an object, got {camera_spec!r}")
    if "position" in camera_spec:
        camera["position"] = _vector(camera_spec["position"], "camera.position")
    for key in ("yaw", "pitch", "fov"):
        if key in camera_spec:
            camera[key] = _number(camera_spec, key, "camera")

    return SceneDescription(Scene(spheres), camera)

def load_scene(json_path: str) -> SceneDescription:
    """Load a scene description from a JSON file."""
    with open(json_path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SceneError(f"{json_path}: invalid JSON ({e})") from e
    return scene_from_dict(data)
