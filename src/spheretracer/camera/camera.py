# camera/camera.py
import math
import random
from spheretracer.core.vector import Vector3
from spheretracer.core.ray import Ray

class Camera:
    """
    Pinhole camera. With yaw and pitch at zero it sits at ``position``
    looking down -z with +y up.
    """
    def __init__(self, position: Vector3, fov: float, aspect_ratio: float,
                 yaw: float = 0.0, pitch: float = 0.0):
        self.position = position
        self.fov = fov  # vertical, degrees
        self.aspect_ratio = aspect_ratio
        self.yaw = yaw
        self.pitch = pitch
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport scale."""
        global_up = Vector3(0, 1, 0)

        self.forward = Vector3(
            math.sin(self.yaw) * math.cos(self.pitch),
            math.sin(self.pitch),
            -math.cos(self.yaw) * math.cos(self.pitch)
        ).normalize()

        self.right = self.forward.cross(global_up).normalize()
        self.up = self.right.cross(self.forward).normalize()

        # Half-height of the image plane at distance 1
        self.scale = math.tan(math.radians(self.fov / 2))

    def get_ray(self, i: int, j: int, width: int, height: int,
                rng: random.Random) -> Ray:
        """
        Ray through a random point of pixel (i, j), rows counted from the top.
        """
        x = (2 * (i + rng.random()) / width - 1) * self.aspect_ratio * self.scale
        y = (1 - 2 * (j + rng.random()) / height) * self.scale
        direction = self.forward + self.right * x + self.up * y
        return Ray(self.position, direction)
