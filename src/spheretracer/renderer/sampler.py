# renderer/sampler.py
import random
import time
from multiprocessing import Pool
from typing import List, Tuple

import numpy as np

from spheretracer.camera.camera import Camera
from spheretracer.config import RenderSettings
from spheretracer.core.vector import Vector3
from spheretracer.geometry.world import Scene
from spheretracer.renderer.raytracer import PathTracer

PROGRESS_INTERVAL = 100

def row_seeds(seed: int, height: int) -> List[int]:
    """
    One independent seed per image row, derived from the render seed.
    Rows render the same no matter which worker picks them up.
    """
    children = np.random.SeedSequence(seed).spawn(height)
    return [int(child.generate_state(1)[0]) for child in children]

def render_row(scene: Scene, camera: Camera, settings: RenderSettings,
               j: int, seed: int) -> np.ndarray:
    """
    Averages ``samples_per_pixel`` traces for every pixel of row ``j``.
    Returns a (width, 3) array of linear colors.
    """
    rng = random.Random(seed)
    tracer = PathTracer(scene, rng)
    width, height = settings.width, settings.height
    spp = settings.samples_per_pixel
    row = np.zeros((width, 3), dtype=np.float64)

    for i in range(width):
        r = g = b = 0.0
        for _ in range(spp):
            ray = camera.get_ray(i, j, width, height, rng)
            color = tracer.trace(ray, settings.max_depth)
            r += color.x
            g += color.y
            b += color.z
        row[i] = (r / spp, g / spp, b / spp)
    return row

# Per-process state for pool workers, set once by _init_worker.
_worker_state = None

def _init_worker(scene: Scene, camera: Camera, settings: RenderSettings):
    global _worker_state
    _worker_state = (scene, camera, settings)

def _render_row_task(args: Tuple[int, int]) -> np.ndarray:
    j, seed = args
    scene, camera, settings = _worker_state
    return render_row(scene, camera, settings, j, seed)

class Renderer:
    """
    Drives the per-pixel sampling loop and assembles the linear image.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings

    def make_camera(self, position=None, yaw: float = 0.0, pitch: float = 0.0) -> Camera:
        if position is None:
            position = Vector3(0.0, 0.0, 0.0)
        return Camera(position, self.settings.fov, self.settings.aspect_ratio,
                      yaw=yaw, pitch=pitch)

    def _log(self, message: str):
        if self.settings.verbose:
            print(message)

    def render(self, scene: Scene, camera: Camera = None) -> np.ndarray:
        """
        Renders the scene and returns a (height, width, 3) float array of
        linear radiance, rows top to bottom.
        """
        settings = self.settings
        if camera is None:
            camera = self.make_camera()

        width, height = settings.width, settings.height
        image = np.zeros((height, width, 3), dtype=np.float64)
        tasks = list(enumerate(row_seeds(settings.seed, height)))

        self._log(f"Rendering {width}x{height}, {settings.samples_per_pixel} samples, "
                  f"depth {settings.max_depth}, {len(scene)} objects, "
                  f"{settings.workers} worker(s)")
        start_time = time.time()

        if settings.workers > 1:
            with Pool(processes=settings.workers, initializer=_init_worker,
                      initargs=(scene, camera, settings)) as pool:
                for j, row in enumerate(pool.imap(_render_row_task, tasks)):
                    if j % PROGRESS_INTERVAL == 0:
                        self._log(f"Row {j}/{height}")
                    image[j] = row
        else:
            for j, seed in tasks:
                if j % PROGRESS_INTERVAL == 0:
                    self._log(f"Row {j}/{height}")
                image[j] = render_row(scene, camera, settings, j, seed)

        elapsed_time = time.time() - start_time
        self._log(f"Rendering completed in {elapsed_time:.2f} seconds")
        return image
