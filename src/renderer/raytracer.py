# renderer/raytracer.py
import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from camera.camera import Camera
from core.ray import Ray
from core.vector import Vector3
from geometry.world import Scene
from renderer.tone_mapping import TONE_MAPPERS, tone_map

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class RenderSettings:
    background: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    tone_mapping: str = "clamp"
    exposure: float = 1.0
    workers: int = 1
    chunk_rows: int = 16

    def __post_init__(self):
        if self.tone_mapping not in TONE_MAPPERS:
            raise ValueError(f"Unknown tone mapping '{self.tone_mapping}'")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")
        if self.chunk_rows < 1:
            raise ValueError("chunk_rows must be >= 1")

class Renderer:
    """
    Reference driver: one primary ray per pixel, nearest hit over the
    scene, local illumination at the hit. Every ray query is independent,
    so row chunks can be traced concurrently.
    """
    def __init__(self, width: int, height: int, settings: RenderSettings = None):
        if width < 1 or height < 1:
            raise ValueError("Renderer requires width and height >= 1")
        self.width = width
        self.height = height
        self.settings = settings if settings is not None else RenderSettings()

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def trace(self, scene: Scene, ray: Ray) -> Vector3:
        color = scene.shade(ray)
        if color is None:
            return self.settings.background
        return color

    def _render_rows(self, scene: Scene, camera: Camera, y_start: int, y_end: int) -> Tuple[int, np.ndarray]:
        rows = np.zeros((y_end - y_start, self.width, 3), dtype=np.float32)
        for y in range(y_start, y_end):
            # Image row 0 is the top of the viewport
            v = 1.0 - (y + 0.5) / self.height
            for x in range(self.width):
                u = (x + 0.5) / self.width
                rows[y - y_start, x] = tuple(self.trace(scene, camera.get_ray(u, v)))
        return y_start, rows

    def render(self, scene: Scene, camera: Camera) -> np.ndarray:
        """
        Linear (height, width, 3) float32 color buffer.
        """
        start = time.perf_counter()
        chunk = self.settings.chunk_rows
        bounds: List[Tuple[int, int]] = [
            (y, min(self.height, y + chunk)) for y in range(0, self.height, chunk)
        ]

        image = np.zeros((self.height, self.width, 3), dtype=np.float32)
        if self.settings.workers == 1:
            results = [self._render_rows(scene, camera, y0, y1) for y0, y1 in bounds]
        else:
            with ThreadPoolExecutor(max_workers=self.settings.workers) as executor:
                futures = [executor.submit(self._render_rows, scene, camera, y0, y1) for y0, y1 in bounds]
                results = [f.result() for f in futures]

        for y_start, rows in results:
            image[y_start:y_start + rows.shape[0]] = rows

        elapsed = time.perf_counter() - start
        logger.info("Rendered %dx%d (%d geometries, %d lights) in %.2fs",
                    self.width, self.height, len(scene.geometries), len(scene.lights), elapsed)
        if not np.isfinite(image).all():
            logger.warning("Render produced non-finite pixels; they will be clipped")
            image = np.nan_to_num(image, nan=0.0, posinf=1.0, neginf=0.0)
        return image

    def render_image(self, scene: Scene, camera: Camera) -> np.ndarray:
        """Render and tone map to an 8-bit RGB buffer."""
        linear = self.render(scene, camera)
        return tone_map(linear, self.settings.tone_mapping, self.settings.exposure)

def default_camera(renderer: Renderer, position: Vector3, fov_degrees: float = 60.0) -> Camera:
    return Camera(position, yaw=0.0, pitch=0.0, fov=math.radians(fov_degrees),
                  aspect_ratio=renderer.aspect_ratio)
