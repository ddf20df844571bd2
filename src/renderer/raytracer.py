# renderer/raytracer.py
import logging
import math
import random
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional

import numpy as np

from renderer.integrator import ray_color
from renderer.settings import RenderSettings

logger = logging.getLogger(__name__)

# Per-process state installed by the pool initializer, so the scene is
# pickled once per worker rather than once per scanline.
_worker_scene = None
_worker_settings: Optional[RenderSettings] = None


def row_seed(seed: int, row: int) -> int:
    """Seed of the generator used for one scanline; independent of worker count."""
    return seed * 1_000_003 + row


def render_row(scene, settings: RenderSettings, seed: int, row: int) -> List[List[float]]:
    """
    Renders one scanline (row 0 is the top of the image) and returns the
    averaged linear RGB value of every pixel in it.
    """
    rng = random.Random(row_seed(seed, row))
    width = settings.width
    height = settings.height
    spp = settings.samples_per_pixel
    j = height - 1 - row  # camera v runs bottom to top

    pixels = []
    for i in range(width):
        r = g = b = 0.0
        for _ in range(spp):
            u = (i + rng.random()) / (width - 1)
            v = (j + rng.random()) / (height - 1)
            ray = scene.camera.get_ray(u, v, rng)
            c = ray_color(ray, scene.background, scene.world, scene.lights,
                          settings.max_depth, rng, settings.t_min)
            # A NaN or infinite sample is dropped (counts as black).
            if math.isfinite(c.x) and math.isfinite(c.y) and math.isfinite(c.z):
                r += c.x
                g += c.y
                b += c.z
        pixels.append([r / spp, g / spp, b / spp])
    return pixels


def _init_worker(scene, settings: RenderSettings):
    global _worker_scene, _worker_settings
    _worker_scene = scene
    _worker_settings = settings


def _render_row_in_worker(seed: int, row: int) -> List[List[float]]:
    return render_row(_worker_scene, _worker_settings, seed, row)


class Renderer:
    """
    Renders a scene into a linear-radiance image.

    Every scanline is independent: it gets its own generator seeded from the
    render seed and the row index, so a fixed seed reproduces the image
    exactly whether the rows run in one process or in a worker pool.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings
        self.width = settings.width
        self.height = settings.height

    def render(self, scene) -> np.ndarray:
        """
        Returns an (height, width, 3) float64 array of per-pixel averages, top row first.
        """
        settings = self.settings
        seed = settings.seed if settings.seed is not None else random.randrange(2 ** 32)
        logger.info("Rendering %dx%d, %d samples per pixel, depth %d, seed %d, %d worker(s)",
                    self.width, self.height, settings.samples_per_pixel,
                    settings.max_depth, seed, settings.workers)
        start = time.perf_counter()

        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        rows = range(self.height)
        if settings.workers > 1:
            with ProcessPoolExecutor(max_workers=settings.workers,
                                     initializer=_init_worker,
                                     initargs=(scene, settings)) as executor:
                results = executor.map(_render_row_in_worker, [seed] * self.height, rows)
                for row, pixels in zip(rows, results):
                    image[row] = pixels
                    self._report_progress(row)
        else:
            for row in rows:
                image[row] = render_row(scene, settings, seed, row)
                self._report_progress(row)

        logger.info("Done in %.2fs", time.perf_counter() - start)
        return image

    def _report_progress(self, row: int):
        logger.debug("Scanlines remaining: %d", self.height - 1 - row)
