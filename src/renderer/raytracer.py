# renderer/raytracer.py
import random
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, List, Optional
from tqdm import tqdm
from core.vector import Color3
from renderer.canvas import Canvas

# Scene state installed once per worker process.
_worker_camera = None
_worker_world = None
_worker_seed = None

def pixel_rng(seed: Optional[int], x: int, y: int) -> random.Random:
    """
    Random source for one pixel. With a seed the stream depends only on
    (seed, x, y), so results do not depend on which worker renders the row.
    """
    if seed is None:
        return random.Random()
    return random.Random(f"{seed}:{x}:{y}")

def render_scanline(camera, world, y: int, seed: Optional[int] = None) -> List[Color3]:
    return [camera.render(x, y, world, pixel_rng(seed, x, y))
            for x in range(camera.image_width)]

def _init_worker(camera, world, seed):
    global _worker_camera, _worker_world, _worker_seed
    _worker_camera = camera
    _worker_world = world
    _worker_seed = seed

def _render_scanline_in_worker(y: int):
    return y, render_scanline(_worker_camera, _worker_world, y, _worker_seed)

class Renderer:
    """
    Renders a full image by distributing scanlines over worker processes.

    The camera and world are read-only during a render; each worker gets
    its own copy when the pool starts.
    """
    def __init__(self, camera, world, workers: int = 1, seed: Optional[int] = None):
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.camera = camera
        self.world = world
        self.workers = workers
        self.seed = seed
        self.width = camera.image_width
        self.height = camera.image_height

    def render(self, progress: bool = True,
               on_scanline: Optional[Callable[[int, Canvas], bool]] = None) -> Canvas:
        """
        Render every scanline into a new Canvas.

        on_scanline(y, canvas) is called after each finished row; returning
        False stops the render early and leaves the remaining rows black.
        """
        canvas = Canvas(self.width, self.height)
        with tqdm(total=self.height, desc="Rendering", unit="row", disable=not progress) as bar:
            for y, colors in self._scanlines():
                canvas.write_scanline(y, colors)
                bar.update(1)
                if on_scanline is not None and on_scanline(y, canvas) is False:
                    break
        return canvas

    def _scanlines(self):
        if self.workers == 1:
            for y in range(self.height):
                yield y, render_scanline(self.camera, self.world, y, self.seed)
            return

        with ProcessPoolExecutor(max_workers=self.workers, initializer=_init_worker,
                                 initargs=(self.camera, self.world, self.seed)) as pool:
            futures = [pool.submit(_render_scanline_in_worker, y) for y in range(self.height)]
            try:
                for future in as_completed(futures):
                    yield future.result()
            finally:
                for future in futures:
                    future.cancel()
