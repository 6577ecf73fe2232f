import multiprocessing as mp
import time
from typing import List

from tracer.camera import Camera
from tracer.canvas import Canvas
from tracer.scene import RenderSettings
from tracer.world import World
from renderers.base_renderer import BaseRenderer, RendererFactory


@RendererFactory.register
class CPURenderer(BaseRenderer):
    """Phong renderer with hard shadows, optionally spread over worker processes."""

    name = "cpu_raytracer"

    def get_capabilities(self) -> List[str]:
        return [
            "ray_tracing",
            "phong_shading",
            "shadows",
        ]

    def render(self, world: World, camera: Camera, settings: RenderSettings) -> Canvas:
        start_time = time.time()

        if settings.progress:
            print(f"CPU render started: {camera.hsize}x{camera.vsize}, "
                  f"{len(world.objects)} objects, {settings.workers} worker(s)")

        if settings.workers > 1:
            with mp.Pool(settings.workers) as pool:
                canvas = camera.render(world, mapper=self.progress_mapper(settings, pool.imap))
        else:
            canvas = camera.render(world, mapper=self.progress_mapper(settings))

        elapsed = time.time() - start_time
        if settings.progress:
            minutes = int(elapsed // 60)
            seconds = elapsed % 60
            print(f"CPU render finished: {minutes}m {seconds:.2f}s")

        return canvas
