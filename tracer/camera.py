import math
from functools import partial
from typing import Iterator, Tuple as Pair

from tracer.canvas import Canvas
from tracer.matrix import Matrix
from tracer.ray import Ray
from tracer.transformations import identity
from tracer.tuples import Color, point


class Camera:
    """Pinhole camera looking down -z in its own space, one unit from the image plane."""

    def __init__(self, hsize: int, vsize: int, field_of_view: float, transform: Matrix = None):
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"camera size must be positive, got {hsize}x{vsize}")
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform if transform is not None else identity()

        half_view = math.tan(field_of_view / 2)
        aspect = hsize / vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / hsize

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix):
        self._inverse = matrix.inverse()
        self._transform = matrix

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        # offset to the pixel centre
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size

        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        pixel = self._inverse * point(world_x, world_y, -1)
        origin = self._inverse * point(0, 0, 0)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def pixels(self) -> Iterator[Pair[int, int]]:
        for x in range(self.hsize):
            for y in range(self.vsize):
                yield x, y

    def render(self, world, mapper=map) -> Canvas:
        """Shade every pixel of the image.

        Each pixel is independent of the others, so ``mapper`` may be any
        map-like callable (for instance ``Executor.map``); results are written
        to the canvas exactly once, in task order.
        """
        canvas = Canvas(self.hsize, self.vsize)
        tasks = list(self.pixels())
        colors = mapper(partial(shade_pixel, self, world), tasks)
        for (x, y), color in zip(tasks, colors):
            canvas.write_pixel(x, y, color)
        return canvas


def shade_pixel(camera: Camera, world, pixel: Pair[int, int]) -> Color:
    x, y = pixel
    return world.color_at(camera.ray_for_pixel(x, y))
