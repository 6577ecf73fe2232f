import math
from dataclasses import dataclass, field

from tracer.camera import Camera
from tracer.transformations import view_transform
from tracer.tuples import Tuple, point, vector


@dataclass
class RenderSettings:
    width: int = 500
    height: int = 250
    field_of_view: float = math.pi / 3  # radians
    progress: bool = True
    workers: int = 1  # >1 shades pixels in a process pool

    def __post_init__(self):
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")


@dataclass
class CameraParams:
    from_point: Tuple = field(default_factory=lambda: point(0, 0, -5))
    to_point: Tuple = field(default_factory=lambda: point(0, 0, 0))
    up: Tuple = field(default_factory=lambda: vector(0, 1, 0))

    def to_camera(self, settings: RenderSettings) -> Camera:
        return Camera(settings.width, settings.height, settings.field_of_view,
                      view_transform(self.from_point, self.to_point, self.up))
