from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Type

from tqdm import tqdm

from tracer.camera import Camera
from tracer.canvas import Canvas
from tracer.scene import RenderSettings
from tracer.world import World


class BaseRenderer(ABC):
    """A way of turning a world seen through a camera into a canvas."""

    name = "base"

    @abstractmethod
    def render(self, world: World, camera: Camera, settings: RenderSettings) -> Canvas:
        pass

    @abstractmethod
    def get_capabilities(self) -> List[str]:
        pass

    @staticmethod
    def progress_mapper(settings: RenderSettings, imap: Callable = None) -> Callable:
        """Map-like callable for Camera.render that reports per-pixel progress.

        ``imap`` is any lazy ``imap(fn, tasks, chunksize)`` (for instance
        ``Pool.imap``); without one pixels are shaded in this process.
        """
        def mapper(fn, tasks):
            if imap is None:
                results = map(fn, tasks)
            else:
                chunksize = max(1, len(tasks) // (settings.workers * 16))
                results = imap(fn, tasks, chunksize)
            return tqdm(results, total=len(tasks), unit="px", disable=not settings.progress)
        return mapper


class RendererFactory:
    """Registry of renderers by name."""

    _renderers: Dict[str, Type[BaseRenderer]] = {}

    @classmethod
    def register(cls, renderer_class: Type[BaseRenderer]) -> Type[BaseRenderer]:
        cls._renderers[renderer_class.name] = renderer_class
        return renderer_class

    @classmethod
    def create(cls, name: str) -> BaseRenderer:
        if name not in cls._renderers:
            raise ValueError(f"Unknown renderer: {name}")
        return cls._renderers[name]()

    @classmethod
    def list_available(cls) -> List[str]:
        return sorted(cls._renderers)
