from tracer.camera import Camera
from tracer.scene import CameraParams, RenderSettings
from tracer.world import World, default_world


class DefaultSceneBuilder:
    """The two concentric spheres of default_world, viewed head on."""

    def __init__(self):
        self.camera_params = CameraParams()

    def build_scene(self) -> World:
        return default_world()

    def create_camera(self, settings: RenderSettings) -> Camera:
        return self.camera_params.to_camera(settings)
