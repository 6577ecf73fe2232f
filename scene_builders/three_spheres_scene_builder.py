import math

from tracer.camera import Camera
from tracer.geometry import Sphere
from tracer.light import PointLight
from tracer.material import Material
from tracer.scene import CameraParams, RenderSettings
from tracer.transformations import rotation_x, rotation_y, scaling, translation
from tracer.tuples import Color, point, vector
from tracer.world import World


class ThreeSpheresSceneBuilder:
    """Three spheres on a floor in front of two walls.

    The floor and walls are spheres flattened to a hundredth of their height,
    since spheres are the only primitive.
    """

    def __init__(self):
        self.room_extent = 10.0
        self.wall_thickness = 0.01
        self.wall_distance = 5.0

        self.light_position = point(-10, 10, -10)
        self.camera_params = CameraParams(
            from_point=point(0, 1.5, -5),
            to_point=point(0, 1, 0),
            up=vector(0, 1, 0),
        )

    def build_scene(self) -> World:
        world = World(light=PointLight(self.light_position, Color.white()))

        self._create_room(world)
        self._create_spheres(world)

        return world

    def create_camera(self, settings: RenderSettings) -> Camera:
        return self.camera_params.to_camera(settings)

    def _create_room(self, world: World):
        flattened = scaling(self.room_extent, self.wall_thickness, self.room_extent)
        wall_material = Material(color=Color(0.9, 0.9, 0.9), specular=0.0)

        floor = Sphere(flattened, wall_material)

        # walls are the floor stood upright and turned 45 degrees either way
        left_wall = Sphere(
            translation(0, 0, self.wall_distance)
            * rotation_y(-math.pi / 4)
            * rotation_x(math.pi / 2)
            * flattened,
            wall_material,
        )
        right_wall = Sphere(
            translation(0, 0, self.wall_distance)
            * rotation_y(math.pi / 4)
            * rotation_x(math.pi / 2)
            * flattened,
            wall_material,
        )

        for obj in (floor, left_wall, right_wall):
            world.add_object(obj)

    def _create_spheres(self, world: World):
        middle = Sphere(
            translation(-0.5, 1, 0.5),
            Material(color=Color(0, 1, 0), diffuse=0.7, specular=0.3),
        )
        right = Sphere(
            translation(1.5, 0.5, -0.5) * scaling(0.5, 0.5, 0.5),
            Material(color=Color(0, 0, 1), diffuse=0.7, specular=0.3),
        )
        left = Sphere(
            translation(-1.5, 0.33, -0.75) * scaling(0.33, 0.33, 0.33),
            Material(color=Color(1, 0, 0), diffuse=0.7, specular=0.3),
        )

        for obj in (middle, right, left):
            world.add_object(obj)
