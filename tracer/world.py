from typing import List, Optional

from tracer.errors import NotInvertibleError
from tracer.geometry import Shape, Sphere
from tracer.intersection import Intersection, PreparedHit, find_hit, sort_intersections
from tracer.light import PointLight, lighting
from tracer.ray import Ray
from tracer.transformations import scaling
from tracer.tuples import Color, Tuple, point


class World:
    """Shapes plus at most one light. Queries do not modify the world.

    A shape whose transform cannot be inverted is reported once when it is
    added and then treated as absent by every query.
    """

    def __init__(self, objects: List[Shape] = None, light: Optional[PointLight] = None):
        self.objects: List[Shape] = []
        self.light = light
        for obj in objects or []:
            self.add_object(obj)

    def add_object(self, obj: Shape):
        try:
            obj.transform.inverse()
        except NotInvertibleError:
            print(f"Skipping shape with singular transform: {obj!r}")
        self.objects.append(obj)

    def intersect(self, ray: Ray) -> List[Intersection]:
        intersections = []
        for obj in self.objects:
            try:
                intersections.extend(obj.intersect(ray))
            except NotInvertibleError:
                # failure is cached on the matrix, so this stays cheap
                continue
        return sort_intersections(intersections)

    def shade_hit(self, hit: PreparedHit) -> Color:
        if self.light is None:
            return Color.black()
        return lighting(
            hit.shape.material,
            self.light,
            hit.point,
            hit.eye_vector,
            hit.normal_vector,
            self.is_shadowed(hit.over_point),
        )

    def color_at(self, ray: Ray) -> Color:
        hit = find_hit(self.intersect(ray))
        if hit is None:
            return Color.black()
        return self.shade_hit(hit.prepare(ray))

    def is_shadowed(self, p: Tuple) -> bool:
        if self.light is None:
            return False
        shadow_vector = self.light.position - p
        distance = shadow_vector.magnitude()
        if distance == 0:
            return False
        shadow_ray = Ray(p, shadow_vector.normalize())
        hit = find_hit(self.intersect(shadow_ray))
        return hit is not None and hit.t < distance


def default_world() -> World:
    """Two concentric spheres lit from the upper left, used throughout the tests."""
    light = PointLight(point(-10, 10, -10), Color.white())

    outer = Sphere()
    outer.material.color = Color(0.8, 1.0, 0.6)
    outer.material.diffuse = 0.7
    outer.material.specular = 0.2

    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))

    return World([outer, inner], light)
