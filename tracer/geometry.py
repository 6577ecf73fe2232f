import math
from abc import ABC, abstractmethod
from typing import List

from tracer.intersection import Intersection
from tracer.material import Material
from tracer.matrix import Matrix
from tracer.ray import Ray
from tracer.transformations import identity
from tracer.tuples import Tuple, point


class Shape(ABC):
    """A primitive placed in the world by an object-to-world transform.

    Subclasses only deal with their canonical object-space form through
    local_intersect and local_normal_at.
    """

    def __init__(self, transform: Matrix = None, material: Material = None):
        self.transform = transform if transform is not None else identity()
        self.material = material if material is not None else Material()

    def intersect(self, ray: Ray) -> List[Intersection]:
        # raises NotInvertibleError for a singular transform
        local_ray = ray.transform(self.transform.inverse())
        return [Intersection(t, self) for t in self.local_intersect(local_ray)]

    def normal_at(self, world_point: Tuple) -> Tuple:
        inverse = self.transform.inverse()
        local_normal = self.local_normal_at(inverse * world_point)
        world_normal = inverse.transpose() * local_normal
        # the transpose can leak translation into w
        return world_normal.with_w(0.0).normalize()

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> List[float]:
        """Ascending t values where the object-space ray meets the shape."""

    @abstractmethod
    def local_normal_at(self, local_point: Tuple) -> Tuple:
        pass

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.transform == other.transform and self.material == other.material

    __hash__ = None


class Sphere(Shape):
    """Unit sphere centred on the object-space origin."""

    origin = point(0.0, 0.0, 0.0)

    def local_intersect(self, local_ray: Ray) -> List[float]:
        sphere_to_ray = local_ray.origin - self.origin
        a = local_ray.direction.dot(local_ray.direction)
        b = 2.0 * local_ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        discriminant = b * b - 4.0 * a * c
        if discriminant < 0:
            return []
        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        if t1 > t2:
            t1, t2 = t2, t1
        return [t1, t2]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return local_point - self.origin

    def __repr__(self):
        return f"Sphere(transform={self.transform!r}, material={self.material!r})"
