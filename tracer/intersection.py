"""Intersection records, hit selection and hit preparation.

An Intersection is only a ``t`` and the shape it belongs to. Preparing it
against the ray that produced it yields a separate PreparedHit holding
everything shading needs.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional

from tracer.ray import Ray
from tracer.tuples import EPSILON, Tuple


@dataclass(frozen=True)
class Intersection:
    t: float
    shape: object

    def prepare(self, ray: Ray, epsilon: float = EPSILON) -> "PreparedHit":
        return prepare_hit(self, ray, epsilon)


@dataclass(frozen=True)
class PreparedHit:
    t: float
    shape: object
    point: Tuple
    eye_vector: Tuple
    normal_vector: Tuple
    inside: bool
    over_point: Tuple


def prepare_hit(intersection: Intersection, ray: Ray, epsilon: float = EPSILON) -> PreparedHit:
    point = ray.position(intersection.t)
    eye_vector = -ray.direction
    normal_vector = intersection.shape.normal_at(point)
    inside = normal_vector.dot(eye_vector) < 0
    if inside:
        normal_vector = -normal_vector
    # nudged along the normal so shadow rays do not re-hit the surface
    over_point = point + normal_vector * epsilon
    return PreparedHit(
        t=intersection.t,
        shape=intersection.shape,
        point=point,
        eye_vector=eye_vector,
        normal_vector=normal_vector,
        inside=inside,
        over_point=over_point,
    )


def sort_intersections(intersections: Iterable[Intersection]) -> List[Intersection]:
    return sorted(intersections, key=lambda i: i.t)


def find_hit(intersections: Iterable[Intersection]) -> Optional[Intersection]:
    """Lowest non-negative t, or None when everything is behind the origin."""
    hit = None
    for i in intersections:
        if i.t >= 0 and (hit is None or i.t < hit.t):
            hit = i
    return hit
