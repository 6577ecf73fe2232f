"""Unit tests for the world.

Tests cover:
- Empty and default worlds
- Intersecting a world with a ray
- Shading hits, including hits in shadow and from inside
- color_at for misses, hits and hits behind the ray
- Shadow queries
- Shapes with singular transforms being skipped
"""

import pytest

from tracer.geometry import Sphere
from tracer.intersection import Intersection
from tracer.light import PointLight
from tracer.ray import Ray
from tracer.transformations import scaling, translation
from tracer.tuples import Color, point, vector
from tracer.world import World, default_world


@pytest.fixture
def world():
    return default_world()


class TestWorldConstruction:
    """Tests for World and default_world."""

    def test_creating_a_world(self):
        w = World()
        assert w.objects == []
        assert w.light is None

    def test_default_world(self, world):
        outer = Sphere()
        outer.material.color = Color(0.8, 1.0, 0.6)
        outer.material.diffuse = 0.7
        outer.material.specular = 0.2
        inner = Sphere(transform=scaling(0.5, 0.5, 0.5))

        assert world.light == PointLight(point(-10, 10, -10), Color.white())
        assert outer in world.objects
        assert inner in world.objects

    def test_add_object(self):
        w = World()
        s = Sphere()
        w.add_object(s)
        assert w.objects == [s]


class TestWorldIntersection:
    """Tests for World.intersect."""

    def test_intersect_world_with_ray(self, world):
        xs = world.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx([4, 4.5, 5.5, 6])

    def test_intersections_are_globally_sorted(self):
        near = Sphere(transform=translation(0, 0, -2))
        far = Sphere(transform=translation(0, 0, 2))
        w = World([far, near])
        xs = w.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert [i.shape for i in xs[:2]] == [near, near]
        assert [i.t for i in xs] == sorted(i.t for i in xs)

    def test_singular_shape_is_skipped(self, capsys):
        broken = Sphere(transform=scaling(0, 0, 0))
        w = World([broken, Sphere()])
        r = Ray(point(0, 0, -5), vector(0, 0, 1))

        assert [i.t for i in w.intersect(r)] == [4.0, 6.0]
        w.intersect(r)

        out = capsys.readouterr().out
        assert out.count("singular transform") == 1

    def test_singular_shape_is_reported_when_added(self, capsys):
        w = World()
        w.add_object(Sphere(transform=scaling(1, 0, 1)))
        assert "singular transform" in capsys.readouterr().out
        assert w.intersect(Ray(point(0, 0, -5), vector(0, 0, 1))) == []
        assert capsys.readouterr().out == ""

    def test_small_sphere_is_hit(self, capsys):
        w = World([Sphere(transform=scaling(0.02, 0.02, 0.02))])
        xs = w.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx([4.98, 5.02])
        assert capsys.readouterr().out == ""


class TestShading:
    """Tests for World.shade_hit and World.color_at."""

    def test_shading_an_intersection(self, world):
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        comps = Intersection(4, world.objects[0]).prepare(r)
        assert world.shade_hit(comps) == Color(0.38066, 0.47583, 0.2855)

    def test_shading_an_intersection_from_the_inside(self, world):
        world.light = PointLight(point(0, 0.25, 0), Color.white())
        r = Ray(point(0, 0, 0), vector(0, 0, 1))
        comps = Intersection(0.5, world.objects[1]).prepare(r)
        assert world.shade_hit(comps) == Color(0.90498, 0.90498, 0.90498)

    def test_shade_hit_in_shadow(self):
        s1 = Sphere()
        s2 = Sphere(transform=translation(0, 0, 10))
        w = World([s1, s2], PointLight(point(0, 0, -10), Color.white()))
        r = Ray(point(0, 0, 5), vector(0, 0, 1))
        comps = Intersection(4, s2).prepare(r)
        assert w.shade_hit(comps) == Color(0.1, 0.1, 0.1)

    def test_shade_hit_without_light_is_black(self):
        s = Sphere()
        w = World([s])
        comps = Intersection(4, s).prepare(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert w.shade_hit(comps) == Color.black()

    def test_color_when_ray_misses(self, world):
        assert world.color_at(Ray(point(0, 0, -5), vector(0, 1, 0))) == Color.black()

    def test_color_when_ray_hits(self, world):
        c = world.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert c == Color(0.38066, 0.47583, 0.2855)

    def test_color_with_intersection_behind_ray(self, world):
        outer, inner = world.objects
        outer.material.ambient = 1.0
        inner.material.ambient = 1.0
        c = world.color_at(Ray(point(0, 0, 0.75), vector(0, 0, -1)))
        assert c == inner.material.color


class TestShadows:
    """Tests for World.is_shadowed."""

    @pytest.mark.parametrize("p,expected", [
        (point(0, 10, 0), False),
        (point(10, -10, 10), True),
        (point(-20, 20, -20), False),
        (point(-2, 2, -2), False),
    ])
    def test_is_shadowed(self, world, p, expected):
        assert world.is_shadowed(p) is expected

    def test_point_at_the_light_is_not_shadowed(self, world):
        assert world.is_shadowed(point(-10, 10, -10)) is False

    def test_world_without_light_casts_no_shadows(self):
        assert World([Sphere()]).is_shadowed(point(0, 0, -5)) is False
