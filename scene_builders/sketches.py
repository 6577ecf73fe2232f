"""Small canvas-only programs that exercise parts of the tracer without a camera."""
import math
from dataclasses import dataclass

from tracer.canvas import Canvas
from tracer.geometry import Sphere
from tracer.intersection import find_hit
from tracer.light import PointLight, lighting
from tracer.material import Material
from tracer.ray import Ray
from tracer.transformations import rotation_x, rotation_z, scaling, translation
from tracer.tuples import Color, Tuple, point, vector


def _to_pixel(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass
class Projectile:
    position: Tuple
    velocity: Tuple


@dataclass
class Environment:
    gravity: Tuple
    wind: Tuple


def tick(environment: Environment, projectile: Projectile) -> Projectile:
    position = projectile.position + projectile.velocity
    velocity = projectile.velocity + environment.gravity + environment.wind
    return Projectile(position, velocity)


def projectile_canvas(width: int = 900, height: int = 550) -> Canvas:
    """Plot a projectile's arc until it leaves the canvas."""
    canvas = Canvas(width, height)
    color = Color(0.0, 1.0, 1.0)
    projectile = Projectile(point(0, 1, 0), vector(1, 1.8, 0).normalize() * 11.25)
    environment = Environment(vector(0, -0.1, 0), vector(-0.01, 0, 0))

    while True:
        projectile = tick(environment, projectile)
        # canvas y grows downwards
        x = _to_pixel(projectile.position.x)
        y = height - _to_pixel(projectile.position.y)
        if not (0 <= x < width and 0 <= y < height):
            break
        canvas.write_pixel(x, y, color)
    return canvas


def clock_face_canvas(size: int = 500) -> Canvas:
    """Twelve hour marks placed by rotating one point around the z axis."""
    canvas = Canvas(size, size)
    color = Color.white()
    radius = 3 * size / 8

    # flip about x because canvas y grows downwards
    transform = (translation(size / 2, size / 2, 0)
                 * scaling(radius, radius, 0)
                 * rotation_x(math.pi))
    hour_rotation = rotation_z(-math.pi / 6)

    hour_point = point(0, 1, 0)  # 12 o'clock
    for _ in range(12):
        placed = transform * hour_point
        canvas.write_pixel(_to_pixel(placed.x), _to_pixel(placed.y), color)
        hour_point = hour_rotation * hour_point
    return canvas


def sphere_silhouette_canvas(size: int = 500) -> Canvas:
    """Shade a single sphere by casting one ray per pixel at a wall behind it."""
    canvas = Canvas(size, size)
    wall_size = 5.0
    half_wall = wall_size / 2
    pixel_size = wall_size / size

    sphere = Sphere(material=Material(color=Color(1, 0, 1)))
    light = PointLight(point(-10, 10, -10), Color.white())
    ray_origin = point(0, 0, -wall_size)

    for y in range(size):
        for x in range(size):
            wall_point = point(-half_wall + pixel_size * x,
                               half_wall - pixel_size * y,
                               wall_size)
            ray = Ray(ray_origin, (wall_point - ray_origin).normalize())
            hit = find_hit(sphere.intersect(ray))
            if hit is None:
                continue
            p = ray.position(hit.t)
            color = lighting(hit.shape.material, light, p,
                             -ray.direction, hit.shape.normal_at(p))
            canvas.write_pixel(x, y, color)
    return canvas
