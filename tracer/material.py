from dataclasses import dataclass, field

from tracer.tuples import Color


@dataclass
class Material:
    """Phong surface parameters.

    color: base surface color
    ambient: share of the light reflected regardless of orientation
    diffuse: Lambertian coefficient
    specular: highlight coefficient
    shininess: highlight exponent, larger is tighter
    """
    color: Color = field(default_factory=Color.white)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
