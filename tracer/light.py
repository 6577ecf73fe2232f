from tracer.material import Material
from tracer.tuples import Color, Tuple


class PointLight:
    def __init__(self, position: Tuple, intensity: Color):
        if not position.is_point():
            raise ValueError(f"light position must be a point (w=1), got {position!r}")
        self.position = position
        self.intensity = intensity

    def __eq__(self, other):
        if not isinstance(other, PointLight):
            return NotImplemented
        return self.position == other.position and self.intensity == other.intensity

    __hash__ = None

    def __repr__(self):
        return f"PointLight({self.position!r}, {self.intensity!r})"


def lighting(material: Material,
             light: PointLight,
             point: Tuple,
             eye_vector: Tuple,
             normal_vector: Tuple,
             in_shadow: bool = False) -> Color:
    """Phong shading: ambient + diffuse + specular for a single point light."""
    effective_color = material.color * light.intensity
    light_vector = (light.position - point).normalize()
    ambient = effective_color * material.ambient
    if in_shadow:
        return ambient

    # cosine between light and normal; negative means the light is behind the surface
    light_dot_normal = light_vector.dot(normal_vector)
    if light_dot_normal < 0:
        diffuse = Color.black()
        specular = Color.black()
    else:
        diffuse = effective_color * material.diffuse * light_dot_normal
        reflection_vector = (-light_vector).reflect(normal_vector)
        reflect_dot_eye = reflection_vector.dot(eye_vector)
        if reflect_dot_eye <= 0:
            specular = Color.black()
        else:
            factor = reflect_dot_eye ** material.shininess
            specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
