from tracer.matrix import Matrix
from tracer.tuples import Tuple


class Ray:
    def __init__(self, origin: Tuple, direction: Tuple):
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Tuple:
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> "Ray":
        return Ray(matrix * self.origin, matrix * self.direction)

    def __repr__(self):
        return f"Ray({self.origin!r}, {self.direction!r})"
