import math

from tracer.errors import ZeroMagnitudeError

EPSILON = 1e-5


def equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    return abs(a - b) < epsilon


class Tuple:
    """Homogeneous (x, y, z, w) tuple. w=1 is a point, w=0 is a vector."""

    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x=0.0, y=0.0, z=0.0, w=0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __add__(self, other):
        return Tuple(self.x + other.x,
                     self.y + other.y,
                     self.z + other.z,
                     self.w + other.w)

    def __sub__(self, other):
        return Tuple(self.x - other.x,
                     self.y - other.y,
                     self.z - other.z,
                     self.w - other.w)

    def __mul__(self, t):
        # scalar or component-wise product
        if isinstance(t, Tuple):
            return Tuple(self.x * t.x,
                         self.y * t.y,
                         self.z * t.z,
                         self.w * t.w)
        return Tuple(self.x * t, self.y * t, self.z * t, self.w * t)

    __rmul__ = __mul__

    def __truediv__(self, t):
        return Tuple(self.x / t, self.y / t, self.z / t, self.w / t)

    def __neg__(self):
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def equals(self, other, epsilon: float = EPSILON) -> bool:
        return (equal(self.x, other.x, epsilon)
                and equal(self.y, other.y, epsilon)
                and equal(self.z, other.z, epsilon)
                and equal(self.w, other.w, epsilon))

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def add(self, other):
        return self + other

    def subtract(self, other):
        return self - other

    def negate(self):
        return -self

    def scale(self, t: float):
        return self * t

    def divide(self, t: float):
        return self / t

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y
                         + self.z * self.z + self.w * self.w)

    def normalize(self):
        m = self.magnitude()
        if m == 0:
            raise ZeroMagnitudeError(f"cannot normalize zero-length {self!r}")
        return self / m

    def dot(self, other) -> float:
        return (self.x * other.x + self.y * other.y
                + self.z * other.z + self.w * other.w)

    def cross(self, other):
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def reflect(self, normal):
        # r = v - 2 * dot(v, n) * n
        return self - normal * 2 * self.dot(normal)

    def with_w(self, w: float):
        return Tuple(self.x, self.y, self.z, w)

    def __repr__(self):
        return f"Tuple({self.x:.5f}, {self.y:.5f}, {self.z:.5f}, {self.w:.5f})"


def point(x, y, z) -> Tuple:
    return Tuple(x, y, z, 1.0)


def vector(x, y, z) -> Tuple:
    return Tuple(x, y, z, 0.0)


class Color:
    """RGB triple. Channels are unbounded floats until encoded."""

    __slots__ = ("red", "green", "blue")

    def __init__(self, red=0.0, green=0.0, blue=0.0):
        self.red = float(red)
        self.green = float(green)
        self.blue = float(blue)

    @classmethod
    def black(cls):
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls):
        return cls(1.0, 1.0, 1.0)

    def __add__(self, other):
        return Color(self.red + other.red,
                     self.green + other.green,
                     self.blue + other.blue)

    def __sub__(self, other):
        return Color(self.red - other.red,
                     self.green - other.green,
                     self.blue - other.blue)

    def __mul__(self, t):
        # scalar or Hadamard product
        if isinstance(t, Color):
            return Color(self.red * t.red,
                         self.green * t.green,
                         self.blue * t.blue)
        return Color(self.red * t, self.green * t, self.blue * t)

    __rmul__ = __mul__

    def __truediv__(self, t):
        return Color(self.red / t, self.green / t, self.blue / t)

    def __iter__(self):
        return iter((self.red, self.green, self.blue))

    def equals(self, other, epsilon: float = EPSILON) -> bool:
        return (equal(self.red, other.red, epsilon)
                and equal(self.green, other.green, epsilon)
                and equal(self.blue, other.blue, epsilon))

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def component_multiply(self, other):
        return self * other

    def __repr__(self):
        return f"Color({self.red:.5f}, {self.green:.5f}, {self.blue:.5f})"
