class RayTracerError(Exception):
    """Base class for failures raised by the tracer core."""


class NotInvertibleError(RayTracerError, ArithmeticError):
    """A matrix with a zero determinant was asked for its inverse."""

    def __init__(self, determinant: float):
        super().__init__(f"matrix is not invertible (determinant={determinant!r})")
        self.determinant = determinant


class ZeroMagnitudeError(RayTracerError, ArithmeticError):
    """A zero-length tuple was asked to be normalized."""
