import numpy as np

from tracer.errors import NotInvertibleError
from tracer.tuples import EPSILON, Tuple, equal


class Matrix:
    """Immutable square matrix (2x2, 3x3 or 4x4) backed by a float64 array."""

    def __init__(self, rows):
        values = np.array(rows, dtype=np.float64)
        if values.ndim != 2 or values.shape[0] != values.shape[1]:
            raise ValueError(f"matrix must be square, got shape {values.shape}")
        values.setflags(write=False)
        self._m = values
        self._inverse = None
        self._singular_det = None

    @property
    def size(self) -> int:
        return self._m.shape[0]

    @property
    def values(self) -> np.ndarray:
        return self._m

    def __getitem__(self, index):
        row, col = index
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"({row}, {col}) is outside a {self.size}x{self.size} matrix")
        return float(self._m[row, col])

    def rows(self):
        return self._m.tolist()

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return Matrix(self._m @ other._m)
        if isinstance(other, Tuple):
            x, y, z, w = self._m @ np.array((other.x, other.y, other.z, other.w))
            return Tuple(x, y, z, w)
        return NotImplemented

    __matmul__ = __mul__

    def equals(self, other, epsilon: float = EPSILON) -> bool:
        if self._m.shape != other._m.shape:
            return False
        return bool(np.all(np.abs(self._m - other._m) < epsilon))

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def transpose(self):
        return Matrix(self._m.T)

    def submatrix(self, row: int, col: int):
        """Copy of the matrix with one row and one column removed."""
        kept = np.delete(np.delete(self._m, row, axis=0), col, axis=1)
        return Matrix(kept)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        m = self._m
        if self.size == 2:
            return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
        det = 0.0
        for col in range(self.size):
            det += float(m[0, col]) * self.cofactor(0, col)
        return det

    def is_invertible(self, epsilon: float = EPSILON) -> bool:
        return not equal(self.determinant(), 0.0, epsilon)

    def inverse(self):
        """Adjugate over determinant.

        Raises NotInvertibleError only for an exactly zero determinant or a
        result that overflows; tiny but valid scales still invert. Both the
        inverse and a failure are cached.

        The cofactor of (row, col) is stored at (col, row), which is the
        transpose step of the adjugate.
        """
        if self._inverse is not None:
            return self._inverse
        if self._singular_det is not None:
            raise NotInvertibleError(self._singular_det)
        det = self.determinant()
        if det == 0.0:
            self._singular_det = det
            raise NotInvertibleError(det)
        n = self.size
        values = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                values[col, row] = self.cofactor(row, col) / det
        if not np.all(np.isfinite(values)):
            self._singular_det = det
            raise NotInvertibleError(det)
        self._inverse = Matrix(values)
        return self._inverse

    def __repr__(self):
        body = ", ".join(
            "[" + ", ".join(f"{v:.5f}" for v in row) + "]" for row in self._m
        )
        return f"Matrix([{body}])"
