"""Row-major 3x3 and 4x4 float matrices."""

from __future__ import annotations

import math
from typing import Iterable, Iterator

from .fastmath import F_EPSILON
from .vector import Vector2, Vector3, Vector4


class _SquareMatrix:
    """Storage, indexing and products shared by the square matrix types."""

    __slots__ = ("_m",)
    _SIZE = 0

    def __init__(self, values: Iterable[float] | None = None) -> None:
        n = self._SIZE
        if values is None:
            self._m = [1.0 if row == col else 0.0 for row in range(n) for col in range(n)]
            return
        items = [float(v) for v in values]
        if len(items) != n * n:
            raise ValueError(f"{type(self).__name__} needs {n * n} values, got {len(items)}")
        self._m = items

    def __getitem__(self, index: int) -> float:
        return self._m[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._m[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._m)

    def __len__(self) -> int:
        return len(self._m)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._m == other._m

    __hash__ = None  # type: ignore[assignment]

    def __mul__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        n = self._SIZE
        a, b = self._m, other._m
        return type(self)(
            sum(a[row * n + k] * b[k * n + col] for k in range(n))
            for row in range(n)
            for col in range(n)
        )

    def _row(self, row: int) -> list[float]:
        n = self._SIZE
        return self._m[row * n:(row + 1) * n]

    def _transposed_values(self) -> list[float]:
        n = self._SIZE
        return [self._m[col * n + row] for row in range(n) for col in range(n)]

    def copy(self):
        """Return an independent copy."""
        return type(self)(self._m)

    def __str__(self) -> str:
        rows = (", ".join(f"{v:f}" for v in self._row(r)) for r in range(self._SIZE))
        return "(" + "\n ".join(rows) + ")"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._m!r})"


class Matrix3(_SquareMatrix):
    """A 3x3 matrix whose third row holds the translation."""

    __slots__ = ()
    _SIZE = 3

    def set_translation(self, x, y=None, z=None) -> None:
        """Set the translation row from a Vector3 or three components."""
        if isinstance(x, Vector3):
            x, y, z = x.x, x.y, x.z
        elif y is None or z is None:
            raise TypeError("set_translation needs a Vector3 or x, y and z")
        self._m[6:9] = [float(x), float(y), float(z)]

    def translation(self) -> Vector3:
        return Vector3(*self._row(2))

    def right(self) -> Vector3:
        return Vector3(*self._row(0))

    def up(self) -> Vector3:
        return Vector3(*self._row(1))

    def forward(self) -> Vector3:
        return Vector3(*self._row(2))

    def transposed(self) -> Matrix3:
        """Return the transpose as a new matrix."""
        return Matrix3(self._transposed_values())

    def transpose(self) -> None:
        """Transpose this matrix in place."""
        self._m = self._transposed_values()

    def inverse(self) -> Matrix3:
        """Transpose the rotation part and negate the translation.

        Exact for pure rotations and pure translations.
        """
        result = self.copy()
        translation = result.translation() * -1.0
        translation.z = 1.0
        result.set_translation(0.0, 0.0, 0.0)
        result.transpose()
        result.set_translation(translation)
        return result

    def rotate(self, axis: Vector3, radians: float) -> None:
        """Post-multiply by rotations of ``axis * radians`` about x, y and z."""
        ax = axis.x * radians
        mx = Matrix3()
        mx[4] = math.cos(ax)
        mx[5] = math.sin(ax)
        mx[7] = -math.sin(ax)
        mx[8] = math.cos(ax)

        ay = axis.y * radians
        my = Matrix3()
        my[0] = math.cos(ay)
        my[2] = -math.sin(ay)
        my[6] = math.sin(ay)
        my[8] = math.cos(ay)

        az = axis.z * radians
        mz = Matrix3()
        mz[0] = math.cos(az)
        mz[1] = math.sin(az)
        mz[3] = -math.sin(az)
        mz[4] = math.cos(az)

        self._m = (self * (mx * my * mz))._m

    def transform(self, vector):
        """Transform a Vector3, or a Vector2 taken as the point (x, y, 1)."""
        if isinstance(vector, Vector2):
            result = self.transform(Vector3(vector.x, vector.y, 1.0))
            return Vector2(result.x, result.y)
        if not isinstance(vector, Vector3):
            raise TypeError(f"cannot transform {type(vector).__name__} with Matrix3")
        return Vector3(*(vector.dot(Vector3(*self._row(r))) for r in range(3)))


class Matrix4(_SquareMatrix):
    """A 4x4 matrix whose fourth row holds the translation."""

    __slots__ = ()
    _SIZE = 4

    @classmethod
    def from_matrix3(cls, matrix: Matrix3) -> Matrix4:
        """Embed a 3x3 matrix in the upper-left corner of an identity matrix."""
        result = cls()
        for row in range(3):
            result._m[row * 4:row * 4 + 3] = [matrix[row * 3 + col] for col in range(3)]
        return result

    def to_rotation_matrix(self) -> Matrix3:
        """Return the upper-left 3x3 block."""
        return Matrix3(v for row in range(3) for v in self._row(row)[:3])

    def set_translation(self, x, y=None, z=None, w=None) -> None:
        """Set the translation row from a vector or components; ``w`` is kept if omitted."""
        if isinstance(x, Vector4):
            x, y, z, w = x.x, x.y, x.z, x.w
        elif isinstance(x, Vector3):
            x, y, z = x.x, x.y, x.z
        elif y is None or z is None:
            raise TypeError("set_translation needs a vector or x, y and z")
        self._m[12:15] = [float(x), float(y), float(z)]
        if w is not None:
            self._m[15] = float(w)

    def translation(self) -> Vector4:
        return Vector4(*self._row(3))

    def right(self) -> Vector4:
        return Vector4(*self._row(0))

    def up(self) -> Vector4:
        return Vector4(*self._row(1))

    def forward(self) -> Vector4:
        return Vector4(*self._row(2))

    def set_scale(self, scale: Vector3) -> None:
        self._m[0] = float(scale.x)
        self._m[5] = float(scale.y)
        self._m[10] = float(scale.z)

    def scale(self) -> Vector3:
        return Vector3(self._m[0], self._m[5], self._m[10])

    def inverse(self) -> Matrix4:
        """General inverse; a (near-)singular matrix yields the identity."""
        m = self._m
        a0 = m[0] * m[5] - m[1] * m[4]
        a1 = m[0] * m[6] - m[2] * m[4]
        a2 = m[0] * m[7] - m[3] * m[4]
        a3 = m[1] * m[6] - m[2] * m[5]
        a4 = m[1] * m[7] - m[3] * m[5]
        a5 = m[2] * m[7] - m[3] * m[6]
        b0 = m[8] * m[13] - m[9] * m[12]
        b1 = m[8] * m[14] - m[10] * m[12]
        b2 = m[8] * m[15] - m[11] * m[12]
        b3 = m[9] * m[14] - m[10] * m[13]
        b4 = m[9] * m[15] - m[11] * m[13]
        b5 = m[10] * m[15] - m[11] * m[14]
        det = a0 * b5 - a1 * b4 + a2 * b3 + a3 * b2 - a4 * b1 + a5 * b0

        if abs(det) <= F_EPSILON:
            return Matrix4()

        f00 = +m[5] * b5 - m[6] * b4 + m[7] * b3
        f10 = -m[4] * b5 + m[6] * b2 - m[7] * b1
        f20 = +m[4] * b4 - m[5] * b2 + m[7] * b0
        f30 = -m[4] * b3 + m[5] * b1 - m[6] * b0
        f01 = -m[1] * b5 + m[2] * b4 - m[3] * b3
        f11 = +m[0] * b5 - m[2] * b2 + m[3] * b1
        f21 = -m[0] * b4 + m[1] * b2 - m[3] * b0
        f31 = +m[0] * b3 - m[1] * b1 + m[2] * b0
        f02 = +m[13] * a5 - m[14] * a4 + m[15] * a3
        f12 = -m[12] * a5 + m[14] * a2 - m[15] * a1
        f22 = +m[12] * a4 - m[13] * a2 + m[15] * a0
        f32 = -m[12] * a3 + m[13] * a1 - m[14] * a0
        f03 = -m[9] * a5 + m[10] * a4 - m[11] * a3
        f13 = +m[8] * a5 - m[10] * a2 + m[11] * a1
        f23 = -m[8] * a4 + m[9] * a2 - m[11] * a0
        f33 = +m[8] * a3 - m[9] * a1 + m[10] * a0

        inv_det = 1.0 / det
        return Matrix4(
            v * inv_det
            for v in (
                f00, f01, f02, f03,
                f10, f11, f12, f13,
                f20, f21, f22, f23,
                f30, f31, f32, f33,
            )
        )

    def transposed(self) -> Matrix4:
        """Return the transpose as a new matrix."""
        return Matrix4(self._transposed_values())

    def invert(self) -> None:
        """Replace this matrix with its inverse."""
        self._m = self.inverse()._m

    def transpose(self) -> None:
        """Transpose this matrix in place."""
        self._m = self._transposed_values()

    def rotate(self, axis: Vector3, radians: float) -> None:
        """Rotate the 3x3 block; translation and the last column are reset."""
        rotation = self.to_rotation_matrix()
        rotation.rotate(axis, radians)
        self._m = Matrix4.from_matrix3(rotation)._m

    def transform(self, vector: Vector4) -> Vector4:
        """Return the vector whose components are its dot products with each row."""
        if not isinstance(vector, Vector4):
            raise TypeError(f"cannot transform {type(vector).__name__} with Matrix4")
        return Vector4(*(vector.dot(Vector4(*self._row(r))) for r in range(4)))