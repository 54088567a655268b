"""Two-, three- and four-component vectors with component-wise arithmetic."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Callable, Iterator


class _VectorOps:
    """Iteration, arithmetic and formatting shared by every vector dimension."""

    __slots__ = ()
    _fields: tuple[str, ...] = ()

    def __iter__(self) -> Iterator:
        return (getattr(self, name) for name in self._fields)

    def _combine(self, other, op: Callable):
        if isinstance(other, type(self)):
            return type(self)(*(op(a, b) for a, b in zip(self, other)))
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return type(self)(*(op(a, other) for a in self))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __str__(self) -> str:
        return "(" + ", ".join(_format_component(c) for c in self) + ")"


def _format_component(value) -> str:
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


def _dot(vector, other) -> float:
    if not isinstance(other, type(vector)):
        raise TypeError(f"cannot take dot product with {type(other).__name__}")
    return sum(a * b for a, b in zip(vector, other))


def _normalized(vector):
    size = vector.length()
    if size == 0:
        raise ZeroDivisionError("cannot normalize a zero-length vector")
    return type(vector)(*(c / size for c in vector))


def _assign(vector, source) -> None:
    for name, value in zip(vector._fields, source):
        setattr(vector, name, value)


@dataclass(slots=True)
class Vector2(_VectorOps):
    """A 2D vector; ``u`` and ``v`` alias ``x`` and ``y``."""

    x: float = 0.0
    y: float = 0.0

    _fields = ("x", "y")

    def dot(self, other) -> float:
        """Dot product with another Vector2."""
        return _dot(self, other)

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vector2:
        """Return a unit-length copy; raises ZeroDivisionError for a zero vector."""
        return _normalized(self)

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        _assign(self, self.normalized())

    @property
    def u(self):
        return self.x

    @u.setter
    def u(self, value):
        self.x = value

    @property
    def v(self):
        return self.y

    @v.setter
    def v(self, value):
        self.y = value


@dataclass(slots=True)
class Vector3(_VectorOps):
    """A 3D vector; ``r``, ``g``, ``b`` alias ``x``, ``y``, ``z``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _fields = ("x", "y", "z")

    def dot(self, other) -> float:
        """Dot product with another Vector3."""
        return _dot(self, other)

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vector3:
        """Return a unit-length copy; raises ZeroDivisionError for a zero vector."""
        return _normalized(self)

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        _assign(self, self.normalized())

    @property
    def r(self):
        return self.x

    @r.setter
    def r(self, value):
        self.x = value

    @property
    def g(self):
        return self.y

    @g.setter
    def g(self, value):
        self.y = value

    @property
    def b(self):
        return self.z

    @b.setter
    def b(self, value):
        self.z = value


@dataclass(slots=True)
class Vector4(_VectorOps):
    """A 4D vector; ``r``, ``g``, ``b``, ``a`` alias ``x``, ``y``, ``z``, ``w``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    _fields = ("x", "y", "z", "w")

    def dot(self, other) -> float:
        """Dot product with another Vector4."""
        return _dot(self, other)

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vector4:
        """Return a unit-length copy; raises ZeroDivisionError for a zero vector."""
        return _normalized(self)

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        _assign(self, self.normalized())

    @property
    def r(self):
        return self.x

    @r.setter
    def r(self, value):
        self.x = value

    @property
    def g(self):
        return self.y

    @g.setter
    def g(self, value):
        self.y = value

    @property
    def b(self):
        return self.z

    @b.setter
    def b(self, value):
        self.z = value

    @property
    def a(self):
        return self.w

    @a.setter
    def a(self, value):
        self.w = value