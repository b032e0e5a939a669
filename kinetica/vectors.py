"""Small vector and quaternion types used throughout the simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterator, Union

FLT_EPSILON = 1.1920929e-07

Scalar = Union[int, float]


class _Components:
    """Index, iterate and compare a fixed set of named float components."""

    _FIELDS: tuple = ()

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._FIELDS[index])

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._FIELDS[index], value)

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, name) for name in self._FIELDS)

    def __len__(self) -> int:
        return len(self._FIELDS)


@dataclass
class Vector2(_Components):
    """A two component vector."""

    _FIELDS = ("x", "y")

    x: float = 0.0
    y: float = 0.0

    def negate(self) -> None:
        """Flip the sign of every component in place."""
        self.x = -self.x
        self.y = -self.y


@dataclass
class Vector3(_Components):
    """A three component vector with the usual arithmetic."""

    _FIELDS = ("x", "y", "z")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vector3, Scalar]) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: Scalar) -> Vector3:
        return self * other

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iadd__(self, other: Vector3) -> Vector3:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Vector3) -> Vector3:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, other: Union[Vector3, Scalar]) -> Vector3:
        if isinstance(other, Vector3):
            self.component_product_update(other)
        else:
            self.x *= other
            self.y *= other
            self.z *= other
        return self

    def invert(self) -> None:
        """Flip the sign of every component in place."""
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z

    def magnitude(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.square_magnitude())

    def square_magnitude(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def trim(self, size: float) -> None:
        """Limit the length of the vector to ``size``."""
        if self.square_magnitude() > size * size:
            self.normalise()
            self.x *= size
            self.y *= size
            self.z *= size

    def component_product_update(self, other: Vector3) -> None:
        """Multiply component-wise by ``other`` in place."""
        self.x *= other.x
        self.y *= other.y
        self.z *= other.z

    def normalise(self) -> None:
        """Scale a non-zero vector to unit length in place."""
        length = self.magnitude()
        if length > 0:
            self.x /= length
            self.y /= length
            self.z /= length

    def normal(self) -> Vector3:
        """Return a unit-length copy; a zero vector is returned unchanged."""
        return normalize(self)

    def clear(self) -> None:
        """Set every component to zero."""
        self.x = self.y = self.z = 0.0

    def add_scaled_vector(self, vector: Vector3, scale: float) -> None:
        """Add ``vector * scale`` to this vector in place."""
        self.x += vector.x * scale
        self.y += vector.y * scale
        self.z += vector.z * scale

    def copy(self) -> Vector3:
        """Return an independent copy."""
        return replace(self)


def dot(v1: Vector3, v2: Vector3) -> float:
    """Scalar product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def cross(v1: Vector3, v2: Vector3) -> Vector3:
    """Vector product of two vectors."""
    return Vector3(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )


def normalize(v: Vector3) -> Vector3:
    """Return the unit-length version of ``v``; zero vectors come back as copies."""
    length = v.magnitude()
    if length > 0:
        return Vector3(v.x / length, v.y / length, v.z / length)
    return v.copy()


def distance(v1: Vector3, v2: Vector3) -> float:
    """Distance between two points."""
    return (v1 - v2).magnitude()


@dataclass
class Vector4(_Components):
    """A four component vector."""

    _FIELDS = ("x", "y", "z", "w")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __add__(self, other: Vector4) -> Vector4:
        return Vector4(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __mul__(self, other: Union[Vector4, Scalar]) -> Vector4:
        if isinstance(other, Vector4):
            return Vector4(
                self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w
            )
        return Vector4(self.x * other, self.y * other, self.z * other, self.w * other)

    def __rmul__(self, other: Scalar) -> Vector4:
        return self * other

    def __iadd__(self, other: Vector4) -> Vector4:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w
        return self

    def __imul__(self, other: Union[Vector4, Scalar]) -> Vector4:
        product = self * other
        self.x, self.y, self.z, self.w = product.x, product.y, product.z, product.w
        return self

    def invert(self) -> None:
        """Flip the sign of every component in place."""
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z
        self.w = -self.w

    def copy(self) -> Vector4:
        """Return an independent copy."""
        return replace(self)


@dataclass
class Quaternion(_Components):
    """A three degree of freedom orientation; valid rotations have unit length."""

    _FIELDS = ("r", "i", "j", "k")

    r: float = 1.0
    i: float = 0.0
    j: float = 0.0
    k: float = 0.0

    def __mul__(self, other: Quaternion) -> Quaternion:
        return Quaternion(
            self.r * other.r - self.i * other.i - self.j * other.j - self.k * other.k,
            self.r * other.i + self.i * other.r + self.j * other.k - self.k * other.j,
            self.r * other.j + self.j * other.r + self.k * other.i - self.i * other.k,
            self.r * other.k + self.k * other.r + self.i * other.j - self.j * other.i,
        )

    def __imul__(self, other: Quaternion) -> Quaternion:
        product = self * other
        self.r, self.i, self.j, self.k = product.r, product.i, product.j, product.k
        return self

    def normalise(self) -> None:
        """Scale to unit length; a near-zero quaternion becomes no rotation."""
        d = self.r * self.r + self.i * self.i + self.j * self.j + self.k * self.k
        if d < FLT_EPSILON:
            self.r = 1.0
            return
        d = 1.0 / math.sqrt(d)
        self.r *= d
        self.i *= d
        self.j *= d
        self.k *= d

    def add_scaled_vector(self, vector: Vector3, scale: float) -> None:
        """Advance the orientation by an angular velocity over a time step."""
        q = Quaternion(0.0, vector.x * scale, vector.y * scale, vector.z * scale)
        q *= self
        self.r += q.r * 0.5
        self.i += q.i * 0.5
        self.j += q.j * 0.5
        self.k += q.k * 0.5

    def rotate_by_vector(self, vector: Vector3) -> None:
        """Multiply by the pure quaternion built from ``vector``."""
        self *= Quaternion(0.0, vector.x, vector.y, vector.z)