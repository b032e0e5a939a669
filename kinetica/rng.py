"""A repeatable random number stream based on a rotate-and-add generator."""

from __future__ import annotations

import struct
import time
from typing import Union

from kinetica.vectors import Quaternion, Vector3

_MASK = 0xFFFFFFFF
_BUFFER_SIZE = 17


def rotl(n: int, r: int) -> int:
    """Rotate a 32-bit word left by ``r`` bits."""
    n &= _MASK
    return ((n << r) | (n >> (32 - r))) & _MASK


def rotr(n: int, r: int) -> int:
    """Rotate a 32-bit word right by ``r`` bits."""
    n &= _MASK
    return ((n >> r) | (n << (32 - r))) & _MASK


class Random:
    """One stream of repeatable random numbers.

    A seed of zero seeds the stream from the process clock.
    """

    def __init__(self, seed: int = 0) -> None:
        self._buffer: list[int] = []
        self._p1 = 0
        self._p2 = 10
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the stream from ``seed``."""
        s = seed & _MASK
        if s == 0:
            s = (time.process_time_ns() // 1_000_000) & _MASK
        buffer = []
        for _ in range(_BUFFER_SIZE):
            s = (s * 2891336453 + 1) & _MASK
            buffer.append(s)
        self._buffer = buffer
        self._p1 = 0
        self._p2 = 10

    def random_bits(self) -> int:
        """Next 32-bit word from the stream."""
        result = (rotl(self._buffer[self._p2], 13) + rotl(self._buffer[self._p1], 9)) & _MASK
        self._buffer[self._p1] = result
        self._p1 = (self._p1 - 1) % _BUFFER_SIZE
        self._p2 = (self._p2 - 1) % _BUFFER_SIZE
        return result

    def _unit(self) -> float:
        word = (self.random_bits() >> 9) | 0x3F800000
        (value,) = struct.unpack("<f", struct.pack("<I", word))
        return value - 1.0

    def random_real(self, low: float = 0.0, high: float = 1.0) -> float:
        """Uniform number in ``[low, high)``; ``[0, 1)`` by default."""
        return self._unit() * (high - low) + low

    def random_scaled(self, scale: float) -> float:
        """Uniform number between 0 and ``scale``."""
        return self._unit() * scale

    def random_int(self, maximum: int) -> int:
        """Integer in ``[0, maximum)``."""
        if maximum <= 0:
            raise ValueError("maximum must be positive")
        return self.random_bits() % maximum

    def random_binomial(self, scale: float) -> float:
        """Number between ``-scale`` and ``scale`` peaked around zero."""
        first = self._unit()
        second = self._unit()
        return (first - second) * scale

    def random_vector(self, scale: Union[float, Vector3]) -> Vector3:
        """Vector with binomial components, scaled per axis when given a vector."""
        if isinstance(scale, Vector3):
            sx, sy, sz = scale.x, scale.y, scale.z
        else:
            sx = sy = sz = scale
        x = self.random_binomial(sx)
        y = self.random_binomial(sy)
        z = self.random_binomial(sz)
        return Vector3(x, y, z)

    def random_vector_between(self, low: Vector3, high: Vector3) -> Vector3:
        """Uniform vector in the box spanned by ``low`` and ``high``."""
        x = self.random_real(low.x, high.x)
        y = self.random_real(low.y, high.y)
        z = self.random_real(low.z, high.z)
        return Vector3(x, y, z)

    def random_xz_vector(self, scale: float) -> Vector3:
        """Binomial vector in the xz plane."""
        x = self.random_binomial(scale)
        z = self.random_binomial(scale)
        return Vector3(x, 0.0, z)

    def random_quaternion(self) -> Quaternion:
        """Random unit quaternion."""
        r = self._unit()
        i = self._unit()
        j = self._unit()
        k = self._unit()
        q = Quaternion(r, i, j, k)
        q.normalise()
        return q