"""3x3 and 4x4 matrices plus the usual transform builders.

Both matrix types store their data as a list of vectors, indexed as
``m[i][j]``. A vector ``v`` is transformed as a row vector: component
``j`` of the result is ``sum(v[i] * m[i][j])``. ``a @ b`` is the matrix
product, so ``(a @ b).transform(v) == b.transform(a.transform(v))``.
"""

from __future__ import annotations

import math
from typing import Iterator, Union

from kinetica.vectors import Vector3, Vector4, cross, dot, normalize

Scalar = Union[int, float]


class Matrix3:
    """A 3x3 matrix, used for rotations and inertia tensors.

    ``Matrix3()`` is the identity, ``Matrix3(s)`` has ``s`` on the leading
    diagonal and ``Matrix3(c0, ..., c8)`` sets explicit coefficients with
    ``m[j][i] = c[3 * i + j]``.
    """

    __slots__ = ("data",)

    def __init__(self, *coefficients: float) -> None:
        self.data = [Vector3(), Vector3(), Vector3()]
        if not coefficients:
            self._fill_diagonal(1.0)
        elif len(coefficients) == 1:
            self._fill_diagonal(coefficients[0])
        elif len(coefficients) == 9:
            for index, value in enumerate(coefficients):
                row, column = divmod(index, 3)
                self.data[column][row] = value
        else:
            raise TypeError("Matrix3 takes 0, 1 or 9 coefficients")

    def _fill_diagonal(self, value: float) -> None:
        for index in range(3):
            self.data[index][index] = value

    def __getitem__(self, index: int) -> Vector3:
        return self.data[index]

    def __setitem__(self, index: int, value: Vector3) -> None:
        self.data[index] = value.copy()

    def __iter__(self) -> Iterator[Vector3]:
        return iter(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"Matrix3({self.data!r})"

    def _values(self) -> list[float]:
        return [value for row in self.data for value in row]

    def _assign(self, other: Matrix3) -> None:
        self.data = [row.copy() for row in other.data]

    def __matmul__(self, other: Union[Matrix3, Vector3]) -> Union[Matrix3, Vector3]:
        if isinstance(other, Vector3):
            return self.transform(other)
        if isinstance(other, Matrix3):
            result = Matrix3()
            for i in range(3):
                for j in range(3):
                    result[i][j] = sum(self[i][k] * other[k][j] for k in range(3))
            return result
        return NotImplemented

    def __imatmul__(self, other: Matrix3) -> Matrix3:
        """Compose in place so that ``other`` is applied before this matrix."""
        self._assign(other @ self)
        return self

    def __mul__(self, scalar: Scalar) -> Matrix3:
        result = self.copy()
        result *= scalar
        return result

    __rmul__ = __mul__

    def __imul__(self, scalar: Scalar) -> Matrix3:
        for row in self.data:
            row *= scalar
        return self

    def __iadd__(self, other: Matrix3) -> Matrix3:
        for row, other_row in zip(self.data, other.data):
            row += other_row
        return self

    def __add__(self, other: Matrix3) -> Matrix3:
        result = self.copy()
        result += other
        return result

    def transform(self, v: Vector3) -> Vector3:
        """Transform ``v`` by this matrix."""
        m = self.data
        return Vector3(
            v.x * m[0][0] + v.y * m[1][0] + v.z * m[2][0],
            v.x * m[0][1] + v.y * m[1][1] + v.z * m[2][1],
            v.x * m[0][2] + v.y * m[1][2] + v.z * m[2][2],
        )

    def transform_transpose(self, v: Vector3) -> Vector3:
        """Transform ``v`` by the transpose of this matrix."""
        m = self.data
        return Vector3(
            v.x * m[0][0] + v.y * m[0][1] + v.z * m[0][2],
            v.x * m[1][0] + v.y * m[1][1] + v.z * m[1][2],
            v.x * m[2][0] + v.y * m[2][1] + v.z * m[2][2],
        )

    def set_diagonal(self, a: float, b: float, c: float) -> None:
        """Make this a diagonal matrix with ``a``, ``b``, ``c`` on the diagonal."""
        self.set_inertia_tensor_coeffs(a, b, c)

    def set_inertia_tensor_coeffs(
        self,
        ix: float,
        iy: float,
        iz: float,
        ixy: float = 0.0,
        ixz: float = 0.0,
        iyz: float = 0.0,
    ) -> None:
        """Set the matrix from inertia tensor moments and products."""
        m = self.data
        m[0][0] = ix
        m[1][0] = m[0][1] = -ixy
        m[2][0] = m[0][2] = -ixz
        m[1][1] = iy
        m[2][1] = m[1][2] = -iyz
        m[2][2] = iz

    def set_components(self, one: Vector3, two: Vector3, three: Vector3) -> None:
        """Set the matrix so that the three vectors are its axes."""
        self.data = [one.copy(), two.copy(), three.copy()]

    def set_inverse(self, m: Matrix3) -> None:
        """Set this to the inverse of ``m``; left unchanged if ``m`` is singular."""
        a = [row.copy() for row in m.data]
        t4 = a[0][0] * a[1][1]
        t6 = a[0][0] * a[2][1]
        t8 = a[1][0] * a[0][1]
        t10 = a[2][0] * a[0][1]
        t12 = a[1][0] * a[0][2]
        t14 = a[2][0] * a[0][2]

        det = (
            t4 * a[2][2]
            - t6 * a[1][2]
            - t8 * a[2][2]
            + t10 * a[1][2]
            + t12 * a[2][1]
            - t14 * a[1][1]
        )
        if det == 0.0:
            return
        inv = 1.0 / det

        d = self.data
        d[0][0] = (a[1][1] * a[2][2] - a[2][1] * a[1][2]) * inv
        d[1][0] = -(a[1][0] * a[2][2] - a[2][0] * a[1][2]) * inv
        d[2][0] = (a[1][0] * a[2][1] - a[2][0] * a[1][1]) * inv
        d[0][1] = -(a[0][1] * a[2][2] - a[2][1] * a[0][2]) * inv
        d[1][1] = (a[0][0] * a[2][2] - t14) * inv
        d[2][1] = -(t6 - t10) * inv
        d[0][2] = (a[0][1] * a[1][2] - a[1][1] * a[0][2]) * inv
        d[1][2] = -(a[0][0] * a[1][2] - t12) * inv
        d[2][2] = (t4 - t8) * inv

    def inverse(self) -> Matrix3:
        """Return the inverse; a singular matrix yields the identity."""
        result = Matrix3()
        result.set_inverse(self)
        return result

    def set_block_inertia_tensor(self, half_sizes: Vector3, mass: float) -> None:
        """Set the inertia tensor of an axis-aligned block."""
        squares = half_sizes * half_sizes
        self.set_inertia_tensor_coeffs(
            0.3 * mass * (squares.y + squares.z),
            0.3 * mass * (squares.x + squares.z),
            0.3 * mass * (squares.x + squares.y),
        )

    def set_skew_symmetric(self, v: Vector3) -> None:
        """Set the matrix so that transforming ``u`` gives ``cross(v, u)``."""
        m = self.data
        m[0][0] = m[1][1] = m[2][2] = 0.0
        m[1][0] = -v.z
        m[2][0] = v.y
        m[0][1] = v.z
        m[2][1] = -v.x
        m[0][2] = -v.y
        m[1][2] = v.x

    @staticmethod
    def linear_interpolate(a: Matrix3, b: Matrix3, prop: float) -> Matrix3:
        """Blend two matrices component-wise; ``prop`` 0 gives ``a``, 1 gives ``b``."""
        values = [x * (1 - prop) + y * prop for x, y in zip(a._values(), b._values())]
        result = Matrix3()
        for index, value in enumerate(values):
            row, column = divmod(index, 3)
            result[row][column] = value
        return result

    def copy(self) -> Matrix3:
        """Return an independent copy."""
        result = Matrix3()
        result._assign(self)
        return result


class Matrix4:
    """A 4x4 transform matrix; ``Matrix4(s)`` has ``s`` on the leading diagonal."""

    __slots__ = ("data",)

    def __init__(self, diagonal: float = 1.0) -> None:
        self.data = [Vector4(), Vector4(), Vector4(), Vector4()]
        for index in range(4):
            self.data[index][index] = diagonal

    def __getitem__(self, index: int) -> Vector4:
        return self.data[index]

    def __setitem__(self, index: int, value: Vector4) -> None:
        self.data[index] = value.copy()

    def __iter__(self) -> Iterator[Vector4]:
        return iter(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"Matrix4({self.data!r})"

    def __mul__(self, scalar: Scalar) -> Matrix4:
        result = self.copy()
        for row in result.data:
            row *= scalar
        return result

    __rmul__ = __mul__

    def __matmul__(
        self, other: Union[Matrix4, Vector4, Vector3]
    ) -> Union[Matrix4, Vector4, Vector3]:
        m = self.data
        if isinstance(other, Vector4):
            v = other
            return Vector4(
                *(
                    v.x * m[0][j] + v.y * m[1][j] + v.z * m[2][j] + v.w * m[3][j]
                    for j in range(4)
                )
            )
        if isinstance(other, Vector3):
            return self.transform(other)
        if isinstance(other, Matrix4):
            result = Matrix4()
            for i in range(4):
                for j in range(4):
                    result[i][j] = sum(m[i][k] * other[k][j] for k in range(4))
            return result
        return NotImplemented

    def transform(self, v: Vector3) -> Vector3:
        """Transform the point ``v``, including the translation."""
        m = self.data
        return Vector3(
            *(v.x * m[0][j] + v.y * m[1][j] + v.z * m[2][j] + m[3][j] for j in range(3))
        )

    def transform_inverse(self, v: Vector3) -> Vector3:
        """Transform ``v`` by the inverse of a rotation-plus-translation matrix."""
        m = self.data
        tmp = Vector3(v.x - m[3][0], v.y - m[3][1], v.z - m[3][2])
        return self.transform_inverse_direction(tmp)

    def axis_vector(self, i: int) -> Vector3:
        """Return the first three components of row ``i`` as a vector."""
        row = self.data[i]
        return Vector3(row.x, row.y, row.z)

    def transform_inverse_direction(self, v: Vector3) -> Vector3:
        """Rotate the direction ``v`` by the inverse of a pure rotation."""
        m = self.data
        return Vector3(
            *(v.x * m[i][0] + v.y * m[i][1] + v.z * m[i][2] for i in range(3))
        )

    def transform_direction(self, v: Vector3) -> Vector3:
        """Rotate the direction ``v``, ignoring the translation."""
        m = self.data
        return Vector3(
            *(v.x * m[0][j] + v.y * m[1][j] + v.z * m[2][j] for j in range(3))
        )

    def copy(self) -> Matrix4:
        """Return an independent copy."""
        result = Matrix4()
        result.data = [row.copy() for row in self.data]
        return result


def transpose(m: Union[Matrix3, Matrix4]) -> Union[Matrix3, Matrix4]:
    """Return the transpose of a 3x3 or 4x4 matrix."""
    result = type(m)()
    size = len(m.data)
    for i in range(size):
        for j in range(size):
            result[i][j] = m[j][i]
    return result


def look_at_rh(eye: Vector3, center: Vector3, up: Vector3) -> Matrix4:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    f = normalize(center - eye)
    s = normalize(cross(f, up))
    u = cross(s, f)

    result = Matrix4()
    result[0][0] = s.x
    result[1][0] = s.y
    result[2][0] = s.z
    result[0][1] = u.x
    result[1][1] = u.y
    result[2][1] = u.z
    result[0][2] = -f.x
    result[1][2] = -f.y
    result[2][2] = -f.z
    result[3][0] = -dot(s, eye)
    result[3][1] = -dot(u, eye)
    result[3][2] = dot(f, eye)
    return result


def perspective_fov_rh(
    fov: float, width: float, height: float, z_near: float, z_far: float
) -> Matrix4:
    """Right-handed perspective projection; ``fov`` is the vertical angle in radians."""
    h = math.cos(0.5 * fov) / math.sin(0.5 * fov)
    w = h * height / width

    result = Matrix4(0.0)
    result[0][0] = w
    result[1][1] = h
    result[2][2] = -(z_far + z_near) / (z_far - z_near)
    result[2][3] = -1.0
    result[3][2] = -(2.0 * z_far * z_near) / (z_far - z_near)
    return result


def translate(v: Vector3) -> Matrix4:
    """Translation matrix by ``v``."""
    result = Matrix4()
    result[3] = result[0] * v[0] + result[1] * v[1] + result[2] * v[2] + result[3]
    return result


def scale(v: Vector3) -> Matrix4:
    """Scaling matrix with the components of ``v`` along each axis."""
    identity = Matrix4()
    result = Matrix4()
    for i in range(3):
        result[i] = identity[i] * v[i]
    result[3] = identity[3]
    return result


def _rotation_coefficients(angle: float, v: Vector3) -> list[list[float]]:
    c = math.cos(angle)
    s = math.sin(angle)
    axis = normalize(v)
    temp = axis * (1.0 - c)
    return [
        [
            c + temp[0] * axis[0],
            temp[0] * axis[1] + s * axis[2],
            temp[0] * axis[2] - s * axis[1],
        ],
        [
            temp[1] * axis[0] - s * axis[2],
            c + temp[1] * axis[1],
            temp[1] * axis[2] + s * axis[0],
        ],
        [
            temp[2] * axis[0] + s * axis[1],
            temp[2] * axis[1] - s * axis[0],
            c + temp[2] * axis[2],
        ],
    ]


def rotate(angle: float, v: Vector3) -> Matrix4:
    """Rotation matrix of ``angle`` radians about the axis ``v``."""
    result = Matrix4()
    for i, row in enumerate(_rotation_coefficients(angle, v)):
        for j, value in enumerate(row):
            result[i][j] = value
    return result


def rotate_matrix(m: Matrix4, angle: float, v: Vector3) -> Matrix4:
    """Apply a rotation of ``angle`` radians about ``v`` to the matrix ``m``."""
    rot = _rotation_coefficients(angle, v)
    result = Matrix4(0.0)
    for i in range(3):
        result[i] = m[0] * rot[i][0] + m[1] * rot[i][1] + m[2] * rot[i][2]
    result[3] = m[3]
    return result


def yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> Matrix4:
    """Rotation matrix built from Euler angles in radians."""
    ch, sh = math.cos(yaw), math.sin(yaw)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cb, sb = math.cos(roll), math.sin(roll)

    result = Matrix4()
    result[0] = Vector4(ch * cb + sh * sp * sb, sb * cp, -sh * cb + ch * sp * sb, 0.0)
    result[1] = Vector4(-ch * sb + sh * sp * cb, cb * cp, sb * sh + ch * sp * cb, 0.0)
    result[2] = Vector4(sh * cp, -sp, ch * cp, 0.0)
    result[3] = Vector4(0.0, 0.0, 0.0, 1.0)
    return result