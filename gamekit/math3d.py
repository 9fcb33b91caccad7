"""3D vectors, row-major 4x4 matrices and quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

Row = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Vector3:
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self * scalar

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def square_size(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.square_size())

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector3(0.0, 0.0, 0.0)
        return self / length

    def dot(self, other: Vector3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def transform(self, matrix: Matrix) -> Vector3:
        """Transform this point as a row vector by ``matrix`` (translation included)."""
        m = matrix
        return Vector3(
            self.x * m[0][0] + self.y * m[1][0] + self.z * m[2][0] + m[3][0],
            self.x * m[0][1] + self.y * m[1][1] + self.z * m[2][1] + m[3][1],
            self.x * m[0][2] + self.y * m[1][2] + self.z * m[2][2] + m[3][2],
        )


@dataclass(frozen=True)
class Matrix:
    """A 4x4 matrix stored row by row, used with row vectors."""

    rows: Tuple[Row, Row, Row, Row]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Matrix needs 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.multiply(other)

    @classmethod
    def identity(cls) -> Matrix:
        """The identity matrix."""
        return cls(tuple(tuple(1.0 if i == j else 0.0 for j in range(4)) for i in range(4)))

    @classmethod
    def scaling(cls, v: Vector3) -> Matrix:
        """A scale matrix."""
        return cls(
            (
                (v.x, 0.0, 0.0, 0.0),
                (0.0, v.y, 0.0, 0.0),
                (0.0, 0.0, v.z, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def translation(cls, v: Vector3) -> Matrix:
        """A translation matrix (translation in the last row)."""
        return cls(
            (
                (1.0, 0.0, 0.0, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (v.x, v.y, v.z, 1.0),
            )
        )

    def multiply(self, other: Matrix) -> Matrix:
        """The product ``self * other``; applies ``self`` first for row vectors."""
        columns = list(zip(*other.rows))
        return Matrix(
            tuple(
                tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                for row in self.rows
            )
        )


@dataclass(frozen=True)
class Quaternion:
    """A rotation quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __mul__(self, rhs: Quaternion) -> Quaternion:
        return Quaternion(
            x=self.w * rhs.x + self.x * rhs.w + self.y * rhs.z - self.z * rhs.y,
            y=self.w * rhs.y - self.x * rhs.z + self.y * rhs.w + self.z * rhs.x,
            z=self.w * rhs.z + self.x * rhs.y - self.y * rhs.x + self.z * rhs.w,
            w=self.w * rhs.w - self.x * rhs.x - self.y * rhs.y - self.z * rhs.z,
        )

    @classmethod
    def identity(cls) -> Quaternion:
        """No rotation."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_matrix(cls, m: Matrix) -> Quaternion:
        """Build a quaternion from the upper 3x3 of a rotation matrix."""
        trace = m[0][0] + m[1][1] + m[2][2]
        if trace > 0.0:
            s = 0.5 / math.sqrt(trace + 1.0)
            return cls(
                x=(m[2][1] - m[1][2]) * s,
                y=(m[0][2] - m[2][0]) * s,
                z=(m[1][0] - m[0][1]) * s,
                w=0.25 / s,
            )
        if m[0][0] > m[1][1] and m[0][0] > m[2][2]:
            s = 2.0 * math.sqrt(1.0 + m[0][0] - m[1][1] - m[2][2])
            return cls(
                x=0.25 * s,
                y=(m[0][1] + m[1][0]) / s,
                z=(m[0][2] + m[2][0]) / s,
                w=(m[2][1] - m[1][2]) / s,
            )
        if m[1][1] > m[2][2]:
            s = 2.0 * math.sqrt(1.0 + m[1][1] - m[0][0] - m[2][2])
            return cls(
                x=(m[0][1] + m[1][0]) / s,
                y=0.25 * s,
                z=(m[1][2] + m[2][1]) / s,
                w=(m[0][2] - m[2][0]) / s,
            )
        s = 2.0 * math.sqrt(1.0 + m[2][2] - m[0][0] - m[1][1])
        return cls(
            x=(m[0][2] + m[2][0]) / s,
            y=(m[1][2] + m[2][1]) / s,
            z=0.25 * s,
            w=(m[1][0] - m[0][1]) / s,
        )

    @classmethod
    def from_euler_angles(cls, pitch: float, yaw: float, roll: float) -> Quaternion:
        """Build a quaternion from Euler angles in radians."""
        cy = math.cos(yaw * 0.5)
        sy = math.sin(yaw * 0.5)
        cp = math.cos(pitch * 0.5)
        sp = math.sin(pitch * 0.5)
        cr = math.cos(roll * 0.5)
        sr = math.sin(roll * 0.5)
        return cls(
            x=sr * cp * cy - cr * sp * sy,
            y=cr * sp * cy + sr * cp * sy,
            z=cr * cp * sy - sr * sp * cy,
            w=cr * cp * cy + sr * sp * sy,
        )

    def normalized(self) -> Quaternion:
        """Unit-length copy; a near-zero quaternion is returned unchanged."""
        length = math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2 + self.w ** 2)
        if length > 1e-6:
            return Quaternion(
                self.x / length, self.y / length, self.z / length, self.w / length
            )
        return self

    def to_matrix(self) -> Matrix:
        """The rotation matrix of this quaternion."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return Matrix(
            (
                (1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y + w * z), 2.0 * (x * z - w * y), 0.0),
                (2.0 * (x * y - w * z), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z + w * x), 0.0),
                (2.0 * (x * z + w * y), 2.0 * (y * z - w * x), 1.0 - 2.0 * (x * x + y * y), 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def slerp(cls, a: Quaternion, b: Quaternion, t: float) -> Quaternion:
        """Spherical linear interpolation from ``a`` to ``b`` along the shorter arc."""
        dot = a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w
        if dot < 0.0:
            dot = -dot
            b = cls(-b.x, -b.y, -b.z, -b.w)

        if dot > 0.9995:
            return cls(
                a.x + t * (b.x - a.x),
                a.y + t * (b.y - a.y),
                a.z + t * (b.z - a.z),
                a.w + t * (b.w - a.w),
            ).normalized()

        theta_0 = math.acos(dot)
        theta = theta_0 * t
        sin_theta = math.sin(theta)
        sin_theta_0 = math.sin(theta_0)
        s0 = math.cos(theta) - dot * sin_theta / sin_theta_0
        s1 = sin_theta / sin_theta_0
        return cls(
            s0 * a.x + s1 * b.x,
            s0 * a.y + s1 * b.y,
            s0 * a.z + s1 * b.z,
            s0 * a.w + s1 * b.w,
        )