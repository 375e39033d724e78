"""Fixed-size 3x3 matrix algebra."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vector import Vec3


@dataclass(frozen=True, slots=True)
class Matrix:
    """A 3x3 linear map stored as three row vectors.

    ``vector * matrix`` applies the map, and ``a * b`` composes two maps in
    application order, so ``v * (a * b) == (v * a) * b``.
    """

    row0: Vec3
    row1: Vec3
    row2: Vec3

    @staticmethod
    def identity() -> "Matrix":
        return Matrix(
            Vec3(1.0, 0.0, 0.0),
            Vec3(0.0, 1.0, 0.0),
            Vec3(0.0, 0.0, 1.0),
        )

    @staticmethod
    def rotation_x(angle: float) -> "Matrix":
        """Rotation of ``angle`` radians about the x-axis."""

        sin, cos = math.sin(angle), math.cos(angle)
        return Matrix(
            Vec3(1.0, 0.0, 0.0),
            Vec3(0.0, cos, -sin),
            Vec3(0.0, sin, cos),
        )

    @staticmethod
    def rotation_y(angle: float) -> "Matrix":
        """Rotation of ``angle`` radians about the y-axis."""

        sin, cos = math.sin(angle), math.cos(angle)
        return Matrix(
            Vec3(cos, 0.0, sin),
            Vec3(0.0, 1.0, 0.0),
            Vec3(-sin, 0.0, cos),
        )

    @staticmethod
    def rotation_z(angle: float) -> "Matrix":
        """Rotation of ``angle`` radians about the z-axis."""

        sin, cos = math.sin(angle), math.cos(angle)
        return Matrix(
            Vec3(cos, -sin, 0.0),
            Vec3(sin, cos, 0.0),
            Vec3(0.0, 0.0, 1.0),
        )

    @staticmethod
    def scale(factors: Vec3) -> "Matrix":
        """Per-axis scaling by the components of ``factors``."""

        return Matrix(
            Vec3(factors.x, 0.0, 0.0),
            Vec3(0.0, factors.y, 0.0),
            Vec3(0.0, 0.0, factors.z),
        )

    def determinant(self) -> float:
        a, b, c = self.row0, self.row1, self.row2
        return (
            a.x * (b.y * c.z - c.y * b.z)
            - a.y * (b.x * c.z - c.x * b.z)
            + a.z * (b.x * c.y - c.x * b.y)
        )

    def inverse(self) -> "Matrix":
        """Adjugate over determinant. The matrix must be non-singular."""

        a, b, c = self.row0, self.row1, self.row2
        adjugate = Matrix(
            Vec3(
                b.y * c.z - c.y * b.z,
                a.z * c.y - c.z * a.y,
                a.y * b.z - b.y * a.z,
            ),
            Vec3(
                b.z * c.x - c.z * b.x,
                a.x * c.z - c.x * a.z,
                a.z * b.x - b.z * a.x,
            ),
            Vec3(
                b.x * c.y - c.x * b.y,
                a.y * c.x - c.y * a.x,
                a.x * b.y - b.x * a.y,
            ),
        )
        return adjugate / self.determinant()

    def transform(self, point: Vec3) -> Vec3:
        return point * self

    def __mul__(self, other: "Matrix | float") -> "Matrix":
        if isinstance(other, Matrix):
            return Matrix(
                self.row0 * other.row0.x + self.row1 * other.row0.y + self.row2 * other.row0.z,
                self.row0 * other.row1.x + self.row1 * other.row1.y + self.row2 * other.row1.z,
                self.row0 * other.row2.x + self.row1 * other.row2.y + self.row2 * other.row2.z,
            )
        if isinstance(other, (int, float)):
            return Matrix(self.row0 * other, self.row1 * other, self.row2 * other)
        return NotImplemented

    def __rmul__(self, other: "Vec3 | float") -> "Vec3 | Matrix":
        if isinstance(other, Vec3):
            return Vec3(other.dot(self.row0), other.dot(self.row1), other.dot(self.row2))
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, scalar: float) -> "Matrix":
        return Matrix(self.row0 / scalar, self.row1 / scalar, self.row2 / scalar)
