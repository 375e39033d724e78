"""Predefined shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .color import Color
from .hit import Hit, Shape, Union, union
from .matrix import Matrix
from .ray import Ray
from .solver import solve_quartic
from .transform import Translation
from .vector import Vec3


def _accept(t: float) -> bool:
    return math.isfinite(t) and t >= 0.0


@dataclass(frozen=True, slots=True)
class Side(Shape):
    """A unit square in the xz plane, centred at the origin."""

    color: Color = Color.RED

    def hit(self, incidence: Ray) -> Optional[Hit]:
        if incidence.direction.y == 0.0:
            return None
        t = -incidence.origin.y / incidence.direction.y
        if not _accept(t):
            return None
        point = incidence.at(t)
        if -0.5 <= point.x <= 0.5 and -0.5 <= point.z <= 0.5:
            return Hit(self.color, t)
        return None


def cube() -> Union:
    """Return a colourful cube centred at the origin with a side length of 1."""

    # The two xz faces.
    bottom = Side().transform(Translation(Vec3(0.0, -0.5, 0.0)))
    top = Side().transform(Translation(Vec3(0.0, 0.5, 0.0))).colorize(Color.YELLOW)

    # Rotating the bottom face about x gives the xy faces, about z the yz faces.
    front = bottom.transform(Matrix.rotation_x(math.pi / 2)).colorize(Color.BLUE)
    back = bottom.transform(Matrix.rotation_x(-math.pi / 2)).colorize(Color.GREEN)
    left = bottom.transform(Matrix.rotation_z(math.pi / 2)).colorize(Color.CYAN)
    right = bottom.transform(Matrix.rotation_z(-math.pi / 2)).colorize(Color.MAGENTA)

    return union(bottom, top, front, back, left, right)


@dataclass(frozen=True, slots=True)
class Torus(Shape):
    """A torus centred at the origin whose axis of revolution is the y-axis."""

    radius_major: float
    radius_minor: float
    color: Color = Color.WHITE

    def __post_init__(self) -> None:
        if self.radius_major <= 0.0 or self.radius_minor <= 0.0:
            raise ValueError("Torus radii must be positive")

    def hit(self, incidence: Ray) -> Optional[Hit]:
        origin, direction = incidence.origin, incidence.direction

        d_len_sq = direction.length_squared()
        a = d_len_sq * d_len_sq
        if a == 0.0:
            return None
        o_dot_d = origin.dot(direction)
        major_sq = self.radius_major * self.radius_major
        minor_sq = self.radius_minor * self.radius_minor
        p = origin.length_squared() - major_sq - minor_sq
        four_major_sq = 4.0 * major_sq

        # (|o + td|^2 - R^2 - r^2)^2 = 4R^2 (r^2 - (o.y + t d.y)^2), divided by |d|^4.
        a_3 = 4.0 * o_dot_d / d_len_sq
        a_2 = 2.0 * p / d_len_sq + (
            4.0 * o_dot_d * o_dot_d + four_major_sq * direction.y * direction.y
        ) / a
        a_1 = (4.0 * o_dot_d * p + 2.0 * four_major_sq * origin.y * direction.y) / a
        a_0 = (p * p - four_major_sq * (minor_sq - origin.y * origin.y)) / a

        candidates = [t for t in solve_quartic(a_3, a_2, a_1, a_0) if _accept(t)]
        if not candidates:
            return None
        return Hit(self.color, min(candidates))
