"""Invertible point mappings and the ray mapping derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeVar

from .ray import Ray
from .vector import Vec3

T = TypeVar("T", bound="Transformation")


class Transformation(Protocol):
    """Anything that maps points and can produce its own inverse."""

    def transform(self, point: Vec3) -> Vec3:
        ...

    def inverse(self: T) -> T:
        ...


@dataclass(frozen=True, slots=True)
class Translation:
    """Affine shift of every point by ``offset``."""

    offset: Vec3

    def transform(self, point: Vec3) -> Vec3:
        return point + self.offset

    def inverse(self) -> "Translation":
        return Translation(-self.offset)


def transform_ray(transformation: Transformation, ray: Ray) -> Ray:
    """Map ``ray`` through ``transformation``.

    The direction is derived from two transformed points rather than being
    transformed itself, so translations leave it untouched and
    ``transform_ray(t, ray).at(s) == t.transform(ray.at(s))`` holds for any
    affine ``t``.
    """

    origin = transformation.transform(ray.origin)
    direction = transformation.transform(ray.origin + ray.direction) - origin
    return Ray(origin, direction)
