"""Ray/shape intersection capability and the combinators that compose it.

Any object with a ``hit(incidence)`` method is a hittable. Combinators wrap
hittables by value, so a scene is an immutable tree that can be rebuilt for
every frame and queried once per pixel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from .color import Color
from .ray import Ray
from .transform import Transformation, transform_ray


@dataclass(frozen=True, slots=True)
class Hit:
    """Colour of the struck surface and the ray parameter where it was struck."""

    color: Color
    t: float


@runtime_checkable
class Hittable(Protocol):
    def hit(self, incidence: Ray) -> Optional[Hit]:
        ...


class Shape:
    """Mixin giving hittables fluent access to the combinators."""

    __slots__ = ()

    def hit(self, incidence: Ray) -> Optional[Hit]:
        raise NotImplementedError

    def transform(self, transformation: Transformation) -> "Transformed":
        return transform(self, transformation)

    def colorize(self, color: Color) -> "Colorized":
        return colorize(self, color)

    def union(self, other: Hittable) -> "Union":
        return Union(self, other)

    def __or__(self, other: Hittable) -> "Union":
        return Union(self, other)


@dataclass(frozen=True, slots=True)
class Transformed(Shape):
    """A hittable moved by a transformation.

    Only the inverse is kept: incoming rays are carried into the local space
    of ``hittable``. The local ray is built by ``transform_ray`` so that the
    reported ``t`` is valid for the original ray as well.
    """

    hittable: Hittable
    transformation_inverse: Transformation

    def hit(self, incidence: Ray) -> Optional[Hit]:
        return self.hittable.hit(transform_ray(self.transformation_inverse, incidence))


@dataclass(frozen=True, slots=True)
class Colorized(Shape):
    """A hittable whose hits all report ``color``."""

    hittable: Hittable
    color: Color

    def hit(self, incidence: Ray) -> Optional[Hit]:
        hit = self.hittable.hit(incidence)
        if hit is None:
            return None
        return Hit(self.color, hit.t)


@dataclass(frozen=True, slots=True)
class Union(Shape):
    """The nearer hit of two hittables. Ties go to ``first``."""

    first: Hittable
    second: Hittable

    def hit(self, incidence: Ray) -> Optional[Hit]:
        first = self.first.hit(incidence)
        second = self.second.hit(incidence)
        if first is None:
            return second
        if second is None:
            return first
        return first if first.t <= second.t else second


def transform(hittable: Hittable, transformation: Transformation) -> Transformed:
    return Transformed(hittable, transformation.inverse())


def colorize(hittable: Hittable, color: Color) -> Colorized:
    return Colorized(hittable, color)


def union(first: Hittable, second: Hittable, *more: Hittable) -> Union:
    """Fold any number of hittables into nested unions, left to right."""

    combined = Union(first, second)
    for hittable in more:
        combined = Union(combined, hittable)
    return combined
