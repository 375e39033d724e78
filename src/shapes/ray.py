"""Parametric rays."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray with an origin and a (not necessarily unit) direction."""

    origin: Vec3
    direction: Vec3

    def at(self, t: float) -> Vec3:
        return self.origin + self.direction * t
