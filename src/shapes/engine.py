"""Camera and viewport that turn a hittable scene into terminal frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .color import Color
from .hit import Hittable
from .ray import Ray
from .vector import Vec3

FrameRow = List[Optional[Color]]
FrameMatrix = List[FrameRow]

BLOCK = "█"


@dataclass(frozen=True, slots=True)
class Camera:
    """A pinhole camera at the origin.

    The camera looks along +y, with +z up and +x to the right. ``width`` and
    ``height`` size the image plane that sits ``focal_length`` in front of
    the focal point.
    """

    focal_length: float = 0.5
    width: float = 1.0
    height: float = 1.0

    def __post_init__(self) -> None:
        if self.focal_length <= 0.0:
            raise ValueError("Camera focal length must be positive")
        if self.width <= 0.0 or self.height <= 0.0:
            raise ValueError("Camera image plane must have a positive size")

    def ray(self, u: float, v: float) -> Ray:
        direction = Vec3(
            -self.width / 2.0 + u * self.width,
            self.focal_length,
            -self.height / 2.0 + v * self.height,
        )
        return Ray(Vec3.zero(), direction)

    def project(self, scene: Hittable, u: float, v: float) -> Optional[Color]:
        hit = scene.hit(self.ray(u, v))
        if hit is None:
            return None
        return hit.color


@dataclass(frozen=True, slots=True)
class Viewport:
    """Grid of character cells, each sampled through the camera once."""

    width: int = 80
    height: int = 40
    camera: Camera = field(default_factory=Camera)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Viewport requires width and height >= 1")

    def rows(self, scene: Hittable) -> FrameMatrix:
        """Colour of every cell, top row first."""

        frame: FrameMatrix = []
        # Image-plane v grows upwards, so the top of the screen is the last j.
        for j in reversed(range(self.height)):
            v = (j + 0.5) / self.height
            row: FrameRow = []
            for i in range(self.width):
                u = (i + 0.5) / self.width
                row.append(self.camera.project(scene, u, v))
            frame.append(row)
        return frame

    def render(self, scene: Hittable) -> str:
        return self._compose_frame(self.rows(scene))

    @staticmethod
    def _compose_frame(frame: FrameMatrix) -> str:
        parts: List[str] = []
        for row in frame:
            for color in row:
                if color is None:
                    parts.append(" ")
                else:
                    parts.append(color.escape)
                    parts.append(BLOCK)
            parts.append("\n")
        parts.append(Color.RESET.escape)
        return "".join(parts)
