"""The animated demo scene."""

from __future__ import annotations

import math

from .easing import ease_sin_in_out, phase
from .hit import Transformed
from .matrix import Matrix
from .objects import Torus, cube
from .transform import Translation
from .vector import Vec3

CUBE_SCALE = 1.3
CUBE_TILT = 0.7
TORUS_RADII = (1.5, 0.3)
SCENE_OFFSET = Vec3(0.0, 3.0, 0.0)


def demo_scene(elapsed_ms: float) -> Transformed:
    """Build the scene as it looks ``elapsed_ms`` milliseconds into the animation."""

    spin = ease_sin_in_out(phase(elapsed_ms, 2500)) * math.tau
    spinning_cube = (
        cube()
        .transform(Matrix.scale(Vec3(CUBE_SCALE, CUBE_SCALE, CUBE_SCALE)))
        .transform(Matrix.rotation_z(spin))
        .transform(Matrix.rotation_x(CUBE_TILT))
    )

    major, minor = TORUS_RADII
    tumbling_torus = (
        Torus(major, minor)
        .transform(Matrix.rotation_x(phase(elapsed_ms, 6000) * math.tau))
        .transform(Matrix.rotation_y(phase(elapsed_ms, 29000) * math.tau))
        .transform(Matrix.rotation_z(-phase(elapsed_ms, 14000) * math.tau))
    )

    return spinning_cube.union(tumbling_torus).transform(Translation(SCENE_OFFSET))
