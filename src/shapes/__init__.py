"""Analytic 3D shapes rendered as coloured blocks in the terminal."""

from .color import Color
from .engine import Camera, Viewport
from .hit import Colorized, Hit, Hittable, Shape, Transformed, Union, colorize, transform, union
from .matrix import Matrix
from .objects import Side, Torus, cube
from .ray import Ray
from .scene import demo_scene
from .terminal import TerminalController
from .transform import Transformation, Translation, transform_ray
from .vector import Vec3

__all__ = [
    "Camera",
    "Color",
    "Colorized",
    "Hit",
    "Hittable",
    "Matrix",
    "Ray",
    "Shape",
    "Side",
    "TerminalController",
    "Torus",
    "Transformation",
    "Transformed",
    "Translation",
    "Union",
    "Vec3",
    "Viewport",
    "colorize",
    "cube",
    "demo_scene",
    "transform",
    "transform_ray",
    "union",
]
