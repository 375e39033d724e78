import unittest
from dataclasses import dataclass
from typing import Optional

from src.shapes.color import Color
from src.shapes.hit import Colorized, Hit, Hittable, Shape, Transformed, Union, colorize, transform, union
from src.shapes.matrix import Matrix
from src.shapes.objects import cube
from src.shapes.ray import Ray
from src.shapes.transform import Translation, transform_ray
from src.shapes.vector import Vec3


@dataclass(frozen=True)
class FixedShape(Shape):
    """Reports the same result for every ray."""

    result: Optional[Hit]

    def hit(self, incidence: Ray) -> Optional[Hit]:
        return self.result


class PlainHittable:
    """Hittable that does not inherit the combinator mixin."""

    def hit(self, incidence: Ray) -> Optional[Hit]:
        return Hit(Color.GREEN, 1.0)


RAY = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
NEAR = Hit(Color.RED, 2.0)
FAR = Hit(Color.BLUE, 5.0)


class UnionTests(unittest.TestCase):
    def test_nearest_hit_wins(self) -> None:
        self.assertEqual(Union(FixedShape(NEAR), FixedShape(FAR)).hit(RAY), NEAR)
        self.assertEqual(Union(FixedShape(FAR), FixedShape(NEAR)).hit(RAY), NEAR)

    def test_single_hit_passes_through(self) -> None:
        self.assertEqual(Union(FixedShape(None), FixedShape(FAR)).hit(RAY), FAR)
        self.assertEqual(Union(FixedShape(NEAR), FixedShape(None)).hit(RAY), NEAR)

    def test_both_miss(self) -> None:
        self.assertIsNone(Union(FixedShape(None), FixedShape(None)).hit(RAY))

    def test_variadic_union_and_operator(self) -> None:
        middle = Hit(Color.CYAN, 3.0)
        combined = union(FixedShape(FAR), FixedShape(None), FixedShape(middle))
        self.assertEqual(combined.hit(RAY), middle)
        self.assertEqual((FixedShape(FAR) | FixedShape(NEAR)).hit(RAY), NEAR)
        self.assertEqual(FixedShape(None).union(FixedShape(FAR)).hit(RAY), FAR)


class ColorizeTests(unittest.TestCase):
    def test_replaces_colour_and_keeps_t(self) -> None:
        hit = FixedShape(FAR).colorize(Color.YELLOW).hit(RAY)
        self.assertEqual(hit, Hit(Color.YELLOW, 5.0))

    def test_miss_stays_a_miss(self) -> None:
        self.assertIsNone(Colorized(FixedShape(None), Color.YELLOW).hit(RAY))

    def test_works_on_any_hittable(self) -> None:
        plain = PlainHittable()
        self.assertIsInstance(plain, Hittable)
        self.assertEqual(colorize(plain, Color.MAGENTA).hit(RAY), Hit(Color.MAGENTA, 1.0))
        self.assertEqual(transform(plain, Matrix.rotation_x(0.3)).hit(RAY), Hit(Color.GREEN, 1.0))


class TransformedTests(unittest.TestCase):
    def test_stores_inverse(self) -> None:
        translation = Translation(Vec3(0.0, 1.0, 0.0))
        wrapped = transform(FixedShape(None), translation)
        self.assertIsInstance(wrapped, Transformed)
        self.assertEqual(wrapped.transformation_inverse, translation.inverse())

    def test_matches_hitting_the_mapped_ray(self) -> None:
        ray = Ray(Vec3(0.1, -4.0, 0.2), Vec3(0.05, 1.0, -0.02))
        transformations = (
            Translation(Vec3(0.0, 1.5, 0.0)),
            Matrix.rotation_z(0.4),
            Matrix.rotation_x(0.7) * Matrix.scale(Vec3(1.3, 1.3, 1.3)),
        )
        shape = cube()
        for transformation in transformations:
            wrapped = shape.transform(transformation).hit(ray)
            direct = shape.hit(transform_ray(transformation.inverse(), ray))
            self.assertIsNotNone(wrapped)
            self.assertEqual(wrapped, direct)

    def test_t_is_measured_along_the_original_ray(self) -> None:
        # Doubling the cube puts its bottom face at y = -1.
        ray = Ray(Vec3(0.0, -5.0, 0.0), Vec3(0.0, 1.0, 0.0))
        hit = cube().transform(Matrix.scale(Vec3(2.0, 2.0, 2.0))).hit(ray)
        self.assertIsNotNone(hit)
        self.assertAlmostEqual(hit.t, 4.0, delta=1e-9)  # type: ignore[union-attr]
        self.assertEqual(ray.at(hit.t), Vec3(0.0, -1.0, 0.0))  # type: ignore[union-attr]


if __name__ == "__main__":
    unittest.main()
