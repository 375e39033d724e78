import math
import unittest

from src.shapes.solver import solve_cubic_greatest, solve_quartic


class SolverTests(unittest.TestCase):
    def test_cubic_single_real_root(self) -> None:
        self.assertAlmostEqual(solve_cubic_greatest(2.0, -2.0, 1.0), -2.831, delta=1e-3)

    def test_cubic_greatest_of_three_roots(self) -> None:
        self.assertAlmostEqual(solve_cubic_greatest(2.0, -2.0, -1.0), 1.0, delta=1e-3)

    def test_cubic_triple_root(self) -> None:
        # (x - 2)^3
        self.assertAlmostEqual(solve_cubic_greatest(-6.0, 12.0, -8.0), 2.0, delta=1e-3)

    def test_quartic(self) -> None:
        roots = solve_quartic(-2.5, 0.8, 1.0, -0.25)
        for root, expected in zip(roots, (1.778, 1.054, 0.235, -0.567)):
            self.assertAlmostEqual(root, expected, delta=1e-3)

    def test_quartic_four_known_roots(self) -> None:
        # (t - 3.2)(t - 3.8)(t - 6.2)(t - 6.8)
        roots = solve_quartic(-20.0, 145.32, -453.2, 512.6656)
        self.assertTrue(all(math.isfinite(root) for root in roots))
        for root, expected in zip(sorted(roots), (3.2, 3.8, 6.2, 6.8)):
            self.assertAlmostEqual(root, expected, delta=1e-3)

    def test_quartic_without_real_roots_is_nan(self) -> None:
        # (x^2 + 1)(x^2 + 4)
        roots = solve_quartic(0.0, 5.0, 0.0, 4.0)
        self.assertTrue(all(math.isnan(root) for root in roots))


if __name__ == "__main__":
    unittest.main()
