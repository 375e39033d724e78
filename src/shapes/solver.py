"""Closed-form real roots of monic cubic and quartic polynomials.

Both solvers follow the formulation in https://quarticequations.com: the
cubic uses the Cardano-Viete algorithm, the quartic the NBS variant of
Ferrari's method. Square roots of negative numbers become NaN instead of
raising, so callers filter the results for finite values.
"""

from __future__ import annotations

import math
from typing import Tuple


def _sqrt(value: float) -> float:
    if value < 0.0:
        return math.nan
    return math.sqrt(value)


def _cbrt(value: float) -> float:
    return math.copysign(abs(value) ** (1.0 / 3.0), value)


def solve_cubic_greatest(a_2: float, a_1: float, a_0: float) -> float:
    """Greatest real root of ``x^3 + a_2 x^2 + a_1 x + a_0 = 0``."""

    q = a_1 / 3.0 - a_2 * a_2 / 9.0
    r = (a_1 * a_2 - 3.0 * a_0) / 6.0 - a_2 * a_2 * a_2 / 27.0
    s = r * r + q * q * q
    if s > 0.0:
        t = math.sqrt(s)
        return _cbrt(r + t) + _cbrt(r - t) - a_2 / 3.0

    # Three real roots; the k = 0 branch of the cosine form is the largest.
    sqrt_neg_q = _sqrt(-q)
    denominator = sqrt_neg_q * sqrt_neg_q * sqrt_neg_q
    theta = 0.0
    if q < 0.0 and denominator > 0.0:
        theta = math.acos(max(-1.0, min(1.0, r / denominator)))
    return 2.0 * sqrt_neg_q * math.cos(theta / 3.0) - a_2 / 3.0


def solve_quartic(
    a_3: float, a_2: float, a_1: float, a_0: float
) -> Tuple[float, float, float, float]:
    """Real roots of ``x^4 + a_3 x^3 + a_2 x^2 + a_1 x + a_0 = 0``.

    Returns four values; each quadratic factor contributes a pair in
    descending order, and a pair is NaN when its factor has no real roots.
    """

    u = solve_cubic_greatest(
        -a_2,
        a_1 * a_3 - 4.0 * a_0,
        4.0 * a_0 * a_2 - a_1 * a_1 - a_0 * a_3 * a_3,
    )

    p_lhs = a_3 / 2.0
    p_rhs = _sqrt(a_3 * a_3 / 4.0 + u - a_2)
    p_1, p_2 = p_lhs - p_rhs, p_lhs + p_rhs

    q_lhs = u / 2.0
    q_rhs = _sqrt(u * u / 4.0 - a_0)
    if a_1 - a_3 * u / 2.0 <= 0.0:
        q_rhs = -q_rhs
    q_1, q_2 = q_lhs + q_rhs, q_lhs - q_rhs

    lhs_1, lhs_2 = -p_1 / 2.0, -p_2 / 2.0
    rhs_1 = _sqrt(p_1 * p_1 / 4.0 - q_1)
    rhs_2 = _sqrt(p_2 * p_2 / 4.0 - q_2)
    return (lhs_1 + rhs_1, lhs_1 - rhs_1, lhs_2 + rhs_2, lhs_2 - rhs_2)
