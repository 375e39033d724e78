"""Animation timing helpers."""

from __future__ import annotations

import math


def ease_sin_in_out(x: float) -> float:
    return -(math.cos(math.pi * x) - 1.0) / 2.0


def phase(elapsed: float, period: float) -> float:
    """Position of ``elapsed`` within a repeating ``period``, in [0, 1)."""

    if period <= 0:
        raise ValueError("period must be positive")
    return (elapsed % period) / period
