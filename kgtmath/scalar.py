"""Scalar helpers."""

from __future__ import annotations

import random

__all__ = ["random_scalar"]

_rng = random.Random()


def random_scalar(low: float, high: float) -> float:
    """Return a uniformly distributed float in the closed range [low, high]."""
    if low > high:
        raise ValueError(f"lower bound {low!r} exceeds upper bound {high!r}")
    return _rng.uniform(low, high)