"""Pseudorandom integers, reals and chances from a shared generator."""

from __future__ import annotations

import math
import random
import time

_generator = random.Random(int(time.time()))


def random_integer(low: int, high: int) -> int:
    """Return a random integer between low and high, inclusive."""
    d = _generator.random()
    s = d * (float(high) - low + 1)
    return int(math.floor(low + s))


def random_real(low: float, high: float) -> float:
    """Return a random real number in the half-open interval [low, high)."""
    d = _generator.random()
    return low + d * (high - low)


def random_chance(p: float) -> bool:
    """Return True with probability p, where p lies between 0 and 1."""
    return random_real(0, 1) < p


def set_random_seed(seed: int) -> None:
    """Seed the generator so that later results repeat."""
    _generator.seed(seed)