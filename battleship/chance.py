"""Random choices used by the bot and the ship placement."""

from __future__ import annotations

import random
from bisect import bisect_right
from collections.abc import Sequence
from itertools import accumulate

_DEFAULT_RNG = random.Random()


def random_below(end: int, rng: random.Random | None = None) -> int:
    """Return a random integer from ``[0, end)``."""
    if end <= 0:
        raise ValueError("end of the interval must be positive")
    return (rng or _DEFAULT_RNG).randrange(end)


def random_with_unequal_chances(
    chances: Sequence[int], rng: random.Random | None = None
) -> int:
    """Return a random index of ``chances``, each weighted by its value."""
    totals = list(accumulate(chances))
    if not totals or totals[-1] <= 0:
        raise ValueError("chances must have a positive sum")
    number = random_below(totals[-1], rng)
    return bisect_right(totals, number)