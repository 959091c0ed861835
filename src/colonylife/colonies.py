"""
Colony inheritance for newly born cells.

A birth cell takes the most common colony among its live neighbors. When two
or more colonies are equally common, one of them is drawn at random, so a
generation step is non-deterministic wherever contested territory is born.
"""

from typing import Optional, Protocol, Sequence

import numpy as np


# Live marker used when there are no neighbor types to inherit
FALLBACK_TYPE = ord("O")


class RandomSource(Protocol):
    """Source of uniform integers. ``random.Random`` satisfies this protocol."""

    def randrange(self, n: int) -> int:
        """Return a uniformly distributed integer in [0, n)."""
        ...


class NumpyRandomSource:
    """
    RandomSource backed by a numpy Generator.

    Attributes:
        seed: Seed the generator was created with (None for OS entropy)
        generator: Underlying numpy Generator
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.generator = np.random.default_rng(seed)

    def randrange(self, n: int) -> int:
        return int(self.generator.integers(0, n))

    def random(self) -> float:
        """Uniform float in [0, 1), used by board generation."""
        return float(self.generator.random())


def tally(types: Sequence[int]) -> dict[int, int]:
    """Count occurrences of each type; keys keep first-seen order."""
    counts: dict[int, int] = {}
    for t in types:
        counts[t] = counts.get(t, 0) + 1
    return counts


def dominant_type(types: Sequence[int], rng: RandomSource) -> int:
    """
    Determine the colony a birth cell inherits.

    Args:
        types: Neighbor type bytes in scan order
        rng: Random source, consulted only when the top count is tied

    Returns:
        The winning type byte
    """
    if len(types) == 0:
        return FALLBACK_TYPE

    if len(types) == 1:
        return types[0]

    counts = tally(types)
    if len(counts) == 1:
        return types[0]

    max_count = max(counts.values())
    winners = [t for t, c in counts.items() if c == max_count]

    if len(winners) == 1:
        return winners[0]

    return winners[rng.randrange(len(winners))]
