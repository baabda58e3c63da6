# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Random sources for puzzle generation.

Generation never touches the global ``random`` module. Callers pass a
RandomSource so that a fixed seed reproduces the same puzzle.
"""

import random
from typing import MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Source of uniform random integers used by the generator."""

    def randint(self, low: int, high: int) -> int:
        """Return an integer N with low <= N <= high."""
        raise NotImplementedError

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle items in place (Fisher-Yates over randint)."""
        for i in range(len(items) - 1, 0, -1):
            j = self.randint(0, i)
            items[i], items[j] = items[j], items[i]

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element uniformly."""
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[self.randint(0, len(items) - 1)]


class SeededRandomSource(RandomSource):
    """RandomSource backed by a private random.Random instance."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

