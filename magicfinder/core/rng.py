from __future__ import annotations

import random
from typing import Optional

from .bitboard import MASK64


class SplitMix64:
    """Deterministic 64-bit SplitMix64 generator.

    Seeded explicitly for reproducible searches; without a seed it draws one
    from :mod:`random`.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = random.getrandbits(64)
        self.state = seed & MASK64

    def next(self) -> int:
        self.state = (self.state + 0x9E3779B97F4A7C15) & MASK64
        z = self.state
        z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & MASK64
        z = (z ^ (z >> 27)) * 0x94D049BB133111EB & MASK64
        z = z ^ (z >> 31)
        return z & MASK64


def sparse_candidate(rng: SplitMix64) -> int:
    """AND of three uniform 64-bit draws; about 8 bits set on average."""
    return rng.next() & rng.next() & rng.next()
