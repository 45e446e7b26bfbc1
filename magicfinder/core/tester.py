from __future__ import annotations

from typing import List, Optional, Sequence

from .bitboard import MASK64


def magic_index(occupancy: int, magic: int, relevant_bits: int) -> int:
    """Multiply-then-shift hash: top ``relevant_bits`` of the 64-bit product.

    The product wraps around at 64 bits; that overflow is the mixing step.
    """
    return ((occupancy * magic) & MASK64) >> (64 - relevant_bits)


def is_valid_magic(
    candidate: int,
    relevant_bits: int,
    occupancies: Sequence[int],
    attacks: Sequence[int],
) -> bool:
    """Return True if ``candidate`` hashes the pair list without collisions.

    Two occupancies may share a slot only if their attack sets are equal.

    Raises:
        ValueError: If ``relevant_bits`` is outside ``0..64`` or the two
            sequences differ in length.
    """
    if not 0 <= relevant_bits <= 64:
        raise ValueError(f"relevant_bits must be in 0..64: {relevant_bits}")
    if len(occupancies) != len(attacks):
        raise ValueError("occupancies and attacks must have the same length")

    candidate &= MASK64
    shift = 64 - relevant_bits
    used: List[Optional[int]] = [None] * (1 << relevant_bits)
    for occ, att in zip(occupancies, attacks):
        idx = ((occ * candidate) & MASK64) >> shift
        stored = used[idx]
        if stored is None:
            used[idx] = att
        elif stored != att:
            return False
    return True
