from __future__ import annotations

from typing import Iterator, List


MASK64 = 0xFFFFFFFFFFFFFFFF


def popcount(bb: int) -> int:
    return bin(bb & MASK64).count("1")


def lsb(bb: int) -> int:
    """Isolate the lowest set bit of ``bb`` (0 if empty)."""
    return bb & -bb


def iter_squares(bb: int) -> Iterator[int]:
    """Yield the square indices of ``bb`` from lowest to highest."""
    while bb:
        low = lsb(bb)
        yield low.bit_length() - 1
        bb ^= low


def squares(bb: int) -> List[int]:
    return list(iter_squares(bb))


def subset_of(index: int, mask: int) -> int:
    """Return the occupancy subset of ``mask`` selected by ``index``.

    Bit 0 of ``index`` controls the lowest set bit of ``mask``, bit 1 the next
    one, and so on. Over ``range(2 ** popcount(mask))`` this is a bijection
    onto all subsets of ``mask``.
    """
    subset = 0
    m = mask
    k = 0
    while m:
        low = lsb(m)
        if (index >> k) & 1:
            subset |= low
        m ^= low
        k += 1
    return subset


def enumerate_subsets(mask: int) -> Iterator[int]:
    """Yield every subset of ``mask`` in index order (empty set first)."""
    for index in range(1 << popcount(mask)):
        yield subset_of(index, mask)


def to_grid(bb: int) -> str:
    """Render ``bb`` as an 8x8 grid, rank 8 on top (debug helper)."""
    rows = []
    for rank in range(7, -1, -1):
        row = []
        for file in range(8):
            row.append("1" if (bb >> (rank * 8 + file)) & 1 else ".")
        rows.append(" ".join(row))
    return "\n".join(rows)
