from __future__ import annotations

from magicfinder.core.bitboard import enumerate_subsets, lsb, popcount, squares, subset_of
from magicfinder.core.masks import relevant_mask
from magicfinder.core.pieces import PieceKind


def test_popcount_and_lsb() -> None:
    assert popcount(0) == 0
    assert popcount(0xFFFFFFFFFFFFFFFF) == 64
    assert lsb(0b101000) == 0b1000
    assert lsb(0) == 0
    assert squares((1 << 3) | (1 << 63)) == [3, 63]


def test_subset_index_bits_follow_mask_bits_low_to_high() -> None:
    mask = (1 << 5) | (1 << 9) | (1 << 40)
    assert subset_of(0, mask) == 0
    assert subset_of(1, mask) == 1 << 5
    assert subset_of(2, mask) == 1 << 9
    assert subset_of(4, mask) == 1 << 40
    assert subset_of(0b101, mask) == (1 << 5) | (1 << 40)
    assert subset_of(7, mask) == mask


def test_enumeration_is_bijection_onto_subsets() -> None:
    mask = relevant_mask(27, PieceKind.ROOK)
    n = popcount(mask)
    subsets = list(enumerate_subsets(mask))
    assert len(subsets) == 1 << n
    assert len(set(subsets)) == 1 << n
    assert subsets[0] == 0
    assert subsets[-1] == mask
    assert all(s & ~mask == 0 for s in subsets)


def test_empty_mask_has_single_empty_subset() -> None:
    assert list(enumerate_subsets(0)) == [0]
