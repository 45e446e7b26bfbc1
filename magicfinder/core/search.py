from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .attacks import sliding_attacks
from .bitboard import MASK64, enumerate_subsets, popcount, to_grid
from .geometry import NUM_SQUARES, check_square, square_to_str
from .masks import relevant_mask
from .pieces import PieceKind
from .rng import SplitMix64, sparse_candidate
from .tester import is_valid_magic


logger = logging.getLogger(__name__)


PROGRESS_INTERVAL = 1_000_000
# Cheap pre-filter: good magics spread the mask into the top byte of the product.
MIN_TOP_BYTE_BITS = 6
TOP_BYTE = 0xFF00000000000000


@dataclass(frozen=True)
class OccupancyTable:
    """Every occupancy subset of one relevant mask with its true attack set.

    Built once per (square, kind) and shared by all candidates tried for it.
    """

    square: int
    kind: PieceKind
    mask: int
    relevant_bits: int
    occupancies: Tuple[int, ...]
    attacks: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.occupancies)

    def accepts(self, magic: int) -> bool:
        return is_valid_magic(magic, self.relevant_bits, self.occupancies, self.attacks)


@dataclass(frozen=True)
class MagicResult:
    square: int
    kind: PieceKind
    magic: int
    relevant_bits: int
    mask: int
    attempts: int

    @property
    def shift(self) -> int:
        return 64 - self.relevant_bits

    @property
    def table_size(self) -> int:
        return 1 << self.relevant_bits


def build_occupancy_table(sq: int, kind: PieceKind) -> OccupancyTable:
    check_square(sq)
    mask = relevant_mask(sq, kind)
    occupancies = tuple(enumerate_subsets(mask))
    attacks = tuple(sliding_attacks(sq, kind, occ) for occ in occupancies)
    return OccupancyTable(
        square=sq,
        kind=kind,
        mask=mask,
        relevant_bits=popcount(mask),
        occupancies=occupancies,
        attacks=attacks,
    )


def find_magic(
    sq: int,
    kind: PieceKind,
    *,
    rng: Optional[SplitMix64] = None,
    progress_interval: int = PROGRESS_INTERVAL,
) -> MagicResult:
    """Search for a magic multiplier for ``kind`` on ``sq``.

    Samples sparse random candidates until one hashes every occupancy of the
    relevant mask without mapping two different attack sets to one slot.
    There is no attempt cap.

    Args:
        sq (int): Square index 0..63.
        kind (PieceKind): Rook or bishop.
        rng (Optional[SplitMix64]): Random source; pass a seeded generator
            for a reproducible search.
        progress_interval (int): Log a progress line every this many failed
            attempts.

    Returns:
        MagicResult: Accepted magic, relevant bit count and attempts taken.
    """
    table = build_occupancy_table(sq, kind)
    if rng is None:
        rng = SplitMix64()
    logger.debug("mask for %s %s:\n%s", kind.value, square_to_str(sq), to_grid(table.mask))

    attempts = 0
    while True:
        candidate = sparse_candidate(rng)
        attempts += 1
        if (
            popcount((table.mask * candidate) & MASK64 & TOP_BYTE) >= MIN_TOP_BYTE_BITS
            and table.accepts(candidate)
        ):
            logger.info(
                "found %s magic for %s after %d attempts",
                kind.value,
                square_to_str(sq),
                attempts,
                extra={"square": sq, "piece": kind.value, "attempts": attempts},
            )
            return MagicResult(
                square=sq,
                kind=kind,
                magic=candidate,
                relevant_bits=table.relevant_bits,
                mask=table.mask,
                attempts=attempts,
            )
        if attempts % progress_interval == 0:
            logger.info(
                "%s %s: %d attempts tried, still searching",
                kind.value,
                square_to_str(sq),
                attempts,
                extra={"square": sq, "piece": kind.value, "attempts": attempts},
            )


def find_all_magics(
    kind: PieceKind,
    *,
    rng: Optional[SplitMix64] = None,
    on_result: Optional[Callable[[MagicResult], None]] = None,
) -> List[MagicResult]:
    """Find magics for all 64 squares of ``kind`` in increasing square order."""
    if rng is None:
        rng = SplitMix64()
    results: List[MagicResult] = []
    for sq in range(NUM_SQUARES):
        res = find_magic(sq, kind, rng=rng)
        results.append(res)
        if on_result is not None:
            on_result(res)
    return results
