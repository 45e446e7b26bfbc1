from __future__ import annotations

from .bitboard import MASK64
from .geometry import check_square, file_of, on_board, rank_of
from .pieces import PieceKind


def sliding_attacks(sq: int, kind: PieceKind, blockers: int) -> int:
    """Return the attack set of ``kind`` on ``sq`` given ``blockers``.

    Rays run to the board edge; a blocker square is included as attacked and
    ends its ray. ``blockers`` may be any full-board occupancy.
    """
    check_square(sq)
    blockers &= MASK64
    f0 = file_of(sq)
    r0 = rank_of(sq)
    attacks = 0
    for df, dr in kind.directions:
        tf, tr = f0, r0
        while True:
            tf += df
            tr += dr
            if not on_board(tf, tr):
                break
            o = tr * 8 + tf
            attacks |= 1 << o
            if (blockers >> o) & 1:
                break
    return attacks
