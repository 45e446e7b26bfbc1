from __future__ import annotations

from .geometry import check_square, file_of, on_board, rank_of
from .pieces import PieceKind


def relevant_mask(sq: int, kind: PieceKind) -> int:
    """Return the relevant occupancy mask for ``kind`` standing on ``sq``.

    Each ray is walked until the next step would leave the board, so the last
    square of the ray (the board edge) is never part of the mask. Edge squares
    cannot block anything further along the ray. The piece's own square is
    never included either.
    """
    check_square(sq)
    f0 = file_of(sq)
    r0 = rank_of(sq)
    mask = 0
    for df, dr in kind.directions:
        tf, tr = f0 + df, r0 + dr
        while on_board(tf + df, tr + dr):
            mask |= 1 << (tr * 8 + tf)
            tf += df
            tr += dr
    return mask
