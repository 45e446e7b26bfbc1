from __future__ import annotations

from enum import Enum
from typing import Tuple


Direction = Tuple[int, int]  # (df, dr)

ORTHOGONAL: Tuple[Direction, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONAL: Tuple[Direction, ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))


class PieceKind(Enum):
    """Sliding piece kinds that get magic tables."""

    ROOK = "rook"
    BISHOP = "bishop"

    @property
    def directions(self) -> Tuple[Direction, ...]:
        if self is PieceKind.ROOK:
            return ORTHOGONAL
        return DIAGONAL


def parse_piece_kind(name: str) -> PieceKind:
    """Parse ``"rook"``/``"bishop"`` (or ``"r"``/``"b"``), case-insensitive.

    Raises:
        ValueError: If ``name`` does not name a sliding piece.
    """
    key = name.strip().lower()
    for kind in PieceKind:
        if key == kind.value or key == kind.value[0]:
            return kind
    raise ValueError(f"invalid piece kind: {name!r}")
