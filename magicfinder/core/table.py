from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .attacks import sliding_attacks
from .bitboard import enumerate_subsets
from .geometry import check_square, square_to_str
from .pieces import PieceKind
from .search import MagicResult
from .tester import magic_index


@dataclass
class MagicEntry:
    """Per-square lookup data: mask, magic, bit count and attack slots."""

    mask: int
    magic: int
    relevant_bits: int
    slots: List[Optional[int]]

    def lookup(self, occupancy: int) -> int:
        idx = magic_index(occupancy & self.mask, self.magic, self.relevant_bits)
        att = self.slots[idx]
        assert att is not None
        return att


class SliderAttackTable:
    """O(1) slider attack lookup built from accepted magics.

    Usage:
        table = SliderAttackTable.build(find_all_magics(PieceKind.ROOK))
        table.attacks(sq, occupancy)
    """

    def __init__(self, kind: PieceKind, entries: Dict[int, MagicEntry]) -> None:
        self.kind = kind
        self._entries = entries

    @classmethod
    def build(cls, results: Iterable[MagicResult]) -> "SliderAttackTable":
        """Fill the attack slots for every result.

        Raises:
            ValueError: If results mix piece kinds, or a magic maps two
                different attack sets to the same slot.
        """
        kind: Optional[PieceKind] = None
        entries: Dict[int, MagicEntry] = {}
        for res in results:
            if kind is None:
                kind = res.kind
            elif res.kind is not kind:
                raise ValueError("results must all be for the same piece kind")
            slots: List[Optional[int]] = [None] * res.table_size
            for occ in enumerate_subsets(res.mask):
                att = sliding_attacks(res.square, res.kind, occ)
                idx = magic_index(occ, res.magic, res.relevant_bits)
                if slots[idx] is not None and slots[idx] != att:
                    raise ValueError(
                        f"magic {res.magic:#018x} collides on {square_to_str(res.square)}"
                    )
                slots[idx] = att
            entries[res.square] = MagicEntry(res.mask, res.magic, res.relevant_bits, slots)
        if kind is None:
            raise ValueError("no magic results given")
        return cls(kind, entries)

    def __contains__(self, sq: int) -> bool:
        return sq in self._entries

    def attacks(self, sq: int, occupancy: int) -> int:
        check_square(sq)
        entry = self._entries.get(sq)
        if entry is None:
            raise KeyError(sq)
        return entry.lookup(occupancy)
