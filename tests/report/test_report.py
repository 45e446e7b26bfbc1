from __future__ import annotations

import json

from magicfinder.core.pieces import PieceKind
from magicfinder.core.search import MagicResult
from scripts.generate_magics import render_json, render_python


def _results() -> dict[PieceKind, list[MagicResult]]:
    rook = [
        MagicResult(
            square=sq,
            kind=PieceKind.ROOK,
            magic=0x8A80104000800020 + sq,
            relevant_bits=12 if sq == 0 else 11,
            mask=0x101010101017E,
            attempts=3,
        )
        for sq in range(2)
    ]
    bishop = [
        MagicResult(
            square=0,
            kind=PieceKind.BISHOP,
            magic=0x40040844404084,
            relevant_bits=6,
            mask=0x40201008040200,
            attempts=1,
        )
    ]
    return {PieceKind.ROOK: rook, PieceKind.BISHOP: bishop}


def test_render_python_tables() -> None:
    text = render_python(_results())
    assert "ROOK_MAGICS = [" in text
    assert "    0x8a80104000800020,  # a1" in text
    assert "    0x8a80104000800021,  # b1" in text
    assert "ROOK_BITS = [\n    12, 11,\n]" in text
    assert "BISHOP_MAGICS = [" in text
    assert text.index("ROOK_MAGICS") < text.index("BISHOP_MAGICS")


def test_render_json() -> None:
    data = json.loads(render_json(_results()))
    assert [e["square"] for e in data["rook"]] == ["a1", "b1"]
    assert data["bishop"][0] == {
        "square": "a1",
        "magic": "0x0040040844404084",
        "relevant_bits": 6,
        "mask": "0x0040201008040200",
        "attempts": 1,
    }
