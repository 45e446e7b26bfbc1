#!/usr/bin/env python3
# ruff: noqa: E402
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import time
from typing import Dict, List, TextIO

# Allow running this script directly via `python scripts/generate_magics.py`
# by adding the repo root (which contains `magicfinder/`) to sys.path.
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from magicfinder.core.geometry import square_to_str
from magicfinder.core.pieces import PieceKind
from magicfinder.core.rng import SplitMix64
from magicfinder.core.search import MagicResult, find_all_magics


logger = logging.getLogger("generate_magics")


def render_python(results: Dict[PieceKind, List[MagicResult]]) -> str:
    lines: List[str] = []
    for kind, res in results.items():
        name = kind.name
        lines.append(f"{name}_MAGICS = [")
        for r in res:
            lines.append(f"    0x{r.magic:016x},  # {square_to_str(r.square)}")
        lines.append("]")
        lines.append("")
        lines.append(f"{name}_BITS = [")
        for i in range(0, len(res), 8):
            lines.append("    " + ", ".join(str(r.relevant_bits) for r in res[i : i + 8]) + ",")
        lines.append("]")
        lines.append("")
    return "\n".join(lines)


def render_json(results: Dict[PieceKind, List[MagicResult]]) -> str:
    data = {
        kind.value: [
            {
                "square": square_to_str(r.square),
                "magic": f"0x{r.magic:016x}",
                "relevant_bits": r.relevant_bits,
                "mask": f"0x{r.mask:016x}",
                "attempts": r.attempts,
            }
            for r in res
        ]
        for kind, res in results.items()
    }
    return json.dumps(data, indent=2) + "\n"


def _log_result(res: MagicResult) -> None:
    logger.info(
        "%s %s: 0x%016x (%d bits, %d attempts)",
        res.kind.value,
        square_to_str(res.square),
        res.magic,
        res.relevant_bits,
        res.attempts,
    )


def _write(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate rook/bishop magic bitboard constants")
    parser.add_argument(
        "--piece",
        choices=["rook", "bishop", "both"],
        default="both",
        help="Piece kind(s) to generate (default: both, rooks first)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    parser.add_argument(
        "--format", choices=["python", "json"], default="python", help="Output format"
    )
    parser.add_argument("--output", default=None, help="Output file (default: stdout)")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    kinds = [PieceKind.ROOK, PieceKind.BISHOP] if args.piece == "both" else [PieceKind(args.piece)]
    rng = SplitMix64(args.seed)
    results: Dict[PieceKind, List[MagicResult]] = {}
    start = time.perf_counter()
    for kind in kinds:
        logger.info("Finding %s magics...", kind.value)
        results[kind] = find_all_magics(kind, rng=rng, on_result=_log_result)
    dt = time.perf_counter() - start
    total = sum(r.attempts for res in results.values() for r in res)
    logger.info("done in %d ms, %d attempts total", int(dt * 1000), total)

    text = render_json(results) if args.format == "json" else render_python(results)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            _write(f, text)
        logger.info("wrote %s", args.output)
    else:
        _write(sys.stdout, text)


if __name__ == "__main__":
    main()
