from __future__ import annotations

import logging
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field

from .error import (
    exception_handler,
    http_exception_handler,
    request_validation_exception_handler,
    value_error_handler,
)
from .logging_middleware import RequestIDLoggingMiddleware
from ...core.attacks import sliding_attacks
from ...core.bitboard import MASK64, popcount, squares
from ...core.geometry import parse_square, square_to_str
from ...core.masks import relevant_mask
from ...core.pieces import parse_piece_kind
from ...core.rng import SplitMix64
from ...core.search import build_occupancy_table, find_magic


logger = logging.getLogger(__name__)


class MaskResponse(BaseModel):
    piece: str
    square: str
    mask: int
    relevant_bits: int


class AttacksRequest(BaseModel):
    piece: str = Field(..., description="rook or bishop")
    square: str = Field(..., description="Square index (0..63) or name, e.g. d4")
    blockers: int = Field(default=0, ge=0, le=MASK64)


class AttacksResponse(BaseModel):
    attacks: int
    squares: list[str]


class SearchRequest(BaseModel):
    seed: Optional[int] = Field(default=None, ge=0, le=MASK64)


class MagicResponse(BaseModel):
    piece: str
    square: str
    magic: int
    magic_hex: str
    relevant_bits: int
    shift: int
    mask: int
    attempts: int


class ValidateRequest(BaseModel):
    piece: str
    square: str
    magic: int = Field(..., ge=0, le=MASK64)


class ValidateResponse(BaseModel):
    valid: bool
    relevant_bits: int


def create_app() -> FastAPI:
    app = FastAPI(title="Magic Finder API", version="0.1.0")

    logging.basicConfig(level=logging.INFO)

    app.add_middleware(RequestIDLoggingMiddleware)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, exception_handler)

    @app.get("/healthz")
    async def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/masks/{piece}/{square}", response_model=MaskResponse)
    async def get_mask(piece: str, square: str) -> MaskResponse:
        kind = parse_piece_kind(piece)
        sq = parse_square(square)
        mask = relevant_mask(sq, kind)
        return MaskResponse(
            piece=kind.value, square=square_to_str(sq), mask=mask, relevant_bits=popcount(mask)
        )

    @app.post("/api/attacks", response_model=AttacksResponse)
    async def attacks(req: AttacksRequest) -> AttacksResponse:
        kind = parse_piece_kind(req.piece)
        sq = parse_square(req.square)
        att = sliding_attacks(sq, kind, req.blockers)
        return AttacksResponse(attacks=att, squares=[square_to_str(s) for s in squares(att)])

    # Searches are CPU bound; plain `def` keeps them off the event loop.
    @app.post("/api/magics/validate", response_model=ValidateResponse)
    def validate_magic(req: ValidateRequest) -> ValidateResponse:
        table = build_occupancy_table(parse_square(req.square), parse_piece_kind(req.piece))
        return ValidateResponse(valid=table.accepts(req.magic), relevant_bits=table.relevant_bits)

    @app.post("/api/magics/{piece}/{square}", response_model=MagicResponse)
    def search_magic(piece: str, square: str, req: Optional[SearchRequest] = None) -> MagicResponse:
        kind = parse_piece_kind(piece)
        sq = parse_square(square)
        rng = SplitMix64(req.seed) if req is not None and req.seed is not None else None
        res = find_magic(sq, kind, rng=rng)
        return MagicResponse(
            piece=kind.value,
            square=square_to_str(sq),
            magic=res.magic,
            magic_hex=f"{res.magic:#018x}",
            relevant_bits=res.relevant_bits,
            shift=res.shift,
            mask=res.mask,
            attempts=res.attempts,
        )

    return app
