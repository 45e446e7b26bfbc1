from __future__ import annotations

from fastapi.testclient import TestClient

from magicfinder.core.masks import relevant_mask
from magicfinder.core.pieces import PieceKind
from magicfinder.protocol.http.app import create_app


def _client() -> TestClient:
    return TestClient(create_app())


def test_get_mask_by_name_and_index() -> None:
    client = _client()
    r = client.get("/api/masks/bishop/d4")
    assert r.status_code == 200
    body = r.json()
    assert body == {
        "piece": "bishop",
        "square": "d4",
        "mask": relevant_mask(27, PieceKind.BISHOP),
        "relevant_bits": 9,
    }
    assert client.get("/api/masks/bishop/27").json() == body


def test_attacks_with_blocker() -> None:
    client = _client()
    r = client.post("/api/attacks", json={"piece": "rook", "square": "a1", "blockers": 1 << 16})
    assert r.status_code == 200
    assert sorted(r.json()["squares"]) == sorted(
        ["a2", "a3", "b1", "c1", "d1", "e1", "f1", "g1", "h1"]
    )


def test_search_then_validate_round_trip() -> None:
    client = _client()
    r = client.post("/api/magics/bishop/d4", json={"seed": 99})
    assert r.status_code == 200
    body = r.json()
    assert body["relevant_bits"] == 9
    assert body["shift"] == 55
    assert body["attempts"] >= 1
    assert body["magic_hex"] == f"{body['magic']:#018x}"

    # Same seed, same magic
    again = client.post("/api/magics/bishop/d4", json={"seed": 99}).json()
    assert again["magic"] == body["magic"]

    v = client.post(
        "/api/magics/validate", json={"piece": "bishop", "square": "d4", "magic": body["magic"]}
    )
    assert v.status_code == 200
    assert v.json() == {"valid": True, "relevant_bits": 9}


def test_search_without_body() -> None:
    r = _client().post("/api/magics/b/a1")
    assert r.status_code == 200
    assert r.json()["relevant_bits"] == 6


def test_validate_rejects_zero_magic() -> None:
    v = _client().post("/api/magics/validate", json={"piece": "rook", "square": "e4", "magic": 0})
    assert v.status_code == 200
    assert v.json() == {"valid": False, "relevant_bits": 10}
