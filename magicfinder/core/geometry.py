from __future__ import annotations


NUM_SQUARES = 64
BOARD_SIZE = 8


def check_square(sq: int) -> int:
    """Return ``sq`` unchanged if it is a valid square index.

    Raises:
        ValueError: If ``sq`` is outside ``0..63``.
    """
    if not 0 <= sq < NUM_SQUARES:
        raise ValueError(f"invalid square index: {sq}")
    return sq


def file_of(sq: int) -> int:
    return sq & 7


def rank_of(sq: int) -> int:
    return sq >> 3


def on_board(file: int, rank: int) -> bool:
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def square_index(file: int, rank: int) -> int:
    """Map a (file, rank) pair to a square index, a1=0 .. h8=63."""
    if not on_board(file, rank):
        raise ValueError(f"invalid file/rank: ({file}, {rank})")
    return rank * 8 + file


def str_to_square(s: str) -> int:
    """Convert algebraic notation into a 0-based square index.

    Args:
        s (str): Square name such as ``"e4"``.

    Returns:
        int: Zero-based square index.

    Raises:
        ValueError: If ``s`` is not a valid square.
    """
    if len(s) != 2 or s[0] < "a" or s[0] > "h" or s[1] < "1" or s[1] > "8":
        raise ValueError(f"invalid square: {s!r}")
    return square_index(ord(s[0]) - ord("a"), int(s[1]) - 1)


def square_to_str(idx: int) -> str:
    """Convert a 0-based square index into algebraic notation.

    Raises:
        ValueError: If ``idx`` is outside the valid square range.
    """
    check_square(idx)
    return chr(ord("a") + file_of(idx)) + str(rank_of(idx) + 1)


def parse_square(token: str) -> int:
    """Accept either a square index (``"27"``) or a name (``"d4"``)."""
    token = token.strip().lower()
    if token.isdigit():
        return check_square(int(token))
    return str_to_square(token)
