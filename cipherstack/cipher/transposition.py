"""Transposition ciphers: Rail Fence and Row-Column.

Both keep every input character (including spaces and punctuation)
and only change their order.
"""

from __future__ import annotations

from typing import Iterator, List

from ..errors import InvalidKeyFormat
from .classical import parse_int_key


# ============================================================================
# RAIL FENCE
# ============================================================================

def check_railfence_key(key: str) -> None:
    parse_int_key(key, what="Rail count")


def _zigzag(length: int, rails: int) -> List[int]:
    """Rail index of each position when writing `length` chars on `rails` rows."""
    pattern: List[int] = []
    rail, step = 0, 1
    for _ in range(length):
        pattern.append(rail)
        rail += step
        if rail == 0 or rail == rails - 1:
            step = -step
    return pattern


def railfence_cipher(text: str, key: str, encrypt: bool = True) -> str:
    """Zig-zag over `key` rails. One rail (or fewer) leaves the text as is."""
    rails = parse_int_key(key, what="Rail count")
    # Rails beyond the text length are never reached by the zig-zag.
    rails = min(rails, len(text))
    if rails <= 1:
        return text

    pattern = _zigzag(len(text), rails)

    if encrypt:
        rows: List[List[str]] = [[] for _ in range(rails)]
        for ch, rail in zip(text, pattern):
            rows[rail].append(ch)
        return "".join("".join(row) for row in rows)

    # Cut the ciphertext into rails of the right length, then walk the path.
    counts = [0] * rails
    for rail in pattern:
        counts[rail] += 1
    cut: List[Iterator[str]] = []
    start = 0
    for count in counts:
        cut.append(iter(text[start:start + count]))
        start += count
    return "".join(next(cut[rail]) for rail in pattern)


# ============================================================================
# ROW-COLUMN TRANSPOSITION
# ============================================================================

def check_rowcolumn_key(key: str) -> None:
    if not key:
        raise InvalidKeyFormat("Row-Column key must not be empty")


def column_order(key: str) -> List[int]:
    """Column indices sorted by key character; equal characters keep left-to-right order."""
    return [i for _, i in sorted((ch, i) for i, ch in enumerate(key))]


def rowcolumn_cipher(text: str, key: str, encrypt: bool = True) -> str:
    """Write row-major under the key, read columns in sorted-key order.

    The last row is left short rather than padded, so decryption has to
    know how many cells each column held.
    """
    check_rowcolumn_key(key)
    cols = len(key)
    n = len(text)
    if n == 0:
        return text
    rows = -(-n // cols)
    full_cols = n % cols or cols

    def height(col: int) -> int:
        return rows if col < full_cols else rows - 1

    order = column_order(key)

    if encrypt:
        return "".join(text[r * cols + col] for col in order for r in range(height(col)))

    grid: List[List[str]] = [[""] * cols for _ in range(rows)]
    pos = 0
    for col in order:
        for r in range(height(col)):
            grid[r][col] = text[pos]
            pos += 1
    return "".join("".join(row) for row in grid)
