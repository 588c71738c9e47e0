"""Bit-vector utilities used by S-DES.

Bit vectors are plain lists of 0/1 ints. Permutation tables use the
1-based notation of the classical S-DES literature.
"""

from __future__ import annotations

from typing import List, Sequence

from ..errors import IndexOutOfRange, InvalidKeyFormat, LengthMismatch

Bits = List[int]


def permute(bits: Sequence[int], table: Sequence[int]) -> Bits:
    """Return a new vector where position i holds bits[table[i] - 1]."""
    n = len(bits)
    out: Bits = []
    for pos in table:
        if pos < 1 or pos > n:
            raise IndexOutOfRange(f"permutation index {pos} outside [1, {n}]")
        out.append(bits[pos - 1])
    return out


def rotate_left(bits: Sequence[int], n: int = 1) -> Bits:
    """Cyclic left rotation by n positions."""
    if not bits:
        return []
    n %= len(bits)
    return list(bits[n:]) + list(bits[:n])


def xor(a: Sequence[int], b: Sequence[int]) -> Bits:
    """XOR two bit vectors of equal length."""
    if len(a) != len(b):
        raise LengthMismatch(f"xor length mismatch: {len(a)} != {len(b)}")
    return [x ^ y for x, y in zip(a, b)]


def sbox_lookup(bits4: Sequence[int], table: Sequence[Sequence[int]]) -> Bits:
    """4-bit -> 2-bit S-box: row = b0b3, col = b1b2."""
    if len(bits4) != 4:
        raise LengthMismatch(f"S-box input must be 4 bits, got {len(bits4)}")
    row = (bits4[0] << 1) | bits4[3]
    col = (bits4[1] << 1) | bits4[2]
    val = table[row][col]
    return [(val >> 1) & 1, val & 1]


def parse_bits(text: str, length: int, *, what: str = "value") -> Bits:
    """Parse a '0'/'1' string (whitespace ignored) of exactly `length` bits."""
    cleaned = "".join(text.split())
    if not cleaned or any(ch not in "01" for ch in cleaned):
        raise InvalidKeyFormat(f"{what} must be a string of 0/1 digits, got {text!r}")
    if len(cleaned) != length:
        raise LengthMismatch(f"{what} must be {length} bits, got {len(cleaned)}")
    return [int(ch) for ch in cleaned]


def bits_to_str(bits: Sequence[int]) -> str:
    return "".join(str(b) for b in bits)
