"""Simplified DES (S-DES).

A 10-bit key, 8-bit blocks and two Feistel rounds, following the
textbook tables. Every intermediate value is recorded in a trace so the
caller can display the computation step by step.

Education only. Do NOT use in production.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from ..errors import InvalidKeyFormat, LengthMismatch
from .bits import Bits, bits_to_str, parse_bits, permute, rotate_left, sbox_lookup, xor

# ============================================================================
# TABLES (1-based)
# ============================================================================

P10 = [3, 5, 2, 7, 4, 10, 1, 9, 8, 6]
P8 = [6, 3, 7, 4, 8, 5, 10, 9]
P4 = [2, 4, 3, 1]
IP = [2, 6, 3, 1, 4, 8, 5, 7]
IP_INV = [4, 1, 3, 5, 7, 2, 8, 6]
EP = [4, 1, 2, 3, 2, 3, 4, 1]

S0 = [
    [1, 0, 3, 2],
    [3, 2, 1, 0],
    [0, 2, 1, 3],
    [3, 1, 3, 2],
]
S1 = [
    [0, 1, 2, 3],
    [2, 0, 1, 3],
    [3, 0, 1, 0],
    [2, 1, 0, 3],
]

KEY_BITS = 10
BLOCK_BITS = 8


@dataclass(frozen=True)
class KeySchedule:
    k1: Tuple[int, ...]
    k2: Tuple[int, ...]
    trace: Tuple[str, ...] = ()


@dataclass
class SDESResult:
    result_bits: str
    trace: List[str] = field(default_factory=list)

    @property
    def steps(self) -> str:
        return "\n".join(self.trace)


def parse_key(key: str) -> Bits:
    try:
        return parse_bits(key, KEY_BITS, what="S-DES key")
    except LengthMismatch as exc:
        raise InvalidKeyFormat(str(exc)) from exc


def check_sdes_key(key: str) -> None:
    parse_key(key)


def generate_keys(key: str) -> KeySchedule:
    """Derive K1 and K2 from a 10-bit key string."""
    bits = parse_key(key)
    trace: List[str] = []

    p10 = permute(bits, P10)
    trace.append(f"P10 permutation: {bits_to_str(p10)}")

    left, right = p10[:5], p10[5:]
    trace.append(f"Split into L: {bits_to_str(left)} and R: {bits_to_str(right)}")

    left, right = rotate_left(left), rotate_left(right)
    k1 = permute(left + right, P8)
    trace.append("K1 generation:")
    trace.append(f"  After LS-1: L={bits_to_str(left)}, R={bits_to_str(right)}")
    trace.append(f"  K1 = {bits_to_str(k1)}")

    left, right = rotate_left(left, 2), rotate_left(right, 2)
    k2 = permute(left + right, P8)
    trace.append("K2 generation:")
    trace.append(f"  After LS-2: L={bits_to_str(left)}, R={bits_to_str(right)}")
    trace.append(f"  K2 = {bits_to_str(k2)}")

    return KeySchedule(k1=tuple(k1), k2=tuple(k2), trace=tuple(trace))


def fk(right: Bits, subkey: Bits) -> Bits:
    """Round function: EP, XOR subkey, S0/S1, P4."""
    mixed = xor(permute(right, EP), subkey)
    return permute(sbox_lookup(mixed[:4], S0) + sbox_lookup(mixed[4:], S1), P4)


def _traced_round(left: Bits, right: Bits, subkey: Bits, *, r: int, k: str, trace: List[str]) -> Bits:
    """Return left XOR fk(right, subkey), recording each sub-step."""
    expanded = permute(right, EP)
    mixed = xor(expanded, subkey)
    sboxed = sbox_lookup(mixed[:4], S0) + sbox_lookup(mixed[4:], S1)
    f = permute(sboxed, P4)
    out = xor(left, f)
    trace.append(f"  EP(R{r}) = {bits_to_str(expanded)}")
    trace.append(f"  EP(R{r}) ⊕ {k} = {bits_to_str(mixed)}")
    trace.append(f"  S-box output = {bits_to_str(sboxed)}")
    trace.append(f"  P4 = {bits_to_str(f)}")
    trace.append(f"  L{r} ⊕ fk(R{r}, {k}) = {bits_to_str(out)}")
    return out


def process_block(
    block: Bits, k1: Bits, k2: Bits, *, key_names: Tuple[str, str] = ("K1", "K2")
) -> Tuple[Bits, List[str]]:
    """Run IP, two fk rounds around a half swap, then IP^-1."""
    if len(block) != BLOCK_BITS:
        raise LengthMismatch(f"S-DES block must be {BLOCK_BITS} bits, got {len(block)}")
    trace: List[str] = []

    ip = permute(block, IP)
    trace.append(f"Step 1 - Initial Permutation (IP): {bits_to_str(ip)}")

    left, right = ip[:4], ip[4:]
    trace.append(f"Split into L0: {bits_to_str(left)} and R0: {bits_to_str(right)}")

    trace.append("Step 2 - First fk function:")
    new_right = _traced_round(left, right, list(k1), r=0, k=key_names[0], trace=trace)

    left, right = right, new_right
    trace.append("Step 3 - Switch (SW):")
    trace.append(f"  L1: {bits_to_str(left)}")
    trace.append(f"  R1: {bits_to_str(right)}")

    trace.append("Step 4 - Second fk function:")
    final_left = _traced_round(left, right, list(k2), r=1, k=key_names[1], trace=trace)

    combined = final_left + right
    trace.append(f"Combined: {bits_to_str(combined)}")

    result = permute(combined, IP_INV)
    trace.append(f"Step 5 - Final Permutation (IP^-1): {bits_to_str(result)}")
    return result, trace


def sdes_cipher(text: str, key: str, encrypt: bool = True, *, invert_on_decrypt: bool = False) -> SDESResult:
    """Process one 8-bit block given as a '0'/'1' string.

    By default the direction flag does not change the computation: K1 is
    applied before K2 either way. With `invert_on_decrypt` the subkeys are
    swapped when decrypting, which makes decryption the true inverse.
    """
    schedule = generate_keys(key)
    block = parse_bits(text, BLOCK_BITS, what="S-DES block")

    first, second = schedule.k1, schedule.k2
    key_names = ("K1", "K2")
    label = "Encryption Steps:"
    if not encrypt and invert_on_decrypt:
        first, second = second, first
        key_names = ("K2", "K1")
        label = "Decryption Steps (K2 before K1):"
    elif not encrypt:
        label = "Decryption Steps:"

    result, steps = process_block(block, list(first), list(second), key_names=key_names)

    trace = ["Key Generation Steps:", *schedule.trace, "", label, *steps]
    return SDESResult(result_bits=bits_to_str(result), trace=trace)


def encrypt_bits(block: Bits, key: Bits) -> Bits:
    """Untraced single-block encryption on bit lists (used by the evaluation tools)."""
    schedule = generate_keys(bits_to_str(key))
    left_right = permute(block, IP)
    left, right = left_right[:4], left_right[4:]
    left, right = right, xor(left, fk(right, list(schedule.k1)))
    left = xor(left, fk(right, list(schedule.k2)))
    return permute(left + right, IP_INV)
