"""Substitution ciphers over the ASCII Latin alphabet.

Caesar, Monoalphabetic and Vigenere. Every cipher takes the raw key
string as typed by the user and an `encrypt` flag.

Education only. Do NOT use in production.
"""

from __future__ import annotations

import re
import string
from typing import Dict

from ..errors import InvalidKeyFormat

ALPHABET = string.ascii_lowercase
_INT_KEY = re.compile(r"[+-]?[0-9]+")


def parse_int_key(key: str, *, what: str = "key") -> int:
    """Parse an integer key such as '3', ' -5 ' or '+27'.

    Only ASCII digits with an optional sign are accepted, so '1_0' and
    non-Latin digits are rejected even though `int()` would take them.
    """
    stripped = str(key).strip()
    if not _INT_KEY.fullmatch(stripped):
        raise InvalidKeyFormat(f"{what} must be an integer, got {key!r}")
    return int(stripped)


# ============================================================================
# CAESAR
# ============================================================================

def check_caesar_key(key: str) -> None:
    parse_int_key(key, what="Caesar shift")


def caesar_cipher(text: str, key: str, encrypt: bool = True) -> str:
    """Shift each ASCII letter by `key` places, preserving case."""
    shift = parse_int_key(key, what="Caesar shift") % 26
    if not encrypt:
        shift = -shift

    out = []
    for ch in text:
        if "a" <= ch <= "z":
            base = ord("a")
        elif "A" <= ch <= "Z":
            base = ord("A")
        else:
            out.append(ch)
            continue
        out.append(chr((ord(ch) - base + shift) % 26 + base))
    return "".join(out)


# ============================================================================
# MONOALPHABETIC
# ============================================================================

def check_monoalphabetic_key(key: str) -> None:
    if not key:
        raise InvalidKeyFormat("Monoalphabetic key must not be empty")


def monoalphabetic_table(key: str, encrypt: bool = True) -> Dict[str, str]:
    """Zip the alphabet against the key, cycling the key if it is short.

    Duplicate key letters make the decryption map many-to-one; the later
    alphabet letter wins.
    """
    check_monoalphabetic_key(key)
    key = key.lower()
    table: Dict[str, str] = {}
    for i, letter in enumerate(ALPHABET):
        k = key[i % len(key)]
        if encrypt:
            table[letter] = k
        else:
            table[k] = letter
    return table


def monoalphabetic_cipher(text: str, key: str, encrypt: bool = True) -> str:
    """Substitute lowercased text through the key table; unmapped chars pass through."""
    table = monoalphabetic_table(key, encrypt)
    return "".join(table.get(ch, ch) for ch in text.lower())


# ============================================================================
# VIGENERE
# ============================================================================

def check_vigenere_key(key: str) -> None:
    if not key:
        raise InvalidKeyFormat("Vigenere key must not be empty")
    if any(ch not in ALPHABET for ch in key.lower()):
        raise InvalidKeyFormat(f"Vigenere key must contain letters only, got {key!r}")


def vigenere_cipher(text: str, key: str, encrypt: bool = True) -> str:
    """Running-key addition mod 26; the key advances on letters only."""
    check_vigenere_key(key)
    shifts = [ALPHABET.index(ch) for ch in key.lower()]

    out = []
    key_index = 0
    for ch in text.lower():
        if ch in ALPHABET:
            k = shifts[key_index % len(shifts)]
            if not encrypt:
                k = -k
            out.append(ALPHABET[(ALPHABET.index(ch) + k) % 26])
            key_index += 1
        else:
            out.append(ch)
    return "".join(out)
