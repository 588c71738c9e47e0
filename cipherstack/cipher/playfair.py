"""Playfair digraph cipher over a 5x5 key square (i and j share a cell)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..errors import InvalidKeyFormat
from .classical import ALPHABET

SQUARE_ALPHABET = ALPHABET.replace("j", "")
FILLER = "x"


@dataclass(frozen=True)
class KeySquare:
    """5x5 grid stored row-major as a 25-letter string."""
    letters: str
    _positions: Dict[str, Tuple[int, int]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.letters) != 25 or len(set(self.letters)) != 25:
            raise ValueError("KeySquare needs 25 distinct letters")
        positions = {ch: divmod(i, 5) for i, ch in enumerate(self.letters)}
        object.__setattr__(self, "_positions", positions)

    @classmethod
    def from_key(cls, key: str) -> "KeySquare":
        seen: List[str] = []
        for ch in key.lower():
            if ch in SQUARE_ALPHABET and ch not in seen:
                seen.append(ch)
        for ch in SQUARE_ALPHABET:
            if ch not in seen:
                seen.append(ch)
        return cls("".join(seen))

    def at(self, row: int, col: int) -> str:
        return self.letters[(row % 5) * 5 + (col % 5)]

    def position(self, ch: str) -> Tuple[int, int]:
        return self._positions[ch]

    def rows(self) -> List[str]:
        return [self.letters[i:i + 5] for i in range(0, 25, 5)]


def check_playfair_key(key: str) -> None:
    if not key:
        raise InvalidKeyFormat("Playfair key must not be empty")
    if not any(ch in ALPHABET for ch in key.lower()):
        raise InvalidKeyFormat(f"Playfair key must contain at least one letter, got {key!r}")


def prepare_text(text: str) -> str:
    """Lowercase, drop non-letters, merge j into i."""
    return "".join(ch for ch in text.lower() if ch in ALPHABET).replace("j", "i")


def digraphs(text: str) -> List[Tuple[str, str]]:
    """Split prepared text into pairs, breaking doubled letters and padding with 'x'."""
    pairs: List[Tuple[str, str]] = []
    i = 0
    while i < len(text):
        a = text[i]
        if i + 1 >= len(text):
            pairs.append((a, FILLER))
            i += 1
        elif text[i + 1] == a:
            pairs.append((a, FILLER))
            i += 1
        else:
            pairs.append((a, text[i + 1]))
            i += 2
    return pairs


def playfair_cipher(text: str, key: str, encrypt: bool = True) -> str:
    check_playfair_key(key)
    square = KeySquare.from_key(key)
    shift = 1 if encrypt else -1

    out: List[str] = []
    for a, b in digraphs(prepare_text(text)):
        r1, c1 = square.position(a)
        r2, c2 = square.position(b)
        if r1 == r2:
            out.append(square.at(r1, c1 + shift) + square.at(r2, c2 + shift))
        elif c1 == c2:
            out.append(square.at(r1 + shift, c1) + square.at(r2 + shift, c2))
        else:
            out.append(square.at(r1, c2) + square.at(r2, c1))
    return "".join(out)
