from __future__ import annotations


class CipherError(ValueError):
    """Base class for every error raised by cipherstack."""


class InvalidKeyFormat(CipherError):
    """Key (or S-DES block) is empty, non-numeric, or otherwise malformed."""


class LengthMismatch(CipherError):
    """Bit-vector operation on operands of the wrong length."""


class IndexOutOfRange(CipherError, IndexError):
    """Permutation table references a position outside the input vector."""


class LayerError(CipherError):
    """A pipeline layer failed; the original error is chained as __cause__."""

    def __init__(self, position: int, algorithm: str, message: str):
        self.position = position
        self.algorithm = algorithm
        super().__init__(f"Layer {position} ({algorithm}): {message}")
