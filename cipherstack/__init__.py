"""cipherstack: layered classical cipher pipeline.

Compose Caesar, Monoalphabetic, Vigenere, Rail Fence, Row-Column,
Playfair and S-DES layers into ordered encryption chains.

Education only. These ciphers are NOT secure.
"""

from .errors import CipherError, IndexOutOfRange, InvalidKeyFormat, LayerError, LengthMismatch
from .pipeline import Layer, Pipeline, PipelineResult, parse_layer, run_pipeline

__all__ = [
    "CipherError",
    "IndexOutOfRange",
    "InvalidKeyFormat",
    "LayerError",
    "LengthMismatch",
    "Layer",
    "Pipeline",
    "PipelineResult",
    "parse_layer",
    "run_pipeline",
]
