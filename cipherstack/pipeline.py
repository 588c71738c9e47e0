"""Layer pipeline engine.

Applies an ordered list of (algorithm, key) layers to a text. Decryption
walks the same list backwards with every layer inverted, so a chain
built for encryption can be reused unchanged to decrypt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .cipher.registry import AlgorithmRegistry
from .cipher.sdes import SDESResult
from .errors import CipherError, LayerError

logger = logging.getLogger(__name__)

AlgorithmId = Literal["caesar", "monoalphabetic", "vigenere", "railfence", "rowcolumn", "des", "playfair", ""]


class Layer(BaseModel):
    """One configured layer. An empty algorithm is a pass-through."""

    algorithm: AlgorithmId = Field(default="")
    key: str = Field(default="")

    model_config = ConfigDict(frozen=True)

    @field_validator("algorithm", mode="before")
    @classmethod
    def _lower_algorithm(cls, v: object) -> object:
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip().lower()
        return v


@dataclass
class PipelineResult:
    result: str
    steps: str = ""


def run_pipeline(
    text: str,
    layers: Sequence[Layer],
    encrypt: bool = True,
    *,
    registry: Optional[AlgorithmRegistry] = None,
) -> PipelineResult:
    """Thread `text` through every layer (reversed when decrypting).

    Per-layer failures are raised as LayerError naming the 1-based layer
    position in the original list; nothing is returned on failure.
    """
    reg = registry or AlgorithmRegistry()
    numbered = list(enumerate(layers, start=1))
    order = numbered if encrypt else list(reversed(numbered))

    result = text
    traces: List[str] = []
    for position, layer in order:
        if not layer.algorithm:
            logger.debug("Layer %d: no algorithm selected, skipping", position)
            continue

        algo = reg.get(layer.algorithm)
        logger.debug("Layer %d: %s (%s)", position, algo.name, "encrypt" if encrypt else "decrypt")
        try:
            out = algo.cipher(result, layer.key, encrypt)
        except CipherError as exc:
            raise LayerError(position, layer.algorithm, str(exc)) from exc

        if isinstance(out, SDESResult):
            result = out.result_bits
            traces.append(out.steps)
        else:
            result = out

    return PipelineResult(result=result, steps=reg.settings.trace_separator.join(traces))


class Pipeline(BaseModel):
    """An ordered layer list plus a direction flag."""

    layers: List[Layer] = Field(default_factory=list)
    encrypt: bool = Field(default=True)

    def run(self, text: str, *, registry: Optional[AlgorithmRegistry] = None) -> PipelineResult:
        return run_pipeline(text, self.layers, self.encrypt, registry=registry)

    def reversed_direction(self) -> "Pipeline":
        """Same layers, opposite direction."""
        return Pipeline(layers=list(self.layers), encrypt=not self.encrypt)


def parse_layer(spec: str) -> Layer:
    """Parse the CLI form 'algorithm:key' (the key may itself contain colons)."""
    algorithm, sep, key = spec.partition(":")
    if not sep:
        raise ValueError(f"Layer must look like 'algorithm:key', got {spec!r}")
    return Layer(algorithm=algorithm, key=key)
