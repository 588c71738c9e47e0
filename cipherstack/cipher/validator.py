from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..errors import CipherError
from .registry import AlgorithmRegistry

if TYPE_CHECKING:
    from ..pipeline import Layer


def validate_request(
    text: str,
    layers: Sequence["Layer"],
    registry: Optional[AlgorithmRegistry] = None,
) -> Tuple[bool, List[str]]:
    """Check text and layer keys before running a pipeline.

    Messages separate missing input from keys that a given algorithm
    cannot use, so a front end can show them as they are.
    """
    reg = registry or AlgorithmRegistry()
    errs: List[str] = []

    # Missing input
    if not text:
        errs.append("Missing input: enter some text")
    if not any(layer.algorithm for layer in layers):
        errs.append("Missing input: add at least one layer with an algorithm")

    for position, layer in enumerate(layers, start=1):
        if not layer.algorithm:
            continue
        if not reg.exists(layer.algorithm):
            errs.append(f"Layer {position}: unknown algorithm {layer.algorithm}")
            continue
        algo = reg.get(layer.algorithm)
        try:
            algo.check_key(layer.key)
        except CipherError as exc:
            errs.append(f"Layer {position}: invalid key for {algo.name}: {exc}")

    return (len(errs) == 0), errs
