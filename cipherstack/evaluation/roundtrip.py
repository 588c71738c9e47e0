"""Roundtrip verification: D(E(t, k), k) == t over many random vectors.

Each algorithm gets a generator that produces texts and keys inside the
domain where decryption is defined to invert encryption (for instance
lowercase text for Vigenere, digraph-safe text for Playfair).

Education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import random
import string
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..cipher.playfair import SQUARE_ALPHABET
from ..cipher.registry import AlgorithmRegistry
from ..errors import CipherError
from ..pipeline import Layer, run_pipeline

logger = logging.getLogger(__name__)

Vector = Tuple[str, str]  # (plaintext, key)

_PRINTABLE = string.ascii_letters + string.digits + " .,;:!?-'"
_LOWER_TEXT = string.ascii_lowercase + " .,!"


def _rand_text(rng: random.Random, alphabet: str, lo: int = 1, hi: int = 40) -> str:
    return "".join(rng.choice(alphabet) for _ in range(rng.randint(lo, hi)))


def _rand_word(rng: random.Random, lo: int = 1, hi: int = 8) -> str:
    return _rand_text(rng, string.ascii_lowercase, lo, hi)


def _caesar_vector(rng: random.Random) -> Vector:
    return _rand_text(rng, _PRINTABLE), str(rng.randint(-100, 100))


def _mono_vector(rng: random.Random) -> Vector:
    key = list(string.ascii_lowercase)
    rng.shuffle(key)
    return _rand_text(rng, _LOWER_TEXT), "".join(key)


def _vigenere_vector(rng: random.Random) -> Vector:
    return _rand_text(rng, _LOWER_TEXT), _rand_word(rng)


def _railfence_vector(rng: random.Random) -> Vector:
    return _rand_text(rng, _PRINTABLE), str(rng.randint(2, 8))


def _rowcolumn_vector(rng: random.Random) -> Vector:
    return _rand_text(rng, _PRINTABLE), _rand_word(rng)


def _playfair_vector(rng: random.Random) -> Vector:
    # Pairs of distinct letters: no doubled digraph, no padding.
    pairs = []
    for _ in range(rng.randint(1, 20)):
        a, b = rng.sample(SQUARE_ALPHABET, 2)
        pairs.append(a + b)
    return "".join(pairs), _rand_word(rng)


def _sdes_vector(rng: random.Random) -> Vector:
    block = "".join(rng.choice("01") for _ in range(8))
    key = "".join(rng.choice("01") for _ in range(10))
    return block, key


VECTOR_GENERATORS: Dict[str, Callable[[random.Random], Vector]] = {
    "caesar": _caesar_vector,
    "monoalphabetic": _mono_vector,
    "vigenere": _vigenere_vector,
    "railfence": _railfence_vector,
    "rowcolumn": _rowcolumn_vector,
    "playfair": _playfair_vector,
    "des": _sdes_vector,
}


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip vector."""
    vector_index: int
    plaintext: str
    key: str
    ciphertext: str
    decrypted: str
    error: Optional[str]


@dataclass
class RoundtripResult:
    """Aggregate roundtrip outcome for one algorithm."""
    algorithm_id: str
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.algorithm_id}: "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def run_roundtrip_tests(
    algorithm_id: str,
    *,
    num_vectors: int = 200,
    seed: int = 1337,
    max_failures_recorded: int = 10,
    registry: Optional[AlgorithmRegistry] = None,
) -> RoundtripResult:
    """Encrypt then decrypt `num_vectors` random (text, key) pairs through a one-layer pipeline.

    Args:
        algorithm_id: Registry id of the algorithm under test.
        num_vectors: Number of random vectors.
        seed: Random seed for reproducibility.
        max_failures_recorded: Maximum number of failure details to keep.
        registry: Optional algorithm registry; uses default if not provided.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    reg = registry or AlgorithmRegistry()
    reg.get(algorithm_id)
    make_vector = VECTOR_GENERATORS[algorithm_id]

    rng = random.Random(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        pt, key = make_vector(rng)
        layers = [Layer(algorithm=algorithm_id, key=key)]

        try:
            ct = run_pipeline(pt, layers, True, registry=reg).result
            pt2 = run_pipeline(ct, layers, False, registry=reg).result
        except CipherError as exc:
            failed += 1
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(i, pt, key, "<error>", "<error>", str(exc)))
            continue

        if pt2 == pt:
            passed += 1
        else:
            failed += 1
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(i, pt, key, ct, pt2, None))

    elapsed = time.perf_counter() - start
    if failed:
        logger.warning("%s: %d/%d roundtrip vectors failed", algorithm_id, failed, num_vectors)

    return RoundtripResult(
        algorithm_id=algorithm_id,
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )


def run_all_algorithms(
    *,
    num_vectors: int = 200,
    seed: int = 1337,
    registry: Optional[AlgorithmRegistry] = None,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> List[RoundtripResult]:
    """Run roundtrip tests for every reversible algorithm in the registry.

    S-DES only counts as reversible when SDES_INVERT_ON_DECRYPT is set.
    """
    reg = registry or AlgorithmRegistry()
    algos = [a.algorithm_id for a in reg.list() if a.reversible]
    results: List[RoundtripResult] = []

    for idx, algo_id in enumerate(algos):
        if progress_callback:
            progress_callback(algo_id, idx, len(algos))
        results.append(run_roundtrip_tests(algo_id, num_vectors=num_vectors, seed=seed, registry=reg))

    return sorted(results, key=lambda r: r.algorithm_id)
