"""Empirical checks for the cipher suite.

Roundtrip verification for every reversible algorithm and avalanche
measurement for S-DES.

Education only. Do NOT use in production.
"""

from .roundtrip import RoundtripResult, RoundtripFailure, run_roundtrip_tests, run_all_algorithms
from .avalanche import AvalancheResult, compute_avalanche

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "run_roundtrip_tests",
    "run_all_algorithms",
    "AvalancheResult",
    "compute_avalanche",
]
