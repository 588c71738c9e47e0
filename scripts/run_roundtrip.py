"""CLI entry point for roundtrip and avalanche checks.

Usage:
    python scripts/run_roundtrip.py                          # all reversible algorithms
    python scripts/run_roundtrip.py --algorithms caesar playfair --vectors 50
    python scripts/run_roundtrip.py --avalanche --output runs/roundtrip.json

Education only. Do NOT use in production.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from cipherstack.cipher.registry import AlgorithmRegistry
from cipherstack.config import load_settings
from cipherstack.evaluation.avalanche import compute_avalanche
from cipherstack.evaluation.roundtrip import run_all_algorithms, run_roundtrip_tests
from cipherstack.utils.repro import set_global_seed, utc_timestamp, write_json


def _cli_progress(message: str, current: int, total: int) -> None:
    """Print progress to stderr."""
    pct = (current / total * 100) if total > 0 else 0
    print(f"  [{current + 1}/{total}] ({pct:.0f}%) {message}", file=sys.stderr)


def main() -> int:
    settings = load_settings()
    registry = AlgorithmRegistry(settings)

    parser = argparse.ArgumentParser(description="Roundtrip verification for the cipher suite")
    parser.add_argument(
        "--algorithms", nargs="+", default=None, choices=registry.ids(),
        help="Algorithm ids to check (default: every reversible algorithm)",
    )
    parser.add_argument(
        "--vectors", type=int, default=settings.roundtrip_vectors,
        help=f"Random vectors per algorithm (default: {settings.roundtrip_vectors})",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.global_seed,
        help=f"Random seed (default: {settings.global_seed})",
    )
    parser.add_argument("--avalanche", action="store_true", help="Also measure S-DES avalanche")
    parser.add_argument("--output", type=str, default=None, help="Write results as JSON to this path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    set_global_seed(args.seed)

    if args.algorithms:
        results = [
            run_roundtrip_tests(a, num_vectors=args.vectors, seed=args.seed, registry=registry)
            for a in args.algorithms
        ]
    else:
        results = run_all_algorithms(
            num_vectors=args.vectors, seed=args.seed, registry=registry, progress_callback=_cli_progress,
        )

    for r in results:
        print(r.summary())
        for f in r.failures:
            print(f"    #{f.vector_index}: key={f.key!r} pt={f.plaintext!r} -> {f.decrypted!r} {f.error or ''}")

    report = {
        "timestamp": utc_timestamp(),
        "seed": args.seed,
        "roundtrip": [r.to_dict() for r in results],
    }

    if args.avalanche:
        for input_type in ("plaintext", "key"):
            av = compute_avalanche(input_type=input_type, seed=args.seed)
            print(av.summary())
            report[f"avalanche_{input_type}"] = av.to_dict()

    if args.output:
        write_json(args.output, report)
        print(f"\nResults saved to: {args.output}")

    return 0 if all(r.is_perfect for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
