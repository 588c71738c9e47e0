"""CLI entry point for running a layer pipeline.

Usage:
    python scripts/run_pipeline.py --text "attack at dawn" --layer caesar:3 --layer vigenere:lemon
    python scripts/run_pipeline.py --text "dwwdfn..." --layer caesar:3 --layer vigenere:lemon --decrypt
    python scripts/run_pipeline.py --text 10100101 --layer des:1010000010

Layers are given in encryption order; --decrypt walks them backwards.

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
from cipherstack.cipher.validator import validate_request
from cipherstack.config import load_settings
from cipherstack.errors import LayerError
from cipherstack.pipeline import parse_layer, run_pipeline


def main() -> int:
    registry = AlgorithmRegistry()
    help_lines = "\n".join(f"  {a.algorithm_id:<15} {a.key_help}" for a in registry.list())

    parser = argparse.ArgumentParser(
        description="Layered classical cipher pipeline",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Algorithms and key formats:\n" + help_lines,
    )
    parser.add_argument("--text", required=True, help="Input text (an 8-bit block for S-DES)")
    parser.add_argument(
        "--layer", action="append", default=[], metavar="ALGORITHM:KEY",
        help="Layer in encryption order; repeat for more layers",
    )
    parser.add_argument("--decrypt", action="store_true", help="Decrypt instead of encrypt")
    parser.add_argument("--no-steps", action="store_true", help="Do not print S-DES steps")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args()

    settings = load_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        layers = [parse_layer(spec) for spec in args.layer]
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    ok, errs = validate_request(args.text, layers, registry)
    if not ok:
        for err in errs:
            print(f"ERROR: {err}", file=sys.stderr)
        return 2

    try:
        out = run_pipeline(args.text, layers, not args.decrypt, registry=registry)
    except LayerError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(out.result)
    if out.steps and not args.no_steps:
        print()
        print(out.steps)
    return 0


if __name__ == "__main__":
    sys.exit(main())
