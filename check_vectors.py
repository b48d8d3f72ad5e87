"""Check `sha2.digest` against a YAML file of known-answer vectors.

Usage:
    python check_vectors.py                      # uses test_vectors.yaml
    python check_vectors.py -f path/to/vectors.yaml

Each vector is a mapping with:
    algorithm   variant name in any accepted spelling
    t           truncation length (SHA-512/t only)
    input_hex   message bytes as hex, or
    input_text  message text, hashed as UTF-8
    digest_hex  expected digest
"""

from __future__ import annotations

import argparse
import os
from typing import Any, Dict, List, Tuple

import yaml

from sha2 import digest
from variants import InvalidParameterError


DEFAULT_VECTORS = os.path.join(os.path.dirname(os.path.abspath(__file__)), "test_vectors.yaml")


def load_vectors(path: str = DEFAULT_VECTORS) -> List[Dict[str, Any]]:
    """Load and sanity-check the vector list from `path`."""
    with open(path, "r", encoding="utf-8") as f:
        vectors = yaml.safe_load(f)

    if not isinstance(vectors, list):
        raise ValueError(f"Vector file '{path}' must contain a list, got {type(vectors).__name__}")

    for i, entry in enumerate(vectors):
        if not isinstance(entry, dict):
            raise ValueError(f"Vector {i} is not a mapping")
        for key in ("algorithm", "digest_hex"):
            if key not in entry:
                raise ValueError(f"Vector {i} is missing '{key}'")
        if ("input_hex" in entry) == ("input_text" in entry):
            raise ValueError(f"Vector {i} needs exactly one of 'input_hex' or 'input_text'")
        for key in ("input_hex", "digest_hex"):
            if key in entry and not isinstance(entry[key], str):
                raise ValueError(
                    f"Vector {i}: '{key}' must be a quoted string, got {type(entry[key]).__name__}"
                )

    return vectors


def vector_message(entry: Dict[str, Any]) -> bytes:
    if "input_text" in entry:
        return str(entry["input_text"]).encode("utf-8")
    return bytes.fromhex(str(entry["input_hex"]))


def check_vector(entry: Dict[str, Any]) -> Tuple[bool, str]:
    """Return (matches, computed_hex) for one vector."""
    computed = digest(entry["algorithm"], vector_message(entry), entry.get("t")).hex()
    return computed == str(entry["digest_hex"]).lower(), computed


def run_vectors(vectors: List[Dict[str, Any]]) -> bool:
    passed = 0
    failed = 0

    for i, entry in enumerate(vectors):
        label = entry["algorithm"]
        if entry.get("t") is not None:
            label = f"{label} (t={entry['t']})"

        try:
            ok, computed = check_vector(entry)
        except (InvalidParameterError, ValueError) as e:
            failed += 1
            print(f"[FAIL] {i:3d} {label}")
            print(f"         error: {e}")
            continue

        if ok:
            passed += 1
            print(f"[OK]   {i:3d} {label}")
        else:
            failed += 1
            print(f"[FAIL] {i:3d} {label}")
            print(f"         expected: {entry['digest_hex']}")
            print(f"         got:      {computed}")

    print(f"\n[SUMMARY] {passed} passed, {failed} failed")
    return failed == 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Check SHA-2 digests against known-answer vectors"
    )
    parser.add_argument(
        "-f",
        "--file",
        default=DEFAULT_VECTORS,
        help="YAML vector file (default: test_vectors.yaml next to this script)",
    )
    args = parser.parse_args()

    try:
        vectors = load_vectors(args.file)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: could not load vectors: {e}")
        return 1

    return 0 if run_vectors(vectors) else 1


if __name__ == "__main__":
    raise SystemExit(main())
