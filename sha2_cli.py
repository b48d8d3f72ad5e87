"""Command-line front end for `sha2.digest`.

Usage:
    python sha2_cli.py "message"                    # SHA-256 of the UTF-8 text
    python sha2_cli.py -a sha-512/256 "message"
    python sha2_cli.py -a SHA512t -t 8 -f path/to/file
    python sha2_cli.py --format yaml -a sha384 "message"
    python sha2_cli.py --config sha2.yaml "message"

A config file is a YAML mapping with any of the keys `algorithm`, `t` and
`format`. Command-line flags take precedence over the file.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, List, Optional

import yaml

from sha2 import digest
from variants import InvalidParameterError, Variant, VariantConfig, resolve_variant, variant_config


DEFAULTS: Dict[str, Any] = {
    "algorithm": "SHA-256",
    "t": None,
    "format": "hex",
}

FORMATS = ("hex", "yaml")


def load_config(path: str) -> Dict[str, Any]:
    """Read a YAML config file and merge it over `DEFAULTS`."""
    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file '{path}' must contain a mapping")

    unknown = sorted(set(loaded) - set(DEFAULTS))
    if unknown:
        raise ValueError(f"Unknown config keys in '{path}': {', '.join(map(str, unknown))}")
    if loaded.get("format", "hex") not in FORMATS:
        raise ValueError(f"format must be one of {', '.join(FORMATS)}, got {loaded['format']!r}")

    config = dict(DEFAULTS)
    config.update(loaded)
    return config


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute a SHA-2 digest of a string or a file"
    )
    parser.add_argument(
        "message",
        nargs="?",
        help="Text to hash (encoded as UTF-8)",
    )
    parser.add_argument(
        "-f",
        "--file",
        help="Hash the raw bytes of this file instead of a message",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        help="Variant name, e.g. SHA-256, sha512_224, SHA512t (default: SHA-256)",
    )
    parser.add_argument(
        "-t",
        type=int,
        help="Output length in bits for SHA-512/t",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        help="Output format: hex or yaml (default: hex)",
    )
    parser.add_argument(
        "--config",
        help="YAML file providing defaults for algorithm, t and format",
    )
    return parser


def _read_input(args: argparse.Namespace) -> bytes:
    if args.file is not None:
        with open(args.file, "rb") as f:
            return f.read()
    return args.message.encode("utf-8")


def _yaml_record(variant: Variant, config: VariantConfig, data: bytes, result: bytes) -> str:
    record: Dict[str, Any] = {"algorithm": config.name}
    if variant is Variant.SHA512_T:
        record["t"] = config.output_bits
    record["output_bits"] = config.output_bits
    record["input_length"] = len(data)
    record["digest_hex"] = result.hex()
    return yaml.safe_dump(record, default_flow_style=False, sort_keys=False)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if (args.message is None) == (args.file is None):
        sys.stderr.write("Provide exactly one of a message or -f path/to/file\n")
        return 1

    try:
        settings = load_config(args.config) if args.config else dict(DEFAULTS)
    except (OSError, ValueError, yaml.YAMLError) as e:
        sys.stderr.write(f"Error loading config '{args.config}': {e}\n")
        return 1

    for key in ("algorithm", "t", "format"):
        value = getattr(args, key)
        if value is not None:
            settings[key] = value

    try:
        variant = resolve_variant(settings["algorithm"])
        config = variant_config(variant, settings["t"])
    except InvalidParameterError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1

    try:
        data = _read_input(args)
    except OSError as e:
        sys.stderr.write(f"Error reading file '{args.file}': {e}\n")
        return 1
    except UnicodeEncodeError as e:
        sys.stderr.write(f"Error: message cannot be encoded as UTF-8: {e}\n")
        return 1

    result = digest(variant, data, settings["t"])

    if settings["format"] == "yaml":
        sys.stdout.write(_yaml_record(variant, config, data, result))
    else:
        print(result.hex())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
