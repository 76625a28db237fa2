"""Command-line interface for release-symbols."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO

from api.models import InputError
from artifacts import generate_release_symbols
from artifacts.collect import SymbolIntegrityError
from rules.config import ConfigError, load_config

_DESCRIPTION = """\
Prepares a JSON payload containing all stable symbols and their deprecation
status, based on the processed API data read from stdin. Renders the result
to stdout. This is used to generate historic version data for the APIs.
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="render-symbols",
        usage="cat apis.json | %(prog)s > out.json",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Config file (default: release-symbols.toml in the current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug diagnostics to stderr",
    )
    return parser


def _resolve_config_path(config: str | None) -> Path | None:
    if config is None:
        return None
    return Path(config).expanduser().resolve()


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)


def main(argv: list[str] | None = None, stdin: BinaryIO | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(Path.cwd(), _resolve_config_path(args.config))
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1

    _configure_logging("DEBUG" if args.verbose else config.log_level)

    raw = (stdin if stdin is not None else sys.stdin.buffer).read()
    try:
        payload = generate_release_symbols(raw, config=config)
    except (InputError, SymbolIntegrityError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1

    sys.stdout.flush()
    sys.stdout.buffer.write(payload)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
