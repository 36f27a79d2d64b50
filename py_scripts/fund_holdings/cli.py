from __future__ import annotations

import argparse
from collections.abc import Sequence


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {number}")
    return number


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Download fund holdings disclosures and write per-ticker Ticker,Weight snapshots."
    )
    parser.add_argument("--config", help="Ticker configuration file, JSON or TOML (default: HOLDINGS_CONFIG_PATH).")
    parser.add_argument(
        "--output-dir", help="Directory for <TICKER>.csv snapshots and the manifest (default: HOLDINGS_OUTPUT_DIR)."
    )
    parser.add_argument("--manifest-name", help="Manifest file name inside the output directory.")
    parser.add_argument("--tickers", help="Comma separated tickers to process (default: all configured).")
    parser.add_argument("--timeout", type=_positive_int, help="HTTP timeout seconds.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)
