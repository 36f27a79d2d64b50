"""I/O helpers for persisting holdings snapshots and the update manifest."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from .domain import HoldingRecord, UpdateManifest

logger = logging.getLogger(__name__)

CSV_COLUMNS = ("Ticker", "Weight")


def holdings_to_dataframe(records: Sequence[HoldingRecord]) -> pd.DataFrame:
    """Convert records into the two-column frame written to disk."""
    rows = [{"Ticker": record.symbol, "Weight": record.weight} for record in records]
    return pd.DataFrame(rows, columns=list(CSV_COLUMNS))


def snapshot_path(folder: str | Path, ticker: str) -> Path:
    return Path(folder) / f"{ticker.strip().upper()}.csv"


def write_holdings_csv(records: Sequence[HoldingRecord], path: str | Path) -> None:
    """Persist records as ``Ticker,Weight`` CSV; unknown weights are left blank."""
    csv_path = Path(path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    df = holdings_to_dataframe(records)
    df.to_csv(csv_path, index=False, na_rep="", lineterminator="\n")
    logger.debug("Wrote holdings csv: %s (rows=%d)", csv_path, len(df))


def write_manifest(manifest: UpdateManifest, path: str | Path) -> None:
    """Overwrite the manifest JSON with the tickers updated by this run."""
    manifest_path = Path(path)
    manifest_path.parent.mkdir(parents=True, exist_ok=True)
    payload = manifest.model_dump(mode="json", by_alias=True)
    manifest_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.debug("Wrote manifest: %s (tickers=%d)", manifest_path, len(manifest.tickers))
