from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from toolkits.fund_holdings import (
    HoldingRecord,
    HoldingsError,
    SourceDescriptor,
    StartupError,
    UpdateManifest,
    build_source,
    extract_holdings,
    snapshot_path,
    write_holdings_csv,
    write_manifest,
)

logger = logging.getLogger("holdings_update")


@dataclass(frozen=True)
class PipelineConfig:
    output_dir: Path
    manifest_name: str = "index.json"
    timeout: int = 30
    user_agent: str = "Mozilla/5.0"

    @property
    def manifest_path(self) -> Path:
        return self.output_dir / self.manifest_name


@dataclass
class RunSummary:
    manifest_path: Path
    updated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)


def _prepare_output_dir(output_dir: Path) -> None:
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StartupError(f"无法创建输出目录：{output_dir}: {exc}") from exc


def fetch_ticker_holdings(ticker: str, descriptor: SourceDescriptor, *, config: PipelineConfig) -> list[HoldingRecord]:
    """Download and extract one ticker's holdings."""
    source = build_source(descriptor.source, timeout=config.timeout, user_agent=config.user_agent)
    table = source.fetch_table(ticker, descriptor)
    return extract_holdings(table)


def run_update(tickers: Mapping[str, SourceDescriptor], *, config: PipelineConfig) -> RunSummary:
    """Update every configured ticker in order, then rewrite the manifest.

    A failing ticker is logged and left out of the manifest; it never aborts the run.
    """
    _prepare_output_dir(config.output_dir)
    summary = RunSummary(manifest_path=config.manifest_path)

    for ticker, descriptor in tickers.items():
        try:
            records = fetch_ticker_holdings(ticker, descriptor, config=config)
        except HoldingsError as exc:
            logger.warning("ERR %s: %s", ticker, exc)
            summary.failed[ticker] = str(exc)
            continue

        if not records:
            logger.info("skip empty %s", ticker)
            summary.skipped.append(ticker)
            continue

        target = snapshot_path(config.output_dir, ticker)
        try:
            write_holdings_csv(records, target)
        except OSError as exc:
            logger.warning("ERR %s: cannot write %s: %s", ticker, target, exc)
            summary.failed[ticker] = f"cannot write {target}: {exc}"
            continue
        summary.updated.append(ticker)
        logger.info("OK %s %d", ticker, len(records))

    manifest = UpdateManifest(updated_at=datetime.now(timezone.utc), tickers=summary.updated)
    write_manifest(manifest, config.manifest_path)
    logger.info(
        "Updated %d/%d tickers (skipped=%d, failed=%d); manifest: %s",
        len(summary.updated),
        len(tickers),
        len(summary.skipped),
        len(summary.failed),
        config.manifest_path,
    )
    return summary
