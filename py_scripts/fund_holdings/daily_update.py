"""Daily update: fetch holdings for every configured ticker and write snapshots."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from toolkits.fund_holdings import StartupError

from .cli import parse_args
from .pipeline import PipelineConfig, run_update
from .settings import get_settings, load_ticker_config, select_tickers

logger = logging.getLogger("holdings_update")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as exc:
        logging.basicConfig(level=logging.ERROR)
        logger.error("Invalid HOLDINGS_* settings: %s", exc)
        return 1
    logging.basicConfig(
        level=getattr(logging, args.log_level or settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = PipelineConfig(
        output_dir=Path(args.output_dir or settings.output_dir),
        manifest_name=args.manifest_name or settings.manifest_name,
        timeout=args.timeout if args.timeout is not None else settings.timeout_seconds,
        user_agent=settings.user_agent,
    )
    try:
        tickers = select_tickers(load_ticker_config(args.config or settings.config_path), args.tickers)
        run_update(tickers, config=config)
    except StartupError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
