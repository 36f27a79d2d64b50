"""Runtime settings and ticker configuration for the holdings update."""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from toolkits.fund_holdings import SourceDescriptor, StartupError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class UpdateSettings(BaseSettings):
    """Defaults sourced from ``HOLDINGS_*`` environment variables (or ``.env``)."""

    config_path: str = Field(default="config.json")
    output_dir: str = Field(default="docs/data")
    manifest_name: str = Field(default="index.json")
    timeout_seconds: int = Field(default=30, ge=1)
    user_agent: str = Field(default="Mozilla/5.0")
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unsupported log level: {value}")
        return level

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="HOLDINGS_", extra="ignore"
    )


@lru_cache
def get_settings() -> UpdateSettings:
    """Cached accessor so we only load settings once per process."""
    return UpdateSettings()


def _read_config_file(cfg_path: Path) -> Any:
    if not cfg_path.exists():
        raise StartupError(f"找不到配置文件：{cfg_path}")
    try:
        if cfg_path.suffix.lower() == ".toml":
            with cfg_path.open("rb") as handle:
                return tomllib.load(handle)
        with cfg_path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise StartupError(f"配置文件解析失败：{cfg_path}: {exc}") from exc
    except OSError as exc:
        raise StartupError(f"无法读取配置文件：{cfg_path}") from exc


def parse_ticker_config(data: Any) -> dict[str, SourceDescriptor]:
    """Validate a ticker -> descriptor mapping, optionally nested under ``tickers``."""
    if not isinstance(data, Mapping):
        raise StartupError("配置文件必须是对象/表结构")
    entries = data.get("tickers", data)
    if not isinstance(entries, Mapping):
        raise StartupError("'tickers' must be a mapping of ticker -> source descriptor")

    tickers: dict[str, SourceDescriptor] = {}
    for raw_ticker, raw_descriptor in entries.items():
        ticker = str(raw_ticker).strip()
        if not ticker:
            raise StartupError("empty ticker key in configuration")
        if not isinstance(raw_descriptor, Mapping):
            raise StartupError(f"source descriptor for {ticker} must be a mapping")
        try:
            tickers[ticker] = SourceDescriptor.model_validate(dict(raw_descriptor))
        except ValidationError as exc:
            raise StartupError(f"invalid source descriptor for {ticker}: {exc}") from exc
    return tickers


def load_ticker_config(path: str | Path) -> dict[str, SourceDescriptor]:
    """Read the ticker configuration from JSON or TOML."""
    cfg_path = Path(path)
    tickers = parse_ticker_config(_read_config_file(cfg_path))
    logger.info("Loaded %d tickers from %s", len(tickers), cfg_path)
    return tickers


def select_tickers(
    tickers: Mapping[str, SourceDescriptor], selection: str | None
) -> dict[str, SourceDescriptor]:
    """Restrict the configuration to a comma separated subset, keeping config order."""
    if not selection:
        return dict(tickers)
    wanted = {token.strip().upper() for token in selection.split(",") if token.strip()}
    known = {ticker.upper() for ticker in tickers}
    invalid = sorted(wanted - known)
    if invalid:
        raise StartupError(f"tickers not in configuration: {', '.join(invalid)}")
    return {ticker: descriptor for ticker, descriptor in tickers.items() if ticker.upper() in wanted}
