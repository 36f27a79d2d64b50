"""Error types raised while updating fund holdings."""

from __future__ import annotations

from collections.abc import Sequence


class HoldingsError(RuntimeError):
    """Base class for failures scoped to a single ticker."""


class ConfigError(HoldingsError):
    """Source descriptor is unusable (unknown source kind, missing URL)."""


class FetchError(HoldingsError):
    """Disclosure download failed or returned a non-success status."""

    def __init__(self, status: int | None, url: str, detail: str | None = None) -> None:
        self.status = status
        self.url = url
        if status is None:
            message = f"request failed {url}"
            if detail:
                message = f"{message}: {detail}"
        else:
            message = f"HTTP {status} {url}"
        super().__init__(message)


class MissingColumns(HoldingsError):
    """Header row has no recognisable ticker or weight column."""

    def __init__(self, header: Sequence[str]) -> None:
        self.header = list(header)
        super().__init__(f"no Ticker/Weight headers: {self.header!r}")


class ParseError(HoldingsError):
    """Downloaded body could not be decoded into a table."""


class StartupError(RuntimeError):
    """Run cannot start: configuration unreadable or output directory unusable."""
