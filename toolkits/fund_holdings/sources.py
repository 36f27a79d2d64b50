"""Publisher formats that turn a downloaded disclosure into a raw table."""

from __future__ import annotations

import io
import logging
from urllib.parse import quote

import pandas as pd
import requests

from .cells import RawTable, to_row
from .domain import SourceDescriptor, SourceKind
from .errors import ConfigError, ParseError
from .provider import DEFAULT_TIMEOUT_SECONDS, USER_AGENT, fetch_url

logger = logging.getLogger(__name__)

_XLS_SIGNATURE = b"\xd0\xcf\x11\xe0"


def ssga_url(ticker: str) -> str:
    return (
        "https://www.ssga.com/library-content/products/fund-data/etfs/us/"
        f"holdings-daily-us-en-{ticker.lower()}.xlsx"
    )


def invesco_url(ticker: str) -> str:
    return (
        "https://www.invesco.com/us/financial-products/etfs/holdings/main/holdings/0"
        f"?action=download&audienceType=Investor&ticker={quote(ticker, safe='')}"
    )


def read_workbook(content: bytes) -> RawTable:
    """Decode the first sheet of an xlsx/xls workbook, row by row, without a header."""
    engine = "xlrd" if content.startswith(_XLS_SIGNATURE) else "openpyxl"
    try:
        df = pd.read_excel(io.BytesIO(content), sheet_name=0, header=None, dtype=object, engine=engine)
    except Exception as exc:  # openpyxl/xlrd raise anything from BadZipFile to KeyError
        raise ParseError(f"无法解析表格文件 ({engine}): {exc}") from exc
    df = df.dropna(how="all")
    return [to_row(values) for values in df.itertuples(index=False, name=None)]


def split_delimited(text: str) -> RawTable:
    """Split comma separated text into rows; quoting is not supported."""
    lines = [line for line in text.replace("\r", "").split("\n") if line]
    return [to_row(line.split(",")) for line in lines]


class HoldingsSource:
    """Base class for holdings publishers."""

    source_name: str = ""

    def __init__(self, *, timeout: int = DEFAULT_TIMEOUT_SECONDS, user_agent: str = USER_AGENT) -> None:
        self._timeout = timeout
        self._user_agent = user_agent

    def resolve_url(self, ticker: str, descriptor: SourceDescriptor) -> str:
        raise NotImplementedError

    def parse(self, response: requests.Response) -> RawTable:
        raise NotImplementedError

    def fetch_table(self, ticker: str, descriptor: SourceDescriptor) -> RawTable:
        """Download the disclosure for ``ticker`` and decode it into a raw table."""
        url = self.resolve_url(ticker, descriptor)
        response = fetch_url(url, timeout=self._timeout, user_agent=self._user_agent)
        table = self.parse(response)
        logger.debug("%s returned %d rows for %s", self.source_name, len(table), ticker)
        return table


class SpreadsheetSource(HoldingsSource):
    """Workbook download; falls back to a vendor URL template."""

    def default_url(self, ticker: str) -> str:
        raise NotImplementedError

    def resolve_url(self, ticker: str, descriptor: SourceDescriptor) -> str:
        return descriptor.url or self.default_url(ticker)

    def parse(self, response: requests.Response) -> RawTable:
        return read_workbook(response.content)


class SsgaSource(SpreadsheetSource):
    source_name = "SSGA"

    def default_url(self, ticker: str) -> str:
        return ssga_url(ticker)


class InvescoSource(SpreadsheetSource):
    source_name = "Invesco"

    def default_url(self, ticker: str) -> str:
        return invesco_url(ticker)


class DelimitedTextSource(HoldingsSource):
    """Plain CSV export at an explicitly configured URL."""

    source_name = "CSV"

    def resolve_url(self, ticker: str, descriptor: SourceDescriptor) -> str:
        if not descriptor.url:
            raise ConfigError(f"CSV url missing for {ticker}")
        return descriptor.url

    def parse(self, response: requests.Response) -> RawTable:
        return split_delimited(response.text)


SOURCES: dict[SourceKind, type[HoldingsSource]] = {
    SourceKind.SSGA: SsgaSource,
    SourceKind.SPDR: SsgaSource,
    SourceKind.INVESCO: InvescoSource,
    SourceKind.CSV: DelimitedTextSource,
    SourceKind.ARK: DelimitedTextSource,
}


def build_source(
    kind: str, *, timeout: int = DEFAULT_TIMEOUT_SECONDS, user_agent: str = USER_AGENT
) -> HoldingsSource:
    """Instantiate the publisher registered for ``kind``."""
    try:
        source_cls = SOURCES[SourceKind(kind)]
    except ValueError as exc:
        raise ConfigError(f"unknown source {kind!r}") from exc
    return source_cls(timeout=timeout, user_agent=user_agent)
