"""Fund holdings disclosures: download, extract ticker weights, persist."""

from .cells import Cell, EmptyCell, NumberCell, RawTable, TextCell, to_cell
from .domain import HoldingRecord, SourceDescriptor, SourceKind, UpdateManifest
from .errors import ConfigError, FetchError, HoldingsError, MissingColumns, ParseError, StartupError
from .extract import extract_holdings
from .headers import resolve_columns
from .io import snapshot_path, write_holdings_csv, write_manifest
from .sources import (
    SOURCES,
    DelimitedTextSource,
    HoldingsSource,
    InvescoSource,
    SsgaSource,
    build_source,
    invesco_url,
    ssga_url,
)
from .weights import normalize_weight

__all__ = [
    "Cell",
    "EmptyCell",
    "NumberCell",
    "TextCell",
    "RawTable",
    "to_cell",
    "HoldingRecord",
    "SourceDescriptor",
    "SourceKind",
    "UpdateManifest",
    "HoldingsError",
    "ConfigError",
    "FetchError",
    "MissingColumns",
    "ParseError",
    "StartupError",
    "extract_holdings",
    "resolve_columns",
    "normalize_weight",
    "SOURCES",
    "HoldingsSource",
    "SsgaSource",
    "InvescoSource",
    "DelimitedTextSource",
    "build_source",
    "ssga_url",
    "invesco_url",
    "snapshot_path",
    "write_holdings_csv",
    "write_manifest",
]
