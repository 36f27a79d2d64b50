"""Domain models for fund holdings updates."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SourceKind(str, Enum):
    SSGA = "ssga"
    SPDR = "spdr"
    INVESCO = "invesco"
    CSV = "csv"
    ARK = "ark"


class SourceDescriptor(BaseModel):
    """Where and how to download one ticker's holdings disclosure."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    source: str = Field(default="", description="Source kind, e.g. ssga, invesco, csv.")
    url: str | None = Field(default=None, description="Explicit download URL overriding the vendor template.")

    @field_validator("source", mode="before")
    @classmethod
    def _normalise_source(cls, value: object) -> str:
        if value is None:
            return ""
        return str(value).strip().lower()

    @field_validator("url", mode="before")
    @classmethod
    def _blank_url_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class HoldingRecord(BaseModel):
    """Single ticker/weight line of a fund's holdings."""

    symbol: str = Field(..., min_length=1, description="Ticker as published, trimmed.")
    weight: float | None = Field(default=None, description="Portfolio weight (0-1); None when unknown.")


class UpdateManifest(BaseModel):
    """Summary of a run: which tickers got a fresh snapshot."""

    updated_at: datetime = Field(..., serialization_alias="updatedAt")
    tickers: list[str] = Field(default_factory=list)
