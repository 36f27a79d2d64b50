from __future__ import annotations

import io

import pandas as pd
import pytest

from py_scripts.fund_holdings.settings import get_settings


class DummyResponse:
    def __init__(self, *, text: str = "", content: bytes = b"", status_code: int = 200):
        self.text = text
        self.content = content
        self.status_code = status_code


@pytest.fixture()
def fake_publisher(monkeypatch):
    """Serve canned responses keyed by URL; unknown URLs return 404."""
    responses: dict[str, DummyResponse] = {}
    requested: list[str] = []

    def fake_get(url, timeout, headers):  # noqa: ANN001
        requested.append(url)
        return responses.get(url, DummyResponse(status_code=404))

    monkeypatch.setattr("toolkits.fund_holdings.provider.requests.get", fake_get)
    def serve(url: str, **kwargs) -> None:
        responses[url] = DummyResponse(**kwargs)

    fake_get.serve = serve
    fake_get.requested = requested
    return fake_get


@pytest.fixture()
def workbook_bytes():
    def _build(rows) -> bytes:
        buffer = io.BytesIO()
        pd.DataFrame(rows).to_excel(buffer, header=False, index=False, engine="openpyxl")
        return buffer.getvalue()

    return _build


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("CONFIG_PATH", "OUTPUT_DIR", "MANIFEST_NAME", "TIMEOUT_SECONDS", "USER_AGENT", "LOG_LEVEL"):
        monkeypatch.delenv(f"HOLDINGS_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
