"""Shared fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from bingx_swap.client import BingXClient
from bingx_swap.settings import Settings

FIXED_TS = 1700000000000


@pytest.fixture()
def fixed_ts() -> int:
    return FIXED_TS


@pytest.fixture()
def api_key() -> str:
    return "test-api-key"


@pytest.fixture()
def api_secret() -> str:
    return "s3cr3t"


@pytest.fixture()
def test_settings(api_key: str, api_secret: str) -> Settings:
    return Settings(
        api_key=api_key,
        api_secret=api_secret,
        base_url="https://bingx.test",
    )


@pytest.fixture()
def make_client(
    api_key: str, api_secret: str
) -> Callable[[Callable[[httpx.Request], httpx.Response]], BingXClient]:
    """Build a client whose transport is the given handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> BingXClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return BingXClient(
            api_key,
            api_secret,
            base_url="https://bingx.test",
            http_client=http_client,
            clock=lambda: FIXED_TS,
        )

    return _make


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"
