"""Shared fixtures for the currency-chart test suite."""

from __future__ import annotations

import socket

import httpx
import pytest
import structlog

from currency_chart.core.contracts import Observation
from currency_chart.core.exceptions import FetchError
from currency_chart.core.interfaces import BaseCollector

USD = "Курс доллара"
EUR = "Курс евро"
CNY = "Курс юаня"

TEST_URL = "https://rates.test/api/v1/currencyData"


@pytest.fixture(autouse=True)
def _block_network_for_offline(request, monkeypatch):
    """Block outbound connections in tests marked as offline.

    ``socket.create_connection`` is patched rather than ``socket.socket`` so the
    asyncio event loop can still build its self-pipe.
    """
    if "offline" in [m.name for m in request.node.iter_markers()]:

        def _blocked(*_args, **_kwargs):
            raise RuntimeError("Offline test attempted to open a network connection")

        monkeypatch.setattr(socket, "create_connection", _blocked)


@pytest.fixture(autouse=True)
def log_events():
    """Capture structlog events instead of printing them."""
    with structlog.testing.capture_logs() as events:
        yield events


def pytest_configure(config):
    config.addinivalue_line("markers", "offline: mark test as offline (no network)")


class StaticCollector(BaseCollector[list[Observation]]):
    """Returns a fixed observation list and counts how often it was asked."""

    def __init__(self, config: list[Observation]) -> None:
        super().__init__(config)
        self.calls = 0

    async def collect(self) -> list[Observation]:
        self.calls += 1
        return list(self.config)


class FailingCollector(BaseCollector[str]):
    """Always raises ``FetchError`` with the configured message."""

    def __init__(self, config: str = "HTTP 503 from test") -> None:
        super().__init__(config)
        self.calls = 0

    async def collect(self) -> list[Observation]:
        self.calls += 1
        raise FetchError(self.config)


@pytest.fixture()
def sample_payload() -> list[dict]:
    """The three-element example: two dollar months and one euro month."""
    return [
        {"indicator": USD, "month": "Jan", "value": 90},
        {"indicator": USD, "month": "Feb", "value": 92},
        {"indicator": EUR, "month": "Jan", "value": 100},
    ]


@pytest.fixture()
def sample_observations(sample_payload) -> list[Observation]:
    return [Observation(**row) for row in sample_payload]


@pytest.fixture()
def mixed_observations() -> list[Observation]:
    """Three currencies interleaved month by month, as the data source returns them."""
    rows = [
        (USD, "янв 2023", 69.5),
        (EUR, "янв 2023", 74.9),
        (CNY, "янв 2023", 10.2),
        (USD, "фев 2023", 72.8),
        (EUR, "фев 2023", 78.1),
        (CNY, "фев 2023", 10.5),
        (USD, "мар 2023", 76.1),
        (EUR, "мар 2023", 81.9),
        (CNY, "мар 2023", 11.0),
    ]
    return [Observation(indicator=i, month=m, value=v) for i, m, v in rows]


@pytest.fixture()
def static_collector(sample_observations) -> StaticCollector:
    return StaticCollector(sample_observations)


@pytest.fixture()
def failing_collector() -> FailingCollector:
    return FailingCollector()


def json_transport(payload, status_code: int = 200) -> httpx.MockTransport:
    """MockTransport answering every request with *payload* as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)
