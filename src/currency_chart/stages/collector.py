"""HTTP collector -- fetches the exchange-rate observation array from a JSON endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from currency_chart.core.config import DEFAULT_DATA_URL
from currency_chart.core.contracts import Observation
from currency_chart.core.exceptions import FetchError, SchemaValidationError
from currency_chart.core.interfaces import BaseCollector

if TYPE_CHECKING:
    from currency_chart.core.config import CurrencyChartSettings

logger = structlog.get_logger()

_OBSERVATIONS = TypeAdapter(list[Observation])


class HttpCollectorConfig(BaseModel):
    """Where to fetch observations from. ``timeout=None`` waits indefinitely."""

    url: str = DEFAULT_DATA_URL
    timeout: float | None = None

    @classmethod
    def from_settings(cls, settings: CurrencyChartSettings) -> HttpCollectorConfig:
        return cls(url=settings.data_url, timeout=settings.request_timeout)


class HttpCollector(BaseCollector[HttpCollectorConfig]):
    """Single GET against the configured URL, no query parameters, no auth."""

    def __init__(
        self,
        config: HttpCollectorConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config)
        self._transport = transport

    async def collect(self) -> list[Observation]:
        logger.info("fetch.started", url=self.config.url)

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout, transport=self._transport
            ) as client:
                resp = await client.get(self.config.url)
                resp.raise_for_status()
                payload = resp.json()
        except httpx.HTTPStatusError as exc:
            raise FetchError(f"HTTP {exc.response.status_code} from {self.config.url}") from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Request to {self.config.url} failed: {exc}") from exc
        except ValueError as exc:
            raise FetchError(f"Malformed JSON from {self.config.url}: {exc}") from exc
        except Exception as exc:
            raise FetchError(f"Fetch from {self.config.url} failed: {exc!r}") from exc

        if not isinstance(payload, list):
            raise SchemaValidationError(
                f"Expected a JSON array, got {type(payload).__name__}"
            )

        try:
            observations = _OBSERVATIONS.validate_python(payload)
        except ValidationError as exc:
            raise SchemaValidationError(
                f"{exc.error_count()} invalid observation field(s): {exc.errors()[0]['msg']}"
            ) from exc

        logger.info("fetch.completed", records=len(observations))
        return observations
