"""Global settings via pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings

DEFAULT_DATA_URL = "https://6706923ca0e04071d2276bd7.mockapi.io/api/v1/currencyData"


class CurrencyChartSettings(BaseSettings):
    """Global configuration loaded from env vars / .env."""

    model_config = {"env_prefix": "CCHART_"}

    log_level: str = "INFO"
    log_json: bool = False
    data_url: str = DEFAULT_DATA_URL
    request_timeout: float | None = None
