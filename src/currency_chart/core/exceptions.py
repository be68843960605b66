"""Hierarchy of domain exceptions for currency-chart."""

from __future__ import annotations


class CurrencyChartError(Exception):
    """Base exception for all currency-chart errors."""


class FetchError(CurrencyChartError):
    """Observation fetch failure (transport error, non-2xx status, malformed JSON)."""


class SchemaValidationError(FetchError):
    """Fetched payload does not match the Observation contract."""
