"""Series shaper: turns a filtered series into a chart configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from currency_chart.core.contracts import QUOTE_CURRENCY_SIGN, ChartConfiguration

if TYPE_CHECKING:
    from collections.abc import Sequence

    from currency_chart.core.contracts import Observation


def chart_title(series: Sequence[Observation], symbol: str) -> str:
    """Build ``"<INDICATOR>, <symbol>/₽"`` from the first observation, or "" if empty."""
    if not series:
        return ""
    return f"{series[0].indicator.upper()}, {symbol}/{QUOTE_CURRENCY_SIGN}"


def shape(series: Sequence[Observation], symbol: str) -> ChartConfiguration:
    """Lay *series* out as parallel month categories and values."""
    return ChartConfiguration(
        title=chart_title(series, symbol),
        series_name=series[0].indicator if series else None,
        categories=tuple(obs.month for obs in series),
        values=tuple(obs.value for obs in series),
    )
