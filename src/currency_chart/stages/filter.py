"""Observation filter: keeps the readings that belong to one currency."""

from __future__ import annotations

from typing import TYPE_CHECKING

from currency_chart.core.contracts import INDICATOR_LABELS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from currency_chart.core.contracts import Observation


def indicator_for(symbol: str) -> str | None:
    """Return the source indicator label for *symbol*, or None when it is unknown."""
    return INDICATOR_LABELS.get(symbol)


def filter_by_currency(
    observations: Iterable[Observation] | None,
    symbol: str,
) -> tuple[Observation, ...]:
    """Return the observations whose indicator matches *symbol*, in source order.

    Unknown symbols and missing input both give an empty tuple.
    """
    label = indicator_for(symbol)
    if label is None or observations is None:
        return ()
    return tuple(obs for obs in observations if obs.indicator == label)
