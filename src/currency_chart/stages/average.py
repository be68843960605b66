"""Average calculator for a filtered series."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence

    from currency_chart.core.contracts import Observation


def average(series: Sequence[Observation]) -> float | None:
    """Arithmetic mean of ``value`` across *series*; None when there is nothing to average."""
    if not series:
        return None
    total = float(np.sum([obs.value for obs in series], dtype=np.float64))
    return total / len(series)
