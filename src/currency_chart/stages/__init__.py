"""Transformation stages: collect, filter, average and shape.

The filter, average and shaper stages are pure and synchronous; only the
collector performs I/O.
"""

from currency_chart.stages.average import average
from currency_chart.stages.collector import HttpCollector, HttpCollectorConfig
from currency_chart.stages.filter import filter_by_currency
from currency_chart.stages.shaper import shape

__all__ = [
    "HttpCollector",
    "HttpCollectorConfig",
    "average",
    "filter_by_currency",
    "shape",
]
