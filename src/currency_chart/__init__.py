"""currency-chart: exchange-rate series filtering, chart shaping and period averages."""

__version__ = "0.1.0"
