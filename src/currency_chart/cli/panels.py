"""Rich rendering of a chart configuration and the period average."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from currency_chart.core.contracts import INDICATOR_LABELS, QUOTE_CURRENCY_SIGN

if TYPE_CHECKING:
    from rich.console import Console

    from currency_chart.core.contracts import ChartConfiguration

AVERAGE_LABEL = "Среднее за период"
AVERAGE_DIGITS = 1


def format_average(value: float | None, digits: int = AVERAGE_DIGITS) -> str:
    """Display form of the average, e.g. ``"91.0 ₽"``; empty when not computed."""
    if value is None:
        return ""
    return f"{value:.{digits}f} {QUOTE_CURRENCY_SIGN}"


def build_series_table(chart: ChartConfiguration) -> Table:
    table = Table(title=chart.title or None, show_lines=False)
    table.add_column("Month", style="cyan")
    table.add_column("Value", justify="right")
    for month, value in zip(chart.categories, chart.values, strict=True):
        table.add_row(month, f"{value:g}")
    return table


def render_chart(
    console: Console,
    chart: ChartConfiguration,
    average: float | None,
    symbol: str,
) -> None:
    """Print the series table and an average panel for *symbol*."""
    if chart.categories:
        console.print(build_series_table(chart))
    else:
        console.print(f"[dim]No observations for {symbol}[/]")

    body = Text(format_average(average) or "-", style="bold")
    console.print(Panel(body, title=AVERAGE_LABEL))


def render_currencies(console: Console, current: str | None = None) -> None:
    table = Table(title="Currencies")
    table.add_column("Symbol")
    table.add_column("Indicator")
    for symbol, label in INDICATOR_LABELS.items():
        marker = " [green]*[/]" if symbol == current else ""
        table.add_row(f"{symbol}{marker}", label)
    console.print(table)
