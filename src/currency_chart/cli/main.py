"""CLI entry point for currency-chart."""

from __future__ import annotations

import asyncio
import json
import os
import sys

import typer
from rich.console import Console

from currency_chart.cli.panels import render_chart, render_currencies
from currency_chart.core.config import CurrencyChartSettings
from currency_chart.core.contracts import DEFAULT_SYMBOL
from currency_chart.core.controller import SelectionController
from currency_chart.core.logging import setup_logging
from currency_chart.stages.collector import HttpCollector, HttpCollectorConfig

if sys.platform == "win32":
    os.environ.setdefault("PYTHONUTF8", "1")

app = typer.Typer(name="cchart", help="currency-chart - exchange-rate series and averages")
console = Console()


def _load_controller(*, verbose: bool, json_output: bool) -> SelectionController:
    """Build the controller from settings and run its single fetch."""
    settings = CurrencyChartSettings()
    level = "DEBUG" if verbose else settings.log_level
    setup_logging(json_output=json_output or settings.log_json, level=level)

    collector = HttpCollector(HttpCollectorConfig.from_settings(settings))
    controller = SelectionController(collector)
    asyncio.run(controller.start())
    return controller


@app.command()
def show(
    currency: str = typer.Option(DEFAULT_SYMBOL.value, "--currency", "-c", help="$, € or ¥"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    json_output: bool = typer.Option(False, "--json", help="JSON log output"),
) -> None:
    """Fetch the rates and print the series and period average for one currency."""
    controller = _load_controller(verbose=verbose, json_output=json_output)
    if not controller.state.is_ready:
        raise typer.Exit(code=1)

    state = controller.select_currency(currency)
    if state.chart is None:
        raise typer.Exit(code=1)
    render_chart(console, state.chart, state.average, currency)


@app.command()
def options(
    currency: str = typer.Option(DEFAULT_SYMBOL.value, "--currency", "-c", help="$, € or ¥"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Print the ECharts option object for one currency as JSON."""
    controller = _load_controller(verbose=verbose, json_output=False)
    if not controller.state.is_ready:
        raise typer.Exit(code=1)

    state = controller.select_currency(currency)
    if state.chart is None:
        raise typer.Exit(code=1)
    typer.echo(json.dumps(state.chart.to_echarts_option(), ensure_ascii=False, indent=2))


@app.command()
def currencies() -> None:
    """List the selectable currency symbols and their source indicators."""
    render_currencies(console, current=DEFAULT_SYMBOL)


if __name__ == "__main__":
    app()
