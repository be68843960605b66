"""Selection controller -- owns the fetched data and re-derives chart and average."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import structlog

from currency_chart.core.contracts import ControllerStatus, SelectionState
from currency_chart.core.exceptions import FetchError
from currency_chart.stages.average import average
from currency_chart.stages.filter import filter_by_currency
from currency_chart.stages.shaper import shape

if TYPE_CHECKING:
    from collections.abc import Iterable

    from currency_chart.core.contracts import ChartConfiguration, Observation
    from currency_chart.core.interfaces import BaseCollector

logger = structlog.get_logger()


def apply_selection(state: SelectionState, symbol: str) -> SelectionState:
    """Return a new state with *symbol* selected and the derived views rebuilt.

    Before the data is ready only the selection is recorded.
    """
    if not state.is_ready:
        return state.model_copy(update={"selection": symbol})

    series = filter_by_currency(state.observations, symbol)
    return state.model_copy(
        update={
            "selection": symbol,
            "chart": shape(series, symbol),
            "average": average(series),
        }
    )


def apply_observations(state: SelectionState, observations: Iterable[Observation]) -> SelectionState:
    """Store the fetched sequence, move to READY and apply the current selection."""
    ready = state.model_copy(
        update={"status": ControllerStatus.READY, "observations": tuple(observations)}
    )
    return apply_selection(ready, ready.selection)


class SelectionController:
    """Drives the UNINITIALIZED -> LOADING -> READY lifecycle for one data fetch."""

    def __init__(self, collector: BaseCollector[Any]) -> None:
        self.collector = collector
        self.state = SelectionState()
        self._log = logger.bind(component="selection-controller")

    @property
    def status(self) -> ControllerStatus:
        return self.state.status

    @property
    def chart(self) -> ChartConfiguration | None:
        return self.state.chart

    @property
    def average(self) -> float | None:
        return self.state.average

    async def start(self) -> SelectionState:
        """Fetch observations once; failures are logged and leave the state LOADING."""
        if self.state.status != ControllerStatus.UNINITIALIZED:
            self._log.warning("controller.already_started", status=str(self.state.status))
            return self.state

        self.state = self.state.model_copy(update={"status": ControllerStatus.LOADING})
        started = datetime.now(UTC)

        try:
            observations = await self.collector.collect()
        except FetchError as exc:
            self._log.error("fetch.failed", error=str(exc))
            return self.state

        self.state = apply_observations(self.state, observations)
        elapsed = (datetime.now(UTC) - started).total_seconds()
        self._log.info(
            "controller.ready",
            records=len(self.state.observations),
            selection=self.state.selection,
            duration=elapsed,
        )
        return self.state

    def select_currency(self, symbol: str) -> SelectionState:
        """Switch the displayed currency; unknown symbols yield an empty chart."""
        self.state = apply_selection(self.state, symbol)
        if self.state.is_ready:
            self._log.info("selection.changed", selection=symbol, average=self.state.average)
        else:
            self._log.info("selection.deferred", selection=symbol, status=str(self.state.status))
        return self.state
