"""Pydantic v2 contracts for observations, chart configuration and controller state."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr


class CurrencySymbol(StrEnum):
    USD = "$"
    EUR = "€"
    CNY = "¥"


class ControllerStatus(StrEnum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


# Each selectable symbol maps to exactly one source indicator label.
INDICATOR_LABELS: dict[str, str] = {
    CurrencySymbol.USD: "Курс доллара",
    CurrencySymbol.EUR: "Курс евро",
    CurrencySymbol.CNY: "Курс юаня",
}

DEFAULT_SYMBOL = CurrencySymbol.USD

QUOTE_CURRENCY_SIGN = "₽"


class Observation(BaseModel):
    """Single exchange-rate reading for one month."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    indicator: StrictStr
    month: StrictStr
    value: StrictFloat


class ChartStyle(BaseModel):
    """Fixed styling handed to the renderer alongside every series."""

    model_config = ConfigDict(frozen=True)

    palette: tuple[str, ...] = ("#c23531",)
    title_text_style: dict[str, Any] = Field(
        default_factory=lambda: {
            "fontSize": 20,
            "lineHeight": 30,
            "fontFamily": "Inter",
            "fontWeight": "700",
            "color": "#002033",
        }
    )
    grid: dict[str, Any] = Field(
        default_factory=lambda: {
            "left": "30px",
            "right": "30px",
            "bottom": "20px",
            "containLabel": True,
        }
    )
    x_axis: dict[str, Any] = Field(
        default_factory=lambda: {
            "type": "category",
            "axisLine": {"show": False},
            "axisTick": {"show": False},
            "boundaryGap": False,
        }
    )
    y_axis: dict[str, Any] = Field(
        default_factory=lambda: {
            "type": "value",
            "scale": True,
            "splitNumber": 3,
            "splitLine": {"lineStyle": {"type": "dashed"}},
            "axisLabel": {"showMinLabel": False},
        }
    )
    tooltip: dict[str, Any] = Field(
        default_factory=lambda: {
            "trigger": "axis",
            "textStyle": {"color": "#002033", "fontWeight": "700"},
            "className": "tooltip",
            "extraCssText": "border: none; width: 10vw;",
        }
    )
    series_type: str = "line"
    item_style: dict[str, Any] = Field(
        default_factory=lambda: {"color": "#F38B00", "type": "none", "opacity": "0"}
    )
    line_style: dict[str, Any] = Field(default_factory=lambda: {"width": "2"})


class ChartConfiguration(BaseModel):
    """Declarative chart description for one currency; rebuilt, never patched."""

    model_config = ConfigDict(frozen=True)

    title: str
    series_name: str | None = None
    categories: tuple[str, ...] = ()
    values: tuple[float, ...] = ()
    style: ChartStyle = Field(default_factory=ChartStyle)

    def to_echarts_option(self) -> dict[str, Any]:
        """Return the option object in the layout the ECharts renderer consumes."""
        style = self.style.model_dump()
        return {
            "color": list(style["palette"]),
            "title": {"text": self.title, "textStyle": style["title_text_style"]},
            "grid": style["grid"],
            "xAxis": {**style["x_axis"], "data": list(self.categories)},
            "yAxis": style["y_axis"],
            "tooltip": style["tooltip"],
            "series": [
                {
                    "name": self.series_name,
                    "data": list(self.values),
                    "type": style["series_type"],
                    "itemStyle": style["item_style"],
                    "lineStyle": style["line_style"],
                }
            ],
        }


class SelectionState(BaseModel):
    """Everything the controller owns; replaced wholesale on each transition."""

    model_config = ConfigDict(frozen=True)

    status: ControllerStatus = ControllerStatus.UNINITIALIZED
    observations: tuple[Observation, ...] = ()
    selection: str = DEFAULT_SYMBOL
    chart: ChartConfiguration | None = None
    average: float | None = None

    @property
    def is_ready(self) -> bool:
        return self.status == ControllerStatus.READY
