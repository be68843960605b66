"""Abstract base class for observation sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from currency_chart.core.contracts import Observation

ConfigT = TypeVar("ConfigT")


class BaseCollector(ABC, Generic[ConfigT]):
    """Fetches the raw observation sequence from an external source."""

    def __init__(self, config: ConfigT) -> None:
        self.config = config

    @abstractmethod
    async def collect(self) -> list[Observation]:
        """Return every observation in source order or raise ``FetchError``."""
