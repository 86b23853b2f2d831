"""
Clock Services

The only time-varying input of the ledger is "today". It is injected so
tests can pin it.
"""

from abc import ABC, abstractmethod
from datetime import date


class Clock(ABC):
    """Source of the current calendar date."""

    @abstractmethod
    def today(self) -> date:
        pass


class SystemClock(Clock):
    """Reads the local system date."""

    def today(self) -> date:
        return date.today()


class FixedClock(Clock):
    """Always returns the same date until moved."""

    def __init__(self, current: date):
        self._current = current

    def today(self) -> date:
        return self._current

    def set(self, current: date) -> None:
        self._current = current
