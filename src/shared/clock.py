"""Time source used for expiry checks.

The current date is always read through a ``Clock`` so tests can pin it with
``FixedClock`` instead of depending on wall time.
"""

from abc import ABC, abstractmethod
from datetime import date, timedelta


class Clock(ABC):
    """Abstract interface for reading the current date."""

    @abstractmethod
    def today(self) -> date: ...


class SystemClock(Clock):
    """Reads the host's system clock."""

    def today(self) -> date:
        return date.today()


class FixedClock(Clock):
    """Clock pinned to a given date."""

    def __init__(self, today: date):
        self._today = today

    def today(self) -> date:
        return self._today

    def advance(self, days: int = 1) -> None:
        """Move the pinned date forward (or backward with a negative value)."""
        self._today = self._today + timedelta(days=days)
