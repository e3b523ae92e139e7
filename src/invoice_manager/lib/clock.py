"""
Clock capability injected wherever "today" matters.

Default invoice creation, due-date math and the invoice number suggestion
all read the current date through a Clock so tests can pin it.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime


class Clock(ABC):
    """Source of the current date and time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local datetime."""

    def today(self) -> date:
        """Return the current local date."""
        return self.now().date()


class SystemClock(Clock):
    """Wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """A clock that always reports the same instant."""

    def __init__(self, instant: datetime | date) -> None:
        self.set(instant)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime | date) -> None:
        """Move the clock to a new instant; a bare date means midnight."""
        if not isinstance(instant, datetime):
            instant = datetime(instant.year, instant.month, instant.day)
        self._instant = instant
