"""WorldClock — calendar time derived from an accumulating tick count.

One tick is one simulated minute by default.  The clock converts the
running total into day / hour / minute / season and tells its listeners
when midnight has passed so they can roll their daily counters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, Protocol

logger = logging.getLogger(__name__)

_MINUTES_PER_HOUR = 60
_SEASON_COUNT = 4


class DayListener(Protocol):
    """Anything that wants to hear about day rollovers."""

    def end_of_day(self) -> None: ...


@dataclass
class WorldClock:
    """Tick accumulator plus the calendar fields derived from it.

    Attributes:
        day_length: Ticks per simulated day.
        season_length_days: Days per season.
        listeners: Notified once each time the day index increases.
        ticks: Total accumulated ticks (real-valued).
        day: Current day, starting at 1.
        hour: Hour of the current day.
        minute: Minute of the current hour.
        day_progress: Fraction of the current day elapsed (0.0-1.0).
        season_index: 0 Spring, 1 Summer, 2 Autumn, 3 Winter.
        season_progress: Fraction of the current season elapsed.
    """

    SEASON_NAMES: ClassVar[tuple[str, ...]] = ("Spring", "Summer", "Autumn", "Winter")

    day_length: int = 1440
    season_length_days: int = 3
    listeners: list[DayListener] = field(default_factory=list, repr=False)
    ticks: float = 0.0
    day: int = 1
    hour: int = 0
    minute: int = 0
    day_progress: float = 0.0
    season_index: int = 0
    season_progress: float = 0.0
    _last_day_checked: int = field(default=0, repr=False)

    @property
    def season_name(self) -> str:
        return self.SEASON_NAMES[self.season_index]

    def reset(self) -> None:
        """Return to day 1, 00:00 with no rollover pending."""
        self.ticks = 0.0
        self.day = 1
        self.hour = 0
        self.minute = 0
        self.day_progress = 0.0
        self.season_index = 0
        self.season_progress = 0.0
        self._last_day_checked = 0

    def tick(self, amount: float = 1.0) -> None:
        """Add ``amount`` ticks to the accumulator."""
        self.ticks += amount

    def recalculate(self) -> None:
        """Refresh the calendar fields and fire end-of-day if needed.

        The first call after a reset only records the starting day, so
        listeners never see a rollover at startup.
        """
        self.day = int(self.ticks // self.day_length) + 1

        minutes = int(self.ticks % self.day_length)
        self.hour = minutes // _MINUTES_PER_HOUR
        self.minute = minutes % _MINUTES_PER_HOUR
        self.day_progress = minutes / self.day_length

        days_passed = self.day - 1
        days_into_season = days_passed % self.season_length_days
        self.season_index = (days_passed // self.season_length_days) % _SEASON_COUNT
        self.season_progress = (
            days_into_season + self.day_progress
        ) / self.season_length_days

        if self.day > self._last_day_checked:
            if self._last_day_checked > 0:
                logger.debug(
                    "Day %d ended (%s)",
                    self._last_day_checked,
                    self.season_name,
                )
                for listener in self.listeners:
                    listener.end_of_day()
            self._last_day_checked = self.day
