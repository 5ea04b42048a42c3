"""ColonyStatistics — double-buffered daily counters for one colony.

Counts accumulate during the simulated day.  At midnight the clock
calls ``end_of_day``, which archives the totals as the previous day's
record (what a display shows) and starts the new day from zero.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DayCounts:
    """Totals for one day.

    Attributes:
        food: Food items picked up.
        births: Ants created.
        deaths: Ants that died.
    """

    food: int = 0
    births: int = 0
    deaths: int = 0


@dataclass
class ColonyStatistics:
    """Current-day accumulators plus the archived previous day.

    Attributes:
        food: Food picked up so far today.
        births: Births so far today.
        deaths: Deaths so far today.
        previous_day: Snapshot taken at the last midnight.
    """

    food: int = 0
    births: int = 0
    deaths: int = 0
    previous_day: DayCounts = field(default_factory=DayCounts)

    @property
    def current_day(self) -> DayCounts:
        return DayCounts(food=self.food, births=self.births, deaths=self.deaths)

    def register_food(self) -> None:
        self.food += 1

    def register_birth(self) -> None:
        self.births += 1

    def register_death(self) -> None:
        self.deaths += 1

    def end_of_day(self) -> None:
        """Archive today's counts and zero the accumulators."""
        self.previous_day = self.current_day
        self.food = 0
        self.births = 0
        self.deaths = 0

    def reset(self) -> None:
        """Clear both today's counts and the archived record."""
        self.food = 0
        self.births = 0
        self.deaths = 0
        self.previous_day = DayCounts()
