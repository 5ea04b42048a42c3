"""Tests for antrivals.colony — statistics, stock and reproduction."""

from numpy.random import Generator

from antrivals.colony.ant import AntState
from antrivals.colony.colony import Colony
from antrivals.colony.policies import ColonyPolicy
from antrivals.colony.stats import ColonyStatistics, DayCounts


class TestColonyStatistics:
    """Tests for the double-buffered daily counters."""

    def test_counts_accumulate(self) -> None:
        stats = ColonyStatistics()
        stats.register_food()
        stats.register_birth()
        stats.register_birth()
        stats.register_death()
        assert stats.current_day == DayCounts(food=1, births=2, deaths=1)
        assert stats.previous_day == DayCounts()

    def test_end_of_day_archives_and_clears(self) -> None:
        stats = ColonyStatistics()
        for _ in range(3):
            stats.register_food()
        stats.end_of_day()
        assert stats.previous_day == DayCounts(food=3)
        assert stats.current_day == DayCounts()

        stats.register_birth()
        stats.end_of_day()
        assert stats.previous_day == DayCounts(births=1)

    def test_reset_clears_archive(self) -> None:
        stats = ColonyStatistics()
        stats.register_death()
        stats.end_of_day()
        stats.register_food()
        stats.reset()
        assert stats.previous_day == DayCounts()
        assert stats.current_day == DayCounts()


class TestColony:
    """Tests for food stock and reproduction."""

    def test_spawn_ant_at_nest(self, colony_a: Colony, rng: Generator) -> None:
        ant = colony_a.spawn_ant(rng)
        assert ant.pos == colony_a.nest
        assert ant.colony_id == 0
        assert ant.state is AntState.SEARCHING
        assert colony_a.stats.births == 1

    def test_reproduce_pays_spawn_cost(self, colony_a: Colony, rng: Generator) -> None:
        colony_a.receive_food(10)
        assert colony_a.can_reproduce(population=0, cap=5)
        colony_a.reproduce(rng)
        assert colony_a.food_stock == 6
        assert colony_a.stats.births == 1

    def test_cannot_reproduce_when_poor(self, colony_a: Colony) -> None:
        colony_a.receive_food(3)
        assert not colony_a.can_reproduce(population=0, cap=5)

    def test_cannot_reproduce_at_cap(self, colony_a: Colony) -> None:
        colony_a.receive_food(100)
        assert colony_a.can_reproduce(population=4, cap=5)
        assert not colony_a.can_reproduce(population=5, cap=5)

    def test_reset_keeps_policy(self, colony_a: Colony) -> None:
        colony_a.policy.spawn_cost = 9
        colony_a.receive_food(12)
        colony_a.stats.register_food()
        colony_a.reset()
        assert colony_a.food_stock == 0
        assert colony_a.stats.food == 0
        assert colony_a.policy.spawn_cost == 9

    def test_default_policy(self) -> None:
        assert ColonyPolicy() == ColonyPolicy(
            metabolism_rate=0.167,
            spawn_cost=4,
            evaporation_rate=0.995,
        )
