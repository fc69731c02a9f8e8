"""Tests for budget aggregation."""
import pytest
from datetime import date

from globetrotter.models import Activity, Stop, Trip
from globetrotter.services.budget import (
    activity_cost,
    day_budget,
    estimated_trip_total,
    stop_budget,
    stop_total,
    trip_total,
)


def _stop(stop_id, budget=None):
    return Stop(id=stop_id, city_name=f"City {stop_id}", country="Somewhere", budget=budget)


def _activity(stop_id, cost):
    return Activity(stop_id=stop_id, name="Thing to do", cost=cost)


class TestStopTotal:
    def test_budget_plus_own_activities(self):
        stop = _stop(1, budget=500)
        activities = [_activity(1, 40), _activity(1, 60), _activity(2, 1000)]
        assert stop_total(stop, activities) == 600

    def test_missing_budget_counts_as_zero(self):
        stop = _stop(1, budget=None)
        assert stop_total(stop, [_activity(1, 25)]) == 25

    def test_missing_and_negative_costs_count_as_zero(self):
        stop = _stop(1, budget=100)
        activities = [_activity(1, None), _activity(1, -50), _activity(1, 10)]
        assert stop_total(stop, activities) == 110

    def test_activity_cost_only(self):
        assert activity_cost(_stop(3), [_activity(3, 12.5), _activity(3, 7.5)]) == 20

    def test_stop_budget_never_negative(self):
        assert stop_budget(_stop(1, budget=-20)) == 0


class TestTripTotal:
    def test_empty_is_zero(self):
        assert trip_total([]) == 0

    def test_sums_stop_budgets(self):
        stops = [_stop(1, 800), _stop(2, 600)]
        assert trip_total(stops) == 1400

    def test_ignores_activity_costs(self):
        stops = [_stop(1, 800), _stop(2, 600)]
        activities = [_activity(1, 300)]
        assert trip_total(stops) == 1400
        assert estimated_trip_total(stops, activities) == 1700

    def test_adding_a_stop_never_decreases_total(self):
        stops = []
        previous = trip_total(stops)
        for stop_id, budget in enumerate([0, 250, None, 99.5, 0, 1200], start=1):
            stops.append(_stop(stop_id, budget))
            current = trip_total(stops)
            assert current >= previous
            previous = current

    def test_unreadable_budget_is_zero(self):
        stop = _stop(1)
        stop.budget = "lots"
        assert trip_total([stop, _stop(2, 10)]) == 10


class TestDayBudget:
    def test_sums_trips_covering_day(self):
        trips = [
            Trip(name="A", start_date=date(2026, 3, 1), end_date=date(2026, 3, 5), total_budget=1000),
            Trip(name="B", start_date=date(2026, 3, 3), end_date=date(2026, 3, 9), total_budget=500),
            Trip(name="C", start_date=date(2026, 4, 1), end_date=date(2026, 4, 2), total_budget=9999),
        ]
        assert day_budget(trips, date(2026, 3, 3)) == 1500
        assert day_budget(trips, date(2026, 3, 8)) == 500
        assert day_budget(trips, date(2026, 3, 20)) == 0

    def test_trip_without_budget(self):
        trips = [Trip(name="A", start_date=date(2026, 3, 1), end_date=date(2026, 3, 5))]
        assert day_budget(trips, date(2026, 3, 2)) == pytest.approx(0.0)
