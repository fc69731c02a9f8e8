"""
Budget aggregation over stops, activities and trips.

Trip totals come from stop budgets only. Activity costs feed the per-stop
estimate (`stop_total`) and the separate `estimated_trip_total`.
"""

from datetime import date
from typing import Iterable, Sequence

from globetrotter.services.date_ranges import contains_day


def _amount(value) -> float:
    """Missing, unreadable and negative amounts count as zero."""
    if value is None:
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    return amount if amount > 0 else 0.0


def stop_budget(stop) -> float:
    return _amount(stop.budget)


def activity_cost(stop, activities: Iterable) -> float:
    return sum(_amount(a.cost) for a in activities if a.stop_id == stop.id)


def stop_total(stop, activities: Iterable) -> float:
    """Stop budget plus the cost of every activity attached to it."""
    return _amount(stop.budget) + activity_cost(stop, activities)


def trip_total(stops: Iterable) -> float:
    return sum(_amount(s.budget) for s in stops)


def estimated_trip_total(stops: Iterable, activities: Sequence) -> float:
    return sum(stop_total(s, activities) for s in stops)


def day_budget(trips: Iterable, day: date) -> float:
    """Summed trip budgets for every trip whose range includes `day`."""
    return sum(
        _amount(t.total_budget)
        for t in trips
        if contains_day(day, t.start_date, t.end_date)
    )
