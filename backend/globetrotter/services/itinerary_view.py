from dataclasses import dataclass, field, asdict
from datetime import date
from typing import Optional, Sequence

from globetrotter.services.budget import (
    activity_cost,
    estimated_trip_total,
    stop_budget,
    stop_total,
    trip_total,
)
from globetrotter.services.date_ranges import day_count, format_date, parse_date


@dataclass
class StopView:
    position: int  # 1-based, as shown to the user
    stop_id: Optional[int]
    city_name: str
    country: str
    start_date: Optional[date]
    end_date: Optional[date]
    date_label: str
    days: int
    budget: float
    activity_cost: float
    estimated_total: float
    activity_count: int
    within_trip: bool  # False when the stop's dates fall outside the trip's range
    notes: Optional[str] = None


@dataclass
class ItineraryView:
    trip_id: Optional[int]
    name: str
    destination: Optional[str]
    start_date: Optional[date]
    end_date: Optional[date]
    date_label: str
    duration_days: int
    stop_count: int
    total_budget: float
    estimated_total: float
    stops: list[StopView] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.stop_count == 0

    def to_dict(self) -> dict:
        data = asdict(self)
        data["is_empty"] = self.is_empty
        return data


def _date_label(start, end) -> str:
    start_label = format_date(start)
    end_label = format_date(end)
    if not start_label and not end_label:
        return ""
    return f"{start_label} - {end_label}"


def _within(stop, trip_start: Optional[date], trip_end: Optional[date]) -> bool:
    stop_start = parse_date(stop.start_date)
    stop_end = parse_date(stop.end_date)
    if stop_start is None or stop_end is None or trip_start is None or trip_end is None:
        # Nothing to compare against, so nothing to flag
        return True
    return trip_start <= stop_start and stop_end <= trip_end


def build_stop_view(stop, position: int, activities: Sequence, trip_start=None, trip_end=None) -> StopView:
    own_activities = [a for a in activities if a.stop_id == stop.id]
    return StopView(
        position=position,
        stop_id=stop.id,
        city_name=stop.city_name,
        country=stop.country or "",
        start_date=parse_date(stop.start_date),
        end_date=parse_date(stop.end_date),
        date_label=_date_label(stop.start_date, stop.end_date),
        days=day_count(stop.start_date, stop.end_date),
        budget=stop_budget(stop),
        activity_cost=activity_cost(stop, own_activities),
        estimated_total=stop_total(stop, own_activities),
        activity_count=len(own_activities),
        within_trip=_within(stop, trip_start, trip_end),
        notes=stop.notes,
    )


def build_itinerary_view(trip, stops: Sequence, activities: Optional[Sequence] = None) -> ItineraryView:
    """
    Read-only projection of a trip and its ordered stops.

    Stops are reported in the order given. Stop dates outside the trip's
    range are flagged per stop but never rejected.
    """
    activities = list(activities or [])
    trip_start = parse_date(trip.start_date)
    trip_end = parse_date(trip.end_date)

    stop_views = [
        build_stop_view(stop, index + 1, activities, trip_start, trip_end)
        for index, stop in enumerate(stops)
    ]

    return ItineraryView(
        trip_id=trip.id,
        name=trip.name,
        destination=trip.destination,
        start_date=trip_start,
        end_date=trip_end,
        date_label=_date_label(trip.start_date, trip.end_date),
        duration_days=day_count(trip.start_date, trip.end_date),
        stop_count=len(stop_views),
        total_budget=trip_total(stops),
        estimated_total=estimated_trip_total(stops, activities),
        stops=stop_views,
    )
