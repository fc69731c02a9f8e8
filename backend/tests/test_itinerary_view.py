"""Tests for the read-only itinerary projection."""
from datetime import date

from globetrotter.models import Activity, Stop, Trip
from globetrotter.services.itinerary_view import build_itinerary_view


def _trip():
    return Trip(
        id=1,
        name="Iberia",
        destination="Portugal & Spain",
        start_date=date(2026, 3, 1),
        end_date=date(2026, 3, 5),
    )


def _stops():
    return [
        Stop(id=10, trip_id=1, city_name="Lisbon", country="Portugal",
             start_date=date(2026, 3, 1), end_date=date(2026, 3, 2), order=0, budget=800),
        Stop(id=11, trip_id=1, city_name="Seville", country="Spain",
             start_date=date(2026, 3, 3), end_date=date(2026, 3, 5), order=1, budget=600),
    ]


def test_header_fields():
    view = build_itinerary_view(_trip(), _stops())

    assert view.name == "Iberia"
    assert view.date_label == "Mar 1, 2026 - Mar 5, 2026"
    assert view.duration_days == 5
    assert view.stop_count == 2
    assert view.total_budget == 1400
    assert view.is_empty is False


def test_stops_keep_given_order_and_are_numbered_from_one():
    stops = list(reversed(_stops()))
    view = build_itinerary_view(_trip(), stops)

    assert [s.city_name for s in view.stops] == ["Seville", "Lisbon"]
    assert [s.position for s in view.stops] == [1, 2]


def test_stop_rows():
    view = build_itinerary_view(_trip(), _stops())
    lisbon, seville = view.stops

    assert lisbon.date_label == "Mar 1, 2026 - Mar 2, 2026"
    assert lisbon.days == 2
    assert seville.days == 3
    assert lisbon.budget == 800
    assert lisbon.within_trip is True


def test_activities_feed_estimates_not_total():
    activities = [
        Activity(stop_id=10, name="Tram 28", cost=3),
        Activity(stop_id=10, name="Fado night", cost=47),
        Activity(stop_id=11, name="Alcazar", cost=15),
    ]
    view = build_itinerary_view(_trip(), _stops(), activities)

    assert view.total_budget == 1400
    assert view.estimated_total == 1465
    assert view.stops[0].activity_count == 2
    assert view.stops[0].activity_cost == 50
    assert view.stops[0].estimated_total == 850
    assert view.stops[1].estimated_total == 615


def test_empty_itinerary():
    view = build_itinerary_view(_trip(), [])

    assert view.is_empty is True
    assert view.stop_count == 0
    assert view.total_budget == 0
    assert view.stops == []


def test_stop_outside_trip_is_flagged_not_rejected():
    stops = _stops()
    stops[1].end_date = date(2026, 3, 9)
    view = build_itinerary_view(_trip(), stops)

    assert view.stop_count == 2
    assert view.stops[1].within_trip is False


def test_stop_without_dates():
    stop = Stop(id=12, trip_id=1, city_name="Porto", country="Portugal", budget=None)
    view = build_itinerary_view(_trip(), [stop])
    row = view.stops[0]

    assert row.date_label == ""
    assert row.days == 0
    assert row.budget == 0
    assert row.within_trip is True


def test_to_dict():
    data = build_itinerary_view(_trip(), _stops()).to_dict()

    assert data["is_empty"] is False
    assert data["stops"][0]["city_name"] == "Lisbon"
    assert data["total_budget"] == 1400
