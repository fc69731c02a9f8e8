from datetime import date
from typing import Optional, Sequence

from globetrotter.models.trip import TripStatus
from globetrotter.services.date_ranges import parse_date

SORT_OPTIONS = ("date-desc", "date-asc", "name-asc", "name-desc")

STATUS_GROUPS = ("ongoing", "upcoming", "completed", "draft")


def _status_value(trip) -> Optional[str]:
    status = trip.status
    if status is None:
        return None
    return status.value if isinstance(status, TripStatus) else str(status)


def _start_key(trip) -> date:
    # Unparsable dates sort as the earliest possible day
    return parse_date(trip.start_date) or date.min


def list_trips(
    trips: Sequence,
    status: Optional[str] = None,
    query: Optional[str] = None,
    sort: str = "date-desc",
) -> list:
    """Filter by status, search name/destination, then sort."""
    result = list(trips)

    if status and status != "all":
        result = [t for t in result if _status_value(t) == status]

    if query and query.strip():
        needle = query.strip().lower()
        result = [
            t for t in result
            if needle in (t.name or "").lower() or needle in (t.destination or "").lower()
        ]

    if sort == "date-desc":
        result.sort(key=_start_key, reverse=True)
    elif sort == "date-asc":
        result.sort(key=_start_key)
    elif sort == "name-asc":
        result.sort(key=lambda t: (t.name or "").lower())
    elif sort == "name-desc":
        result.sort(key=lambda t: (t.name or "").lower(), reverse=True)

    return result


def group_by_status(trips: Sequence) -> dict[str, list]:
    groups = {name: [] for name in STATUS_GROUPS}
    for trip in trips:
        status = _status_value(trip)
        if status not in groups:
            status = "draft"
        groups[status].append(trip)
    return groups
