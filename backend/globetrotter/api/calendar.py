from fastapi import APIRouter, Depends, Query, HTTPException
from sqlalchemy.orm import Session
from datetime import date
from typing import Optional

from globetrotter.database import get_db
from globetrotter.models.trip import Trip
from globetrotter.services.calendar_view import CalendarProjector, add_months

router = APIRouter()


def _trip_summary(trip: Trip) -> dict:
    return {
        "id": trip.id,
        "name": trip.name,
        "destination": trip.destination,
        "start_date": trip.start_date,
        "end_date": trip.end_date,
        "status": trip.status.value if trip.status else None,
        "total_budget": trip.total_budget,
    }


def _day_payload(day) -> dict:
    return {
        "date": day.date,
        "is_current_month": day.is_current_month,
        "is_today": day.is_today,
        "trip_count": day.trip_count,
        "trips": [_trip_summary(t) for t in day.trips],
    }


@router.get("/api/calendar")
async def get_calendar(
    user_id: Optional[int] = Query(None),
    year: Optional[int] = Query(None, ge=1900, le=2999),
    month: Optional[int] = Query(None, ge=1, le=12),
    selected: Optional[str] = Query(None),
    view: str = Query("month"),
    db: Session = Depends(get_db),
):
    if view not in ("month", "week"):
        raise HTTPException(status_code=400, detail="view must be 'month' or 'week'")

    query = db.query(Trip)
    if user_id is not None:
        query = query.filter(Trip.user_id == user_id)

    today = date.today()
    displayed = date(year or today.year, month or today.month, 1)

    projector = CalendarProjector(query.all(), month=displayed, today=today)
    # An unparsable selection simply clears it
    projector.select_day(selected)

    days = projector.week_grid() if view == "week" else projector.grid()
    summary = projector.selected_summary()

    return {
        "title": projector.title,
        "view": view,
        "month": projector.month,
        "previous_month": add_months(projector.month, -1),
        "next_month": add_months(projector.month, 1),
        "days": [_day_payload(d) for d in days],
        "selected": None if summary is None else {
            "date": summary.date,
            "trip_count": summary.trip_count,
            "total_budget": summary.total_budget,
            "trips": [_trip_summary(t) for t in summary.trips],
        },
    }
