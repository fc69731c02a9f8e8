from fastapi import APIRouter, Depends, Query, HTTPException
from sqlalchemy.orm import Session
from typing import Optional
import logging

from globetrotter.config import get_settings
from globetrotter.database import get_db
from globetrotter.models.trip import Trip
from globetrotter.models.user import User
from globetrotter.schemas.trip import TripCreate, TripUpdate, TripResponse
from globetrotter.schemas.stop import (
    StopIn,
    StopListSave,
    StopMove,
    StopResponse,
    ActivityCreate,
    ActivityResponse,
)
from globetrotter.services.cities import CityService
from globetrotter.services.itinerary_store import ItineraryStore, ItinerarySaveError, DuplicateStopError
from globetrotter.services.itinerary_view import build_itinerary_view
from globetrotter.services.stop_sequencer import StopSequencer
from globetrotter.services.trip_listing import SORT_OPTIONS, list_trips, group_by_status

logger = logging.getLogger(__name__)

router = APIRouter()

# Columns that can't be cleared by sending null
REQUIRED_TRIP_FIELDS = {"name", "start_date", "end_date", "status", "is_public"}


def _get_trip_or_404(store: ItineraryStore, trip_id: int) -> Trip:
    trip = store.load_trip(trip_id)
    if not trip:
        raise HTTPException(status_code=404, detail="Trip not found")
    return trip


def _check_range(start, end, label: str = "Trip"):
    if start is not None and end is not None and start > end:
        raise HTTPException(
            status_code=400,
            detail=f"{label} start date {start.isoformat()} is after end date {end.isoformat()}",
        )


def _stops_payload(stops) -> dict:
    return {
        "stops": [StopResponse.model_validate(s) for s in stops],
        "count": len(stops),
    }


def _save(store: ItineraryStore, trip: Trip, stops) -> list:
    try:
        return store.save_stops(trip, stops)
    except DuplicateStopError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ItinerarySaveError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/trips")
async def get_trips(
    user_id: Optional[int] = Query(None),
    status: Optional[str] = Query(None),
    q: Optional[str] = Query(None),
    sort: str = Query("date-desc"),
    grouped: bool = Query(False),
    db: Session = Depends(get_db),
):
    if sort not in SORT_OPTIONS:
        raise HTTPException(status_code=400, detail=f"Invalid sort {sort!r}; expected one of {', '.join(SORT_OPTIONS)}")

    query = db.query(Trip)
    if user_id is not None:
        query = query.filter(Trip.user_id == user_id)

    trips = list_trips(query.all(), status=status, query=q, sort=sort)

    if grouped:
        return {
            "groups": {
                name: [TripResponse.model_validate(t) for t in members]
                for name, members in group_by_status(trips).items()
            },
            "count": len(trips),
        }
    return {"trips": [TripResponse.model_validate(t) for t in trips], "count": len(trips)}


@router.post("/api/trips", status_code=201)
async def create_trip(trip: TripCreate, db: Session = Depends(get_db)):
    owner = db.query(User).filter(User.id == trip.user_id).first()
    if not owner:
        raise HTTPException(status_code=404, detail="User not found")
    _check_range(trip.start_date, trip.end_date)

    new_trip = Trip(
        user_id=trip.user_id,
        name=trip.name.strip(),
        destination=trip.destination,
        description=trip.description,
        cover_photo=trip.cover_photo,
        start_date=trip.start_date,
        end_date=trip.end_date,
        status=trip.status,
        total_budget=trip.total_budget,
        is_public=trip.is_public,
    )
    db.add(new_trip)
    db.commit()
    db.refresh(new_trip)

    logger.info(f"Created trip {new_trip.id} for user {trip.user_id}")
    return TripResponse.model_validate(new_trip)


@router.get("/api/trips/{trip_id}")
async def get_trip(trip_id: int, db: Session = Depends(get_db)):
    trip = _get_trip_or_404(ItineraryStore(db), trip_id)
    return TripResponse.model_validate(trip)


@router.put("/api/trips/{trip_id}")
async def update_trip(trip_id: int, updates: TripUpdate, db: Session = Depends(get_db)):
    trip = _get_trip_or_404(ItineraryStore(db), trip_id)

    changes = {
        field: value
        for field, value in updates.model_dump(exclude_unset=True).items()
        if value is not None or field not in REQUIRED_TRIP_FIELDS
    }
    _check_range(
        changes.get("start_date", trip.start_date),
        changes.get("end_date", trip.end_date),
    )
    if "name" in changes:
        changes["name"] = changes["name"].strip()

    for field, value in changes.items():
        setattr(trip, field, value)

    db.commit()
    db.refresh(trip)
    return TripResponse.model_validate(trip)


@router.delete("/api/trips/{trip_id}")
async def delete_trip(trip_id: int, db: Session = Depends(get_db)):
    trip = _get_trip_or_404(ItineraryStore(db), trip_id)

    db.delete(trip)
    db.commit()

    logger.info(f"Deleted trip {trip_id}")
    return {"deleted": True}


@router.get("/api/trips/{trip_id}/itinerary")
async def get_itinerary(trip_id: int, db: Session = Depends(get_db)):
    store = ItineraryStore(db)
    loaded = store.load_itinerary(trip_id)
    if loaded is None:
        raise HTTPException(status_code=404, detail="Trip not found")

    trip, stops, activities = loaded
    view = build_itinerary_view(trip, stops, activities)
    return view.to_dict()


@router.get("/api/trips/{trip_id}/stops")
async def get_stops(trip_id: int, db: Session = Depends(get_db)):
    store = ItineraryStore(db)
    _get_trip_or_404(store, trip_id)
    return _stops_payload(store.load_stops(trip_id))


@router.post("/api/trips/{trip_id}/stops", status_code=201)
async def add_stop(trip_id: int, stop: StopIn, db: Session = Depends(get_db)):
    store = ItineraryStore(db)
    trip = _get_trip_or_404(store, trip_id)
    _check_range(stop.start_date, stop.end_date, label="Stop")

    if stop.city_id is not None:
        city = CityService(db).get(stop.city_id)
        if not city:
            raise HTTPException(status_code=404, detail="City not found")
        prefill = CityService.stop_prefill(city)
        stop.city_name = stop.city_name or prefill["city_name"]
        stop.country = stop.country or prefill["country"]
    if not stop.city_name:
        raise HTTPException(status_code=400, detail="A stop needs a city_name or city_id")

    stop.id = None
    sequencer = StopSequencer(store.load_stops(trip_id))
    sequencer.add(stop)

    return _stops_payload(_save(store, trip, sequencer.stops))


@router.put("/api/trips/{trip_id}/stops")
async def save_stops(trip_id: int, payload: StopListSave, db: Session = Depends(get_db)):
    store = ItineraryStore(db)
    trip = _get_trip_or_404(store, trip_id)

    for stop in payload.stops:
        if not stop.city_name:
            raise HTTPException(status_code=400, detail="Every stop needs a city_name")
        _check_range(stop.start_date, stop.end_date, label=f"Stop {stop.city_name}")

    return _stops_payload(_save(store, trip, payload.stops))


@router.post("/api/trips/{trip_id}/stops/move")
async def move_stop(trip_id: int, move: StopMove, db: Session = Depends(get_db)):
    """
    Move one stop to a new position.
    Out-of-range indices are a no-op and report moved=False.
    """
    store = ItineraryStore(db)
    trip = _get_trip_or_404(store, trip_id)

    sequencer = StopSequencer(store.load_stops(trip_id))
    moved = sequencer.move(move.from_index, move.to_index)
    stops = _save(store, trip, sequencer.stops) if moved else sequencer.stops

    payload = _stops_payload(stops)
    payload["moved"] = moved
    return payload


@router.delete("/api/trips/{trip_id}/stops/{stop_id}")
async def delete_stop(trip_id: int, stop_id: int, db: Session = Depends(get_db)):
    store = ItineraryStore(db)
    trip = _get_trip_or_404(store, trip_id)

    sequencer = StopSequencer(store.load_stops(trip_id))
    if not sequencer.delete(stop_id):
        raise HTTPException(status_code=404, detail="Stop not found")

    return _stops_payload(_save(store, trip, sequencer.stops))


@router.get("/api/stops/{stop_id}/activities")
async def get_activities(stop_id: int, db: Session = Depends(get_db)):
    store = ItineraryStore(db)
    if not store.load_stop(stop_id):
        raise HTTPException(status_code=404, detail="Stop not found")

    activities = store.load_activities([stop_id])
    return {
        "activities": [ActivityResponse.model_validate(a) for a in activities],
        "count": len(activities),
    }


@router.post("/api/stops/{stop_id}/activities", status_code=201)
async def add_activity(stop_id: int, activity: ActivityCreate, db: Session = Depends(get_db)):
    store = ItineraryStore(db)
    stop = store.load_stop(stop_id)
    if not stop:
        raise HTTPException(status_code=404, detail="Stop not found")

    fields = activity.model_dump()
    fields["category"] = activity.category.value
    fields["currency"] = (activity.currency or get_settings().default_currency).upper()
    try:
        created = store.add_activity(stop, **fields)
    except ItinerarySaveError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ActivityResponse.model_validate(created)


@router.delete("/api/activities/{activity_id}")
async def delete_activity(activity_id: int, db: Session = Depends(get_db)):
    if not ItineraryStore(db).delete_activity(activity_id):
        raise HTTPException(status_code=404, detail="Activity not found")
    return {"deleted": True}
