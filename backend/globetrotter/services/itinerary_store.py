"""
Loads and persists itineraries.

Edits happen on an in-memory stop list (see stop_sequencer); `save_stops`
diffs that list against the stored rows and flushes everything in a single
transaction. If the flush fails the session is rolled back and the stored
itinerary is left exactly as it was.
"""

import logging
from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from globetrotter.models.activity import Activity
from globetrotter.models.stop import Stop
from globetrotter.models.trip import Trip
from globetrotter.services.stop_sequencer import next_order

logger = logging.getLogger(__name__)

STOP_FIELDS = ("city_id", "city_name", "country", "start_date", "end_date", "budget", "notes")


class ItinerarySaveError(Exception):
    """Raised after a failed save has been rolled back."""


class DuplicateStopError(ValueError):
    """The same stored stop appears more than once in a save request."""


class ItineraryStore:

    def __init__(self, db: Session):
        self.db = db

    def load_trip(self, trip_id: int) -> Optional[Trip]:
        return self.db.query(Trip).filter(Trip.id == trip_id).first()

    def load_stop(self, stop_id: int) -> Optional[Stop]:
        return self.db.query(Stop).filter(Stop.id == stop_id).first()

    def load_stops(self, trip_id: int) -> list[Stop]:
        return self.db.query(Stop).filter(
            Stop.trip_id == trip_id
        ).order_by(Stop.order, Stop.id).all()

    def load_activities(self, stop_ids: Sequence[int]) -> list[Activity]:
        if not stop_ids:
            return []
        return self.db.query(Activity).filter(
            Activity.stop_id.in_(list(stop_ids))
        ).order_by(Activity.stop_id, Activity.order, Activity.id).all()

    def load_itinerary(self, trip_id: int) -> Optional[tuple[Trip, list[Stop], list[Activity]]]:
        trip = self.load_trip(trip_id)
        if not trip:
            return None
        stops = self.load_stops(trip_id)
        activities = self.load_activities([s.id for s in stops])
        return trip, stops, activities

    def save_stops(self, trip: Trip, stops: Sequence) -> list[Stop]:
        """
        Persist `stops` as the trip's complete, ordered stop list.

        Items whose id matches a stored stop of this trip update that row;
        anything else becomes a new row. Stored stops missing from the list
        are deleted. List position is written back as a dense order.
        Raises DuplicateStopError, before touching the session, when two items
        carry the same id.
        """
        ids = [item.id for item in stops if item.id is not None]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise DuplicateStopError(f"Stop id(s) listed more than once: {duplicates}")

        persisted = {s.id: s for s in self.load_stops(trip.id)}
        kept_ids = set()
        saved = []

        try:
            for position, item in enumerate(stops):
                row = persisted.get(item.id) if item.id is not None else None
                if row is None:
                    row = Stop(trip_id=trip.id)
                    self.db.add(row)
                else:
                    kept_ids.add(row.id)

                if row is not item:
                    for field in STOP_FIELDS:
                        if hasattr(item, field):
                            setattr(row, field, getattr(item, field))
                row.order = position
                saved.append(row)

            removed = [row for stop_id, row in persisted.items() if stop_id not in kept_ids]
            for row in removed:
                self.db.delete(row)

            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Saving itinerary for trip {trip.id} failed, rolled back: {e}")
            raise ItinerarySaveError(f"Could not save itinerary for trip {trip.id}") from e

        for row in saved:
            self.db.refresh(row)

        logger.info(
            f"Saved itinerary for trip {trip.id}: {len(saved)} stop(s), {len(removed)} removed"
        )
        return saved

    def add_activity(self, stop: Stop, **fields) -> Activity:
        existing = self.db.query(Activity).filter(Activity.stop_id == stop.id).all()
        activity = Activity(stop_id=stop.id, order=next_order(existing), **fields)
        try:
            self.db.add(activity)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Adding activity to stop {stop.id} failed: {e}")
            raise ItinerarySaveError(f"Could not add activity to stop {stop.id}") from e
        self.db.refresh(activity)
        return activity

    def delete_activity(self, activity_id: int) -> bool:
        activity = self.db.query(Activity).filter(Activity.id == activity_id).first()
        if not activity:
            return False
        self.db.delete(activity)
        self.db.commit()
        logger.info(f"Deleted activity {activity_id} from stop {activity.stop_id}")
        return True
