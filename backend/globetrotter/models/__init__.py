# SQLAlchemy models
from globetrotter.models.user import User, UserRole
from globetrotter.models.city import City
from globetrotter.models.trip import Trip, TripStatus
from globetrotter.models.stop import Stop
from globetrotter.models.activity import Activity, ActivityCategory

__all__ = [
    "User",
    "City",
    "Trip",
    "Stop",
    "Activity",
    # Enums
    "UserRole",
    "TripStatus",
    "ActivityCategory",
]
