from globetrotter.schemas.user import UserCreate, UserUpdate, UserResponse
from globetrotter.schemas.trip import TripCreate, TripUpdate, TripResponse
from globetrotter.schemas.stop import (
    StopIn,
    StopListSave,
    StopMove,
    StopResponse,
    ActivityCreate,
    ActivityResponse,
)
from globetrotter.schemas.city import CityResponse

__all__ = [
    "UserCreate", "UserUpdate", "UserResponse",
    "TripCreate", "TripUpdate", "TripResponse",
    "StopIn", "StopListSave", "StopMove", "StopResponse",
    "ActivityCreate", "ActivityResponse",
    "CityResponse",
]
