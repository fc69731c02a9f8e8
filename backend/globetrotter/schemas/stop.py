from pydantic import BaseModel, Field
import datetime as dt
from typing import Optional

from globetrotter.models.activity import ActivityCategory


class StopIn(BaseModel):
    """A stop as edited by the client. `id` is None for stops not saved yet."""
    id: Optional[int] = None
    city_id: Optional[int] = None
    city_name: str = ""
    country: str = ""
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    order: Optional[int] = None
    budget: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None


class StopListSave(BaseModel):
    stops: list[StopIn]


class StopMove(BaseModel):
    from_index: int
    to_index: int


class StopResponse(BaseModel):
    id: int
    trip_id: int
    city_id: Optional[int] = None
    city_name: str
    country: str
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    order: int
    budget: Optional[float] = None
    notes: Optional[str] = None

    class Config:
        from_attributes = True


class ActivityCreate(BaseModel):
    name: str
    description: Optional[str] = None
    category: ActivityCategory = ActivityCategory.OTHER
    cost: float = Field(default=0.0, ge=0)
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)
    date: Optional[dt.date] = None
    start_time: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    location: Optional[str] = None
    is_booked: bool = False
    booking_reference: Optional[str] = None


class ActivityResponse(BaseModel):
    id: int
    stop_id: int
    name: str
    description: Optional[str] = None
    category: str
    cost: float
    currency: Optional[str] = None
    date: Optional[dt.date] = None
    start_time: Optional[str] = None
    duration_minutes: Optional[int] = None
    location: Optional[str] = None
    is_booked: bool
    booking_reference: Optional[str] = None
    order: int

    class Config:
        from_attributes = True
