from pydantic import BaseModel
from datetime import date, datetime
from typing import Optional

from globetrotter.models.trip import TripStatus


class TripBase(BaseModel):
    name: str
    destination: Optional[str] = None
    description: Optional[str] = None
    cover_photo: Optional[str] = None
    start_date: date
    end_date: date
    status: TripStatus = TripStatus.DRAFT
    total_budget: Optional[float] = None
    is_public: bool = False


class TripCreate(TripBase):
    user_id: int


class TripUpdate(BaseModel):
    name: Optional[str] = None
    destination: Optional[str] = None
    description: Optional[str] = None
    cover_photo: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[TripStatus] = None
    total_budget: Optional[float] = None
    is_public: Optional[bool] = None


class TripResponse(TripBase):
    id: int
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
