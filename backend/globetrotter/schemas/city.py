from pydantic import BaseModel
from typing import Optional


class CityResponse(BaseModel):
    id: int
    name: str
    country: str
    continent: Optional[str] = None
    description: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    cost_index: Optional[int] = None
    popularity: Optional[int] = None
    timezone: Optional[str] = None

    class Config:
        from_attributes = True
