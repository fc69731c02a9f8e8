from fastapi import APIRouter, Depends, Query, HTTPException
from sqlalchemy.orm import Session
from typing import Optional

from globetrotter.database import get_db
from globetrotter.schemas.city import CityResponse
from globetrotter.services.cities import CityService

router = APIRouter()


@router.get("/api/cities")
async def list_cities(
    continent: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    cities = CityService(db).list_all(continent=continent)
    return {"data": [CityResponse.model_validate(c) for c in cities], "count": len(cities)}


@router.get("/api/cities/search")
async def search_cities(
    query: str = Query(""),
    continent: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, ge=1, le=50),
    db: Session = Depends(get_db),
):
    cities = CityService(db).search(query, continent=continent, limit=limit)
    return {"data": [CityResponse.model_validate(c) for c in cities], "count": len(cities)}


@router.get("/api/cities/{city_id}")
async def get_city(city_id: int, db: Session = Depends(get_db)):
    city = CityService(db).get(city_id)
    if not city:
        raise HTTPException(status_code=404, detail="City not found")
    return {
        "data": CityResponse.model_validate(city),
        "stop_prefill": CityService.stop_prefill(city),
    }
