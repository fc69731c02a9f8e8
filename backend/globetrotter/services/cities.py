"""
City reference search.

Backs destination search when adding a stop. Only the local cities table is
consulted; ranking is by popularity, then name.
"""

import logging
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from globetrotter.config import get_settings
from globetrotter.models.city import City

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2


class CityService:

    def __init__(self, db: Session):
        self.db = db

    def list_all(self, continent: Optional[str] = None) -> list[City]:
        query = self.db.query(City)
        if continent:
            query = query.filter(City.continent == continent.lower())
        return query.order_by(City.name).all()

    def get(self, city_id: int) -> Optional[City]:
        return self.db.query(City).filter(City.id == city_id).first()

    def search(
        self,
        query: str,
        continent: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[City]:
        """Substring match on name or country; short queries return nothing."""
        text = (query or "").strip()
        if len(text) < MIN_QUERY_LENGTH:
            return []

        if limit is None:
            limit = get_settings().city_search_limit

        pattern = f"%{text}%"
        q = self.db.query(City).filter(
            or_(City.name.ilike(pattern), City.country.ilike(pattern))
        )
        if continent:
            q = q.filter(City.continent == continent.lower())

        cities = q.order_by(City.popularity.desc(), City.name).limit(limit).all()
        logger.debug(f"City search {text!r} matched {len(cities)} result(s)")
        return cities

    @staticmethod
    def stop_prefill(city: City) -> dict:
        """Fields a new stop inherits from the chosen city."""
        return {
            "city_id": city.id,
            "city_name": city.name,
            "country": city.country,
        }
