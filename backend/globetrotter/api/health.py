from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import func, text
from sqlalchemy.exc import SQLAlchemyError
import logging

from globetrotter.database import get_db
from globetrotter.models.city import City

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(db: Session = Depends(get_db)):
    """
    Liveness plus database reachability.

    An empty cities table is reported but does not degrade status; stops can
    still be added by name.
    """
    city_count = None
    try:
        db.execute(text("SELECT 1"))
        city_count = db.query(func.count(City.id)).scalar()
        db_status = "healthy"
    except SQLAlchemyError as e:
        logger.warning(f"Health check database probe failed: {e}")
        db_status = f"unhealthy: {e}"

    return {
        "status": "ok" if db_status == "healthy" else "degraded",
        "database": db_status,
        "city_catalog": city_count,
    }
