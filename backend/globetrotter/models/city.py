from sqlalchemy import Column, Integer, String, Float, Text
from globetrotter.database import Base


class City(Base):
    """Reference data for destination search. Never written by the API."""
    __tablename__ = "cities"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(128), nullable=False, index=True)
    country = Column(String(128), nullable=False, index=True)
    continent = Column(String(32), nullable=True, index=True)
    description = Column(Text, nullable=True)

    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    cost_index = Column(Integer, default=3)  # 1 (cheap) - 5 (expensive)
    popularity = Column(Integer, default=0)
    timezone = Column(String(64), nullable=True)
