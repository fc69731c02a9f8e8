from sqlalchemy import Column, Integer, String, Date, DateTime, Boolean, Float, Text, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from globetrotter.database import Base
import enum


class ActivityCategory(str, enum.Enum):
    FOOD = "food"
    SIGHTSEEING = "sightseeing"
    TRANSPORT = "transport"
    ACCOMMODATION = "accommodation"
    ENTERTAINMENT = "entertainment"
    SHOPPING = "shopping"
    ADVENTURE = "adventure"
    OTHER = "other"


class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)

    stop_id = Column(
        Integer,
        ForeignKey("stops.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    # Stored as the enum value so new categories need no migration
    category = Column(String(32), nullable=False, default=ActivityCategory.OTHER.value)

    cost = Column(Float, nullable=False, default=0.0)
    currency = Column(String(3), default="USD")

    date = Column(Date, nullable=True)
    start_time = Column(String(5), nullable=True)  # HH:MM
    duration_minutes = Column(Integer, nullable=True)
    location = Column(String(255), nullable=True)

    is_booked = Column(Boolean, default=False)
    booking_reference = Column(String(128), nullable=True)

    order = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, server_default=func.now())

    stop = relationship("Stop", back_populates="activities")
