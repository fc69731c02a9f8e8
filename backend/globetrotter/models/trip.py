from sqlalchemy import Column, Integer, String, Date, DateTime, Boolean, Float, Text, ForeignKey, Enum as SQLEnum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from globetrotter.database import Base
import enum


class TripStatus(str, enum.Enum):
    DRAFT = "draft"
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"


class Trip(Base):
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name = Column(String(128), nullable=False)
    destination = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    cover_photo = Column(String(1024), nullable=True)

    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    status = Column(SQLEnum(TripStatus), nullable=False, default=TripStatus.DRAFT, index=True)

    # User-set; the itinerary view derives its own totals from stops
    total_budget = Column(Float, nullable=True)
    is_public = Column(Boolean, default=False)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="trips")
    stops = relationship(
        "Stop",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="Stop.order",
    )

    def __repr__(self) -> str:
        return f"<Trip {self.id}: {self.name} {self.start_date}..{self.end_date} ({self.status})>"
