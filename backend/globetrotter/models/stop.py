from sqlalchemy import Column, Integer, String, Date, DateTime, Float, Text, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from globetrotter.database import Base


class Stop(Base):
    """
    A city-level segment of a Trip.

    `order` is a sort key, not a dense index: deletions may leave gaps and
    the itinerary store rewrites it as 0..n-1 on every save.
    """
    __tablename__ = "stops"

    id = Column(Integer, primary_key=True, index=True)

    trip_id = Column(
        Integer,
        ForeignKey("trips.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    city_id = Column(Integer, ForeignKey("cities.id", ondelete="SET NULL"), nullable=True)

    city_name = Column(String(128), nullable=False)
    country = Column(String(128), nullable=False, default="")

    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)

    order = Column(Integer, nullable=False, default=0)

    budget = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    trip = relationship("Trip", back_populates="stops")
    activities = relationship(
        "Activity",
        back_populates="stop",
        cascade="all, delete-orphan",
        order_by="Activity.order",
    )

    def __repr__(self) -> str:
        return f"<Stop {self.id}: #{self.order} {self.city_name}, {self.country}>"
