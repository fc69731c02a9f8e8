from sqlalchemy import Column, Integer, String, DateTime, Text, Enum as SQLEnum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from globetrotter.database import Base
import enum


class UserRole(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"
    GUIDE = "guide"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    email = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(128), nullable=True)
    first_name = Column(String(64), nullable=True)
    last_name = Column(String(64), nullable=True)
    role = Column(SQLEnum(UserRole), nullable=False, default=UserRole.USER)

    phone = Column(String(32), nullable=True)
    city = Column(String(128), nullable=True)
    country = Column(String(128), nullable=True)
    bio = Column(Text, nullable=True)
    avatar_url = Column(String(1024), nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    trips = relationship("Trip", back_populates="user", cascade="all, delete-orphan")

    @property
    def display_name(self) -> str:
        """Name shown in the UI, falling back to first/last name then email."""
        if self.name:
            return self.name
        full = " ".join(p for p in (self.first_name, self.last_name) if p)
        if full:
            return full
        return self.email.split("@")[0]
