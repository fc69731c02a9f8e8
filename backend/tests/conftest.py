"""
Test fixtures for GlobeTrotter backend tests.
"""
import pytest
from datetime import date
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

from globetrotter.database import Base, get_db
from globetrotter.main import app
from globetrotter.models import User, Trip, TripStatus, Stop


# Create test database engine (SQLite in-memory)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# Enable foreign key constraints for SQLite
@event.listens_for(test_engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Creates all tables before the test and drops them after.
    """
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def override_get_db(db_session):
    """
    Override the get_db dependency to use the test database session.
    """
    def _override_get_db():
        try:
            yield db_session
        finally:
            pass

    return _override_get_db


@pytest.fixture(scope="function")
async def client(override_get_db):
    """
    Create an async test client with the database dependency overridden.
    """
    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def user(db_session):
    user = User(email="traveller@example.com", name="Tess Traveller")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def trip(db_session, user):
    """March 1-5 2026 trip with two stops: Lisbon (800) then Seville (600)."""
    trip = Trip(
        user_id=user.id,
        name="Iberia",
        destination="Portugal & Spain",
        start_date=date(2026, 3, 1),
        end_date=date(2026, 3, 5),
        status=TripStatus.UPCOMING,
        total_budget=2000,
    )
    db_session.add(trip)
    db_session.commit()

    db_session.add_all([
        Stop(trip_id=trip.id, city_name="Lisbon", country="Portugal",
             start_date=date(2026, 3, 1), end_date=date(2026, 3, 2), order=0, budget=800),
        Stop(trip_id=trip.id, city_name="Seville", country="Spain",
             start_date=date(2026, 3, 3), end_date=date(2026, 3, 5), order=1, budget=600),
    ])
    db_session.commit()
    db_session.refresh(trip)
    return trip
