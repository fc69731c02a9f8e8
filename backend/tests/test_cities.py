"""Tests for city reference search."""
import pytest

from globetrotter.models import City
from globetrotter.services.cities import CityService


@pytest.fixture
def cities(db_session):
    rows = [
        City(name="Lisbon", country="Portugal", continent="europe", popularity=90),
        City(name="Porto", country="Portugal", continent="europe", popularity=70),
        City(name="Portland", country="United States", continent="north_america", popularity=40),
        City(name="Kyoto", country="Japan", continent="asia", popularity=85),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


class TestCitySearch:
    def test_matches_name_and_country(self, db_session, cities):
        names = [c.name for c in CityService(db_session).search("port")]
        # Porto and Portland by name, Lisbon by country; most popular first
        assert names == ["Lisbon", "Porto", "Portland"]

    def test_case_insensitive(self, db_session, cities):
        assert [c.name for c in CityService(db_session).search("KYO")] == ["Kyoto"]

    def test_short_query_returns_nothing(self, db_session, cities):
        service = CityService(db_session)
        assert service.search("p") == []
        assert service.search("  ") == []
        assert service.search(None) == []

    def test_continent_filter(self, db_session, cities):
        names = [c.name for c in CityService(db_session).search("port", continent="Europe")]
        assert names == ["Lisbon", "Porto"]

    def test_limit(self, db_session, cities):
        assert len(CityService(db_session).search("port", limit=1)) == 1

    def test_list_all_sorted_by_name(self, db_session, cities):
        names = [c.name for c in CityService(db_session).list_all()]
        assert names == ["Kyoto", "Lisbon", "Portland", "Porto"]


def test_stop_prefill(db_session, cities):
    lisbon = cities[0]
    assert CityService.stop_prefill(lisbon) == {
        "city_id": lisbon.id,
        "city_name": "Lisbon",
        "country": "Portugal",
    }
