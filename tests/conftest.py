"""
Shared fixtures for the flight service tests.

Each test gets its own SQLite file under ``tmp_path`` and a mocked
discount client, so nothing talks to a real discount service.
"""

import pytest
from decimal import Decimal
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from flightapi.api.schemas import Discount, FlightCreate
from flightapi.core.config import Settings
from flightapi.core.database import Base, build_engine, build_session_factory
from flightapi.main import create_app
from flightapi.services.discount_client import DiscountClient
from flightapi.services.flight_store import FlightStore


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'flights.db'}"


@pytest.fixture
def store(database_url) -> FlightStore:
    """A FlightStore over a fresh database with the schema created."""
    engine = build_engine(database_url)
    Base.metadata.create_all(bind=engine)
    yield FlightStore(build_session_factory(engine))
    engine.dispose()


@pytest.fixture
def discount_client() -> MagicMock:
    """A DiscountClient mock that knows no codes unless told otherwise."""
    client = MagicMock(spec=DiscountClient)
    client.get_discount.return_value = None
    return client


@pytest.fixture
def settings(database_url) -> Settings:
    return Settings(
        DATABASE_URL=database_url,
        DISCOUNT_SERVICE_URL="http://discounts.test/discountapi/discounts/",
        NEGATIVE_PRICE_POLICY="reject",
    )


@pytest.fixture
def client(settings, discount_client) -> TestClient:
    app = create_app(settings, discount_client=discount_client)
    with TestClient(app) as test_client:
        yield test_client


def make_flight(origin="DUB", destination="JFK", price="500.00", discount_code=None) -> FlightCreate:
    """Helper to build a FlightCreate with sensible defaults."""
    return FlightCreate(
        origin=origin,
        destination=destination,
        price=Decimal(price),
        discount_code=discount_code,
    )


def known_codes(codes: dict):
    """Side effect for discount_client.get_discount resolving only the given codes."""
    def lookup(code):
        if code in codes:
            return Discount(discount=Decimal(codes[code]))
        return None
    return lookup
