import logging
from decimal import Decimal
from typing import List

from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from flightapi.core.models import Flight as FlightModel
from flightapi.api.schemas import Flight, FlightCreate

logger = logging.getLogger(__name__)

class FlightStore:
    """Persistence for flight records.

    Every call opens its own session, so one store can serve concurrent
    requests. Results are returned as ``Flight`` schemas, detached from the
    session that loaded them.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def create(self, flight: FlightCreate) -> Flight:
        with self.session_factory() as db:
            db_flight = FlightModel(
                origin=flight.origin,
                destination=flight.destination,
                price=flight.price,
                discount_code=flight.discount_code,
            )
            db.add(db_flight)
            db.commit()
            db.refresh(db_flight)
            logger.info(f"Stored flight {db_flight.id}: {db_flight.origin} -> {db_flight.destination}")
            return Flight.model_validate(db_flight)

    def find_all(self) -> List[Flight]:
        with self.session_factory() as db:
            return self._fetch(db.query(FlightModel))

    def find_by_destination(self, destination: str) -> List[Flight]:
        with self.session_factory() as db:
            return self._fetch(db.query(FlightModel).filter(FlightModel.destination == destination))

    def find_by_origin(self, origin: str) -> List[Flight]:
        with self.session_factory() as db:
            return self._fetch(db.query(FlightModel).filter(FlightModel.origin == origin))

    def find_by_price_between(self, min_price: Decimal, max_price: Decimal) -> List[Flight]:
        with self.session_factory() as db:
            query = db.query(FlightModel).filter(FlightModel.price.between(min_price, max_price))
            return self._fetch(query)

    def ping(self) -> None:
        with self.session_factory() as db:
            db.execute(text("SELECT 1"))

    @staticmethod
    def _fetch(query) -> List[Flight]:
        return [Flight.model_validate(row) for row in query.order_by(FlightModel.id).all()]
