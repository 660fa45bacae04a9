import logging
from decimal import Decimal
from typing import List

from fastapi import APIRouter, HTTPException, Query, Request, Response

from flightapi.api.schemas import Flight, FlightCreate
from flightapi.core.exceptions import NegativePriceError
from flightapi.services.flight_service import FlightService
from flightapi.services.flight_store import FlightStore

logger = logging.getLogger(__name__)

def found_or_404(flights: List[Flight]) -> List[Flight]:
    if not flights:
        raise HTTPException(status_code=404, detail="No flights found")
    return flights

class FlightRoutes:
    """Request handlers for the ``/flights`` resource."""

    def __init__(self, store: FlightStore, flight_service: FlightService):
        self.store = store
        self.flight_service = flight_service

    def create_flight(self, flight: FlightCreate, request: Request, response: Response):
        logger.info("POST /flights called")
        try:
            created = self.flight_service.create_flight(flight)
        except NegativePriceError as e:
            raise HTTPException(status_code=400, detail=e.message)
        response.headers["Location"] = f"{request.url.path}/{created.id}"
        return created

    def get_flights(self):
        logger.info("GET /flights called")
        return found_or_404(self.store.find_all())

    def get_flights_by_destination(self, destination: str):
        logger.info(f"GET /flights/destinations/{destination} called")
        return found_or_404(self.store.find_by_destination(destination))

    def get_flights_by_origin(self, origin: str):
        logger.info(f"GET /flights/origins/{origin} called")
        return found_or_404(self.store.find_by_origin(origin))

    def get_flights_by_price(
        self,
        min_price: Decimal = Query(..., alias="minPrice"),
        max_price: Decimal = Query(..., alias="maxPrice"),
    ):
        logger.info(f"GET /flights/by-price called with minPrice={min_price} maxPrice={max_price}")
        if min_price < 0 or max_price < 0:
            raise HTTPException(status_code=400, detail="minPrice and maxPrice must not be negative")
        return found_or_404(self.store.find_by_price_between(min_price, max_price))

    def route_table(self):
        # (method, path, handler, status code, response model)
        return [
            ("POST", "/flights", self.create_flight, 201, Flight),
            ("GET", "/flights", self.get_flights, 200, List[Flight]),
            ("GET", "/flights/destinations/{destination}", self.get_flights_by_destination, 200, List[Flight]),
            ("GET", "/flights/origins/{origin}", self.get_flights_by_origin, 200, List[Flight]),
            ("GET", "/flights/by-price", self.get_flights_by_price, 200, List[Flight]),
        ]

def build_router(store: FlightStore, flight_service: FlightService) -> APIRouter:
    routes = FlightRoutes(store, flight_service)
    router = APIRouter()
    for method, path, handler, status_code, response_model in routes.route_table():
        router.add_api_route(
            path,
            handler,
            methods=[method],
            status_code=status_code,
            response_model=response_model,
        )
    return router
