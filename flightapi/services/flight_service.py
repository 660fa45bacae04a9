import logging
from decimal import Decimal
from typing import Optional

from flightapi.api.schemas import Flight, FlightCreate
from flightapi.core.exceptions import NegativePriceError
from .discount_client import DiscountClient
from .flight_store import FlightStore

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")

class FlightService:
    def __init__(self, store: FlightStore, discount_client: DiscountClient, negative_price_policy: str = "reject"):
        if negative_price_policy not in ("reject", "clamp"):
            raise ValueError(f"Unknown negative price policy: {negative_price_policy}")
        self.store = store
        self.discount_client = discount_client
        self.negative_price_policy = negative_price_policy

    def lookup_discount(self, discount_code: Optional[str]) -> Decimal:
        if not discount_code or not discount_code.strip():
            return ZERO
        discount = self.discount_client.get_discount(discount_code)
        if discount is None:
            return ZERO
        return discount.discount

    def create_flight(self, flight: FlightCreate) -> Flight:
        price = flight.price - self.lookup_discount(flight.discount_code)

        if price < 0:
            if self.negative_price_policy == "reject":
                raise NegativePriceError(price)
            logger.info(f"Clamping discounted price {price} to zero")
            price = ZERO

        return self.store.create(flight.model_copy(update={"price": price}))
