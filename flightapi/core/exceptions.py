"""
Exceptions raised by the flight service.

The application maps each of them to an HTTP status in ``flightapi.main``.
"""
from decimal import Decimal


class FlightApiError(Exception):
    """Base exception for all flight service errors."""
    pass


class DiscountServiceError(FlightApiError):
    """Raised when the discount service fails or answers with something unusable."""
    status_code = 502

    def __init__(self, message: str = ""):
        self.message = message or "Discount service error"
        super().__init__(self.message)


class DiscountServiceTimeoutError(DiscountServiceError):
    """Raised when the discount service does not answer within the configured timeout."""
    status_code = 504


class NegativePriceError(FlightApiError, ValueError):
    """Raised when a discount would leave a flight with a price below zero."""
    def __init__(self, price: Decimal):
        self.price = price
        self.message = f"Discounted price {price} is negative"
        super().__init__(self.message)
