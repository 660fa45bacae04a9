import logging
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from flightapi.api.schemas import Discount
from flightapi.core.exceptions import DiscountServiceError, DiscountServiceTimeoutError

logger = logging.getLogger(__name__)

class DiscountClient:
    """Looks discount codes up in the external discount service.

    The code is appended to ``base_url``, so the base URL normally ends
    with a slash. Unknown codes come back as ``None``.
    """

    def __init__(self, base_url: str, timeout: float = 5.0, client: Optional[httpx.Client] = None):
        self.base_url = base_url
        self.timeout = timeout
        self._client = client

    @property
    def client(self) -> httpx.Client:
        # Opened on first lookup
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def get_discount(self, discount_code: str) -> Optional[Discount]:
        url = f"{self.base_url}{quote(discount_code, safe='')}"
        logger.info(f"Looking up discount code {discount_code}")
        try:
            response = self.client.get(url)
        except httpx.TimeoutException as e:
            logger.error(f"Discount service timed out for {url}: {e}")
            raise DiscountServiceTimeoutError(f"Discount service timed out looking up {discount_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Request error to {url}: {e}")
            raise DiscountServiceError(f"Discount service unreachable: {e}") from e

        if response.status_code == 404:
            logger.info(f"Discount code {discount_code} not found")
            return None
        if response.is_error:
            logger.error(f"Discount service returned {response.status_code} for {url}")
            raise DiscountServiceError(f"Discount service returned status code {response.status_code}")
        if not response.content.strip():
            return None

        try:
            payload = response.json()
        except ValueError as e:
            raise DiscountServiceError("Discount service returned a non-JSON body") from e

        if payload is None or (isinstance(payload, dict) and payload.get("discount") is None):
            return None
        try:
            return Discount.model_validate(payload)
        except ValidationError as e:
            raise DiscountServiceError(f"Discount service returned an invalid discount: {payload!r}") from e

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
