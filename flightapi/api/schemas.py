from decimal import Decimal
from typing import Annotated, Optional
from pydantic import BaseModel, ConfigDict, Field, StringConstraints

AirportText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=64)]

class FlightBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    origin: AirportText
    destination: AirportText
    discount_code: Optional[str] = Field(default=None, alias="discountCode", max_length=64)

class FlightCreate(FlightBase):
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)

class Flight(FlightBase):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    price: Decimal

class Discount(BaseModel):
    # Same precision as the stored price, so subtraction stays exact
    discount: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
