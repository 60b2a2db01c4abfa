import datetime as dt
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field, field_serializer, field_validator

CENT = Decimal("0.01")


def round_price(value: Decimal | float | int | str) -> Decimal:
    """Round a USD amount half-up to whole cents. Idempotent."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


class Flight(BaseModel):
    """A single airline offer for a route and date.

    Sorting a list of flights with no key puts the most expensive first.
    """

    id: int
    airline_name: str = Field(alias="airlineName")
    price_usd: Decimal = Field(alias="priceUSD", ge=0)
    number_of_free_bags: int = Field(alias="numberOfFreeBags", ge=0)
    number_of_available_seats: int = Field(alias="numberOfAvailableSeats", ge=0)
    date: dt.date

    model_config = {"populate_by_name": True, "validate_assignment": True}

    @field_validator("price_usd")
    @classmethod
    def _round_price(cls, v: Decimal) -> Decimal:
        return round_price(v)

    @field_serializer("price_usd", when_used="json")
    def _serialize_price(self, v: Decimal) -> float:
        return float(v)

    def __lt__(self, other: "Flight") -> bool:
        if not isinstance(other, Flight):
            return NotImplemented
        return self.price_usd > other.price_usd


class FlightsResponse(BaseModel):
    flights: list[Flight] = []
